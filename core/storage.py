"""
Local timecard storage.

Every logical collection (entries, pay settings, statutory holidays, custom
holidays) is persisted as one JSON document under its own key, the way a
browser keeps each value in local storage. Reads validate the document and
fall back to the collection default when it cannot be decoded; writes always
replace the whole document.

The backend is pluggable through the ``TIMECARD_STORAGE`` setting:

    TIMECARD_STORAGE = {
        "BACKEND": "core.storage.FileStorageBackend",
        "OPTIONS": {"location": "/path/to/dir"},
    }
"""

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

from django.conf import settings
from django.core.cache import caches
from django.core.serializers.json import DjangoJSONEncoder
from django.utils.module_loading import import_string

from core.exceptions import CorruptPersistedStateError
from core.logging_utils import err_tag

logger = logging.getLogger(__name__)


class StorageBackend:
    """Raw key -> text store"""

    def read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def exists(self, key: str) -> bool:
        return self.read(key) is not None

    def write(self, key: str, text: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class FileStorageBackend(StorageBackend):
    """One ``<key>.json`` file per collection inside ``location``"""

    def __init__(self, location):
        self.location = Path(location)

    def _path(self, key: str) -> Path:
        return self.location / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CorruptPersistedStateError(key, f"not UTF-8 text ({e.reason})") from e

    def exists(self, key: str) -> bool:
        return self._path(key).exists()

    def write(self, key: str, text: str) -> None:
        self.location.mkdir(parents=True, exist_ok=True)
        # Write to a sibling temp file, then swap it in
        fd, tmp_name = tempfile.mkstemp(
            dir=self.location, prefix=f".{key}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            os.replace(tmp_name, self._path(key))
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class CacheStorageBackend(StorageBackend):
    """Django cache alias as the store (locmem for tests, any cache in dev)"""

    KEY_PREFIX = "timecard"

    def __init__(self, alias: str = "default"):
        self.alias = alias

    @property
    def cache(self):
        return caches[self.alias]

    def _key(self, key: str) -> str:
        return f"{self.KEY_PREFIX}:{key}"

    def read(self, key: str) -> Optional[str]:
        return self.cache.get(self._key(key))

    def write(self, key: str, text: str) -> None:
        self.cache.set(self._key(key), text, timeout=None)

    def delete(self, key: str) -> None:
        self.cache.delete(self._key(key))


@dataclass(frozen=True)
class Collection:
    """
    Schema of one persisted collection.

    ``decode`` turns parsed JSON into domain objects and raises
    CorruptPersistedStateError (or ValueError/TypeError/KeyError) when the
    document does not match the schema. ``encode`` is its inverse and must
    return JSON-serialisable data.
    """

    key: str
    default: Callable[[], Any]
    decode: Callable[[Any], Any]
    encode: Callable[[Any], Any]


class LocalStorage:
    """
    Typed load/save per collection over a StorageBackend.

    Mutating callers wrap their read-modify-write in ``transaction()`` so
    concurrent requests cannot interleave between the load and the save.
    """

    def __init__(self, backend: StorageBackend):
        self.backend = backend
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self):
        with self._lock:
            yield self

    def contains(self, collection: Collection) -> bool:
        return self.backend.exists(collection.key)

    def load(self, collection: Collection):
        try:
            raw = self.backend.read(collection.key)
            if raw is None:
                return collection.default()
            return self._decode(collection, raw)
        except CorruptPersistedStateError as e:
            logger.warning(
                "Stored collection is corrupt, using default",
                extra={"key": collection.key, "err": err_tag(e)},
            )
            return collection.default()

    def save(self, collection: Collection, value) -> None:
        text = json.dumps(collection.encode(value), cls=DjangoJSONEncoder)
        self.backend.write(collection.key, text)
        logger.debug("Saved collection", extra={"key": collection.key})

    def clear(self, collection: Collection) -> None:
        self.backend.delete(collection.key)

    @staticmethod
    def _decode(collection: Collection, raw: str):
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise CorruptPersistedStateError(collection.key, f"not JSON ({e})") from e

        try:
            return collection.decode(data)
        except CorruptPersistedStateError:
            raise
        except (TypeError, ValueError, KeyError, AttributeError, ArithmeticError) as e:
            raise CorruptPersistedStateError(collection.key, str(e)) from e


def get_storage_backend() -> StorageBackend:
    """Build the backend configured in settings.TIMECARD_STORAGE"""
    config = getattr(settings, "TIMECARD_STORAGE", {})
    backend_path = config.get("BACKEND", "core.storage.FileStorageBackend")
    options = dict(config.get("OPTIONS", {}))
    if backend_path.endswith("FileStorageBackend"):
        options.setdefault("location", Path(settings.BASE_DIR) / "local_storage")

    backend_class = import_string(backend_path)
    return backend_class(**options)
