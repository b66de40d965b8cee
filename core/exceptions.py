# core/exceptions.py
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
from rest_framework.exceptions import ValidationError as DRFValidationError
from django.core.exceptions import ValidationError
from django.http import Http404
from django.utils import timezone
import logging
import uuid

logger = logging.getLogger(__name__)

# DRF field error codes that mean "value absent" rather than "value malformed"
MISSING_VALUE_CODES = {"required", "blank", "null"}


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns consistent error format
    """
    # Generate unique error ID for tracking
    error_id = str(uuid.uuid4())[:8]

    # Get request info for logging
    request = context.get("request")
    path = getattr(request, "path", "unknown")
    method = getattr(request, "method", "unknown")

    if isinstance(exc, APIError):
        # Business errors raised by the timecard services
        custom_response_data = {
            "error": True,
            "code": exc.code,
            "message": exc.message,
            "details": exc.details,
            "error_id": error_id,
            "timestamp": timezone.now().isoformat(),
        }
        logger.warning(
            f"Business Error [{error_id}]: {exc.__class__.__name__} - "
            f"{method} {path} - Code: {exc.code}"
        )
        return Response(custom_response_data, status=exc.status_code)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        # Standard DRF exceptions
        custom_response_data = {
            "error": True,
            "code": get_error_code(exc),
            "message": get_error_message(response.data),
            "details": format_error_details(response.data),
            "error_id": error_id,
            "timestamp": timezone.now().isoformat(),
        }

        # Log the error
        logger.error(
            f"API Error [{error_id}]: {exc.__class__.__name__} - "
            f"{method} {path} - Status: {response.status_code}"
        )

        response.data = custom_response_data

    else:
        # Handle non-DRF exceptions
        if isinstance(exc, Http404):
            custom_response_data = {
                "error": True,
                "code": "RESOURCE_NOT_FOUND",
                "message": "The requested resource was not found.",
                "details": None,
                "error_id": error_id,
                "timestamp": timezone.now().isoformat(),
            }
            response = Response(custom_response_data, status=status.HTTP_404_NOT_FOUND)

        elif isinstance(exc, ValidationError):
            custom_response_data = {
                "error": True,
                "code": "VALIDATION_ERROR",
                "message": "Validation failed.",
                "details": (
                    exc.message_dict if hasattr(exc, "message_dict") else str(exc)
                ),
                "error_id": error_id,
                "timestamp": timezone.now().isoformat(),
            }
            response = Response(
                custom_response_data, status=status.HTTP_400_BAD_REQUEST
            )

        else:
            # Generic server error
            custom_response_data = {
                "error": True,
                "code": "INTERNAL_SERVER_ERROR",
                "message": "An internal server error occurred.",
                "details": None,
                "error_id": error_id,
                "timestamp": timezone.now().isoformat(),
            }
            response = Response(
                custom_response_data, status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        # Log unhandled exceptions
        logger.error(
            f"Unhandled Exception [{error_id}]: {exc.__class__.__name__} - "
            f"{method} {path}",
            exc_info=True,
        )

    return response


def get_error_code(exc):
    """
    Generate appropriate error code based on exception type
    """
    if isinstance(exc, DRFValidationError):
        return get_validation_error_code(exc)

    error_codes = {
        "NotFound": "RESOURCE_NOT_FOUND",
        "Http404": "RESOURCE_NOT_FOUND",
        "MethodNotAllowed": "METHOD_NOT_ALLOWED",
        "ParseError": "PARSE_ERROR",
        "UnsupportedMediaType": "UNSUPPORTED_MEDIA_TYPE",
        "Throttled": "RATE_LIMIT_EXCEEDED",
    }

    exc_name = exc.__class__.__name__
    return error_codes.get(exc_name, "UNKNOWN_ERROR")


def get_validation_error_code(exc):
    """
    Distinguish absent input from malformed input in DRF validation errors
    """
    codes = _flatten_codes(exc.get_codes())
    if codes and all(code in MISSING_VALUE_CODES for code in codes):
        return "MISSING_FIELD"
    return "INVALID_FORMAT"


def _flatten_codes(codes):
    if isinstance(codes, dict):
        flat = []
        for value in codes.values():
            flat.extend(_flatten_codes(value))
        return flat
    if isinstance(codes, list):
        flat = []
        for value in codes:
            flat.extend(_flatten_codes(value))
        return flat
    return [codes]


def get_error_message(data):
    """
    Extract human-readable error message from DRF error data
    """
    if isinstance(data, dict):
        if "detail" in data:
            return str(data["detail"])
        elif "non_field_errors" in data:
            return (
                str(data["non_field_errors"][0])
                if data["non_field_errors"]
                else "Validation error"
            )
        else:
            # Get first error message from any field
            for key, value in data.items():
                if isinstance(value, list) and value:
                    return f"{key}: {value[0]}"
                elif isinstance(value, str):
                    return value
            return "Validation error"
    elif isinstance(data, list) and data:
        return str(data[0])
    else:
        return str(data)


def format_error_details(data):
    """
    Format error details for consistent structure
    """
    if isinstance(data, dict):
        # Remove 'detail' from details since it's in message
        details = {k: v for k, v in data.items() if k != "detail"}
        return details if details else None
    elif isinstance(data, list):
        return data
    else:
        return None


class APIError(Exception):
    """
    Custom API exception class for business logic errors
    """

    def __init__(
        self, message, code=None, status_code=status.HTTP_400_BAD_REQUEST, details=None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "API_ERROR"
        self.status_code = status_code
        self.details = details


class InvalidFormatError(APIError):
    """
    Unparseable time, date, amount or holiday kind
    """

    def __init__(self, message, field=None, value=None):
        details = {"field": field, "value": value} if field else None
        super().__init__(
            message=message,
            code="INVALID_FORMAT",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
        )
        self.field = field


class MissingFieldError(APIError):
    """
    A required input is absent or blank
    """

    def __init__(self, field, message=None):
        super().__init__(
            message=message or f"{field} is required.",
            code="MISSING_FIELD",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"field": field},
        )
        self.field = field


class NonPositiveDurationError(APIError):
    """
    Net worked time after break subtraction is zero or negative
    """

    def __init__(self, net_minutes):
        super().__init__(
            message=(
                "Net work duration is zero or negative. "
                "Check your time inputs and break time."
            ),
            code="NON_POSITIVE_DURATION",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"net_minutes": net_minutes},
        )
        self.net_minutes = net_minutes


class InvalidSelectionError(APIError):
    """
    Out-of-range pay period or bulk-delete target
    """

    def __init__(self, message, selection=None):
        super().__init__(
            message=message,
            code="INVALID_SELECTION",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"selection": selection} if selection is not None else None,
        )
        self.selection = selection


class EntryNotFoundError(APIError):
    def __init__(self, entry_date):
        super().__init__(
            message=f"Entry for {entry_date} not found.",
            code="RESOURCE_NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"date": str(entry_date)},
        )


class CorruptPersistedStateError(Exception):
    """
    Stored collection failed to decode or validate.

    Raised and handled inside core.storage; the collection falls back to
    its default value.
    """

    def __init__(self, key, reason):
        super().__init__(f"Stored '{key}' is unreadable: {reason}")
        self.key = key
        self.reason = reason
