from rest_framework import serializers

from .enums import HolidayKind

KIND_CHOICES = [(kind.value, kind.label) for kind in HolidayKind]


def normalize_kind(value):
    normalized = value.strip().upper()
    if normalized not in {kind.value for kind in HolidayKind}:
        raise serializers.ValidationError("Must be REGULAR or SPECIAL.")
    return normalized


class StoredHolidaySerializer(serializers.Serializer):
    """Schema of one persisted holiday record"""

    date = serializers.DateField(input_formats=["%Y-%m-%d"])
    name = serializers.CharField(max_length=200)
    kind = serializers.ChoiceField(choices=KIND_CHOICES)


class HolidayInputSerializer(serializers.Serializer):
    """Request body for saving a custom or editing a statutory holiday"""

    date = serializers.DateField(input_formats=["%Y-%m-%d"])
    name = serializers.CharField(max_length=200, trim_whitespace=True)
    kind = serializers.CharField(max_length=20)

    def validate_kind(self, value):
        return normalize_kind(value)


class StatutoryHolidayUpdateSerializer(serializers.Serializer):
    """Request body for editing a statutory holiday; the date comes from the URL"""

    name = serializers.CharField(max_length=200, trim_whitespace=True)
    kind = serializers.CharField(max_length=20)

    def validate_kind(self, value):
        return normalize_kind(value)


class HolidayRecordSerializer(serializers.Serializer):
    """Read-only representation of an effective holiday"""

    date = serializers.DateField()
    name = serializers.CharField()
    kind = serializers.SerializerMethodField()
    kind_label = serializers.SerializerMethodField()
    source = serializers.SerializerMethodField()

    def get_kind(self, obj):
        return obj.kind.value

    def get_kind_label(self, obj):
        return obj.kind.label

    def get_source(self, obj):
        return obj.source.value
