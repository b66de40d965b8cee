from rest_framework import serializers

from core.exceptions import APIError
from payroll.services.contracts import round_money
from payroll.services.enums import PayCategory

from .utils import format_minutes, parse_break_minutes, to_minutes_of_day

BUCKET_FIELDS = [category.value for category in PayCategory]
HOURS_FIELD_OPTIONS = {"max_digits": 6, "decimal_places": 2, "min_value": 0}


def _validate_time(value, field):
    try:
        return format_minutes(to_minutes_of_day(value, field))
    except APIError as e:
        raise serializers.ValidationError(e.message, code="invalid")


class StoredEntrySerializer(serializers.Serializer):
    """Schema of one persisted DTR entry"""

    date = serializers.DateField(input_formats=["%Y-%m-%d"])
    location = serializers.CharField(allow_blank=True, required=False, default="")
    time_in = serializers.CharField()
    time_out = serializers.CharField()
    break_minutes = serializers.IntegerField(min_value=0)

    regular = serializers.DecimalField(**HOURS_FIELD_OPTIONS)
    weekday_overtime = serializers.DecimalField(**HOURS_FIELD_OPTIONS)
    saturday = serializers.DecimalField(**HOURS_FIELD_OPTIONS)
    sunday = serializers.DecimalField(**HOURS_FIELD_OPTIONS)
    regular_holiday = serializers.DecimalField(**HOURS_FIELD_OPTIONS)
    special_holiday = serializers.DecimalField(**HOURS_FIELD_OPTIONS)
    regular_holiday_rest_day = serializers.DecimalField(**HOURS_FIELD_OPTIONS)
    special_holiday_rest_day = serializers.DecimalField(**HOURS_FIELD_OPTIONS)

    def validate_time_in(self, value):
        return _validate_time(value, "time_in")

    def validate_time_out(self, value):
        return _validate_time(value, "time_out")


class EntryInputSerializer(serializers.Serializer):
    """
    Request body for saving a DTR entry.

    Blank required fields surface as MISSING_FIELD, malformed ones as
    INVALID_FORMAT.
    """

    date = serializers.DateField(input_formats=["%Y-%m-%d"])
    time_in = serializers.CharField(max_length=5)
    time_out = serializers.CharField(max_length=5)
    break_minutes = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default=""
    )
    location = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default="", max_length=200
    )

    def validate_time_in(self, value):
        return _validate_time(value, "time_in")

    def validate_time_out(self, value):
        return _validate_time(value, "time_out")

    def validate_break_minutes(self, value):
        try:
            return parse_break_minutes(value)
        except APIError as e:
            raise serializers.ValidationError(e.message, code="invalid")

    def validate_location(self, value):
        return (value or "").strip()


class BulkDeleteSerializer(serializers.Serializer):
    """Exactly one of ``period`` (pay period key) or ``before`` (cutoff date)"""

    period = serializers.CharField(required=False, allow_blank=False)
    before = serializers.DateField(required=False, input_formats=["%Y-%m-%d"])

    def validate(self, attrs):
        if ("period" in attrs) == ("before" in attrs):
            raise serializers.ValidationError(
                "Provide either 'period' or 'before'.", code="invalid"
            )
        return attrs


class EntrySerializer(serializers.Serializer):
    """Read-only representation of a stored entry"""

    date = serializers.DateField()
    location = serializers.CharField()
    time_in = serializers.CharField()
    time_out = serializers.CharField()
    break_minutes = serializers.IntegerField()
    net_hours = serializers.DecimalField(max_digits=6, decimal_places=2)
    category = serializers.SerializerMethodField()
    category_label = serializers.SerializerMethodField()
    hours = serializers.SerializerMethodField()

    def get_category(self, obj):
        return obj.buckets.primary_category().value

    def get_category_label(self, obj):
        return obj.buckets.primary_category().display_name

    def get_hours(self, obj):
        return {key: str(round_money(value)) for key, value in obj.buckets.as_dict().items()}
