from rest_framework import serializers

MONEY_FIELD_OPTIONS = {"max_digits": None, "decimal_places": 2}


class PaySettingsInputSerializer(serializers.Serializer):
    """
    Request body for changing pay settings.

    Amounts are accepted as text so a blank field means 0; the service
    rejects non-numeric, negative and out-of-range values.
    """

    monthly_salary = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default=""
    )
    admin_allowance = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default=""
    )


class PaySettingsSerializer(serializers.Serializer):
    monthly_salary = serializers.DecimalField(**MONEY_FIELD_OPTIONS)
    admin_allowance = serializers.DecimalField(**MONEY_FIELD_OPTIONS)


class SummarySerializer(serializers.Serializer):
    """Aggregated pay for one period selection"""

    period = serializers.CharField()
    period_label = serializers.CharField()
    entry_count = serializers.IntegerField()
    hourly_rate = serializers.DecimalField(**MONEY_FIELD_OPTIONS)
    hours = serializers.DictField(child=serializers.DecimalField(**MONEY_FIELD_OPTIONS))
    pay = serializers.DictField(child=serializers.DecimalField(**MONEY_FIELD_OPTIONS))
    total_hours = serializers.DecimalField(**MONEY_FIELD_OPTIONS)
    overtime_hours = serializers.DecimalField(**MONEY_FIELD_OPTIONS)
    allowance_pay = serializers.DecimalField(**MONEY_FIELD_OPTIONS)
    gross_pay = serializers.DecimalField(**MONEY_FIELD_OPTIONS)


class EntryBucketSerializer(serializers.Serializer):
    category = serializers.CharField()
    label = serializers.CharField()
    hours = serializers.DecimalField(**MONEY_FIELD_OPTIONS)


class EntryDetailSerializer(serializers.Serializer):
    """Entry detail view: only non-zero buckets are listed"""

    date = serializers.CharField()
    location = serializers.CharField()
    time_in = serializers.CharField()
    time_out = serializers.CharField()
    break_minutes = serializers.IntegerField()
    net_hours = serializers.DecimalField(**MONEY_FIELD_OPTIONS)
    category = serializers.CharField()
    category_label = serializers.CharField()
    buckets = EntryBucketSerializer(many=True)


class QuickPaySerializer(serializers.Serializer):
    """Input of the stand-alone daily pay calculator"""

    hourly_rate = serializers.CharField()
    time_in = serializers.CharField(max_length=5)
    time_out = serializers.CharField(max_length=5)
    break_minutes = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default=""
    )


class QuickPayResultSerializer(serializers.Serializer):
    net_hours = serializers.DecimalField(**MONEY_FIELD_OPTIONS)
    hourly_rate = serializers.DecimalField(**MONEY_FIELD_OPTIONS)
    daily_pay = serializers.DecimalField(**MONEY_FIELD_OPTIONS)


class ResetSerializer(serializers.Serializer):
    """Clearing all data needs an explicit confirmation flag"""

    confirm = serializers.BooleanField()

    def validate_confirm(self, value):
        if not value:
            raise serializers.ValidationError("Set confirm to true to clear all data.")
        return value
