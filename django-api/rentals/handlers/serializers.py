"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class AvailabilityRequestSerializer(serializers.Serializer):
    """Input for an availability check. Dates are YYYY-MM-DD."""

    start_date = serializers.DateField(input_formats=["iso-8601"])
    end_date = serializers.DateField(input_formats=["iso-8601"])


class DateRangeSerializer(serializers.Serializer):
    start_date = serializers.DateField(source="start")
    end_date = serializers.DateField(source="end")


class AvailabilityReportSerializer(serializers.Serializer):
    """Serializer for AvailabilityReport domain model."""

    item_id = serializers.CharField()
    available = serializers.BooleanField()
    reason = serializers.SerializerMethodField()
    requested = DateRangeSerializer()
    available_dates = serializers.ListField(child=serializers.DateField())
    booked_dates = serializers.ListField(child=serializers.DateField())
    message = serializers.CharField()

    def get_reason(self, report) -> str | None:
        return report.reason.value if report.reason else None


class BookedIntervalSerializer(serializers.Serializer):
    """Serializer for BookedInterval domain model."""

    id = serializers.CharField()
    item_id = serializers.CharField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    order_id = serializers.CharField()
    owner_id = serializers.CharField(allow_null=True)
    created_at = serializers.DateTimeField()
