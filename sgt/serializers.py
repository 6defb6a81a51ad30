from rest_framework import serializers

from .models import SyncLog


class SyncLogSerializer(serializers.ModelSerializer):

    class Meta:
        model = SyncLog
        fields = ("id", "sync_type", "status", "started_at", "completed_at", "records_synced", "error_message", )
