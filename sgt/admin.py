from django.contrib import admin, messages

from sgt.models import SyncLog
from sgt.sync_service import SgtSyncService


@admin.action(description="Run a full SGT sync now")
def run_sgt_sync(modeladmin, request, queryset):
    """Admin action to sync SGT data"""
    result = SgtSyncService().sync_all()

    if result.failed:
        modeladmin.message_user(request, f"Sync failed: {result.errors[-1]['error']}", messages.ERROR)
    elif result.errors:
        modeladmin.message_user(
            request,
            f"Synced {result.records_synced} records with {len(result.errors)} errors. Check logs for details.",
            messages.WARNING,
        )
    else:
        modeladmin.message_user(request, f"Successfully synced {result.records_synced} records.", messages.SUCCESS)


class SyncLogAdmin(admin.ModelAdmin):
    fields = ["sync_type", "status", "started_at", "completed_at", "records_synced", "error_message", ]
    readonly_fields = ["sync_type", "status", "started_at", "completed_at", "records_synced", "error_message", ]
    list_display = ["started_at", "sync_type", "status", "records_synced", "completed_at", ]
    list_filter = ("status", "sync_type", )
    ordering = ["-started_at", ]
    actions = [run_sgt_sync]


admin.site.register(SyncLog, SyncLogAdmin)
