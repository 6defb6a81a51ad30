from django.db import models
from django.utils import timezone as tz


class SyncLogManager(models.Manager):

    def latest_log(self, sync_type=None):
        queryset = self.all()
        if sync_type is not None:
            queryset = queryset.filter(sync_type=sync_type)
        return queryset.order_by("-started_at", "-id").first()


class SyncLog(models.Model):
    FULL = "full"

    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"

    STATUS_CHOICES = (
        (RUNNING, "Running"),
        (COMPLETED, "Completed"),
        (FAILED, "Failed"),
    )

    sync_type = models.CharField(verbose_name="Sync type", max_length=20, default=FULL)
    status = models.CharField(verbose_name="Status", max_length=20, choices=STATUS_CHOICES, default=RUNNING)
    started_at = models.DateTimeField(verbose_name="Started", default=tz.now)
    completed_at = models.DateTimeField(verbose_name="Completed", blank=True, null=True)
    records_synced = models.IntegerField(verbose_name="Records synced", default=0)
    error_message = models.TextField(verbose_name="Error", blank=True, null=True)

    objects = SyncLogManager()

    class Meta:
        verbose_name = "Sync Log"
        verbose_name_plural = "Sync Logs"

    def complete(self, records_synced):
        self.status = self.COMPLETED
        self.completed_at = tz.now()
        self.records_synced = records_synced
        self.save(update_fields=["status", "completed_at", "records_synced"])

    def fail(self, error_message, records_synced=0):
        self.status = self.FAILED
        self.completed_at = tz.now()
        self.records_synced = records_synced
        self.error_message = error_message
        self.save(update_fields=["status", "completed_at", "records_synced", "error_message"])

    def __str__(self):
        return "{} sync {} ({})".format(self.sync_type, self.started_at, self.status)
