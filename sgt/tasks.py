import structlog

from celery import shared_task

from sgt.sync_service import SgtSyncService

logger = structlog.get_logger(__name__)


@shared_task(bind=True)
def sync_sgt_data(self):
    logger.info("Scheduled job: sync SGT data")
    result = SgtSyncService().sync_all()
    return result.to_dict()
