import structlog
from rest_framework import status, viewsets
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.exceptions import APIException
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response

from sgt.exceptions import UnknownActionError
from sgt.models import SyncLog
from sgt.query_service import SgtQueryService
from sgt.serializers import SyncLogSerializer
from sgt.sync_service import SgtSyncService

logger = structlog.get_logger(__name__)


@api_view(["POST"])
@authentication_classes([])
@permission_classes([AllowAny])
def dashboard_query(request):
    """
    Public endpoint answering the dashboard's named actions

    POST /api/sgt/

    Body parameters:
    - action (str): members, tours, tour-standings, tour-members, tournaments, scorecards,
      tournament-results, registrations, member-stats or player-rounds
    - params (dict): action parameters (tourId, tournamentId, userId, grossOrNet)

    Returns:
        JSON view model for the action, or {"error": message}
    """
    action = None

    try:
        body = request.data
        if not isinstance(body, dict):
            raise UnknownActionError(None)

        action = body.get("action")
        params = body.get("params") or {}

        data = SgtQueryService().run(action, params)
        return Response(data, status=status.HTTP_200_OK)

    except APIException as e:
        logger.warning("Dashboard action rejected", action=action, error=str(e.detail))
        return Response({"error": str(e.detail)}, status=e.status_code)

    except Exception as e:
        logger.error("Dashboard action failed", action=action, error=str(e), exc_info=True)
        return Response({"error": str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(["POST"])
@permission_classes([IsAdminUser])
def sync_sgt(request):
    """
    Admin-only endpoint to run a full sync of SGT data into the local database

    POST /api/sgt/sync/

    Returns:
        JSON response with sync results
    """
    try:
        logger.info("SGT sync requested by admin", user=request.user.username)

        result = SgtSyncService().sync_all()

        response_data = {
            "success": not result.failed,
            "message": "SGT sync failed" if result.failed else "SGT sync completed",
            "results": result.to_dict(),
        }

        return Response(
            response_data,
            status=status.HTTP_500_INTERNAL_SERVER_ERROR if result.failed else status.HTTP_200_OK,
        )

    except Exception as e:
        error_msg = f"SGT sync failed: {str(e)}"
        logger.error("SGT sync failed", user=request.user.username, error=str(e))

        return Response(
            {"success": False, "message": error_msg, "results": None},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


@api_view(["GET"])
def sync_status(request):
    """
    The most recent sync run

    GET /api/sgt/sync-status/
    """
    latest = SyncLog.objects.latest_log()
    return Response({
        "success": True,
        "status": SyncLogSerializer(latest).data if latest is not None else None,
    })


class SyncLogViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = SyncLogSerializer
    permission_classes = (IsAdminUser,)

    def get_queryset(self):
        queryset = SyncLog.objects.all()
        log_status = self.request.query_params.get("status", None)

        if log_status is not None:
            queryset = queryset.filter(status=log_status)

        return queryset.order_by("-started_at")
