import structlog
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.db import transaction

from core.util import is_active_flag, parse_sgt_date, to_float, to_int
from members.models import Member
from scores.models import Scorecard
from scores.utils import extract_hole_data
from tours.models import GROSS, NET, Tour, TourMember, TourStanding, Tournament
from .client import SgtAPIClient
from .models import SyncLog

logger = structlog.get_logger(__name__)


class SyncResult:
    """Container for sync operation results"""

    def __init__(self, sync_log: Optional[SyncLog] = None):
        self.sync_log = sync_log
        self.members = 0
        self.tours = 0
        self.standings = 0
        self.tour_members = 0
        self.tournaments = 0
        self.scorecards = 0
        self.errors = []
        self.failed = False

    @property
    def records_synced(self) -> int:
        return self.members + self.tours + self.standings + self.tour_members + self.tournaments + self.scorecards

    def add_error(self, step: str, error: str):
        """Add an error for a sync step"""
        self.errors.append({"step": step, "error": error})
        logger.error("SGT sync error", step=step, error=error)

    def to_dict(self) -> Dict:
        """Convert results to dictionary for API response"""
        return {
            "sync_log_id": self.sync_log.pk if self.sync_log else None,
            "status": self.sync_log.status if self.sync_log else None,
            "records_synced": self.records_synced,
            "members": self.members,
            "tours": self.tours,
            "standings": self.standings,
            "tour_members": self.tour_members,
            "tournaments": self.tournaments,
            "scorecards": self.scorecards,
            "error_count": len(self.errors),
            "errors": self.errors,
        }


class SgtSyncService:
    """
    Service for mirroring SGT members, tours, standings, tournaments and scorecards
    into the local database
    """

    def __init__(self, api_client: Optional[SgtAPIClient] = None):
        self.api_client = api_client or SgtAPIClient()
        self.tournament_limit = settings.SGT_SYNC_TOURNAMENT_LIMIT

    def sync_all(self) -> SyncResult:
        """
        Run a full sync

        Members and tours must sync for the run to succeed. Everything below an
        active tour is synced step by step; a failing step is recorded and the
        sync moves on.

        Returns:
            SyncResult with operation details
        """
        sync_log = SyncLog.objects.create(sync_type=SyncLog.FULL, status=SyncLog.RUNNING)
        result = SyncResult(sync_log)

        logger.info("Starting SGT data sync", sync_log_id=sync_log.pk)

        try:
            self.sync_members(result)
            tours = self.sync_tours(result)

            active_tours = [
                tour for tour in tours
                if is_active_flag(tour.get("active")) and to_int(tour.get("tourId")) is not None
            ]
            for tour in active_tours:
                self._sync_tour_details(tour, result)

            sync_log.complete(result.records_synced)

            logger.info(
                "SGT data sync completed",
                sync_log_id=sync_log.pk,
                records=result.records_synced,
                errors=len(result.errors),
            )

        except Exception as e:
            result.failed = True
            result.add_error("sync", str(e))
            sync_log.fail(str(e), result.records_synced)

        return result

    def sync_members(self, result: SyncResult) -> List[Dict[str, Any]]:
        logger.info("Syncing members")
        members = self.api_client.get_members()

        count = 0
        with transaction.atomic():
            for member in members:
                user_id = to_int(member.get("user_id"))
                if user_id is None:
                    logger.warning("Skipping member without a user id", user_name=member.get("user_name"))
                    continue
                Member.objects.update_or_create(
                    user_id=user_id,
                    defaults={
                        "user_name": member.get("user_name") or "",
                        "user_email": member.get("user_email"),
                        "user_active": to_int(member.get("user_active"), 1),
                        "user_country_code": member.get("user_country_code"),
                        "user_has_avatar": member.get("user_has_avatar"),
                        "user_game_id": member.get("user_game_id"),
                    },
                )
                count += 1

        result.members += count

        logger.info("Synced members", count=count)
        return members

    def sync_tours(self, result: SyncResult) -> List[Dict[str, Any]]:
        logger.info("Syncing tours")
        tours = self.api_client.get_tours()

        count = 0
        with transaction.atomic():
            for tour in tours:
                tour_id = to_int(tour.get("tourId"))
                if tour_id is None:
                    logger.warning("Skipping tour without a tour id", name=tour.get("name"))
                    continue
                Tour.objects.update_or_create(
                    tour_id=tour_id,
                    defaults={
                        "name": tour.get("name") or "",
                        "start_date": parse_sgt_date(tour.get("start_date")),
                        "end_date": parse_sgt_date(tour.get("end_date")),
                        "team_tour": to_int(tour.get("teamTour"), 0),
                        "active": to_int(tour.get("active"), 1),
                    },
                )
                count += 1

        result.tours += count

        logger.info("Synced tours", count=count)
        return tours

    def _sync_tour_details(self, tour: Dict[str, Any], result: SyncResult):
        tour_id = to_int(tour.get("tourId"))
        logger.info("Syncing tour", tour_id=tour_id, name=tour.get("name"))

        for gross_or_net in (GROSS, NET):
            try:
                self.sync_standings(tour_id, gross_or_net, result)
            except Exception as e:
                result.add_error(f"standings:{tour_id}:{gross_or_net}", str(e))

        try:
            self.sync_tour_members(tour_id, result)
        except Exception as e:
            result.add_error(f"tour_members:{tour_id}", str(e))

        try:
            tournament_ids = self.sync_tournaments(tour_id, result)
        except Exception as e:
            result.add_error(f"tournaments:{tour_id}", str(e))
            return

        for tournament_id in tournament_ids:
            try:
                self.sync_scorecards(tournament_id, result)
            except Exception as e:
                result.add_error(f"scorecards:{tournament_id}", str(e))

    def sync_standings(self, tour_id: int, gross_or_net: str, result: SyncResult) -> int:
        standings = self.api_client.get_tour_standings(tour_id, gross_or_net)

        count = 0
        with transaction.atomic():
            for standing in standings:
                TourStanding.objects.update_or_create(
                    tour_id=tour_id,
                    user_name=standing.get("user_name") or "",
                    gross_or_net=gross_or_net,
                    defaults={
                        "country_code": standing.get("country_code"),
                        "user_has_avatar": standing.get("user_has_avatar"),
                        "hcp": to_float(standing.get("hcp")),
                        "events": to_int(standing.get("events"), 0),
                        "first": to_int(standing.get("first"), 0),
                        "top5": to_int(standing.get("top5"), 0),
                        "top10": to_int(standing.get("top10"), 0),
                        "points": to_float(standing.get("points"), 0),
                        "position": to_int(standing.get("position")),
                    },
                )
                count += 1

        result.standings += count

        logger.info("Synced standings", tour_id=tour_id, gross_or_net=gross_or_net, count=count)
        return count

    def sync_tour_members(self, tour_id: int, result: SyncResult) -> int:
        members = self.api_client.get_tour_members(tour_id)

        count = 0
        with transaction.atomic():
            for member in members:
                user_id = to_int(member.get("user_id"))
                if user_id is None:
                    continue
                TourMember.objects.update_or_create(
                    tour_id=tour_id,
                    user_id=user_id,
                    defaults={
                        "user_name": member.get("user_name") or "",
                        "hcp_index": to_float(member.get("hcp_index")),
                        "custom_hcp": to_float(member.get("custom_hcp")),
                    },
                )
                count += 1

        result.tour_members += count

        logger.info("Synced tour members", tour_id=tour_id, count=count)
        return count

    def sync_tournaments(self, tour_id: int, result: SyncResult) -> List[int]:
        """
        Upsert the first tournaments the api lists for a tour

        Returns:
            Ids of the tournaments that were stored
        """
        tournaments = self.api_client.get_tournaments(tour_id)[: self.tournament_limit]
        tournament_ids = []

        with transaction.atomic():
            for tournament in tournaments:
                tournament_id = to_int(tournament.get("tournamentId"))
                if tournament_id is None:
                    continue
                Tournament.objects.update_or_create(
                    tournament_id=tournament_id,
                    defaults={
                        "tour_id": tour_id,
                        "name": tournament.get("name") or "",
                        "course_name": tournament.get("courseName"),
                        "status": tournament.get("status"),
                        "start_date": parse_sgt_date(tournament.get("start_date")),
                        "end_date": parse_sgt_date(tournament.get("end_date")),
                    },
                )
                tournament_ids.append(tournament_id)

        result.tournaments += len(tournament_ids)

        logger.info("Synced tournaments", tour_id=tour_id, count=len(tournament_ids))
        return tournament_ids

    def sync_scorecards(self, tournament_id: int, result: SyncResult) -> int:
        scorecards = self.api_client.get_scorecards(tournament_id)

        count = 0
        with transaction.atomic():
            for scorecard in scorecards:
                player_id = to_int(scorecard.get("playerId"))
                if player_id is None:
                    continue
                Scorecard.objects.update_or_create(
                    tournament_id=tournament_id,
                    player_id=player_id,
                    round=to_int(scorecard.get("round"), 1),
                    defaults={
                        "player_name": scorecard.get("player_name"),
                        "hcp_index": to_float(scorecard.get("hcp_index")),
                        "course_name": scorecard.get("courseName"),
                        "teetype": scorecard.get("teetype"),
                        "rating": to_float(scorecard.get("rating")),
                        "slope": to_float(scorecard.get("slope")),
                        "total_gross": to_int(scorecard.get("total_gross")),
                        "total_net": to_int(scorecard.get("total_net")),
                        "to_par_gross": to_int(scorecard.get("toPar_gross")),
                        "to_par_net": to_int(scorecard.get("toPar_net")),
                        "in_gross": to_int(scorecard.get("in_gross")),
                        "out_gross": to_int(scorecard.get("out_gross")),
                        "in_net": to_int(scorecard.get("in_net")),
                        "out_net": to_int(scorecard.get("out_net")),
                        "hole_data": extract_hole_data(scorecard),
                    },
                )
                count += 1

        result.scorecards += count

        logger.info("Synced scorecards", tournament_id=tournament_id, count=count)
        return count
