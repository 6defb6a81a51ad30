import structlog
from typing import Any, Callable, Dict, Optional

from django.db.models import F

from core.util import to_int
from members.models import Member
from members.serializers import MemberSerializer
from scores.models import Scorecard
from scores.serializers import PlayerRoundSerializer, ScorecardSerializer
from scores.utils import build_tournament_results
from tours.models import GROSS, NET, Tour, TourMember, TourStanding, Tournament
from tours.serializers import TourMemberSerializer, TourSerializer, TourStandingSerializer, TournamentSerializer
from .client import SgtAPIClient, SgtAPIError
from .exceptions import InvalidParameterError, MissingParameterError, UnknownActionError, UpstreamError

logger = structlog.get_logger(__name__)


class SgtQueryService:
    """
    Answers the dashboard's named actions.

    Everything the sync mirrors is read from the local database and reshaped
    into the view model the dashboard expects. Registrations are not mirrored
    and are fetched from SGT on demand.
    """

    def __init__(self, api_client: Optional[SgtAPIClient] = None):
        self._api_client = api_client
        self.actions: Dict[str, Callable[[Dict[str, Any]], Any]] = {
            "members": self.members,
            "tours": self.tours,
            "tour-standings": self.tour_standings,
            "tour-members": self.tour_members,
            "tournaments": self.tournaments,
            "scorecards": self.scorecards,
            "tournament-results": self.tournament_results,
            "registrations": self.registrations,
            "member-stats": self.member_stats,
            "player-rounds": self.player_rounds,
        }

    @property
    def api_client(self) -> SgtAPIClient:
        if self._api_client is None:
            self._api_client = SgtAPIClient()
        return self._api_client

    def run(self, action: Optional[str], params: Optional[Dict[str, Any]] = None) -> Any:
        handler = self.actions.get(action) if isinstance(action, str) else None
        if handler is None:
            raise UnknownActionError(action)

        logger.debug("Running dashboard action", action=action, params=params)
        return handler(params if isinstance(params, dict) else {})

    @staticmethod
    def _required_id(params: Dict[str, Any], name: str) -> int:
        value = params.get(name)
        if value is None or value == "":
            raise MissingParameterError(name)
        number = to_int(value)
        if number is None:
            raise InvalidParameterError(name, value)
        return number

    @staticmethod
    def _gross_or_net(params: Dict[str, Any]) -> str:
        value = params.get("grossOrNet") or GROSS
        if value not in (GROSS, NET):
            raise InvalidParameterError("grossOrNet", value)
        return value

    def members(self, params):
        return {"members": MemberSerializer(Member.objects.order_by("user_name"), many=True).data}

    def tours(self, params):
        return TourSerializer(Tour.objects.order_by("-start_date", "-tour_id"), many=True).data

    def tour_standings(self, params):
        tour_id = self._required_id(params, "tourId")
        standings = TourStanding.objects \
            .filter(tour_id=tour_id, gross_or_net=self._gross_or_net(params)) \
            .order_by(F("position").asc(nulls_last=True), "user_name")
        return TourStandingSerializer(standings, many=True).data

    def tour_members(self, params):
        tour_id = self._required_id(params, "tourId")
        members = TourMember.objects.filter(tour_id=tour_id).order_by("user_name")
        return TourMemberSerializer(members, many=True).data

    def tournaments(self, params):
        tour_id = self._required_id(params, "tourId")
        return {"results": TournamentSerializer(Tournament.objects.for_tour(tour_id), many=True).data}

    def scorecards(self, params):
        tournament_id = self._required_id(params, "tournamentId")
        return ScorecardSerializer(Scorecard.objects.for_tournament(tournament_id), many=True).data

    def tournament_results(self, params):
        tournament_id = self._required_id(params, "tournamentId")
        scorecards = Scorecard.objects.for_tournament(tournament_id)
        return build_tournament_results(scorecards, self._gross_or_net(params))

    def registrations(self, params):
        tournament_id = self._required_id(params, "tournamentId")
        try:
            return self.api_client.get_registrations(tournament_id)
        except SgtAPIError as e:
            logger.error("Failed to load registrations", tournament_id=tournament_id, error=str(e))
            raise UpstreamError(str(e))

    def player_rounds(self, params):
        user_id = self._required_id(params, "userId")
        return PlayerRoundSerializer(Scorecard.objects.player_rounds(user_id), many=True).data

    def member_stats(self, params):
        user_id = self._required_id(params, "userId")

        memberships = TourMember.objects \
            .filter(user_id=user_id, tour__active=1) \
            .select_related("tour") \
            .order_by("-tour__start_date", "-tour_id")

        tours = []
        handicap = None
        for membership in memberships:
            tours.append({
                "tourId": membership.tour_id,
                "tourName": membership.tour.name,
                "handicap": membership.hcp_index or 0,
                "customHandicap": membership.custom_hcp or 0,
            })
            if handicap is None and membership.hcp_index is not None:
                handicap = membership.hcp_index

        summary = Scorecard.objects.player_summary(user_id)

        return {
            "tours": tours,
            "handicap": handicap,
            "totalRounds": summary["total_rounds"],
            "averageScore": summary["average_score"],
            "bestScore": summary["best_score"],
            "standing": self._current_standing(user_id, memberships),
        }

    def _current_standing(self, user_id, memberships):
        """
        Gross standing of the member in the current (most recent active) tour
        """
        user_name = self._user_name(user_id, memberships)
        tour = Tour.objects.first_active()
        if user_name is None or tour is None:
            return None

        standing = TourStanding.objects \
            .filter(tour=tour, gross_or_net=GROSS, user_name__iexact=user_name.strip()) \
            .first()
        if standing is None:
            return None
        return TourStandingSerializer(standing).data

    @staticmethod
    def _user_name(user_id, memberships) -> Optional[str]:
        member = Member.objects.filter(user_id=user_id).first()
        if member is not None:
            return member.user_name
        for membership in memberships:
            return membership.user_name
        scorecard = Scorecard.objects.filter(player_id=user_id).exclude(player_name=None).first()
        return scorecard.player_name if scorecard is not None else None
