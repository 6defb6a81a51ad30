from rest_framework import viewsets

from scores.models import Scorecard
from scores.serializers import ScorecardSerializer


class ScorecardViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = ScorecardSerializer

    def get_queryset(self):
        queryset = Scorecard.objects.all()
        tournament_id = self.request.query_params.get("tournament", None)
        player_id = self.request.query_params.get("player", None)

        if tournament_id is not None:
            queryset = queryset.filter(tournament=tournament_id)
        if player_id is not None:
            queryset = queryset.filter(player_id=player_id)

        return queryset.select_related("tournament").order_by("-tournament__end_date", "player_name", "round")
