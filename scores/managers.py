import math

from django.db import models
from django.db.models import Avg, Count, F, Min


class ScorecardManager(models.Manager):

    def for_tournament(self, tournament_id):
        return self.filter(tournament_id=tournament_id).order_by("player_name", "round")

    def player_rounds(self, player_id):
        """
        Rounds played by one player in the tournaments of active tours, most recent first.
        """
        return (
            self.filter(player_id=player_id, tournament__tour__active=1)
            .select_related("tournament")
            .order_by(F("tournament__end_date").desc(nulls_last=True), "-tournament_id", "-round")
        )

    def player_summary(self, player_id):
        summary = self.player_rounds(player_id).aggregate(
            rounds=Count("id"),
            average_gross=Avg("total_gross"),
            best_gross=Min("total_gross"),
        )
        average = summary["average_gross"]
        return {
            "total_rounds": summary["rounds"],
            # round half up
            "average_score": math.floor(average + 0.5) if average is not None else None,
            "best_score": summary["best_gross"],
        }
