from django.db import models
from django.db.models import CASCADE, UniqueConstraint

from scores.managers import ScorecardManager
from tours.models import Tournament


class Scorecard(models.Model):
    tournament = models.ForeignKey(verbose_name="Tournament", to=Tournament, related_name="scorecards",
                                   on_delete=CASCADE)
    player_id = models.IntegerField(verbose_name="SGT player id")
    player_name = models.CharField(verbose_name="Player", max_length=100, blank=True, null=True)
    hcp_index = models.FloatField(verbose_name="Handicap index", blank=True, null=True)
    round = models.IntegerField(verbose_name="Round", default=1)
    course_name = models.CharField(verbose_name="Course", max_length=200, blank=True, null=True)
    teetype = models.CharField(verbose_name="Tee", max_length=40, blank=True, null=True)
    rating = models.FloatField(verbose_name="Course rating", blank=True, null=True)
    slope = models.FloatField(verbose_name="Slope", blank=True, null=True)
    total_gross = models.IntegerField(verbose_name="Gross", blank=True, null=True)
    total_net = models.IntegerField(verbose_name="Net", blank=True, null=True)
    to_par_gross = models.IntegerField(verbose_name="Gross to par", blank=True, null=True)
    to_par_net = models.IntegerField(verbose_name="Net to par", blank=True, null=True)
    in_gross = models.IntegerField(verbose_name="In (gross)", blank=True, null=True)
    out_gross = models.IntegerField(verbose_name="Out (gross)", blank=True, null=True)
    in_net = models.IntegerField(verbose_name="In (net)", blank=True, null=True)
    out_net = models.IntegerField(verbose_name="Out (net)", blank=True, null=True)
    hole_data = models.JSONField(verbose_name="Hole by hole", default=dict, blank=True)
    updated_at = models.DateTimeField(verbose_name="Last synced", auto_now=True)

    objects = ScorecardManager()

    class Meta:
        constraints = [
            UniqueConstraint(fields=["tournament", "player_id", "round"], name="unique_tournament_scorecard")
        ]

    def __str__(self):
        return "{}: {} round {}".format(self.tournament, self.player_name, self.round)
