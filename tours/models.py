from django.db import models
from django.db.models import CASCADE, UniqueConstraint

from tours.managers import TourManager, TournamentManager

GROSS = "gross"
NET = "net"

SCORE_TYPE_CHOICES = (
    (GROSS, "Gross"),
    (NET, "Net"),
)


class Tour(models.Model):
    tour_id = models.IntegerField(verbose_name="SGT tour id", primary_key=True)
    name = models.CharField(verbose_name="Name", max_length=200)
    start_date = models.DateField(verbose_name="Start date", blank=True, null=True)
    end_date = models.DateField(verbose_name="End date", blank=True, null=True)
    team_tour = models.IntegerField(verbose_name="Team tour", default=0)
    active = models.IntegerField(verbose_name="Active", default=1)
    updated_at = models.DateTimeField(verbose_name="Last synced", auto_now=True)

    objects = TourManager()

    def __str__(self):
        return self.name


class TourMember(models.Model):
    tour = models.ForeignKey(verbose_name="Tour", to=Tour, related_name="members", on_delete=CASCADE)
    user_id = models.IntegerField(verbose_name="SGT user id")
    user_name = models.CharField(verbose_name="User name", max_length=100)
    hcp_index = models.FloatField(verbose_name="Handicap index", blank=True, null=True)
    custom_hcp = models.FloatField(verbose_name="Custom handicap", blank=True, null=True)
    updated_at = models.DateTimeField(verbose_name="Last synced", auto_now=True)

    class Meta:
        constraints = [
            UniqueConstraint(fields=["tour", "user_id"], name="unique_tour_member")
        ]

    def __str__(self):
        return "{}: {}".format(self.tour, self.user_name)


class TourStanding(models.Model):
    tour = models.ForeignKey(verbose_name="Tour", to=Tour, related_name="standings", on_delete=CASCADE)
    user_name = models.CharField(verbose_name="User name", max_length=100)
    gross_or_net = models.CharField(verbose_name="Gross or net", max_length=5, choices=SCORE_TYPE_CHOICES,
                                    default=GROSS)
    country_code = models.CharField(verbose_name="Country", max_length=10, blank=True, null=True)
    user_has_avatar = models.CharField(verbose_name="Has avatar", max_length=10, blank=True, null=True)
    hcp = models.FloatField(verbose_name="Handicap", blank=True, null=True)
    events = models.IntegerField(verbose_name="Events", default=0)
    first = models.IntegerField(verbose_name="Wins", default=0)
    top5 = models.IntegerField(verbose_name="Top 5", default=0)
    top10 = models.IntegerField(verbose_name="Top 10", default=0)
    points = models.FloatField(verbose_name="Points", default=0)
    position = models.IntegerField(verbose_name="Position", blank=True, null=True)
    updated_at = models.DateTimeField(verbose_name="Last synced", auto_now=True)

    class Meta:
        constraints = [
            UniqueConstraint(fields=["tour", "user_name", "gross_or_net"], name="unique_tour_standing")
        ]

    def __str__(self):
        return "{} {}: {} ({})".format(self.tour, self.gross_or_net, self.user_name, self.position)


class Tournament(models.Model):
    tournament_id = models.IntegerField(verbose_name="SGT tournament id", primary_key=True)
    tour = models.ForeignKey(verbose_name="Tour", to=Tour, related_name="tournaments", on_delete=CASCADE)
    name = models.CharField(verbose_name="Name", max_length=200)
    course_name = models.CharField(verbose_name="Course", max_length=200, blank=True, null=True)
    status = models.CharField(verbose_name="Status", max_length=40, blank=True, null=True)
    start_date = models.DateField(verbose_name="Start date", blank=True, null=True)
    end_date = models.DateField(verbose_name="End date", blank=True, null=True)
    updated_at = models.DateTimeField(verbose_name="Last synced", auto_now=True)

    objects = TournamentManager()

    def __str__(self):
        return self.name
