from django.db import models
from django.db.models import F


class TourManager(models.Manager):

    def active(self):
        return self.filter(active=1).order_by(F("start_date").desc(nulls_last=True), "-tour_id")

    def first_active(self):
        return self.active().first()


class TournamentManager(models.Manager):

    def for_tour(self, tour_id):
        return self.filter(tour_id=tour_id).order_by(F("start_date").desc(nulls_last=True), "-tournament_id")
