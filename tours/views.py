from django.db.models import F
from rest_framework import viewsets

from .models import Tour, TourStanding, Tournament, GROSS
from .serializers import TourSerializer, TourStandingSerializer, TournamentSerializer


class TourViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = TourSerializer

    def get_queryset(self):
        queryset = Tour.objects.all()
        active = self.request.query_params.get("active", None)

        if active == "true":
            return Tour.objects.active()
        if active == "false":
            queryset = queryset.exclude(active=1)

        return queryset.order_by("-start_date", "-tour_id")


class TourStandingViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = TourStandingSerializer

    def get_queryset(self):
        queryset = TourStanding.objects.all()
        tour_id = self.request.query_params.get("tour", None)
        gross_or_net = self.request.query_params.get("gross_or_net", GROSS)

        if tour_id is not None:
            queryset = queryset.filter(tour=tour_id)
        queryset = queryset.filter(gross_or_net=gross_or_net)

        return queryset.order_by(F("position").asc(nulls_last=True), "user_name")


class TournamentViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = TournamentSerializer

    def get_queryset(self):
        queryset = Tournament.objects.all()
        tour_id = self.request.query_params.get("tour", None)
        status = self.request.query_params.get("status", None)

        if tour_id is not None:
            queryset = Tournament.objects.for_tour(tour_id)
        if status is not None:
            queryset = queryset.filter(status=status)

        return queryset
