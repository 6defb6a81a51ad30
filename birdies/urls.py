from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from members import views as member_views
from scores import views as scoring_views
from sgt import views as sgt_views
from tours import views as tour_views

admin.site.site_header = "Birdies Bayside SGT Administration"

# Create a router and register our viewsets with it.
router = DefaultRouter()
router.register(r"members", member_views.MemberViewSet, "members")
router.register(r"tours", tour_views.TourViewSet, "tours")
router.register(r"standings", tour_views.TourStandingViewSet, "standings")
router.register(r"tournaments", tour_views.TournamentViewSet, "tournaments")
router.register(r"scorecards", scoring_views.ScorecardViewSet, "scorecards")
router.register(r"sync-logs", sgt_views.SyncLogViewSet, "sync-logs")

urlpatterns = [
      path("admin/", admin.site.urls),
      path("api/", include(router.urls)),
      path("api/sgt/", include("sgt.urls")),
  ]
