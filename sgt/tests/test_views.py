from datetime import date
from unittest.mock import Mock, patch

import requests
from django.contrib.auth.models import User
from django.core.cache import cache
from django.core.management import call_command, CommandError
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from members.tests.factories import MemberFactory
from scores.tests.factories import ScorecardFactory
from sgt.client import SgtAPIError
from sgt.models import SyncLog
from sgt.sync_service import SyncResult
from sgt.tasks import sync_sgt_data
from tours.models import NET
from tours.tests.factories import TourFactory, TourMemberFactory, TourStandingFactory, TournamentFactory


class DashboardQueryTestCase(TestCase):
    """
    Test cases for the dashboard query endpoint
    """

    def setUp(self):
        cache.clear()
        self.client = APIClient()
        self.tour = TourFactory(tour_id=10, name="Summer Tour", start_date=date(2024, 1, 1))
        self.tournament = TournamentFactory(tournament_id=500, tour=self.tour, name="Medal 1",
                                            start_date=date(2024, 3, 1), end_date=date(2024, 3, 7))

    def query(self, action, params=None):
        body = {"action": action}
        if params is not None:
            body["params"] = params
        return self.client.post("/api/sgt/", body, format="json")

    def test_members(self):
        MemberFactory(user_id=2, user_name="bob")
        MemberFactory(user_id=1, user_name="alan")

        response = self.query("members")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([m["user_name"] for m in response.data["members"]], ["alan", "bob"])
        self.assertEqual(response.data["members"][0]["user_id"], 1)

    def test_tours(self):
        response = self.query("tours")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data[0]["tourId"], 10)
        self.assertEqual(response.data[0]["start_date"], "2024-01-01")

    def test_tour_standings_defaults_to_gross(self):
        TourStandingFactory(tour=self.tour, user_name="bob", position=2)
        TourStandingFactory(tour=self.tour, user_name="alan", position=1)
        TourStandingFactory(tour=self.tour, user_name="carl", position=1, gross_or_net=NET)

        response = self.query("tour-standings", {"tourId": 10})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([s["user_name"] for s in response.data], ["alan", "bob"])

    def test_tour_standings_net(self):
        TourStandingFactory(tour=self.tour, user_name="carl", position=1, gross_or_net=NET)

        response = self.query("tour-standings", {"tourId": "10", "grossOrNet": "net"})

        self.assertEqual([s["user_name"] for s in response.data], ["carl"])

    def test_tour_members(self):
        TourMemberFactory(tour=self.tour, user_id=1, user_name="alan", hcp_index=9.4)

        response = self.query("tour-members", {"tourId": 10})

        self.assertEqual(response.data, [{"user_id": 1, "user_name": "alan", "hcp_index": 9.4, "custom_hcp": None}])

    def test_tournaments_newest_first(self):
        TournamentFactory(tournament_id=501, tour=self.tour, start_date=date(2024, 4, 1))

        response = self.query("tournaments", {"tourId": 10})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([t["tournamentId"] for t in response.data["results"]], [501, 500])
        self.assertEqual(response.data["results"][1]["tourId"], 10)

    def test_scorecards(self):
        ScorecardFactory(tournament=self.tournament, player_id=1, hole_data={"h1_Par": 4, "hole1_gross": 5})

        response = self.query("scorecards", {"tournamentId": 500})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data[0]["playerId"], 1)
        self.assertEqual(response.data[0]["hole1_gross"], 5)

    def test_tournament_results(self):
        ScorecardFactory(tournament=self.tournament, player_id=1, player_name="alan", total_gross=75)
        ScorecardFactory(tournament=self.tournament, player_id=2, player_name="bob", total_gross=72)

        response = self.query("tournament-results", {"tournamentId": 500})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([(r["playerId"], r["position"]) for r in response.data], [(2, 1), (1, 2)])

    def test_member_stats(self):
        MemberFactory(user_id=1, user_name="Alan")
        TourMemberFactory(tour=self.tour, user_id=1, user_name="Alan", hcp_index=9.4, custom_hcp=8)
        TourStandingFactory(tour=self.tour, user_name="alan", position=3, points=120)
        ScorecardFactory(tournament=self.tournament, player_id=1, total_gross=80)
        ScorecardFactory(tournament=self.tournament, player_id=1, round=2, total_gross=77)

        response = self.query("member-stats", {"userId": 1})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["tours"], [
            {"tourId": 10, "tourName": "Summer Tour", "handicap": 9.4, "customHandicap": 8.0},
        ])
        self.assertEqual(response.data["handicap"], 9.4)
        self.assertEqual(response.data["totalRounds"], 2)
        self.assertEqual(response.data["averageScore"], 79)
        self.assertEqual(response.data["bestScore"], 77)
        self.assertEqual(response.data["standing"]["position"], 3)

    def test_member_stats_unknown_member(self):
        response = self.query("member-stats", {"userId": 99})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["tours"], [])
        self.assertIsNone(response.data["handicap"])
        self.assertEqual(response.data["totalRounds"], 0)
        self.assertIsNone(response.data["standing"])

    def test_player_rounds(self):
        ScorecardFactory(tournament=self.tournament, player_id=1, total_gross=80)

        response = self.query("player-rounds", {"userId": 1})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data[0]["tournamentId"], 500)
        self.assertEqual(response.data[0]["tournamentName"], "Medal 1")
        self.assertEqual(response.data[0]["date"], "2024-03-07")
        self.assertEqual(response.data[0]["scorecard"]["total_gross"], 80)

    @patch("sgt.query_service.SgtAPIClient")
    def test_registrations_are_fetched_upstream(self, mock_client_class):
        mock_client_class.return_value.get_registrations.return_value = [{"user_name": "alan"}]

        response = self.query("registrations", {"tournamentId": 500})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [{"user_name": "alan"}])
        mock_client_class.return_value.get_registrations.assert_called_once_with(500)

    @patch("sgt.query_service.SgtAPIClient")
    def test_registrations_upstream_failure(self, mock_client_class):
        mock_client_class.return_value.get_registrations.side_effect = SgtAPIError("SGT API error: 500")

        response = self.query("registrations", {"tournamentId": 500})

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertEqual(response.data, {"error": "SGT API error: 500"})

    def test_missing_parameter(self):
        response = self.query("tour-standings", {})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"error": "tourId required"})

    def test_invalid_parameter(self):
        response = self.query("scorecards", {"tournamentId": "abc"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_invalid_gross_or_net(self):
        response = self.query("tour-standings", {"tourId": 10, "grossOrNet": "stableford"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unknown_action(self):
        response = self.query("handicaps")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"error": "Unknown action: handicaps"})

    def test_missing_action(self):
        response = self.client.post("/api/sgt/", {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    @patch("sgt.client.time.sleep")
    @patch("sgt.client.requests.Session.get")
    @patch("sgt.client.requests.Session.post")
    def test_registrations_transport_failure(self, mock_post, mock_get, mock_sleep):
        mock_post.return_value = Mock(status_code=200, json=Mock(return_value={
            "success": True, "key": "abc", "expires": 3600,
        }))
        mock_get.side_effect = requests.exceptions.ChunkedEncodingError("broken")

        response = self.query("registrations", {"tournamentId": 500})

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertIn("broken", response.data["error"])

    @patch("sgt.client.requests.Session.post")
    def test_registrations_invalid_key_expiry(self, mock_post):
        mock_post.return_value = Mock(status_code=200, json=Mock(return_value={
            "success": True, "key": "abc", "expires": "soon",
        }))

        response = self.query("registrations", {"tournamentId": 500})

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertIn("error", response.data)

    def test_malformed_body(self):
        response = self.client.post("/api/sgt/", data="{not json", content_type="application/json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("error", response.data)
        self.assertNotIn("detail", response.data)

    def test_body_is_not_an_object(self):
        response = self.client.post("/api/sgt/", [1, 2], format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"error": "Unknown action: None"})

    def test_tour_standings_unranked_last(self):
        TourStandingFactory(tour=self.tour, user_name="unranked", position=None)
        TourStandingFactory(tour=self.tour, user_name="leader", position=1)

        response = self.query("tour-standings", {"tourId": 10})

        self.assertEqual([s["user_name"] for s in response.data], ["leader", "unranked"])

    @patch("sgt.views.SgtQueryService.run")
    def test_unexpected_error(self, mock_run):
        mock_run.side_effect = RuntimeError("database gone")

        response = self.query("members")

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"error": "database gone"})


class SyncViewsTestCase(TestCase):
    """
    Test cases for the sync endpoints
    """

    def setUp(self):
        self.client = APIClient()

        self.admin_user = User.objects.create_user(
            username="admin",
            email="admin@example.com",
            password="testpass",
            is_staff=True,
            is_superuser=True
        )

        self.regular_user = User.objects.create_user(
            username="user",
            email="user@example.com",
            password="testpass"
        )

    def test_sync_requires_admin(self):
        """Test that the sync endpoint requires admin permissions"""
        self.client.force_authenticate(user=self.regular_user)

        response = self.client.post("/api/sgt/sync/", {})

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_sync_requires_authentication(self):
        response = self.client.post("/api/sgt/sync/", {})

        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

    @patch("sgt.views.SgtSyncService")
    def test_sync_success(self, mock_service_class):
        """Test successful sync via API"""
        self.client.force_authenticate(user=self.admin_user)

        mock_result = Mock()
        mock_result.failed = False
        mock_result.to_dict.return_value = {"records_synced": 12, "error_count": 0}
        mock_service_class.return_value.sync_all.return_value = mock_result

        response = self.client.post("/api/sgt/sync/", {})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["success"])
        self.assertEqual(response.data["results"]["records_synced"], 12)

    @patch("sgt.views.SgtSyncService")
    def test_sync_failure(self, mock_service_class):
        self.client.force_authenticate(user=self.admin_user)

        result = SyncResult()
        result.failed = True
        result.add_error("sync", "SGT credentials not configured")
        mock_service_class.return_value.sync_all.return_value = result

        response = self.client.post("/api/sgt/sync/", {})

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertFalse(response.data["success"])
        self.assertEqual(response.data["results"]["error_count"], 1)

    def test_sync_status(self):
        SyncLog.objects.create(status=SyncLog.COMPLETED, records_synced=10)
        latest = SyncLog.objects.create(status=SyncLog.RUNNING)

        response = self.client.get("/api/sgt/sync-status/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"]["id"], latest.pk)
        self.assertEqual(response.data["status"]["status"], SyncLog.RUNNING)

    def test_sync_status_before_first_sync(self):
        response = self.client.get("/api/sgt/sync-status/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsNone(response.data["status"])

    def test_sync_logs_require_admin(self):
        self.client.force_authenticate(user=self.regular_user)

        response = self.client.get("/api/sync-logs/")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class SyncCommandTestCase(TestCase):

    @patch("sgt.management.commands.sync_sgt.SgtSyncService")
    def test_command_runs_sync(self, mock_service_class):
        result = SyncResult()
        result.members = 3
        mock_service_class.return_value.sync_all.return_value = result

        call_command("sync_sgt", "--tournament-limit", "5")

        self.assertEqual(mock_service_class.return_value.tournament_limit, 5)
        mock_service_class.return_value.sync_all.assert_called_once()

    @patch("sgt.management.commands.sync_sgt.SgtSyncService")
    def test_command_fails(self, mock_service_class):
        result = SyncResult()
        result.failed = True
        mock_service_class.return_value.sync_all.return_value = result

        with self.assertRaises(CommandError):
            call_command("sync_sgt")


class SyncTaskTestCase(TestCase):

    @patch("sgt.tasks.SgtSyncService")
    def test_task_returns_results(self, mock_service_class):
        result = SyncResult()
        result.tours = 2
        mock_service_class.return_value.sync_all.return_value = result

        output = sync_sgt_data.apply().get()

        self.assertEqual(output["tours"], 2)
        self.assertEqual(output["records_synced"], 2)
