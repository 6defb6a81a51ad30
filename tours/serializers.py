from rest_framework import serializers

from .models import Tour, TourMember, TourStanding, Tournament


class TourSerializer(serializers.ModelSerializer):

    tourId = serializers.IntegerField(source="tour_id")
    teamTour = serializers.IntegerField(source="team_tour")

    class Meta:
        model = Tour
        fields = ("tourId", "name", "start_date", "end_date", "teamTour", "active", )


class TourMemberSerializer(serializers.ModelSerializer):

    class Meta:
        model = TourMember
        fields = ("user_id", "user_name", "hcp_index", "custom_hcp", )


class TourStandingSerializer(serializers.ModelSerializer):

    class Meta:
        model = TourStanding
        fields = (
            "hcp",
            "events",
            "first",
            "top5",
            "top10",
            "points",
            "user_name",
            "country_code",
            "user_has_avatar",
            "position",
        )


class TournamentSerializer(serializers.ModelSerializer):

    tournamentId = serializers.IntegerField(source="tournament_id")
    tourId = serializers.IntegerField(source="tour_id")
    courseName = serializers.CharField(source="course_name", allow_null=True)

    class Meta:
        model = Tournament
        fields = ("tournamentId", "tourId", "courseName", "name", "status", "start_date", "end_date", )
