from rest_framework import serializers

from scores.models import Scorecard


class ScorecardSerializer(serializers.ModelSerializer):

    tournamentId = serializers.IntegerField(source="tournament_id")
    playerId = serializers.IntegerField(source="player_id")
    courseName = serializers.CharField(source="course_name", allow_null=True)
    toPar_gross = serializers.IntegerField(source="to_par_gross", allow_null=True)
    toPar_net = serializers.IntegerField(source="to_par_net", allow_null=True)

    class Meta:
        model = Scorecard
        fields = (
            "tournamentId",
            "playerId",
            "player_name",
            "hcp_index",
            "round",
            "courseName",
            "teetype",
            "rating",
            "slope",
            "total_gross",
            "total_net",
            "toPar_gross",
            "toPar_net",
            "in_gross",
            "out_gross",
            "in_net",
            "out_net",
        )

    def to_representation(self, instance):
        data = super().to_representation(instance)
        # hole fields sit at the top level, as on the SGT scorecard itself
        for key, value in (instance.hole_data or {}).items():
            data.setdefault(key, value)
        return data


class PlayerRoundSerializer(serializers.Serializer):

    tournamentId = serializers.IntegerField(source="tournament_id")
    tournamentName = serializers.CharField(source="tournament.name")
    courseName = serializers.SerializerMethodField()
    date = serializers.DateField(source="tournament.end_date", allow_null=True)
    status = serializers.CharField(source="tournament.status", allow_null=True)
    scorecard = serializers.SerializerMethodField()

    def get_courseName(self, obj):
        return obj.course_name or obj.tournament.course_name

    def get_scorecard(self, obj):
        return ScorecardSerializer(obj).data
