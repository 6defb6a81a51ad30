from rest_framework import serializers

from .models import Member


class MemberSerializer(serializers.ModelSerializer):

    class Meta:
        model = Member
        fields = (
            "user_id",
            "user_name",
            "user_email",
            "user_active",
            "user_country_code",
            "user_has_avatar",
            "user_game_id",
        )
