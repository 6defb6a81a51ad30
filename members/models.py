from django.db import models


class Member(models.Model):
    user_id = models.IntegerField(verbose_name="SGT user id", primary_key=True)
    user_name = models.CharField(verbose_name="User name", max_length=100)
    user_email = models.CharField(verbose_name="Email", max_length=254, blank=True, null=True)
    user_active = models.IntegerField(verbose_name="Active", default=1)
    user_country_code = models.CharField(verbose_name="Country", max_length=10, blank=True, null=True)
    user_has_avatar = models.CharField(verbose_name="Has avatar", max_length=10, blank=True, null=True)
    user_game_id = models.CharField(verbose_name="Game id", max_length=100, blank=True, null=True)
    updated_at = models.DateTimeField(verbose_name="Last synced", auto_now=True)

    class Meta:
        ordering = ["user_name"]

    def __str__(self):
        return "{} ({})".format(self.user_name, self.user_id)
