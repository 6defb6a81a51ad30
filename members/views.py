from rest_framework import viewsets

from .models import Member
from .serializers import MemberSerializer


class MemberViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = MemberSerializer

    def get_queryset(self):
        queryset = Member.objects.all()
        active = self.request.query_params.get("active", None)
        name = self.request.query_params.get("name", None)

        if active is not None:
            queryset = queryset.filter(user_active=1 if active == "true" else 0)
        if name is not None:
            queryset = queryset.filter(user_name__icontains=name)

        return queryset.order_by("user_name")
