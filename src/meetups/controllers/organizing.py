from django.db.models import QuerySet
from ninja_extra import api_controller, route

from common.authentication import MeetappJWTAuth
from common.controllers import UserAwareController
from meetups import models, schema
from meetups.service import meetup_service


@api_controller("/organizing", auth=MeetappJWTAuth(), tags=["Meetups"])
class OrganizingController(UserAwareController):
    @route.get("", url_name="list_organizing", response=list[schema.MeetupSchema])
    def list_organizing(self) -> QuerySet[models.Meetup]:
        """List the meetups you organize."""
        return meetup_service.list_organized(self.user())
