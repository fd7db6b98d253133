from django.db.models import QuerySet
from ninja_extra import api_controller, route

from common.authentication import MeetappJWTAuth
from common.controllers import UserAwareController
from common.schema import ErrorResponse
from meetups import models, schema
from meetups.service import subscription_service


@api_controller("/subscriptions", auth=MeetappJWTAuth(), tags=["Subscriptions"])
class SubscriptionController(UserAwareController):
    @route.get("", url_name="list_subscriptions", response=list[schema.SubscriptionSchema])
    def list_subscriptions(self) -> QuerySet[models.Subscription]:
        """List your subscriptions to upcoming meetups, soonest first."""
        return subscription_service.list_subscriptions(self.user())

    @route.delete(
        "/{subscription_id}",
        url_name="delete_subscription",
        response={200: None, 401: ErrorResponse, 404: ErrorResponse},
    )
    def delete_subscription(self, subscription_id: int) -> tuple[int, None]:
        """Cancel one of your subscriptions to an upcoming meetup."""
        subscription_service.unsubscribe(self.user(), subscription_id)
        return 200, None
