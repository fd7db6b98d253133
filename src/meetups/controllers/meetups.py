from django.db.models import QuerySet
from ninja import Query
from ninja_extra import api_controller, route

from common.authentication import MeetappJWTAuth
from common.controllers import UserAwareController
from common.schema import ErrorResponse, ValidationErrorResponse
from common.throttling import WriteThrottle
from meetups import filters, models, schema
from meetups.service import meetup_service, subscription_service


@api_controller("/meetups", auth=MeetappJWTAuth(), tags=["Meetups"])
class MeetupController(UserAwareController):
    @route.get(
        "",
        url_name="list_meetups",
        response={200: list[schema.MeetupInListSchema], 400: ValidationErrorResponse | ErrorResponse},
    )
    def list_meetups(
        self,
        params: filters.MeetupListParams = Query(...),  # type: ignore[type-arg]
    ) -> QuerySet[models.Meetup]:
        """List the meetups happening on a given day, ten per page.

        The `date` query parameter is required; days start at local midnight.
        """
        return meetup_service.list_meetups(params.date, params.page)

    @route.post(
        "",
        url_name="create_meetup",
        response={200: schema.MeetupSchema, 400: ValidationErrorResponse | ErrorResponse},
        throttle=WriteThrottle(),
    )
    def create_meetup(self, payload: schema.MeetupCreateSchema) -> models.Meetup:
        """Create a meetup. The date must be in the future and `banner_id` must reference an uploaded file.

        A date without an offset is read as local time.
        """
        return meetup_service.create_meetup(self.user(), payload)

    @route.get(
        "/{meetup_id}",
        url_name="get_meetup",
        response={200: schema.MeetupSchema, 401: ErrorResponse, 404: ErrorResponse},
    )
    def get_meetup(self, meetup_id: int) -> models.Meetup:
        """Retrieve one of your meetups."""
        return meetup_service.get_meetup(self.user(), meetup_id)

    @route.put(
        "/{meetup_id}",
        url_name="update_meetup",
        response={
            200: schema.MeetupUpdatedSchema,
            400: ValidationErrorResponse | ErrorResponse,
            401: ErrorResponse,
            404: ErrorResponse,
        },
        throttle=WriteThrottle(),
    )
    def update_meetup(self, meetup_id: int, payload: schema.MeetupEditSchema) -> schema.MeetupUpdatedSchema:
        """Update one of your meetups. Only the fields sent are changed.

        Meetups that already happened cannot be edited.
        """
        meetup = meetup_service.update_meetup(self.user(), meetup_id, payload)
        return schema.MeetupUpdatedSchema(
            meetup=schema.MeetupSchema.from_orm(meetup),
            creator_id=meetup.creator_id,
        )

    @route.delete(
        "/{meetup_id}",
        url_name="delete_meetup",
        response={200: None, 401: ErrorResponse, 404: ErrorResponse},
    )
    def delete_meetup(self, meetup_id: int) -> tuple[int, None]:
        """Cancel one of your meetups. Not allowed within five hours of its start."""
        meetup_service.cancel_meetup(self.user(), meetup_id)
        return 200, None

    @route.post(
        "/{meetup_id}/subscription",
        url_name="subscribe_meetup",
        response={200: schema.SubscriptionSchema, 400: ErrorResponse, 404: ErrorResponse},
        throttle=WriteThrottle(),
    )
    def subscribe(self, meetup_id: int) -> models.Subscription:
        """Subscribe to someone else's upcoming meetup. The organizer is notified by email."""
        return subscription_service.subscribe(self.user(), meetup_id)
