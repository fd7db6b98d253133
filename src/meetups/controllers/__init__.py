from .meetups import MeetupController
from .organizing import OrganizingController
from .subscriptions import SubscriptionController

__all__ = ["MeetupController", "OrganizingController", "SubscriptionController"]
