import typing as t

from ninja_extra import ControllerBase

from accounts.models import MeetappUser


class UserAwareController(ControllerBase):
    def user(self) -> MeetappUser:
        """Get the user for this request."""
        return t.cast(MeetappUser, self.context.request.user)  # type: ignore[union-attr]
