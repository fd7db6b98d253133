import datetime as dt

from ninja import Field, Schema


class MeetupListParams(Schema):
    date: dt.date | None = Field(None, description="Calendar day (YYYY-MM-DD) to list meetups for")
    page: int = Field(1, ge=1)
