from datetime import timedelta

from decouple import config

# Listing
MEETUP_PAGE_SIZE = config("MEETUP_PAGE_SIZE", default=10, cast=int)

# A meetup can only be cancelled while more than this is left before it starts.
MEETUP_CANCELLATION_NOTICE = timedelta(hours=config("MEETUP_CANCELLATION_NOTICE_HOURS", default=5, cast=int))

# Locale used to format dates in the subscription email.
MEETUP_MAIL_LOCALE = config("MEETUP_MAIL_LOCALE", default="pt-br")
