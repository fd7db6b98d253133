from datetime import datetime

from django.conf import settings
from django.utils import timezone, translation
from django.utils.dates import MONTHS


def format_meetup_date(value: datetime) -> str:
    """Format a meetup date for the subscription email, e.g. ``dia 05 de junho, às 14:30h``.

    The date is shown in local time with the month name in ``MEETUP_MAIL_LOCALE``.
    """
    local = timezone.localtime(value)
    with translation.override(settings.MEETUP_MAIL_LOCALE):
        month = str(MONTHS[local.month]).lower()
    return f"dia {local:%d} de {month}, às {local.hour}:{local:%M}h"
