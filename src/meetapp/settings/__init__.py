# ruff: noqa: F401, F403
from .base import *
from .celery import *
from .email import *
from .meetups import *
from .ninja import *
from .observability import *
