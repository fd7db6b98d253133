from .base import UserAwareController
from .files import FileController

__all__ = ["FileController", "UserAwareController"]
