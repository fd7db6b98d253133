class UserAlreadyExistsError(Exception):
    """Raised when an email address is already taken by another user."""


class PasswordMismatchError(Exception):
    """Raised when the current password supplied for a password change is wrong."""
