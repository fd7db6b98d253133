import pytest

from accounts import schema


@pytest.fixture
def valid_register_payload() -> schema.RegisterUserSchema:
    """Provides a valid payload for the user registration endpoint."""
    return schema.RegisterUserSchema(
        name="New User",
        email="newuser@example.com",
        password="a-strong-password",
    )
