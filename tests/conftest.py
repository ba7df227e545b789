"""Shared pytest fixtures for the agenda entity tests."""

from collections.abc import Generator

import pytest
from loguru import logger

from agenda import Contact, User


@pytest.fixture
def contact() -> Contact:
    return Contact(
        contact_id=10,
        first_name="Ana",
        last_name="Gomez",
        gender="F",
        category="Familia",
        birthdate="1990-04-12",
        address="Calle Mayor 1",
        phone=600111222,
        email="ana@agenda.test",
    )


@pytest.fixture
def user(contact: Contact) -> User:
    return User(
        user_id=5,
        login_email="a@b.com",
        password="secret123",
        user_phone=699000111,
        contact=contact,
    )


@pytest.fixture
def log_messages() -> Generator[list[str], None, None]:
    """Collect every Loguru message emitted while the test runs."""
    messages: list[str] = []
    sink_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG")
    yield messages
    logger.remove(sink_id)
