"""Contact domain entity."""

from typing import Any

from pydantic import Field

from agenda.entities._base import Entity


class Contact(Entity):
    """Contact entity representing a person in the agenda.

    Every field is optional. Unset numbers are ``0`` and unset strings are
    ``None``, so an empty ``Contact()`` is a valid blank record.
    """

    contact_id: int = Field(default=0, description="Contact identifier")
    first_name: str | None = Field(default=None, description="Contact's first name")
    last_name: str | None = Field(default=None, description="Contact's last name")
    gender: str | None = Field(default=None, description="Contact's gender")
    category: str | None = Field(default=None, description="Agenda category")
    birthdate: str | None = Field(default=None, description="Contact's birthdate")
    address: str | None = Field(default=None, description="Contact's address")
    phone: int = Field(default=0, description="Contact's phone number")
    email: str | None = Field(default=None, description="Contact's email address")

    def __eq__(self, other: Any) -> bool:
        """Compare contacts by identifier."""
        if type(other) is not type(self):
            return False
        return self.contact_id == other.contact_id

    def __hash__(self) -> int:
        return hash(self.contact_id)
