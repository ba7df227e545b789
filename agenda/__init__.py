"""User and contact entities for the contact agenda."""

from agenda.entities import Contact, User

__all__ = ["Contact", "User"]
