"""Agenda entities, organized by business concept.

Each entity has its own package whose ``entity.py`` holds the domain model.
"""

from .contact import Contact
from .user import UNNAMED_USER, User

__all__ = [
    "Contact",
    "User",
    "UNNAMED_USER",
]
