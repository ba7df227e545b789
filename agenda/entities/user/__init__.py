"""User entity package.

An account that can sign in to the agenda: credentials plus the contact
data of the person behind it.
"""

from .entity import UNNAMED_USER, User

__all__ = ["User", "UNNAMED_USER"]
