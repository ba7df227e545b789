"""Contact entity package.

Holds the generic personal data (name, address, phone, ...) that every
agenda record carries.
"""

from .entity import Contact

__all__ = ["Contact"]
