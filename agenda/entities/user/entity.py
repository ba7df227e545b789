"""User domain entity."""

from typing import Any

from loguru import logger
from pydantic import Field

from agenda.entities._base import Entity
from agenda.entities.contact.entity import Contact

UNNAMED_USER = "Usuario sin nombre"


class User(Entity):
    """User entity representing an account that can sign in to the agenda.

    A user carries its own credentials plus the contact data of the person
    behind the account. Identity is the ``user_id``: two users with the same
    ``user_id`` are equal whatever their other fields hold, and that includes
    two blank users that both still have ``user_id == 0``.

    The password is stored exactly as given. It is left out of ``repr()``,
    ``str()`` and ``model_dump()``.
    """

    user_id: int = Field(default=0, description="Unique identifier of the account")
    login_email: str | None = Field(
        default=None, description="Email used as the login credential"
    )
    password: str | None = Field(
        default=None,
        repr=False,
        exclude=True,
        description="Password as provided by the caller",
    )
    user_phone: int = Field(default=0, description="Phone number of the account")
    contact: Contact = Field(
        default_factory=Contact, description="Personal data of the account holder"
    )

    @classmethod
    def from_credentials(
        cls, user_id: int, login_email: str | None, password: str | None, user_phone: int
    ) -> "User":
        """Create a user from its authentication data only.

        The contact data is left blank; none of the arguments are copied
        into it.
        """
        return cls(
            user_id=user_id,
            login_email=login_email,
            password=password,
            user_phone=user_phone,
        )

    @classmethod
    def from_details(
        cls,
        user_id: int,
        login_email: str | None,
        password: str | None,
        user_phone: int,
        contact_id: int,
        first_name: str | None,
        last_name: str | None,
        gender: str | None,
        category: str | None,
        birthdate: str | None,
        address: str | None,
        phone: int,
        email: str | None,
    ) -> "User":
        """Create a user with both its authentication and contact data."""
        contact = Contact(
            contact_id=contact_id,
            first_name=first_name,
            last_name=last_name,
            gender=gender,
            category=category,
            birthdate=birthdate,
            address=address,
            phone=phone,
            email=email,
        )
        return cls(
            user_id=user_id,
            login_email=login_email,
            password=password,
            user_phone=user_phone,
            contact=contact,
        )

    @property
    def first_name(self) -> str | None:
        return self.contact.first_name

    @property
    def last_name(self) -> str | None:
        return self.contact.last_name

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name == "password":
            logger.debug("Password updated for user {}", self.user_id)

    def has_valid_credentials(self) -> bool:
        """Check that both the login email and the password are present.

        Only presence is checked: ``None``, empty and whitespace-only values
        fail. Format, strength and uniqueness are not checked.
        """
        return bool(
            self.login_email is not None
            and self.login_email.strip()
            and self.password is not None
            and self.password.strip()
        )

    def full_name(self) -> str:
        """Return the first and last name, whichever is set, or a placeholder."""
        first_name = self.first_name
        last_name = self.last_name

        if first_name is not None and last_name is not None:
            return f"{first_name} {last_name}"
        if first_name is not None:
            return first_name
        if last_name is not None:
            return last_name
        return UNNAMED_USER

    def __repr__(self) -> str:
        return (
            f"User(user_id={self.user_id}, login_email={self.login_email!r}, "
            f"first_name={self.first_name!r}, last_name={self.last_name!r})"
        )

    __str__ = __repr__

    def __eq__(self, other: Any) -> bool:
        """Compare users by ``user_id``."""
        if self is other:
            return True
        if type(other) is not type(self):
            return False
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        """Hash based on ``user_id`` only."""
        return hash(self.user_id)
