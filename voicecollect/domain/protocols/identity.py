"""Identity provider Protocol."""

from typing import Protocol

from voicecollect.domain.models import Identity


class IdentityProviderProtocol(Protocol):
    """Protocol for email/password authentication."""

    def create_identity(self, email: str, password: str) -> Identity:
        """Create a new identity.

        Args:
            email: Login email address
            password: Plain-text password

        Returns:
            The created Identity with its stable handle

        Raises:
            EmailAlreadyRegisteredError: If the email is taken
        """
        ...

    def authenticate(self, email: str, password: str) -> Identity | None:
        """Check credentials.

        Returns:
            The matching Identity, or None if credentials are invalid
        """
        ...

    def delete_identity(self, handle: str) -> None:
        """Remove an identity. Used to undo a partial registration."""
        ...
