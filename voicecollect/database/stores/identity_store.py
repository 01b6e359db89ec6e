"""Local email/password identity provider."""

import base64
import hashlib
import hmac
import os

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from voicecollect.database.exceptions import EmailAlreadyRegisteredError
from voicecollect.database.models import IdentityModel
from voicecollect.domain.models import Identity

_SALT_BYTES = 16
_ITERATIONS = 120_000


def hash_password(password: str) -> str:
    """Return a salted PBKDF2 hash for the supplied password."""
    salt = os.urandom(_SALT_BYTES)
    derived = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        _ITERATIONS,
    )
    return base64.b64encode(salt + derived).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check whether the provided password matches the stored hash."""
    try:
        decoded = base64.b64decode(hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False

    salt = decoded[:_SALT_BYTES]
    stored = decoded[_SALT_BYTES:]
    candidate = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        _ITERATIONS,
    )
    return hmac.compare_digest(candidate, stored)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


class IdentityStore:
    """Identity provider storing accounts in the identities table.

    Implements IdentityProviderProtocol from voicecollect.domain.protocols.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def _to_domain(self, model: IdentityModel) -> Identity:
        return Identity(
            handle=model.handle,
            email=model.email,
            created_at=model.created_at,
        )

    def create_identity(self, email: str, password: str) -> Identity:
        """Create a new identity.

        Raises:
            EmailAlreadyRegisteredError: If the email is already registered
        """
        model = IdentityModel(
            email=_normalize_email(email),
            password_hash=hash_password(password),
        )
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise EmailAlreadyRegisteredError(
                f"Email '{model.email}' is already registered"
            ) from e
        self.session.refresh(model)
        return self._to_domain(model)

    def authenticate(self, email: str, password: str) -> Identity | None:
        """Return the identity for valid credentials, otherwise None."""
        statement = select(IdentityModel).where(
            IdentityModel.email == _normalize_email(email)
        )
        model = self.session.exec(statement).first()
        if model is None or not verify_password(password, model.password_hash):
            return None
        return self._to_domain(model)

    def delete_identity(self, handle: str) -> None:
        """Delete an identity. Unknown handles are ignored."""
        statement = select(IdentityModel).where(IdentityModel.handle == handle)
        model = self.session.exec(statement).first()
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()
