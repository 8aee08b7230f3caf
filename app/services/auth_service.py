# app/services/auth_service.py
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from passlib.context import CryptContext

from app.config import settings
from app.core.firebase import auth, init_firebase

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"
ACCESS_DENIED = "Access denied. Admin only."

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# ---------- Access guard ----------

@dataclass(frozen=True)
class Allow:
    pass


@dataclass(frozen=True)
class Deny:
    reason: str = ACCESS_DENIED


Decision = Union[Allow, Deny]


class HeaderRoleGuard:
    """Trusts the role string the client sends. Legacy mode only."""

    def authorize(self, claim: Optional[str]) -> Decision:
        if claim == ADMIN_ROLE:
            return Allow()
        return Deny()


class FirebaseTokenGuard:
    """Claim is a Firebase ID token; admin iff its ``roles`` custom claim says so."""

    def authorize(self, claim: Optional[str]) -> Decision:
        token = _bearer_token(claim)
        if not token:
            return Deny()

        # missing credentials and CertificateFetchError propagate as server errors
        init_firebase()
        try:
            decoded = auth.verify_id_token(token)
        except (ValueError, auth.InvalidIdTokenError, auth.ExpiredIdTokenError,
                auth.RevokedIdTokenError) as e:
            logger.warning("Rejected ID token: %s", e.__class__.__name__)
            return Deny()

        if ADMIN_ROLE in get_user_roles_from_claims(decoded):
            return Allow()
        return Deny()


def _bearer_token(claim: Optional[str]) -> Optional[str]:
    if not claim:
        return None
    parts = claim.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    if len(parts) == 1:
        return parts[0]
    return None


def get_user_roles_from_claims(decoded_token: dict) -> List[str]:
    # custom claims sit at the root of the decoded token
    roles = decoded_token.get("roles")
    if isinstance(roles, list):
        return roles
    return []


def get_guard() -> Union[HeaderRoleGuard, FirebaseTokenGuard]:
    if settings.AUTH_MODE == "header":
        return HeaderRoleGuard()
    return FirebaseTokenGuard()


# ---------- Initial credential ----------

def issue_initial_credential() -> Tuple[str, str]:
    """Return ``(one_time_password, hash)`` for a newly created member."""
    password = secrets.token_urlsafe(settings.INITIAL_PASSWORD_BYTES)
    return password, pwd_context.hash(password)
