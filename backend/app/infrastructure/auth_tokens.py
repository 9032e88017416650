"""Staff Token Verification — decodes the JWT issued by the login service.

Invariants:
    - Only verification lives here; issuance and password hashing are owned elsewhere
    - Any decode failure (bad signature, expired, malformed) raises AuthenticationError

Design Decisions:
    - python-jose for HS256 verification, same claims as the login service
      (userId, email, role); `sub` accepted as a fallback for userId
"""

from dataclasses import dataclass

from jose import JWTError, jwt

from app.core.errors import AuthenticationError


@dataclass(frozen=True)
class StaffIdentity:
    """Authenticated staff member, as asserted by the token."""
    user_id: str | None
    email: str | None
    role: str | None


def decode_staff_token(token: str, secret: str, algorithm: str) -> StaffIdentity:
    """Verify signature and expiry, return the identity claims."""
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError:
        raise AuthenticationError("invalid or expired token")
    return StaffIdentity(
        user_id=payload.get("userId") or payload.get("sub"),
        email=payload.get("email"),
        role=payload.get("role"),
    )
