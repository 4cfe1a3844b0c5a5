"""
JWT token generator adapter - Implements TokenGenerator protocol.

Issues signed, self-contained access tokens with PyJWT. Tokens carry the
account id as subject and expire after a fixed lifetime; there is no
renewal or revocation.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt


@dataclass(frozen=True)
class JwtTokenGenerator:
    """
    Implements TokenGenerator protocol via PyJWT.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    secret: str
    algorithm: str = "HS256"
    ttl_seconds: int = 3600

    def generate(self, subject: str) -> str:
        """
        Issue a signed token for the given account id.

        Args:
            subject: Account id, stored in the "sub" claim

        Returns:
            Encoded JWT
        """
        now = datetime.now(timezone.utc)
        claims = {
            "sub": subject,
            "iat": now,
            "exp": now + timedelta(seconds=self.ttl_seconds),
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)
