"""
Bearer token verification.

Tokens are issued by the account service; this API only checks the
signature and expiry and reads the subject and role claims.
"""

from typing import Any, Dict, Optional

import jwt
import structlog

from aupair.core.config import Settings

logger = structlog.get_logger(__name__)


class TokenVerifier:
    """Decode JWTs signed with the shared secret."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def verify_token(self, token: str) -> Optional[Dict[str, Any]]:
        """Verify and decode a JWT, returning None when it is unusable."""
        try:
            payload = jwt.decode(
                token,
                self.settings.SECRET_KEY,
                algorithms=[self.settings.JWT_ALGORITHM]
            )
        except jwt.ExpiredSignatureError:
            logger.warning("Token has expired")
            return None
        except jwt.PyJWTError as e:
            logger.warning("Token validation failed", error=str(e))
            return None

        if not payload.get("sub"):
            logger.warning("Token has no subject")
            return None
        return payload


__all__ = ["TokenVerifier"]
