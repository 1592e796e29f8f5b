"""
File: identity_service.py
Purpose: Resolves bearer credentials from the identity provider to a verified email.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import jwt

from library_app.exceptions import Unauthenticated

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    subject: str
    email: str


class TokenVerifier:
    """
    Verifies signed ID tokens (JWT) issued by the external identity provider.
    """

    def __init__(self, key, algorithms=("HS256",), audience: Optional[str] = None,
                 issuer: Optional[str] = None):
        self.key = key
        self.algorithms = list(algorithms)
        self.audience = audience
        self.issuer = issuer

    @classmethod
    def from_settings(cls, settings):
        return cls(
            key=settings.auth_secret,
            algorithms=(settings.auth_algorithm,),
            audience=settings.auth_audience,
            issuer=settings.auth_issuer,
        )

    def verify(self, token: Optional[str]) -> Identity:
        if not token:
            raise Unauthenticated("Missing token")

        options = {"require": ["exp"]}
        if self.audience is None:
            options["verify_aud"] = False
        try:
            claims = jwt.decode(
                token,
                self.key,
                algorithms=self.algorithms,
                audience=self.audience,
                issuer=self.issuer,
                options=options,
            )
        except jwt.PyJWTError as e:
            logger.warning("Token verification failed: %s", e)
            raise Unauthenticated("Invalid token") from e

        email = claims.get("email")
        if not email:
            raise Unauthenticated("Token has no email claim")
        if claims.get("email_verified") is False:
            raise Unauthenticated("Email address is not verified")

        return Identity(subject=str(claims.get("sub") or claims.get("uid") or email), email=email)

    def verify_header(self, header: Optional[str]) -> Identity:
        """Accepts a raw Authorization header value ("Bearer <token>")."""
        if not header or not header.startswith("Bearer "):
            raise Unauthenticated("Missing or invalid token")
        return self.verify(header[len("Bearer "):].strip())
