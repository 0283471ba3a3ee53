"""
Bearer token authentication for the task list API.

Access tokens are RS256 JWTs issued by an external identity provider. The
signing key is looked up by `kid` in the provider's JSON Web Key Set, then
signature, expiry, audience and issuer are verified by PyJWT. Verified
claims end up on `request.auth` for the duration of the request.
"""
import logging
from functools import lru_cache
from typing import Optional

import jwt
from django.conf import settings
from django.http import HttpRequest
from ninja.security import HttpBearer

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def get_jwks_client(jwks_url: str) -> jwt.PyJWKClient:
    """One key-set client per URL; it caches fetched keys between requests."""
    return jwt.PyJWKClient(jwks_url, cache_keys=True)


def decode_token(token: str) -> Optional[dict]:
    """
    Verify a bearer token against the configured key set.

    Returns:
        Decoded claims if valid, None if the token is invalid, expired,
        issued for another audience/issuer, or its key cannot be found.
    """
    try:
        signing_key = get_jwks_client(settings.AUTH0_JWKS_URL).get_signing_key_from_jwt(token)
        return jwt.decode(
            token,
            signing_key.key,
            algorithms=settings.JWT_ALGORITHMS,
            audience=settings.AUTH0_AUDIENCE,
            issuer=settings.AUTH0_ISSUER,
        )
    except jwt.PyJWKClientError as e:
        logger.warning(f"Unable to find appropriate key: {e}")
        return None
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired token")
        return None
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected token: {e}")
        return None


class BearerTokenAuth(HttpBearer):
    """django-ninja authenticator; a None result short-circuits with 401."""

    def authenticate(self, request: HttpRequest, token: str) -> Optional[dict]:
        return decode_token(token)
