"""
Identity resolution: verified token claims -> durable user id.

The token itself is verified upstream by `apps.identity.jwt_auth`; the
claims handed to this module are already trusted.
"""
import logging
from typing import Mapping, Optional
from uuid import UUID

from django.conf import settings
from django.http import HttpRequest

from apps.core.db import store_errors
from apps.core.exceptions import MissingClaim, QueryFailed
from .models import User

logger = logging.getLogger(__name__)


def get_verified_email(claims: Optional[Mapping]) -> str:
    """Read the email claim named by AUTH_EMAIL_CLAIM from verified claims."""
    claim = settings.AUTH_EMAIL_CLAIM
    email = claims.get(claim) if claims else None
    if not isinstance(email, str) or not email:
        raise MissingClaim(f"token has no {claim!r} claim")
    return email


def resolve_user_id(email: str) -> UUID:
    """
    Return the user id for an email, creating the user on first sight.

    The insert is conflict-free (ON CONFLICT DO NOTHING / INSERT OR IGNORE),
    so concurrent first requests for the same email create one row.
    """
    with store_errors():
        User.objects.bulk_create([User(email=email)], ignore_conflicts=True)
        try:
            user_id = User.objects.values_list('user_id', flat=True).get(email=email)
        except User.DoesNotExist:
            raise QueryFailed(f"no user row for {email}")

    logger.debug(f"Resolved {email} to user {user_id}")
    return user_id


def resolve_request_user(request: HttpRequest) -> UUID:
    """
    Resolve the caller of an authenticated request.

    Claims live on `request.auth`, set by the bearer authenticator for this
    request only.
    """
    return resolve_user_id(get_verified_email(request.auth))
