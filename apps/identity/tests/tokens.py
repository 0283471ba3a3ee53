"""
Token helpers shared by the API tests.

Tokens are signed with a throwaway RSA key whose public half is served by a
patched JWKS endpoint, so the real PyJWKClient lookup path runs.
"""
import json
import time
from unittest import mock

import jwt
from cryptography.hazmat.primitives.asymmetric import rsa
from jwt.algorithms import RSAAlgorithm

from apps.identity.jwt_auth import get_jwks_client


TEST_KID = 'test-signing-key'
TEST_DOMAIN = 'tenant.example.com'
TEST_AUDIENCE = 'https://todo.example.com/api'
TEST_ISSUER = f'https://{TEST_DOMAIN}/'
TEST_JWKS_URL = f'https://{TEST_DOMAIN}/.well-known/jwks.json'
TEST_EMAIL_CLAIM = 'https://todo.example.com/email'

AUTH_SETTINGS = {
    'AUTH0_AUDIENCE': TEST_AUDIENCE,
    'AUTH0_ISSUER': TEST_ISSUER,
    'AUTH0_JWKS_URL': TEST_JWKS_URL,
    'AUTH_EMAIL_CLAIM': TEST_EMAIL_CLAIM,
}

SIGNING_KEY = rsa.generate_private_key(public_exponent=65537, key_size=2048)


def make_jwks(private_key=SIGNING_KEY, kid=TEST_KID) -> dict:
    jwk = json.loads(RSAAlgorithm.to_jwk(private_key.public_key()))
    jwk.update({'kid': kid, 'use': 'sig', 'alg': 'RS256'})
    return {'keys': [jwk]}


def make_token(email='alice@example.com', private_key=SIGNING_KEY, kid=TEST_KID, **claims) -> str:
    """Mint a token valid for the test settings; keyword claims override."""
    now = int(time.time())
    payload = {
        'iss': TEST_ISSUER,
        'aud': TEST_AUDIENCE,
        'sub': f'auth0|{email}',
        'iat': now,
        'exp': now + 300,
    }
    if email is not None:
        payload[TEST_EMAIL_CLAIM] = email
    payload.update(claims)
    return jwt.encode(payload, private_key, algorithm='RS256', headers={'kid': kid})


def auth_header(token: str) -> dict:
    return {'HTTP_AUTHORIZATION': f'Bearer {token}'}


class JWKSMixin:
    """Serve `make_jwks()` from the key-set endpoint for each test."""

    def setUp(self):
        super().setUp()
        get_jwks_client.cache_clear()
        self.addCleanup(get_jwks_client.cache_clear)
        patcher = mock.patch.object(jwt.PyJWKClient, 'fetch_data', return_value=make_jwks())
        self.fetch_jwks = patcher.start()
        self.addCleanup(patcher.stop)
