"""
Startup checks for the authentication settings.

`runserver` and `manage.py check` refuse to start while any of these fail,
so a misconfigured deployment never begins serving requests.
"""
from django.conf import settings
from django.core.checks import Error, Tags, register


REQUIRED_SETTINGS = [
    ('AUTH0_JWKS_URL', 'identity.E001', 'Set AUTH0_DOMAIN or AUTH0_JWKS_URL.'),
    ('AUTH0_AUDIENCE', 'identity.E002', 'Set AUTH0_AUDIENCE to the API identifier.'),
    ('AUTH_EMAIL_CLAIM', 'identity.E003', 'Set NAMESPACE_DOMAIN to the claim carrying the email.'),
]


@register(Tags.security)
def check_auth_settings(app_configs, **kwargs):
    errors = []
    for name, check_id, hint in REQUIRED_SETTINGS:
        if not getattr(settings, name, ''):
            errors.append(Error(f"{name} is not configured.", hint=hint, id=check_id))
    if not settings.AUTH0_ISSUER:
        errors.append(Error(
            "AUTH0_ISSUER is not configured.",
            hint='Set AUTH0_DOMAIN or AUTH0_ISSUER.',
            id='identity.E004',
        ))
    return errors
