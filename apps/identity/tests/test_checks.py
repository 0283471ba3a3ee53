from django.test import SimpleTestCase, override_settings

from apps.identity.checks import check_auth_settings
from .tokens import AUTH_SETTINGS


class AuthSettingsCheckTest(SimpleTestCase):

    @override_settings(**AUTH_SETTINGS)
    def test_complete_settings_pass(self):
        self.assertEqual(check_auth_settings(None), [])

    @override_settings(AUTH0_JWKS_URL='', AUTH0_AUDIENCE='', AUTH_EMAIL_CLAIM='', AUTH0_ISSUER='')
    def test_missing_settings_reported(self):
        ids = {error.id for error in check_auth_settings(None)}
        self.assertEqual(ids, {'identity.E001', 'identity.E002', 'identity.E003', 'identity.E004'})

    @override_settings(**dict(AUTH_SETTINGS, AUTH_EMAIL_CLAIM=''))
    def test_missing_email_claim_name_reported(self):
        ids = [error.id for error in check_auth_settings(None)]
        self.assertEqual(ids, ['identity.E003'])
