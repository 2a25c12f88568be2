from django.test import TestCase

from apps.analytics.exceptions import AccountNotAccessibleError
from apps.analytics.tasks import generate_channel_report
from apps.authentication.models import User

from .fixtures import APRIL_15, add_email_stats, make_email_client, make_user


class GenerateChannelReportTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.admin = make_user('admin@kirk.io', role=User.ROLE_ADMIN)
        cls.rep = make_user('rep@kirk.io', role=User.ROLE_ACCOUNT_REP)
        cls.client_user = make_user('client@acme.com')
        cls.email_client = make_email_client(cls.client_user)
        add_email_stats(cls.email_client, 'em-1', APRIL_15, delivered=100, opens=40)

    def test_builds_overview_for_requester_scope(self):
        overview = generate_channel_report(
            self.admin.pk, self.client_user.pk, '2025-04-15', '2025-04-17', {'email': self.email_client.pk},
        )

        self.assertEqual(overview['channels']['email']['metrics']['current']['opens'], 40)
        self.assertIsNone(overview['channels']['direct_mail'])

    def test_runs_eagerly_through_celery(self):
        result = generate_channel_report.delay(self.admin.pk, self.client_user.pk, '2025-04-15', '2025-04-17')
        self.assertEqual(result.get()['summary']['channelsReporting'], 1)

    def test_requester_scope_is_enforced(self):
        with self.assertRaises(AccountNotAccessibleError):
            generate_channel_report(self.rep.pk, self.client_user.pk, '2025-04-15', '2025-04-17')
