from datetime import date
from unittest import mock

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.authentication.models import User

from .fixtures import APRIL_15, APRIL_17, add_email_stats, add_mailing, make_email_client, make_usps_client, make_user


class AnalyticsViewTestCase(APITestCase):
    @classmethod
    def setUpTestData(cls):
        cls.admin = make_user('admin@kirk.io', role=User.ROLE_ADMIN)
        cls.rep = make_user('rep@kirk.io', role=User.ROLE_ACCOUNT_REP)
        cls.client_user = make_user('client@acme.com', account_rep=cls.rep)
        cls.other_client = make_user('client@globex.com')

        cls.email_client = make_email_client(cls.client_user)
        add_email_stats(cls.email_client, 'em-1', APRIL_15, campaign_name='Spring Sale', delivered=7484, opens=2955)
        add_email_stats(cls.email_client, 'em-1', APRIL_17, delivered=7484, opens=2700)

        cls.usps_client = make_usps_client(cls.client_user)
        add_mailing(cls.usps_client, 'r-1', 'Spring Sale', APRIL_15, summaries=[{
            'scan_date': date(2025, 4, 18), 'pieces': 500, 'total_scanned': 450, 'final_scan_count': 400,
        }])

    def window(self, **params):
        return {'fromDate': '2025-04-15', 'toDate': '2025-04-17', **params}


class ChannelMetricsViewTest(AnalyticsViewTestCase):
    def setUp(self):
        self.url = reverse('email_metrics')

    def test_requires_authentication(self):
        response = self.client.get(self.url, self.window(accountId=self.email_client.pk))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_client_reads_own_account(self):
        self.client.force_authenticate(self.client_user)
        response = self.client.get(self.url, self.window(accountId=self.email_client.pk))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        current = response.data['metrics']['current']
        self.assertEqual(current['delivered'], 14968)
        self.assertEqual(current['opens'], 5655)
        self.assertEqual(current['openRate'], 37.78)
        self.assertIn('yearOverYear', response.data['metrics'])
        self.assertEqual(response.data['topCampaigns'][0]['campaignName'], 'Spring Sale')

    def test_rep_names_the_client(self):
        self.client.force_authenticate(self.rep)
        response = self.client.get(self.url, self.window(accountId=self.email_client.pk, clientUserId=self.client_user.pk))
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_admin_must_name_the_client(self):
        self.client.force_authenticate(self.admin)
        response = self.client.get(self.url, self.window(accountId=self.email_client.pk))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['code'], 'INVALID_QUERY')

    def test_malformed_dates_are_400(self):
        self.client.force_authenticate(self.client_user)
        for params in [
            {'fromDate': '04/15/2025', 'toDate': '2025-04-17'},
            {'fromDate': '2025-04-15'},
            {'fromDate': '2025-04-17', 'toDate': '2025-04-15'},
        ]:
            with self.subTest(params=params):
                response = self.client.get(self.url, {'accountId': self.email_client.pk, **params})
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data['code'], 'INVALID_RANGE')

    def test_non_numeric_account_is_400(self):
        self.client.force_authenticate(self.client_user)
        response = self.client.get(self.url, self.window(accountId='abc'))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('accountId', response.data['details'])

    def test_someone_elses_account_is_404(self):
        self.client.force_authenticate(self.other_client)
        response = self.client.get(self.url, self.window(accountId=self.email_client.pk))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'error': 'Account not found', 'code': 'ACCOUNT_NOT_ACCESSIBLE'})

    def test_other_channels_are_routed(self):
        self.client.force_authenticate(self.client_user)
        response = self.client.get(reverse('direct_mail_metrics'), self.window(accountId=self.usps_client.pk))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['channel'], 'direct_mail')
        self.assertEqual(response.data['metrics']['current']['deliveryRate'], 80.0)

    def test_unexpected_errors_propagate(self):
        self.client.force_authenticate(self.client_user)
        self.client.raise_request_exception = True
        with mock.patch('apps.analytics.services.CHANNEL_FETCHERS', {'email': mock.Mock(side_effect=RuntimeError('db down'))}):
            with self.assertRaises(RuntimeError):
                self.client.get(self.url, self.window(accountId=self.email_client.pk))


class OverviewViewTest(AnalyticsViewTestCase):
    def test_partial_overview(self):
        self.client.force_authenticate(self.client_user)
        response = self.client.get(reverse('channel_overview'), self.window())

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        channels = response.data['channels']
        self.assertEqual(list(channels), ['email', 'direct_mail', 'paid_social', 'paid_search'])
        self.assertIsNotNone(channels['email'])
        self.assertIsNotNone(channels['direct_mail'])
        self.assertIsNone(channels['paid_social'])
        self.assertEqual(response.data['summary']['channelsReporting'], 2)

    def test_rep_cannot_see_unassigned_client(self):
        self.client.force_authenticate(self.rep)
        response = self.client.get(reverse('channel_overview'), self.window(clientUserId=self.other_client.pk))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class CampaignAggregationViewTest(AnalyticsViewTestCase):
    def test_joined_rows(self):
        self.client.force_authenticate(self.client_user)
        response = self.client.get(reverse('campaign_aggregation'), self.window(
            emailClientId=self.email_client.pk, uspsClientId=self.usps_client.pk,
        ))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        [row] = response.data['campaigns']
        self.assertEqual(row['campaignName'], 'Spring Sale')
        self.assertEqual(row['emailsSent'], 14968)
        self.assertEqual(row['uspsPiecesDelivered'], 400)

    def test_both_accounts_required(self):
        self.client.force_authenticate(self.client_user)
        response = self.client.get(reverse('campaign_aggregation'), self.window(emailClientId=self.email_client.pk))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('uspsClientId', response.data['details'])


class BoundAccountsViewTest(AnalyticsViewTestCase):
    def test_lists_accounts(self):
        self.client.force_authenticate(self.client_user)
        response = self.client.get(reverse('bound_accounts'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['accounts']['email'], [{'id': self.email_client.pk, 'name': 'Acme ESP'}])
        self.assertEqual(response.data['accounts']['web'], [])


class ReportViewTest(AnalyticsViewTestCase):
    def test_queues_report(self):
        self.client.force_authenticate(self.client_user)
        response = self.client.post(reverse('channel_reports'), self.window(), format='json')

        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(response.data['status'], 'queued')
        self.assertTrue(response.data['task_id'])

    def test_access_checked_before_queueing(self):
        self.client.force_authenticate(self.other_client)
        with mock.patch('apps.analytics.views.generate_channel_report') as task:
            response = self.client.post(
                reverse('channel_reports'), self.window(clientUserId=self.client_user.pk), format='json',
            )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        task.delay.assert_not_called()
