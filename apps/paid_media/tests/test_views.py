from rest_framework import status
from rest_framework.test import APITestCase

from apps.authentication.models import User
from apps.paid_media.models import PaidSearchAccount, PaidSocialAccount


class PaidMediaViewSetTest(APITestCase):
    @classmethod
    def setUpTestData(cls):
        cls.admin = User.objects.create_user(
            username='admin', email='admin@kirk.io', password='testpass123', role=User.ROLE_ADMIN,
        )
        cls.client_user = User.objects.create_user(
            username='acme', email='client@acme.com', password='testpass123',
        )

    def setUp(self):
        self.client.force_authenticate(self.admin)

    def test_create_social_account(self):
        response = self.client.post('/api/v1/paid-social-accounts/', {
            'name': 'Acme Meta', 'platform': 'instagram', 'users': [self.client_user.pk],
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(PaidSocialAccount.objects.get().platform, 'instagram')

    def test_search_customer_id_validation(self):
        bad = self.client.post('/api/v1/paid-search-accounts/', {'name': 'Acme', 'customer_id': '12a-456'}, format='json')
        good = self.client.post('/api/v1/paid-search-accounts/', {'name': 'Acme', 'customer_id': '123-456-7890'}, format='json')

        self.assertEqual(bad.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(good.status_code, status.HTTP_201_CREATED)
        self.assertEqual(PaidSearchAccount.objects.count(), 1)
