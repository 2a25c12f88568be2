from django.test import TestCase

from apps.analytics.exceptions import AccountNotAccessibleError
from apps.authentication.access import AccessGuard
from apps.authentication.models import User
from apps.authentication.scopes import AccountRepScope, AdminScope, ClientScope, scope_for_user
from apps.email_marketing.models import EmailClient
from apps.web_analytics.models import GaProperty


def make_user(email, role=User.ROLE_CLIENT, **extra):
    return User.objects.create_user(username=email.split('@')[0], email=email, password='testpass123', role=role, **extra)


class ScopeForUserTest(TestCase):
    def test_each_role_maps_to_its_scope(self):
        admin = make_user('admin@kirk.io', role=User.ROLE_ADMIN)
        rep = make_user('rep@kirk.io', role=User.ROLE_ACCOUNT_REP)
        client = make_user('client@acme.com', account_rep=rep)

        self.assertEqual(scope_for_user(admin), AdminScope())
        self.assertEqual(scope_for_user(rep), AccountRepScope(rep_id=rep.pk))
        self.assertEqual(scope_for_user(client), ClientScope(client_id=client.pk))

    def test_scoped_client_lists(self):
        rep = make_user('rep@kirk.io', role=User.ROLE_ACCOUNT_REP)
        mine = make_user('mine@acme.com', account_rep=rep)
        make_user('theirs@globex.com')

        self.assertEqual(list(AccountRepScope(rep.pk).clients()), [mine])
        self.assertEqual(AdminScope().clients().count(), 2)
        self.assertEqual(list(ClientScope(mine.pk).clients()), [mine])


class AccessGuardTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.rep = make_user('rep@kirk.io', role=User.ROLE_ACCOUNT_REP)
        cls.client_user = make_user('client@acme.com', account_rep=cls.rep)
        cls.email_client = EmailClient.objects.create(client_name='Acme ESP')
        cls.email_client.users.add(cls.client_user)

    def test_bound_account_is_returned(self):
        account = AccessGuard.check(ClientScope(self.client_user.pk), self.client_user.pk, 'email', self.email_client.pk)
        self.assertEqual(account, self.email_client)

    def test_unbound_and_missing_accounts_look_the_same(self):
        unbound = EmailClient.objects.create(client_name='Unbound')
        for account_id in [unbound.pk, 424242, 'not-a-number']:
            with self.subTest(account_id=account_id), self.assertRaises(AccountNotAccessibleError):
                AccessGuard.check(AdminScope(), self.client_user.pk, 'email', account_id)

    def test_inactive_client_is_not_accessible(self):
        self.client_user.is_active = False
        self.client_user.save()
        with self.assertRaises(AccountNotAccessibleError):
            AccessGuard.client(AdminScope(), self.client_user.pk)

    def test_rep_scope_follows_assignment(self):
        other_rep = make_user('rep2@kirk.io', role=User.ROLE_ACCOUNT_REP)
        with self.assertRaises(AccountNotAccessibleError):
            AccessGuard.check(AccountRepScope(other_rep.pk), self.client_user.pk, 'email', self.email_client.pk)
        self.assertEqual(
            AccessGuard.check(AccountRepScope(self.rep.pk), self.client_user.pk, 'email', self.email_client.pk),
            self.email_client,
        )

    def test_default_account_is_lowest_primary_key(self):
        first = GaProperty.objects.create(property_id='2', display_name='First')
        second = GaProperty.objects.create(property_id='1', display_name='Second')
        second.users.add(self.client_user)
        first.users.add(self.client_user)

        self.assertEqual(AccessGuard.default_account(AdminScope(), self.client_user.pk, 'web'), first)

    def test_default_account_missing(self):
        with self.assertRaises(AccountNotAccessibleError):
            AccessGuard.default_account(AdminScope(), self.client_user.pk, 'direct_mail')

    def test_bound_accounts(self):
        accounts = AccessGuard.bound_accounts(ClientScope(self.client_user.pk), self.client_user.pk)
        self.assertEqual(accounts['email'], [self.email_client])
        self.assertEqual(accounts['paid_search'], [])

    def test_unknown_channel(self):
        with self.assertRaises(ValueError):
            AccessGuard.check(AdminScope(), self.client_user.pk, 'fax', 1)
