"""Caller access scopes.

Every analytics read runs under exactly one scope, derived from the
authenticated user's role. The scope answers a single question: may this
caller see data belonging to a given client user?
"""
from dataclasses import dataclass
from typing import Union

from .models import User


@dataclass(frozen=True)
class AdminScope:
    role = User.ROLE_ADMIN

    def permits_client(self, client):
        return True

    def clients(self):
        return User.objects.filter(role=User.ROLE_CLIENT)


@dataclass(frozen=True)
class AccountRepScope:
    rep_id: int
    role = User.ROLE_ACCOUNT_REP

    def permits_client(self, client):
        return client.account_rep_id == self.rep_id

    def clients(self):
        return User.objects.filter(role=User.ROLE_CLIENT, account_rep_id=self.rep_id)


@dataclass(frozen=True)
class ClientScope:
    client_id: int
    role = User.ROLE_CLIENT

    def permits_client(self, client):
        return client.pk == self.client_id

    def clients(self):
        return User.objects.filter(role=User.ROLE_CLIENT, pk=self.client_id)


AccessScope = Union[AdminScope, AccountRepScope, ClientScope]


def scope_for_user(user) -> AccessScope:
    if user.role == User.ROLE_ADMIN:
        return AdminScope()
    if user.role == User.ROLE_ACCOUNT_REP:
        return AccountRepScope(rep_id=user.pk)
    if user.role == User.ROLE_CLIENT:
        return ClientScope(client_id=user.pk)
    raise ValueError(f"User {user.pk} has unknown role {user.role!r}")
