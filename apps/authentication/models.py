from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    ROLE_ADMIN = 'admin'
    ROLE_ACCOUNT_REP = 'account_rep'
    ROLE_CLIENT = 'client'
    ROLE_CHOICES = [
        (ROLE_ADMIN, 'Admin'),
        (ROLE_ACCOUNT_REP, 'Account rep'),
        (ROLE_CLIENT, 'Client'),
    ]

    email = models.EmailField(unique=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_CLIENT, db_index=True)
    company_name = models.CharField(max_length=255, blank=True)
    # Only meaningful for clients: the rep whose book of business they belong to.
    account_rep = models.ForeignKey(
        'self',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='clients',
        limit_choices_to={'role': ROLE_ACCOUNT_REP},
    )

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']

    @property
    def is_kirk_admin(self):
        return self.role == self.ROLE_ADMIN

    @property
    def is_account_rep(self):
        return self.role == self.ROLE_ACCOUNT_REP

    @property
    def is_client(self):
        return self.role == self.ROLE_CLIENT

    def __str__(self):
        return self.email
