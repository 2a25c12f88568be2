from django.core.management.base import BaseCommand, CommandError
from django.contrib.auth import get_user_model

User = get_user_model()


class Command(BaseCommand):
    help = 'Create an admin, account rep or client user'

    def add_arguments(self, parser):
        parser.add_argument('--email', type=str, required=True)
        parser.add_argument('--password', type=str, required=True)
        parser.add_argument('--username', type=str, required=True)
        parser.add_argument('--role', type=str, default=User.ROLE_CLIENT, choices=[role for role, _ in User.ROLE_CHOICES])
        parser.add_argument('--account-rep', type=str, dest='account_rep', help='Email of the account rep owning this client')
        parser.add_argument('--company', type=str, default='')

    def handle(self, *args, **options):
        email = options['email']
        role = options['role']

        if User.objects.filter(email=email).exists():
            raise CommandError(f'User with email {email} already exists')

        account_rep = None
        if options['account_rep']:
            if role != User.ROLE_CLIENT:
                raise CommandError('Only client users can be assigned an account rep')
            try:
                account_rep = User.objects.get(email=options['account_rep'], role=User.ROLE_ACCOUNT_REP)
            except User.DoesNotExist:
                raise CommandError(f"No account rep with email {options['account_rep']}")

        User.objects.create_user(
            username=options['username'],
            email=email,
            password=options['password'],
            role=role,
            company_name=options['company'],
            account_rep=account_rep,
            is_staff=role == User.ROLE_ADMIN,
        )

        self.stdout.write(
            self.style.SUCCESS(f'Successfully created {role} user {email}')
        )
