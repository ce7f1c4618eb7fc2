"""
Management command to create default admin user.
"""

from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = 'Create default admin user (admin / changeme123) if no users exist'

    def add_arguments(self, parser):
        parser.add_argument(
            '--force',
            action='store_true',
            help='Reset admin password even if users exist',
        )
        parser.add_argument(
            '--username',
            type=str,
            default='admin',
            help='Admin username (default: admin)',
        )
        parser.add_argument(
            '--password',
            type=str,
            default='changeme123',
            help='Admin password (default: changeme123)',
        )

    def handle(self, *args, **options):
        from infradesk.accounts.models import User

        username = options['username']
        password = options['password']

        if User.objects.exists() and not options['force']:
            self.stdout.write(
                self.style.WARNING('Users already exist. Use --force to reset admin password.')
            )
            return

        user, created = User.objects.get_or_create(
            username=username,
            defaults={
                'is_staff': True,
                'is_superuser': True,
                'is_active': True,
                'role': User.Role.ADMIN,
                'full_name': 'Administrator',
            }
        )
        if not created:
            user.is_staff = True
            user.is_superuser = True
            user.is_active = True
            user.role = User.Role.ADMIN

        user.set_password(password)
        user.save()

        verb = 'Created default' if created else 'Reset'
        self.stdout.write(self.style.SUCCESS(f'{verb} admin user: {username}'))
        self.stdout.write(self.style.WARNING('Change the default password immediately!'))
