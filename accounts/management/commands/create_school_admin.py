"""
Management command to create a school and its first admin user.
"""
from django.core.management.base import BaseCommand, CommandError

from accounts.models import User
from schools.models import School


class Command(BaseCommand):
    help = 'Creates a school (if missing) and an admin user for it'

    def add_arguments(self, parser):
        parser.add_argument('--school-code', required=True)
        parser.add_argument('--school-name', default='')
        parser.add_argument('--email', required=True)
        parser.add_argument('--password', required=True)
        parser.add_argument('--first-name', default='School')
        parser.add_argument('--last-name', default='Admin')

    def handle(self, *args, **options):
        code = options['school_code'].strip()
        if not code:
            raise CommandError('School code must not be empty.')

        school, created = School.objects.get_or_create(
            code=code,
            defaults={'name': options['school_name'] or code},
        )
        if created:
            self.stdout.write(self.style.SUCCESS(f'School {school.code} created.'))

        email = options['email']
        if User.objects.filter(email=email).exists():
            self.stdout.write(self.style.WARNING(f'User {email} already exists.'))
            return

        User.objects.create_user(
            email=email,
            password=options['password'],
            first_name=options['first_name'],
            last_name=options['last_name'],
            role='admin',
            school=school,
        )

        self.stdout.write(self.style.SUCCESS('School admin created successfully!'))
        self.stdout.write(f'School: {school.name} ({school.code})')
        self.stdout.write(f'Email: {email}')
