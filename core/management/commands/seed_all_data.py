"""
Management command to seed the database with the default data of a fresh
installation: accounts, settings, system pages, demo events and a small
cafeteria catalog. Existing rows are left untouched, so it can be re-run.

Usage: python manage.py seed_all_data
"""
from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from cafeteria.models import Product, ProductCategory
from content.models import Page
from core.permissions.core_config import Roles
from core.site_settings.services import SettingsService
from core.user_accounts.models import User
from events.models import Event

DEFAULT_ACCOUNTS = [
    {'email': 'admin@asso.local', 'name': 'Administrator', 'password': 'admin123', 'role': Roles.ADMIN},
    {'email': 'member@asso.local', 'name': 'Test Member', 'password': 'member123', 'role': Roles.MEMBER},
]

SYSTEM_PAGES = [
    {
        'slug': 'home',
        'title': 'Home',
        'content': "<h1>Welcome</h1><p>Home page content, editable from the back office.</p>",
    },
    {
        'slug': 'presentation',
        'title': 'About us',
        'content': "<h1>Who we are</h1><p>Introduce the association here.</p>",
    },
    {
        'slug': 'team',
        'title': 'Our team',
        'content': "<h1>The team</h1><p>Introduce your team here.</p>",
    },
    {
        'slug': 'legal',
        'title': 'Legal notice',
        'content': "<h1>Legal notice</h1><p>Legal notice to complete.</p>",
    },
    {
        'slug': 'privacy',
        'title': 'Privacy policy',
        'content': "<h1>Privacy policy</h1><p>Data protection information to complete.</p>",
    },
]

DEMO_EVENTS = [
    {
        'title': 'Welcome party',
        'description': "<p>Our yearly welcome party: meet the members, games and buffet.</p>",
        'days_ahead': 14,
        'location': 'Main hall',
        'is_published': True,
    },
    {
        'title': 'Pizza sale',
        'description': "<p>Pizza sale to fund our projects. Order in advance!</p>",
        'days_ahead': 30,
        'location': 'Entrance hall',
        'is_published': True,
    },
    {
        'title': 'General assembly',
        'description': "<p>Yearly general assembly. Every member is invited.</p>",
        'days_ahead': 60,
        'location': 'Lecture hall A',
        'is_published': False,
    },
]

DEMO_CATALOG = {
    'Hot drinks': [
        ('Coffee', Decimal('1.00'), Decimal('0.30'), 40),
        ('Tea', Decimal('0.80'), Decimal('0.20'), 30),
    ],
    'Snacks': [
        ('Croissant', Decimal('1.20'), Decimal('0.50'), 20),
        ('Chocolate bar', Decimal('1.50'), Decimal('0.70'), 3),
    ],
}


class Command(BaseCommand):
    help = 'Seeds the database with default accounts, settings, pages, events and catalog'

    def add_arguments(self, parser):
        parser.add_argument(
            '--no-demo',
            action='store_true',
            help='Only seed accounts, settings and system pages',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING('Seeding default data...'))

        for account in DEFAULT_ACCOUNTS:
            self._seed_account(**account)

        created = SettingsService.seed_defaults()
        self.stdout.write(f"  Settings: {created} created")

        for page in SYSTEM_PAGES:
            _, was_created = Page.objects.get_or_create(
                slug=page['slug'],
                defaults={'title': page['title'], 'content': page['content'], 'is_published': True},
            )
            if was_created:
                self.stdout.write(f"  Page created: {page['slug']}")

        if not options['no_demo']:
            self._seed_events()
            self._seed_catalog()

        self.stdout.write(self.style.SUCCESS('\n' + '=' * 60))
        self.stdout.write(self.style.SUCCESS('SEEDING COMPLETED'))
        self.stdout.write(self.style.SUCCESS('=' * 60))
        for account in DEFAULT_ACCOUNTS:
            self.stdout.write(self.style.SUCCESS(
                f"  {account['role']}: {account['email']} / {account['password']}"
            ))

    def _seed_account(self, email, name, password, role):
        if User.objects.filter(email=email).exists():
            return
        User.objects.create_user(email=email, name=name, password=password, role=role)
        self.stdout.write(f"  Account created: {email}")

    def _seed_events(self):
        now = timezone.now()
        for event in DEMO_EVENTS:
            if Event.objects.filter(title=event['title']).exists():
                continue
            Event.objects.create(
                title=event['title'],
                description=event['description'],
                date=(now + timedelta(days=event['days_ahead'])).replace(hour=18, minute=0, second=0, microsecond=0),
                location=event['location'],
                is_published=event['is_published'],
            )
            self.stdout.write(f"  Event created: {event['title']}")

    def _seed_catalog(self):
        for order, (category_name, products) in enumerate(DEMO_CATALOG.items()):
            category, _ = ProductCategory.objects.get_or_create(
                name=category_name,
                defaults={'display_order': order},
            )
            for name, price, cost_price, stock in products:
                _, was_created = Product.objects.get_or_create(
                    name=name,
                    defaults={
                        'category': category,
                        'price': price,
                        'cost_price': cost_price,
                        'stock': stock,
                    },
                )
                if was_created:
                    self.stdout.write(f"  Product created: {name}")
