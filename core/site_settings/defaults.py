"""
Default site settings.

Seeded by ``manage.py seed_all_data`` and used as fallback values when a
row is missing from the table.
"""


class SettingGroups:
    GENERAL = 'general'
    APPEARANCE = 'appearance'
    SOCIAL = 'social'
    FEATURES = 'features'
    CAFETERIA = 'cafeteria'
    PAYMENTS = 'payments'


# Groups exposed on the public site configuration endpoint
PUBLIC_GROUPS = (
    SettingGroups.GENERAL,
    SettingGroups.APPEARANCE,
    SettingGroups.SOCIAL,
    SettingGroups.FEATURES,
    SettingGroups.CAFETERIA,
)

DEFAULT_SETTINGS = [
    {'key': 'site_name', 'value': 'My Association', 'label': 'Site name', 'group': 'general', 'type': 'text'},
    {'key': 'site_description', 'value': 'Welcome to our association website', 'label': 'Site description', 'group': 'general', 'type': 'textarea'},
    {'key': 'contact_email', 'value': 'contact@asso.fr', 'label': 'Contact email', 'group': 'general', 'type': 'email'},
    {'key': 'contact_address', 'value': '', 'label': 'Address', 'group': 'general', 'type': 'textarea'},
    {'key': 'logo_url', 'value': '', 'label': 'Logo URL', 'group': 'appearance', 'type': 'image'},
    {'key': 'hero_image', 'value': '', 'label': 'Home page image', 'group': 'appearance', 'type': 'image'},
    {'key': 'social_facebook', 'value': '', 'label': 'Facebook', 'group': 'social', 'type': 'url'},
    {'key': 'social_instagram', 'value': '', 'label': 'Instagram', 'group': 'social', 'type': 'url'},
    {'key': 'social_twitter', 'value': '', 'label': 'Twitter', 'group': 'social', 'type': 'url'},
    {'key': 'social_linkedin', 'value': '', 'label': 'LinkedIn', 'group': 'social', 'type': 'url'},
    {'key': 'social_discord', 'value': '', 'label': 'Discord', 'group': 'social', 'type': 'url'},
    {'key': 'registration_open', 'value': 'true', 'label': 'Registrations open', 'group': 'features', 'type': 'boolean'},
    {'key': 'orders_enabled', 'value': 'true', 'label': 'Orders enabled', 'group': 'features', 'type': 'boolean'},
    {'key': 'maintenance_mode', 'value': 'false', 'label': 'Maintenance mode', 'group': 'features', 'type': 'boolean'},
    {'key': 'cafeteria_hours', 'value': '10h00 - 14h00', 'label': 'Cafeteria hours', 'group': 'cafeteria', 'type': 'text'},
    {'key': 'cafeteria_message', 'value': '', 'label': 'Cafeteria message', 'group': 'cafeteria', 'type': 'textarea'},
    {'key': 'default_sumup_link', 'value': '', 'label': 'Default SumUp payment link', 'group': 'payments', 'type': 'url'},
]

DEFAULTS_BY_KEY = {entry['key']: entry for entry in DEFAULT_SETTINGS}
