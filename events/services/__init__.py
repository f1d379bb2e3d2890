"""
Events Domain Services

Services:
- EventService: Event lifecycle and publication
- RegistrationService: Member registrations
- PhotoService: Event photo gallery
"""

from .event_service import EventService
from .registration_service import RegistrationService
from .photo_service import PhotoService

__all__ = [
    'EventService',
    'RegistrationService',
    'PhotoService',
]
