"""
Data Transfer Objects for the events domain.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class EventCreateDTO:
    title: str
    description: str
    date: datetime
    location: str
    image: str = ''
    payment_link: str = ''
    is_published: bool = False


@dataclass
class EventUpdateDTO:
    """Partial update; None means unchanged"""
    event_id: int
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    location: Optional[str] = None
    image: Optional[str] = None
    payment_link: Optional[str] = None
    is_published: Optional[bool] = None


@dataclass
class PhotoCreateDTO:
    event_id: int
    url: str
    caption: str = ''
