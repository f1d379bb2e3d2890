"""
Data Transfer Objects for content pages.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class PageCreateDTO:
    slug: str
    title: str
    content: str
    meta_title: str = ''
    meta_description: str = ''
    is_published: bool = False


@dataclass
class PageUpdateDTO:
    """Partial update; None means unchanged"""
    page_id: int
    slug: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    is_published: Optional[bool] = None
