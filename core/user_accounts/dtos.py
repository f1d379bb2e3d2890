"""
Data Transfer Objects for user accounts.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class UserRegisterDTO:
    """DTO for self-service sign-up"""
    email: str
    name: str
    password: str


@dataclass
class ProfileUpdateDTO:
    """DTO for a member updating their own profile"""
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass
class PasswordChangeDTO:
    current_password: str
    new_password: str
