# schemas/base/contact.py
from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common_validators import Email, Phone, Url
from .model import EMISModel


class ContactInfo(EMISModel):
    email: Optional[Email] = None
    phone: Optional[Phone] = None
    secondary_phone: Optional[Phone] = None
    website: Optional[Url] = None  # "" is accepted as "no website"
    fax: Optional[str] = Field(None, max_length=20)


class RequiredContactInfo(EMISModel):
    """Contact block for entities that must be reachable by email and phone."""
    email: Email
    phone: Phone
    secondary_phone: Optional[Phone] = None
    website: Optional[Url] = None
    fax: Optional[str] = Field(None, max_length=20)
