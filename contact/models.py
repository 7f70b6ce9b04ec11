# backend/contact/models.py
from typing import Any
from pydantic import BaseModel

class ContactMessage(BaseModel):
    """Raw contact form body; required-field checks happen in the notifier."""
    name: Any = None
    email: Any = None
    message: Any = None
