# backend/contact/routes.py
from fastapi import APIRouter, Depends, Request

from .models import ContactMessage
from .service import ContactNotifier

router = APIRouter()


def get_contact_notifier(request: Request) -> ContactNotifier:
    return request.app.state.contact_notifier

# ------------------------------------------------------------
# 🔹 Contact form
# ------------------------------------------------------------
@router.post("/send-contact-email", summary="Relay a contact form submission")
def send_contact_email(data: ContactMessage, notifier: ContactNotifier = Depends(get_contact_notifier)):
    return notifier.send_contact(data)
