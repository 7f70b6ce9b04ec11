# backend/contact/service.py
import logging
from pathlib import Path

from email_validator import validate_email, EmailNotValidError

from shared.exceptions import AppError, DeliveryError, ValidationError
from .models import ContactMessage
from .templates import LOGO_CID, render_contact_email, contact_subject

LOG = logging.getLogger("contact.service")

SUCCESS_MESSAGE = "Email sent successfully."


class ContactNotifier:
    """Relays contact form submissions to the operator inbox."""

    def __init__(self, mailer, settings):
        self.mailer = mailer
        self.inbox = settings.CONTACT_INBOX
        self.logo_path = Path(settings.LOGO_PATH) if settings.LOGO_PATH else None

    def _require(self, value):
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(body_key="error")
        return value.strip()

    def _logo(self) -> list:
        if not self.logo_path:
            return []
        try:
            return [{"name": LOGO_CID, "content": self.logo_path.read_bytes()}]
        except OSError:
            LOG.warning(f"⚠️ Logo not found at {self.logo_path}, sending without it")
            return []

    @staticmethod
    def _reply_to(name: str, email: str):
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return None
        return {"email": email, "name": name}

    # =====================================================
    # 🔹 Send contact email
    # =====================================================
    def send_contact(self, data: ContactMessage) -> dict:
        name = self._require(data.name)
        email = self._require(data.email)
        message = self._require(data.message)

        html = render_contact_email(name, email, message)
        try:
            self.mailer.send(
                self.inbox,
                contact_subject(name),
                html,
                reply_to=self._reply_to(name, email),
                attachments=self._logo(),
            )
        except AppError:
            raise
        except Exception:
            LOG.exception("❌ Error sending contact email")
            raise DeliveryError()

        LOG.info(f"📬 Contact message from {email} relayed to operator inbox")
        return {"message": SUCCESS_MESSAGE}
