# backend/contact/mailer.py
import base64
import logging
from typing import List, Optional

import requests

from shared.exceptions import DeliveryError

LOG = logging.getLogger("contact.mailer")

BREVO_URL = "https://api.brevo.com/v3/smtp/email"


class BrevoMailer:
    """Sends transactional mail through the Brevo relay API.

    The relay account (``sender_email``) is fixed; callers only choose the
    recipient, subject, body, reply-to and attachments.
    """

    def __init__(self, api_key: str, sender_email: str, sender_name: str = "Virtua Mod Contact",
                 timeout: int = 15, url: str = BREVO_URL):
        self.api_key = api_key
        self.sender_email = sender_email
        self.sender_name = sender_name
        self.timeout = timeout
        self.url = url

    @classmethod
    def from_settings(cls, settings) -> "BrevoMailer":
        return cls(settings.BREVO_API_KEY, settings.EMAIL_USER, timeout=settings.MAIL_TIMEOUT)

    def build_payload(self, to_email: str, subject: str, html: str,
                      reply_to: Optional[dict] = None, attachments: Optional[List[dict]] = None) -> dict:
        payload = {
            "sender": {"name": self.sender_name, "email": self.sender_email},
            "to": [{"email": to_email}],
            "subject": subject,
            "htmlContent": html,
        }
        if reply_to:
            payload["replyTo"] = reply_to
        if attachments:
            payload["attachment"] = [
                {"name": a["name"], "content": base64.b64encode(a["content"]).decode("ascii")}
                for a in attachments
            ]
        return payload

    # =====================================================
    # 🔹 Send
    # =====================================================
    def send(self, to_email: str, subject: str, html: str,
             reply_to: Optional[dict] = None, attachments: Optional[List[dict]] = None) -> str:
        """Returns the relay message id; raises DeliveryError on any failure."""
        if not self.api_key or not self.sender_email or not to_email:
            LOG.error("❌ Mail relay not configured (BREVO_API_KEY / EMAIL_USER missing)")
            raise DeliveryError()

        headers = {
            "accept": "application/json",
            "api-key": self.api_key,
            "content-type": "application/json",
        }
        payload = self.build_payload(to_email, subject, html, reply_to, attachments)
        try:
            resp = requests.post(self.url, headers=headers, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            LOG.error(f"❌ Mail relay unreachable: {e}")
            raise DeliveryError()

        if not 200 <= resp.status_code < 300:
            LOG.error(f"❌ Mail relay rejected message: {resp.status_code} -> {resp.text}")
            raise DeliveryError()

        try:
            message_id = resp.json().get("messageId", "")
        except ValueError:
            message_id = ""
        LOG.info(f"📨 Mail accepted by relay for {to_email} ({message_id})")
        return message_id
