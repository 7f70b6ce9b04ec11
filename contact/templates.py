# backend/contact/templates.py
from html import escape

LOGO_CID = "logo.png"

# ============================================================
# 📬 CONTACT EMAIL TEMPLATE
# ============================================================
CONTACT_TEMPLATE = """
  <div style="font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; max-width:600px; margin:auto;
              border:1px solid #e0e0e0; border-radius:16px; padding:30px; background:#ffffff;
              box-shadow: 0 4px 12px rgba(0,0,0,0.05);">
    <div style="text-align:center; margin-bottom:25px;">
      <img src="cid:{logo_cid}" alt="Virtua Mod Logo" style="width:100px; height:100px; object-fit:cover;
           border-radius:50%; margin-bottom:15px; box-shadow: 0 2px 8px rgba(79,70,229,0.3);"/>
      <h2 style="color:#4F46E5; margin-bottom:8px; font-weight:700; font-size:24px;">📬 New Contact Form Submission</h2>
      <p style="color:#6b7280; font-size:15px; margin-top:0; font-weight:500;">from <strong>Virtua Mod</strong> website 🌐</p>
    </div>
    <div style="color:#111827; font-size:16px; line-height:1.6;">
      <p>👤 <strong>Name:</strong> {name}</p>
      <p>📧 <strong>Email:</strong> <a href="mailto:{email}" style="color:#4F46E5; text-decoration:none;">{email}</a></p>
      <p>💬 <strong>Message:</strong></p>
      <p style="background:#f9fafb; padding:20px; border-radius:12px; font-style:italic; color:#374151;
                box-shadow: inset 0 0 5px #e0e0e0;">{message}</p>
    </div>
    <hr style="margin:35px 0; border:none; border-top:1px solid #e5e7eb;" />
    <footer style="text-align:center; font-size:13px; color:#9ca3af; line-height:1.4;">
      <p style="margin:0 0 6px 0;">
        Virtua Mod &nbsp;&bull;&nbsp;
        <a href="mailto:contact@virtuamod.com" style="color:#4F46E5; text-decoration:none;">✉️ contact@virtuamod.com</a> &nbsp;&bull;&nbsp; 📞 +92 300 1234567
      </p>
      <p style="margin:0;">
        <a href="https://www.virtuamod.com" target="_blank" style="color:#4F46E5; text-decoration:none; font-weight:600;">🌍 www.virtuamod.com</a>
      </p>
    </footer>
  </div>
"""


def render_contact_email(name: str, email: str, message: str) -> str:
    """Every user-supplied field is HTML-escaped before it reaches the markup."""
    return CONTACT_TEMPLATE.format(
        logo_cid=LOGO_CID,
        name=escape(name),
        email=escape(email, quote=True),
        message=escape(message).replace("\n", "<br/>"),
    )


def contact_subject(name: str) -> str:
    # header injection guard
    clean = " ".join(name.split())
    return f"Contact Form Submission from {clean}"
