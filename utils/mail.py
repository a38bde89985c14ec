"""
Email utility functions
"""
from flask_mail import Mail, Message
from flask import current_app

mail = Mail()


def _ensure_mail_configured():
    if not current_app.config.get('MAIL_SERVER'):
        raise RuntimeError("MAIL_SERVER not configured. Please set MAIL_SERVER environment variable.")


def send_email(subject, recipients, body, html=None):
    """
    Send an email

    Args:
        subject: Email subject
        recipients: List of recipient email addresses
        body: Plain text body
        html: HTML body (optional)
    """
    _ensure_mail_configured()
    msg = Message(
        subject=subject,
        recipients=recipients,
        body=body,
        html=html
    )
    try:
        mail.send(msg)
    except Exception as e:
        current_app.logger.error(f"SMTP error sending '{subject}' to {', '.join(recipients)}: {str(e)}", exc_info=True)
        raise


def send_contact_request_approved_email(contact_request):
    """Tell the requester their contact request was approved, with the unlocked details."""
    subject = f"Contact details for biodata #{contact_request.biodata_id} - Soulmate"
    body = f"""
Hello,

Your contact request for biodata #{contact_request.biodata_id} has been approved.

Name: {contact_request.biodata_name or '-'}
Email: {contact_request.biodata_email or '-'}
Mobile: {contact_request.biodata_phone or '-'}

Best regards,
Soulmate Team
"""
    send_email(subject, [contact_request.requester_email], body)


def send_premium_approved_email(user, biodata):
    """Confirm a premium upgrade to the account owner."""
    subject = "Your biodata is now premium - Soulmate"
    body = f"""
Hello {user.name or user.email},

Your request to make biodata #{biodata.biodata_id} premium has been approved.
Premium biodatas are highlighted to other members.

Best regards,
Soulmate Team
"""
    send_email(subject, [user.email], body)
