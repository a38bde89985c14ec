"""
Who may see a biodata's contact email and mobile number.
"""
from flask import current_app

from models import db
from models.contact_request import ContactRequest


def contact_visibility(user):
    """
    Return a biodata -> bool check for one caller.

    Owner and admins always may see contact details; anyone else needs an
    approved contact request for that biodata. The caller's approved
    requests are read once, so the check can be applied to a whole page.
    Without REDACT_CONTACT_DETAILS everything is disclosed.
    """
    if not current_app.config.get('REDACT_CONTACT_DETAILS'):
        return lambda biodata: True
    if user is None or not user.is_authenticated:
        return lambda biodata: False
    if user.is_admin:
        return lambda biodata: True

    approved_ids = {
        biodata_id for (biodata_id,) in db.session.query(ContactRequest.biodata_id).filter_by(
            requester_email=user.email,
            status='approved',
        )
    }
    return lambda biodata: biodata.user_email == user.email or biodata.biodata_id in approved_ids


def can_view_contact(user, biodata):
    return contact_visibility(user)(biodata)
