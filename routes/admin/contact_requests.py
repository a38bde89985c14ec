"""
Admin contact request routes
"""
from datetime import datetime

from flask import Blueprint, jsonify, current_app
from models import db
from models.contact_request import ContactRequest
from schemas import ContactRequestFilters, parse_args
from utils.auth_utils import admin_required
from utils.pagination import paginate_query, list_response

admin_contact_requests_bp = Blueprint('admin_contact_requests', __name__, url_prefix='/admin')

@admin_contact_requests_bp.route('/contact-requests')
@admin_required
def contact_requests():
    """All contact requests, or only those with ?status=pending|approved"""
    params = parse_args(ContactRequestFilters)
    query = ContactRequest.query
    if params.status:
        query = query.filter_by(status=params.status)
    query = query.order_by(ContactRequest.created_at.desc(), ContactRequest.id.desc())
    items, total = paginate_query(query, params.page, params.limit)
    return list_response(items, total, params.page, params.limit)

@admin_contact_requests_bp.route('/contact-request/approve/<int:request_id>', methods=['PATCH'])
@admin_required
def approve_contact_request(request_id):
    """Approve a contact request; approval is what unlocks the contact details"""
    contact_request = ContactRequest.query.filter_by(id=request_id).with_for_update().first()
    if not contact_request:
        db.session.rollback()
        return jsonify({'message': 'Request not found'}), 404

    if contact_request.status == 'approved':
        db.session.rollback()
        return jsonify({'message': 'Request already approved'}), 409

    contact_request.status = 'approved'
    contact_request.approved_at = datetime.utcnow()
    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error approving contact request #{request_id}: {str(e)}", exc_info=True)
        return jsonify({'message': 'Error approving contact request'}), 500

    try:
        from utils.mail import send_contact_request_approved_email
        send_contact_request_approved_email(contact_request)
    except Exception as e:
        current_app.logger.error(f"Failed to send contact approval email for request #{request_id}: {str(e)}", exc_info=True)
        # Don't fail approval if notification fails

    return jsonify({'message': 'Contact Request Approved', 'request': contact_request.to_dict()})
