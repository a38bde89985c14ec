"""
Requester-side contact request routes
"""
from flask import Blueprint, jsonify, current_app
from models import db
from models.contact_request import ContactRequest
from schemas import PageParams, parse_args
from utils.auth_utils import token_required
from utils.pagination import paginate_query, list_response

contact_requests_bp = Blueprint('user_contact_requests', __name__, url_prefix='/users/contact-requests')

@contact_requests_bp.route('/<email>', methods=['GET'])
@token_required
def my_contact_requests(email):
    """Contact requests made by one requester, newest first"""
    params = parse_args(PageParams)
    query = ContactRequest.query.filter_by(requester_email=email.strip().lower()).order_by(
        ContactRequest.created_at.desc(), ContactRequest.id.desc()
    )
    items, total = paginate_query(query, params.page, params.limit)
    return list_response(items, total, params.page, params.limit)

@contact_requests_bp.route('/<int:request_id>', methods=['DELETE'])
@token_required
def delete_contact_request(request_id):
    """Delete a contact request; reports success even when it was already gone"""
    try:
        ContactRequest.query.filter_by(id=request_id).delete()
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting contact request #{request_id}: {str(e)}", exc_info=True)
        return jsonify({'message': 'Server Error'}), 500
    return jsonify({'message': 'Request deleted'})
