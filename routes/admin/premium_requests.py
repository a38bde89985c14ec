"""
Admin premium request routes
"""
from datetime import datetime

from flask import Blueprint, jsonify, current_app
from models import db
from models.biodata import Biodata
from models.premium_request import PremiumRequest
from models.user import User
from schemas import PageParams, parse_args
from utils.auth_utils import admin_required
from utils.pagination import paginate_query, list_response

admin_premium_requests_bp = Blueprint('admin_premium_requests', __name__, url_prefix='/admin')

@admin_premium_requests_bp.route('/premium-requests')
@admin_required
def premium_requests():
    """Pending premium requests, oldest first"""
    params = parse_args(PageParams)
    query = PremiumRequest.query.filter_by(status='pending').order_by(
        PremiumRequest.created_at.asc(), PremiumRequest.id.asc()
    )
    items, total = paginate_query(query, params.page, params.limit)
    return list_response(items, total, params.page, params.limit)

@admin_premium_requests_bp.route('/premium-request/approve/<int:request_id>', methods=['PATCH'])
@admin_required
def approve_premium_request(request_id):
    """
    Approve a premium request.

    The request row is locked, then the request status, User.is_premium and
    Biodata.is_premium are written in one commit: either all three change or
    none do. If the user or biodata the request points at no longer exists,
    nothing is written and 409 is returned; the same holds when the user is
    not the biodata owner.
    """
    premium_request = PremiumRequest.query.filter_by(id=request_id).with_for_update().first()
    if not premium_request:
        db.session.rollback()
        return jsonify({'message': 'Request not found'}), 404

    if premium_request.status == 'approved':
        db.session.rollback()
        return jsonify({'message': 'Request already approved'}), 409

    user = User.query.filter_by(email=premium_request.user_email).first()
    biodata = Biodata.query.filter_by(biodata_id=premium_request.biodata_id).first()
    if not user or not biodata:
        db.session.rollback()
        current_app.logger.warning(
            "Premium request #%s references missing %s; not approved",
            request_id, 'user' if not user else 'biodata'
        )
        return jsonify({'message': 'Premium request references a missing user or biodata'}), 409

    if biodata.user_email != user.email:
        db.session.rollback()
        current_app.logger.warning(
            "Premium request #%s: %s does not own biodata #%s; not approved",
            request_id, user.email, biodata.biodata_id
        )
        return jsonify({'message': 'Premium request user does not own the biodata'}), 409

    premium_request.status = 'approved'
    premium_request.approved_at = datetime.utcnow()
    user.is_premium = True
    biodata.is_premium = True

    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error approving premium request #{request_id}: {str(e)}", exc_info=True)
        return jsonify({'message': 'Error approving premium request'}), 500

    try:
        from utils.mail import send_premium_approved_email
        send_premium_approved_email(user, biodata)
    except Exception as e:
        current_app.logger.error(f"Failed to send premium approval email to {user.email}: {str(e)}", exc_info=True)
        # Don't fail approval if notification fails

    return jsonify({'message': 'Premium Approved', 'request': premium_request.to_dict()})
