"""
Admin user management routes
"""
from flask import Blueprint, jsonify, current_app
from models import db
from models.user import User
from models.biodata import Biodata
from schemas import UserSearchParams, parse_args
from utils.auth_utils import admin_required
from utils.pagination import paginate_query, list_response

customers_bp = Blueprint('admin_customers', __name__, url_prefix='/admin')

@customers_bp.route('/users')
@admin_required
def users():
    """All users, optionally searched by name (case-insensitive)"""
    params = parse_args(UserSearchParams)

    query = User.query
    if params.search:
        query = query.filter(User.name.ilike(f'%{params.search}%'))
    query = query.order_by(User.created_at.desc(), User.id.desc())

    items, total = paginate_query(query, params.page, params.limit)
    return list_response(items, total, params.page, params.limit)

@customers_bp.route('/users/admin/<int:user_id>', methods=['PATCH'])
@admin_required
def make_admin(user_id):
    """Promote a user to admin"""
    user = db.get_or_404(User, user_id, description='User not found')
    user.role = 'admin'
    try:
        db.session.commit()
        current_app.logger.info("User %s promoted to admin", user.email)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error promoting user #{user_id}: {str(e)}", exc_info=True)
        return jsonify({'message': 'Server Error'}), 500
    return jsonify({'message': 'User made admin', 'user': user.to_dict()})

@customers_bp.route('/users/premium/<int:user_id>', methods=['PATCH'])
@admin_required
def make_premium(user_id):
    """Grant premium directly; the user's biodata (if any) is updated in the same commit"""
    user = db.get_or_404(User, user_id, description='User not found')
    user.is_premium = True
    biodata = Biodata.query.filter_by(user_email=user.email).first()
    if biodata:
        biodata.is_premium = True
    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error granting premium to user #{user_id}: {str(e)}", exc_info=True)
        return jsonify({'message': 'Server Error'}), 500
    return jsonify({'message': 'User made premium', 'user': user.to_dict()})
