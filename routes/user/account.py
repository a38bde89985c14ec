"""
User account routes
"""
from flask import Blueprint, jsonify
from models.user import User
from utils.auth_utils import token_required

account_bp = Blueprint('user_account', __name__, url_prefix='/users')

@account_bp.route('/<email>', methods=['GET'])
@token_required
def get_user(email):
    """Role and premium status for the dashboard (null if unknown)"""
    user = User.query.filter_by(email=email.strip().lower()).first()
    return jsonify(user.to_dict() if user else None)
