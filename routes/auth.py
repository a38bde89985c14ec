"""
Authentication routes: exchange a signed-in identity for a bearer token
"""
from flask import Blueprint, jsonify, current_app
from models import db
from models.user import User
from schemas import TokenRequest, parse_json
from utils.auth_utils import create_access_token

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')

@auth_bp.route('/jwt', methods=['POST'])
def issue_token():
    """Issue a 1-hour token; creates the user on first sign-in"""
    payload = parse_json(TokenRequest)

    user = User.query.filter_by(email=payload.email).first()
    if not user:
        try:
            user = User(
                email=payload.email,
                name=payload.name,
                photo_url=payload.photo_url,
            )
            db.session.add(user)
            db.session.commit()
            current_app.logger.info("Created user %s on first sign-in", payload.email)
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(f"Failed to create user {payload.email}: {str(e)}", exc_info=True)
            return jsonify({'message': 'Error creating user'}), 500

    return jsonify({'token': create_access_token(user.email)})
