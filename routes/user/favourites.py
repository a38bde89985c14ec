"""
User favourites routes
"""
from flask import Blueprint, jsonify, current_app
from models import db
from models.biodata import Biodata
from models.favourite import Favourite
from schemas import FavouriteInput, PageParams, parse_args, parse_json
from sqlalchemy.exc import IntegrityError
from utils.auth_utils import token_required
from utils.pagination import paginate_query, list_response

favourites_bp = Blueprint('user_favourites', __name__, url_prefix='/users/favourites')

@favourites_bp.route('/<email>', methods=['GET'])
@token_required
def list_favourites(email):
    """Favourites of one user, newest first"""
    params = parse_args(PageParams)
    query = Favourite.query.filter_by(user_email=email.strip().lower()).order_by(
        Favourite.created_at.desc(), Favourite.id.desc()
    )
    items, total = paginate_query(query, params.page, params.limit)
    return list_response(items, total, params.page, params.limit)

@favourites_bp.route('', methods=['POST'])
@token_required
def add_favourite():
    """Bookmark a biodata; the (user, biodata) pair is unique"""
    payload = parse_json(FavouriteInput)

    biodata = Biodata.query.filter_by(biodata_id=payload.biodata_id).first()
    if not biodata:
        return jsonify({'message': 'Biodata not found'}), 404

    exists = Favourite.query.filter_by(
        user_email=payload.user_email,
        biodata_id=payload.biodata_id
    ).first()
    if exists:
        return jsonify({'message': 'Already in favourites'}), 409

    favourite = Favourite(
        user_email=payload.user_email,
        biodata_id=payload.biodata_id,
        name=payload.name or biodata.name,
        permanent_address=payload.permanent_address or biodata.permanent_division,
        occupation=payload.occupation or biodata.occupation,
    )
    try:
        db.session.add(favourite)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return jsonify({'message': 'Already in favourites'}), 409
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error adding favourite {payload.biodata_id} for {payload.user_email}: {str(e)}", exc_info=True)
        return jsonify({'message': 'Server Error'}), 500

    return jsonify({'message': 'Added to favourites', 'favourite': favourite.to_dict()}), 201

@favourites_bp.route('/<int:favourite_id>', methods=['DELETE'])
@token_required
def remove_favourite(favourite_id):
    """Remove a favourite; reports success even when it was already gone"""
    try:
        Favourite.query.filter_by(id=favourite_id).delete()
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error removing favourite #{favourite_id}: {str(e)}", exc_info=True)
        return jsonify({'message': 'Server Error'}), 500
    return jsonify({'message': 'Removed from favourites'})
