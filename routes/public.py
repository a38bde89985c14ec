"""
Public routes: health check, success stories
"""
from flask import Blueprint, jsonify, current_app
from models import db
from models.success_story import SuccessStory
from schemas import PageParams, SuccessStoryInput, parse_args, parse_json
from utils.pagination import paginate_query, list_response

public_bp = Blueprint('public', __name__)

@public_bp.route('/')
def home():
    return 'Matrimony Server is Running'

@public_bp.route('/success-stories', methods=['GET'])
def success_stories():
    """Success stories, most recent marriage first"""
    params = parse_args(PageParams)
    query = SuccessStory.query.order_by(
        SuccessStory.marriage_date.desc(), SuccessStory.id.desc()
    )
    items, total = paginate_query(query, params.page, params.limit)
    return list_response(items, total, params.page, params.limit)

@public_bp.route('/success-stories', methods=['POST'])
def add_success_story():
    """Submit a success story (no moderation)"""
    payload = parse_json(SuccessStoryInput)

    story = SuccessStory(**payload.model_dump(exclude_none=True))
    try:
        db.session.add(story)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error adding success story: {str(e)}", exc_info=True)
        return jsonify({'message': 'Error adding story'}), 500

    return jsonify({'message': 'Success Story Added', 'story': story.to_dict()}), 201
