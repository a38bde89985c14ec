"""
Biodata routes: public browsing, owner create-or-update, premium requests
"""
from flask import Blueprint, jsonify, current_app
from flask_login import current_user
from models import db
from models.biodata import Biodata
from models.premium_request import PremiumRequest
from models.sequence import Sequence
from sqlalchemy.exc import IntegrityError
from schemas import BiodataCreateInput, BiodataFilters, BiodataInput, PremiumRequestInput, parse_args, parse_json
from utils.auth_utils import token_required
from utils.contact_access import can_view_contact, contact_visibility
from utils.pagination import paginate_query, list_response

biodatas_bp = Blueprint('biodatas', __name__, url_prefix='/biodatas')

BIODATA_SEQUENCE = 'biodata_id'
SIMILAR_LIMIT = 3


def allocate_biodata_id():
    """Next biodata id from the counter; seeded from max(biodata_id) the first time"""
    return Sequence.next_value(BIODATA_SEQUENCE, seed_column=Biodata.biodata_id)


@biodatas_bp.route('', methods=['GET'])
def list_biodatas():
    """Filtered, paginated list"""
    filters = parse_args(BiodataFilters)

    query = Biodata.query
    if filters.type:
        query = query.filter(Biodata.biodata_type == filters.type)
    if filters.division:
        query = query.filter(Biodata.permanent_division == filters.division)
    if filters.age_min is not None:
        query = query.filter(Biodata.age >= filters.age_min)
    if filters.age_max is not None:
        query = query.filter(Biodata.age <= filters.age_max)

    if filters.sort == 'ascending':
        query = query.order_by(Biodata.age.asc(), Biodata.biodata_id.asc())
    elif filters.sort == 'descending':
        query = query.order_by(Biodata.age.desc(), Biodata.biodata_id.asc())
    else:
        query = query.order_by(Biodata.biodata_id.asc())

    items, total = paginate_query(query, filters.page, filters.limit)
    visible = contact_visibility(current_user)
    return list_response(
        items, total, filters.page, filters.limit,
        serialize=lambda b: b.to_dict(include_contact=visible(b)),
    )


@biodatas_bp.route('/<int:biodata_id>', methods=['GET'])
def get_biodata(biodata_id):
    """Single biodata by its public biodataId"""
    biodata = Biodata.query.filter_by(biodata_id=biodata_id).first()
    if not biodata:
        return jsonify({'message': 'Biodata not found'}), 404
    return jsonify(biodata.to_dict(include_contact=can_view_contact(current_user, biodata)))


@biodatas_bp.route('/similar/<biodata_type>', methods=['GET'])
def similar_biodatas(biodata_type):
    """Up to three biodatas of the given type"""
    if biodata_type not in ('Male', 'Female'):
        return jsonify({'message': 'Biodata type must be Male or Female'}), 400
    items = Biodata.query.filter_by(biodata_type=biodata_type).order_by(
        Biodata.biodata_id.asc()
    ).limit(SIMILAR_LIMIT).all()
    visible = contact_visibility(current_user)
    return list_response(
        items, limit=SIMILAR_LIMIT,
        serialize=lambda b: b.to_dict(include_contact=visible(b)),
    )


@biodatas_bp.route('/email/<email>', methods=['GET'])
@token_required
def get_biodata_by_email(email):
    """Owner's biodata (null when the user has not created one yet)"""
    biodata = Biodata.query.filter_by(user_email=email.strip().lower()).first()
    return jsonify(biodata.to_dict() if biodata else None)


@biodatas_bp.route('', methods=['POST'])
@token_required
def save_biodata():
    """Create or update the caller's biodata, keyed on userEmail"""
    payload = parse_json(BiodataInput)

    if payload.user_email != current_user.email and not current_user.is_admin:
        return jsonify({'message': 'You can only edit your own biodata'}), 403

    biodata = Biodata.query.filter_by(user_email=payload.user_email).first()
    if not biodata:
        # first save: the full create body is required
        payload = parse_json(BiodataCreateInput)
    fields = payload.model_dump(exclude_unset=True, exclude={'user_email'})

    try:
        if biodata:
            for key, value in fields.items():
                setattr(biodata, key, value)
            db.session.commit()
            return jsonify({'message': 'Biodata Updated Successfully', 'biodata': biodata.to_dict()})

        biodata = Biodata(
            **fields,
            user_email=payload.user_email,
            biodata_id=allocate_biodata_id(),
            contact_email=payload.user_email,
        )
        db.session.add(biodata)
        db.session.commit()
        current_app.logger.info("Created biodata #%s for %s", biodata.biodata_id, biodata.user_email)
        return jsonify({'message': 'Biodata Created Successfully', 'biodata': biodata.to_dict()}), 201
    except IntegrityError:
        db.session.rollback()
        current_app.logger.warning("Concurrent biodata save for %s rejected", payload.user_email)
        return jsonify({'message': 'Biodata already exists for this user'}), 409
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving biodata for {payload.user_email}: {str(e)}", exc_info=True)
        return jsonify({'message': 'Error saving biodata'}), 500


@biodatas_bp.route('/make-premium', methods=['POST'])
@token_required
def request_premium():
    """Ask an admin to make a biodata premium; one pending request per biodata"""
    payload = parse_json(PremiumRequestInput)

    biodata = Biodata.query.filter_by(biodata_id=payload.biodata_id).first()
    if not biodata:
        return jsonify({'message': 'Biodata not found'}), 404

    # caller and userEmail must both be the biodata owner
    if current_user.email != biodata.user_email and not current_user.is_admin:
        return jsonify({'message': 'You can only request premium for your own biodata'}), 403
    if payload.user_email != biodata.user_email:
        return jsonify({'message': 'userEmail must be the biodata owner'}), 400

    existing = PremiumRequest.query.filter_by(
        biodata_id=payload.biodata_id,
        status='pending'
    ).first()
    if existing:
        return jsonify({'message': 'Request already pending'}), 409

    premium_request = PremiumRequest(
        biodata_id=payload.biodata_id,
        user_email=payload.user_email,
        user_name=payload.user_name,
        status='pending'
    )
    try:
        db.session.add(premium_request)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return jsonify({'message': 'Request already pending'}), 409
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error creating premium request for biodata #{payload.biodata_id}: {str(e)}", exc_info=True)
        return jsonify({'message': 'Server Error'}), 500

    return jsonify({'message': 'Premium request sent to admin', 'request': premium_request.to_dict()}), 201
