"""
Payment routes: Stripe intent pass-through and contact request creation
"""
from flask import Blueprint, jsonify, current_app
from models import db
from models.biodata import Biodata
from models.contact_request import ContactRequest
from schemas import PaymentIntentInput, SavePaymentInput, parse_json
from utils.auth_utils import token_required
from utils.payment_gateway import PaymentError, create_payment_intent, verify_payment

payment_bp = Blueprint('user_payment', __name__, url_prefix='/payment')

@payment_bp.route('/create-payment-intent', methods=['POST'])
@token_required
def payment_intent():
    """Create a Stripe PaymentIntent; stores nothing locally"""
    payload = parse_json(PaymentIntentInput)
    try:
        client_secret = create_payment_intent(payload.price)
    except PaymentError:
        return jsonify({'message': 'Payment provider error'}), 500
    return jsonify({'clientSecret': client_secret})

@payment_bp.route('/save-info', methods=['POST'])
@token_required
def save_payment_info():
    """Record a paid contact request; an admin approves it later"""
    payload = parse_json(SavePaymentInput)

    biodata = Biodata.query.filter_by(biodata_id=payload.biodata_id).first()
    if not biodata:
        return jsonify({'message': 'Biodata not found'}), 404

    if current_app.config.get('VERIFY_PAYMENTS'):
        try:
            paid = verify_payment(payload.transaction_id)
        except PaymentError:
            return jsonify({'message': 'Payment provider error'}), 500
        if not paid:
            return jsonify({'message': 'Payment not completed'}), 402

    contact_request = ContactRequest(
        biodata_id=biodata.biodata_id,
        requester_email=payload.user_email,
        transaction_id=payload.transaction_id,
        amount=current_app.config['CONTACT_REQUEST_PRICE'],
        biodata_name=biodata.name,
        biodata_email=biodata.contact_email,
        biodata_phone=biodata.mobile_number,
        status='pending'  # Admin must approve
    )
    try:
        db.session.add(contact_request)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving payment info for biodata #{payload.biodata_id}: {str(e)}", exc_info=True)
        return jsonify({'message': 'Error saving payment info'}), 500

    return jsonify({
        'message': 'Payment successful, request pending approval',
        'request': contact_request.to_dict()
    }), 201
