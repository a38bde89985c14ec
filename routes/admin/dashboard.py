"""
Admin dashboard routes
"""
from flask import Blueprint, jsonify, current_app
from models import db
from models.biodata import Biodata
from models.contact_request import ContactRequest
from sqlalchemy import func, case
from utils.auth_utils import admin_required

admin_dashboard_bp = Blueprint('admin_dashboard', __name__, url_prefix='/admin')

@admin_dashboard_bp.route('/stats')
@admin_required
def stats():
    """Point-in-time dashboard counts, recomputed on every call"""
    total_biodata, male_biodata, female_biodata, premium_biodata = db.session.query(
        func.count(Biodata.id),
        func.coalesce(func.sum(case((Biodata.biodata_type == 'Male', 1), else_=0)), 0),
        func.coalesce(func.sum(case((Biodata.biodata_type == 'Female', 1), else_=0)), 0),
        func.coalesce(func.sum(case((Biodata.is_premium.is_(True), 1), else_=0)), 0),
    ).one()

    # Revenue comes from contact requests only: approved requests * fixed price
    approved_contacts = ContactRequest.query.filter_by(status='approved').count()
    revenue = approved_contacts * current_app.config['CONTACT_REQUEST_PRICE']

    return jsonify({
        'totalBiodata': int(total_biodata),
        'maleBiodata': int(male_biodata),
        'femaleBiodata': int(female_biodata),
        'premiumBiodata': int(premium_biodata),
        'revenue': revenue,
    })
