"""
Routes package for the Soulmate matrimony API
"""
# Export blueprints for registration in app.py
from routes.public import public_bp
from routes.auth import auth_bp
from routes.biodatas import biodatas_bp
from routes.user.account import account_bp as user_account_bp
from routes.user.favourites import favourites_bp as user_favourites_bp
from routes.user.contact_requests import contact_requests_bp as user_contact_requests_bp
from routes.user.payment import payment_bp as user_payment_bp
from routes.admin.dashboard import admin_dashboard_bp
from routes.admin.customers import customers_bp
from routes.admin.premium_requests import admin_premium_requests_bp
from routes.admin.contact_requests import admin_contact_requests_bp

__all__ = [
    'public_bp',
    'auth_bp',
    'biodatas_bp',
    'user_account_bp',
    'user_favourites_bp',
    'user_contact_requests_bp',
    'user_payment_bp',
    'admin_dashboard_bp',
    'customers_bp',
    'admin_premium_requests_bp',
    'admin_contact_requests_bp',
]

ALL_BLUEPRINTS = (
    public_bp,
    auth_bp,
    biodatas_bp,
    user_account_bp,
    user_favourites_bp,
    user_contact_requests_bp,
    user_payment_bp,
    admin_dashboard_bp,
    customers_bp,
    admin_premium_requests_bp,
    admin_contact_requests_bp,
)
