"""
Main Flask application entry point for the Soulmate matrimony API
"""
import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS
from flask_login import LoginManager
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from config import Config
from models import db
from models.user import User
from utils.mail import mail

logger = logging.getLogger(__name__)

# Bearer-token auth: no sessions and no login_user calls; current_user comes only from request_loader
login_manager = LoginManager()


@login_manager.request_loader
def load_user_from_request(req):
    """Resolve the live User record from the token's email claim."""
    from utils.auth_utils import get_bearer_token, decode_access_token
    email = decode_access_token(get_bearer_token(req))
    if not email:
        return None
    return User.query.filter_by(email=email).first()


def register_error_handlers(app):
    """Every failure leaves as JSON {message}; unexpected errors never leak detail."""

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        return jsonify({"message": "Invalid request", "errors": errors}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        db.session.rollback()
        app.logger.error("Unhandled error: %s", e, exc_info=True)
        return jsonify({"message": "Server Error"}), 500


def create_app(config_class=Config):
    """Application factory pattern. DB init runs inside app_context; non-fatal on failure."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    db.init_app(app)
    login_manager.init_app(app)
    mail.init_app(app)
    CORS(app, origins=app.config.get("CORS_ORIGINS", "*"))

    register_error_handlers(app)

    # Create tables and counters only inside app context; do not crash if DB temporarily unavailable
    with app.app_context():
        try:
            db.create_all()
            seed_sequences()
            seed_admin()
        except Exception as e:
            db.session.rollback()
            logger.warning("Database init/seed skipped (non-fatal): %s", e)

    from routes import ALL_BLUEPRINTS
    for blueprint in ALL_BLUEPRINTS:
        app.register_blueprint(blueprint)

    return app


def seed_sequences():
    """Make sure the biodata id counter exists and starts after the highest existing id"""
    from models.biodata import Biodata
    from models.sequence import Sequence
    from routes.biodatas import BIODATA_SEQUENCE

    Sequence.ensure(BIODATA_SEQUENCE, seed_column=Biodata.biodata_id)
    db.session.commit()


def seed_admin():
    """Promote SEED_ADMIN_EMAIL to admin on every boot so there is always someone to approve requests."""
    from flask import current_app

    seed_email = (current_app.config.get("SEED_ADMIN_EMAIL") or "").strip().lower()
    if not seed_email:
        return

    admin = User.query.filter_by(email=seed_email).first()
    if not admin:
        admin = User(email=seed_email, name=seed_email.split("@")[0], role="admin")
        db.session.add(admin)
    else:
        admin.role = "admin"

    try:
        db.session.commit()
        logger.info("Admin ready: %s", seed_email)
    except Exception as e:
        db.session.rollback()
        logger.error("Error seeding admin %s: %s", seed_email, e)


# WSGI entry point (Railway/Render): gunicorn app:app
app = create_app()
application = app

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(host="0.0.0.0", port=port, debug=os.environ.get("FLASK_DEBUG", "false").lower() in ("true", "1"))
