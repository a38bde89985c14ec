import pytest

from app import create_app
from config import Config
from models import db
from models.user import User


class AppTestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SECRET_KEY = "test-secret-key"
    ACCESS_TOKEN_SECRET = "test-access-token-secret"
    MAIL_SERVER = "localhost"
    MAIL_SUPPRESS_SEND = True
    MAIL_DEFAULT_SENDER = "noreply@soulmate.app"
    STRIPE_SECRET_KEY = "sk_test_dummy"
    VERIFY_PAYMENTS = False
    REDACT_CONTACT_DETAILS = False
    SEED_ADMIN_EMAIL = None


@pytest.fixture
def app():
    app = create_app(AppTestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def file_app(tmp_path):
    """App on a file-backed SQLite database, for tests that need several connections at once."""
    class FileConfig(AppTestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'soulmate.db'}"
        SQLALCHEMY_ENGINE_OPTIONS = {"connect_args": {"check_same_thread": False, "timeout": 30}}

    app = create_app(FileConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client, app):
    """Sign in through /auth/jwt and return Authorization headers."""
    def _login(email, name="Test User", admin=False):
        resp = client.post("/auth/jwt", json={"email": email, "name": name})
        assert resp.status_code == 200, resp.get_json()
        if admin:
            with app.app_context():
                user = User.query.filter_by(email=email).first()
                user.role = "admin"
                db.session.commit()
        return {"Authorization": f"Bearer {resp.get_json()['token']}"}
    return _login


@pytest.fixture
def admin_headers(login):
    return login("admin@mail.com", name="Site Admin", admin=True)


@pytest.fixture
def biodata_body():
    def _body(email, **overrides):
        body = {
            "userEmail": email,
            "name": "Nusrat Jahan",
            "biodataType": "Female",
            "profileImage": "https://images.soulmate.app/p/1.jpg",
            "dateOfBirth": "1998-04-12",
            "height": "5'4\"",
            "weight": "55kg",
            "age": 26,
            "occupation": "Engineer",
            "race": "Fair",
            "fathersName": "Abdul Karim",
            "mothersName": "Rokeya Begum",
            "permanentDivision": "Dhaka",
            "presentDivision": "Dhaka",
            "expectedPartnerAge": 30,
            "expectedPartnerHeight": "5'10\"",
            "expectedPartnerWeight": "70kg",
            "mobileNumber": "01700000000",
        }
        body.update(overrides)
        return body
    return _body


@pytest.fixture
def create_biodata(client, login, biodata_body):
    """Sign in as email, save a biodata, return (headers, biodata json)."""
    def _create(email, **overrides):
        headers = login(email, name=overrides.get("name", "Nusrat Jahan"))
        resp = client.post("/biodatas", json=biodata_body(email, **overrides), headers=headers)
        assert resp.status_code == 201, resp.get_json()
        return headers, resp.get_json()["biodata"]
    return _create
