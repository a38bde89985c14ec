"""
Authentication utility functions: bearer tokens and route guards
"""
import time
from functools import wraps

from flask import current_app, jsonify, request
from flask_login import current_user
from jose import JWTError, jwt


def create_access_token(email, expires_in=None):
    """
    Sign a bearer token carrying only the email claim.
    Expires after ACCESS_TOKEN_EXPIRES (1 hour) unless expires_in (seconds) is given.
    """
    if expires_in is None:
        expires_in = int(current_app.config["ACCESS_TOKEN_EXPIRES"].total_seconds())
    claims = {
        "email": email.strip().lower(),
        "exp": int(time.time()) + int(expires_in),
    }
    return jwt.encode(
        claims,
        current_app.config["ACCESS_TOKEN_SECRET"],
        algorithm=current_app.config["ACCESS_TOKEN_ALGORITHM"],
    )


def decode_access_token(token):
    """Verify signature and expiry; return the email claim if valid, else None."""
    if not token or not isinstance(token, str):
        return None
    try:
        claims = jwt.decode(
            token,
            current_app.config["ACCESS_TOKEN_SECRET"],
            algorithms=[current_app.config["ACCESS_TOKEN_ALGORITHM"]],
        )
    except JWTError:
        return None
    email = claims.get("email")
    if not email or not isinstance(email, str):
        return None
    return email.strip().lower()


def get_bearer_token(req=None):
    """Return the token from 'Authorization: Bearer <token>', or None when absent."""
    req = req or request
    header = req.headers.get("Authorization", "")
    parts = header.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1].strip():
        return None
    return parts[1].strip()


def token_required(f):
    """Missing token -> 401; invalid/expired token or unknown user -> 403"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not get_bearer_token():
            return jsonify({"message": "Unauthorized access"}), 401
        if not current_user.is_authenticated:
            return jsonify({"message": "Forbidden access"}), 403
        return f(*args, **kwargs)
    return decorated_function


def admin_required(f):
    """Token check plus live role check: role changes apply on the next request"""
    @wraps(f)
    @token_required
    def decorated_function(*args, **kwargs):
        if not current_user.is_admin:
            return jsonify({"message": "Forbidden: Admins only"}), 403
        return f(*args, **kwargs)
    return decorated_function
