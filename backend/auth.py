from datetime import datetime, timedelta, timezone
from functools import wraps

import jwt
from flask import current_app, g, jsonify, request
from werkzeug.security import check_password_hash, generate_password_hash

from backend import config


def hash_password(password):
    return generate_password_hash(password)


def verify_password(password, password_hash):
    return check_password_hash(password_hash, password)


def normalize_email(email):
    return email.strip().lower()


def create_token(user):
    payload = {
        'id': user.id,
        'role': user.role,
        'email': user.email,
        'exp': datetime.now(timezone.utc) + timedelta(hours=config.JWT_EXPIRES_HOURS),
    }
    return jwt.encode(payload, current_app.config['JWT_SECRET'], algorithm=config.JWT_ALGORITHM)


def token_required(f):
    """Decode the bearer token into g.current_user or reject the request."""
    @wraps(f)
    def decorated(*args, **kwargs):
        auth_header = request.headers.get('Authorization', '')
        parts = auth_header.split(' ')
        token = parts[1] if len(parts) == 2 else None

        if not token:
            return jsonify({'error': 'Access denied. No token provided.', 'status': 'error'}), 401

        try:
            g.current_user = jwt.decode(
                token,
                current_app.config['JWT_SECRET'],
                algorithms=[config.JWT_ALGORITHM],
            )
        except jwt.InvalidTokenError:
            return jsonify({'error': 'Invalid token.', 'status': 'error'}), 403

        return f(*args, **kwargs)
    return decorated
