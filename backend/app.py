from flask import Flask, request, jsonify, g
from flask_cors import CORS
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
import logging
import time

from backend import config
from backend.auth import create_token, hash_password, normalize_email, token_required, verify_password
from shared.gemini import ProviderError, generate_response
from backend.models import db, User, Pickup, ROLES, LANGUAGES, parse_timestamp

# Configure logging
logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)

WASTE_TYPES = ('plastic', 'glass', 'paper', 'metal', 'organic', 'e-waste')

app = Flask(__name__)

CORS(app, resources={
    r"/api/*": {
        "origins": config.CORS_ORIGINS,
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": ["Content-Type", "Authorization"]
    }
})

config.configure(app)
db.init_app(app)


def initialize_database():
    """Create the users and pickups tables if they do not exist"""
    with app.app_context():
        db.create_all()
        logger.info("Database schema applied successfully")


def connect_with_retry(retries=config.DB_CONNECT_RETRIES, delay=config.DB_CONNECT_DELAY):
    """Wait for the database at startup; in-flight requests are never retried."""
    for attempt in range(1, retries + 1):
        try:
            with app.app_context():
                db.session.execute(text('SELECT 1'))
            logger.info("Connected to database successfully")
            initialize_database()
            return True
        except SQLAlchemyError as e:
            logger.error(f"Failed to connect to database (Attempt {attempt}/{retries}): {e}")
            if attempt < retries:
                logger.info(f"Retrying in {delay} seconds...")
                time.sleep(delay)
    logger.error("Could not connect to database after multiple attempts. The server may not function correctly.")
    return False


connect_with_retry()


# --- Middleware ---
@app.before_request
def before_request():
    logger.debug(f"Request: {request.method} {request.path}")


def error_response(message, code):
    return jsonify({'error': message, 'status': 'error'}), code


# --- Health ---
@app.route('/', methods=['GET'])
def health_check():
    try:
        db.session.execute(text('SELECT 1'))
        return 'Recolhe+ Backend is running. DB Connection: OK', 200
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        return 'Recolhe+ Backend is running. DB Connection: FAILED', 500


# --- Auth ---
@app.route('/api/auth/register', methods=['POST'])
def register():
    data = request.get_json(silent=True) or {}
    name = data.get('name')
    email = data.get('email')
    password = data.get('password')
    role = data.get('role') or 'user'
    language = data.get('language') or 'en'

    if not name or not email or not password:
        return error_response('Please provide all fields', 400)
    if role not in ROLES:
        return error_response(f'Unknown role: {role}', 400)
    if language not in LANGUAGES:
        return error_response(f'Unsupported language: {language}', 400)

    try:
        email = normalize_email(email)
        if User.query.filter_by(email=email).first():
            return error_response('Email already registered', 400)

        user = User(
            name=name,
            email=email,
            password_hash=hash_password(password),
            role=role,
            language=language,
            eco_coins=0
        )
        db.session.add(user)
        db.session.commit()

        logger.info(f"Registered {user.role} {user.email}")
        return jsonify({'user': user.to_dict(), 'token': create_token(user)}), 201

    except SQLAlchemyError as e:
        logger.error(f"Registration error: {e}")
        db.session.rollback()
        return error_response('Server error during registration', 500)


@app.route('/api/auth/login', methods=['POST'])
def login():
    data = request.get_json(silent=True) or {}
    email = data.get('email')
    password = data.get('password')

    if not email or not password:
        return error_response('Please provide email and password', 400)

    try:
        user = User.query.filter_by(email=normalize_email(email)).first()
        if not user or not verify_password(password, user.password_hash):
            return error_response('Invalid credentials', 400)

        logger.info(f"Login {user.email}")
        return jsonify({'user': user.to_dict(), 'token': create_token(user)})

    except SQLAlchemyError as e:
        logger.error(f"Login error: {e}")
        return error_response('Server error during login', 500)


# --- Chat ---
@app.route('/api/chat', methods=['POST'])
def chat():
    data = request.get_json(silent=True) or {}
    message = data.get('message')
    if not message:
        return error_response('Message is required', 400)

    try:
        reply = generate_response(data.get('history') or [], message, data.get('language') or 'en')
        return jsonify({'text': reply})
    except ProviderError as e:
        logger.error(f"Chat provider failure: {e}")
        return error_response('AI Service unavailable', 500)


# --- Pickups ---
def validate_items(items):
    if not isinstance(items, list):
        return 'items must be a list'
    for item in items:
        if not isinstance(item, dict) or item.get('type') not in WASTE_TYPES:
            return f'Invalid waste item: {item}'
        quantity = item.get('quantity')
        if quantity is not None and (isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0):
            return 'quantity must be a non-negative integer'
        weight = item.get('weightKg')
        if weight is not None and (isinstance(weight, bool) or not isinstance(weight, (int, float)) or weight < 0):
            return 'weightKg must be a non-negative number'
    return None


@app.route('/api/pickups', methods=['POST'])
@token_required
def create_pickup():
    data = request.get_json(silent=True) or {}
    items = data.get('items', [])

    problem = validate_items(items)
    if problem:
        return error_response(problem, 400)

    scheduled_at = None
    if data.get('scheduledAt'):
        try:
            scheduled_at = parse_timestamp(data['scheduledAt'])
        except (AttributeError, TypeError, ValueError):
            return error_response('scheduledAt must be an ISO timestamp', 400)

    try:
        pickup = Pickup(
            user_id=g.current_user['id'],
            items=items,
            scheduled_at=scheduled_at,
            location=data.get('location'),
            notes=data.get('notes')
        )
        db.session.add(pickup)
        db.session.commit()

        logger.info(f"Created pickup {pickup.id} for user {pickup.user_id}")
        return jsonify(pickup.to_dict()), 201

    except SQLAlchemyError as e:
        logger.error(f"Error creating pickup: {e}")
        db.session.rollback()
        return error_response('Failed to create pickup', 500)


@app.route('/api/pickups', methods=['GET'])
@token_required
def get_pickups():
    try:
        query = Pickup.query
        # Collectors see every request
        if g.current_user.get('role') != 'collector':
            query = query.filter_by(user_id=g.current_user['id'])
        pickups = query.order_by(Pickup.scheduled_at.desc()).all()
        return jsonify([pickup.to_dict() for pickup in pickups])

    except SQLAlchemyError as e:
        logger.error(f"Error fetching pickups: {e}")
        return error_response('Failed to fetch pickups', 500)


# Error handlers
@app.errorhandler(404)
def not_found_error(error):
    return error_response('Endpoint not found', 404)


@app.errorhandler(500)
def internal_error(error):
    db.session.rollback()
    return error_response('Internal server error', 500)


if __name__ == '__main__':
    logger.info("Starting Flask server...")
    print("=" * 50)
    print("Recolhe+ Server")
    print("=" * 50)
    print(f"Starting on: http://0.0.0.0:{config.PORT}")
    print("Available endpoints:")
    print("  POST /api/auth/register - Create account")
    print("  POST /api/auth/login    - Sign in")
    print("  POST /api/chat          - AI assistant")
    print("  POST /api/pickups       - Schedule pickup (bearer)")
    print("  GET  /api/pickups       - List pickups (bearer)")
    print("  GET  /                  - Health check")
    print("=" * 50)

    app.run(host='0.0.0.0', port=config.PORT)
