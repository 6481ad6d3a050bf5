# backend/models.py
from flask_sqlalchemy import SQLAlchemy
from datetime import datetime, timezone
import uuid

db = SQLAlchemy()

ROLES = ('user', 'collector', 'admin')
LANGUAGES = ('en', 'fr', 'pt')


def gen_id():
    return str(uuid.uuid4())


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    """Render a naive UTC datetime the way browsers do (millisecond precision, Z suffix)."""
    if value is None:
        return None
    return value.strftime('%Y-%m-%dT%H:%M:%S.') + f'{value.microsecond // 1000:03d}Z'


def parse_timestamp(value):
    """Parse an ISO timestamp into a naive UTC datetime."""
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.String(36), primary_key=True, default=gen_id)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), default='user')
    eco_coins = db.Column(db.Integer, default=0)
    language = db.Column(db.String(5), default='en')
    created_at = db.Column(db.DateTime, default=utcnow)

    pickups = db.relationship('Pickup', backref='user', lazy=True)

    def to_dict(self):
        # Auth responses already use client naming
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'role': self.role,
            'ecoCoins': self.eco_coins,
            'language': self.language
        }

    def __repr__(self):
        return f'<User {self.email}>'


class Pickup(db.Model):
    __tablename__ = 'pickups'

    id = db.Column(db.String(36), primary_key=True, default=gen_id)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'))
    status = db.Column(db.String(20), default='requested')
    items = db.Column(db.JSON, default=list)
    scheduled_at = db.Column(db.DateTime)
    location = db.Column(db.String(255))
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'status': self.status,
            'items': self.items or [],
            'scheduled_at': isoformat(self.scheduled_at),
            'location': self.location,
            'notes': self.notes,
            'created_at': isoformat(self.created_at)
        }

    def __repr__(self):
        return f'<Pickup {self.id} {self.status}>'
