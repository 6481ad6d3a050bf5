# clean_reset.py
import logging

from backend.app import app
from backend.models import db, User, Pickup

logger = logging.getLogger(__name__)


def reset_database():
    """Drop and recreate the users and pickups tables."""
    with app.app_context():
        db.drop_all()
        logger.info("Dropped existing tables")
        db.create_all()
        counts = {
            'users': User.query.count(),
            'pickups': Pickup.query.count(),
        }
    logger.info(f"Database recreated: {counts}")
    return counts


if __name__ == '__main__':
    print("Creating new database...")
    reset_database()
    print("Database created successfully with correct schema!")
