import os

# Read once at startup
DATABASE_URL = os.environ.get('DATABASE_URL', 'sqlite:///database.db').replace('postgres://', 'postgresql://', 1)
JWT_SECRET = os.environ.get('JWT_SECRET', 'default_secret')
JWT_ALGORITHM = 'HS256'
JWT_EXPIRES_HOURS = 24

PORT = int(os.environ.get('PORT', 5000))
DB_CONNECT_RETRIES = int(os.environ.get('DB_CONNECT_RETRIES', 10))
DB_CONNECT_DELAY = float(os.environ.get('DB_CONNECT_DELAY', 3))

CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')


def configure(app):
    app.config['SQLALCHEMY_DATABASE_URI'] = DATABASE_URL
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['JWT_SECRET'] = JWT_SECRET

    # Pool settings only make sense for a real database server
    if not DATABASE_URL.startswith('sqlite'):
        app.config['SQLALCHEMY_ENGINE_OPTIONS'] = {
            'pool_recycle': 300,
            'pool_pre_ping': True,
            'pool_size': 10,
            'max_overflow': 20,
        }
