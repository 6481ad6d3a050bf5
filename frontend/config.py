import os

API_URL = os.environ.get('RECOLHE_API_URL', 'http://localhost:5000/api')
API_TIMEOUT = 10

STORAGE_PATH = os.environ.get(
    'RECOLHE_STORAGE',
    os.path.join(os.path.expanduser('~'), '.recolhe', 'storage.json'),
)

# Only used when the backend chat route is unreachable
API_KEY = os.environ.get('API_KEY', '')

EXCHANGE_RATE = 10  # 1 EcoCoin = 10 XOF
PRICE_PER_SACK = 500  # XOF
KG_PER_TREE = 69

DEMO_BALANCE = 1250
MOCK_TOKEN = 'mock-token'
