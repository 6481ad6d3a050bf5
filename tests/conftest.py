import os

# The backend reads its configuration once, at import time
os.environ['DATABASE_URL'] = 'sqlite://'
os.environ['JWT_SECRET'] = 'test-secret-key-with-enough-length-for-hs256'
os.environ['API_KEY'] = ''
os.environ['DB_CONNECT_RETRIES'] = '1'
os.environ['DB_CONNECT_DELAY'] = '0'

import pytest
import requests

from frontend.api import ApiClient
from frontend.entities import PickupRequest, Role, Session, User
from frontend.errors import EmailTaken, InvalidCredentials, TransportFailure
from frontend.shell import Shell
from frontend.storage import LocalStorage


@pytest.fixture
def app():
    from backend.app import app
    from backend.models import db

    app.config['TESTING'] = True
    with app.app_context():
        db.drop_all()
        db.create_all()
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(client):
    def _register(email='ana@example.com', password='secret', role='user', name='Ana', language='pt'):
        resp = client.post('/api/auth/register', json={
            'name': name, 'email': email, 'password': password, 'role': role, 'language': language,
        })
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()
    return _register


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(str(tmp_path / 'storage.json'))


class FakeResponse:
    def __init__(self, status_code=200, payload=None, reason='OK'):
        self.status_code = status_code
        self._payload = payload
        self.reason = reason

    def json(self):
        if self._payload is None:
            raise ValueError('No JSON body')
        return self._payload


class FakeHttp:
    """Stands in for requests.Session; queue responses or exceptions."""

    def __init__(self):
        self.headers = {}
        self.responses = []
        self.requests = []

    def request(self, method, url, json=None, headers=None, timeout=None):
        self.requests.append({'method': method, 'url': url, 'json': json, 'headers': headers, 'timeout': timeout})
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def http():
    return FakeHttp()


@pytest.fixture
def api_client(storage, http):
    return ApiClient(base_url='http://backend.test/api', storage=storage, http=http)


class FakeApi(ApiClient):
    """ApiClient with the network replaced by in-memory behaviour."""

    def __init__(self, storage):
        super().__init__(base_url='http://backend.test/api', storage=storage, http=FakeHttp())
        self.offline = False
        self.pickups = []
        self.created = []
        self.chat_calls = []

    def _check(self):
        if self.offline:
            raise TransportFailure('connection refused')

    def login(self, email, password):
        self._check()
        if password != 'secret':
            raise InvalidCredentials('Invalid credentials')
        session = Session(User('u-1', 'Ana', email, Role.USER, 300, 'pt'), token='jwt-1', real=True, seed_demo=True)
        self.save_session(session)
        return session

    def register(self, name, email, password, role, language):
        self._check()
        if email == 'taken@example.com':
            raise EmailTaken('Email already registered')
        session = Session(User('u-2', name, email, Role(role), 0, language), token='jwt-2', real=True, seed_demo=False)
        self.save_session(session)
        return session

    def list_pickups(self):
        self._check()
        return list(self.pickups)

    def create_pickup(self, draft):
        self._check()
        pickup = PickupRequest.from_draft(f'srv-{len(self.created) + 1}', draft)
        self.created.append(pickup)
        return pickup

    def send_chat(self, history, message, language):
        self.chat_calls.append((history, message, language))
        self._check()
        return f'backend says: {message}'


@pytest.fixture
def fake_api(storage):
    return FakeApi(storage)


@pytest.fixture
def shell(fake_api):
    return Shell(api=fake_api)


@pytest.fixture
def logged_in_shell(shell):
    shell.auth.select_language('en')
    shell.auth.select_role('user')
    shell.auth.login('ana@example.com', 'secret')
    return shell


@pytest.fixture
def connection_error():
    return requests.ConnectionError('Connection refused')


@pytest.fixture
def reply():
    return FakeResponse
