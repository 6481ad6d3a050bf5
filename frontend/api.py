"""
HTTP client for the Recolhe+ backend.

Every failure is classified once into the client error taxonomy; nothing here
retries or falls back. The session token and user record are persisted to
local storage so a restarted client can resume.
"""
import json
import logging

import requests

from frontend import config
from frontend.entities import PICKUP_STATUSES, PickupRequest, Session, User, WasteItem
from frontend.errors import (
    EmailTaken,
    InvalidCredentials,
    ServerFault,
    TransportFailure,
    Unauthorized,
    ValidationFailed,
)
from frontend.storage import SESSION_KEY, TOKEN_KEY, USER_KEY, LocalStorage

logger = logging.getLogger(__name__)


def map_pickup(data):
    """Backend snake_case row -> client PickupRequest."""
    status = data.get('status')
    return PickupRequest(
        id=str(data['id']),
        status=status if status in PICKUP_STATUSES else 'requested',
        scheduled_at=data.get('scheduled_at'),
        items=tuple(WasteItem.from_dict(item) for item in data.get('items') or []),
        location=data.get('location') or '',
        notes=data.get('notes'),
    )


def error_message(response):
    try:
        return response.json().get('error') or response.reason
    except (ValueError, AttributeError):
        return response.reason or f'HTTP {response.status_code}'


class ApiClient:
    def __init__(self, base_url=None, storage=None, http=None, timeout=config.API_TIMEOUT):
        self.base_url = (base_url or config.API_URL).rstrip('/')
        self.storage = storage or LocalStorage()
        self.http = http or requests.Session()
        self.http.headers.update({'Content-Type': 'application/json'})
        self.timeout = timeout

    def _request(self, method, path, payload=None, on_bad_request=ValidationFailed):
        headers = {}
        token = self.storage.get_item(TOKEN_KEY)
        if token:
            headers['Authorization'] = f'Bearer {token}'

        try:
            response = self.http.request(
                method,
                f'{self.base_url}{path}',
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportFailure(f'{method} {path} failed: {e}') from e

        if response.status_code >= 500:
            raise ServerFault(error_message(response), response.status_code)
        if response.status_code in (401, 403):
            raise Unauthorized(error_message(response))
        if response.status_code == 400:
            raise on_bad_request(error_message(response))
        if response.status_code >= 400:
            raise ValidationFailed(error_message(response))

        try:
            return response.json()
        except ValueError as e:
            raise ServerFault(f'{method} {path} returned invalid JSON') from e

    # --- session persistence ---

    def save_session(self, session):
        self.storage.set_item(TOKEN_KEY, session.token)
        self.storage.set_item(USER_KEY, json.dumps(session.user.to_dict()))
        self.storage.set_item(SESSION_KEY, {'real': session.real, 'seedDemo': session.seed_demo})

    def clear_session(self):
        for key in (TOKEN_KEY, USER_KEY, SESSION_KEY):
            self.storage.remove_item(key)

    def current_session(self):
        user_str = self.storage.get_item(USER_KEY)
        if not user_str:
            return None
        flags = self.storage.get_item(SESSION_KEY) or {}
        try:
            return Session(
                user=User.from_dict(json.loads(user_str)),
                token=self.storage.get_item(TOKEN_KEY),
                real=flags.get('real', True),
                seed_demo=flags.get('seedDemo', True),
            )
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Discarding unreadable stored session: {e}")
            self.clear_session()
            return None

    # --- auth ---

    def _auth_session(self, data, seed_demo):
        if not data.get('token'):
            raise ServerFault('Auth response did not include a token')
        session = Session(user=User.from_dict(data['user']), token=data['token'], real=True, seed_demo=seed_demo)
        self.save_session(session)
        return session

    def login(self, email, password):
        data = self._request(
            'POST', '/auth/login',
            {'email': email, 'password': password},
            on_bad_request=self._login_error,
        )
        return self._auth_session(data, seed_demo=True)

    def register(self, name, email, password, role, language):
        data = self._request(
            'POST', '/auth/register',
            {'name': name, 'email': email, 'password': password, 'role': role, 'language': language},
            on_bad_request=self._register_error,
        )
        return self._auth_session(data, seed_demo=False)

    @staticmethod
    def _login_error(message):
        if message == 'Invalid credentials':
            return InvalidCredentials(message)
        return ValidationFailed(message)

    @staticmethod
    def _register_error(message):
        if message == 'Email already registered':
            return EmailTaken(message)
        return ValidationFailed(message)

    # --- pickups ---

    def create_pickup(self, draft):
        return map_pickup(self._request('POST', '/pickups', draft.to_dict()))

    def list_pickups(self):
        return [map_pickup(row) for row in self._request('GET', '/pickups')]

    # --- chat ---

    def send_chat(self, history, message, language):
        data = self._request('POST', '/chat', {'history': history, 'message': message, 'language': language})
        if 'text' not in data:
            raise ServerFault('Chat response did not include text')
        return data['text']
