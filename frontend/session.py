"""
Login flow: language -> role -> credentials.

A credential rejection is surfaced to the caller. A backend that cannot be
reached (or answers 5xx) yields a locally synthesized session instead, so the
app stays usable without a server.
"""
import logging
import uuid

from frontend import config
from frontend.demo import demo_transactions
from frontend.entities import LANGUAGES, Role, Session, User
from frontend.errors import FALLBACK_ERRORS, ValidationFailed
from frontend.state import LoggedIn, Phase, SelectLanguage, SelectRole
from frontend.translations import strings

logger = logging.getLogger(__name__)


def normalize_email(email):
    return (email or '').strip().lower()


def demo_name(role):
    return 'John Collector' if role == Role.COLLECTOR else 'Maria Silva'


def synthesize_session(name, email, role, language, registering):
    """Stand-in identity for when the backend is unreachable."""
    user = User(
        id=uuid.uuid4().hex,
        name=name or demo_name(role),
        email=email,
        role=role,
        eco_coins=0 if registering else config.DEMO_BALANCE,
        language=language,
    )
    return Session(user=user, token=config.MOCK_TOKEN, real=False, seed_demo=not registering)


class AuthFlow:
    def __init__(self, api, store):
        self.api = api
        self.store = store

    @property
    def phase(self):
        return self.store.state.phase

    def select_language(self, language):
        if language not in LANGUAGES:
            raise ValidationFailed(f'Unsupported language: {language}')
        self.store.dispatch(SelectLanguage(language))

    def select_role(self, role):
        self.store.dispatch(SelectRole(Role(role)))

    def back(self):
        """Step back one screen: credentials -> role -> language."""
        phase = self.phase
        if phase == Phase.AUTHENTICATING:
            self.store.dispatch(SelectRole(None))
        elif phase == Phase.ROLE_UNSELECTED:
            self.store.dispatch(SelectLanguage(None))

    def login(self, email, password):
        return self._submit(email, password, registering=False)

    def register(self, name, email, password, confirm_password):
        t = strings(self.store.state.language)
        if password != confirm_password:
            raise ValidationFailed(t['auth']['passMismatch'])
        return self._submit(email, password, registering=True, name=name)

    def _submit(self, email, password, registering, name=None):
        state = self.store.state
        if not password:
            raise ValidationFailed(strings(state.language)['auth']['passRequired'])

        email = normalize_email(email)
        role = state.target_role or Role.USER
        language = state.language

        try:
            if registering:
                session = self.api.register(name, email, password, role.value, language)
            else:
                session = self.api.login(email, password)
        except FALLBACK_ERRORS as e:
            logger.warning(f"Backend connection failed, falling back to demo mode: {e}")
            session = synthesize_session(name, email, role, language, registering)
            self.api.save_session(session)

        self.store.dispatch(LoggedIn(session, demo_transactions()))
        return session
