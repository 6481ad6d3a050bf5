"""
Application state and the reducer that is its only writer.

``AppState`` is immutable. Every change is an action passed through
``reduce``; ``Store.dispatch`` applies actions one at a time under a lock and
notifies subscribers after the new state is in place.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Tuple

from frontend import config
from frontend.demo import DEMO_CHART_DATA, DEMO_TOTAL_RECYCLED, EMPTY_CHART_DATA
from frontend.entities import PickupRequest, Role, Session, Transaction, View
from frontend.errors import InsufficientBalance, Unauthorized, ValidationFailed

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    LANGUAGE_UNSELECTED = 'language_unselected'
    ROLE_UNSELECTED = 'role_unselected'
    AUTHENTICATING = 'authenticating'
    LOGGED_IN = 'logged_in'


def cost_in_coins(amount_xof: int) -> int:
    """ceil(amount / exchange rate) in integer arithmetic."""
    return -(-amount_xof // config.EXCHANGE_RATE)


@dataclass(frozen=True)
class AppState:
    session: Optional[Session] = None
    view: View = View.DASHBOARD
    language: str = 'en'
    language_selected: bool = False
    target_role: Optional[Role] = None
    transactions: Tuple[Transaction, ...] = ()
    pickups: Tuple[PickupRequest, ...] = ()
    offline: bool = False
    total_recycled: int = DEMO_TOTAL_RECYCLED
    chart_data: tuple = DEMO_CHART_DATA

    @property
    def user(self):
        return self.session.user if self.session else None

    @property
    def phase(self) -> Phase:
        if self.session is not None:
            return Phase.LOGGED_IN
        if not self.language_selected:
            return Phase.LANGUAGE_UNSELECTED
        if self.target_role is None:
            return Phase.ROLE_UNSELECTED
        return Phase.AUTHENTICATING

    @property
    def next_pickup(self) -> Optional[PickupRequest]:
        return next((p for p in self.pickups if p.status in ('requested', 'assigned')), None)


# --- actions ---

@dataclass(frozen=True)
class SelectLanguage:
    language: Optional[str]


@dataclass(frozen=True)
class SelectRole:
    role: Optional[Role]


@dataclass(frozen=True)
class LoggedIn:
    session: Session
    demo_transactions: Tuple[Transaction, ...] = ()


@dataclass(frozen=True)
class LoggedOut:
    pass


@dataclass(frozen=True)
class RoleToggled:
    role: Role


@dataclass(frozen=True)
class Navigate:
    view: View


@dataclass(frozen=True)
class PickupsLoaded:
    pickups: Tuple[PickupRequest, ...]
    offline: bool


@dataclass(frozen=True)
class PickupAdded:
    pickup: PickupRequest
    offline: Optional[bool] = None


@dataclass(frozen=True)
class Redeemed:
    cost: int
    transaction: Transaction


def reduce(state: AppState, action) -> AppState:
    if isinstance(action, Navigate):
        return replace(state, view=action.view)

    if isinstance(action, SelectLanguage):
        if action.language is None:
            return replace(state, language_selected=False, target_role=None)
        return replace(state, language=action.language, language_selected=True)

    if isinstance(action, SelectRole):
        return replace(state, target_role=action.role)

    if isinstance(action, LoggedIn):
        user = action.session.user
        if action.session.seed_demo:
            ledger = dict(transactions=tuple(action.demo_transactions),
                          total_recycled=DEMO_TOTAL_RECYCLED, chart_data=DEMO_CHART_DATA)
        else:
            ledger = dict(transactions=(), total_recycled=0, chart_data=EMPTY_CHART_DATA)
        return replace(
            state,
            session=action.session,
            language=user.language or state.language,
            language_selected=True,
            target_role=None,
            view=View.DASHBOARD,
            **ledger,
        )

    if isinstance(action, LoggedOut):
        return replace(state, session=None, view=View.DASHBOARD, target_role=None,
                       offline=False, pickups=())

    if isinstance(action, RoleToggled):
        return replace(state, session=None, view=View.DASHBOARD, target_role=action.role,
                       language_selected=True, offline=False, pickups=())

    if isinstance(action, PickupsLoaded):
        return replace(state, pickups=tuple(action.pickups), offline=action.offline)

    if isinstance(action, PickupAdded):
        offline = state.offline if action.offline is None else action.offline
        return replace(state, pickups=(action.pickup,) + state.pickups, offline=offline)

    if isinstance(action, Redeemed):
        if state.session is None:
            raise Unauthorized('Log in to redeem EcoCoins')
        if action.cost <= 0:
            raise ValidationFailed('Redemption amount must be positive')
        user = state.session.user
        if action.cost > user.eco_coins:
            raise InsufficientBalance(f'{action.cost} coins needed, {user.eco_coins} available')
        # Balance and ledger change in the same step
        session = replace(state.session, user=replace(user, eco_coins=user.eco_coins - action.cost))
        return replace(state, session=session, transactions=(action.transaction,) + state.transactions)

    raise TypeError(f'Unknown action: {action!r}')


class Store:
    def __init__(self, state: Optional[AppState] = None):
        self._state = state or AppState()
        self._lock = threading.RLock()
        self._listeners: List[Callable[[AppState, AppState], None]] = []

    @property
    def state(self) -> AppState:
        return self._state

    def subscribe(self, listener):
        self._listeners.append(listener)

    def dispatch(self, action) -> AppState:
        with self._lock:
            previous = self._state
            self._state = reduce(previous, action)
            current = self._state
        logger.debug(f"{type(action).__name__}: phase={current.phase.value} view={current.view.value}")
        for listener in list(self._listeners):
            listener(previous, current)
        return current
