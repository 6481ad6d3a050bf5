import logging
import time

from frontend.api import ApiClient
from frontend.demo import demo_transactions
from frontend.entities import Role, Transaction, View, now_iso
from frontend.pickups import PickupService
from frontend.session import AuthFlow
from frontend.state import LoggedIn, LoggedOut, Navigate, Redeemed, RoleToggled, Store, cost_in_coins

logger = logging.getLogger(__name__)


class Shell:
    """
    Owns the application state and every cross-cutting action.

    Views read ``shell.state`` and call back into these methods; they never
    talk to each other or to the API directly.
    """

    def __init__(self, api=None, store=None):
        self.api = api or ApiClient()
        self.store = store or Store()
        self.auth = AuthFlow(self.api, self.store)
        self.pickups = PickupService(self.api, self.store)
        self.store.subscribe(self._on_change)

    @property
    def state(self):
        return self.store.state

    def _on_change(self, previous, current):
        # Reload pickups whenever a different identity logs in
        before = previous.session.user.id if previous.session else None
        after = current.session.user.id if current.session else None
        if after is not None and after != before:
            self.pickups.list_pickups()

    def start(self):
        """Resume a persisted session, skipping language and role selection."""
        session = self.api.current_session()
        if session is not None:
            logger.info(f"Restoring session for {session.user.email}")
            self.store.dispatch(LoggedIn(session, demo_transactions()))
        return self.state

    def navigate(self, view):
        return self.store.dispatch(Navigate(View(view)))

    def logout(self):
        self.api.clear_session()
        return self.store.dispatch(LoggedOut())

    def toggle_role(self):
        """Switching role means logging in again under the other role."""
        user = self.state.user
        if user is None:
            return self.state
        new_role = Role.COLLECTOR if user.role == Role.USER else Role.USER
        self.api.clear_session()
        return self.store.dispatch(RoleToggled(new_role))

    def submit_pickup(self, draft):
        pickup = self.pickups.create_pickup(draft)
        self.navigate(View.DASHBOARD)
        return pickup

    def refresh_pickups(self):
        return self.pickups.list_pickups()

    def redeem(self, amount_xof, description):
        cost = cost_in_coins(amount_xof)
        transaction = Transaction(
            id=str(int(time.time() * 1000)),
            amount=cost,
            type='spent',
            description=description,
            date=now_iso(),
        )
        self.store.dispatch(Redeemed(cost, transaction))
        self.api.save_session(self.state.session)
        logger.info(f"Redeemed {cost} coins: {description}")
        return transaction
