import logging
import time

from frontend.demo import mock_pickups
from frontend.entities import PickupRequest
from frontend.errors import RecolheError
from frontend.state import PickupAdded, PickupsLoaded

logger = logging.getLogger(__name__)


class PickupService:
    """
    Create/list pickups, degrading to local data when the backend fails.

    Each call classifies its failure once; the user retries by repeating the
    action. Whatever path is taken, the newest pickup ends up at index 0.
    """

    def __init__(self, api, store):
        self.api = api
        self.store = store

    def list_pickups(self):
        try:
            pickups = self.api.list_pickups()
        except RecolheError as e:
            logger.warning(f"Backend unreachable, using local mock data: {e}")
            pickups = mock_pickups()
            self.store.dispatch(PickupsLoaded(tuple(pickups), offline=True))
        else:
            self.store.dispatch(PickupsLoaded(tuple(pickups), offline=False))
        return list(self.store.state.pickups)

    def create_pickup(self, draft):
        try:
            pickup = self.api.create_pickup(draft)
        except RecolheError as e:
            logger.warning(f"Failed to create pickup via API, keeping it locally: {e}")
            pickup = PickupRequest.from_draft(str(int(time.time() * 1000)), draft)
            self.store.dispatch(PickupAdded(pickup, offline=True))
        else:
            self.store.dispatch(PickupAdded(pickup))
        return pickup
