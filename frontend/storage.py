import json
import logging
import os

from frontend import config

logger = logging.getLogger(__name__)

TOKEN_KEY = 'token'
USER_KEY = 'user'
SESSION_KEY = 'session'


class LocalStorage:
    """String key/value store persisted as one JSON file."""

    def __init__(self, path=None):
        self.path = path or config.STORAGE_PATH

    def _load(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable storage file {self.path}: {e}")
            return {}

    def _save(self, data):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f)

    def get_item(self, key):
        return self._load().get(key)

    def set_item(self, key, value):
        data = self._load()
        data[key] = value
        self._save(data)

    def remove_item(self, key):
        data = self._load()
        if data.pop(key, None) is not None:
            self._save(data)
