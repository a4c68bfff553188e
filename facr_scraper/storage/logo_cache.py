# facr_scraper/storage/logo_cache.py
import threading
from typing import Dict, Optional

from loguru import logger


class LogoCache:
    """Process-wide map of normalized team name -> logo URL.

    An empty string is stored for names whose lookup found nothing, so failed
    lookups are not repeated. Entries never expire. Reads and writes are
    guarded by a lock; two concurrent lookups of the same name both write and
    the last one wins.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, logo_url: str) -> None:
        with self._lock:
            self._entries[key] = logo_url
        logger.debug(f"Cached logo for '{key}': {logo_url or '<none>'}")

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
