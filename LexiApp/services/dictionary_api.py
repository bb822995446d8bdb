from __future__ import annotations
import logging
import threading
from urllib.parse import quote

import requests

from LexiApp import settings
from LexiApp.models.entry import DictionaryEntry, parse_response
from LexiApp.services.errors import LookupConnectivity, LookupFailed, LookupNotFound

logger = logging.getLogger(__name__)


def _on_main_thread(fn):
    from kivy.clock import Clock
    Clock.schedule_once(lambda dt: fn(), 0)


class DictionaryClient:
    """One GET per term against the free dictionary API, no caching or retries."""

    def __init__(self, base_url: str = settings.API_BASE_URL, timeout: float = settings.REQUEST_TIMEOUT,
                 session: requests.Session | None = None, schedule=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._schedule = schedule or _on_main_thread

    def url_for(self, term: str) -> str:
        return f"{self.base_url}/{quote(term, safe='')}"

    def fetch(self, term: str) -> DictionaryEntry:
        """Blocking lookup. Raises ``LookupNotFound`` or ``LookupConnectivity``."""
        url = self.url_for(term)
        logger.debug("Lookup %r -> %s", term, url)
        try:
            resp = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Lookup %r failed: %s", term, e)
            raise LookupConnectivity() from e

        if not resp.ok:
            logger.info("Lookup %r: HTTP %s", term, resp.status_code)
            raise LookupNotFound()

        try:
            payload = resp.json()
        except ValueError as e:
            logger.warning("Lookup %r: body is not JSON", term)
            raise LookupConnectivity() from e
        if payload == []:
            raise LookupNotFound()
        return parse_response(payload)

    def lookup(self, term: str, on_result) -> threading.Thread:
        """Run ``fetch`` on a worker and call ``on_result(entry, error)`` on the UI thread."""
        def worker():
            entry, err = None, None
            try:
                entry = self.fetch(term)
            except LookupFailed as e:
                err = e
            except Exception as e:
                logger.exception("Unexpected error while looking up %r", term)
                err = LookupConnectivity()
                err.__cause__ = e
            self._schedule(lambda: on_result(entry, err))
        t = threading.Thread(target=worker, daemon=True)
        t.start()
        return t

    def close(self):
        self._session.close()
