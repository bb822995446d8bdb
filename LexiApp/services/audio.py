from __future__ import annotations
import logging
import os
import tempfile
import threading
from urllib.parse import urlsplit

import requests

from LexiApp import settings
from LexiApp.services.errors import AudioPlaybackFailure

logger = logging.getLogger(__name__)


def normalize_audio_url(url: str) -> str:
    """Protocol-relative urls (``//host/a.mp3``) are played over https."""
    url = (url or "").strip()
    if url.startswith("//"):
        return "https:" + url
    return url


class AudioPlayer:
    """Fire-and-forget playback of pronunciation recordings.

    The recording is downloaded on a worker thread and handed to Kivy's
    ``SoundLoader`` on the main thread. Failures are reported through
    ``on_error`` and never raised to the caller.
    """

    def __init__(self, timeout: float = settings.REQUEST_TIMEOUT, session: requests.Session | None = None):
        self._timeout = timeout
        self._session = session or requests.Session()
        self._sound = None
        self._tmp_path: str | None = None
        self._lock = threading.Lock()

    def play(self, url: str, on_error=None):
        full_url = normalize_audio_url(url)
        if not full_url:
            self._report(on_error, AudioPlaybackFailure())
            return

        def worker():
            try:
                path = self._download(full_url)
            except (requests.RequestException, OSError) as e:
                logger.warning("Audio download failed for %s: %s", full_url, e)
                self._schedule(lambda: self._report(on_error, AudioPlaybackFailure()))
                return
            self._schedule(lambda: self._start(path, on_error))
        t = threading.Thread(target=worker, daemon=True)
        t.start()
        return t

    def stop(self):
        snd, self._sound = self._sound, None
        if snd is not None:
            snd.stop()
            snd.unload()
        self._discard_tmp()

    # ---- internals ----
    def _download(self, url: str) -> str:
        resp = self._session.get(url, timeout=self._timeout)
        resp.raise_for_status()
        suffix = os.path.splitext(urlsplit(url).path)[1] or ".mp3"
        fd, path = tempfile.mkstemp(prefix="lexiapp_", suffix=suffix)
        with os.fdopen(fd, "wb") as f:
            f.write(resp.content)
        return path

    def _start(self, path: str, on_error):
        from kivy.core.audio import SoundLoader
        self.stop()
        with self._lock:
            self._tmp_path = path
        sound = SoundLoader.load(path)
        if sound is None:
            logger.warning("No audio provider could load %s", path)
            self._discard_tmp()
            self._report(on_error, AudioPlaybackFailure())
            return
        self._sound = sound
        sound.play()

    def _discard_tmp(self):
        with self._lock:
            path, self._tmp_path = self._tmp_path, None
        if path:
            try:
                os.remove(path)
            except OSError:
                logger.debug("Could not remove %s", path)

    def _schedule(self, fn):
        from kivy.clock import Clock
        Clock.schedule_once(lambda dt: fn(), 0)

    def _report(self, on_error, err: AudioPlaybackFailure):
        if on_error is not None:
            on_error(err)
