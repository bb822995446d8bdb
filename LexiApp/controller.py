from __future__ import annotations
import logging
from typing import Callable, Optional

from LexiApp.models.entry import DictionaryEntry
from LexiApp.models.saved_words import SavedWordStore
from LexiApp.models.state import AppState, Status
from LexiApp.render import EntryRenderer, PageView
from LexiApp.services.errors import AudioPlaybackFailure, LookupConnectivity, LookupFailed

logger = logging.getLogger(__name__)


class AppController:
    """Drives search, save, theme and audio actions and owns the transient UI state.

    ``client`` needs ``lookup(term, on_result)`` and ``audio`` needs
    ``play(url, on_error)``; both report back on the UI thread. Every state
    change is followed by a call to ``on_change`` so the view can redraw.
    """

    def __init__(self, client, saved: SavedWordStore | None = None, audio=None,
                 on_change: Optional[Callable[[], None]] = None):
        self.client = client
        self.audio = audio
        self.saved = saved if saved is not None else SavedWordStore()
        self.state = AppState()
        self.renderer = EntryRenderer(self.saved)
        self.on_change = on_change

    # ---- search ----
    def submit(self, raw_term: str | None) -> bool:
        term = (raw_term or "").strip()
        if not term:
            return False

        st = self.state
        st.request_id += 1
        request_id = st.request_id
        st.status = Status.LOADING
        st.last_error = None
        st.notice = None
        self._changed()

        logger.debug("Submitting lookup #%d for %r", request_id, term)
        self.client.lookup(term, lambda entry, err: self._on_lookup_done(request_id, entry, err))
        return True

    def _on_lookup_done(self, request_id: int, entry: DictionaryEntry | None, err: LookupFailed | None):
        st = self.state
        if request_id != st.request_id:
            logger.debug("Dropping result of superseded lookup #%d", request_id)
            return
        try:
            if err is None and entry is not None:
                st.current_entry = entry
                st.status = Status.DISPLAYING
            else:
                # the previous entry stays in current_entry but is not shown
                logger.info("Lookup #%d failed: %s", request_id, err)
                st.last_error = (err or LookupConnectivity()).message
                st.status = Status.ERROR
        finally:
            # never leave the search control disabled
            if st.status is Status.LOADING:
                st.last_error = LookupConnectivity().message
                st.status = Status.ERROR
            self._changed()

    # ---- saved words ----
    def save(self) -> bool:
        st = self.state
        if not st.shows_entry:
            return False
        word = st.current_entry.word
        if not self.saved.add(word):
            return False
        logger.info("Saved word %r", word)
        self._changed()
        return True

    # ---- theme ----
    def toggle_theme(self) -> bool:
        self.state.is_dark_mode = not self.state.is_dark_mode
        self._changed()
        return self.state.is_dark_mode

    # ---- audio ----
    def play_audio(self, url: str):
        if self.audio is None:
            self._on_audio_error(AudioPlaybackFailure())
            return
        self.audio.play(url, on_error=self._on_audio_error)

    def _on_audio_error(self, err: AudioPlaybackFailure):
        logger.warning("Audio playback failed: %s", err)
        self.state.notice = err.message
        self._changed()

    def dismiss_notice(self):
        if self.state.notice is not None:
            self.state.notice = None
            self._changed()

    # ---- view ----
    def view(self) -> PageView:
        return self.renderer.page(self.state)

    def _changed(self):
        if self.on_change is not None:
            self.on_change()
