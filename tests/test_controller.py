"""
Tests for the search/save/theme workflow of AppController.
"""

import pytest

from LexiApp import settings
from LexiApp.controller import AppController
from LexiApp.models.saved_words import SavedWordStore
from LexiApp.models.state import Status
from LexiApp.services.errors import LookupConnectivity, LookupNotFound

from tests.conftest import FakeAudio


@pytest.fixture
def changes():
    return []


@pytest.fixture
def controller(fake_client, fake_audio, changes):
    return AppController(fake_client, saved=SavedWordStore(), audio=fake_audio,
                         on_change=lambda: changes.append(1))


class TestSubmit:

    def test_submit_issues_one_lookup(self, controller, fake_client):
        assert controller.submit("  hello  ") is True
        assert fake_client.terms == ["hello"]

    def test_enters_loading(self, controller):
        controller.submit("hello")

        page = controller.view()
        assert controller.state.status is Status.LOADING
        assert page.show_loading
        assert not page.show_welcome
        assert page.search.enabled is False
        assert page.search.label == settings.LABEL_SEARCHING

    @pytest.mark.parametrize("term", ["", "   ", "\t\n", None])
    def test_blank_term_is_ignored(self, controller, fake_client, changes, term):
        before = controller.view()

        assert controller.submit(term) is False

        assert fake_client.calls == []
        assert changes == []
        assert controller.view() == before

    def test_success_displays_entry(self, controller, fake_client, minimal_hello_entry):
        controller.submit("hello")
        fake_client.complete(entry=minimal_hello_entry)

        page = controller.view()
        assert controller.state.status is Status.DISPLAYING
        assert controller.state.current_entry is minimal_hello_entry
        assert page.show_word and not page.show_loading and not page.show_error
        assert page.entry.word == "hello"
        assert page.entry.phonetic == "/həˈləʊ/"
        assert page.entry.save.label == "Save Word"
        assert page.search.enabled and page.search.label == "Search"

    def test_not_found(self, controller, fake_client):
        controller.submit("zzzxxx123")
        fake_client.complete(error=LookupNotFound())

        page = controller.view()
        assert controller.state.status is Status.ERROR
        assert page.show_error
        assert page.error_text == "Word not found. Please try another word."
        assert not page.show_word
        assert page.search.enabled and page.search.label == "Search"

    def test_connectivity_failure(self, controller, fake_client):
        controller.submit("hello")
        fake_client.complete(error=LookupConnectivity())
        assert controller.view().error_text == settings.MSG_CONNECTIVITY

    def test_search_control_restored_once_per_attempt(self, controller, fake_client, hello_entry):
        enabled_flips = []
        controller.on_change = lambda: enabled_flips.append(controller.view().search.enabled)

        controller.submit("hello")
        fake_client.complete(entry=hello_entry)

        assert enabled_flips == [False, True]

    def test_failure_keeps_previous_entry_hidden(self, controller, fake_client, hello_entry):
        controller.submit("hello")
        fake_client.complete(entry=hello_entry)
        controller.submit("zzzxxx123")
        fake_client.complete(error=LookupNotFound())

        assert controller.state.current_entry is hello_entry
        assert controller.view().entry is None

    def test_new_search_clears_error(self, controller, fake_client):
        controller.submit("zzzxxx123")
        fake_client.complete(error=LookupNotFound())
        controller.submit("hello")

        assert controller.state.last_error is None
        assert not controller.view().show_error


class TestOverlappingSearches:

    def test_stale_result_is_dropped(self, controller, fake_client, hello_entry, minimal_hello_entry):
        controller.submit("first")
        controller.submit("second")

        fake_client.complete(index=1, entry=minimal_hello_entry)
        fake_client.complete(index=0, entry=hello_entry)

        assert controller.state.current_entry is minimal_hello_entry
        assert controller.state.status is Status.DISPLAYING

    def test_stale_result_does_not_end_loading(self, controller, fake_client, hello_entry):
        controller.submit("first")
        controller.submit("second")

        fake_client.complete(index=0, error=LookupNotFound())

        assert controller.state.status is Status.LOADING
        assert controller.view().search.enabled is False


class TestSave:

    def test_save_is_idempotent(self, controller, fake_client, minimal_hello_entry):
        controller.submit("hello")
        fake_client.complete(entry=minimal_hello_entry)

        assert controller.save() is True
        assert controller.save() is False

        assert controller.saved.list() == ["hello"]
        page = controller.view()
        assert page.entry.save.label == "Saved"
        assert page.entry.save.enabled is False
        assert page.entry.highlighted
        assert page.saved_words.words == ("hello",)

    def test_save_without_entry_is_noop(self, controller):
        assert controller.save() is False
        assert controller.saved.list() == []

    def test_save_while_error_shown_is_noop(self, controller, fake_client, hello_entry):
        controller.submit("hello")
        fake_client.complete(entry=hello_entry)
        controller.submit("zzzxxx123")
        fake_client.complete(error=LookupNotFound())

        assert controller.save() is False
        assert controller.saved.list() == []

    def test_saved_state_survives_new_lookup(self, controller, fake_client, hello_entry):
        controller.submit("hello")
        fake_client.complete(entry=hello_entry)
        controller.save()
        controller.submit("hello")
        fake_client.complete(entry=hello_entry)

        assert controller.view().entry.save.label == "Saved"


class TestThemeAndAudio:

    def test_toggle_theme(self, controller):
        assert controller.toggle_theme() is True
        assert controller.view().theme.show_moon
        assert controller.toggle_theme() is False
        assert controller.view().theme.show_sun

    def test_theme_does_not_touch_search_state(self, controller, fake_client, hello_entry):
        controller.submit("hello")
        fake_client.complete(entry=hello_entry)
        controller.toggle_theme()

        assert controller.state.status is Status.DISPLAYING
        assert controller.state.current_entry is hello_entry

    def test_play_audio_forwards_url(self, controller, fake_audio):
        controller.play_audio("https://example.com/a.mp3")
        assert fake_audio.played == ["https://example.com/a.mp3"]

    def test_audio_failure_sets_notice_only(self, fake_client, hello_entry):
        controller = AppController(fake_client, audio=FakeAudio(fail=True))
        controller.submit("hello")
        fake_client.complete(entry=hello_entry)

        controller.play_audio("https://example.com/a.mp3")

        page = controller.view()
        assert page.notice == "Unable to play audio pronunciation."
        assert page.show_word
        assert not page.show_error
        assert controller.state.status is Status.DISPLAYING

        controller.dismiss_notice()
        assert controller.view().notice is None
