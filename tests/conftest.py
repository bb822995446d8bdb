import copy

import pytest

from LexiApp.models.entry import parse_entry


HELLO_PAYLOAD = {
    "word": "hello",
    "phonetic": "/həˈləʊ/",
    "phonetics": [
        {"text": "/həˈləʊ/", "audio": "//ssl.gstatic.com/dictionary/static/sounds/20200429/hello--_gb_1.mp3"},
        {"text": "/hɛˈləʊ/"},
    ],
    "meanings": [
        {
            "partOfSpeech": "exclamation",
            "definitions": [{"definition": "used as a greeting", "example": "hello there, Katie!"}],
            "synonyms": [],
            "antonyms": [],
        },
        {
            "partOfSpeech": "noun",
            "definitions": [{"definition": "an utterance of ‘hello’; a greeting."}],
            "synonyms": ["greeting", "salutation", "greeting"],
            "antonyms": ["goodbye"],
        },
    ],
    "sourceUrls": ["https://en.wiktionary.org/wiki/hello"],
}

MINIMAL_HELLO = {
    "word": "hello",
    "phonetic": "/həˈləʊ/",
    "phonetics": [],
    "meanings": [
        {
            "partOfSpeech": "exclamation",
            "definitions": [{"definition": "used as a greeting"}],
            "synonyms": [],
            "antonyms": [],
        }
    ],
}


@pytest.fixture
def hello_payload():
    return copy.deepcopy(HELLO_PAYLOAD)


@pytest.fixture
def hello_entry():
    return parse_entry(copy.deepcopy(HELLO_PAYLOAD))


@pytest.fixture
def minimal_hello_entry():
    return parse_entry(copy.deepcopy(MINIMAL_HELLO))


class FakeClient:
    """Records lookups; results are delivered by the test via ``complete``."""

    def __init__(self):
        self.calls = []

    def lookup(self, term, on_result):
        self.calls.append((term, on_result))

    @property
    def terms(self):
        return [t for t, _ in self.calls]

    def complete(self, index=-1, entry=None, error=None):
        _, on_result = self.calls[index]
        on_result(entry, error)


class FakeAudio:
    def __init__(self, fail=False):
        self.fail = fail
        self.played = []

    def play(self, url, on_error=None):
        self.played.append(url)
        if self.fail and on_error is not None:
            from LexiApp.services.errors import AudioPlaybackFailure
            on_error(AudioPlaybackFailure())


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def fake_audio():
    return FakeAudio()
