from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

from LexiApp.services.errors import MalformedResponse


@dataclass(frozen=True, slots=True)
class PhoneticVariant:
    text: Optional[str] = None
    audio_url: Optional[str] = None

    @property
    def playable(self) -> bool:
        return bool(self.audio_url and self.audio_url.strip())


@dataclass(frozen=True, slots=True)
class Definition:
    text: str
    example: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Meaning:
    part_of_speech: str
    definitions: tuple[Definition, ...] = ()
    synonyms: tuple[str, ...] = ()
    antonyms: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DictionaryEntry:
    word: str
    phonetic: Optional[str] = None
    phonetics: tuple[PhoneticVariant, ...] = ()
    meanings: tuple[Meaning, ...] = ()
    source_urls: tuple[str, ...] = ()


# ---- Parsing of the API payload ----
def _opt_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        s = value.strip()
        return s or None
    return None


def _as_list(value: Any, field: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedResponse(f"'{field}' is not a list")
    return value


def _unique_words(items: list, field: str) -> tuple[str, ...]:
    seen, out = set(), []
    for w in _as_list(items, field):
        if not isinstance(w, str):
            continue
        s = w.strip()
        if s and s not in seen:
            seen.add(s)
            out.append(s)
    return tuple(out)


def _parse_phonetics(raw) -> tuple[PhoneticVariant, ...]:
    out = []
    for item in _as_list(raw, "phonetics"):
        if not isinstance(item, dict):
            continue
        # the API calls the recording url "audio"
        out.append(PhoneticVariant(text=_opt_str(item.get("text")), audio_url=_opt_str(item.get("audio"))))
    return tuple(out)


def _parse_meaning(item) -> Meaning:
    if not isinstance(item, dict):
        raise MalformedResponse("meaning is not an object")
    pos = item.get("partOfSpeech")
    if not isinstance(pos, str):
        raise MalformedResponse("'partOfSpeech' is missing")
    definitions = []
    for d in _as_list(item.get("definitions"), "definitions"):
        if not isinstance(d, dict):
            continue
        text = _opt_str(d.get("definition"))
        if not text:
            continue
        definitions.append(Definition(text=text, example=_opt_str(d.get("example"))))
    return Meaning(
        part_of_speech=pos.strip(),
        definitions=tuple(definitions),
        synonyms=_unique_words(item.get("synonyms"), "synonyms"),
        antonyms=_unique_words(item.get("antonyms"), "antonyms"),
    )


def parse_entry(data: Any) -> DictionaryEntry:
    """Build a ``DictionaryEntry`` from one element of the API response.

    Raises ``MalformedResponse`` when the payload lacks a headword or a
    field has the wrong type. Optional fields that are missing fall back to
    empty values instead of failing.
    """
    if not isinstance(data, dict):
        raise MalformedResponse("entry is not an object")
    word = data.get("word")
    if not isinstance(word, str) or not word.strip():
        raise MalformedResponse("'word' is missing")
    sources = tuple(u.strip() for u in _as_list(data.get("sourceUrls"), "sourceUrls") if isinstance(u, str) and u.strip())
    return DictionaryEntry(
        word=word.strip(),
        phonetic=_opt_str(data.get("phonetic")),
        phonetics=_parse_phonetics(data.get("phonetics")),
        meanings=tuple(_parse_meaning(m) for m in _as_list(data.get("meanings"), "meanings")),
        source_urls=sources,
    )


def parse_response(payload: Any) -> DictionaryEntry:
    """Pick the first candidate of a lookup response; the rest is dropped."""
    if not isinstance(payload, list):
        raise MalformedResponse("response is not a list")
    if not payload:
        raise MalformedResponse("response is empty")
    return parse_entry(payload[0])
