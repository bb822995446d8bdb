"""Pure projections of application state into display models.

Nothing here touches Kivy, the network or the stores beyond reading them.
``screens.lookup`` applies the resulting values to widgets.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from LexiApp import settings
from LexiApp.models.entry import DictionaryEntry, Meaning
from LexiApp.models.saved_words import SavedWordStore
from LexiApp.models.state import AppState, Status
from LexiApp.services.audio import normalize_audio_url


@dataclass(frozen=True, slots=True)
class SaveButtonView:
    label: str
    enabled: bool
    saved: bool


@dataclass(frozen=True, slots=True)
class AudioItemView:
    label: str
    audio_url: str
    play_url: str


@dataclass(frozen=True, slots=True)
class AudioSectionView:
    visible: bool
    items: tuple[AudioItemView, ...] = ()


@dataclass(frozen=True, slots=True)
class DefinitionItemView:
    text: str
    example: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DefinitionsView:
    title: str
    items: tuple[DefinitionItemView, ...]


@dataclass(frozen=True, slots=True)
class TagListView:
    title: str
    kind: str
    tags: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class MeaningView:
    part_of_speech: str
    definitions: Optional[DefinitionsView] = None
    synonyms: Optional[TagListView] = None
    antonyms: Optional[TagListView] = None


@dataclass(frozen=True, slots=True)
class SourceLinkView:
    url: str
    target: str = "_blank"
    rel: str = "noopener noreferrer"


@dataclass(frozen=True, slots=True)
class SourcesView:
    visible: bool
    links: tuple[SourceLinkView, ...] = ()


@dataclass(frozen=True, slots=True)
class EntryView:
    word: str
    phonetic: Optional[str]
    save: SaveButtonView
    highlighted: bool
    audio: AudioSectionView
    meanings: tuple[MeaningView, ...]
    sources: SourcesView


@dataclass(frozen=True, slots=True)
class SavedWordsView:
    visible: bool
    words: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ThemeView:
    is_dark: bool
    palette: str
    show_sun: bool
    show_moon: bool


@dataclass(frozen=True, slots=True)
class SearchControlView:
    label: str
    enabled: bool


@dataclass(frozen=True, slots=True)
class PageView:
    show_welcome: bool
    show_loading: bool
    show_error: bool
    error_text: Optional[str]
    show_word: bool
    search: SearchControlView
    entry: Optional[EntryView]
    saved_words: SavedWordsView
    theme: ThemeView
    notice: Optional[str] = None


# ---- entry ----
def _render_audio(entry: DictionaryEntry) -> AudioSectionView:
    playable = [p for p in entry.phonetics if p.playable]
    if not playable:
        return AudioSectionView(visible=False)
    items = tuple(
        AudioItemView(
            label=p.text or settings.LABEL_PLAY_AUDIO,
            audio_url=p.audio_url,
            play_url=normalize_audio_url(p.audio_url),
        )
        for p in playable
    )
    return AudioSectionView(visible=True, items=items)


def _render_meaning(meaning: Meaning) -> MeaningView:
    definitions = None
    if meaning.definitions:
        definitions = DefinitionsView(
            title=settings.LABEL_DEFINITIONS,
            items=tuple(
                DefinitionItemView(
                    text=f"• {d.text}",
                    example=f'Example: "{d.example}"' if d.example else None,
                )
                for d in meaning.definitions
            ),
        )
    synonyms = TagListView(settings.LABEL_SYNONYMS, "synonym", meaning.synonyms) if meaning.synonyms else None
    antonyms = TagListView(settings.LABEL_ANTONYMS, "antonym", meaning.antonyms) if meaning.antonyms else None
    return MeaningView(
        part_of_speech=meaning.part_of_speech,
        definitions=definitions,
        synonyms=synonyms,
        antonyms=antonyms,
    )


def _render_sources(entry: DictionaryEntry) -> SourcesView:
    if not entry.source_urls:
        return SourcesView(visible=False)
    return SourcesView(visible=True, links=tuple(SourceLinkView(url=u) for u in entry.source_urls))


def render_save_button(word: str | None, saved: SavedWordStore) -> SaveButtonView:
    if word is not None and saved.has(word):
        return SaveButtonView(label=settings.LABEL_SAVED, enabled=False, saved=True)
    return SaveButtonView(label=settings.LABEL_SAVE, enabled=True, saved=False)


def render_entry(entry: DictionaryEntry, saved: SavedWordStore) -> EntryView:
    save = render_save_button(entry.word, saved)
    return EntryView(
        word=entry.word,
        phonetic=entry.phonetic,
        save=save,
        highlighted=save.saved,
        audio=_render_audio(entry),
        meanings=tuple(_render_meaning(m) for m in entry.meanings),
        sources=_render_sources(entry),
    )


# ---- page ----
def render_saved_words(saved: SavedWordStore) -> SavedWordsView:
    words = tuple(saved.list())
    return SavedWordsView(visible=bool(words), words=words)


def render_theme(is_dark: bool) -> ThemeView:
    return ThemeView(
        is_dark=is_dark,
        palette="dark" if is_dark else "light",
        show_sun=not is_dark,
        show_moon=is_dark,
    )


def render_search_control(loading: bool) -> SearchControlView:
    if loading:
        return SearchControlView(label=settings.LABEL_SEARCHING, enabled=False)
    return SearchControlView(label=settings.LABEL_SEARCH, enabled=True)


def render_page(state: AppState, saved: SavedWordStore) -> PageView:
    status = state.status
    entry_view = render_entry(state.current_entry, saved) if state.shows_entry else None
    return PageView(
        show_welcome=status is Status.IDLE,
        show_loading=status is Status.LOADING,
        show_error=status is Status.ERROR,
        error_text=state.last_error if status is Status.ERROR else None,
        show_word=entry_view is not None,
        search=render_search_control(state.is_loading),
        entry=entry_view,
        saved_words=render_saved_words(saved),
        theme=render_theme(state.is_dark_mode),
        notice=state.notice,
    )


class EntryRenderer:
    """Holds the saved-word store so views can re-render without passing it around."""

    def __init__(self, saved: SavedWordStore):
        self.saved = saved

    def render(self, entry: DictionaryEntry) -> EntryView:
        return render_entry(entry, self.saved)

    def page(self, state: AppState) -> PageView:
        return render_page(state, self.saved)
