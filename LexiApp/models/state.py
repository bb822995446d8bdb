from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from LexiApp.models.entry import DictionaryEntry


class Status(Enum):
    IDLE = "idle"
    LOADING = "loading"
    DISPLAYING = "displaying"
    ERROR = "error"


@dataclass(slots=True)
class AppState:
    status: Status = Status.IDLE
    current_entry: Optional[DictionaryEntry] = None
    last_error: Optional[str] = None
    is_dark_mode: bool = False

    # transient, not tied to the search workflow (audio failures)
    notice: Optional[str] = None
    # generation of the lookup whose result is still awaited
    request_id: int = 0

    @property
    def is_loading(self) -> bool:
        return self.status is Status.LOADING

    @property
    def shows_entry(self) -> bool:
        return self.status is Status.DISPLAYING and self.current_entry is not None
