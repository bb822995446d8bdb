from __future__ import annotations


class SavedWordStore:
    """Words the user marked as saved, kept in insertion order for the session only."""

    def __init__(self, words=None):
        self._seen: set[str] = set()
        self._order: list[str] = []
        for w in words or ():
            self.add(w)

    def has(self, word: str | None) -> bool:
        return word in self._seen

    def add(self, word: str) -> bool:
        # case-sensitive: "Hello" and "hello" are different entries
        if not word or word in self._seen:
            return False
        self._seen.add(word)
        self._order.append(word)
        return True

    def list(self) -> list[str]:
        return list(self._order)

    def __contains__(self, word) -> bool:
        return self.has(word)

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self):
        return iter(list(self._order))
