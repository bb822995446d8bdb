from __future__ import annotations

from LexiApp import settings


class LexiAppError(Exception):
    """Base class for errors shown to the user."""

    default_message = ""

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class LookupFailed(LexiAppError):
    pass


class LookupNotFound(LookupFailed):
    """Remote answered with a non-success status."""

    default_message = settings.MSG_NOT_FOUND


class LookupConnectivity(LookupFailed):
    """Transport failure or a body that could not be read."""

    default_message = settings.MSG_CONNECTIVITY


class MalformedResponse(LookupConnectivity):
    """Body decoded but does not match the entry schema."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__()

    def __str__(self):
        return f"{self.message} ({self.reason})"


class AudioPlaybackFailure(LexiAppError):
    default_message = settings.MSG_AUDIO
