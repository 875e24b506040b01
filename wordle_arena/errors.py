"""
Engine Errors

Every error a caller can recover from. Each carries the kind name reported to
clients and the HTTP status the transport layer answers with.
"""

from typing import Iterable, List


class WordleError(Exception):
    """Base class for expected, user-facing engine failures."""
    kind = "WordleError"
    status_code = 400

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind)
        self.message = message or self.kind

    def to_dict(self) -> dict:
        return {
            'success': False,
            'error': self.message,
            'kind': self.kind
        }


class InvalidInput(WordleError):
    """Malformed guess or word shape."""
    kind = "InvalidInput"


class InvalidGuess(InvalidInput):
    kind = "InvalidGuess"


class InvalidConfig(WordleError):
    kind = "InvalidConfig"


class InvalidWordList(WordleError):
    """Raised when one or more word list entries are not 5 letters."""
    kind = "InvalidWordList"

    def __init__(self, invalid_words: Iterable[str]):
        self.invalid_words: List[str] = list(invalid_words)
        super().__init__(
            f"All words must be 5 letters long. Invalid words: {', '.join(self.invalid_words)}"
        )

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['invalid_words'] = self.invalid_words
        return data


class EmptyWordPool(InvalidConfig):
    """No words to draw a secret from; a configuration error."""
    kind = "EmptyWordPool"


class GameAlreadyOver(WordleError):
    kind = "GameAlreadyOver"
    status_code = 409


class RoomFinished(WordleError):
    kind = "RoomFinished"
    status_code = 409


class RoomFull(WordleError):
    kind = "RoomFull"
    status_code = 409


class RoomAlreadyStarted(WordleError):
    """The room has left the lobby; roster and settings are frozen."""
    kind = "RoomAlreadyStarted"
    status_code = 409


class RoomNotStarted(WordleError):
    kind = "RoomNotStarted"
    status_code = 409


class DuplicatePlayer(WordleError):
    kind = "DuplicatePlayer"
    status_code = 409


class UnknownPlayer(WordleError):
    kind = "UnknownPlayer"
    status_code = 404


class NotFound(WordleError):
    """Unknown, expired or closed session identifier."""
    kind = "NotFound"
    status_code = 404


class NotHost(WordleError):
    kind = "NotHost"
    status_code = 403


class ServiceUnavailable(WordleError):
    kind = "ServiceUnavailable"
    status_code = 500
