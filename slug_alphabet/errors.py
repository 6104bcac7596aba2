import dataclasses

from .models import ErrorPayload


@dataclasses.dataclass(kw_only=True)
class AlphabetError(ValueError):
    char: str | None = None

    def __str__(self) -> str:
        return self.to_payload().message or ""

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload.invalid_alphabet()


@dataclasses.dataclass(kw_only=True)
class DuplicateCharError(AlphabetError):
    char: str

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload.duplicate_char(char=self.char)


@dataclasses.dataclass(kw_only=True)
class NotSubsetError(AlphabetError):
    char: str

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload.not_subset(char=self.char)


@dataclasses.dataclass(kw_only=True)
class InvalidCharError(AlphabetError):
    char: str

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload.invalid_char(char=self.char)


class EmptyAlphabetError(AlphabetError):
    def to_payload(self) -> ErrorPayload:
        return ErrorPayload.empty_alphabet()


__all__ = [
    AlphabetError.__name__,
    DuplicateCharError.__name__,
    NotSubsetError.__name__,
    InvalidCharError.__name__,
    EmptyAlphabetError.__name__,
]
