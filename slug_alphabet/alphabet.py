import logging
from typing import Iterable, Sequence

from . import constants
from .errors import (
    DuplicateCharError,
    EmptyAlphabetError,
    InvalidCharError,
    NotSubsetError,
)
from .models import AlphabetModel

_LOGGER = logging.getLogger(__name__)


class Alphabet:
    """An ordered, duplicate-free set of characters used as the digits of a
    bijective base-N numeral system.

    Instances are immutable and their characters are verified on
    construction.
    """

    BASE_2 = constants.BASE_2
    BASE_10 = constants.BASE_10
    BASE_16 = constants.BASE_16
    BASE_62 = constants.BASE_62
    BASE_64 = constants.BASE_64
    NUMBERS = constants.NUMBERS
    HEX = constants.HEX
    LETTERS_LOWERCASE = constants.LETTERS_LOWERCASE
    LETTERS_UPPERCASE = constants.LETTERS_UPPERCASE
    LETTERS = constants.LETTERS
    URL_UNRESERVED_RFC3986 = constants.URL_UNRESERVED_RFC3986
    ASCII = constants.ASCII

    _chars: tuple[str, ...]

    def __init__(self, chars: Iterable[str]) -> None:
        chars = tuple(chars)
        check_chars(chars)
        self._chars = chars

    @classmethod
    def new(cls, chars: Iterable[str]) -> "Alphabet":
        return cls(chars)

    @classmethod
    def from_str(cls, text: str) -> "Alphabet":
        return cls.new(iter(text))

    @property
    def chars(self) -> tuple[str, ...]:
        return self._chars

    def __len__(self) -> int:
        return len(self._chars)

    def __getitem__(self, index: int) -> str:
        # no negative indexing, only 0 <= index < len
        if not 0 <= index < len(self._chars):
            raise IndexError(
                f"alphabet index {index} out of range for length {len(self._chars)}"
            )
        return self._chars[index]

    def __contains__(self, char: object) -> bool:
        return char in self._chars

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def verify(self, restriction: "Alphabet | None" = None) -> None:
        check_chars(self._chars, restriction)

    def is_subset(self, other: "Alphabet") -> bool:
        try:
            self.verify(other)
        except NotSubsetError:
            return False
        return True

    def encode(self, index: int) -> str:
        base = len(self._chars)
        if base == 0:
            raise EmptyAlphabetError()

        digits: list[str] = []
        current = index
        while current >= 0:
            current, remainder = divmod(current, base)
            digits.append(self._chars[remainder])
            # the -1 on every carry is what makes the numeral system bijective
            current -= 1

        digits.reverse()
        return "".join(digits)

    def generate(self, start: int, count: int) -> list[str]:
        if not self._chars:
            raise EmptyAlphabetError()
        _LOGGER.debug("generating %s strings starting at index %s", count, start)
        return [self.encode(index) for index in range(start, start + count)]

    def to_model(self) -> AlphabetModel:
        return AlphabetModel(chars=list(self._chars))

    @classmethod
    def from_model(cls, model: AlphabetModel) -> "Alphabet":
        return cls.new(model.chars)

    def to_json(self) -> str:
        return self.to_model().model_dump_json()

    @classmethod
    def from_json(cls, raw: str | bytes) -> "Alphabet":
        return cls.from_model(AlphabetModel.model_validate_json(raw))


def check_chars(chars: Sequence[str], restriction: Alphabet | None = None) -> None:
    """Raise the first violation found, in order of the characters.

    Each character is checked for repetition before it is checked against
    ``restriction``.
    """
    allowed = None if restriction is None else set(restriction.chars)
    seen: set[str] = set()

    for c in chars:
        if not isinstance(c, str) or len(c) != 1:
            raise InvalidCharError(char=str(c))
        if c in seen:
            raise DuplicateCharError(char=c)
        if allowed is not None and c not in allowed:
            raise NotSubsetError(char=c)
        seen.add(c)
