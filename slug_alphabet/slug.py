import logging
import random
from typing import Callable

from .alphabet import Alphabet
from .errors import EmptyAlphabetError

_LOGGER = logging.getLogger(__name__)

_DEFAULT_MIN_LEN = 1


class SlugGenerator:
    """Hands out consecutive slugs of an alphabet, shortest first.

    Slugs never repeat until ``reset_len`` is called. Once every slug of the
    current length has been issued the generator moves on to the next length.
    """

    _alphabet: Alphabet
    _min_len: int
    _len: int
    _next_index: int

    def __init__(
        self,
        alphabet: Alphabet,
        *,
        min_len: int = _DEFAULT_MIN_LEN,
        shuffle_alphabet: bool = False,
        rng: random.Random | None = None,
    ) -> None:
        if len(alphabet) == 0:
            raise EmptyAlphabetError()

        if shuffle_alphabet:
            chars = list(alphabet.chars)
            (rng or random.Random()).shuffle(chars)
            alphabet = Alphabet.new(chars)
        self._alphabet = alphabet

        self._min_len = max(min_len, 1)
        self.reset_len()

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def length(self) -> int:
        return self._len

    def first_index(self, length: int) -> int:
        base = len(self._alphabet)
        return sum(base**k for k in range(1, length))

    def _set_len(self, length: int) -> None:
        self._len = length
        # set the index to the first one that encodes to 'length' characters
        self._next_index = self.first_index(length)
        _LOGGER.debug("slug length set to %s", length)

    def reset_len(self) -> None:
        self._set_len(self._min_len)

    def bump_len(self) -> None:
        self._set_len(self._len + 1)

    def generate(self) -> str:
        if self._next_index >= self.first_index(self._len + 1):
            # all slugs of the current length are used up
            self.bump_len()

        slug = self._alphabet.encode(self._next_index)
        self._next_index += 1
        return slug

    def generate_unique(self, is_taken: Callable[[str], bool]) -> str:
        while True:
            slug = self.generate()
            if not is_taken(slug):
                return slug

            # we got a conflict, start using longer ones
            self.bump_len()
