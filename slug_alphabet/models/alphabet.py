from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

Char = Annotated[str, StringConstraints(min_length=1, max_length=1)]


class AlphabetModel(BaseModel):
    """Wire form of an alphabet: ``{"chars": ["a", "b", "c"]}``.

    Only the shape is checked here, duplicates are rejected when the model is
    turned back into an ``Alphabet``.
    """

    model_config = ConfigDict(frozen=True)

    chars: list[Char]


__all__ = [
    "Char",
    AlphabetModel.__name__,
]
