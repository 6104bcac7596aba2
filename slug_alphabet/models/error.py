from typing import Any

from pydantic import BaseModel, Field


class ErrorPayload(BaseModel):
    type: str
    message: str | None
    extra: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def invalid_alphabet(cls):
        return cls(type="alphabet:invalid", message="invalid alphabet")

    @classmethod
    def duplicate_char(cls, *, char: str):
        return cls(
            type="alphabet:duplicate-char",
            message=f"character {char!r} appears more than once",
            extra={"char": char},
        )

    @classmethod
    def not_subset(cls, *, char: str):
        return cls(
            type="alphabet:not-subset",
            message=f"character {char!r} is not part of the allowed alphabet",
            extra={"char": char},
        )

    @classmethod
    def invalid_char(cls, *, char: str):
        return cls(
            type="alphabet:invalid-char",
            message=f"{char!r} is not a single character",
            extra={"char": char},
        )

    @classmethod
    def empty_alphabet(cls):
        return cls(
            type="alphabet:empty",
            message="the alphabet doesn't contain any characters",
        )


__all__ = [
    ErrorPayload.__name__,
]
