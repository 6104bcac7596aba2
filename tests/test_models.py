import json

import pytest
from pydantic import ValidationError

from slug_alphabet import (
    Alphabet,
    AlphabetModel,
    DuplicateCharError,
    EmptyAlphabetError,
    ErrorPayload,
    InvalidCharError,
    NotSubsetError,
    constants,
)


@pytest.mark.parametrize("text", ["abc", "cba", constants.ASCII, "äöü€"])
def test_ser_de(text: str):
    alphabet = Alphabet.from_str(text)
    raw = alphabet.to_json()
    assert Alphabet.from_json(raw) == alphabet


def test_wire_format():
    raw = Alphabet.from_str("abc").to_json()
    assert json.loads(raw) == {"chars": ["a", "b", "c"]}


def test_from_model():
    model = AlphabetModel(chars=["z", "y"])
    assert Alphabet.from_model(model).chars == ("z", "y")
    assert Alphabet.from_str("zy").to_model() == model


def test_deserialize_duplicate():
    with pytest.raises(DuplicateCharError):
        Alphabet.from_json('{"chars": ["a", "b", "a"]}')


@pytest.mark.parametrize(
    "raw",
    [
        '{"chars": ["a", "bc"]}',
        '{"chars": ["a", ""]}',
        '{"chars": "abc"}',
        "{}",
    ],
)
def test_deserialize_invalid(raw: str):
    with pytest.raises(ValidationError):
        Alphabet.from_json(raw)


def test_error_payload():
    with pytest.raises(DuplicateCharError) as exc_info:
        Alphabet.from_str("aa")
    payload = exc_info.value.to_payload()
    assert payload == ErrorPayload(
        type="alphabet:duplicate-char",
        message="character 'a' appears more than once",
        extra={"char": "a"},
    )

    payload = NotSubsetError(char="?").to_payload()
    assert payload.type == "alphabet:not-subset"
    assert payload.extra == {"char": "?"}

    payload = EmptyAlphabetError().to_payload()
    assert payload.type == "alphabet:empty"
    assert payload.extra == {}

    assert ErrorPayload.model_validate_json(payload.model_dump_json()) == payload


def test_error_message():
    assert str(NotSubsetError(char="/")) == (
        "character '/' is not part of the allowed alphabet"
    )


def test_error_payload_factories():
    payload = ErrorPayload.invalid_char(char="ab")
    assert payload.type == "alphabet:invalid-char"
    assert payload.extra == {"char": "ab"}

    assert InvalidCharError(char="ab").to_payload() == payload
    assert str(EmptyAlphabetError()) == ErrorPayload.empty_alphabet().message
