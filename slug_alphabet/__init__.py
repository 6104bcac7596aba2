import importlib.metadata

from . import constants
from .alphabet import Alphabet, check_chars
from .errors import *
from .models import AlphabetModel, ErrorPayload
from .slug import SlugGenerator

PROJECT_NAME = "slug-alphabet"

try:
    VERSION = importlib.metadata.version(PROJECT_NAME)
except importlib.metadata.PackageNotFoundError:
    VERSION = "unknown"  # type: ignore

__all__ = [
    "constants",
    "Alphabet",
    "check_chars",
    "AlphabetError",
    "AlphabetModel",
    "DuplicateCharError",
    "EmptyAlphabetError",
    "ErrorPayload",
    "InvalidCharError",
    "NotSubsetError",
    "SlugGenerator",
    "VERSION",
]
