"""Normalization of server error messages into one display string."""

from dataclasses import dataclass
from typing import Any, Tuple, Union

DEFAULT_ERROR_MESSAGE = "Request failed"
MESSAGE_SEPARATOR = ", "


@dataclass(frozen=True)
class SingleMessage:
    text: str


@dataclass(frozen=True)
class MultipleMessages:
    texts: Tuple[str, ...]


ErrorMessage = Union[SingleMessage, MultipleMessages]


def parse_error_message(raw: Any) -> ErrorMessage:
    """Classify a raw `message` field; anything unusable becomes an empty list."""
    if isinstance(raw, str):
        return SingleMessage(raw)
    if isinstance(raw, (list, tuple)):
        texts = tuple(str(item) for item in raw if item is not None and str(item) != "")
        return MultipleMessages(texts)
    return MultipleMessages(())


def format_error_messages(raw: Any, default: str = DEFAULT_ERROR_MESSAGE) -> str:
    parsed = parse_error_message(raw)
    if isinstance(parsed, SingleMessage):
        return parsed.text or default
    if not parsed.texts:
        return default
    return MESSAGE_SEPARATOR.join(parsed.texts)
