"""A minimal flat key/value JSON-like builder and parser."""

from __future__ import annotations

from typing import Any

_WHITESPACE = " \t\n\v\f\r"


def _parse(text: str) -> dict[str, str]:
    """Split ``text`` into key/value pairs.

    Braces are dropped, whitespace is dropped everywhere, ``:`` ends a key and
    ``,`` ends a value unless it appears inside ``[...]``.  Quotes are kept as
    part of keys and values.
    """
    entries: dict[str, str] = {}
    key = ""
    current: list[str] = []
    in_list = False
    for ch in text:
        if ch in "{}":
            continue
        if ch == ":":
            key = "".join(current)
            current.clear()
        elif ch == ",":
            if in_list:
                current.append(ch)
            else:
                entries[key] = "".join(current)
                current.clear()
        elif ch == "[":
            current.append(ch)
            in_list = True
        elif ch == "]":
            current.append(ch)
            in_list = False
        elif ch not in _WHITESPACE:
            current.append(ch)
    if key and current:
        entries[key] = "".join(current)
    return entries


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:.6f}"
    raise TypeError(f"cannot convert {type(value).__name__} to a JSON value")


def _quote(text: str) -> str:
    return text if text.startswith('"') else f'"{text}"'


class JSONBuilder:
    """Holds a flat mapping of strings and renders it as a JSON object."""

    def __init__(self, text: str = "") -> None:
        self._entries: dict[str, str] = _parse(text) if text else {}

    def to_json(self, *args: Any) -> JSONBuilder:
        """Replace the contents with alternating keys and values.

        Numbers are rendered as text; a trailing key without a value is ignored.
        """
        values = [_to_text(arg) for arg in args]
        self._entries = dict(zip(values[::2], values[1::2]))
        return self

    def load(self, text: str) -> None:
        """Replace the contents with what ``text`` parses to."""
        self._entries = _parse(text)

    def dump(self) -> str:
        """Render the non-empty pairs as a JSON object with quoted keys and values."""
        parts = [
            f"{_quote(key)}: {_quote(value)}, "
            for key, value in self._entries.items()
            if key and value
        ]
        text = "{\n" + "".join(parts)
        return text[:-2] + "\n}"