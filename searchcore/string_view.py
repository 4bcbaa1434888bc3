"""A read-only window onto part of a string."""

from __future__ import annotations

from collections.abc import Iterator


class StringView:
    """A view of ``size`` characters of a string, starting at its beginning.

    Narrowing the view with :meth:`remove_prefix` or :meth:`remove_suffix`
    does not copy the underlying text.
    """

    NPOS = -1

    def __init__(self, data: str | StringView = "", size: int | None = None) -> None:
        if data is None:
            raise TypeError("StringView cannot be built from None")
        text = str(data)
        if size is None:
            size = len(text)
        if not 0 <= size <= len(text):
            raise ValueError("size must lie within the length of the data")
        self._text = text
        self._start = 0
        self._size = size

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int | slice) -> str | StringView:
        if isinstance(index, slice):
            return StringView(str(self)[index])
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("StringView index out of range")
        return self._text[self._start + index]

    def __iter__(self) -> Iterator[str]:
        return iter(str(self))

    def __str__(self) -> str:
        return self._text[self._start:self._start + self._size]

    def __repr__(self) -> str:
        return f"StringView({str(self)!r})"

    @staticmethod
    def _as_str(other: object) -> str | None:
        if isinstance(other, (StringView, str)):
            return str(other)
        return None

    def __eq__(self, other: object) -> bool:
        text = self._as_str(other)
        if text is None:
            return NotImplemented
        return str(self) == text

    def __lt__(self, other: object) -> bool:
        if self._as_str(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if self._as_str(other) is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if self._as_str(other) is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if self._as_str(other) is None:
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash(str(self))

    def empty(self) -> bool:
        """True if the view holds no characters."""
        return self._size == 0

    def front(self) -> str:
        """The first character."""
        if self.empty():
            raise IndexError("front() of an empty StringView")
        return self._text[self._start]

    def back(self) -> str:
        """The last character."""
        if self.empty():
            raise IndexError("back() of an empty StringView")
        return self._text[self._start + self._size - 1]

    def remove_prefix(self, n: int) -> None:
        """Drop the first ``n`` characters from the view."""
        if not 0 <= n <= self._size:
            raise ValueError("cannot remove more characters than the view holds")
        self._start += n
        self._size -= n

    def remove_suffix(self, n: int) -> None:
        """Drop the last ``n`` characters from the view."""
        if not 0 <= n <= self._size:
            raise ValueError("cannot remove more characters than the view holds")
        self._size -= n

    def substr(self, pos: int, count: int | None = None) -> StringView:
        """A view of up to ``count`` characters from ``pos``; ``pos`` past the end gives an empty view."""
        if pos < 0:
            raise ValueError("pos must not be negative")
        pos = min(pos, self._size)
        remaining = self._size - pos
        if count is None or count > remaining:
            count = remaining
        if count < 0:
            raise ValueError("count must not be negative")
        view = StringView(self._text, 0)
        view._start = self._start + pos
        view._size = count
        return view

    def compare(self, other: StringView | str) -> int:
        """-1, 0 or 1 as this view orders before, equal to or after ``other``."""
        mine, theirs = str(self), str(other)
        return (mine > theirs) - (mine < theirs)

    def starts_with(self, prefix: StringView | str) -> bool:
        """True if the view begins with ``prefix``."""
        return str(self).startswith(str(prefix))

    def ends_with(self, suffix: StringView | str) -> bool:
        """True if the view ends with ``suffix``."""
        return str(self).endswith(str(suffix))

    def find(self, target: StringView | str, pos: int = 0) -> int:
        """Index of the first occurrence of ``target`` at or after ``pos``, else ``NPOS``.

        An empty target found at the very end counts as not found.
        """
        if not 0 <= pos <= self._size:
            raise IndexError("pos is out of range")
        text = str(self)
        index = text.find(str(target), pos)
        if index == -1 or index == len(text):
            return self.NPOS
        return index