"""Read-only memory mapping of a whole file."""

from __future__ import annotations

import mmap
import os
from types import TracebackType


class FileOpenFailure(Exception):
    """Raised when a file cannot be opened and mapped into memory."""

    def __init__(self, path: str | os.PathLike[str], msg: str = "") -> None:
        self.path = os.fspath(path)
        self.reason = msg
        super().__init__(f"File open failure: failed to memory map file {self.path} {msg}")


class MemMapFile:
    """Maps the whole of a non-empty file read-only.

    With ``force_in_memory`` every page is touched once so the contents are
    resident before the first real read.
    """

    def __init__(self, path: str | os.PathLike[str], force_in_memory: bool = True) -> None:
        self._path = os.fspath(path)
        self._fd = -1
        self._map: mmap.mmap | None = None
        self._size = 0

        try:
            self._fd = os.open(self._path, os.O_RDONLY)
        except OSError as exc:
            raise FileOpenFailure(self._path, "bad fd") from exc

        try:
            length = os.lseek(self._fd, 0, os.SEEK_END)
        except OSError as exc:
            self._close_fd()
            raise FileOpenFailure(self._path, "bad length") from exc

        if length == 0:
            self._close_fd()
            raise FileOpenFailure(self._path, "size zero")
        self._size = length

        try:
            self._map = mmap.mmap(self._fd, length, access=mmap.ACCESS_READ)
        except (OSError, ValueError) as exc:
            self._close_fd()
            raise FileOpenFailure(self._path, "mmap() failed") from exc

        if force_in_memory:
            self._touch_pages()

    def _touch_pages(self) -> None:
        assert self._map is not None
        if hasattr(mmap, "MADV_WILLNEED") and hasattr(self._map, "madvise"):
            try:
                self._map.madvise(mmap.MADV_WILLNEED)
            except OSError:
                pass
        for offset in range(0, self._size, mmap.PAGESIZE):
            self._map[offset]

    def _close_fd(self) -> None:
        if self._fd != -1:
            os.close(self._fd)
            self._fd = -1

    def data(self) -> mmap.mmap:
        """The read-only mapping of the file's contents."""
        if self._map is None or self._map.closed:
            raise ValueError("memory mapped file is closed")
        return self._map

    def size(self) -> int:
        """Length of the mapped file in bytes."""
        return self._size

    def close(self) -> None:
        """Unmap the file and release its descriptor; safe to call twice."""
        if self._map is not None and not self._map.closed:
            self._map.close()
        self._map = None
        self._close_fd()

    def __enter__(self) -> MemMapFile:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except Exception:
            pass