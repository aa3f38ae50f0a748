"""Reading every fitting image file of a directory, one after another."""

from __future__ import annotations

from collections.abc import Callable
from os import PathLike
from pathlib import Path
from typing import Any, Optional, Union

from thzimage.interfaces import ImageReader
from thzimage.view import Rectangle

__all__ = ["SeriesReader"]

PathType = Union[str, "PathLike[str]"]


class SeriesReader(ImageReader):
    """Wraps a file reader to read all images of a directory in turn.

    ``reader_factory`` is called with the path of each directory entry and
    must return a reader offering ``file_type_fits`` besides the usual
    reader methods. Entries the reader cannot handle are skipped. Entries
    are visited in sorted order.
    """

    def __init__(self, directory: PathType, reader_factory: Callable[[Path], Any]) -> None:
        path = Path(directory)
        if not path.exists():
            raise FileNotFoundError(f"directory does not exist: {path}")
        if not path.is_dir():
            raise NotADirectoryError(f"path leads to a file: {path}")
        self._factory = reader_factory
        self._entries = sorted(path.iterdir())
        self._index = 0
        self._wrapped: Optional[Any] = None
        self._cycle_reader()

    def current_filepath(self) -> Optional[Path]:
        """Path of the file to read next, or None once the directory is exhausted."""
        if self.image_present():
            return self._entries[self._index]
        return None

    def skip_file(self) -> None:
        """Move on to the next fitting file."""
        if self.image_present():
            self._index += 1
        self._cycle_reader()

    def image_present(self) -> bool:
        return self._index < len(self._entries)

    def init(self) -> None:
        if self._wrapped is None:
            raise RuntimeError("no image left to read")
        self._wrapped.init()

    def dimensions(self) -> Rectangle:
        if self._wrapped is None:
            return Rectangle()
        return self._wrapped.dimensions()

    def read(self) -> list:
        if self._wrapped is None:
            raise RuntimeError("no image left to read")
        return self._wrapped.read()

    def deinit(self) -> None:
        """Finish the current file and move on to the next one."""
        self._close_reader()
        self.skip_file()

    def _close_reader(self) -> None:
        if self._wrapped is not None:
            self._wrapped.deinit()
            self._wrapped = None

    def _cycle_reader(self) -> None:
        while self.image_present():
            self._close_reader()
            reader = self._factory(self._entries[self._index])
            self._wrapped = reader
            if reader.file_type_fits():
                return
            self._index += 1
        self._close_reader()