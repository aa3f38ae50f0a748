"""Reader and writer interfaces, and a writer that works on a background thread."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Optional

from thzimage.view import Rectangle

__all__ = ["ImageReader", "ImageWriter", "AsyncWriter"]

_log = logging.getLogger(__name__)


class ImageReader(ABC):
    """Source of images.

    ``init`` prepares reading and raises if the image cannot be read,
    ``read`` returns the pixels row by row from the top, and ``deinit``
    releases whatever ``init`` acquired.
    """

    @abstractmethod
    def image_present(self) -> bool:
        """True if there is an image to read."""

    @abstractmethod
    def init(self) -> None:
        """Prepare reading the next image; raises on failure."""

    @abstractmethod
    def dimensions(self) -> Rectangle:
        """Dimensions of the image being read."""

    @abstractmethod
    def read(self) -> list:
        """Return the pixels of the image in row-major order, top row first."""

    @abstractmethod
    def deinit(self) -> None:
        """Finish reading the current image."""

    def read_image(self) -> tuple[Rectangle, list]:
        """Run a whole read cycle and return the dimensions and the pixels.

        ``deinit`` is called even if reading fails.
        """
        self.init()
        try:
            return self.dimensions(), self.read()
        finally:
            self.deinit()


class ImageWriter(ABC):
    """Sink for images.

    ``init`` prepares writing, ``write`` stores one image and raises on
    failure, ``deinit`` finishes the writing process.
    """

    @abstractmethod
    def init(self) -> None:
        """Prepare writing; raises on failure."""

    @abstractmethod
    def write(self, dimensions: Rectangle, buffer: Sequence) -> None:
        """Write the pixels of an image with the given dimensions; raises on failure."""

    @abstractmethod
    def deinit(self) -> None:
        """Finish the writing process."""

    def write_image(self, dimensions: Rectangle, buffer: Sequence) -> None:
        """Run a whole write cycle; ``deinit`` is called whether writing succeeds or not."""
        self.init()
        try:
            self.write(dimensions, buffer)
        finally:
            self.deinit()


class AsyncWriter:
    """Hands images to a wrapped writer on a background thread, one at a time."""

    def __init__(self, writer: ImageWriter) -> None:
        self._writer = writer
        self._condition = threading.Condition()
        self._pending: Optional[tuple[Rectangle, tuple[Any, ...]]] = None
        self._shutdown = False
        self._thread = threading.Thread(target=self._work, name="AsyncWriter", daemon=True)
        self._thread.start()

    def write(self, dimensions: Rectangle, buffer: Sequence) -> bool:
        """Queue an image for writing.

        The pixels are copied, so the buffer may be changed afterwards.
        Returns False if the previous image is still being written.
        """
        with self._condition:
            if self._shutdown:
                raise RuntimeError("the writer has been closed")
            if self._pending is not None:
                return False
            self._pending = (dimensions, tuple(buffer))
            self._condition.notify_all()
        return True

    def close(self) -> None:
        """Finish a pending image and stop the background thread."""
        with self._condition:
            self._shutdown = True
            self._condition.notify_all()
        self._thread.join()

    def __enter__(self) -> AsyncWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._pending is not None or self._shutdown)
                if self._pending is None:
                    return
                dimensions, buffer = self._pending
            try:
                self._writer.write_image(dimensions, buffer)
            except Exception:
                _log.exception("Unable to write image")
            with self._condition:
                self._pending = None