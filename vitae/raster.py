"""
Page rasterization with PyMuPDF.

Decode a generated PDF, paint its first page into a bitmap ``Surface`` at a
given scale. Painting runs in a worker thread; a ``RenderTask`` token is
checked before and after so a superseded paint never writes its pixels.
"""

import asyncio
import threading
from dataclasses import dataclass

import pymupdf

from vitae.base import RasterizationError, RenderCancelled


@dataclass(frozen=True)
class Frame:
    width: int = 0
    height: int = 0
    samples: bytes = b''
    label: str | None = None


class Surface:
    """A bitmap target. ``publish`` swaps a whole frame in one assignment."""

    def __init__(self):
        self._frame = Frame()
        self.frames_published = 0

    @property
    def frame(self) -> Frame:
        return self._frame

    @property
    def width(self) -> int:
        return self._frame.width

    @property
    def height(self) -> int:
        return self._frame.height

    @property
    def is_blank(self) -> bool:
        return not self._frame.samples and self._frame.label is None

    def draw(self, width: int, height: int, samples: bytes, *, label: str | None = None) -> None:
        self._frame = Frame(width, height, bytes(samples), label)

    def publish(self, source: 'Surface') -> None:
        """Copy ``source``'s complete frame onto this surface."""
        self._frame = source.frame
        self.frames_published += 1


class RenderTask:
    """Handle on one paint request; cancelling it stops further surface writes."""

    def __init__(self, render_id: int):
        self.render_id = render_id
        self.task: asyncio.Task | None = None
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        if self.task is not None and not self.task.done():
            self.task.cancel()

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise RenderCancelled(f'render #{self.render_id} was superseded')


class PdfRasterizer:
    """Decode and paint PDF artifacts with PyMuPDF.

    PyMuPDF documents are not safe to share across threads, so every call
    touching a document holds ``_lock``.
    """

    def __init__(self):
        self._lock = threading.Lock()

    async def decode(self, artifact: bytes) -> pymupdf.Document:
        return await asyncio.to_thread(self._open, artifact)

    def _open(self, artifact: bytes) -> pymupdf.Document:
        try:
            with self._lock:
                doc = pymupdf.open(stream=artifact, filetype='pdf')
        except Exception as e:
            raise RasterizationError(f'Could not decode document: {e}') from e
        if doc.page_count == 0:
            doc.close()
            raise RasterizationError('Document has no pages')
        return doc

    def page_width(self, doc: pymupdf.Document) -> float:
        with self._lock:
            return doc[0].rect.width

    async def render(
        self, doc: pymupdf.Document, scale: float, target: Surface, token: RenderTask
    ) -> None:
        token.raise_if_cancelled()
        pixmap = await asyncio.to_thread(self._rasterize, doc, scale)
        token.raise_if_cancelled()
        target.draw(pixmap.width, pixmap.height, pixmap.samples)

    def _rasterize(self, doc: pymupdf.Document, scale: float) -> pymupdf.Pixmap:
        try:
            with self._lock:
                page = doc.load_page(0)
                return page.get_pixmap(matrix=pymupdf.Matrix(scale, scale), alpha=False)
        except Exception as e:
            raise RasterizationError(f'Could not paint page: {e}') from e

    def close(self, doc: pymupdf.Document) -> None:
        with self._lock:
            doc.close()
