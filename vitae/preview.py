"""
Interactive preview pipeline.

Keeps a visible bitmap of the first page of the current resume, regenerated
as the resume is edited::

    Idle -> Generating -> Rasterizing -> Displayed
              ^______________|  (a newer request discards in-flight work)

* Edits are debounced (``settings.debounce``) so typing regenerates once.
* Each paint goes to an offscreen surface and is published to the visible
  surface only once complete, and only if it is still the latest paint.
* Container resizes repaint when the width moves by at least
  ``settings.resize_threshold`` and are debounced separately.
* Cancelled work is discarded quietly; generation and paint failures move the
  pipeline to ``ERROR`` and are not retried.
"""

import asyncio
import itertools
from enum import Enum
from typing import Any, Awaitable, Callable, Protocol

from vitae import logger
from vitae.base import RasterizationError, RenderCancelled
from vitae.config import PreviewSettings
from vitae.content import DocumentSource, Unsubscribe
from vitae.generator import DEFAULT_TEMPLATE, generate_pdf
from vitae.raster import PdfRasterizer, RenderTask, Surface
from vitae.resume_models import Resume
from vitae.translations import Translations

RASTER_ERROR_MESSAGE = 'Failed to render preview'

GenerateFn = Callable[[Resume, str, Translations], Awaitable[bytes]]


class PreviewState(str, Enum):
    IDLE = 'idle'
    GENERATING = 'generating'
    RASTERIZING = 'rasterizing'
    DISPLAYED = 'displayed'
    ERROR = 'error'


class Rasterizer(Protocol):
    async def decode(self, artifact: bytes) -> Any: ...

    def page_width(self, doc: Any) -> float: ...

    async def render(self, doc: Any, scale: float, target: Surface, token: RenderTask) -> None: ...

    def close(self, doc: Any) -> None: ...


class ContainerGeometry:
    """Width of the element hosting the preview, with resize notifications."""

    def __init__(self, width: float):
        self._width = width
        self._callbacks: list[Callable[[float], None]] = []

    @property
    def width(self) -> float:
        return self._width

    def set_width(self, width: float) -> None:
        self._width = width
        for callback in list(self._callbacks):
            callback(width)

    def subscribe(self, callback: Callable[[float], None]) -> Unsubscribe:
        self._callbacks.append(callback)
        return lambda: self._callbacks.remove(callback)


class PreviewPipeline:
    """Owns the offscreen and visible surfaces of one mounted preview.

    All methods must be called from the event loop thread.
    """

    _ids = itertools.count(1)

    def __init__(
        self,
        *,
        template_name: str = DEFAULT_TEMPLATE,
        translations: Translations = None,
        zoom: float = 1.0,
        container_width: float = 800,
        settings: PreviewSettings | None = None,
        generate: GenerateFn | None = None,
        rasterizer: Rasterizer | None = None,
    ):
        self.id = next(self._ids)
        self.template_name = template_name
        self.translations = translations
        self.zoom = zoom
        self.container_width = container_width
        self.settings = settings or PreviewSettings()
        self._generate = generate or generate_pdf
        self._rasterizer = rasterizer or PdfRasterizer()

        self.visible = Surface()
        self._offscreen = Surface()
        self.state = PreviewState.IDLE
        self.error: str | None = None

        self._resume: Resume | None = None
        self._doc: Any = None
        self._page_width: float | None = None
        self._generation = 0
        self._render_ids = itertools.count(1)
        self._generate_task: asyncio.Task | None = None
        self._resize_task: asyncio.Task | None = None
        self._render_task: RenderTask | None = None
        self._last_width = container_width
        self._listeners: list[Callable[[PreviewState], None]] = []
        self._subscriptions: list[Unsubscribe] = []
        self._abandoned: set[asyncio.Future] = set()

    # ------------------ Inputs ------------------ #
    def update(self, resume: Resume) -> None:
        """Take a new snapshot; regenerate after the debounce window."""
        self._resume = resume
        self._generation += 1
        _cancel(self._generate_task)
        self._generate_task = asyncio.ensure_future(
            self._debounced_regenerate(self._generation, resume)
        )

    def resize(self, width: float) -> None:
        if abs(width - self._last_width) < self.settings.resize_threshold:
            return
        self._last_width = width
        self.container_width = width
        _cancel(self._resize_task)
        self._resize_task = asyncio.ensure_future(self._debounced_repaint())

    def set_zoom(self, zoom: float) -> None:
        self.zoom = zoom
        if self._doc is not None:
            self._schedule_render()

    def mount(self, source: DocumentSource, geometry: ContainerGeometry | None = None) -> None:
        """Follow ``source`` (and ``geometry``) until ``unmount``."""
        self._subscriptions.append(source.subscribe(self.update))
        if geometry is not None:
            self.container_width = self._last_width = geometry.width
            self._subscriptions.append(geometry.subscribe(self.resize))
        self.update(source.get())

    def unmount(self) -> None:
        for unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions.clear()
        self._generation += 1
        _cancel(self._generate_task)
        _cancel(self._resize_task)
        if self._render_task is not None:
            self._render_task.cancel()
        if self.state in (PreviewState.GENERATING, PreviewState.RASTERIZING):
            self._set_state(PreviewState.IDLE)

    async def close(self) -> None:
        self.unmount()
        await self.wait_idle()
        self._replace_doc(None)

    def add_listener(self, callback: Callable[[PreviewState], None]) -> None:
        self._listeners.append(callback)

    async def wait_idle(self) -> None:
        """Wait until no debounce, generation or paint is pending."""
        while True:
            pending = [t for t in self._tasks() if not t.done()]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    @property
    def resume(self) -> Resume | None:
        """The latest snapshot handed to the pipeline."""
        return self._resume

    # ------------------ Geometry ------------------ #
    def render_scale(self, page_width: float) -> float:
        available = max(self.container_width - self.settings.padding, 1)
        return available / page_width * self.zoom

    # ------------------ Pipeline ------------------ #
    async def _debounced_regenerate(self, generation: int, resume: Resume) -> None:
        try:
            await asyncio.sleep(self.settings.debounce)
            await self._regenerate(generation, resume)
        except asyncio.CancelledError:
            logger.debug(f'preview#{self.id}: generation {generation} superseded')

    async def _regenerate(self, generation: int, resume: Resume) -> None:
        self._set_state(PreviewState.GENERATING)
        try:
            artifact = await self._generate(resume, self.template_name, self.translations)
        except Exception as e:
            if generation == self._generation:
                self._fail(str(e) or type(e).__name__, e)
            return
        if generation != self._generation:
            return

        # The decode worker cannot be interrupted; a cancelled caller leaves it
        # running and closes whatever it opens.
        decoding = asyncio.ensure_future(self._rasterizer.decode(artifact))
        try:
            doc = await asyncio.shield(decoding)
        except asyncio.CancelledError:
            self._abandoned.add(decoding)
            decoding.add_done_callback(self._close_abandoned)
            raise
        except RasterizationError as e:
            if generation == self._generation:
                self._fail(RASTER_ERROR_MESSAGE, e)
            return
        if generation != self._generation:
            self._rasterizer.close(doc)
            return

        self.error = None
        self._replace_doc(doc)
        self._schedule_render()

    async def _debounced_repaint(self) -> None:
        try:
            await asyncio.sleep(self.settings.resize_debounce)
        except asyncio.CancelledError:
            return
        if self._doc is not None:
            self._schedule_render()

    def _schedule_render(self) -> RenderTask:
        if self._render_task is not None:
            self._render_task.cancel()
        task = RenderTask(next(self._render_ids))
        self._render_task = task
        task.task = asyncio.ensure_future(self._paint(task))
        return task

    async def _paint(self, task: RenderTask) -> None:
        self._set_state(PreviewState.RASTERIZING)
        try:
            scale = self.render_scale(self._page_width)
            await self._rasterizer.render(self._doc, scale, self._offscreen, task)
            if task.cancelled or task is not self._render_task:
                raise RenderCancelled(f'render #{task.render_id} was superseded')
            self.visible.publish(self._offscreen)
        except (RenderCancelled, asyncio.CancelledError):
            logger.debug(f'preview#{self.id}: render #{task.render_id} cancelled')
            return
        except RasterizationError as e:
            self._fail(RASTER_ERROR_MESSAGE, e)
            return
        self._set_state(PreviewState.DISPLAYED)

    # ------------------ Helpers ------------------ #
    def _replace_doc(self, doc: Any) -> None:
        if self._render_task is not None:
            self._render_task.cancel()
        previous, self._doc = self._doc, doc
        self._page_width = self._rasterizer.page_width(doc) if doc is not None else None
        if previous is not None:
            self._rasterizer.close(previous)

    def _close_abandoned(self, decoding: asyncio.Future) -> None:
        self._abandoned.discard(decoding)
        if decoding.cancelled() or decoding.exception() is not None:
            return
        self._rasterizer.close(decoding.result())

    def _tasks(self) -> list[asyncio.Task]:
        tasks = [self._generate_task, self._resize_task, *self._abandoned]
        if self._render_task is not None:
            tasks.append(self._render_task.task)
        return [t for t in tasks if t is not None]

    def _fail(self, message: str, exc: Exception) -> None:
        logger.error(f'preview#{self.id}: {message} ({exc!r})')
        self.error = message
        self._set_state(PreviewState.ERROR)

    def _set_state(self, state: PreviewState) -> None:
        if state == self.state:
            return
        self.state = state
        logger.log_preview_state(self.id, state.value)
        for callback in list(self._listeners):
            callback(state)


def _cancel(task: asyncio.Task | None) -> None:
    if task is not None and not task.done():
        task.cancel()
