"""Tab state for the forecast views."""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from ..exceptions import InsufficientData
from ..models.view import ViewKind, ViewModel
from ..models.weather import ForecastSnapshot
from .windower import build_view

logger = logging.getLogger(__name__)

ACTIVATION_KEYS = frozenset({"enter", "space", " "})


class RenderSink(Protocol):
    """Anything that can paint forecast views and status messages."""

    def render_view(self, view_model: ViewModel) -> None: ...

    def show_loading(self, message: str) -> None: ...

    def show_error(self, message: str) -> None: ...


class ViewController:
    """Tracks the active view and re-renders it from the current snapshot.

    Switching views never fetches anything: each transition rebuilds the
    view model from the snapshot held since the last load. Only load()
    replaces the snapshot, and doing so resets the active view to Today.
    """

    def __init__(self, sink: RenderSink, clock: Callable[[], datetime] = datetime.now):
        self.sink = sink
        self._clock = clock
        self._snapshot: ForecastSnapshot | None = None
        self._active = ViewKind.TODAY

    @property
    def active_view(self) -> ViewKind:
        return self._active

    @property
    def snapshot(self) -> ForecastSnapshot | None:
        return self._snapshot

    def load(self, snapshot: ForecastSnapshot) -> ViewModel | None:
        """Show a freshly fetched snapshot, starting on the Today view."""
        self._snapshot = snapshot
        self._active = ViewKind.TODAY
        return self._render()

    def select(self, view: ViewKind | str) -> ViewModel | None:
        """Make a view active and render it.

        Selecting the active view again re-renders it. Does nothing until a
        snapshot has been loaded.
        """
        view = ViewKind(view)
        if self._snapshot is None:
            logger.debug(f"Ignoring selection of {view.value}: no forecast loaded")
            return None
        self._active = view
        return self._render()

    def handle_key(self, view: ViewKind | str, key: str) -> ViewModel | None:
        """Keyboard activation of a focused tab (Enter or Space)."""
        if key.lower() not in ACTIVATION_KEYS:
            return None
        return self.select(view)

    def clear(self) -> None:
        """Drop the current snapshot, e.g. when a new search starts."""
        self._snapshot = None
        self._active = ViewKind.TODAY

    def _render(self) -> ViewModel | None:
        try:
            view_model = build_view(self._snapshot, self._active, self._clock().hour)
        except InsufficientData as e:
            self.sink.show_error(str(e))
            return None
        self.sink.render_view(view_model)
        return view_model
