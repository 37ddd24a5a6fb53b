# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Live editing session keeping text and diagram model in sync.

The session runs on a single asyncio event loop and never starts threads.
Text changes are debounced: every change reschedules one parse timer, so only
the text present when the timer fires is parsed. Dragging a node moves it in
the current model without parsing; releasing it writes the position back into
the text, which re-enters the debounced parse path.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from eerstudio.compiler.builder import build_model
from eerstudio.model.entities import DiagramModel, Node
from eerstudio.settings.config import Settings, default_settings
from eerstudio.settings.logging import get_logger
from eerstudio.sync.writeback import write_back

logger = get_logger(__name__)

ModelCallback = Callable[[DiagramModel], None]

# ###############
# Public Interface
# ###############


class EditorSession:
    """Owns the document text and the model last parsed from it.

    Scheduling methods (:meth:`set_text`, :meth:`end_drag`) must be called
    from code running on the event loop, unless an explicit *loop* is given.

    Args:
        text: Initial document text; parsed immediately into :attr:`model`.
        settings: Layout and debounce settings.
        on_model: Called with every model parsed after construction. It is
            not called for the initial parse; read :attr:`model` for that.
        loop: Event loop for the debounce timer. Defaults to the running loop.
    """

    def __init__(
        self,
        text: str = "",
        settings: Settings | None = None,
        on_model: ModelCallback | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._settings = settings or default_settings()
        self._on_model = on_model
        self._loop = loop
        self._text = text
        self._pending: asyncio.TimerHandle | None = None
        self._dragged_id: str | None = None
        self._model = build_model(text, self._settings.layout)

    @property
    def text(self) -> str:
        """The current document text."""
        return self._text

    @property
    def model(self) -> DiagramModel:
        """The model of the last parse, including any in-progress drag."""
        return self._model

    @property
    def parse_pending(self) -> bool:
        """True while a debounced parse is scheduled."""
        return self._pending is not None

    @property
    def dragged_node_id(self) -> str | None:
        """Id of the node being dragged, or None."""
        return self._dragged_id

    def set_text(self, text: str) -> None:
        """Replace the document text and (re)schedule a debounced parse."""
        self._text = text
        self._schedule_parse()

    def parse_now(self) -> DiagramModel:
        """Cancel any pending parse and parse the current text immediately."""
        self._cancel_pending()
        return self._parse()

    def begin_drag(self, node_id: str) -> bool:
        """Start dragging a node. Returns False if the model has no such node."""
        if self._model.find_node(node_id) is None:
            return False
        self._dragged_id = node_id
        return True

    def drag_to(self, x: float, y: float) -> None:
        """Move the dragged node in memory; does nothing when no drag is active."""
        node = self._dragged_node()
        if node is None:
            return
        node.x = x
        node.y = y

    def end_drag(self) -> str:
        """Finish the drag: write the node's position back and schedule a parse.

        Returns the (possibly unchanged) document text. Without an active
        drag this is a no-op.
        """
        node = self._dragged_node()
        self._dragged_id = None
        if node is None:
            return self._text
        self.set_text(write_back(self._text, node.origin_line, node.x, node.y))
        return self._text

    def close(self) -> None:
        """Cancel any pending parse."""
        self._cancel_pending()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _dragged_node(self) -> Node | None:
        if self._dragged_id is None:
            return None
        return self._model.find_node(self._dragged_id)

    def _schedule_parse(self) -> None:
        self._cancel_pending()
        loop = self._loop or asyncio.get_running_loop()
        self._pending = loop.call_later(self._settings.editor.debounce_seconds, self._on_timer)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _on_timer(self) -> None:
        self._pending = None
        self._parse()

    def _parse(self) -> DiagramModel:
        self._model = build_model(self._text, self._settings.layout)
        if self._on_model is not None:
            self._on_model(self._model)
        return self._model
