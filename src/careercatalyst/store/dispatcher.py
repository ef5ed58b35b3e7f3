"""The CV store: owns the current document and serializes every change."""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable

from careercatalyst.models.document import CVDocument
from careercatalyst.store.selectors import completeness
from careercatalyst.store.transition import action_kind, transition

logger = logging.getLogger(__name__)

Listener = Callable[[CVDocument], None]


class CVStore:
    """Single owner of the in-progress CV document.

    Consumers receive the store explicitly and change the document only via
    :meth:`dispatch`. Dispatches never interleave: each one is applied and
    published to every listener before the next is accepted. A dispatch made
    from inside a listener is queued behind the one being published.
    """

    def __init__(self, initial: CVDocument | None = None):
        self._document = initial if initial is not None else CVDocument.empty()
        self._version = 0
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()
        self._dispatching_thread: int | None = None
        self._queue: deque[object] = deque()

    @property
    def document(self) -> CVDocument:
        """Current snapshot."""
        return self._document

    @property
    def version(self) -> int:
        """Number of dispatches that changed the document."""
        return self._version

    @property
    def completeness(self) -> int:
        return completeness(self._document)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for new documents; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: object) -> None:
        """Apply ``action`` to the document and publish the result.

        ``action`` must be an action model. Plain mappings are not decoded here;
        turn them into actions with :func:`careercatalyst.models.parse_action`.
        """
        if self._dispatching_thread == threading.get_ident():
            self._queue.append(action)
            return

        with self._lock:
            self._dispatching_thread = threading.get_ident()
            try:
                self._queue.append(action)
                while self._queue:
                    self._apply(self._queue.popleft())
            finally:
                self._queue.clear()
                self._dispatching_thread = None

    def _apply(self, action: object) -> None:
        logger.debug("Dispatching %s", action_kind(action))
        new_document = transition(self._document, action)
        if new_document is self._document:
            return

        self._document = new_document
        self._version += 1
        for listener in list(self._listeners):
            try:
                listener(new_document)
            except Exception:
                logger.exception("Document listener %r failed", listener)
