import logging
from typing import Callable, List, Optional

from theme_collector.registry import ThemeRegistry

logger = logging.getLogger(__name__)


READY_EVENT = "colorThemesReady"

Listener = Callable[[ThemeRegistry], None]


class ReadySignal:
    """One-shot notification carrying the finished registry.

    Listeners must be connected before ``emit``; late listeners are not
    replayed.
    """

    def __init__(self, name: str = READY_EVENT):
        self.name = name
        self._listeners: List[Listener] = []
        self._registry: Optional[ThemeRegistry] = None
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def registry(self) -> Optional[ThemeRegistry]:
        return self._registry

    def connect(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def emit(self, registry: ThemeRegistry) -> bool:
        if self._fired:
            logger.debug("%s already fired; ignoring", self.name)
            return False
        self._fired = True
        self._registry = registry
        for listener in list(self._listeners):
            try:
                listener(registry)
            except Exception:
                logger.exception("%s listener %r failed", self.name, listener)
        return True
