"""Explicit visibility state for a toggleable panel (e.g. the chat panel)."""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

VisibilityListener = Callable[[bool], None]


class PanelVisibility:
    """
    Boolean visibility owned by whichever component renders the panel.
    Listeners are notified only when the value actually changes.
    """

    def __init__(self, visible: bool = False, name: str = "panel"):
        self.name = name
        self._visible = visible
        self._listeners: list[VisibilityListener] = []

    @property
    def visible(self) -> bool:
        return self._visible

    def subscribe(self, listener: VisibilityListener) -> Callable[[], None]:
        """
        Register a listener called with the new visibility.

        Returns:
            Unsubscribe function
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set(self, visible: bool) -> None:
        if visible == self._visible:
            return
        self._visible = visible
        logger.debug(f"{self.name} visibility -> {visible}")
        for listener in list(self._listeners):
            listener(visible)

    def show(self) -> None:
        self.set(True)

    def hide(self) -> None:
        self.set(False)

    def toggle(self) -> None:
        self.set(not self._visible)
