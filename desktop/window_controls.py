"""Native window commands invoked from the desktop UI chrome."""

import logging
from typing import Any, Callable, Protocol, TypeVar

from command_proxy.errors import describe_exception

logger = logging.getLogger(__name__)

R = TypeVar("R")


class NativeWindowError(Exception):
    """A native window call failed; carries the platform message."""


class WindowHandle(Protocol):
    """Protocol for the native window capabilities the shell needs."""

    def is_fullscreen(self) -> bool:
        ...

    def set_fullscreen(self, fullscreen: bool) -> None:
        ...

    def minimize(self) -> None:
        ...

    def is_maximized(self) -> bool:
        ...

    def maximize(self) -> None:
        ...

    def unmaximize(self) -> None:
        ...

    def close(self) -> None:
        ...


class PywebviewWindowHandle:
    """Adapt a ``webview.Window`` to :class:`WindowHandle`.

    pywebview exposes actions but not state queries, so fullscreen is tracked
    locally and maximized state follows the window's maximize, minimize and
    restore events.
    """

    def __init__(self, window: Any, *, fullscreen: bool = False) -> None:
        self.window = window
        self._fullscreen = fullscreen
        self._maximized = False
        self._minimized = False
        window.events.maximized += self._on_maximized
        window.events.restored += self._on_restored
        window.events.minimized += self._on_minimized

    def _on_maximized(self) -> None:
        self._maximized = True

    def _on_minimized(self) -> None:
        self._minimized = True

    def _on_restored(self) -> None:
        # Restoring from the taskbar returns to the pre-minimize size.
        if self._minimized:
            self._minimized = False
        else:
            self._maximized = False

    def is_fullscreen(self) -> bool:
        return self._fullscreen

    def set_fullscreen(self, fullscreen: bool) -> None:
        if fullscreen != self._fullscreen:
            self.window.toggle_fullscreen()
            self._fullscreen = fullscreen

    def minimize(self) -> None:
        self.window.minimize()

    def is_maximized(self) -> bool:
        return self._maximized

    def maximize(self) -> None:
        self.window.maximize()
        self._maximized = True

    def unmaximize(self) -> None:
        self.window.restore()
        self._maximized = False

    def close(self) -> None:
        self.window.destroy()


def _native(action: str, func: Callable[[], R]) -> R:
    try:
        return func()
    except Exception as exc:
        logger.warning("Native window call %s failed: %s", action, exc)
        raise NativeWindowError(describe_exception(exc)) from exc


def toggle_fullscreen(window: WindowHandle) -> None:
    is_fullscreen = _native("is_fullscreen", window.is_fullscreen)
    _native("set_fullscreen", lambda: window.set_fullscreen(not is_fullscreen))


def minimize_window(window: WindowHandle) -> None:
    _native("minimize", window.minimize)


def maximize_window(window: WindowHandle) -> None:
    """Maximize the window, or restore it when it is already maximized."""
    if _native("is_maximized", window.is_maximized):
        _native("unmaximize", window.unmaximize)
    else:
        _native("maximize", window.maximize)


def close_window(window: WindowHandle) -> None:
    _native("close", window.close)
