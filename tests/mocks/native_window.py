"""
Mock Native Window
Records window-control calls and can simulate platform failures.
"""


class FakeWindowHandle:
    """In-memory :class:`desktop.window_controls.WindowHandle`."""

    def __init__(self, fullscreen=False, maximized=False, failing=()):
        self.fullscreen = fullscreen
        self.maximized = maximized
        self.failing = set(failing)
        self.calls = []

    def _record(self, name):
        self.calls.append(name)
        if name in self.failing:
            raise RuntimeError(f"{name} not supported on this platform")

    def is_fullscreen(self):
        self._record("is_fullscreen")
        return self.fullscreen

    def set_fullscreen(self, fullscreen):
        self._record("set_fullscreen")
        self.fullscreen = fullscreen

    def minimize(self):
        self._record("minimize")

    def is_maximized(self):
        self._record("is_maximized")
        return self.maximized

    def maximize(self):
        self._record("maximize")
        self.maximized = True

    def unmaximize(self):
        self._record("unmaximize")
        self.maximized = False

    def close(self):
        self._record("close")
