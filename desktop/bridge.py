"""Dispatcher exposed to the webview as ``window.pywebview.api``."""

import logging
from typing import Any, Dict, Optional

from anyio.from_thread import BlockingPortal
from pydantic import ValidationError

from command_proxy.commands import ProxyCommands
from command_proxy.envelope import ApiResponse
from command_proxy.errors import describe_exception
from desktop import window_controls
from desktop.window_controls import NativeWindowError, WindowHandle
from models.command_models import DEFAULT_CHAT_MODE, DEFAULT_MESSAGE_TONE, ChatMessage

logger = logging.getLogger(__name__)

APP_GREETING = "Hello, {name}! Welcome to AngstromSCD Medical Research Assistant."


class CommandBridge:
    """js_api object registered with pywebview.

    pywebview runs each js_api call on its own thread; proxy commands are
    handed to a shared event loop through ``portal`` so a slow backend call
    only blocks the thread that issued it.
    """

    def __init__(self, commands: ProxyCommands, portal: BlockingPortal) -> None:
        self._commands = commands
        self._portal = portal
        self._window: Optional[WindowHandle] = None

    def attach_window(self, window: WindowHandle) -> None:
        self._window = window

    def greet(self, name: str) -> str:
        return APP_GREETING.format(name=name)

    # Backend commands

    def fetch_api_data(self, endpoint: str) -> Dict[str, Any]:
        return self._run(self._commands.fetch_api_data, endpoint)

    def send_chat_message(
        self,
        message: Dict[str, Any],
        mode: str = DEFAULT_CHAT_MODE,
        tone: str = DEFAULT_MESSAGE_TONE,
    ) -> Dict[str, Any]:
        try:
            chat_message = ChatMessage.model_validate(message)
        except ValidationError as exc:
            logger.warning("Rejected malformed chat message from UI: %s", exc)
            return ApiResponse.fail(describe_exception(exc)).to_payload()
        return self._run(self._commands.send_chat_message, chat_message, mode, tone)

    def search_literature(self, query: str, limit: int) -> Dict[str, Any]:
        return self._run(self._commands.search_literature, query, limit)

    def get_voe_alerts(self) -> Dict[str, Any]:
        return self._run(self._commands.get_voe_alerts)

    # Window commands; failures reject the promise on the JS side.

    def toggle_fullscreen(self) -> None:
        window_controls.toggle_fullscreen(self._require_window())

    def minimize_window(self) -> None:
        window_controls.minimize_window(self._require_window())

    def maximize_window(self) -> None:
        window_controls.maximize_window(self._require_window())

    def close_window(self) -> None:
        window_controls.close_window(self._require_window())

    def _run(self, command, *args) -> Dict[str, Any]:
        response: ApiResponse = self._portal.call(command, *args)
        return response.to_payload()

    def _require_window(self) -> WindowHandle:
        if self._window is None:
            raise NativeWindowError("Window is not available yet")
        return self._window
