"""Desktop shell for the AngstromSCD research UI using PyWebview."""

import logging
import pathlib

import webview
from anyio.from_thread import start_blocking_portal

from command_proxy.commands import ProxyCommands
from command_proxy.http_client import ProxyClient
from desktop.bridge import CommandBridge
from desktop.env_loader import get_app_url, get_backend_url, get_log_level, load_environment
from desktop.window_controls import PywebviewWindowHandle

ICON_PATH = pathlib.Path(__file__).parent / "icon.png"
WINDOW_TITLE = "AngstromSCD Medical Research Assistant"

logger = logging.getLogger(__name__)


async def _open_client(base_url: str) -> ProxyClient:
    # Build the connection pool on the portal loop that will drive it.
    return ProxyClient(base_url)


def main() -> None:
    load_environment()
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    with start_blocking_portal() as portal:
        client = portal.call(_open_client, get_backend_url())
        bridge = CommandBridge(ProxyCommands(client), portal)
        try:
            window = webview.create_window(
                WINDOW_TITLE,
                url=get_app_url(),
                js_api=bridge,
                width=1280,
                height=800,
                resizable=True,
                fullscreen=False,
                confirm_close=True,
            )
            bridge.attach_window(PywebviewWindowHandle(window, fullscreen=False))
            logger.info("Starting desktop shell against backend %s", client.base_url)
            webview.start(
                gui="edgechromium" if webview.available_gui("edgechromium") else None,
                icon=str(ICON_PATH) if ICON_PATH.exists() else None,
                debug=False,
            )
        finally:
            portal.call(client.aclose)


if __name__ == "__main__":
    main()
