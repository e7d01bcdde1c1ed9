"""
Command proxy layer for the AngstromSCD desktop shell.

Forwards UI commands to the research backend and wraps every outcome in an
:class:`ApiResponse`.
"""

from command_proxy.commands import ProxyCommands
from command_proxy.envelope import ApiResponse
from command_proxy.errors import DecodeError, ProxyError, TransportError
from command_proxy.http_client import DEFAULT_BASE_URL, ProxyClient

__version__ = "1.0.0"

__all__ = [
    "ApiResponse",
    "DEFAULT_BASE_URL",
    "DecodeError",
    "ProxyClient",
    "ProxyCommands",
    "ProxyError",
    "TransportError",
    "__version__",
]
