"""
Command catalog: typed UI commands mapped onto backend HTTP calls.

``endpoint``, ``query`` and ``limit`` are interpolated into the request path
without URL-encoding. Callers are trusted and the backend owns route
validation. Encoding them would change the literal request the backend sees.
"""

from typing import List

from pydantic import TypeAdapter

from command_proxy.envelope import ApiResponse
from command_proxy.http_client import ProxyClient
from models.command_models import ChatMessage, ChatResponse, LiteratureResult, VoeAlert

CHAT_PATH = "/api/chat"
VOE_ALERTS_PATH = "/api/voe/alerts"

CHAT_RESPONSE_ADAPTER = TypeAdapter(ChatResponse)
LITERATURE_RESULTS_ADAPTER = TypeAdapter(List[LiteratureResult])
VOE_ALERTS_ADAPTER = TypeAdapter(List[VoeAlert])


def api_data_path(endpoint: str) -> str:
    return f"/api/{endpoint}"


def literature_search_path(query: str, limit: int) -> str:
    return f"/api/literature/search?q={query}&limit={limit}"


def chat_request_body(message: ChatMessage, mode: str, tone: str) -> dict:
    return {
        "message": message.content,
        "role": message.role,
        "mode": mode,
        "tone": tone,
    }


class ProxyCommands:
    """The fixed set of backend commands exposed to the desktop UI."""

    def __init__(self, client: ProxyClient) -> None:
        self.client = client

    async def fetch_api_data(self, endpoint: str) -> ApiResponse:
        """Pass ``GET /api/{endpoint}`` through and return whatever JSON comes back."""
        return await self.client.call("GET", api_data_path(endpoint))

    async def send_chat_message(
        self, message: ChatMessage, mode: str, tone: str
    ) -> ApiResponse:
        return await self.client.call(
            "POST",
            CHAT_PATH,
            chat_request_body(message, mode, tone),
            adapter=CHAT_RESPONSE_ADAPTER,
        )

    async def search_literature(
        self, query: str, limit: int
    ) -> ApiResponse:
        return await self.client.call(
            "GET",
            literature_search_path(query, limit),
            adapter=LITERATURE_RESULTS_ADAPTER,
        )

    async def get_voe_alerts(self) -> ApiResponse:
        return await self.client.call("GET", VOE_ALERTS_PATH, adapter=VOE_ALERTS_ADAPTER)
