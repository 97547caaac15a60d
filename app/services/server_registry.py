"""
Static proxy/hub topology advertised to the game network.
Nothing is persisted: the list comes straight from the settings.
"""
from typing import Any, Dict, Iterable, Optional

from app.config.settings import settings
from app.models.server import Server, ServersResponse


def list_servers(
    proxy_name: Optional[str] = None,
    proxy_port: Optional[int] = None,
    hubs: Optional[Iterable[Dict[str, Any]]] = None,
) -> ServersResponse:
    """Builds the /servers/list payload (arguments override the settings)."""
    proxy = Server(
        name=proxy_name or settings.PROXY_NAME,
        port=proxy_port or settings.PROXY_PORT,
    )
    hub_entries = settings.HUBS if hubs is None else hubs
    return ServersResponse(proxy=proxy, hubs=[Server.model_validate(h) for h in hub_entries])
