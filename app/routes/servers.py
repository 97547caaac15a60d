"""
Module routes/servers.py
Role:
- Topology listing for the proxy (/servers/list).
- "Proxy ready" relay (/servers/proxyready): forwards the signal to the peer
  service through `ProxyNotifier`.

Both routes need the shared secret (`api_key_required`).
"""
from fastapi import APIRouter, Depends, HTTPException

from app.deps.auth import api_key_required
from app.models.player import MessageResponse
from app.models.server import ServersResponse
from app.services.proxy_notifier import ProxyNotifier, ProxyNotifyError, get_proxy_notifier
from app.services.server_registry import list_servers as build_server_list

router = APIRouter(prefix="/servers", tags=["servers"], dependencies=[Depends(api_key_required)])


@router.get("/list", response_model=ServersResponse)
async def list_servers():
    """Proxy + hubs (name, port)."""
    return build_server_list()


@router.post("/proxyready", response_model=MessageResponse)
def proxy_ready(notifier: ProxyNotifier = Depends(get_proxy_notifier)):
    """Relays the ready signal. Any failure of the outbound call is a 500."""
    try:
        notifier.notify_ready()
    except ProxyNotifyError as exc:
        raise HTTPException(status_code=500, detail="Failed to send POST request") from exc
    return MessageResponse(message="POST request sent successfully")
