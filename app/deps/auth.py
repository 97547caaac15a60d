"""
API-key authentication dependency
=================================

Goal
----
Provide a FastAPI *dependency* `api_key_required` that lets a request through
only when it carries the shared secret in the `apiKey` header (name set by
`settings.API_KEY_HEADER`).

Integrations
------------
- `settings.API_KEY`: shared secret, also sent by the proxy notifier.
- Applied per router (`dependencies=[Depends(api_key_required)]`) on /players
  and /servers. /health stays public.

Behaviour & status codes
------------------------
- 401 `Unauthorized` if the header is missing or does not match.
- True otherwise.

Notes
-----
- `APIKeyHeader(auto_error=False)` so that we render our own 401.
- Comparison uses `hmac.compare_digest` (constant time).
"""
from __future__ import annotations

import hmac
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import APIKeyHeader

from app.config.settings import settings

api_key_header = APIKeyHeader(name=settings.API_KEY_HEADER, auto_error=False)


def api_key_required(api_key: Optional[str] = Depends(api_key_header)) -> bool:
    """Access gate shared by every player/server route."""
    if api_key and hmac.compare_digest(api_key.encode("utf-8"), settings.API_KEY.encode("utf-8")):
        return True
    raise HTTPException(status_code=401, detail="Unauthorized")
