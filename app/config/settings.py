"""
Application settings
====================

Role
----
- Centralise the service parameters (name, host/port, shared secret, storage
  path, topology, proxy notifier).
- Defaults suit a local dev environment next to the proxy and hubs.
- Every value can be overridden from the environment or a `.env` file.

Integrations
------------
- `pydantic-settings` loads the environment and `.env` automatically.
- Services and routers import `from app.config.settings import settings`.

Good practice
-------------
- *Do not* commit a real `API_KEY`. Use `.env`.
- `DATA_DIR` defaults to a path relative to the repo: `<repo>/app/data`.

Example `.env`
--------------
APP_NAME="Sandbox Backend (Staging)"
PORT=5600
API_KEY="put-the-shared-secret-here"
DATA_DIR="/var/opt/sandbox/data"
STRICT_RANKS=true
CREATE_IF_MISSING=true
HUBS='[{"name": "Hub1", "port": 25565}, {"name": "Hub2", "port": 25566}]'
"""
from pathlib import Path
from typing import Any, Dict, List
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_hubs() -> List[Dict[str, Any]]:
    return [{"name": "Hub1", "port": 25565}]


class Settings(BaseSettings):
    # Service name (shown by /health)
    APP_NAME: str = "Sandbox Backend"
    # Network bind (Uvicorn)
    HOST: str = "0.0.0.0"
    PORT: int = 5600
    LOG_LEVEL: str = "INFO"

    # Shared secret checked by `api_key_required` and sent to the proxy
    # ⚠️ Override in production via .env
    API_KEY: str = "changeme-api-key"
    API_KEY_HEADER: str = "apiKey"

    # Mock database location. Default: <repo>/app/data/players.json
    DATA_DIR: str = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")
    PLAYERS_FILENAME: str = "players.json"
    # Start from an empty store when the file does not exist yet (off: a missing file is a 500)
    CREATE_IF_MISSING: bool = False

    # Reject ranks outside the known set on /players/setrank
    STRICT_RANKS: bool = False

    # "Proxy ready" peer notification
    PROXY_READY_ENDPOINT: str = "http://127.0.0.1:5712/servers/updateservers"
    PROXY_READY_TIMEOUT: float = 5.0
    PROXY_READY_RETRIES: int = 2

    # Static topology served by /servers/list
    PROXY_NAME: str = "Proxy"
    PROXY_PORT: int = 25577
    HUBS: List[Dict[str, Any]] = Field(default_factory=_default_hubs)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def players_path(self) -> Path:
        return Path(self.DATA_DIR) / self.PLAYERS_FILENAME


# Single importable instance: `settings`
settings = Settings()
