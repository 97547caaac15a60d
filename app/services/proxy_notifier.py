"""
Service: proxy_notifier.py
- Tells the peer service that the proxy is ready (bodyless POST to
  `settings.PROXY_READY_ENDPOINT`, shared secret in the `apiKey` header).
- Same HTTP client recipe as every outbound call of the backend:
  requests.Session + urllib3 Retry, correlation id in the logs.
"""
import logging
from typing import Optional
from uuid import uuid4

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from app.config.settings import settings

logger = logging.getLogger(__name__)


class ProxyNotifyError(RuntimeError):
    """The peer could not be told that the proxy is ready."""


class ProxyNotifier:
    def __init__(
        self,
        endpoint: str,
        api_key: str,
        *,
        header_name: str = "apiKey",
        timeout: float = 5.0,
        retries: int = 2,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.endpoint = endpoint
        self.api_key = api_key
        self.header_name = header_name
        self.timeout = timeout
        self.session = session or self._build_session(retries)

    @staticmethod
    def _build_session(retries: int) -> requests.Session:
        session = requests.Session()
        retry = Retry(
            total=retries,
            backoff_factor=0.5,
            status_forcelist=(502, 503, 504),
            allowed_methods=frozenset({"POST"}),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def notify_ready(self) -> None:
        request_id = uuid4().hex
        try:
            logger.debug(
                "Proxy ready notification start",
                extra={"notify_url": self.endpoint, "notify_request_id": request_id},
            )
            response = self.session.post(
                self.endpoint,
                headers={self.header_name: self.api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.Timeout as exc:
            logger.warning(
                "Proxy ready notification timeout",
                extra={"notify_url": self.endpoint, "notify_request_id": request_id},
            )
            raise ProxyNotifyError("Proxy ready notification timed out") from exc
        except requests.RequestException as exc:
            logger.error(
                "Proxy ready notification failed",
                exc_info=True,
                extra={"notify_url": self.endpoint, "notify_request_id": request_id},
            )
            raise ProxyNotifyError("Proxy ready notification failed") from exc
        logger.info(
            "Proxy ready notification sent",
            extra={"notify_request_id": request_id, "status_code": response.status_code},
        )


_instance: Optional[ProxyNotifier] = None


def get_proxy_notifier() -> ProxyNotifier:
    global _instance
    if _instance is None:
        _instance = ProxyNotifier(
            settings.PROXY_READY_ENDPOINT,
            settings.API_KEY,
            header_name=settings.API_KEY_HEADER,
            timeout=settings.PROXY_READY_TIMEOUT,
            retries=settings.PROXY_READY_RETRIES,
        )
    return _instance
