"""
HTTP notifier

Posts templated notices to the notification service.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from libs.result import Error, Result, Return
from src.app.services.notifier import INotifier, NoticeTarget
from src.domain.entities import NoticeTemplate, ResetErrorCode

logger = logging.getLogger(__name__)


class HttpNotifier(INotifier):
    """
    Notifier backed by the notification service's HTTP API.

    Each call is bounded by a short timeout; transport and HTTP status
    errors, and a malformed service URL, are returned as NOTIFICATION_FAILED
    instead of raised.
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    async def send(
        self,
        template: NoticeTemplate,
        targets: List[NoticeTarget],
        params: Dict[str, Any],
    ) -> Result[None]:
        payload = {
            "code": template.value,
            "targetUsers": [target.model_dump(exclude_none=True) for target in targets],
            "params": params,
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self.transport
            ) as client:
                response = await client.post(self.url, json=payload)
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Notice {template.value} failed: {type(e).__name__}: {e}")
            return Return.err(
                Error(
                    ResetErrorCode.NOTIFICATION_FAILED,
                    f"Notice {template.value} could not be delivered",
                )
            )

        return Return.ok(None)
