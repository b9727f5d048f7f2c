from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from libs.result import Result
from src.domain.entities import NoticeTemplate


class NoticeTarget(BaseModel):
    """Recipient of a notice, addressed by user id or by email"""

    id: Optional[str] = None
    email: Optional[str] = None


class INotifier(ABC):
    """Notification dispatcher interface - application layer"""

    @abstractmethod
    async def send(
        self,
        template: NoticeTemplate,
        targets: List[NoticeTarget],
        params: Dict[str, Any],
    ) -> Result[None]:
        """Send a templated notice; returns Error on delivery failure"""
        pass
