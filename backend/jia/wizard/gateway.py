"""
Career persistence used by the form wizard
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx
import structlog
from sqlalchemy.orm import Session

from jia.careers.schemas import CareerResponse
from jia.careers.service import career_service
from jia.core.config import settings
from jia.core.exceptions import JiaException

logger = structlog.get_logger()

CAREERS_PATH = "/api/v1/careers/"


class CareerGateway(ABC):
    """Creates and updates careers, returning the stored career as a payload dict"""

    @abstractmethod
    def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        ...

    @abstractmethod
    def update(self, identifier: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        ...


class ServiceCareerGateway(CareerGateway):
    """In-process persistence through the career service"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        career = career_service.create_career(self.db, payload)
        return CareerResponse.model_validate(career).model_dump(by_alias=True)

    def update(self, identifier: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        career = career_service.update_career(self.db, identifier, payload)
        return CareerResponse.model_validate(career).model_dump(by_alias=True)


class HttpCareerGateway(CareerGateway):
    """Persistence over the careers API"""

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.Client] = None):
        self.client = client or httpx.Client(base_url=base_url or settings.CAREER_API_URL, timeout=30.0)

    def _send(self, method: str, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = self.client.request(method, url, json=payload)
        except httpx.HTTPError as e:
            logger.error("career_api_unreachable", method=method, url=url, error=str(e))
            raise JiaException("Career service unavailable", status_code=503, details={"error": str(e)})

        if response.is_error:
            error = {}
            try:
                error = response.json().get("error") or {}
            except ValueError:
                pass
            logger.warning("career_api_error", method=method, url=url, status_code=response.status_code)
            exc = JiaException(
                error.get("message") or "Career request failed",
                status_code=response.status_code,
                details=error.get("details"),
            )
            exc.code = error.get("code") or exc.code
            raise exc

        return response.json()["career"]

    def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", CAREERS_PATH, payload)

    def update(self, identifier: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("PUT", f"{CAREERS_PATH}{identifier}", payload)
