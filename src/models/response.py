"""Outcome of one request, before it becomes a proxy response."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class Outcome(BaseModel):
    """Status code and plain-text body for a single invocation."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: str

    def to_proxy_response(self) -> Dict[str, Any]:
        """Render as an API Gateway proxy integration response."""
        return {
            "statusCode": self.status_code,
            "headers": {},
            "multiValueHeaders": {},
            "body": self.body,
            "isBase64Encoded": False,
        }
