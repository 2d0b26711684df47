"""Translate between API Gateway proxy events and plain-text responses."""

from typing import Any, Dict, Optional

from models.response import Outcome


def extract_identifier(event: Dict[str, Any]) -> Optional[str]:
    """Return the ``id`` path parameter, or None when the route carried none."""
    path_params = event.get("pathParameters") or {}
    return path_params.get("id")


def respond(status_code: int, body: str) -> Dict[str, Any]:
    """Build a proxy response with a plain-text body and no headers."""
    return Outcome(status_code=status_code, body=body).to_proxy_response()
