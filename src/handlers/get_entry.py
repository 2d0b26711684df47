"""Handler for GET /{id}."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from utils import apigw
from utils.error_handling import StorageError, ValidationError, to_response
from utils.logging_config import get_logger
from utils.validators import ensure_present

if TYPE_CHECKING:
    from repositories.dynamodb_repo import DynamoDbRepository, ItemGetter

logger = get_logger(__name__)

_repository: Optional["DynamoDbRepository"] = None


def _get_repository():
    """Lazy-load DynamoDbRepository for the configured table."""
    global _repository
    if _repository is None:
        from repositories.dynamodb_repo import DynamoDbRepository
        from utils.settings import RuntimeSettings

        settings = RuntimeSettings.from_environment()
        _repository = DynamoDbRepository(settings.table_name)
    return _repository


def handle(store: "ItemGetter", event: Dict[str, Any], log: logging.Logger = logger) -> Dict[str, Any]:
    """
    Validate the id, load the entry and map the result to a response.

    Every storage failure, not just a missing item, comes back as 404.
    """
    try:
        entry_id = ensure_present(apigw.extract_identifier(event))
    except ValidationError as exc:
        return to_response(exc)

    try:
        entry = store.get_item(entry_id)
    except StorageError as exc:
        log.warning(
            "Entry lookup failed",
            extra={"entry_id": entry_id, "kind": exc.kind, "error": str(exc)},
        )
        return apigw.respond(404, "Not found")

    return apigw.respond(200, entry.model_dump_json())


def lambda_handler(event, context):
    """Entry point invoked by API Gateway."""
    return handle(_get_repository(), event)
