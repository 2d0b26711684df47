"""
Handler for PUT /{id}.

Stores an entry keyed by the path id. Saving an id that already exists
overwrites it; there is no existence check.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from utils import apigw
from utils.error_handling import StorageError, ValidationError, to_response
from utils.logging_config import get_logger
from utils.validators import ensure_present

if TYPE_CHECKING:
    from repositories.dynamodb_repo import DynamoDbRepository, ItemSaver

logger = get_logger(__name__)

# Lazy-loaded repository, reused across warm invocations
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


def handle(store: "ItemSaver", event: Dict[str, Any], log: logging.Logger = logger) -> Dict[str, Any]:
    """Validate the id, save it and map the result to a response."""
    try:
        entry_id = ensure_present(apigw.extract_identifier(event))
    except ValidationError as exc:
        return to_response(exc)

    log.info("Putting entry into DynamoDB", extra={"entry_id": entry_id})

    try:
        store.save_item(entry_id)
    except StorageError as exc:
        log.exception("Saving entry failed", extra={"entry_id": entry_id})
        return to_response(exc)

    return apigw.respond(200, "All good!")


def lambda_handler(event, context):
    """Entry point invoked by API Gateway."""
    return handle(_get_repository(), event)
