"""DynamoDB repository for entries."""

from typing import Any, Optional, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError as PydanticValidationError

from models.entry import Entry
from utils.error_handling import EntryNotFoundError, StorageError

# One attempt per call; retrying is left to whoever invokes the Lambda.
_CLIENT_CONFIG = Config(retries={"total_max_attempts": 1, "mode": "standard"})


class ItemSaver(Protocol):
    """Anything that can persist an entry by id."""

    def save_item(self, entry_id: str) -> None: ...


class ItemGetter(Protocol):
    """Anything that can load an entry by id."""

    def get_item(self, entry_id: str) -> Entry: ...


class DynamoDbRepository:
    """Read and write single entries keyed by ``id``."""

    def __init__(self, table_name: str, dynamodb: Optional[Any] = None):
        self.table_name = table_name
        resource = dynamodb or boto3.resource("dynamodb", config=_CLIENT_CONFIG)
        self.table = resource.Table(table_name)

    def save_item(self, entry_id: str) -> None:
        """Write the entry, replacing any existing item with the same id."""
        entry = Entry(id=entry_id)
        try:
            self.table.put_item(Item=entry.model_dump())
        except (ClientError, BotoCoreError) as exc:
            raise StorageError(str(exc)) from exc

    def get_item(self, entry_id: str) -> Entry:
        """Fetch the entry or raise EntryNotFoundError / StorageError."""
        try:
            resp = self.table.get_item(Key={"id": entry_id})
        except (ClientError, BotoCoreError) as exc:
            raise StorageError(str(exc)) from exc

        item = resp.get("Item")
        if item is None:
            raise EntryNotFoundError(entry_id)

        try:
            return Entry.model_validate(item)
        except PydanticValidationError as exc:
            raise StorageError(f"Malformed item for id {entry_id!r}: {exc}") from exc
