"""Entry model stored in the entries table."""

from pydantic import BaseModel, ConfigDict


class Entry(BaseModel):
    """A single record, keyed by id."""

    model_config = ConfigDict(extra="ignore")

    id: str
