"""Pydantic models for entries and request outcomes."""

from models.entry import Entry  # noqa: F401
from models.response import Outcome  # noqa: F401
