"""Abstract job source interface."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class BaseSource(ABC):
    """Base class for raw job record sources."""

    name: str = "source"

    @abstractmethod
    def fetch(self) -> list[dict[str, Any]]:
        """Return raw job records, already flattened to one dict per posting."""
        ...


def extract_records(payload: Any) -> list[dict[str, Any]]:
    """Unwrap a JSON payload that is either a list or a {"jobs": [...]} wrapper."""
    if isinstance(payload, Mapping):
        payload = payload.get("jobs", payload.get("items"))
    if not isinstance(payload, list):
        return []
    return [item for item in payload if isinstance(item, Mapping)]
