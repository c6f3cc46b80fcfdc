"""
In-memory store for fancy resources.

Receives already-validated parameters from the routers. Persistence-level
checks (ownership, uniqueness) would live here, separate from request
validation.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class FancyResource:
    """A stored fancy resource."""

    id: int
    user_id: int
    fancy_name: str
    colour: str | None = None
    tags: list[str] = field(default_factory=list)
    is_public: bool = False
    created: str = ""
    updated: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _now() -> str:
    return datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


class FancyResourceStore:
    """Thread-safe in-memory collection keyed by integer id."""

    UPDATABLE_FIELDS = ("fancy_name", "colour", "tags", "is_public")

    def __init__(self) -> None:
        self._resources: dict[int, FancyResource] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, params: dict[str, Any]) -> FancyResource:
        """Create a resource from cleaned create parameters."""
        with self._lock:
            timestamp = _now()
            resource = FancyResource(
                id=self._next_id,
                user_id=params["user_id"],
                fancy_name=params["fancy_name"],
                colour=params.get("colour"),
                tags=list(params.get("tags", [])),
                is_public=params.get("is_public", False),
                created=timestamp,
                updated=timestamp,
            )
            self._resources[resource.id] = resource
            self._next_id += 1
        logger.info(f"Created fancy resource {resource.id} for user {resource.user_id}")
        return resource

    def get(self, resource_id: int) -> FancyResource | None:
        with self._lock:
            return self._resources.get(resource_id)

    def query(
        self,
        user_id: int | None = None,
        colour: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[FancyResource], int]:
        """Return one page of matching resources and the total match count."""
        with self._lock:
            matches = [
                r
                for r in sorted(self._resources.values(), key=lambda r: r.id)
                if (user_id is None or r.user_id == user_id) and (colour is None or r.colour == colour)
            ]
        return matches[offset : offset + limit], len(matches)

    def update(self, resource_id: int, params: dict[str, Any]) -> FancyResource | None:
        """Apply cleaned update parameters; returns None if the resource doesn't exist."""
        with self._lock:
            resource = self._resources.get(resource_id)
            if resource is None:
                return None
            changes = {k: v for k, v in params.items() if k in self.UPDATABLE_FIELDS}
            for key, value in changes.items():
                setattr(resource, key, value)
            if changes:
                resource.updated = _now()
        logger.info(f"Updated fancy resource {resource_id}: {sorted(changes)}")
        return resource

    def clear(self) -> None:
        """Remove all resources. For testing only."""
        with self._lock:
            self._resources.clear()
            self._next_id = 1
