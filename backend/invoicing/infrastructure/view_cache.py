"""Rendered View Cache — per-path cache of rendered views with explicit invalidation.

Invariants:
    - get(path) returns None for a path that was never rendered or was revalidated
    - revalidate_path drops the cached render, marks the path stale, and bumps its generation
    - put(path, ..., generation) is refused when the path was revalidated after
      `generation` was read: a render started before a write never overwrites it
    - An accepted put clears the stale mark (the view has been recomputed)

Design Decisions:
    - One instance per process, created with the FastAPI app and injected via
      dependency (ADR: no module-level singletons beyond db_manager)
    - Stale marks kept separately so callers can observe an invalidation even
      before anything re-renders the view
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class RenderedViewCache:
    """In-process store of rendered view payloads keyed by logical path."""

    def __init__(self):
        self._rendered: dict[str, Any] = {}
        self._stale: set[str] = set()
        self._generations: dict[str, int] = {}

    def get(self, path: str) -> Any | None:
        return self._rendered.get(path)

    def generation(self, path: str) -> int:
        """Revalidation count for `path`; read it before rendering."""
        return self._generations.get(path, 0)

    def put(self, path: str, rendered: Any, generation: int | None = None) -> bool:
        if generation is not None and generation != self.generation(path):
            logger.info(f"Discarded outdated render: {path}", extra={"path": path})
            return False
        self._rendered[path] = rendered
        self._stale.discard(path)
        return True

    def revalidate_path(self, path: str) -> None:
        self._rendered.pop(path, None)
        self._stale.add(path)
        self._generations[path] = self.generation(path) + 1
        logger.info(f"View revalidated: {path}", extra={"path": path})

    def is_stale(self, path: str) -> bool:
        return path in self._stale
