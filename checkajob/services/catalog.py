"""
services/catalog.py
──────────────────────────────────────────────────────────────────────────────
Read-only job catalog.

Built once per process (see services/container.py) and shared by every
request.  Nothing mutates it after construction, so concurrent readers need
no locking.  Iteration follows declaration order, which is also the
classifier's priority order.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from checkajob.config.jobs import DEFAULT_JOBS
from checkajob.domain.exceptions import CatalogError
from checkajob.domain.models import JobDefinition

logger = logging.getLogger(__name__)


class JobCatalog:
    """Immutable, ordered mapping of job key → JobDefinition.

    Args:
        jobs: Job definitions in priority order.

    Raises:
        CatalogError: If no jobs are given or a key is duplicated.
    """

    def __init__(self, jobs: Iterable[JobDefinition]) -> None:
        entries: dict[str, JobDefinition] = {}
        for job in jobs:
            if job.key in entries:
                raise CatalogError(f"Duplicate job key in catalog: {job.key!r}")
            entries[job.key] = job
        if not entries:
            raise CatalogError("Job catalog is empty")
        self._jobs = MappingProxyType(entries)
        logger.debug("JobCatalog ready | %d jobs: %s", len(entries), ", ".join(entries))

    def lookup(self, key: str) -> JobDefinition | None:
        """Return the job for ``key``, or None if it is not in the catalog."""
        return self._jobs.get(key)

    def keys(self) -> frozenset[str]:
        return frozenset(self._jobs)

    def __iter__(self) -> Iterator[JobDefinition]:
        return iter(self._jobs.values())

    def __len__(self) -> int:
        return len(self._jobs)

    def __contains__(self, key: object) -> bool:
        return key in self._jobs


def default_catalog() -> JobCatalog:
    """The catalog shipped with the application (config/jobs.py)."""
    return JobCatalog(DEFAULT_JOBS)
