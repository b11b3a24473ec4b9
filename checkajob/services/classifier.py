"""
services/classifier.py
──────────────────────────────────────────────────────────────────────────────
Keyword classifier: free-text description (+ tags) → catalog job key.

The description and space-joined tags are lower-cased into one text blob and
tested against each job's keyword pattern in catalog order.  The first match
wins; overlapping keywords ("shelf" and "tap" in the same sentence) resolve to
the earlier job.  No match returns None.

Patterns are compiled once at construction, so classify() is a pure function
of its input.
"""
from __future__ import annotations

import logging
import re

from checkajob.domain.models import AssessmentRequest
from checkajob.services.catalog import JobCatalog

logger = logging.getLogger(__name__)


class JobClassifier:
    """First-match-wins keyword classifier over a JobCatalog.

    Args:
        catalog: Catalog whose declaration order sets match priority.
    """

    def __init__(self, catalog: JobCatalog) -> None:
        self._patterns: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
            (job.key, re.compile("|".join(f"(?:{k})" for k in job.keywords), re.IGNORECASE))
            for job in catalog
        )

    def classify(self, request: AssessmentRequest) -> str | None:
        """Return the key of the first matching job, or None.

        Args:
            request: Normalised assessment request.
        """
        text = f"{request.description} {' '.join(request.tags)}".lower()
        for key, pattern in self._patterns:
            if pattern.search(text):
                logger.debug("classify | matched %s for %r", key, text[:80])
                return key
        logger.debug("classify | no match for %r", text[:80])
        return None
