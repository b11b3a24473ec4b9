"""
services/container.py
──────────────────────────────────────────────────────────────────────────────
Dependency Injection container.

THIS IS THE ONLY FILE THAT NAMES CONCRETE ADAPTER CLASSES.

Provider selection is driven entirely by environment variables:

  LLM_PROVIDER=openai (default) + OPENAI_API_KEY set → OpenAILLMAdapter
  LLM_PROVIDER=openai, no key                        → catalog only
  LLM_PROVIDER=none                                  → catalog only

The catalog is built here, once.  A broken catalog raises CatalogError out
of get_pipeline(), which stops the API from starting rather than serving
requests it cannot answer.

Thread safety:
  @lru_cache(maxsize=1) makes get_pipeline() return the same instance across
  calls.  The pipeline holds no per-request state and the catalog is
  read-only, so one instance is safely shared by all worker threads.
"""
from __future__ import annotations

import logging
from functools import lru_cache

from checkajob.config.settings import Settings, get_settings
from checkajob.domain.exceptions import ConfigurationError
from checkajob.ports.llm_port import LLMPort
from checkajob.services.assessor import AssessmentPipeline
from checkajob.services.catalog import default_catalog
from checkajob.services.classifier import JobClassifier
from checkajob.services.llm_assessor import LLMAssessor
from checkajob.services.scorer import RiskScorer

logger = logging.getLogger(__name__)

_VALID_PROVIDERS = ("openai", "none")


def _build_llm(settings: Settings) -> LLMPort | None:
    """Instantiate the LLMPort adapter, or None when no provider is usable."""
    provider = settings.llm_provider.lower()
    if provider not in _VALID_PROVIDERS:
        raise ConfigurationError(
            f"Unknown LLM_PROVIDER '{settings.llm_provider}'. "
            "Valid values: 'openai', 'none'."
        )
    if not settings.llm_enabled:
        logger.info("LLM provider: disabled (provider=%s, key set=%s)",
                    provider, bool(settings.openai_api_key))
        return None
    from checkajob.adapters.openai_llm import OpenAILLMAdapter
    logger.info("LLM provider: OpenAI (%s)", settings.openai_llm_model)
    return OpenAILLMAdapter(settings)


def build_pipeline(settings: Settings, use_llm: bool = True) -> AssessmentPipeline:
    """Wire a fresh AssessmentPipeline.

    Args:
        settings: Application settings.
        use_llm:  False forces catalog-only assessments (e.g. CLI --offline).

    Raises:
        CatalogError: If the job catalog is invalid.
        ConfigurationError: If an unknown provider name is given.
    """
    catalog = default_catalog()
    llm = _build_llm(settings) if use_llm else None

    pipeline = AssessmentPipeline(
        catalog=catalog,
        classifier=JobClassifier(catalog),
        scorer=RiskScorer(),
        llm_assessor=LLMAssessor(llm) if llm is not None else None,
    )
    logger.info(
        "AssessmentPipeline ready | jobs=%d llm=%s",
        len(catalog),
        pipeline.llm_model or "none",
    )
    return pipeline


@lru_cache(maxsize=1)
def get_pipeline() -> AssessmentPipeline:
    """Build and return the fully wired AssessmentPipeline singleton.

    The ``@lru_cache`` ensures this runs only once per process lifetime.
    """
    return build_pipeline(get_settings())
