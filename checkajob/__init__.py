"""
CheckaJob DIY Risk Assessor — Production Package
=================================================
Hexagonal (Ports & Adapters) architecture.

Layer map
─────────────────────────────────────────────────────
  config/       Settings, prompt strings, the default job catalog, logging
  domain/       Pure business objects (models, exceptions), no I/O
  ports/        Abstract interfaces (Python Protocols)
  adapters/     Concrete implementations of each Port (OpenAI…)
  services/     Catalog, classifier, scorer and the assessment pipeline;
                depends only on Ports, never Adapters
  interfaces/   Delivery layer: FastAPI endpoint, CLI, Streamlit UI
  tests/        Full test suite: unit / integration / e2e

Assessment flow
─────────────────────────────────────────────────────
  1. LLM provider (only when configured); first valid answer wins
  2. Keyword classifier → catalog job → risk scorer
  3. Conservative "unknown job" default

Swapping the LLM provider:
  1. Write a new adapter in adapters/ implementing LLMPort
  2. Change the wiring in services/container.py
  3. Done: zero other files touched
"""
__version__ = "1.0.0"
