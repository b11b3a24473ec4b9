"""
interfaces/cli.py
──────────────────────────────────────────────────────────────────────────────
Command-line interface for the DIY risk assessor.

Usage:
  # Single job, novice (default)
  python -m checkajob.interfaces.cli --description "hang a shelf in my bedroom"

  # Skill level, tags and postcode
  python -m checkajob.interfaces.cli -d "new ceiling light" -s advanced --tags "pendant,hallway"

  # Batch file (one description per line), catalog only, JSON output
  python -m checkajob.interfaces.cli --file jobs.txt --offline --json

  # Show the built-in job catalog
  python -m checkajob.interfaces.cli --list-jobs

  # Via installed entry-point (pyproject.toml [project.scripts])
  checkajob-assess -d "replace a tap washer"

Exit codes:
  0 — success
  1 — fatal error (configuration, catalog)
  2 — argument error
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from checkajob.config.log_config import configure_logging
from checkajob.config.settings import get_settings
from checkajob.domain.models import AssessmentRequest, SkillLevel
from checkajob.services.container import build_pipeline

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="checkajob-assess",
        description="Assess whether a home-repair job is safe to DIY.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "--description", "-d",
        metavar="TEXT",
        help="Description of the job to assess.",
    )
    p.add_argument(
        "--file", "-f",
        metavar="FILE",
        type=Path,
        help="Path to a text file with one job description per line.",
    )
    p.add_argument(
        "--skill", "-s",
        choices=[s.value for s in SkillLevel],
        default=SkillLevel.NOVICE.value,
        help="Your skill level. (default: novice)",
    )
    p.add_argument(
        "--tags", "-t",
        default="",
        help="Comma-separated tags, e.g. from a photo.",
    )
    p.add_argument(
        "--postcode",
        help="Optional postcode (passed through, not validated).",
    )
    p.add_argument(
        "--offline",
        action="store_true",
        help="Skip the LLM provider and use the built-in catalog only.",
    )
    p.add_argument(
        "--list-jobs",
        action="store_true",
        dest="list_jobs",
        help="List the built-in job catalog and exit.",
    )
    p.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output results as JSON.",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    return p


# ── Formatting helpers ─────────────────────────────────────────────────────

def _print_section(title: str, items: list[str], numbered: bool = False) -> None:
    if not items:
        return
    print(f"  {title}:")
    for i, item in enumerate(items, 1):
        bullet = f"{i}." if numbered else "-"
        print(f"    {bullet} {item}")


def _print_result_text(description: str, assessment) -> None:
    """Pretty-print an Assessment to stdout."""
    print(f"\n{'─' * 60}")
    print(f"Job      : {description}")
    print(f"Decision : {assessment.decision.value}  |  Score: {assessment.score}/100")
    if assessment.duration_min is not None:
        print(f"Duration : ~{assessment.duration_min} min")
    if assessment.cost_low is not None and assessment.cost_high is not None:
        print(f"Cost     : £{assessment.cost_low:.0f} – £{assessment.cost_high:.0f}")
    print(f"{'─' * 60}")
    _print_section("Rationale", assessment.rationale)
    _print_section("Steps", assessment.steps, numbered=True)
    _print_section("Tools", assessment.tools)
    _print_section("Materials", assessment.materials)
    _print_section("Safety", assessment.safety)
    print()


def _print_result_json(assessment) -> None:
    """Print an Assessment as JSON to stdout."""
    print(json.dumps(assessment.to_dict(), indent=2, ensure_ascii=False))


def _print_catalog(pipeline) -> None:
    for job in pipeline.catalog:
        flags = ", ".join(job.risk.active()) or "none"
        print(f"  {job.key:<20} difficulty {job.base_difficulty:>2}/10  "
              f"hazards: {flags:<30} {job.name}")


# ── Main logic ─────────────────────────────────────────────────────────────

def _load_descriptions_from_file(path: Path) -> list[str]:
    """Read descriptions from a text file, one per line, skip blank/comment lines."""
    if not path.exists():
        print(f"ERROR: File not found: {path}", file=sys.stderr)
        sys.exit(2)
    lines = path.read_text(encoding="utf-8").splitlines()
    return [l.strip() for l in lines if l.strip() and not l.startswith("#")]


def _split_tags(raw: str) -> list[str]:
    return [t.strip() for t in raw.split(",") if t.strip()]


def run(args: argparse.Namespace) -> int:
    """Execute assessments for the given arguments.

    Returns:
        Exit code (0 = success, 1 = error, 2 = bad arguments).
    """
    try:
        pipeline = build_pipeline(get_settings(), use_llm=not args.offline)
    except Exception as exc:
        logger.exception("Failed to initialise pipeline")
        print(f"ERROR: Pipeline initialisation failed: {exc}", file=sys.stderr)
        return 1

    if args.list_jobs:
        _print_catalog(pipeline)
        return 0

    if args.description:
        descriptions = [args.description]
    elif args.file:
        descriptions = _load_descriptions_from_file(args.file)
    else:
        print("ERROR: provide --description or --file", file=sys.stderr)
        return 2

    tags = _split_tags(args.tags)

    for description in descriptions:
        request = AssessmentRequest(
            description=description,
            skill_level=args.skill,
            tags=tags,
            postcode=args.postcode,
        )
        assessment = pipeline.assess(request)
        if args.json_output:
            _print_result_json(assessment)
        else:
            _print_result_text(description, assessment)

    return 0


def main() -> None:
    """Entry point for the checkajob-assess console script."""
    parser = _build_parser()
    args = parser.parse_args()

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if not (args.description or args.file or args.list_jobs):
        parser.print_help()
        sys.exit(2)

    sys.exit(run(args))


if __name__ == "__main__":
    main()
