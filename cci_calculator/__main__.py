"""
CCI Self-Assessment Calculator — Main Orchestrator

Usage:
    python -m cci_calculator --input assessment.json             # score a filled-in assessment
    python -m cci_calculator --sample --seed 7                   # score generated sample data
    python -m cci_calculator --draft "Acme Securities"           # score a saved draft
    python -m cci_calculator --input a.json --formats json csv   # choose report formats

Draft management:
    python -m cci_calculator draft save <organization> --input assessment.json
    python -m cci_calculator draft list
    python -m cci_calculator draft show <organization>
    python -m cci_calculator draft remove <organization>
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .catalog import generate_sample_data
from .config import DEFAULT_ORGANIZATION, REPORT_FORMATS, AssessmentConfig
from .drafts import DraftStore
from .inputs import AssessmentInputError, load_assessment
from .reporting import (
    export_csv,
    export_executive_summary,
    export_json,
    export_markdown,
)
from .scoring import CCIResult, Parameter, compute_index

logger = logging.getLogger("cci_calculator")


# ---------------------------------------------------------------------------
# Draft management sub-commands
# ---------------------------------------------------------------------------

def _cmd_draft(args: argparse.Namespace, config: AssessmentConfig) -> int:
    """Handle `draft save|list|show|remove` sub-commands."""
    store = DraftStore.load(config.drafts_file)
    action = args.draft_action

    if action == "list":
        return _draft_list(store)
    elif action == "save":
        return _draft_save(store, args, config)
    elif action == "show":
        return _draft_show(store, args, config)
    elif action == "remove":
        return _draft_remove(store, args)
    return 0


def _draft_list(store: DraftStore) -> int:
    drafts = store.list_drafts()
    if not drafts:
        print("No drafts saved. Save one with:\n")
        print("  python -m cci_calculator draft save <organization> --input assessment.json")
        return 0

    print(f"\n  {'Organization':<36s} {'Parameters':<12s} {'Saved (UTC)':<34s}")
    print(f"  {'─'*36} {'─'*12} {'─'*34}")
    for d in drafts:
        print(f"  {d.organization:<36s} {len(d.parameters):<12d} {d.saved_at:<34s}")
    print()
    return 0


def _draft_save(store: DraftStore, args: argparse.Namespace, config: AssessmentConfig) -> int:
    organization = args.organization
    if store.get(organization):
        print(f"  Draft for '{organization}' already exists. It will be overwritten.")

    try:
        _, parameters = _load_parameters(args, config)
    except AssessmentInputError as e:
        print(f"  ❌ {e}")
        return 1
    if parameters is None:
        print("  ❌ Nothing to save. Provide --input FILE or --sample.")
        return 1

    store.put(organization, parameters, notes=args.notes or "")
    print(f"  ✅ Draft for '{organization}' saved ({len(parameters)} parameters).")
    return 0


def _draft_show(store: DraftStore, args: argparse.Namespace, config: AssessmentConfig) -> int:
    draft = store.get(args.organization)
    if draft is None:
        print(f"  ❌ Draft for '{args.organization}' not found.")
        return 1
    result = compute_index(
        draft.parameters,
        organization=draft.organization,
        improvement_limit=config.improvement_limit,
    )
    print(f"\n  Draft saved {draft.saved_at}")
    _print_result(result)
    return 0


def _draft_remove(store: DraftStore, args: argparse.Namespace) -> int:
    if store.remove(args.organization):
        print(f"  ✅ Draft for '{args.organization}' removed.")
        return 0
    print(f"  ❌ Draft for '{args.organization}' not found.")
    return 1


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--input", "-i",
        type=Path,
        default=None,
        help="JSON file with parameter values",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Use generated sample data instead of an input file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for --sample (reproducible sample data)",
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cci_calculator",
        description="SEBI CSCRF Cyber Capability Index self-assessment calculator",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Path to JSON configuration file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    # --- Sub-commands: draft management ---
    subparsers = parser.add_subparsers(dest="command", help="Management commands")

    draft_parser = subparsers.add_parser("draft", help="Manage saved assessment drafts")
    draft_sub = draft_parser.add_subparsers(dest="draft_action", help="Draft actions")

    # draft save
    save_p = draft_sub.add_parser("save", help="Save or overwrite an organization's draft")
    save_p.add_argument("organization", help="Organization the draft belongs to")
    _add_source_arguments(save_p)
    save_p.add_argument("--notes", help="Optional notes stored with the draft")

    # draft list
    draft_sub.add_parser("list", help="List all saved drafts")

    # draft show
    show_p = draft_sub.add_parser("show", help="Score a saved draft")
    show_p.add_argument("organization", help="Organization whose draft to score")

    # draft remove
    rm_p = draft_sub.add_parser("remove", help="Remove a saved draft")
    rm_p.add_argument("organization", help="Organization whose draft to remove")

    # --- Assessment options ---
    _add_source_arguments(parser)
    parser.add_argument(
        "--draft", "-d",
        type=str,
        default=None,
        help="Score the saved draft of this organization",
    )
    parser.add_argument(
        "--organization", "-n",
        type=str,
        default=None,
        help="Organization name shown in reports (overrides file and draft)",
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=Path,
        default=None,
        help="Output directory for reports (default: ./cci_assessment_<timestamp>)",
    )
    parser.add_argument(
        "--formats",
        nargs="+",
        choices=REPORT_FORMATS,
        default=None,
        help="Output formats to generate",
    )
    parser.add_argument(
        "--save-draft",
        action="store_true",
        help="Also store the scored parameters as the organization's draft",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AssessmentConfig:
    """Build configuration from the config file and CLI overrides."""
    if args.config and args.config.exists():
        config = AssessmentConfig.from_file(args.config)
    else:
        if args.config:
            logger.warning(f"Config file {args.config} not found; using defaults")
        config = AssessmentConfig()

    if args.verbose:
        config.verbose = True
    if getattr(args, "seed", None) is not None:
        config.sample_seed = args.seed
    if getattr(args, "output_dir", None):
        config.output.base_dir = str(args.output_dir)
    if getattr(args, "formats", None):
        config.output.formats = list(args.formats)

    return config


def _load_parameters(
    args: argparse.Namespace,
    config: AssessmentConfig,
) -> tuple[Optional[str], Optional[list[Parameter]]]:
    """Resolve (organization, parameters) from --input or --sample."""
    if getattr(args, "input", None):
        return load_assessment(args.input)
    if getattr(args, "sample", False):
        rng = random.Random(config.sample_seed)
        return None, generate_sample_data(rng)
    return None, None


def _print_result(result: CCIResult) -> None:
    print(f"  Organization:     {result.organization}")
    print(f"  CCI Score:        {result.total_score:.2f}/100")
    print(f"  Maturity Level:   {result.maturity_level}")
    print(f"  {result.maturity_description}")

    if result.category_scores:
        print()
        for cs in result.category_scores:
            print(f"    {cs.name:40s} {cs.score:6.1f}/100 (weight {cs.weightage:g}%)")

    if result.improvement_areas:
        print("\n  Improvement areas:")
        for i, area in enumerate(result.improvement_areas, 1):
            print(f"    {i}. {area.title} [{area.measure_id}] "
                  f"score {area.current_score:.1f} → +{area.impact:.2f}")


def generate_reports(
    result: CCIResult,
    parameters: list[Parameter],
    config: AssessmentConfig,
    assessment_id: str,
) -> list[Path]:
    """Generate all requested report formats."""
    formats = config.output.formats
    output = config.output
    output.create_directories()
    created = []

    if "json" in formats:
        path = export_json(result, parameters, output.json_dir, assessment_id)
        created.append(path)
        print(f"  📄 JSON:       {path}")

    if "csv" in formats:
        paths = export_csv(result, parameters, output.csv_dir, assessment_id)
        created.extend(paths)
        for p in paths:
            print(f"  📊 CSV:        {p}")

    if "markdown" in formats:
        path = export_markdown(result, parameters, output.reports_dir, assessment_id)
        created.append(path)
        print(f"  📝 Markdown:   {path}")

    if "executive" in formats:
        path = export_executive_summary(result, output.reports_dir, assessment_id)
        created.append(path)
        print(f"  📋 Executive:  {path}")

    return created


def run_assessment(args: argparse.Namespace, config: AssessmentConfig) -> int:
    """Load parameters, score them and write reports. Returns an exit code."""
    print("=" * 70)
    print(f" CCI Self-Assessment Calculator v{__version__}")
    print("=" * 70)

    # --- Input ---
    store = DraftStore.load(config.drafts_file)
    try:
        file_organization, parameters = _load_parameters(args, config)
    except AssessmentInputError as e:
        print(f"\n❌ {e}")
        return 1

    draft = None
    if parameters is None and args.draft:
        draft = store.get(args.draft)
        if draft is None:
            print(f"\n❌ Draft for '{args.draft}' not found. Use 'draft list' to see saved drafts.")
            return 1
        parameters = draft.parameters

    if not parameters:
        print("\n❌ No parameters to score. Use one of:")
        print("   • --input assessment.json")
        print("   • --sample [--seed N]")
        print("   • --draft <organization>")
        return 1

    # Organization: CLI flag > input file > draft > config
    organization = (
        args.organization
        or file_organization
        or (draft.organization if draft else None)
        or config.organization
        or DEFAULT_ORGANIZATION
    )

    assessment_id = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S") + "_" + uuid.uuid4().hex[:8]
    print(f"\n📋 Assessment ID: {assessment_id}")
    print(f"🏢 Organization:  {organization}")
    print(f"📂 Output:        {config.output.assessment_dir.resolve()}")

    # --- Scoring Phase ---
    print("\n" + "=" * 70)
    print(" PHASE 1: SCORING")
    print("=" * 70 + "\n")
    result = compute_index(
        parameters,
        organization=organization,
        improvement_limit=config.improvement_limit,
    )
    _print_result(result)

    # --- Reporting Phase ---
    print("\n" + "=" * 70)
    print(" PHASE 2: REPORT GENERATION")
    print("=" * 70 + "\n")
    created_files = generate_reports(result, parameters, config, assessment_id)

    if args.save_draft:
        store.put(organization, parameters)
        print(f"\n  💾 Draft saved for '{organization}'")

    print("\n" + "=" * 70)
    print(" ASSESSMENT COMPLETE")
    print("=" * 70)
    print(f"\n  Score: {result.total_score:.2f}/100 ({result.maturity_level})")
    print(f"  Files: {len(created_files)} reports generated")
    print(f"  Path:  {config.output.assessment_dir.resolve()}")
    print()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for `python -m cci_calculator` and the `cci-calculator` script."""
    args = parse_args(argv)
    config = build_config(args)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

    # --- Handle draft management sub-commands ---
    if getattr(args, "command", None) == "draft":
        if not getattr(args, "draft_action", None):
            print("Usage: python -m cci_calculator draft {save|list|show|remove}")
            return 0
        return _cmd_draft(args, config)

    return run_assessment(args, config)


if __name__ == "__main__":
    sys.exit(main())
