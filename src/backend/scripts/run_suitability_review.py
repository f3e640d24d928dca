from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


def _read_report_text(path: Path) -> str:
    if path.suffix.lower() not in (".txt", ".md", ""):
        raise SystemExit(f"Unsupported report file type: {path.suffix} (plain text only).")
    return path.read_text(encoding="utf-8")


def _write_markdown(report, view, out_path: Path) -> None:
    lines = [
        f"# {view.title}",
        "",
        f"Generated at: {report.generated_at.isoformat()}",
        f"Source: {report.source}",
        f"Context: {view.context_note}",
        "",
        f"## Overall: {view.overall_label}",
    ]
    for section in view.sections:
        lines.append("")
        lines.append(f"## {section.title} ({section.score_label})")
        for subsection in section.subsections:
            lines.append("")
            lines.append(f"### {subsection.title} ({subsection.score_label})")
            for rule in subsection.rules:
                if not rule.active:
                    continue
                lines.append(f"- [{rule.status.value}] {rule.title}")
                if rule.references:
                    lines.append(f"  - References: {', '.join(rule.references)}")
                lines.append(f"  - Requirement: {rule.requirement}")
                lines.append(f"  - Why: {rule.explanation}")
                if rule.evidence:
                    lines.append(f"  - Evidence: `{rule.evidence}`")
    out_path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def run_suitability_review(text: str, ctx, *, source: str | None = None, config=None):
    _ensure_backend_on_path()
    from connectors.analyzer.config import get_analyzer_config
    from pipelines.analysis import analyze_report

    config = config or get_analyzer_config()
    return analyze_report(text, ctx, source=source or config.source, config=config)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Check a suitability report against the rule catalog and write JSON/MD outputs."
    )
    parser.add_argument("--report", required=False, help="Path to a plain-text suitability report.")
    parser.add_argument(
        "--sample",
        choices=("good", "bad"),
        default=None,
        help="Use a built-in sample report instead of --report.",
    )
    parser.add_argument("--advice-type", default="standard", help="standard|replacement|drawdown|db_transfer")
    parser.add_argument("--channel", default="advised", help="advised|nonadvised")
    parser.add_argument("--age-band", default="55plus", help="under55|55plus|75plus")
    parser.add_argument("--vulnerable", action="store_true", help="Flag the client as vulnerable.")
    parser.add_argument(
        "--source",
        default=None,
        help="Outcome source: local or remote (defaults to ANALYSIS_SOURCE, then local).",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Output directory for review files (defaults to the current directory).",
    )
    args = parser.parse_args(argv)

    _ensure_backend_on_path()
    from common.rules_engine.context import RunContext
    from common.rules_engine.presenter import present
    from common.rules_engine.ruleset import DEFAULT_CATALOG
    from common.rules_engine.samples import SAMPLES
    from connectors.analyzer.config import AnalyzerConfigError
    from pipelines.analysis import InvalidReportText
    from pipelines.export import EXPORT_FILENAME, write_export

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    if args.sample:
        text = SAMPLES[args.sample]
    elif args.report:
        text = _read_report_text(Path(args.report))
    else:
        raise SystemExit("Provide --report or --sample.")

    ctx = RunContext(
        advice_type=args.advice_type,
        channel=args.channel,
        age_band=args.age_band,
        vulnerable=args.vulnerable,
    )
    try:
        report = run_suitability_review(text, ctx, source=args.source)
    except AnalyzerConfigError as exc:
        raise SystemExit(f"Invalid analyzer configuration: {exc}") from exc
    except (InvalidReportText, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    output_dir = Path(args.output_dir).resolve() if args.output_dir else Path(".").resolve()
    output_dir.mkdir(parents=True, exist_ok=True)
    out_json = write_export(report, output_dir / EXPORT_FILENAME)
    out_md = output_dir / "suitability_review.md"
    _write_markdown(report, present(DEFAULT_CATALOG, report.outcomes, ctx), out_md)

    print(f"Wrote {out_json}")
    print(f"Wrote {out_md}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
