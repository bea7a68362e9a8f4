"""CLI entry point for the 30-day overview charts."""

from __future__ import annotations
import argparse
import json
import logging
import sys
from datetime import date

from config import settings
from domain import mapping as domain_mapping
from services import pipeline, sample_data
from utils import naming

log = logging.getLogger("clarity_stats")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_summary(args: argparse.Namespace) -> None:
    from gui.services.sparkline import SparklineBuilder

    today = pipeline.parse_today(args.today)
    snapshot = pipeline.load_overview(args.records or naming.records_path(), today, args.window)
    if args.json:
        print(json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False))
        return
    builder = SparklineBuilder()
    print(f"30-day overview ending {snapshot.end_date.isoformat()}")
    for metric, seq in snapshot.sequences.items():
        label = settings.METRIC_LABELS.get(metric, metric)
        avg = snapshot.averages[metric]
        avg_text = "-" if avg is None else f"{avg:.1f}"
        print(f"  {label:<13} {avg_text:>4}  |{builder.build(seq)}|")
    print(snapshot.caption)


def _render_options(args: argparse.Namespace, today: date) -> dict:
    if args.kind != "linked":
        return {"smooth": args.smooth, "reference_lines": args.smooth}
    options: dict = {}
    if args.active_day:
        day = pipeline.parse_today(args.active_day)
        options["active_index"] = args.window - 1 - (today - day).days
    return options


def cmd_render(args: argparse.Namespace) -> None:
    from gui.charting import ChartRequest, chart_registry
    from gui.charting.export import export_chart

    today = pipeline.parse_today(args.today)
    samples = domain_mapping.load_samples(args.records or naming.records_path())
    req = ChartRequest(
        chart_type=f"overview.{args.kind}",
        data={
            "records": [domain_mapping.sample_to_record(s) for s in samples],
            "today": today.isoformat(),
            "window": args.window,
        },
        options=_render_options(args, today),
    )
    result = chart_registry.build(req)
    out = args.out or naming.chart_filename(args.kind, today, args.format)
    export_chart(result.widget, out, format=args.format)
    log.info("wrote %s chart to %s", args.kind, out)
    summary = {"out": out, "coverage": result.meta["coverage"], "caption": result.meta["caption"]}
    if result.meta.get("active_date"):
        summary["active_date"] = result.meta["active_date"]
    print(json.dumps(summary))


def cmd_demo_data(args: argparse.Namespace) -> None:
    today = pipeline.parse_today(args.today)
    out = args.out or naming.records_path()
    count = domain_mapping.save_samples(out, sample_data.demo_samples(today))
    print(json.dumps({"out": out, "records": count}))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="clarity-stats")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    def _window_args(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("--records", required=False, help="Tracking records JSON file")
        sp.add_argument("--today", required=False, help="Reference day (YYYY-MM-DD), default today")
        sp.add_argument("--window", type=int, default=settings.WINDOW_DAYS, help="Window length in days")

    summary = sub.add_parser("summary", help="Print coverage, averages and text sparklines")
    _window_args(summary)
    summary.add_argument("--json", action="store_true", help="Output JSON snapshot")
    summary.set_defaults(func=cmd_summary)

    render = sub.add_parser("render", help="Render an overview chart to PNG/SVG")
    _window_args(render)
    render.add_argument("--kind", choices=("sparklines", "linked", "heatmap"), default="sparklines")
    render.add_argument("--out", required=False, help="Output file path")
    render.add_argument("--format", choices=("png", "svg"), default="svg")
    render.add_argument("--smooth", action="store_true", help="Smooth curves within each segment")
    render.add_argument("--active-day", required=False, help="Scrub cursor day for --kind linked (YYYY-MM-DD)")
    render.set_defaults(func=cmd_render)

    demo = sub.add_parser("demo-data", help="Write the demo tracking dataset")
    demo.add_argument("--out", required=False, help="Output JSON path")
    demo.add_argument("--today", required=False, help="Last day of the demo window")
    demo.set_defaults(func=cmd_demo_data)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    try:
        args.func(args)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
