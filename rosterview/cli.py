"""Command-line interface for the weekly roster view."""

from __future__ import annotations

import argparse
import sys

from rosterview.config import load_config
from rosterview.dates import format_date, parse_date, week_dates, week_label, week_start
from rosterview.domain.db import get_session, init_database
from rosterview.domain.repositories import WeeklyScheduleRepository
from rosterview.engine.merge import StaffView
from rosterview.io.export_csv import export_week_csv
from rosterview.io.import_csv import import_roster_csv
from rosterview.services.workspace import ScheduleWorkspace


def _workspace(args: argparse.Namespace) -> ScheduleWorkspace:
    session = get_session(args.db_url)
    workspace = ScheduleWorkspace(session, tenant_id=args.tenant_id, seed_demo=args.seed_demo)
    workspace.load()
    return workspace


def _fail(message: str) -> None:
    print(f"[ERROR] {message}")
    raise SystemExit(1)


def format_view(view: StaffView, dates, date_format: str) -> str:
    """Plain-text table of the view, one block per unit."""
    if not view:
        return "No active staff."
    header = ["Name", "Group", "Job title"] + [format_date(d, date_format) for d in dates]
    lines = []
    for unit, entries in view.items():
        orphaned = next((e for e in entries if e.is_orphaned_unit), None)
        title = (orphaned or entries[0]).display_unit if unit else "(no unit)"
        lines.append(f"== {title}")
        lines.append(" | ".join(header))
        for entry in entries:
            cells = [entry.name, entry.display_group, entry.display_job_title]
            cells += [entry.shifts.get(d, "") or "-" for d in dates]
            lines.append(" | ".join(cells))
        lines.append("")
    return "\n".join(lines).rstrip()


def _cmd_init_db(args: argparse.Namespace) -> None:
    """Initialize the database."""
    init_database(args.db_url)
    print(f"[OK] Database initialized: {args.db_url}")


def _cmd_load_demo(args: argparse.Namespace) -> None:
    """Replace the tenant's settings with demo data."""
    workspace = _workspace(args)
    try:
        result = workspace.load_demo()
        if not result.ok:
            _fail(f"Loading demo data failed: {result.error}")
        print(f"[OK] Demo settings loaded for tenant {args.tenant_id}")
    finally:
        workspace.session.close()


def _cmd_import_roster(args: argparse.Namespace) -> None:
    """Import staff from CSV into the tenant's roster."""
    workspace = _workspace(args)
    try:
        imported = import_roster_csv(args.csv, workspace.settings)
        if not imported.ok:
            _fail(f"Import failed: {imported.error}")
        saved = workspace.save_settings(imported.value)
        if not saved.ok:
            _fail(f"Import failed: {saved.error}")
        print(f"[OK] Roster now has {len(saved.value.staff_list)} staff members")
    finally:
        workspace.session.close()


def _cmd_show_week(args: argparse.Namespace) -> None:
    """Print the grouped view for a week."""
    workspace = _workspace(args)
    try:
        workspace.open_week(parse_date(args.week))
        dates = workspace.week_dates()
        print(week_label(dates[0], args.date_format))
        print(format_view(workspace.staff_by_unit(), dates, args.date_format))
    finally:
        workspace.session.close()


def _cmd_copy_week(args: argparse.Namespace) -> None:
    """Copy one week's schedule over another week."""
    workspace = _workspace(args)
    try:
        target = week_start(parse_date(args.target))
        exists = WeeklyScheduleRepository.load(workspace.session, args.tenant_id, target) is not None
        if exists and not args.yes:
            _fail(f"Week {target} already has a schedule; pass --yes to overwrite it")
        result = workspace.copy_week(parse_date(args.source), target)
        if not result.ok:
            _fail(f"Copy failed: {result.error}")
    finally:
        workspace.session.close()


def _cmd_export_week(args: argparse.Namespace) -> None:
    """Export a week's view to CSV."""
    workspace = _workspace(args)
    try:
        week = workspace.open_week(parse_date(args.week))
        count = export_week_csv(workspace.staff_by_unit(), week_dates(week.week_start), args.out)
        print(f"[OK] Exported {count} staff rows to {args.out}")
    finally:
        workspace.session.close()


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="rosterview",
        description="Weekly staff roster: merge roster defaults with weekly overrides",
    )

    # Global options
    parser.add_argument("--config", help="Path to JSON/YAML config")
    parser.add_argument("--db", help="Database URL (overrides config)")
    parser.add_argument("--tenant", help="Tenant id (overrides config)")

    sub = parser.add_subparsers(dest="command", required=True)

    init = sub.add_parser("init-db", help="Initialize database")
    init.set_defaults(func=_cmd_init_db)

    demo = sub.add_parser("load-demo", help="Replace settings with demo data")
    demo.set_defaults(func=_cmd_load_demo)

    imp = sub.add_parser("import-roster", help="Import staff members from CSV")
    imp.add_argument("--csv", required=True, help="Path to roster CSV")
    imp.set_defaults(func=_cmd_import_roster)

    show = sub.add_parser("show-week", help="Print the schedule view for a week")
    show.add_argument("--week", required=True, help="Any date in the week (YYYY-MM-DD)")
    show.set_defaults(func=_cmd_show_week)

    cp = sub.add_parser("copy-week", help="Copy a week's schedule onto another week")
    cp.add_argument("--source", required=True, help="Any date in the source week")
    cp.add_argument("--target", required=True, help="Any date in the target week")
    cp.add_argument("--yes", action="store_true", help="Overwrite an existing target week")
    cp.set_defaults(func=_cmd_copy_week)

    exp = sub.add_parser("export-week", help="Export a week's view to CSV")
    exp.add_argument("--week", required=True, help="Any date in the week (YYYY-MM-DD)")
    exp.add_argument("--out", required=True, help="Output CSV path")
    exp.set_defaults(func=_cmd_export_week)

    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config)
    except (OSError, ValueError) as e:
        _fail(f"Invalid config: {e}")
    args.db_url = args.db or cfg.db_url
    args.tenant_id = args.tenant or cfg.tenant_id
    args.seed_demo = cfg.seed_demo
    args.date_format = cfg.date_format

    try:
        args.func(args)
    except ValueError as e:
        _fail(str(e))


if __name__ == "__main__":
    main(sys.argv[1:])
