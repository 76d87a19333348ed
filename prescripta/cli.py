"""
prescripta.cli
==============

Command‑line front end::

    $ prescripta --crime-date 10/01/2020 --max-penalty 5 \\
                 --event indictment=01/06/2023 --today 01/03/2026
    $ prescripta --db prescripta.db --show      # reopen a saved case

Dates are ``DD/MM/YYYY``.  Invalid dates are reported and skipped, the
rest of the input is still applied.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .dates import format_date, parse_date
from .errors import InvalidDate
from .events import EventStore
from .models import Stage
from .recompute import DerivedResults
from .session import CaseSession
from .settings import LOG_FORMAT, LOG_LEVEL
from .store import MemoryStore

logger = logging.getLogger(__name__)

_STAGE_TITLES = {
    Stage.INSTRUCTION: "Etapa de Instrucción",
    Stage.TRIAL: "Etapa de Juicio",
    Stage.RECURSE: "Etapa Recursiva",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prescripta",
        description="Compute the limitation windows of a criminal case.",
    )
    parser.add_argument("--crime-date", help="date of the offense (DD/MM/YYYY)")
    parser.add_argument("--max-penalty", type=int, help="maximum penalty in years (clamped to 2-12)")
    parser.add_argument("--crime-type", help="free-text crime description")
    parser.add_argument(
        "--event", action="append", default=[], metavar="ID=DD/MM/YYYY",
        help="date a procedural event; repeatable",
    )
    parser.add_argument("--today", help="evaluate as of this date instead of today")
    parser.add_argument("--db", help="SQLite file to load the case from and save it to")
    parser.add_argument("--plot", metavar="PNG", help="write the timeline plot to this path")
    parser.add_argument("--windows-chart", metavar="PNG", help="write the limitation-window bars to this path")
    parser.add_argument("--list-events", action="store_true", help="list known event ids and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _open_session(db: Optional[str]) -> CaseSession:
    if not db:
        return CaseSession(store=MemoryStore())
    from .db import make_engine
    from .store import SQLiteStore

    logger.info("loading case from %s", db)
    return CaseSession.load(SQLiteStore(make_engine(f"sqlite:///{db}")))


def render(session: CaseSession, results: DerivedResults) -> str:
    """Plain‑text report of *results*."""
    cfg = session.config
    lines = [
        f"Fecha del hecho: {format_date(cfg.crime_date)}",
        f"Monto máximo de la pena: {cfg.max_penalty_years} años",
    ]
    if cfg.crime_type:
        lines.append(f"Tipo de delito: {cfg.crime_type}")
    lines.append("")

    report = results.report
    if report.prescribed:
        lines.append("ACCIÓN PRESCRIPTA")
    for window in report.windows:
        lines += [
            window.label,
            f"  Inicio: {format_date(window.start_date)}",
            f"  Fin: {format_date(window.end_date)}",
            f"  Fecha de prescripción: {format_date(window.deadline)}",
            f"  Estado: {'Prescripto' if window.expired else 'No prescripto'}",
        ]
    for missing in report.missing:
        lines.append(f"{missing.label}: pendiente ({missing.required} sin fecha)")

    lines.append("")
    for stage, duration in results.stage_durations.items():
        if duration is not None:
            lines.append(f"{_STAGE_TITLES[stage]} (Duración: {duration})")
    if results.total_duration is not None:
        lines.append(f"Duración total: {results.total_duration}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level="DEBUG" if args.verbose else LOG_LEVEL, format=LOG_FORMAT)

    if args.list_events:
        for ev in EventStore.default():
            print(f"{ev.id:<20} {ev.stage!s:<12} {ev.name}")
        return 0

    today = None
    if args.today:
        try:
            today = parse_date(args.today)
        except InvalidDate as exc:
            print(f"⛔ {exc}", file=sys.stderr)
            return 2

    session = _open_session(args.db)
    if args.crime_date and not session.enter_crime_date(args.crime_date):
        print(f"⚠️  crime date ignored: {args.crime_date!r}", file=sys.stderr)
    if args.max_penalty is not None:
        session.set_max_penalty_years(args.max_penalty)
    if args.crime_type is not None:
        session.set_crime_type(args.crime_type)

    for spec in args.event:
        event_id, sep, text = spec.partition("=")
        if not sep or not session.enter_event_date(event_id.strip(), text):
            print(f"⚠️  event ignored: {spec!r}", file=sys.stderr)

    results = session.results(today=today)
    print(render(session, results))

    if args.plot:
        if results.timeline is None:
            print("⚠️  not enough dated events to plot", file=sys.stderr)
        else:
            from .viz import plot_timeline

            out = plot_timeline(results.timeline, results.report, out_path=args.plot)
            print(f"timeline saved to {out}")

    if args.windows_chart:
        if not results.report.windows:
            print("⚠️  no limitation window to chart", file=sys.stderr)
        else:
            from .viz import windows_chart

            out = windows_chart(results.report, out_path=args.windows_chart)
            print(f"windows chart saved to {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
