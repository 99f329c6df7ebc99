"""Inspect recorded games stored in the session history database."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

from boxlax_tracker.config import load_settings
from boxlax_tracker.llm.summary import CoachReportGenerator
from boxlax_tracker.stats.aggregation import per_period_stats, situational_stats
from boxlax_tracker.stats.frames import events_to_frame
from boxlax_tracker.storage.repository import SQLiteSessionRepository
from boxlax_tracker.tracking.models import GameSession
from boxlax_tracker.ui.formatting import (
    build_session_label,
    format_overall_line,
    format_period_rows,
    format_situational_lines,
)
from boxlax_tracker.ui.plots import create_goal_heatmap_figure

logger = logging.getLogger(__name__)


def _find_session(repository: SQLiteSessionRepository, session_id: str) -> Optional[GameSession]:
    session = repository.get(session_id)
    if session is None:
        logger.error("No session with id %s in %s", session_id, repository.db_path)
    return session


def list_sessions(repository: SQLiteSessionRepository) -> List[str]:
    lines = [f"{session.id}  {build_session_label(session)}" for session in repository.load_all()]
    if not lines:
        lines = ["No recorded games."]
    return lines


def describe_session(session: GameSession) -> List[str]:
    lines = [build_session_label(session), format_overall_line(session.summary_stats)]
    periods = format_period_rows(per_period_stats(session.events))
    if periods:
        lines.append(pd.DataFrame(periods).to_string(index=False))
    lines.extend(format_situational_lines(situational_stats(session.events)))
    return lines


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--database",
        type=Path,
        default=None,
        help="SQLite history database (default: $BOXLAX_DB_PATH or data/boxlax-history.sqlite)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List recorded games, most recent first")

    show = sub.add_parser("show", help="Print save statistics for one game")
    show.add_argument("session_id")

    export = sub.add_parser("export", help="Write the shot log of one game to CSV")
    export.add_argument("session_id")
    export.add_argument("output", type=Path)

    heatmap = sub.add_parser("heatmap", help="Write the goals-allowed heatmap to an HTML file")
    heatmap.add_argument("session_id")
    heatmap.add_argument("output", type=Path)

    analyze = sub.add_parser("analyze", help="Ask the language model for a coach's report")
    analyze.add_argument("session_id")

    return parser.parse_args(list(argv) if argv is not None else None)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    settings = load_settings()
    db_path: Path = (args.database or settings.db_path).expanduser()
    repository = SQLiteSessionRepository(db_path)

    if args.command == "list":
        print("\n".join(list_sessions(repository)))
        return 0

    session = _find_session(repository, args.session_id)
    if session is None:
        return 1

    if args.command == "show":
        print("\n".join(describe_session(session)))
    elif args.command == "export":
        args.output.parent.mkdir(parents=True, exist_ok=True)
        events_to_frame(session.events).to_csv(args.output, index=False)
        logger.info("Wrote %s shots to %s", len(session.events), args.output)
    elif args.command == "heatmap":
        args.output.parent.mkdir(parents=True, exist_ok=True)
        create_goal_heatmap_figure(session.events).write_html(str(args.output))
        logger.info("Wrote heatmap to %s", args.output)
    elif args.command == "analyze":
        generator = CoachReportGenerator.from_settings(settings)
        print(generator.summarize(session.events.all()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
