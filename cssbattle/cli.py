"""
CSS Battle roster import CLI

Generates the player import template and validates filled-in rosters
before they are loaded into the players table.

Usage:
    cssbattle template --output-dir downloads
    cssbattle import roster.xlsx --check-groups --output players.json
    cssbattle last-import
"""

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .config import get_log_dir, get_state_file
from .errors import PlayerImportError
from .excel_parser import parse_players_from_excel
from .logging_config import setup_logging
from .schemas import ImportResultFile, ImportSummary, PlayerRecordSchema
from .storage import JsonFileStorage, KeyValueStorage, get_json_item, set_json_item
from .template import save_player_template
from .utils import save_json
from .validators import validate_players

LAST_IMPORT_KEY = 'last_import'


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="CSS Battle Championship player roster import")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Also write logs to the configured log directory",
    )
    parser.add_argument(
        "--state-file",
        type=Path,
        default=None,
        help="Client state file (defaults to the configured state_file)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    template_parser = subparsers.add_parser("template", help="Write the player import template")
    template_parser.add_argument(
        "--output-dir", "-o",
        type=Path,
        default=Path("."),
        help="Directory to write players_template.xlsx into",
    )

    import_parser = subparsers.add_parser("import", help="Parse and validate a roster spreadsheet")
    import_parser.add_argument("file", type=Path, help="Path to the roster .xlsx file")
    import_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Write parsed players to this JSON file",
    )
    import_parser.add_argument(
        "--check-groups",
        action="store_true",
        help="Reject unknown groups and duplicate emails",
    )

    subparsers.add_parser("last-import", help="Show the most recent successful import")

    return parser.parse_args(argv)


def run_template(output_dir: Path) -> int:
    path = save_player_template(output_dir)
    print(f"Template written to {path}")
    return 0


def run_import(
    file: Path,
    storage: KeyValueStorage,
    output: Optional[Path] = None,
    check_groups: bool = False,
) -> int:
    """Parse a roster file, report problems, and remember the result."""
    try:
        players = parse_players_from_excel(file)
    except PlayerImportError as e:
        print(f"Failed to import players: {e.message}", file=sys.stderr)
        return 1

    if check_groups:
        errors = validate_players(players)
        if errors:
            print(f"Found {len(errors)} validation errors:", file=sys.stderr)
            for error in errors:
                print(f"  {error}", file=sys.stderr)
            return 1

    print(f"Parsed {len(players)} players from {file}")
    for player in players:
        status = "verified" if player.verified else "unverified"
        print(f"  {player.full_name:<30} {player.email:<35} {player.group_name:<10} {status}")

    if output:
        result = ImportResultFile(
            source=str(file),
            players=[PlayerRecordSchema(**player.to_dict()) for player in players],
        )
        try:
            save_json(output, result)
        except OSError as e:
            print(f"Failed to write {output}: {e}", file=sys.stderr)
            return 1
        print(f"Players saved to {output}")

    summary = ImportSummary(
        source=str(file),
        record_count=len(players),
        imported_at=datetime.now(timezone.utc).isoformat(),
    )
    set_json_item(storage, LAST_IMPORT_KEY, summary.model_dump())
    return 0


def run_last_import(storage: KeyValueStorage) -> int:
    data = get_json_item(storage, LAST_IMPORT_KEY)
    if data is None:
        print("No imports recorded yet")
        return 0

    summary = ImportSummary(**data)
    print(f"{summary.record_count} players from {summary.source} at {summary.imported_at}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)
    setup_logging(
        log_dir=get_log_dir(),
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_to_file=args.log_file,
    )

    storage = JsonFileStorage(args.state_file or get_state_file())

    if args.command == "template":
        return run_template(args.output_dir)
    if args.command == "import":
        return run_import(args.file, storage, output=args.output, check_groups=args.check_groups)
    return run_last_import(storage)


if __name__ == "__main__":
    sys.exit(main())
