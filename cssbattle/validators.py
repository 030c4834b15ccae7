"""Validation functions for imported player rosters."""

from typing import Collection, Iterable, Optional

from .config import get_valid_groups
from .constants import EMAIL_PATTERN
from .models import PlayerRecord

# Data rows start below the header row
FIRST_DATA_ROW = 2


def is_valid_email(value: str) -> bool:
    """Check that an email has a local@domain.tld shape."""
    return bool(value) and EMAIL_PATTERN.match(value) is not None


def _sheet_row(player: PlayerRecord, index: int) -> int:
    """Sheet row a player came from, falling back to its list position."""
    if player.source_row is not None:
        return player.source_row
    return index + FIRST_DATA_ROW


def validate_player(player: PlayerRecord, row: int, valid_groups: Collection[str]) -> list[str]:
    """
    Validate one imported player before it is written to the database.

    Checks:
    - Full name, email and group present
    - Email format
    - Group is one of the competition cohorts

    Args:
        player: PlayerRecord to validate
        row: Sheet row the player came from
        valid_groups: Group names players may belong to

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if not player.full_name:
        errors.append(f'Row {row}: Missing full name')

    if not player.email:
        errors.append(f'Row {row}: Missing email')
    elif not is_valid_email(player.email):
        errors.append(f'Row {row}: Invalid email format')

    if not player.group_name:
        errors.append(f'Row {row}: Missing group')
    elif player.group_name not in valid_groups:
        errors.append(f'Row {row}: Invalid group: {player.group_name}')

    return errors


def validate_players(
    players: list[PlayerRecord],
    valid_groups: Optional[Iterable[str]] = None,
) -> list[str]:
    """
    Validate a parsed roster against league rules.

    Checks every player with validate_player and reports emails that
    appear more than once in the file (case-insensitive).

    Args:
        players: Parsed players in sheet order
        valid_groups: Allowed group names (default: configured groups)

    Returns:
        List of validation error messages (empty if valid)
    """
    groups = set(get_valid_groups() if valid_groups is None else valid_groups)
    errors = []

    rows = [_sheet_row(player, index) for index, player in enumerate(players)]

    for player, row in zip(players, rows):
        errors.extend(validate_player(player, row, groups))

    # Find duplicate emails
    seen: dict[str, int] = {}
    for player, row in zip(players, rows):
        if not player.email:
            continue
        key = player.email.lower()
        if key in seen:
            errors.append(f'Row {row}: Duplicate email {player.email} (first seen in row {seen[key]})')
        else:
            seen[key] = row

    return errors
