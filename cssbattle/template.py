"""Player import template generation.

The template is the workbook users download, fill in, and upload again
through parse_players_from_excel. Its header row uses the players table
column names, which the parser accepts as aliases.
"""

import logging
from datetime import datetime
from io import BytesIO
from pathlib import Path
from zipfile import ZIP_DEFLATED, ZipFile, ZipInfo

import openpyxl
from openpyxl.styles import Font
from openpyxl.writer.excel import ExcelWriter

from .constants import (
    TEMPLATE_EXAMPLE_ROWS,
    TEMPLATE_FILENAME,
    TEMPLATE_HEADERS,
    TEMPLATE_SHEET_NAME,
)
from .models import PlayerRecord

logger = logging.getLogger('cssbattle.template')

# Fixed document timestamp so repeated calls produce the same metadata
TEMPLATE_TIMESTAMP = datetime(2024, 1, 1)
# Earliest timestamp the zip format can store
ZIP_MEMBER_TIMESTAMP = (1980, 1, 1, 0, 0, 0)


def _build_workbook(rows: list[list[str]]) -> openpyxl.Workbook:
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = TEMPLATE_SHEET_NAME

    ws.append(TEMPLATE_HEADERS)
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for row in rows:
        ws.append(row)

    return wb


def _workbook_to_bytes(wb: openpyxl.Workbook) -> bytes:
    """Serialize a workbook without stamping the current time into it."""
    wb.properties.created = TEMPLATE_TIMESTAMP
    wb.properties.modified = TEMPLATE_TIMESTAMP

    buffer = BytesIO()
    archive = ZipFile(buffer, 'w', ZIP_DEFLATED, allowZip64=True)
    writer = ExcelWriter(wb, archive)
    writer.save()  # closes the archive
    wb.close()
    return _pin_member_timestamps(buffer.getvalue())


def _pin_member_timestamps(data: bytes) -> bytes:
    """Rewrite the xlsx archive with every member dated ZIP_MEMBER_TIMESTAMP."""
    buffer = BytesIO()
    with ZipFile(BytesIO(data)) as source, ZipFile(buffer, 'w', ZIP_DEFLATED, allowZip64=True) as target:
        for info in source.infolist():
            member = ZipInfo(info.filename, date_time=ZIP_MEMBER_TIMESTAMP)
            member.compress_type = ZIP_DEFLATED
            member.external_attr = 0o600 << 16
            target.writestr(member, source.read(info.filename))
    return buffer.getvalue()


def create_player_template() -> bytes:
    """
    Create the player import template workbook.

    Returns:
        xlsx content with a 'Players' sheet holding the header row and two
        example players (one verified, one not)
    """
    wb = _build_workbook(TEMPLATE_EXAMPLE_ROWS)
    return _workbook_to_bytes(wb)


def create_players_workbook(players: list[PlayerRecord]) -> bytes:
    """
    Export player records in the template layout.

    The result can be edited and uploaded again like a filled-in template.
    """
    wb = _build_workbook([player.as_template_row() for player in players])
    logger.debug(f'Exported {len(players)} players to workbook')
    return _workbook_to_bytes(wb)


def get_player_template_filename() -> str:
    """Suggested download name for the template."""
    return TEMPLATE_FILENAME


def save_player_template(directory: Path | str = '.') -> Path:
    """
    Write the template into a directory under its standard file name.

    Args:
        directory: Target directory, created if missing

    Returns:
        Path of the written template
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / get_player_template_filename()
    path.write_bytes(create_player_template())
    logger.info(f'Template saved to {path}')
    return path
