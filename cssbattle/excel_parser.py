"""Excel roster parsing utilities."""

import asyncio
import logging
from collections.abc import Mapping, Sequence
from datetime import date, datetime, time
from io import BytesIO
from pathlib import Path
from typing import IO, Optional, Union

import openpyxl

from .constants import EMAIL_PATTERN, FIELD_ALIASES, REQUIRED_FIELDS
from .errors import (
    FileReadError,
    InvalidEmailFormatError,
    MissingRequiredFieldError,
    SpreadsheetDecodeError,
)
from .models import PlayerRecord

logger = logging.getLogger('cssbattle.excel_parser')

SpreadsheetSource = Union[str, Path, bytes, bytearray, IO[bytes]]
CellValue = Union[str, int, float, bool, datetime, date, time, None]


def read_file_bytes(source: SpreadsheetSource) -> bytes:
    """
    Load the whole content of an uploaded spreadsheet into memory.

    Args:
        source: Path to the file, raw bytes, or a binary file-like object

    Returns:
        File content

    Raises:
        FileReadError: If the file is missing or cannot be read
    """
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)

    if hasattr(source, 'read'):
        try:
            data = source.read()
        except OSError as e:
            logger.error(f'Failed to read upload: {e}')
            raise FileReadError(f'Failed to read file: {e}') from e
        if not isinstance(data, (bytes, bytearray)):
            raise FileReadError('Failed to read file: expected binary content')
        return bytes(data)

    path = Path(source)
    try:
        return path.read_bytes()
    except OSError as e:
        logger.error(f'Failed to read {path}: {e}')
        raise FileReadError(f'Failed to read file: {path}') from e


def normalize_cell(value: CellValue) -> Optional[str]:
    """
    Convert a decoded cell value to trimmed text.

    Examples:
        "  Ibrahim Challal  " -> "Ibrahim Challal"
        612345678.0 -> "612345678"
        True -> "true"
        None -> None
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value).strip()


def resolve_field(row: Mapping[str, CellValue], aliases: Sequence[str]) -> CellValue:
    """
    Return the value of the first alias column that holds a value.

    Empty strings, zero and False count as no value, so a blank cell under a
    preferred header falls through to the next alias.
    """
    for alias in aliases:
        value = row.get(alias)
        if value:
            return value
    return None


def _header_names(header_row: Sequence[CellValue]) -> list[Optional[str]]:
    """Header text per column; repeated headers get a numeric suffix."""
    names: list[Optional[str]] = []
    seen: dict[str, int] = {}
    for cell in header_row:
        if cell is None or cell == '':
            names.append(None)
            continue
        name = normalize_cell(cell) if not isinstance(cell, str) else cell
        if name in seen:
            seen[name] += 1
            name = f'{name}_{seen[name]}'
        else:
            seen[name] = 0
        names.append(name)
    return names


def _is_blank(values: Sequence[CellValue]) -> bool:
    return all(value is None or value == '' for value in values)


def sheet_to_rows(ws) -> list[tuple[int, dict[str, CellValue]]]:
    """
    Convert a worksheet into (sheet row number, {header: value}) pairs.

    The first non-empty row holds the headers. Rows with no values are
    skipped.
    """
    headers = None
    rows = []
    for row_number, values in enumerate(ws.iter_rows(min_row=1, values_only=True), start=1):
        if headers is None:
            if not _is_blank(values):
                headers = _header_names(values)
            continue

        row = {}
        for header, value in zip(headers, values):
            if header is None or value is None or value == '':
                continue
            row[header] = value
        if row:
            rows.append((row_number, row))
    return rows


def parse_player_row(row: Mapping[str, CellValue], row_number: int) -> PlayerRecord:
    """
    Build a validated PlayerRecord from one spreadsheet row.

    Args:
        row: Mapping of header text to cell value
        row_number: 1-based sheet row, used in error messages

    Raises:
        MissingRequiredFieldError: If full name, email or group is empty
        InvalidEmailFormatError: If the email is not local@domain.tld
    """
    fields = {
        field: normalize_cell(resolve_field(row, aliases)) or None
        for field, aliases in FIELD_ALIASES.items()
    }

    missing = [field for field in REQUIRED_FIELDS if not fields[field]]
    if missing:
        raise MissingRequiredFieldError(row_number, missing)

    email = fields['email']
    if not EMAIL_PATTERN.match(email):
        raise InvalidEmailFormatError(email, row=row_number)

    verified = fields['verified']
    return PlayerRecord(
        full_name=fields['full_name'],
        email=email,
        group_name=fields['group_name'],
        phone=fields['phone'],
        profile_link=fields['profile_link'],
        verified=verified is not None and verified.lower() == 'true',
        source_row=row_number,
    )


def parse_players_from_excel(source: SpreadsheetSource) -> list[PlayerRecord]:
    """
    Parse player records from the first sheet of an Excel file.

    The import is all-or-nothing: the first invalid row aborts the whole
    file and no records are returned.

    Args:
        source: Path to the Excel file, its raw bytes, or a binary file object

    Returns:
        List of PlayerRecord objects in sheet row order

    Raises:
        FileReadError: If the file cannot be read
        SpreadsheetDecodeError: If the content is not a readable workbook
        MissingRequiredFieldError: If a row lacks full name, email or group
        InvalidEmailFormatError: If a row has a malformed email
    """
    data = read_file_bytes(source)
    logger.debug(f'Read {len(data)} bytes')

    try:
        wb = openpyxl.load_workbook(BytesIO(data), read_only=True, data_only=True)
    except Exception as e:
        logger.error(f'Could not decode spreadsheet: {e}')
        raise SpreadsheetDecodeError(f'Failed to parse Excel file: {e}') from e

    try:
        if not wb.worksheets:
            raise SpreadsheetDecodeError('Failed to parse Excel file: workbook has no worksheets')
        ws = wb.worksheets[0]
        logger.debug(f'Reading sheet {ws.title!r}')
        rows = sheet_to_rows(ws)
    finally:
        wb.close()

    players = [parse_player_row(row, row_number) for row_number, row in rows]
    logger.info(f'Parsed {len(players)} players')
    return players


async def parse_players_from_excel_async(source: SpreadsheetSource) -> list[PlayerRecord]:
    """
    Read and parse a roster without blocking the event loop.

    Resolves with the parsed records or raises the same errors as
    parse_players_from_excel, exactly once.
    """
    return await asyncio.to_thread(parse_players_from_excel, source)
