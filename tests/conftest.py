"""Shared fixtures for roster import tests."""

from io import BytesIO

import openpyxl
import pytest

DEFAULT_HEADERS = ['full_name', 'email', 'group_name', 'phone', 'cssbattle_profile_link', 'verified_ofppt']


def build_workbook_bytes(rows, headers=DEFAULT_HEADERS, extra_sheets=None, sheet_title='Players'):
    """Build an xlsx file in memory: first sheet gets headers + rows."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = sheet_title
    if headers is not None:
        ws.append(headers)
    for row in rows:
        ws.append(row)

    for title, sheet_rows in (extra_sheets or {}).items():
        extra = wb.create_sheet(title)
        for row in sheet_rows:
            extra.append(row)

    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def make_workbook():
    """Factory fixture returning xlsx bytes for the given rows."""
    return build_workbook_bytes


@pytest.fixture
def sample_rows():
    return [
        ['Ibrahim Challal', 'ibrahim@example.com', 'DD101', '0612345678', 'https://cssbattle.dev/player/ibrahim', 'true'],
        ['Sara Benali', 'sara.benali@example.com', 'ID102', None, None, 'false'],
        ['Youssef Amrani', 'youssef@example.org', 'DEVOWS201', '0698765432', None, None],
    ]
