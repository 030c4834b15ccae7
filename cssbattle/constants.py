"""Constants and mappings for the CSS Battle roster importer."""

import re

# Simple local@domain.tld shape
EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

# Accepted spreadsheet headers per canonical field, highest priority first
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    'full_name': ('full_name', 'FullName', 'Full Name', 'name', 'Name'),
    'email': ('email', 'Email'),
    'group_name': ('group_name', 'GroupName', 'Group Name', 'group', 'Group'),
    'phone': ('phone', 'Phone'),
    'profile_link': (
        'cssbattle_profile_link',
        'CSSBattleProfileLink',
        'CSS Battle Profile Link',
        'css_link',
        'CSSLink',
    ),
    'verified': ('verified_ofppt', 'VerifiedOfppt', 'Verified OFPPT', 'verified', 'Verified'),
}

REQUIRED_FIELDS = ('full_name', 'email', 'group_name')

# Template workbook layout
TEMPLATE_SHEET_NAME = 'Players'
TEMPLATE_FILENAME = 'players_template.xlsx'
TEMPLATE_HEADERS = [
    'full_name',
    'email',
    'group_name',
    'phone',
    'cssbattle_profile_link',
    'verified_ofppt',
]
TEMPLATE_EXAMPLE_ROWS = [
    [
        'John Doe',
        'john.doe@example.com',
        'DD101',
        '123-456-7890',
        'https://cssbattle.dev/player/johndoe',
        'true',
    ],
    [
        'Jane Smith',
        'jane.smith@example.com',
        'DD102',
        '098-765-4321',
        'https://cssbattle.dev/player/janesmith',
        'false',
    ],
]

XLSX_MIME_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

# Competition cohorts: (value, category)
GROUP_OPTIONS = [
    # DEV groups
    ('DD101', 'DEV'),
    ('DD102', 'DEV'),
    ('DD103', 'DEV'),
    ('DD104', 'DEV'),
    ('DD105', 'DEV'),
    ('DD106', 'DEV'),
    ('DD107', 'DEV'),
    ('DEVOWS201', 'DEV'),
    ('DEVOWS202', 'DEV'),
    ('DEVOWS203', 'DEV'),
    ('DEVOWS204', 'DEV'),
    # ID groups
    ('ID101', 'ID'),
    ('ID102', 'ID'),
    ('ID103', 'ID'),
    ('ID104', 'ID'),
    ('IDOSR201', 'ID'),
    ('IDOSR202', 'ID'),
    ('IDOSR203', 'ID'),
    ('IDOSR204', 'ID'),
]

GROUPS = [value for value, _category in GROUP_OPTIONS]
DEV_GROUPS = [value for value, category in GROUP_OPTIONS if category == 'DEV']
ID_GROUPS = [value for value, category in GROUP_OPTIONS if category == 'ID']
