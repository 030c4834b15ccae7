"""Exceptions raised while importing a player roster.

Every error is terminal for the import attempt it came from: callers should
treat any of them as "zero players imported".
"""

from typing import Optional


class PlayerImportError(Exception):
    """Base class for roster import failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FileReadError(PlayerImportError):
    """The uploaded file could not be read."""


class SpreadsheetDecodeError(PlayerImportError):
    """The file content is not a spreadsheet we can decode."""


class MissingRequiredFieldError(PlayerImportError):
    """A row has no full name, email or group."""

    def __init__(self, row: int, missing: list[str]):
        self.row = row
        self.missing = missing
        super().__init__(
            f'Missing required fields in row {row} ({", ".join(missing)}): '
            'full_name, email, and group_name are required'
        )


class InvalidEmailFormatError(PlayerImportError):
    """A row's email does not look like local@domain.tld."""

    def __init__(self, email: str, row: Optional[int] = None):
        self.email = email
        self.row = row
        location = f' in row {row}' if row is not None else ''
        super().__init__(f'Invalid email format{location}: {email}')


DecodeError = SpreadsheetDecodeError
