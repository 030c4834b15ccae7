from .models import PlayerRecord
from .errors import (
    DecodeError,
    FileReadError,
    InvalidEmailFormatError,
    MissingRequiredFieldError,
    PlayerImportError,
    SpreadsheetDecodeError,
)
from .excel_parser import (
    parse_players_from_excel,
    parse_players_from_excel_async,
    parse_player_row,
    resolve_field,
)
from .template import (
    create_player_template,
    create_players_workbook,
    get_player_template_filename,
    save_player_template,
)
from .validators import validate_players
from .storage import InMemoryStorage, JsonFileStorage, NullStorage

__all__ = [
    # Models
    'PlayerRecord',
    # Errors
    'PlayerImportError',
    'FileReadError',
    'SpreadsheetDecodeError',
    'DecodeError',
    'MissingRequiredFieldError',
    'InvalidEmailFormatError',
    # Import
    'parse_players_from_excel',
    'parse_players_from_excel_async',
    'parse_player_row',
    'resolve_field',
    # Template
    'create_player_template',
    'create_players_workbook',
    'get_player_template_filename',
    'save_player_template',
    # Validation
    'validate_players',
    # Client storage
    'InMemoryStorage',
    'JsonFileStorage',
    'NullStorage',
]
