"""JSON file I/O for the import config, result files and the state store."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('cssbattle.utils')


def load_json(path: Path | str, schema: type[T] | None = None) -> Any | T:
    """
    Load a JSON file, validating it against a Pydantic model when one is given.

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If JSON is malformed
        ValidationError: If schema validation fails
    """
    path = Path(path)
    logger.debug(f'Loading JSON from: {path}')

    with open(path, encoding='utf-8') as f:
        data = json.load(f)

    return schema.model_validate(data) if schema else data


def save_json(path: Path | str, data: Any) -> None:
    """Write data (plain JSON values or a Pydantic model) to path, creating parent dirs."""
    path = Path(path)
    logger.debug(f'Saving JSON to: {path}')

    path.parent.mkdir(parents=True, exist_ok=True)
    json_data = data.model_dump() if isinstance(data, BaseModel) else data

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(json_data, f, indent=2, ensure_ascii=False)


def load_json_safe(path: Path | str, default: Any = None) -> Any:
    """Like load_json, but returns default for missing, unreadable or malformed files."""
    try:
        return load_json(path)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f'Ignoring unreadable JSON file {path}: {e}')
        return default
