"""Pydantic schemas for configuration and JSON import results."""

from pydantic import BaseModel, Field, field_validator

from .constants import EMAIL_PATTERN, GROUP_OPTIONS


class GroupOption(BaseModel):
    """Competition cohort a player can belong to."""

    value: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1)
    category: str = Field(..., pattern=r'^(DEV|ID)$')

    class Config:
        extra = 'forbid'


def _default_groups() -> list[GroupOption]:
    return [GroupOption(value=value, label=value, category=category) for value, category in GROUP_OPTIONS]


class ImportConfig(BaseModel):
    """Importer configuration settings."""

    groups: list[GroupOption] = Field(default_factory=_default_groups)
    log_dir: str = 'logs'
    state_file: str = '.cssbattle_state.json'

    @field_validator('groups')
    @classmethod
    def validate_unique_groups(cls, v):
        """Ensure no group is listed twice."""
        seen = set()
        for group in v:
            if group.value in seen:
                raise ValueError(f'Duplicate group: {group.value}')
            seen.add(group.value)
        return v

    class Config:
        extra = 'forbid'


class PlayerRecordSchema(BaseModel):
    """Exported player record, keyed by players table column names."""

    full_name: str = Field(..., min_length=1)
    email: str
    group_name: str = Field(..., min_length=1)
    phone: str | None = None
    cssbattle_profile_link: str | None = None
    verified_ofppt: bool = False

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        """Ensure email has a local@domain.tld shape."""
        if not EMAIL_PATTERN.match(v):
            raise ValueError(f'Invalid email format: {v}')
        return v

    class Config:
        extra = 'forbid'


class ImportResultFile(BaseModel):
    """Complete JSON output of an import run."""

    source: str
    players: list[PlayerRecordSchema]

    class Config:
        extra = 'forbid'


class ImportSummary(BaseModel):
    """Summary of the most recent import, kept in client storage."""

    source: str
    record_count: int = Field(..., ge=0)
    imported_at: str

    class Config:
        extra = 'allow'
