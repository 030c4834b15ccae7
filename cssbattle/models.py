"""Data models for the CSS Battle roster importer."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PlayerRecord:
    """One validated player entry produced by a roster import."""
    full_name: str
    email: str
    group_name: str
    phone: Optional[str] = None
    profile_link: Optional[str] = None
    verified: bool = False
    source_row: Optional[int] = field(default=None, compare=False)  # sheet row it was read from

    def to_dict(self) -> dict:
        """Dict keyed by the players table column names."""
        return {
            'full_name': self.full_name,
            'email': self.email,
            'group_name': self.group_name,
            'phone': self.phone,
            'cssbattle_profile_link': self.profile_link,
            'verified_ofppt': self.verified,
        }

    def as_template_row(self) -> list[str]:
        """Cells in template column order."""
        return [
            self.full_name,
            self.email,
            self.group_name,
            self.phone or '',
            self.profile_link or '',
            'true' if self.verified else 'false',
        ]
