"""
Data model (User, Prediction)
=============================

`User` is everything one CLI run knows about the person: a display name, a
birthday, an optional explicit lifespan and the candidate death reasons.
`Prediction` is the immutable answer the predictor hands back.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple

from . import DEFAULT_DEATH_REASONS
from .date import Date


@dataclass
class User:
    """Inputs for one prediction.

    An empty reason list is replaced by DEFAULT_DEATH_REASONS, so
    `death_reasons` is never empty after construction.
    """
    name: str
    birthday: Date
    lifespan_years: Optional[int] = None
    death_reasons: Sequence[str] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        reasons: Tuple[str, ...] = tuple(self.death_reasons)
        self.death_reasons = reasons or DEFAULT_DEATH_REASONS

    def age_on(self, day: Date) -> int:
        """Full years lived on `day` (0 if `day` is before the birthday)."""
        if day < self.birthday:
            return 0
        return self.birthday.years_from(day)


@dataclass(frozen=True)
class Prediction:
    """Immutable result of one prediction."""
    name: str
    birthday: Date
    lifespan_years: int
    death_date: Date
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict with ISO dates, ready for `json.dump`."""
        return {
            "name": self.name,
            "birthday": self.birthday.isoformat(),
            "lifespan_years": self.lifespan_years,
            "death_date": self.death_date.isoformat(),
            "reason": self.reason,
        }
