"""
Predictor
=========

Turns a birthday, a lifespan and a list of reasons into a predicted death
date and a cause.

1) Lifespan: explicit, or drawn at random from a plausible human range
2) Death date: birthday + lifespan * 365 days (flat years, no leap days)
3) Outside deterministic mode a small random perturbation is added
4) Reason: uniform random pick from the candidate list

All randomness comes from one `random.Random`. By default that is a single
process-wide generator created on first use; pass `rng=` to inject your own
(tests use a seeded one).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Sequence
import logging
import random

from . import date as _date
from .date import Date
from .errors import EmptyReasonListError
from .models import Prediction, User

log = logging.getLogger(__name__)

_rng: Optional[random.Random] = None


def default_rng() -> random.Random:
    """The shared process-wide generator, seeded from the OS on first call."""
    global _rng
    if _rng is None:
        _rng = random.Random()
    return _rng


@dataclass
class PredictorConfig:
    """Tunables for the prediction."""
    # inclusive range for randomly derived lifespans, in years
    lifespan_min: int = 1
    lifespan_max: int = 100

    # random perturbation window (+/- days) outside deterministic mode
    perturbation_days: int = 180

    days_per_year: int = 365

    # years left follow an exponential curve: short lives come up more often
    skewed: bool = False


@dataclass
class Predictor:
    config: PredictorConfig = field(default_factory=PredictorConfig)
    rng: random.Random = field(default_factory=default_rng)

    def derive_lifespan(self, age: Optional[int] = None) -> int:
        """Random lifespan in years.

        When the current age is known the lower bound moves to `age + 1`
        (capped at lifespan_max) so the predicted date is still ahead.
        With `config.skewed` the years past the lower bound are drawn from an
        exponential curve instead of uniformly.
        """
        lo, hi = self.config.lifespan_min, self.config.lifespan_max
        if age is not None:
            lo = min(max(lo, age + 1), hi)
        if self.config.skewed:
            # (span + 1) ** u is in [1, span + 1) for u in [0, 1)
            span = hi - lo + 1
            years = lo - 1 + int((span + 1) ** self.rng.random())
        else:
            years = self.rng.randint(lo, hi)
        log.debug("derived lifespan %d from range %d-%d", years, lo, hi)
        return years

    def compute_death_date(self, birthday: Date, lifespan_years: int, deterministic: bool = False) -> Date:
        """birthday + lifespan_years * days_per_year, plus noise unless deterministic.

        Raises InvalidDateError only if the unperturbed date is itself out of
        range; the perturbation is clamped so it never pushes a valid date out.
        """
        base = birthday.add_days(lifespan_years * self.config.days_per_year)
        if deterministic:
            return base

        w = self.config.perturbation_days
        ordinal = base.toordinal()
        lo = max(-w, _date.MIN_ORDINAL - ordinal)
        hi = min(w, _date.MAX_ORDINAL - ordinal)
        offset = self.rng.randint(lo, hi)
        log.debug("perturbing %s by %+d days", base, offset)
        return base.add_days(offset)

    def pick_reason(self, reasons: Sequence[str]) -> str:
        """Uniformly pick one reason. The caller supplies a non-empty list."""
        if not reasons:
            raise EmptyReasonListError("No death reasons to choose from")
        return self.rng.choice(reasons)

    def predict(self, user: User, today: Optional[Date] = None, deterministic: bool = False) -> Prediction:
        """Full prediction for one user.

        Uses the user's explicit lifespan when present, otherwise derives one
        from their age on `today` (defaults to the system date).
        """
        lifespan = user.lifespan_years
        if lifespan is None:
            today = today or Date.today()
            lifespan = self.derive_lifespan(age=user.age_on(today))
        death_date = self.compute_death_date(user.birthday, lifespan, deterministic=deterministic)
        reason = self.pick_reason(user.death_reasons)
        return Prediction(
            name=user.name,
            birthday=user.birthday,
            lifespan_years=lifespan,
            death_date=death_date,
            reason=reason,
        )
