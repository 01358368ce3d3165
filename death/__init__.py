"""
death package
=============

A toy that predicts the date (and the cause) of your death.

- The CLI entry point is in `death/cli.py`.
- The calendar date type is in `death/date.py`.
- The prediction logic (dates, reasons, lifespans) is in `death/predictor.py`.
- Reasons file loading is in `death/loader.py`.
"""

__version__ = '0.3.0'

DEFAULT_DEATH_REASONS = (
    "cars", "illness", "height", "darkness", "fire", "water", "nature",
    "building", "electricity", "explosions", "food", "animals", "temperature",
    "weapons",
)
