from __future__ import annotations
from datetime import date, datetime

from liftlog.program.types import CYCLE_LENGTH

def _as_date(value: date | datetime) -> date:
    # time of day and offset are dropped; only the calendar day counts
    return value.date() if isinstance(value, datetime) else value

def cycle_day_for(target: date | datetime, program_start: date | datetime) -> int:
    """Position (1..9) of ``target`` in the repeating cycle anchored at ``program_start``.

    Dates before the program start clamp to day 1. Rest days taken or skipped
    never shift the cycle; only elapsed calendar days count.
    """
    elapsed = (_as_date(target) - _as_date(program_start)).days
    if elapsed < 0:
        return 1
    return elapsed % CYCLE_LENGTH + 1

def resolve_cycle_day(computed: int, override: int | None = None) -> int:
    """A manual override, when set, wins over the computed day."""
    if override is None:
        return computed
    if not 1 <= override <= CYCLE_LENGTH:
        raise ValueError(f"cycle day override must be within 1..{CYCLE_LENGTH}, got {override}")
    return override
