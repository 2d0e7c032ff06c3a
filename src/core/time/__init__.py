"""
Core time modules для chronostore

Календарная арифметика мгновений и выровненные периоды.
"""

# Calendar
from src.core.time.calendar import (
    DEFAULT_CALENDAR,
    FLOOR_FRAMES,
    ArrowCalendar,
    CalendarBackend,
)

# Temporal Arithmetic
from src.core.time.arithmetic import (
    FIXED_DURATIONS,
    SEMESTER_MONTHS,
    TRIMESTER_MONTHS,
    YEARS_PER_UNIT,
    days_posterior,
    days_prior,
    fixed_duration,
    hours_posterior,
    hours_prior,
    minutes_posterior,
    minutes_prior,
    months_posterior,
    months_prior,
    posterior_instant,
    prior_instant,
    seconds_posterior,
    seconds_prior,
    semesters_posterior,
    semesters_prior,
    shift_instant,
    trimesters_posterior,
    trimesters_prior,
    validate_amount,
    weeks_posterior,
    weeks_prior,
    years_posterior,
    years_prior,
)

# Period Boundary Engine
from src.core.time.periods import (
    ALIGNED_UNITS,
    MONTH_SPANS,
    decade_of,
    last_period,
    next_period,
    past_period,
)

# Clock / Engine facade
from src.core.time.clock import Clock, FixedClock, SystemClock
from src.core.time.engine import TemporalEngine

__all__ = [
    # Calendar
    "DEFAULT_CALENDAR",
    "FLOOR_FRAMES",
    "ArrowCalendar",
    "CalendarBackend",
    # Temporal Arithmetic: Constants
    "FIXED_DURATIONS",
    "SEMESTER_MONTHS",
    "TRIMESTER_MONTHS",
    "YEARS_PER_UNIT",
    # Temporal Arithmetic: Functions
    "fixed_duration",
    "posterior_instant",
    "prior_instant",
    "shift_instant",
    "validate_amount",
    # Temporal Arithmetic: Named shifts
    "seconds_prior",
    "minutes_prior",
    "hours_prior",
    "days_prior",
    "weeks_prior",
    "months_prior",
    "trimesters_prior",
    "semesters_prior",
    "years_prior",
    "seconds_posterior",
    "minutes_posterior",
    "hours_posterior",
    "days_posterior",
    "weeks_posterior",
    "months_posterior",
    "trimesters_posterior",
    "semesters_posterior",
    "years_posterior",
    # Period Boundary Engine
    "ALIGNED_UNITS",
    "MONTH_SPANS",
    "decade_of",
    "last_period",
    "next_period",
    "past_period",
    # Clock / Engine
    "Clock",
    "FixedClock",
    "SystemClock",
    "TemporalEngine",
]
