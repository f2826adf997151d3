"""Bootstrap Monte Carlo runway forecast - core business logic"""

import math
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Sequence

import numpy as np

from runway_gateway.domain.models import (
    HORIZON_DAYS,
    ForecastResult,
    ForecastStatus,
    Obligation,
    Runway,
    RunwayRange,
    Transaction,
)
from runway_gateway.domain.sampling import (
    build_sampling_vector,
    calculate_burn_rate,
    extract_daily_vector,
)
from runway_gateway.utils.date_utils import due_instant
from runway_gateway.utils.money_utils import safe_number

SIMULATION_RUNS = 2000
JITTER_LOW = 0.9
JITTER_HIGH = 1.1

DANGER_DAYS = 30
WARNING_DAYS = 90

ONE_DAY = timedelta(days=1)


def pending_obligations(obligations: Iterable[Obligation], now: datetime) -> List[Obligation]:
    """Obligations due strictly after now, earliest first"""
    upcoming = [o for o in obligations if due_instant(o.due_date, now) > now]
    return sorted(upcoming, key=lambda o: o.due_date)


def build_obligation_schedule(
    obligations: Sequence[Obligation],
    now: datetime,
    horizon_days: int = HORIZON_DAYS,
) -> np.ndarray:
    """
    Total obligation amount charged at the end of each simulated day.

    Entry i is what a trial pays after stepping to now + (i + 1) days: every
    obligation whose due instant falls in (now + i days, now + (i + 1) days].
    All trials share the calendar, so walking a per-trial pointer through the
    sorted list charges exactly these amounts on exactly these days.
    Obligations due past the horizon are never reached.
    """
    schedule = np.zeros(horizon_days, dtype=float)
    for obligation in obligations:
        step = math.ceil((due_instant(obligation.due_date, now) - now) / ONE_DAY)
        if 1 <= step <= horizon_days:
            schedule[step - 1] += obligation.amount
    return schedule


def run_survival_trials(
    sampling_vector: Sequence[float],
    starting_balance: float,
    obligation_schedule: np.ndarray,
    rng: np.random.Generator,
    runs: int = SIMULATION_RUNS,
    horizon_days: int = HORIZON_DAYS,
) -> np.ndarray:
    """
    Simulate day-by-day depletion for `runs` independent trials.

    Each day, every trial still above zero draws one historical day with
    replacement, scales it by a jitter factor in [0.9, 1.1), pays it, then
    pays that day's obligations. A trial stops once its balance is <= 0 or
    the horizon is reached.

    Returns the number of days each trial survived.
    """
    samples = np.asarray(sampling_vector, dtype=float)
    balances = np.full(runs, starting_balance, dtype=float)
    survived = np.zeros(runs, dtype=int)

    for day in range(horizon_days):
        alive = balances > 0
        active = int(np.count_nonzero(alive))
        if active == 0:
            break

        draws = samples[rng.integers(0, samples.size, size=active)]
        jitter = rng.uniform(JITTER_LOW, JITTER_HIGH, size=active)

        balances[alive] -= draws * jitter + obligation_schedule[day]
        survived[alive] += 1

    return survived


def percentile(sorted_outcomes: Sequence[int], p: float) -> int:
    """Outcome at sorted index floor(n * p); 0 for an empty distribution"""
    if len(sorted_outcomes) == 0:
        return 0
    index = min(int(math.floor(len(sorted_outcomes) * p)), len(sorted_outcomes) - 1)
    return int(sorted_outcomes[index])


def calculate_risk_score(runway_days: int) -> int:
    """
    Map median runway to a 0-100 risk score.

    - Under 30 days: 100
    - Over 90 days: 0
    - In between: linear, 30 days = 100, 90 days = 0
    """
    if runway_days < DANGER_DAYS:
        return 100
    if runway_days > WARNING_DAYS:
        return 0
    return int(round((WARNING_DAYS - runway_days) / (WARNING_DAYS - DANGER_DAYS) * 100))


def classify_status(
    balance: float,
    buffer: float,
    runway_days: int,
    horizon_days: int = HORIZON_DAYS,
) -> ForecastStatus:
    """First matching rule wins; a breached buffer overrides the simulation"""
    if balance < buffer:
        return ForecastStatus.CRITICAL_BELOW_BUFFER
    if runway_days < DANGER_DAYS:
        return ForecastStatus.DANGER
    if runway_days < WARNING_DAYS:
        return ForecastStatus.WARNING
    if runway_days >= horizon_days:
        return ForecastStatus.SUSTAINABLE
    return ForecastStatus.HEALTHY


def forecast(
    current_balance: float,
    transactions: Iterable[Transaction],
    buffer_amount: float,
    now: datetime,
    obligations: Iterable[Obligation] = (),
    rng: Optional[np.random.Generator] = None,
    runs: int = SIMULATION_RUNS,
    horizon_days: int = HORIZON_DAYS,
) -> ForecastResult:
    """
    Main entry point: estimate runway from history and upcoming obligations.

    The buffer is taken off the starting balance once, as a safety margin; it
    is not a floor during the walk. Non-numeric balance or buffer count as 0.
    """
    balance = safe_number(current_balance)
    buffer = safe_number(buffer_amount)
    if rng is None:
        rng = np.random.default_rng()

    daily_vector = extract_daily_vector(transactions, now)
    burn_rate = calculate_burn_rate(daily_vector)
    sampling_vector = build_sampling_vector(daily_vector)

    schedule = build_obligation_schedule(pending_obligations(obligations, now), now, horizon_days)
    outcomes = np.sort(
        run_survival_trials(sampling_vector, balance - buffer, schedule, rng, runs, horizon_days)
    )

    median = percentile(outcomes, 0.5)
    runway = Runway.from_survival(median, horizon_days)

    return ForecastResult(
        burn_rate=burn_rate,
        runway_days=runway,
        runway_range=RunwayRange(
            low=Runway.from_survival(percentile(outcomes, 0.1), horizon_days),
            high=Runway.from_survival(percentile(outcomes, 0.9), horizon_days),
        ),
        status=classify_status(balance, buffer, median, horizon_days),
        risk_score=calculate_risk_score(median),
        zero_date=None if runway.unbounded else now + timedelta(days=median),
        horizon_days=horizon_days,
    )
