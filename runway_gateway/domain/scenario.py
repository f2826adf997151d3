"""What-if comparison of a hypothetical spend against the current runway"""

from dataclasses import replace
from datetime import datetime
from typing import Iterable, Optional

import numpy as np

from runway_gateway.domain.forecast import DANGER_DAYS, SIMULATION_RUNS, forecast
from runway_gateway.domain.models import (
    HORIZON_DAYS,
    ForecastResult,
    ForecastStatus,
    HypotheticalSpend,
    RiskLevel,
    ScenarioAnalysis,
    ScenarioDelta,
    ScenarioResult,
    ScenarioState,
)
from runway_gateway.utils.money_utils import safe_number

LARGE_IMPACT_DAYS = 30

RISK_COLORS = {
    RiskLevel.CRITICAL: "negative",
    RiskLevel.HIGH: "negative",
    RiskLevel.MEDIUM: "caution",
    RiskLevel.LOW: "positive",
}


def snapshot_state(state: ScenarioState) -> ScenarioState:
    """Detached copy of the caller's state; entries are frozen, so the tuples are enough"""
    return replace(
        state,
        transactions=tuple(state.transactions),
        obligations=tuple(state.obligations),
    )


def analyze_impact(baseline: ForecastResult, simulated: ForecastResult, days_lost: int) -> ScenarioAnalysis:
    """
    Turn the forecast delta into advice.

    Rules (first match wins):
    - Simulated balance under the buffer: not viable
    - Runway drops under 30 days from 30 or more: entering the danger zone
    - More than 30 days lost: large impact
    - Any days lost: minor impact
    """
    if simulated.status == ForecastStatus.CRITICAL_BELOW_BUFFER:
        advice, level = "Transaction not viable. Buffer breached.", RiskLevel.CRITICAL
    elif simulated.clamped_runway < DANGER_DAYS <= baseline.clamped_runway:
        advice, level = f"Pushing into Danger Zone (<{DANGER_DAYS} days).", RiskLevel.HIGH
    elif days_lost > LARGE_IMPACT_DAYS:
        advice, level = f"Large impact: -{days_lost} days runway.", RiskLevel.MEDIUM
    elif days_lost > 0:
        advice, level = f"Minor impact: -{days_lost} days runway.", RiskLevel.LOW
    else:
        advice, level = "No significant impact.", RiskLevel.LOW

    return ScenarioAnalysis(advice=advice, risk_level=level, risk_color=RISK_COLORS[level])


def simulate_scenario(
    state: ScenarioState,
    hypothetical_spends: Iterable[HypotheticalSpend],
    now: datetime,
    rng: Optional[np.random.Generator] = None,
    runs: int = SIMULATION_RUNS,
    horizon_days: int = HORIZON_DAYS,
) -> ScenarioResult:
    """
    Forecast the current state and the state after the hypothetical spends.

    History and obligations are shared by both runs; only the balance moves.
    A runway gain is reported as zero days lost.
    """
    snapshot = snapshot_state(state)
    if rng is None:
        rng = np.random.default_rng()

    def run(balance: float) -> ForecastResult:
        return forecast(
            balance,
            snapshot.transactions,
            snapshot.buffer,
            now,
            snapshot.obligations,
            rng=rng,
            runs=runs,
            horizon_days=horizon_days,
        )

    baseline = run(snapshot.balance)

    total_cost = sum((safe_number(spend.amount) for spend in hypothetical_spends), 0.0)
    simulated = run(safe_number(snapshot.balance) - total_cost)

    days_lost = max(0, baseline.clamped_runway - simulated.clamped_runway)

    return ScenarioResult(
        baseline=baseline,
        simulated=simulated,
        delta=ScenarioDelta(cost=total_cost, days_lost=days_lost),
        analysis=analyze_impact(baseline, simulated, days_lost),
    )
