"""Translation between sync-payload schemas and domain values"""

from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import HTTPException

from runway_gateway.api.v1.schemas import (
    ForecastResponse,
    LedgerSnapshot,
    RunwayRangeSchema,
)
from runway_gateway.config import settings
from runway_gateway.domain.models import (
    ForecastResult,
    Obligation,
    ScenarioState,
    Transaction,
    TransactionKind,
)
from runway_gateway.utils.date_utils import from_epoch_millis
from runway_gateway.utils.money_utils import round_money


def resolve_now(snapshot: LedgerSnapshot) -> datetime:
    """
    Evaluation instant of a request, in the request's calendar zone.

    Raises:
        HTTPException: 422 when the timezone name is unknown or the instant is out of range
    """
    zone_name = snapshot.timezone or settings.default_timezone
    try:
        zone = ZoneInfo(zone_name)
    except (ZoneInfoNotFoundError, ValueError):
        raise HTTPException(status_code=422, detail=f"Unknown timezone: {zone_name}")

    if snapshot.now is None:
        return datetime.now(zone)
    try:
        return from_epoch_millis(snapshot.now, zone)
    except (OverflowError, OSError, ValueError):
        raise HTTPException(status_code=422, detail=f"Evaluation instant out of range: {snapshot.now}")


def to_scenario_state(snapshot: LedgerSnapshot, now: datetime) -> ScenarioState:
    """Build the frozen domain state; timestamps are read in now's zone"""
    return ScenarioState(
        balance=snapshot.balance,
        buffer=snapshot.buffer,
        transactions=tuple(
            Transaction(
                transaction_id=txn.id,
                kind=TransactionKind(txn.type),
                amount=txn.amount,
                note=txn.note,
                timestamp=from_epoch_millis(txn.timestamp, now.tzinfo),
            )
            for txn in snapshot.transactions
        ),
        obligations=tuple(
            Obligation(
                obligation_id=plan.id,
                title=plan.title,
                amount=plan.amount,
                due_date=plan.due_date,
            )
            for plan in snapshot.planned
        ),
    )


def to_forecast_response(result: ForecastResult) -> ForecastResponse:
    """Presentation boundary: unbounded runways are clamped to the horizon here"""
    horizon = result.horizon_days
    return ForecastResponse(
        burn_rate=round_money(result.burn_rate),
        runway_days=result.clamped_runway,
        runway_unbounded=result.runway_days.unbounded,
        runway_range=RunwayRangeSchema(
            min=result.runway_range.low.clamp(horizon),
            max=result.runway_range.high.clamp(horizon),
        ),
        status=result.status.value,
        risk_score=result.risk_score,
        zero_date=result.zero_date,
    )
