"""Pydantic schemas for API request/response validation"""

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

# Epoch-millisecond bounds: 0001-01-02 to 9000-01-01 UTC, leaving room for zone offsets
# and the forecast horizon inside datetime's range
MIN_EPOCH_MILLIS = -62_135_510_400_000
MAX_EPOCH_MILLIS = 221_845_392_000_000


class TransactionSchema(BaseModel):
    """Ledger entry as exchanged by the sync endpoint"""

    id: str = Field(..., min_length=1)
    type: Literal["expense", "income"]
    amount: float = Field(..., ge=0, allow_inf_nan=False)
    note: str = ""
    timestamp: int = Field(..., ge=MIN_EPOCH_MILLIS, le=MAX_EPOCH_MILLIS, description="Milliseconds since epoch")


class PlannedPaymentSchema(BaseModel):
    """Upcoming obligation as exchanged by the sync endpoint"""

    id: str = Field(..., min_length=1)
    title: str = ""
    amount: float = Field(..., gt=0, allow_inf_nan=False)
    due_date: date = Field(..., alias="date")


class LedgerSnapshot(BaseModel):
    """Account state a forecast is computed from"""

    balance: Optional[float] = 0.0
    buffer: Optional[float] = 0.0
    transactions: List[TransactionSchema] = []
    planned: List[PlannedPaymentSchema] = []
    now: Optional[int] = Field(
        None,
        ge=MIN_EPOCH_MILLIS,
        le=MAX_EPOCH_MILLIS,
        description="Evaluation instant in ms since epoch, defaults to server time",
    )
    timezone: Optional[str] = Field(None, description="IANA zone used to bucket days")


class ForecastRequest(LedgerSnapshot):
    """Request body for POST /v1/forecast"""


class SpendSchema(BaseModel):
    amount: float


class ScenarioRequest(LedgerSnapshot):
    """Request body for POST /v1/scenario"""

    spends: List[SpendSchema] = []


class RunwayRangeSchema(BaseModel):
    min: int
    max: int


class ForecastResponse(BaseModel):
    """Response for POST /v1/forecast"""

    burn_rate: float
    runway_days: int
    runway_unbounded: bool
    runway_range: RunwayRangeSchema
    status: str
    risk_score: int
    zero_date: Optional[datetime] = None


class DeltaSchema(BaseModel):
    cost: float
    days_lost: int


class AnalysisSchema(BaseModel):
    advice: str
    risk_level: str
    risk_color: str


class ScenarioResponse(BaseModel):
    """Response for POST /v1/scenario"""

    baseline: ForecastResponse
    simulated: ForecastResponse
    delta: DeltaSchema
    analysis: AnalysisSchema
