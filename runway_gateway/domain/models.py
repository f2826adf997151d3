"""Domain models - pure Python dataclasses representing forecast inputs and outputs"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional, Tuple

HORIZON_DAYS = 730  # Trials surviving this long are treated as unbounded


class TransactionKind(str, Enum):
    EXPENSE = "expense"
    INCOME = "income"


class ForecastStatus(str, Enum):
    CRITICAL_BELOW_BUFFER = "CRITICAL_BELOW_BUFFER"
    DANGER = "DANGER"
    WARNING = "WARNING"
    HEALTHY = "HEALTHY"
    SUSTAINABLE = "SUSTAINABLE"


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


@dataclass(frozen=True)
class Transaction:
    """Historical ledger entry"""

    transaction_id: str
    kind: TransactionKind
    amount: float
    note: str
    timestamp: datetime


@dataclass(frozen=True)
class Obligation:
    """Scheduled future payment not yet in the ledger"""

    obligation_id: str
    title: str
    amount: float
    due_date: date


@dataclass(frozen=True)
class Runway:
    """
    Survival horizon of a forecast.

    days is None when the balance outlived the simulation horizon. Callers that
    need a number (display, deltas) go through clamp().
    """

    days: Optional[int] = None

    @classmethod
    def from_survival(cls, days: int, horizon_days: int = HORIZON_DAYS) -> "Runway":
        return cls(None if days >= horizon_days else days)

    @property
    def unbounded(self) -> bool:
        return self.days is None

    def clamp(self, horizon_days: int = HORIZON_DAYS) -> int:
        return horizon_days if self.days is None else min(self.days, horizon_days)


@dataclass(frozen=True)
class RunwayRange:
    """10th to 90th percentile of simulated survival days"""

    low: Runway
    high: Runway


@dataclass(frozen=True)
class ForecastResult:
    """Output of a bootstrap runway forecast"""

    burn_rate: float
    runway_days: Runway
    runway_range: RunwayRange
    status: ForecastStatus
    risk_score: int
    zero_date: Optional[datetime]
    horizon_days: int = HORIZON_DAYS

    @property
    def clamped_runway(self) -> int:
        return self.runway_days.clamp(self.horizon_days)


@dataclass(frozen=True)
class HypotheticalSpend:
    """Spend being considered but not yet committed to the ledger"""

    amount: float


@dataclass(frozen=True)
class ScenarioState:
    """Account snapshot a scenario is evaluated against"""

    balance: float
    buffer: float
    transactions: Tuple[Transaction, ...] = ()
    obligations: Tuple[Obligation, ...] = ()


@dataclass(frozen=True)
class ScenarioDelta:
    cost: float
    days_lost: int


@dataclass(frozen=True)
class ScenarioAnalysis:
    advice: str
    risk_level: RiskLevel
    risk_color: str


@dataclass(frozen=True)
class ScenarioResult:
    """Baseline vs. simulated forecast for a what-if spend"""

    baseline: ForecastResult
    simulated: ForecastResult
    delta: ScenarioDelta
    analysis: ScenarioAnalysis
