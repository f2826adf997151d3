"""POST /v1/scenario - what-if impact of a hypothetical spend"""

import logging
import time

import numpy as np
from fastapi import APIRouter, Depends, HTTPException, Request

from runway_gateway.api.dependencies import get_request_id, get_rng
from runway_gateway.api.v1.convert import resolve_now, to_forecast_response, to_scenario_state
from runway_gateway.api.v1.schemas import AnalysisSchema, DeltaSchema, ScenarioRequest, ScenarioResponse
from runway_gateway.config import settings
from runway_gateway.domain.models import HypotheticalSpend
from runway_gateway.domain.scenario import simulate_scenario
from runway_gateway.infrastructure.observability.logging import log_scenario
from runway_gateway.infrastructure.observability.metrics import record_scenario
from runway_gateway.utils.money_utils import round_money

router = APIRouter()


@router.post("/scenario", response_model=ScenarioResponse)
def create_scenario(
    request_body: ScenarioRequest,
    request: Request,
    rng: np.random.Generator = Depends(get_rng),
):
    """
    Compare the current runway with the runway after the given spends.

    Nothing is written to the ledger; the spends only exist for this request.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        now = resolve_now(request_body)
        result = simulate_scenario(
            to_scenario_state(request_body, now),
            [HypotheticalSpend(amount=spend.amount) for spend in request_body.spends],
            now,
            rng=rng,
            runs=settings.simulation_runs,
            horizon_days=settings.horizon_days,
        )

        duration_ms = (time.time() - start_time) * 1000
        risk_level = result.analysis.risk_level.value
        record_scenario(risk_level)
        log_scenario(request_id, result.delta.cost, result.delta.days_lost, risk_level, duration_ms)

        return ScenarioResponse(
            baseline=to_forecast_response(result.baseline),
            simulated=to_forecast_response(result.simulated),
            delta=DeltaSchema(cost=round_money(result.delta.cost), days_lost=result.delta.days_lost),
            analysis=AnalysisSchema(
                advice=result.analysis.advice,
                risk_level=risk_level,
                risk_color=result.analysis.risk_color,
            ),
        )

    except HTTPException as e:
        logging.warning(f"Rejected request: {e.detail}", extra={"request_id": request_id})
        raise

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
