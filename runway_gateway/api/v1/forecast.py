"""POST /v1/forecast - runway forecast endpoint"""

import logging
import time

import numpy as np
from fastapi import APIRouter, Depends, HTTPException, Request

from runway_gateway.api.dependencies import get_request_id, get_rng
from runway_gateway.api.v1.convert import resolve_now, to_forecast_response, to_scenario_state
from runway_gateway.api.v1.schemas import ForecastRequest, ForecastResponse
from runway_gateway.config import settings
from runway_gateway.domain.forecast import forecast
from runway_gateway.infrastructure.observability.logging import log_forecast
from runway_gateway.infrastructure.observability.metrics import forecast_duration_histogram, record_forecast

router = APIRouter()


@router.post("/forecast", response_model=ForecastResponse)
def create_forecast(
    request_body: ForecastRequest,
    request: Request,
    rng: np.random.Generator = Depends(get_rng),
):
    """
    Estimate runway for a ledger snapshot.

    Flow:
    1. Resolve the evaluation instant and calendar zone
    2. Convert the snapshot into domain values
    3. Run the bootstrap forecast
    4. Record metrics and logs, return the clamped presentation
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        now = resolve_now(request_body)
        state = to_scenario_state(request_body, now)

        with forecast_duration_histogram.time():
            result = forecast(
                state.balance,
                state.transactions,
                state.buffer,
                now,
                state.obligations,
                rng=rng,
                runs=settings.simulation_runs,
                horizon_days=settings.horizon_days,
            )

        response = to_forecast_response(result)

        duration_ms = (time.time() - start_time) * 1000
        record_forecast(response.status, response.runway_days)
        log_forecast(request_id, response.status, response.runway_days, response.risk_score, duration_ms)

        return response

    except HTTPException as e:
        logging.warning(f"Rejected request: {e.detail}", extra={"request_id": request_id})
        raise

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
