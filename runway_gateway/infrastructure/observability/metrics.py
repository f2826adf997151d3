"""Prometheus metrics for forecast outcomes, scenario verdicts and request latency"""

from prometheus_client import Counter, Histogram

# Forecast metrics
forecast_counter = Counter(
    "runway_forecast_total",
    "Total runway forecasts computed",
    ["status"],  # CRITICAL_BELOW_BUFFER | DANGER | WARNING | HEALTHY | SUSTAINABLE
)

runway_days_histogram = Histogram(
    "runway_forecast_days",
    "Median runway of computed forecasts, clamped to the horizon",
    buckets=[7, 30, 60, 90, 180, 365, 730],
)

forecast_duration_histogram = Histogram(
    "runway_forecast_duration_seconds",
    "Wall-clock time of a single Monte Carlo forecast",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)

# Scenario metrics
scenario_counter = Counter(
    "runway_scenario_total",
    "What-if scenarios evaluated",
    ["risk_level"],  # Low | Medium | High | Critical
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_forecast(status: str, runway_days: int) -> None:
    """Record one computed forecast"""
    forecast_counter.labels(status=status).inc()
    runway_days_histogram.observe(runway_days)


def record_scenario(risk_level: str) -> None:
    """Record one evaluated scenario"""
    scenario_counter.labels(risk_level=risk_level).inc()
