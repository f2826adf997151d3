"""Dependency injection for FastAPI endpoints"""

import numpy as np
from fastapi import Request

from runway_gateway.config import settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_rng() -> np.random.Generator:
    """Random source for one request; seeded only when configured"""
    return np.random.default_rng(settings.random_seed)
