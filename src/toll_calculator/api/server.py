"""FastAPI server — HTTP access to the toll calculator.

Run with:
    uvicorn toll_calculator.api.server:app --reload --port 8000

Or:
    python -m toll_calculator.api.server

Endpoints:
    GET  /                  — name, version and pointers
    GET  /health            — liveness probe
    GET  /schedule          — active fee schedule
    GET  /config/defaults   — complete default configuration as JSON
    POST /toll-fee          — price one vehicle's passages for one day
    POST /toll-fee/passage  — price a single passage and show why
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from toll_calculator.config.calculator import DEFAULT_CONFIG, TollCalculatorConfig
from toll_calculator.config.fee_schedule import FeeScheduleEntry
from toll_calculator.config.vehicle import VehicleCategory
from toll_calculator.engine.calculator import TollCalculator
from toll_calculator.errors import InvalidInputError
from toll_calculator.models.results import DailyTollResult

logger = logging.getLogger(__name__)

API_VERSION = "1.0"


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Toll Calculator API",
    version=API_VERSION,
    description=(
        "Daily congestion-toll pricing. Send a vehicle category and the "
        "timestamps at which it passed toll stations on one day; receive the "
        "capped daily fee and, optionally, a per-passage breakdown."
    ),
)


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class TollFeeRequest(BaseModel):
    """Request body for /toll-fee."""
    vehicle: VehicleCategory | None = Field(
        default=None,
        description="Vehicle category. Missing = charged like an ordinary car.",
    )
    passages: list[datetime] = Field(
        default_factory=list,
        description="ISO-8601 timestamps of every passage on one calendar day. "
                    "Example: ['2013-02-04T08:00:00', '2013-02-04T08:05:00']",
    )
    include_breakdown: bool = Field(default=False, description="Return per-passage fees")
    config: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial TollCalculatorConfig merged onto the defaults. "
                    "Example: {'daily_cap': 90, 'window_anchor': 'rolling'}",
    )


class TollFeeResponse(BaseModel):
    """Response from /toll-fee."""
    fee: int
    breakdown: DailyTollResult | None = None


class PassageRequest(BaseModel):
    """Request body for /toll-fee/passage."""
    vehicle: VehicleCategory | None = None
    passage: datetime
    config: dict[str, Any] = Field(default_factory=dict)


class PassageResponse(BaseModel):
    """Response from /toll-fee/passage."""
    fee: int
    base_fee: int
    vehicle_exempt: bool
    date_exempt: bool


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def _build_calculator(overrides: dict[str, Any]) -> TollCalculator:
    """Build a calculator from partial config overrides merged onto defaults."""
    if not overrides:
        return TollCalculator(DEFAULT_CONFIG)
    merged = _deep_merge(DEFAULT_CONFIG.model_dump(), overrides)
    try:
        config = TollCalculatorConfig(**merged)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False, include_input=False),
        ) from exc
    return TollCalculator(config)


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointers."""
    return {
        "name": "Toll Calculator API",
        "version": API_VERSION,
        "start_here": "POST /toll-fee",
        "docs": "GET /docs (interactive Swagger UI)",
        "vehicle_categories": [category.value for category in VehicleCategory],
    }


@app.get("/schedule", response_model=list[FeeScheduleEntry])
def get_schedule():
    """Fee buckets of the default schedule, in lookup order."""
    return list(DEFAULT_CONFIG.schedule.entries)


@app.get("/config/defaults")
def get_config_defaults():
    """Complete default configuration. Use as a starting point for overrides."""
    return DEFAULT_CONFIG.model_dump(mode="json")


@app.post("/toll-fee", response_model=TollFeeResponse)
def calculate_toll_fee(req: TollFeeRequest):
    """Price one vehicle's passages for one day.

    Example request:
    ```json
    {"vehicle": "Car", "passages": ["2013-02-04T08:00:00", "2013-02-04T15:45:00"]}
    ```
    """
    calculator = _build_calculator(req.config)
    result = calculator.calculate(req.vehicle, req.passages)
    logger.info(
        "Priced %d passage(s) for %s on %s: %d",
        len(req.passages), req.vehicle.value if req.vehicle else "unknown vehicle",
        result.day.isoformat(), result.total_fee,
    )
    return TollFeeResponse(
        fee=result.total_fee,
        breakdown=result if req.include_breakdown else None,
    )


@app.post("/toll-fee/passage", response_model=PassageResponse)
def calculate_passage_fee(req: PassageRequest):
    """Fee for a single passage, with the exemption checks that produced it."""
    calculator = _build_calculator(req.config)
    return PassageResponse(
        fee=calculator.passage_fee(req.vehicle, req.passage),
        base_fee=calculator.fee_for_time(req.passage),
        vehicle_exempt=calculator.is_toll_free_vehicle(req.vehicle),
        date_exempt=calculator.is_toll_free_date(req.passage),
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "toll_calculator.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
