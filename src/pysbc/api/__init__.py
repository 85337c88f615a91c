"""REST API for the pysbc solver."""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request

from pysbc.api.schemas import (
    CatalogResponse,
    FormationResponse,
    MarketSuggestionsResponse,
    PresetResponse,
    SolveResponse,
)
from pysbc.config import get_reference, iter_formations, iter_presets
from pysbc.models import SolveFailure
from pysbc.solver import market_suggestions, quick_solve, solve


logger = logging.getLogger(__name__)


async def _read_requirements(request: Request) -> Any:
    body = await request.body()
    if not body.strip():
        return None
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid requirements JSON: {exc}") from exc


def create_app() -> FastAPI:
    app = FastAPI(title="pysbc solver")
    reference = get_reference()
    app.state.reference = reference

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/presets", response_model=CatalogResponse)
    async def presets() -> CatalogResponse:
        return CatalogResponse(
            presets=[
                PresetResponse(name=name, requirements=requirements)
                for name, requirements in iter_presets()
            ],
            formations=[
                FormationResponse(
                    name=template.name,
                    positions=[position.value for position in template.positions],
                    chemistry_bonus=template.chemistry_bonus,
                )
                for template in iter_formations()
            ],
        )

    @app.post("/solve", response_model=SolveResponse)
    async def solve_requirements(request: Request) -> SolveResponse:
        requirements = await _read_requirements(request)
        return solve(requirements, reference=reference)

    @app.post("/presets/{preset_name}/solve", response_model=SolveResponse)
    async def solve_preset(preset_name: str) -> SolveResponse:
        return quick_solve(preset_name, reference=reference)

    @app.post("/market-suggestions", response_model=MarketSuggestionsResponse)
    async def suggestions(request: Request) -> MarketSuggestionsResponse:
        requirements = await _read_requirements(request)
        result = solve(requirements, reference=reference)
        if isinstance(result, SolveFailure):
            return MarketSuggestionsResponse(success=False, error=result.error)
        logger.info("Generated market suggestions for %s players", len(result.players))
        return MarketSuggestionsResponse(success=True, suggestions=market_suggestions(result))

    return app


__all__ = ["create_app"]
