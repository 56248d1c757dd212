"""FastAPI application entrypoint for assetaudit service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, FastAPI
from pydantic import BaseModel

from .. import __version__
from ..models import RunOutcome
from ..orchestrator import Orchestrator
from ..report import build_report


class ReportRequest(BaseModel):
    path: str


class ReportResponse(BaseModel):
    status: str
    message: str
    report_path: Optional[str] = None
    report: Optional[Dict[str, Any]] = None


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing report generation."""
    app = FastAPI(title="assetaudit", version=__version__)

    async def get_orchestrator() -> Orchestrator:
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/report", response_model=ReportResponse)
    async def report(
        payload: ReportRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> ReportResponse:
        def _run() -> RunOutcome:
            return orchestrator.run_report(payload.path)

        loop = asyncio.get_running_loop()
        outcome = await loop.run_in_executor(None, _run)

        if outcome.report_path is None or outcome.result is None:
            return ReportResponse(status=outcome.status.value, message=outcome.message)
        return ReportResponse(
            status=outcome.status.value,
            message=outcome.message,
            report_path=str(outcome.report_path),
            report=build_report(outcome.result),
        )

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
