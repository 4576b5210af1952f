"""FastAPI application - exposes the recommendation engine and trackers to the UI."""

import logging
from contextlib import asynccontextmanager
from datetime import date, datetime
from typing import Any
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from babymind.calendar_grid import month_weeks
from babymind.config import get_settings
from babymind.errors import BabyNotFound, UnknownDomain
from babymind.models import Baby, Gender, ProgressAggregate, Task, VaccinationDose
from babymind.rules import RuleEngine
from babymind.session import BabySession, SessionRegistry

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Dependency injection - created at startup
_registry: SessionRegistry | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load rule tables (fails fast on bad data) and create the session registry."""
    global _registry
    _registry = SessionRegistry(RuleEngine(), get_settings())
    yield
    _registry = None


app = FastAPI(
    title="BabyMind",
    description="Age-based recommendations, daily tasks and progress tracking for parents",
    version="0.1.0",
    lifespan=lifespan,
)


class BabyCreate(BaseModel):
    name: str = ""
    birth_date: date
    gender: Gender = Gender.MALE
    birth_weight_kg: float | None = Field(default=None, gt=0)
    birth_height_cm: float | None = Field(default=None, gt=0)


def _registry_or_503() -> SessionRegistry:
    if _registry is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return _registry


def _session(baby_id: UUID) -> BabySession:
    return _registry_or_503().get(baby_id)


@app.exception_handler(BabyNotFound)
async def baby_not_found(request: Request, exc: BabyNotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(UnknownDomain)
async def unknown_domain(request: Request, exc: UnknownDomain) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check for load balancers."""
    return {"status": "ok"}


@app.post("/babies", status_code=201)
async def register_baby(body: BabyCreate) -> dict[str, Any]:
    now = datetime.now()
    baby = Baby(**body.model_dump())
    _registry_or_503().open(baby, now)
    return baby.age_summary(now)


@app.get("/babies/{baby_id}/age")
async def baby_age(baby_id: UUID, on: date | None = None) -> dict[str, Any]:
    return _session(baby_id).baby.age_summary(on or date.today())


@app.get("/recommendations/{domain}")
async def recommendation(domain: str, age_months: int = 0) -> dict[str, Any]:
    bundle = _registry_or_503().rule_engine.resolve(domain, age_months)
    return {
        "domain": domain,
        "age_months": age_months,
        "bundle": bundle.model_dump(mode="json"),
    }


@app.post("/babies/{baby_id}/tasks/generate")
async def generate_tasks(baby_id: UUID, on: date | None = None) -> list[Task]:
    return _session(baby_id).tasks.generate_daily_tasks(on or date.today())


@app.get("/babies/{baby_id}/tasks")
async def list_tasks(baby_id: UUID, pending: bool = False) -> list[Task]:
    tasks = _session(baby_id).tasks
    return tasks.pending_tasks() if pending else tasks.all_tasks()


@app.post("/babies/{baby_id}/tasks/{task_id}/complete")
async def complete_task(
    baby_id: UUID,
    task_id: UUID,
    at: datetime | None = None,
) -> ProgressAggregate:
    return _session(baby_id).tasks.complete_task(task_id, at or datetime.now())


@app.post("/babies/{baby_id}/tasks/{task_id}/toggle")
async def toggle_task(
    baby_id: UUID,
    task_id: UUID,
    at: datetime | None = None,
) -> ProgressAggregate:
    return _session(baby_id).tasks.toggle_task(task_id, at or datetime.now())


@app.delete("/babies/{baby_id}/tasks/{task_id}")
async def delete_task(baby_id: UUID, task_id: UUID) -> dict[str, bool]:
    return {"deleted": _session(baby_id).tasks.delete_task(task_id)}


@app.get("/babies/{baby_id}/progress")
async def progress(baby_id: UUID, on: date | None = None) -> ProgressAggregate:
    return _session(baby_id).tasks.progress(on or date.today())


@app.get("/babies/{baby_id}/vaccinations/upcoming")
async def upcoming_vaccinations(baby_id: UUID, on: date | None = None) -> list[VaccinationDose]:
    session = _session(baby_id)
    age_months = session.baby.age_in_months(on or date.today())
    return session.vaccinations.upcoming(age_months, session.settings.upcoming_window)


@app.get("/calendar/{year}/{month}")
async def calendar_month(year: int, month: int) -> dict[str, Any]:
    if not 1 <= month <= 12:
        raise HTTPException(status_code=422, detail="month must be 1-12")
    weeks = month_weeks(year, month)
    return {
        "year": year,
        "month": month,
        "weeks": [[d.isoformat() for d in week] for week in weeks],
    }
