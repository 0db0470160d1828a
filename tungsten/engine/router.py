"""Engine HTTP router — profile/answer edits and derived reads for the UI."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from tungsten.db import get_session
from tungsten.engine.domains import list_domains
from tungsten.engine.models import (
    ContentSelection,
    DerivedMetrics,
    FieldEdit,
    Guidance,
    Profile,
    VO2Entry,
)
from tungsten.engine.session import ProfileSession, UnknownFieldError

router = APIRouter(prefix="/engine", tags=["engine"])


def _parse_day(value: str) -> str:
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Invalid date for 'day': {value}")


# ---------------------------------------------------------------------------
# /engine/domains
# ---------------------------------------------------------------------------


@router.get("/domains")
def domains_list() -> list[dict]:
    return [{"key": d.key, "label": d.label, "part": d.part} for d in list_domains()]


# ---------------------------------------------------------------------------
# /engine/profile, /engine/answers
# ---------------------------------------------------------------------------


@router.get("/profile", response_model=Profile)
def get_profile(
    session: ProfileSession = Depends(get_session),
) -> Profile:
    return session.profile


@router.put("/profile/{field}", response_model=DerivedMetrics)
def edit_profile(
    field: str,
    edit: FieldEdit,
    session: ProfileSession = Depends(get_session),
) -> DerivedMetrics:
    try:
        return session.update_profile_field(field, edit.value)
    except UnknownFieldError:
        raise HTTPException(status_code=404, detail=f"Unknown profile field: {field}")
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=f"Invalid value for '{field}': {exc.errors()[0]['msg']}")


@router.get("/answers")
def get_answers(
    session: ProfileSession = Depends(get_session),
) -> dict[str, int]:
    return session.answers


@router.put("/answers/{domain}", response_model=DerivedMetrics)
def edit_answer(
    domain: str,
    edit: FieldEdit,
    session: ProfileSession = Depends(get_session),
) -> DerivedMetrics:
    try:
        return session.update_answer(domain, edit.value)
    except UnknownFieldError:
        raise HTTPException(status_code=404, detail=f"Unknown domain: {domain}")


# ---------------------------------------------------------------------------
# Derived reads
# ---------------------------------------------------------------------------


@router.get("/metrics", response_model=DerivedMetrics)
def get_metrics(
    session: ProfileSession = Depends(get_session),
) -> DerivedMetrics:
    return session.metrics()


@router.get("/content", response_model=ContentSelection)
def get_content(
    session: ProfileSession = Depends(get_session),
    day: str | None = Query(default=None, description="Calendar day (YYYY-MM-DD), default today"),
) -> ContentSelection:
    return session.content(_parse_day(day) if day else None)


@router.get("/guidance", response_model=Guidance)
def get_guidance(
    session: ProfileSession = Depends(get_session),
) -> Guidance:
    return session.guidance()


@router.get("/vo2/series", response_model=list[VO2Entry])
def get_vo2_series(
    session: ProfileSession = Depends(get_session),
) -> list[VO2Entry]:
    return session.vo2_series()
