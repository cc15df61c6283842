"""Screen submission endpoint."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError

from greenroom.api.deps import get_cache, get_gateway, get_settings
from greenroom.core.config import AppSettings
from greenroom.core.exceptions import SubmissionError, UnknownFieldError, UnknownScreenError
from greenroom.core.protocols import ICacheBackend, ISubmissionGateway
from greenroom.screens.base import SaveOutcome
from greenroom.screens.router import create_screen

router = APIRouter(tags=["screens"])


@router.post("/{screen_id}/submit", response_model=SaveOutcome)
async def submit_screen(
    screen_id: str,
    values: dict[str, Any] = Body(default_factory=dict),
    settings: AppSettings = Depends(get_settings),
    gateway: ISubmissionGateway = Depends(get_gateway),
    cache: ICacheBackend = Depends(get_cache),
) -> SaveOutcome:
    """Fill a screen's form with ``values`` and press submit.

    Field errors come back as 422 with the error map; gateway failures as 502.
    """
    try:
        screen = create_screen(screen_id, settings=settings, gateway=gateway, cache=cache)
    except UnknownScreenError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    try:
        screen.form.set_fields(**values)
    except UnknownFieldError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(
            status_code=422, detail=exc.errors(include_url=False, include_context=False),
        ) from exc

    try:
        outcome = await screen.submit()
    except SubmissionError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    if not outcome.saved:
        raise HTTPException(
            status_code=422, detail={"screen": outcome.screen, "errors": outcome.errors},
        )
    return outcome
