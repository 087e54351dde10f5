"""POST /api/interpolate — sample frames between two paths."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from pathmorph.config import Settings
from pathmorph.dependencies import get_settings
from pathmorph.engine.interpolator import interpolate_path
from pathmorph.errors import PathError
from pathmorph.models.requests import InterpolateRequest
from pathmorph.models.responses import Frame, InterpolateResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _sample_count(req: InterpolateRequest, settings: Settings) -> int:
    if req.t is not None:
        return len(req.t)
    return req.frames or settings.default_frames


def _sample_points(req: InterpolateRequest, settings: Settings) -> list[float]:
    if req.t is not None:
        return list(req.t)
    count = _sample_count(req, settings)
    return [i / (count - 1) for i in range(count)]


@router.post("/interpolate", response_model=InterpolateResponse)
async def interpolate(
    req: InterpolateRequest,
    settings: Settings = Depends(get_settings),
) -> InterpolateResponse:
    # Checked before any t values are materialised.
    count = _sample_count(req, settings)
    if count > settings.max_frames:
        logger.warning("Rejected request for %d frames (max %d)", count, settings.max_frames)
        raise HTTPException(
            status_code=422,
            detail=f"Too many samples: {count} > {settings.max_frames}",
        )

    ts = _sample_points(req, settings)

    try:
        interpolator = interpolate_path(req.a, req.b)
    except PathError as e:
        logger.warning("Rejected path: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    logger.info("Interpolated %d frames", len(ts))
    return InterpolateResponse(
        start=interpolator.start,
        end=interpolator.end,
        frames=[Frame(t=t, d=interpolator(t)) for t in ts],
    )
