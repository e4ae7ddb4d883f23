"""Module with endpoints of the gibberish detection API."""

import math
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, HTTPException, Request
from loguru import logger

from gibberish.api.data_models import (
    GibberishDetectionRequest,
    GibberishDetectionResponse,
    HealthcheckResponse,
    ModelsResponse,
)
from gibberish.api.rate_limiter import RateLimiter
from gibberish.api.utils import get_ip_address_or_raise
from gibberish.configuration import config
from gibberish.detection.classification import BigramDetector
from gibberish.detection.threshold import is_below_threshold
from gibberish.persistence import get_prebuilt_models

router = APIRouter()
rate_limiter = RateLimiter()


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Build the registry of prebuilt models before the first request."""
    models = get_prebuilt_models()
    logger.info(f"Serving models: {', '.join(models) or 'none'}")
    yield


@router.get("/healthcheck")
async def healthcheck() -> HealthcheckResponse:
    """Check whether the API is up and has at least one model to serve."""
    return HealthcheckResponse(is_healthy=bool(get_prebuilt_models()))


@router.get("/models")
async def list_models() -> ModelsResponse:
    """List names of models available for detection."""
    return ModelsResponse(models=sorted(get_prebuilt_models()))


@router.post("/detect")
def detect(
    request: GibberishDetectionRequest, fastapi_request: Request
) -> GibberishDetectionResponse:
    """Check whether a text is gibberish."""
    rate_limiter(get_ip_address_or_raise(fastapi_request))

    model = get_prebuilt_models().get(request.model)
    if model is None:
        raise HTTPException(
            status_code=404, detail=f"There is no model named `{request.model}`."
        )

    detector = BigramDetector(model, use_cache=config.use_cache)
    score = detector.detect(request.text)
    threshold = detector.get_threshold()
    if math.isnan(score):
        return GibberishDetectionResponse(
            is_gibberish=False,
            score=None,
            threshold=threshold,
            remarks="The text is too short to be classified.",
        )

    return GibberishDetectionResponse(
        is_gibberish=is_below_threshold(score, threshold),
        score=score,
        threshold=threshold,
    )
