"""API routes implementation.

Every outcome of the save endpoint is answered with HTTP 200; the ``status``
field of the body carries the result.
"""

import json

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from .auth import require_basic_auth
from .schemas import SaveRequest, SaveResponse, ok, error, validation_error
from ...lib.common.logging_config import get_logger
from ...lib.database.exceptions import AliasExistsError, StoreError

router = APIRouter()

logger = get_logger("shortlink.web.save")


@router.post(
    "/url",
    response_model=SaveResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(require_basic_auth)],
    summary="Save URL",
    description="Save a URL under an alias. A random alias is generated when none is given.",
)
async def save_url(request: Request) -> SaveResponse:
    """Save a URL under an alias."""
    service = request.app.state.service
    request_id = getattr(request.state, "request_id", None)

    body = await request.body()
    if not body:
        logger.info(f"request body is empty (request_id={request_id})")
        return error("empty request")

    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.info(f"failed to decode request body: {e} (request_id={request_id})")
        return error("failed to decode request")

    if not isinstance(payload, dict):
        logger.info(f"request body is not a JSON object (request_id={request_id})")
        return error("failed to decode request")

    try:
        req = SaveRequest.model_validate(payload)
    except ValidationError as e:
        logger.info(f"invalid request: {e.error_count()} error(s) (request_id={request_id})")
        return validation_error(e)

    try:
        alias, _ = await service.save_url(req.url, req.alias)
    except AliasExistsError:
        logger.info(f"url already exists: alias={req.alias} (request_id={request_id})")
        return error("url already exists")
    except StoreError as e:
        logger.error(f"failed to add url: {e} (request_id={request_id})")
        return error("failed to add url")

    return ok(alias)
