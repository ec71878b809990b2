"""Redirect routes implementation."""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from ..api.schemas import error
from ...lib.common.logging_config import get_logger
from ...lib.database.exceptions import AliasNotFoundError, StoreError

router = APIRouter()

logger = get_logger("shortlink.web.redirect")


@router.get("/{alias}", include_in_schema=False)
async def redirect_to_url(request: Request, alias: str):
    """Redirect to the URL stored under alias."""
    service = request.app.state.service
    request_id = getattr(request.state, "request_id", None)

    try:
        url = await service.get_url(alias)
    except AliasNotFoundError:
        logger.info(f"url not found: alias={alias} (request_id={request_id})")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=error("not found").model_dump(exclude_none=True),
        )
    except StoreError as e:
        logger.error(f"failed to get url: {e} (request_id={request_id})")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error("internal error").model_dump(exclude_none=True),
        )

    logger.info(f"got url: {alias} -> {url} (request_id={request_id})")

    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)
