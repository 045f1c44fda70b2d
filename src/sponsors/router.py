import logging
from typing import TypeVar

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from src.config.settings import settings
from src.sponsors import urls
from src.sponsors.client import RemoteUnavailableError, ScriptSponsorStore, SponsorStore
from src.sponsors.fallback import fallback_sponsors
from src.sponsors.schema import (
    ErrorResponse,
    PrincipalSponsor,
    SponsorCreate,
    SponsorDelete,
    SponsorUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()

BodyT = TypeVar("BodyT", bound=BaseModel)

MALE_REQUIRED = "MalePrincipalSponsor is required"

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


class InvalidSponsorBody(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def get_sponsor_store() -> SponsorStore:
    """Factory for the sponsor store. Override in tests."""
    return ScriptSponsorStore(http_client_class=httpx.AsyncClient, config=settings)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def _parse_body(request: Request, model: type[BodyT]) -> BodyT:
    try:
        body = await request.json()
    except ValueError:
        raise InvalidSponsorBody("Request body must be valid JSON")
    if not isinstance(body, dict):
        raise InvalidSponsorBody("Request body must be a JSON object")

    try:
        return model.model_validate(body)
    except ValidationError as e:
        errors = e.errors()
        if any(err["loc"] and err["loc"][0] == "MalePrincipalSponsor" for err in errors):
            raise InvalidSponsorBody(MALE_REQUIRED)
        field = ".".join(str(part) for part in errors[0]["loc"])
        raise InvalidSponsorBody(f"{field}: {errors[0]['msg']}")


@router.get(
    urls.PRINCIPAL_SPONSOR_URL,
    responses={
        200: {
            "model": list[PrincipalSponsor],
            "description": "Sheet rows as returned by the sponsor sheet, or the bundled list",
        }
    },
)
async def list_principal_sponsors(
    store: SponsorStore = Depends(get_sponsor_store),
) -> JSONResponse:
    """
    List principal sponsors from the sponsor sheet.

    Never fails for the caller: if the sheet cannot be read, the bundled
    sponsor list is returned instead.
    """
    try:
        sponsors = await store.list_sponsors()
    except RemoteUnavailableError as e:
        logger.warning(
            f"Serving bundled principal sponsors: {e}",
            extra={"event": "principal_sponsor_fallback", "reason": str(e)},
        )
        sponsors = [sponsor.model_dump() for sponsor in fallback_sponsors()]
    return JSONResponse(status_code=200, content=sponsors)


@router.post(urls.PRINCIPAL_SPONSOR_URL, status_code=201, responses=ERROR_RESPONSES)
async def add_principal_sponsor(
    request: Request,
    store: SponsorStore = Depends(get_sponsor_store),
) -> JSONResponse:
    try:
        body = await _parse_body(request, SponsorCreate)
    except InvalidSponsorBody as e:
        return _error(400, e.message)

    try:
        result = await store.create_sponsor(body.trimmed())
    except RemoteUnavailableError as e:
        logger.error(f"Error adding principal sponsor: {e}")
        return _error(500, "Failed to add principal sponsor")
    return JSONResponse(status_code=201, content=result)


@router.put(urls.PRINCIPAL_SPONSOR_URL, responses=ERROR_RESPONSES)
async def update_principal_sponsor(
    request: Request,
    store: SponsorStore = Depends(get_sponsor_store),
) -> JSONResponse:
    """
    Update a sponsor row. ``originalName`` finds the row; when it is not
    sent, the submitted male name is used as the lookup key.
    """
    try:
        body = await _parse_body(request, SponsorUpdate)
    except InvalidSponsorBody as e:
        return _error(400, e.message)

    try:
        result = await store.update_sponsor(body.lookup_name, body.trimmed())
    except RemoteUnavailableError as e:
        logger.error(f"Error updating principal sponsor: {e}")
        return _error(500, "Failed to update principal sponsor")
    return JSONResponse(status_code=200, content=result)


@router.delete(urls.PRINCIPAL_SPONSOR_URL, responses=ERROR_RESPONSES)
async def delete_principal_sponsor(
    request: Request,
    store: SponsorStore = Depends(get_sponsor_store),
) -> JSONResponse:
    try:
        body = await _parse_body(request, SponsorDelete)
    except InvalidSponsorBody as e:
        return _error(400, e.message)

    try:
        result = await store.delete_sponsor(body.MalePrincipalSponsor.strip())
    except RemoteUnavailableError as e:
        logger.error(f"Error deleting principal sponsor: {e}")
        return _error(500, "Failed to delete principal sponsor")
    return JSONResponse(status_code=200, content=result)
