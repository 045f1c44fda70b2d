import logging
from typing import Any, Protocol

import httpx

from src.config.settings import settings
from src.sponsors.schema import PrincipalSponsor

logger = logging.getLogger(__name__)


class RemoteUnavailableError(Exception):
    """The sponsor sheet could not be reached or gave back something unusable."""


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are accepted by json.loads but cannot be re-encoded as JSON.
    raise ValueError(f"Non-standard JSON constant {name}")


class SponsorStoreConfig(Protocol):
    principal_sponsor_script_url: str
    principal_sponsor_timeout_seconds: float


class SponsorStore(Protocol):
    """Protocol for the principal sponsor record store."""

    async def list_sponsors(self) -> list[Any]: ...

    async def create_sponsor(self, sponsor: PrincipalSponsor) -> Any: ...

    async def update_sponsor(self, original_name: str, sponsor: PrincipalSponsor) -> Any: ...

    async def delete_sponsor(self, male_name: str) -> Any: ...


class ScriptSponsorStore:
    """
    Sponsor store backed by the spreadsheet's Apps Script web app.

    Every operation goes to the same URL. Reads are a GET; writes are a POST
    whose ``action`` field tells the script what to do (absent means append).
    """

    def __init__(
        self,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
        config: SponsorStoreConfig = settings,
    ):
        self._http_client_class = http_client_class
        self._config = config

    async def list_sponsors(self) -> list[Any]:
        data = await self._request("GET")
        if not isinstance(data, list):
            raise RemoteUnavailableError(f"Expected a JSON array, got {type(data).__name__}")
        return data

    async def create_sponsor(self, sponsor: PrincipalSponsor) -> Any:
        return await self._request("POST", sponsor.model_dump())

    async def update_sponsor(self, original_name: str, sponsor: PrincipalSponsor) -> Any:
        return await self._request(
            "POST",
            {"action": "update", "originalName": original_name, **sponsor.model_dump()},
        )

    async def delete_sponsor(self, male_name: str) -> Any:
        return await self._request(
            "POST",
            {"action": "delete", "MalePrincipalSponsor": male_name},
        )

    async def _request(self, method: str, payload: dict | None = None) -> Any:
        url = self._config.principal_sponsor_script_url
        action = (payload or {}).get("action", "create" if payload else "list")
        logger.debug(f"Sponsor sheet request: {method} action={action}")
        try:
            async with self._http_client_class(
                timeout=self._config.principal_sponsor_timeout_seconds,
                follow_redirects=True,
            ) as client:
                if method == "GET":
                    response = await client.get(
                        url, headers={"Content-Type": "application/json"}
                    )
                else:
                    response = await client.post(
                        url,
                        headers={"Content-Type": "application/json"},
                        json=payload,
                    )
                response.raise_for_status()
                return response.json(parse_constant=_reject_constant)
        except httpx.HTTPError as e:
            raise RemoteUnavailableError(f"{method} {url} failed: {e}") from e
        except ValueError as e:
            # json.JSONDecodeError is a ValueError
            raise RemoteUnavailableError(f"{method} {url} returned invalid JSON: {e}") from e
