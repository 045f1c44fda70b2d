"""Unit tests for ScriptSponsorStore, mocking the HTTP client."""

import logging

import httpx
import pytest

from src.sponsors.client import RemoteUnavailableError, ScriptSponsorStore
from src.sponsors.schema import PrincipalSponsor
from src.sponsors.tests.mocks import SCRIPT_URL, MockConfig, MockHttpClient, MockResponse

SHEET_ROWS = [
    {"MalePrincipalSponsor": "Mr. Juan Dela Cruz", "FemalePrincipalSponsor": "Mrs. Maria Dela Cruz"},
    {"MalePrincipalSponsor": "", "FemalePrincipalSponsor": "Mrs. Ana Reyes"},
]


@pytest.fixture
def mock_config() -> MockConfig:
    return MockConfig()


def make_store(client: MockHttpClient, config: MockConfig) -> ScriptSponsorStore:
    return ScriptSponsorStore(http_client_class=client, config=config)


# =============================================================================
# Reads
# =============================================================================


@pytest.mark.asyncio
async def test_list_returns_sheet_rows(mock_config):
    client = MockHttpClient(MockResponse(json_data=SHEET_ROWS))

    result = await make_store(client, mock_config).list_sponsors()

    assert result == SHEET_ROWS
    assert client.get_calls[0]["url"] == SCRIPT_URL
    assert client.post_calls == []


@pytest.mark.asyncio
async def test_client_uses_configured_timeout_and_follows_redirects(mock_config):
    client = MockHttpClient(MockResponse(json_data=[]))

    await make_store(client, mock_config).list_sponsors()

    assert client.client_kwargs == [{"timeout": 3.5, "follow_redirects": True}]


@pytest.mark.asyncio
async def test_list_error_status_raises_remote_unavailable(mock_config):
    client = MockHttpClient(MockResponse(status_code=503))

    with pytest.raises(RemoteUnavailableError):
        await make_store(client, mock_config).list_sponsors()


@pytest.mark.asyncio
async def test_list_network_error_raises_remote_unavailable(mock_config):
    client = MockHttpClient(error=httpx.ConnectError("connection refused"))

    with pytest.raises(RemoteUnavailableError):
        await make_store(client, mock_config).list_sponsors()


@pytest.mark.asyncio
async def test_list_timeout_raises_remote_unavailable(mock_config):
    client = MockHttpClient(error=httpx.ReadTimeout("timed out"))

    with pytest.raises(RemoteUnavailableError):
        await make_store(client, mock_config).list_sponsors()


@pytest.mark.asyncio
async def test_list_invalid_json_raises_remote_unavailable(mock_config):
    client = MockHttpClient(MockResponse(text="<html>Sign in</html>"))

    with pytest.raises(RemoteUnavailableError):
        await make_store(client, mock_config).list_sponsors()


@pytest.mark.asyncio
async def test_list_non_array_raises_remote_unavailable(mock_config):
    client = MockHttpClient(MockResponse(json_data={"error": "Sheet not found"}))

    with pytest.raises(RemoteUnavailableError):
        await make_store(client, mock_config).list_sponsors()


# =============================================================================
# Writes
# =============================================================================


@pytest.mark.asyncio
async def test_create_posts_both_names_without_action(mock_config):
    client = MockHttpClient()
    sponsor = PrincipalSponsor(MalePrincipalSponsor="John", FemalePrincipalSponsor="Jane")

    result = await make_store(client, mock_config).create_sponsor(sponsor)

    assert result == {"success": True}
    call = client.post_calls[0]
    assert call["url"] == SCRIPT_URL
    assert call["json"] == {"MalePrincipalSponsor": "John", "FemalePrincipalSponsor": "Jane"}
    assert call["headers"]["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_update_posts_action_and_lookup_name(mock_config):
    client = MockHttpClient()
    sponsor = PrincipalSponsor(MalePrincipalSponsor="New Name", FemalePrincipalSponsor="")

    await make_store(client, mock_config).update_sponsor("Old Name", sponsor)

    assert client.post_calls[0]["json"] == {
        "action": "update",
        "originalName": "Old Name",
        "MalePrincipalSponsor": "New Name",
        "FemalePrincipalSponsor": "",
    }


@pytest.mark.asyncio
async def test_delete_posts_action_and_male_name(mock_config):
    client = MockHttpClient()

    await make_store(client, mock_config).delete_sponsor("John")

    assert client.post_calls[0]["json"] == {"action": "delete", "MalePrincipalSponsor": "John"}
    assert client.get_calls == []


@pytest.mark.asyncio
async def test_write_error_status_raises_remote_unavailable(mock_config):
    client = MockHttpClient(MockResponse(status_code=500))

    with pytest.raises(RemoteUnavailableError):
        await make_store(client, mock_config).delete_sponsor("John")


@pytest.mark.asyncio
async def test_write_invalid_json_raises_remote_unavailable(mock_config):
    client = MockHttpClient(MockResponse(text="not json"))
    sponsor = PrincipalSponsor(MalePrincipalSponsor="John")

    with pytest.raises(RemoteUnavailableError):
        await make_store(client, mock_config).create_sponsor(sponsor)


@pytest.mark.asyncio
@pytest.mark.parametrize("body", ['[{"MalePrincipalSponsor": NaN}]', "[Infinity]", '{"row": -Infinity}'])
async def test_non_standard_json_constants_raise_remote_unavailable(mock_config, body):
    client = MockHttpClient(MockResponse(text=body))

    with pytest.raises(RemoteUnavailableError):
        await make_store(client, mock_config).list_sponsors()


@pytest.mark.asyncio
async def test_request_log_omits_sponsor_names(mock_config, caplog):
    client = MockHttpClient()
    sponsor = PrincipalSponsor(MalePrincipalSponsor="Mr. Juan Dela Cruz", FemalePrincipalSponsor="Maria")

    with caplog.at_level(logging.DEBUG, logger="src.sponsors.client"):
        store = make_store(client, mock_config)
        await store.create_sponsor(sponsor)
        await store.update_sponsor("Old Name", sponsor)
        await store.delete_sponsor("Mr. Juan Dela Cruz")

    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "Sponsor sheet request: POST action=create",
        "Sponsor sheet request: POST action=update",
        "Sponsor sheet request: POST action=delete",
    ]
    assert not any("Juan" in message or "Old Name" in message for message in messages)
