"""Tests for the chatgpt-admin CLI."""

import httpx
import pytest
from click.testing import CliRunner

from chatgpt_admin.app import create_app
from chatgpt_admin.app.store import load_config_json
from chatgpt_admin.cli.main import cli


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config.json"


@pytest.fixture
def obj(config_path):
    return {"transport": httpx.ASGITransport(app=create_app(config_path))}


def _invoke(obj, *args):
    return CliRunner().invoke(
        cli,
        ["--base-url", "http://testserver", *args],
        obj=obj,
    )


def test_providers_lists_catalog() -> None:
    result = CliRunner().invoke(cli, ["providers"])
    assert result.exit_code == 0
    assert "Open AI (open_ai)" in result.output
    assert "Azure AI (azure_ai)" in result.output
    assert "text-davinci-003" in result.output


def test_set_saves_and_masks_key(obj, config_path) -> None:
    result = _invoke(
        obj,
        "set",
        "--backend",
        "open_ai",
        "--api-key",
        "sk-abcdefghijk",
        "--model",
        "text-curie-001",
        "--max-tokens",
        "256",
    )
    assert result.exit_code == 0, result.output
    assert "saved successfully" in result.output
    assert "sk-*******hijk" in result.output

    stored = load_config_json(config_path)
    assert stored.api_key == "sk-abcdefghijk"
    assert stored.max_tokens == 256
    assert stored.backend_conf.url == "https://api.openai.com/v1"


def test_set_validation_failure(obj, config_path) -> None:
    result = _invoke(
        obj,
        "set",
        "--backend",
        "azure_ai",
        "--api-key",
        "sk-1",
        "--model",
        "dep",
    )
    assert result.exit_code == 1
    assert result.output.count("Please enter the backend url") == 1
    assert "Error:" not in result.output
    assert not config_path.exists()


def test_show_masks_key(obj) -> None:
    _invoke(obj, "set", "--api-key", "sk-abcdefghijk")
    result = _invoke(obj, "show")
    assert result.exit_code == 0, result.output
    assert "sk-*******hijk" in result.output
    assert "sk-abcdefghijk" not in result.output


def test_show_fails_when_backend_unreachable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    result = _invoke({"transport": httpx.MockTransport(handler)}, "show")
    assert result.exit_code == 1
    assert result.output.count("Error while fetching") == 1
    assert "could not load" not in result.output
    assert "Error:" not in result.output


def test_fields_for_azure(obj) -> None:
    result = _invoke(obj, "fields", "--backend", "azure_ai")
    assert result.exit_code == 0, result.output
    assert '"required": true' in result.output
    assert "azure-endpoint-name" in result.output
