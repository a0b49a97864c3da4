"""Configuration, logging, HTTP client and result envelope."""

import json

import httpx
import pytest

from labcore.config import CipherLabConfig, GlobalConfig, LabConfig
from labcore.logger import LabLogger
from labcore.models import LabResult
from labcore.network import LabHTTP, LabHTTPError


# --- Config ----------------------------------------------------------------

def test_default_config_values():
    config = LabConfig()
    assert config.cipherlab.top_n == 10
    assert config.cipherlab.confident_threshold == 50
    assert config.cipherlab.tentative_threshold == 30
    assert config.cipherlab.wordlist_timeout == 3.0
    assert config.cipherlab.max_remote_words == 50
    assert config.global_settings.log_level == "INFO"


def test_load_partial_toml_ignores_unknown_keys(tmp_path):
    path = tmp_path / "lab.toml"
    path.write_text(
        "[global]\n"
        'log_level = "DEBUG"\n'
        "max_workers = 4\n"
        "[cipherlab]\n"
        "top_n = 5\n"
        "enable_remote_wordlist = false\n"
        'colour = "purple"\n',
        encoding="utf-8",
    )
    config = LabConfig.load(path)

    assert config.global_settings.log_level == "DEBUG"
    assert config.global_settings.max_workers == 4
    assert config.cipherlab.top_n == 5
    assert config.cipherlab.enable_remote_wordlist is False
    assert config.cipherlab.rail_max == CipherLabConfig().rail_max


def test_explicit_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        LabConfig.load(tmp_path / "missing.toml")


def test_config_to_dict():
    data = LabConfig(global_settings=GlobalConfig(debug=True)).to_dict()
    assert data["global_settings"]["debug"] is True
    assert data["cipherlab"]["alphabet"] == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


# --- Logger ----------------------------------------------------------------

def test_json_log_file(tmp_path):
    log_file = tmp_path / "logs" / "lab.log"
    log = LabLogger(
        "test_json",
        log_level="INFO",
        log_file=log_file,
        json_logs=True,
        console_output=False,
    )
    with log.operation("crack"):
        log.info("Tried %d keywords", 3, candidates=3)
    log.debug("not written")
    for handler in log.underlying.handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry["message"] == "Tried 3 keywords"
    assert entry["logger"] == "cipherlab.test_json"
    assert entry["component"] == "test_json"
    assert entry["operation"] == "crack"
    assert entry["extra"] == {"candidates": 3}


def test_logger_from_config_uses_debug_flag():
    config = LabConfig(global_settings=GlobalConfig(debug=True))
    log = LabLogger.from_config("test_debug", config)
    assert log.underlying.level == 10
    assert log.component == "test_debug"


# --- HTTP client -----------------------------------------------------------

async def test_fetch_json_decodes_body():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["User-Agent"].startswith("CipherLab")
        return httpx.Response(200, json=[{"word": "hush"}])

    async with LabHTTP(transport=httpx.MockTransport(handler)) as http:
        assert await http.fetch_json("https://words.test/words") == [{"word": "hush"}]


async def test_fetch_non_2xx_raises():
    async with LabHTTP(transport=httpx.MockTransport(lambda r: httpx.Response(404))) as http:
        with pytest.raises(LabHTTPError, match="404"):
            await http.fetch("https://words.test/missing")


@pytest.mark.parametrize(
    "error",
    [httpx.ConnectError, httpx.ReadTimeout, httpx.TooManyRedirects, httpx.DecodingError],
)
async def test_request_errors_become_lab_http_error(error):
    def handler(request: httpx.Request) -> httpx.Response:
        raise error("boom", request=request)

    async with LabHTTP(transport=httpx.MockTransport(handler)) as http:
        with pytest.raises(LabHTTPError, match="boom"):
            await http.fetch_json("https://words.test/words")


async def test_invalid_json_raises():
    async with LabHTTP(
        transport=httpx.MockTransport(lambda r: httpx.Response(200, text="<html>"))
    ) as http:
        with pytest.raises(LabHTTPError, match="Invalid JSON"):
            await http.fetch_json("https://words.test/words")


# --- Result envelope -------------------------------------------------------

def test_lab_result_finalize():
    result = LabResult(tool_name="crack-keyword", target="DTIIL")
    assert result.duration_seconds is None
    result.finalize("done")
    assert result.summary == "done"
    assert result.duration_seconds >= 0
