"""Tests for environment configuration and the command-line entry points."""

import importlib.util
import json
from pathlib import Path

import pytest

from icongen.config import Config, parse_bool
from icongen.main_mcp import build_parser

PROJECT_ROOT = Path(__file__).parent.parent


def _load_icon_prompt_script():
    spec = importlib.util.spec_from_file_location("icon_prompt", PROJECT_ROOT / "scripts" / "icon_prompt.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.parametrize(
    "value,expected",
    [("true", True), ("YES", True), ("1", True), ("off", False), ("0", False), ("maybe", None), (None, None)],
)
def test_parse_bool(value, expected) -> None:
    assert parse_bool(value) is expected


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("OUTPUT_DIR", "STYLES_DIR", "MULTIMODAL", "RETAIN_SESSIONS", "LOG_LEVEL", "MCP_PORT"):
        monkeypatch.delenv(f"ICONGEN_{name}", raising=False)

    assert Config.get_output_dir() == Path.cwd()
    assert Config.get_styles_dir() == Config.get_package_dir() / "content" / "styles"
    assert Config.get_multimodal_override() is None
    assert Config.retain_sessions() is False
    assert Config.get_log_level() == "INFO"
    assert Config.get_mcp_port() == 8030


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("ICONGEN_OUTPUT_DIR", str(tmp_path))
    monkeypatch.setenv("ICONGEN_MULTIMODAL", "false")
    monkeypatch.setenv("ICONGEN_RETAIN_SESSIONS", "true")
    monkeypatch.setenv("ICONGEN_LOG_LEVEL", "debug")
    monkeypatch.setenv("ICONGEN_MCP_PORT", "not-a-port")

    assert Config.get_output_dir() == tmp_path
    assert Config.get_multimodal_override() is False
    assert Config.retain_sessions() is True
    assert Config.get_log_level() == "DEBUG"
    assert Config.get_mcp_port() == 8030


def test_server_parser_flags() -> None:
    args = build_parser().parse_args(
        ["--transport", "http", "--port", "9000", "--styles-dir", "/s", "--output-dir", "/o", "--no-multimodal"]
    )

    assert args.transport == "http"
    assert args.port == 9000
    assert args.styles_dir == "/s"
    assert args.output_dir == "/o"
    assert args.multimodal is False
    assert build_parser().parse_args([]).multimodal is None
    assert build_parser().parse_args([]).transport == "stdio"


def test_icon_prompt_script_prints_prompt(capsys: pytest.CaptureFixture) -> None:
    script = _load_icon_prompt_script()

    exit_code = script.main(["prompt", "user profile", "--style", "material-design"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["suggested_filename"] == "user-profile"
    assert "STYLE: Material Design" in payload["expert_prompt"]


def test_icon_prompt_script_saves_response(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    script = _load_icon_prompt_script()
    response_file = tmp_path / "reply.txt"
    response_file.write_text(
        'FILENAME: paper-plane\nSVG: <svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"/>',
        encoding="utf-8",
    )

    exit_code = script.main(["save", "--response", str(response_file), "--output-dir", str(tmp_path / "icons")])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert Path(payload["output_path"]) == tmp_path / "icons" / "paper-plane.svg"


def test_icon_prompt_script_rejects_response_without_svg(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    script = _load_icon_prompt_script()
    response_file = tmp_path / "reply.txt"
    response_file.write_text("FILENAME: nothing-else", encoding="utf-8")

    exit_code = script.main(["save", "--response", str(response_file)])

    assert exit_code == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["error_code"] == "RESPONSE_PARSE_FAILED"
