from __future__ import annotations

from unittest.mock import patch

from image_to_sabre.cli.convert_main import run_cli
from conftest import FakeInferenceClient


@patch("image_to_sabre.config.load_dotenv")
def test_cli_prints_sabre_text(_dotenv, monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    shot = tmp_path / "booking.png"
    shot.write_bytes(b"\x89PNG")
    fake = FakeInferenceClient("1  BA  117  W  05MAY  LHR JFK  0820 1100\r\n")

    code = run_cli([str(shot)], client=fake)

    assert code == 0
    assert capsys.readouterr().out == "1  BA  117  W  05MAY  LHR JFK  0820 1100\n"
    assert fake.calls[0][1].startswith("data:image/png;base64,")


@patch("image_to_sabre.config.load_dotenv")
def test_cli_reports_upstream_error(_dotenv, monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    shot = tmp_path / "booking.png"
    shot.write_bytes(b"\x89PNG")

    code = run_cli([str(shot)], client=FakeInferenceClient(error=RuntimeError("model overloaded")))

    assert code == 1
    assert "Error (500): model overloaded" in capsys.readouterr().err


@patch("image_to_sabre.config.load_dotenv")
def test_cli_missing_file(_dotenv, monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    fake = FakeInferenceClient()
    assert run_cli([str(tmp_path / "nope.png")], client=fake) == 1
    assert "Cannot read" in capsys.readouterr().err
    assert fake.calls == []


@patch("image_to_sabre.config.load_dotenv")
def test_cli_missing_api_key(_dotenv, monkeypatch, tmp_path, capsys):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    shot = tmp_path / "booking.png"
    shot.write_bytes(b"\x89PNG")
    fake = FakeInferenceClient()

    assert run_cli([str(shot)], client=fake) == 1
    assert "Configuration error: Missing OPENAI_API_KEY" in capsys.readouterr().err
    assert fake.calls == []
