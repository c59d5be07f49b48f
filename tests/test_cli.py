# tests/test_cli.py
import cli


def test_ask_float_defaults_to_zero(monkeypatch):
    seen = []

    def fake_ask(message, default=None):
        seen.append(default)
        return default

    monkeypatch.setattr(cli.Prompt, "ask", fake_ask)
    assert cli.ask_float("Price") == 0.0
    assert seen == ["0.0"]


def test_ask_float_retries_until_number(monkeypatch):
    answers = iter(["lots", "14000"])
    monkeypatch.setattr(cli.Prompt, "ask", lambda message, default=None: next(answers))
    assert cli.ask_float("Amount paid") == 14000.0
