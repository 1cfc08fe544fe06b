"""Tests for the command-line entry point."""

import pytest

from turnboard.app import build_parser, main, settings_from_args


def test_defaults() -> None:
    args = build_parser().parse_args([])
    settings = settings_from_args(args)
    assert settings.board_theme == "Classic"
    assert settings.highlight_ms == 1000


def test_theme_and_highlight() -> None:
    args = build_parser().parse_args(["--theme", "Blue", "--highlight-ms", "250"])
    settings = settings_from_args(args)
    assert settings.board_theme == "Blue"
    assert settings.highlight_ms == 250


def test_unknown_theme_rejected() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--theme", "Pink"])


def test_negative_highlight_rejected() -> None:
    with pytest.raises(SystemExit):
        main(["turnboard", "--highlight-ms", "-5"])


def test_main_passes_qt_args_through(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[list[str], object]] = []

    def _fake_run(argv: list[str], settings: object) -> int:
        calls.append((argv, settings))
        return 0

    monkeypatch.setattr("turnboard.ui.bootstrap.run_application", _fake_run)
    with pytest.raises(SystemExit) as excinfo:
        main(["turnboard", "--theme", "Blue", "-reverse"])

    assert excinfo.value.code == 0
    argv, settings = calls[0]
    assert argv == ["turnboard", "-reverse"]
    assert settings.board_theme == "Blue"  # type: ignore[attr-defined]


def _capture_launch(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    seen: dict[str, object] = {}

    def _fake_run(argv: list[str], settings: object) -> int:
        seen["argv"] = argv
        return 0

    monkeypatch.setattr("turnboard.ui.bootstrap.run_application", _fake_run)
    monkeypatch.setattr(
        "turnboard.app.logging.basicConfig", lambda **kw: seen.update(kw)
    )
    return seen


def test_verbose_flag_selects_debug(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = _capture_launch(monkeypatch)
    with pytest.raises(SystemExit):
        main(["turnboard", "-v"])
    assert seen["level"] == "DEBUG"


def test_log_level_without_verbose(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = _capture_launch(monkeypatch)
    with pytest.raises(SystemExit):
        main(["turnboard", "--log-level", "INFO"])
    assert seen["level"] == "INFO"


def test_empty_argv_uses_default_program_name(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    seen = _capture_launch(monkeypatch)
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 0
    assert seen["argv"] == ["turnboard"]
