import io
import json
import logging
from pathlib import Path

from rich.console import Console
from textual.logging import TextualHandler
from typing_sprint import Settings, configure_logging, main


def _closed_stdin(prompt=""):
    raise EOFError


def _write_config(tmp_path: Path, config: dict) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path


def test_main_plain_saves_and_exits_cleanly(tmp_path: Path, monkeypatch, capsys, restore_logger):
    monkeypatch.setattr("builtins.input", _closed_stdin)
    monkeypatch.setattr("typing_sprint.time.sleep", lambda seconds: None)
    config = _write_config(tmp_path, {})
    scores = tmp_path / "scores.json"

    code = main(["--plain", "--config", str(config), "--scores", str(scores)])

    assert code == 0
    assert json.loads(scores.read_text(encoding="utf-8")) == {}
    out = capsys.readouterr().out
    assert "Type the following text as quickly as you can!" in out
    assert "See you later!" in out


def test_main_keeps_existing_scores(tmp_path: Path, monkeypatch, restore_logger):
    monkeypatch.setattr("builtins.input", _closed_stdin)
    monkeypatch.setattr("typing_sprint.time.sleep", lambda seconds: None)
    scores = tmp_path / "scores.json"
    scores.write_text(json.dumps({"Hello, world.": 800}), encoding="utf-8")
    config = _write_config(tmp_path, {"scores_path": str(scores)})

    assert main(["--plain", "--config", str(config)]) == 0
    assert json.loads(scores.read_text(encoding="utf-8")) == {"Hello, world.": 800}


def test_main_log_file_in_missing_directory(tmp_path: Path, monkeypatch, restore_logger):
    monkeypatch.setattr("builtins.input", _closed_stdin)
    monkeypatch.setattr("typing_sprint.time.sleep", lambda seconds: None)
    log_file = tmp_path / "missing" / "x.log"
    config = _write_config(tmp_path, {"log_file": str(log_file), "log_level": "info"})

    code = main(["--plain", "--config", str(config), "--scores", str(tmp_path / "s.json")])

    assert code == 0
    assert log_file.exists()


def test_configure_logging_rich_and_file(tmp_path: Path, restore_logger):
    console = Console(file=io.StringIO(), width=200)
    from rich.logging import RichHandler

    log_file = tmp_path / "logs" / "game.log"
    settings = Settings(log_file=log_file, log_level="INFO")
    configure_logging(settings, RichHandler(console=console, show_time=False, show_path=False))

    restore_logger.info("round finished")
    for handler in restore_logger.handlers:
        handler.flush()

    assert restore_logger.level == logging.INFO
    assert restore_logger.propagate is False
    assert "round finished" in console.file.getvalue()
    assert "INFO typing_sprint: round finished" in log_file.read_text(encoding="utf-8")


def test_configure_logging_unwritable_log_file(tmp_path: Path, restore_logger):
    # a regular file where the log directory should be
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    console = Console(file=io.StringIO(), width=200)
    from rich.logging import RichHandler

    settings = Settings(log_file=blocker / "x.log")
    configure_logging(settings, RichHandler(console=console, show_time=False, show_path=False))

    assert len(restore_logger.handlers) == 1
    assert "Not logging to" in console.file.getvalue()


def test_configure_logging_textual(restore_logger):
    configure_logging(Settings(log_level="DEBUG"), TextualHandler())
    assert len(restore_logger.handlers) == 1
    assert isinstance(restore_logger.handlers[0], TextualHandler)
    assert restore_logger.level == logging.DEBUG
