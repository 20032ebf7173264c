import json
from pathlib import Path

from typing_sprint import (
    DEFAULT_SCORES_PATH,
    TEXTS,
    build_corpus,
    load_config,
    parse_args,
    settings_from_config,
)


def test_missing_config_is_empty(tmp_path: Path):
    assert load_config(tmp_path / "nope.json") == {}


def test_malformed_config_is_empty(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text("{oops", encoding="utf-8")
    assert load_config(path) == {}


def test_settings_defaults():
    settings = settings_from_config({})
    assert settings.theme == "slate"
    assert settings.scores_path == DEFAULT_SCORES_PATH
    assert settings.extra_texts == []
    assert settings.log_file is None
    assert settings.log_level == "WARNING"


def test_settings_from_file(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "theme": "mint",
                "scores_path": str(tmp_path / "s.json"),
                "extra_texts": ["Practice makes perfect.", 42],
                "log_level": "debug",
            }
        ),
        encoding="utf-8",
    )
    settings = settings_from_config(load_config(path))
    assert settings.theme == "mint"
    assert settings.scores_path == tmp_path / "s.json"
    assert settings.extra_texts == ["Practice makes perfect."]
    assert settings.log_level == "DEBUG"


def test_unknown_values_fall_back():
    settings = settings_from_config({"theme": "neon", "log_level": "loud", "extra_texts": "nope"})
    assert settings.theme == "slate"
    assert settings.log_level == "WARNING"
    assert settings.extra_texts == []


def test_corpus_is_builtin_plus_extras():
    corpus = build_corpus(["  Practice makes perfect. ", "", "Hello, world."])
    assert corpus[: len(TEXTS)] == TEXTS
    assert corpus[len(TEXTS):] == ("Practice makes perfect.",)


def test_builtin_corpus():
    assert len(TEXTS) == 12
    assert "A map maps keys to values." in TEXTS


def test_parse_args():
    args = parse_args(["--plain", "--scores", "x.json", "--log-level", "debug"])
    assert args.plain is True
    assert args.scores == Path("x.json")
    assert args.log_level == "DEBUG"
