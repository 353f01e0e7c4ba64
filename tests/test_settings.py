import importlib
from pathlib import Path

import wordguesser.settings as settings


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_env_file_sets_defaults(tmp_path: Path, monkeypatch):
    env = tmp_path / "test.env"
    _write(env, [
        "WORDGUESSER_WORDS_URL=https://example.org/words.txt",
        "WORDGUESSER_REQUEST_TIMEOUT=5",
        "WORDGUESSER_LOG_LEVEL=DEBUG",
    ])
    monkeypatch.setenv("WORDGUESSER_ENV_FILE", str(env))
    # registered so teardown removes whatever the file adds
    for name in ("WORDGUESSER_WORDS_URL", "WORDGUESSER_REQUEST_TIMEOUT"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("WORDGUESSER_LOG_LEVEL", "ERROR")
    try:
        importlib.reload(settings)
        assert settings.WORDS_URL == "https://example.org/words.txt"
        assert settings.REQUEST_TIMEOUT == 5.0
        # the real environment wins over the file
        assert settings.LOG_LEVEL == "ERROR"
    finally:
        monkeypatch.undo()
        importlib.reload(settings)


def test_missing_env_file_uses_defaults(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("WORDGUESSER_ENV_FILE", str(tmp_path / "absent.env"))
    monkeypatch.delenv("WORDGUESSER_WORDS_URL", raising=False)
    try:
        importlib.reload(settings)
        assert settings.WORDS_URL.endswith("/common.words")
        assert settings.DEFAULT_CODE_LENGTH in settings.LENGTH_CHOICES
    finally:
        monkeypatch.undo()
        importlib.reload(settings)
