from pathlib import Path

from setuptools import find_namespace_packages

ROOT = Path(__file__).resolve().parents[1]


def test_pyproject_finds_namespace_packages():
    text = (ROOT / "pyproject.toml").read_text(encoding="utf-8")
    assert "namespaces = true" in text
    assert 'include = ["wordguesser*", "apps*"]' in text


def test_every_subpackage_is_discovered():
    found = set(find_namespace_packages(where=str(ROOT), include=["wordguesser*", "apps*"]))
    assert {"wordguesser", "wordguesser.engine", "wordguesser.words", "wordguesser.game",
            "wordguesser.storage", "apps", "apps.cli"} <= found
