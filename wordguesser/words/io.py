from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Union

import requests

from wordguesser.settings import REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

# A line source is a URL, a path, or anything that yields lines.
LineSource = Union[str, Path, Iterable[str]]


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def fetch_lines(url: str, timeout: float = REQUEST_TIMEOUT) -> Iterator[str]:
    """
    Stream a remote text resource line by line.
    Raises requests.HTTPError on a non-2xx response.
    """
    with requests.get(url, timeout=timeout, stream=True) as r:
        r.raise_for_status()
        r.encoding = r.encoding or "utf-8"
        for line in r.iter_lines(decode_unicode=True):
            if line is not None:
                yield line


def iter_lines(source: LineSource) -> Iterator[str]:
    """Yield raw lines from a URL, a file path or an in-memory iterable."""
    if isinstance(source, str) and source.startswith(("http://", "https://")):
        logger.debug("fetching words from %s", source)
        yield from fetch_lines(source)
    elif isinstance(source, (str, Path)):
        yield from read_lines(source)
    else:
        yield from source


def normalize_word(line: str) -> str | None:
    """
    Clean one dictionary line: strip, upper-case, keep alphabetic tokens only.
    Returns None for blank or non-alphabetic lines.
    """
    w = line.strip()
    if not w or not w.isalpha():
        return None
    return w.upper()


def describe_source(source: LineSource) -> str:
    """Short printable name for log lines."""
    if isinstance(source, (str, Path)):
        return str(source)
    return type(source).__name__
