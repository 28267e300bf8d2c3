# utils/text_io.py
"""
Case-file reading for the benchmark harness.

Each non-empty, non-comment line holds three '|'-separated fields:

    Label|Text|Pattern

A Text field of the form `repeat:COUNT:SUBSTRING` stands for SUBSTRING
repeated COUNT times.
"""

from __future__ import annotations

import logging
import re
from typing import List, NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)

REPEAT_PREFIX = "repeat:"
COUNT_RE = re.compile(r"[+-]?[0-9]+")
# same range as a 32-bit signed int
COUNT_MIN, COUNT_MAX = -2**31, 2**31 - 1


class BenchCase(NamedTuple):
    label: str
    text: str
    pattern: str


def expand_text_field(field: str) -> str:
    f = field.strip()
    if not f.startswith(REPEAT_PREFIX):
        return f
    parts = f.split(":", 2)
    if len(parts) != 3 or not COUNT_RE.fullmatch(parts[1]):
        return ""
    count = int(parts[1])
    if not COUNT_MIN <= count <= COUNT_MAX:
        return ""
    return parts[2] * count


def parse_case_line(line: str) -> Optional[BenchCase]:
    t = line.strip()
    if not t or t.startswith("#"):
        return None
    parts = t.split("|", 2)
    if len(parts) != 3:
        logger.warning("Ignored invalid line: %s", line.rstrip("\n"))
        return None
    label, text_field, pattern = parts
    return BenchCase(label.strip(), expand_text_field(text_field), pattern)


def read_cases(path: str) -> List[BenchCase]:
    with open(path, "r", encoding="utf-8") as f:
        lines = f.read().splitlines()
    cases = []
    for line in lines:
        tc = parse_case_line(line)
        if tc is not None:
            cases.append(tc)
    return cases


def read_files_as_texts(files) -> Tuple[List[str], List[str]]:
    texts, names = [], []
    if not files:
        return texts, names
    for f in files:
        data = f.read()
        try:
            txt = data.decode("utf-8", errors="ignore")
        except AttributeError:
            txt = str(data)
        texts.append(txt)
        names.append(getattr(f, "name", "uploaded.txt"))
    return texts, names
