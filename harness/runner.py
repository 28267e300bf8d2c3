# harness/runner.py
"""
Bench runner: reads `Label|Text|Pattern` cases, times kmp_find_all on each
(warm-up runs first, then measured runs), prints a plain-text report and saves
it next to the input.

Run with: python -m harness.runner [--input FILE] [--output FILE]
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import tempfile
import time
from typing import List, NamedTuple, Optional

from pydantic import ValidationError

from algorithms.kmp import kmp_find_all
from harness.config import BenchConfig
from utils.logging_config import setup_logging
from utils.text_io import BenchCase, read_cases

logger = logging.getLogger(__name__)

MAX_LISTED = 20
HEAD_LISTED = 10


class CaseResult(NamedTuple):
    matches: List[int]
    avg_ms: float


def time_search(text: str, pattern: str, config: BenchConfig) -> CaseResult:
    for _ in range(config.warmup_runs):
        kmp_find_all(text, pattern)

    total_ns = 0
    matches: List[int] = []
    for _ in range(config.measured_runs):
        t0 = time.perf_counter_ns()
        matches = kmp_find_all(text, pattern)
        total_ns += time.perf_counter_ns() - t0
    return CaseResult(matches, total_ns / config.measured_runs / 1_000_000.0)


def format_report(case: BenchCase, result: CaseResult, config: BenchConfig) -> str:
    lines = [
        f"=== {case.label} test ===",
        f"Text length: {len(case.text)}, Pattern length: {len(case.pattern)}",
        f"Matches found: {len(result.matches)}",
    ]
    if len(result.matches) <= MAX_LISTED:
        lines.append(f"Indices: {result.matches}")
    else:
        lines.append(f"First {HEAD_LISTED} indices: {result.matches[:HEAD_LISTED]}")
    lines.append(f"Avg Time (over {config.measured_runs} runs): {result.avg_ms:.6f} ms")
    return "\n".join(lines) + "\n\n"


def run_cases(cases: List[BenchCase], config: BenchConfig) -> str:
    out = []
    for case in cases:
        logger.debug("running %s (n=%d, m=%d)", case.label, len(case.text), len(case.pattern))
        out.append(format_report(case, time_search(case.text, case.pattern, config), config))
    return "".join(out)


def write_report(path: str, report: str) -> None:
    # temp file + rename: a failed write leaves any previous report untouched
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp = tempfile.mkstemp(prefix=".kmp-report-", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(report)
        os.replace(tmp, path)
    except OSError:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="kmp-bench", description="Time KMP search over a case file.")
    p.add_argument("-i", "--input", dest="input_file", help="case file (Label|Text|Pattern per line)")
    p.add_argument("-o", "--output", dest="output_file", help="where to save the report")
    p.add_argument("--warmup", dest="warmup_runs", type=int, help="untimed runs per case")
    p.add_argument("--runs", dest="measured_runs", type=int, help="timed runs per case")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = BenchConfig.from_env(
            input_file=args.input_file,
            output_file=args.output_file,
            warmup_runs=args.warmup_runs,
            measured_runs=args.measured_runs,
        )
    except ValidationError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    try:
        cases = read_cases(config.input_file)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read %s: %s", config.input_file, e)
        return 2

    report = run_cases(cases, config)
    sys.stdout.write(report)
    sys.stdout.flush()

    try:
        write_report(config.output_file, report)
    except OSError as e:
        logger.error("Failed to write sample output: %s", e)
        return 1
    logger.info("Saved sample output to %s", os.path.abspath(config.output_file))
    return 0


if __name__ == "__main__":
    sys.exit(main())
