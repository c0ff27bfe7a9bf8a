"""Verify the reference corpus and time the similarity metrics over it."""

from __future__ import annotations

import argparse
import sys
import time
import uuid
from dataclasses import dataclass
from itertools import cycle, islice
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..clients.logging import get_logger, log_benchmark, log_config_load, log_mismatch
from ..config.config_loader import load_reference_corpus, load_runtime_config
from ..config.settings import ReferencePair
from ..utils.errors import ConfigError
from ..utils.similarity import jaro, jaro_winkler
from ..utils.timing import timed

METRICS: Dict[str, Callable[[str, str], float]] = {
    "jaro": jaro,
    "jaro_winkler": jaro_winkler,
}


@dataclass
class Mismatch:
    a: str
    b: str
    metric: str
    expected: float
    actual: float


@dataclass
class BenchmarkResult:
    metric: str
    pair_count: int
    iterations: int
    duration_ms: float

    @property
    def per_call_us(self) -> float:
        if not self.iterations:
            return 0.0
        return self.duration_ms * 1000.0 / self.iterations


def verify_corpus(
    pairs: Iterable[ReferencePair],
    tolerance: float = 1e-9,
    metrics: Sequence[str] = tuple(METRICS),
) -> List[Mismatch]:
    """Return every pair whose computed score is off by more than ``tolerance``."""
    mismatches: List[Mismatch] = []
    for pair in pairs:
        for metric in metrics:
            expected = getattr(pair, metric)
            if expected is None:
                continue
            actual = METRICS[metric](pair.a, pair.b)
            if abs(actual - expected) > tolerance:
                mismatches.append(Mismatch(pair.a, pair.b, metric, expected, actual))
    return mismatches


def run_benchmark(pairs: Sequence[ReferencePair], metric: str, iterations: int) -> BenchmarkResult:
    """Call ``metric`` ``iterations`` times, cycling through ``pairs``."""
    func = METRICS[metric]
    inputs = [(pair.a, pair.b) for pair in pairs]
    timings: Dict[str, float] = {}
    if inputs:
        with timed(metric, timings):
            for a, b in islice(cycle(inputs), iterations):
                func(a, b)
    else:
        iterations = 0
    return BenchmarkResult(
        metric=metric,
        pair_count=len(inputs),
        iterations=iterations,
        duration_ms=timings.get(f"duration_{metric}", 0.0),
    )


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Verify and benchmark Jaro / Jaro-Winkler similarity.")
    parser.add_argument("--config", type=Path, help="Path to a benchmark YAML config.")
    parser.add_argument("--corpus", type=Path, help="Path to a reference pair YAML file.")
    parser.add_argument("--iterations", type=int, help="Calls per metric (overrides config).")
    parser.add_argument(
        "--metric",
        action="append",
        choices=sorted(METRICS),
        help="Metric to run; repeat for several. Defaults to the configured metrics.",
    )
    parser.add_argument("--verify-only", action="store_true", help="Check reference values and skip timing.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.iterations is not None and args.iterations < 1:
        print("--iterations must be at least 1", file=sys.stderr)
        return 2

    run_id = uuid.uuid4().hex[:12]
    start = time.perf_counter()
    try:
        config = load_runtime_config(args.config)
        corpus = load_reference_corpus(args.corpus or config.benchmark.corpus_path)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    logger = get_logger("linksim.benchmark", config.logging.level)
    log_config_load(
        logger,
        run_id,
        (time.perf_counter() - start) * 1000.0,
        config.metadata.get("config_version"),
    )

    metrics = args.metric or list(config.benchmark.metrics)
    iterations = args.iterations or config.benchmark.iterations

    mismatches = verify_corpus(corpus, config.benchmark.tolerance, metrics)
    for mismatch in mismatches:
        log_mismatch(logger, run_id, mismatch.metric, mismatch.a, mismatch.b, mismatch.expected, mismatch.actual)

    checked = sum(len(corpus.expecting(metric)) for metric in metrics)
    print(f"Verified {checked} reference values: {len(mismatches)} mismatch(es)")

    if not args.verify_only:
        pairs = list(corpus)
        print(f"{'metric':<14}{'calls':>10}{'total ms':>12}{'us/call':>10}")
        for metric in metrics:
            result = run_benchmark(pairs, metric, iterations)
            log_benchmark(
                logger,
                run_id,
                result.metric,
                result.pair_count,
                result.iterations,
                result.duration_ms,
                result.per_call_us,
            )
            print(f"{result.metric:<14}{result.iterations:>10}{result.duration_ms:>12.2f}{result.per_call_us:>10.2f}")

    return 1 if mismatches else 0


if __name__ == "__main__":
    sys.exit(main())
