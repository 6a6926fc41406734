"""
rxstate Fan-out Benchmarks

Measures submit throughput while a growing number of path views observe the
container, and compares literal patches with function updates.
"""

import argparse
import time
from dataclasses import dataclass
from typing import Callable, List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from rxstate import setup

# =============================================================================
# Benchmark Configuration and Metrics
# =============================================================================


@dataclass
class BenchmarkConfig:
    """Benchmark configuration parameters."""

    updates: int = 10_000
    view_counts: tuple = (0, 1, 10, 100)
    observers_per_view: int = 3


CONFIG = BenchmarkConfig()


@dataclass
class BenchmarkResult:
    name: str
    views: int
    updates: int
    seconds: float

    @property
    def ops_per_sec(self) -> float:
        return self.updates / self.seconds if self.seconds else float("inf")


# =============================================================================
# Scenarios
# =============================================================================


def _build(views: int, observers_per_view: int):
    initial = {f"field_{i}": {"value": 0} for i in range(max(views, 1))}
    initial["counter"] = 0
    state = setup(initial)
    sink: List[int] = []
    for i in range(views):
        view = state.select(f"field_{i}", "value")
        for _ in range(observers_per_view):
            view.subscribe(sink.append)
    return state


def bench_patch(views: int, config: BenchmarkConfig) -> BenchmarkResult:
    state = _build(views, config.observers_per_view)
    start = time.perf_counter()
    for n in range(config.updates):
        state.submit({"counter": n})
    elapsed = time.perf_counter() - start
    state.dispose()
    return BenchmarkResult("Patch", views, config.updates, elapsed)


def bench_transform(views: int, config: BenchmarkConfig) -> BenchmarkResult:
    state = _build(views, config.observers_per_view)
    start = time.perf_counter()
    for _ in range(config.updates):
        state.submit(lambda s: {"counter": s["counter"] + 1})
    elapsed = time.perf_counter() - start
    state.dispose()
    return BenchmarkResult("Transform", views, config.updates, elapsed)


def bench_changing_view(views: int, config: BenchmarkConfig) -> BenchmarkResult:
    # Every update changes the value observed by view 0
    state = _build(views, config.observers_per_view)
    start = time.perf_counter()
    for n in range(config.updates):
        state.submit({"field_0": {"value": n + 1}})
    elapsed = time.perf_counter() - start
    state.dispose()
    return BenchmarkResult("Changing view", views, config.updates, elapsed)


SCENARIOS: List[Callable[[int, BenchmarkConfig], BenchmarkResult]] = [
    bench_patch,
    bench_transform,
    bench_changing_view,
]


# =============================================================================
# Reporting
# =============================================================================


def run(config: BenchmarkConfig) -> List[BenchmarkResult]:
    return [
        scenario(views, config)
        for scenario in SCENARIOS
        for views in config.view_counts
    ]


def report(results: List[BenchmarkResult], console: Console) -> None:
    table = Table(title="Submit Throughput")
    table.add_column("Benchmark", style="cyan")
    table.add_column("Views", style="yellow", justify="right")
    table.add_column("Updates/sec", style="green", justify="right")
    table.add_column("Time (sec)", style="blue", justify="right")

    for result in results:
        table.add_row(
            result.name,
            str(result.views),
            f"{result.ops_per_sec:,.0f}",
            f"{result.seconds:.3f}",
        )

    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="rxstate submit fan-out benchmark")
    parser.add_argument("--updates", type=int, help="Updates per scenario")
    parser.add_argument("--views", type=int, nargs="+", help="View counts to try")
    parser.add_argument("--observers", type=int, help="Observers per view")

    args = parser.parse_args()

    if args.updates:
        CONFIG.updates = args.updates
    if args.views:
        CONFIG.view_counts = tuple(args.views)
    if args.observers:
        CONFIG.observers_per_view = args.observers

    console = Console()
    console.print(
        Panel.fit(
            f"{CONFIG.updates:,} updates, {CONFIG.observers_per_view} observers per view",
            title="rxstate",
        )
    )
    report(run(CONFIG), console)


if __name__ == "__main__":
    main()
