"""
src/assignment/benchmark.py
──────────────────────────────────────────────────────────────────────────────
Benchmark: brute-force bijective enumeration vs. the linear assignment solver.

The bijective split enumerates every permutation of targets, so it is exact
but O(|T|!). ``scipy.optimize.linear_sum_assignment`` solves the same problem
(minimise total cost, one target per source) in polynomial time. Running both
on random cost matrices checks that the brute force finds the optimum and shows
where it stops being affordable.

Metrics per size:
  • Agreement rate   (brute-force total == LAP total)
  • Candidates       (pairing-sets enumerated per scenario)
  • Solve time       (wall-clock, ms, both solvers)

Usage:
    python -m src.assignment.benchmark                     # 50 scenarios, defaults
    python -m src.assignment.benchmark --scenarios 200
    python -m src.assignment.benchmark --sizes 2x3 4x4 5x7
"""

from __future__ import annotations

import argparse
import functools
import time

import numpy as np
from scipy.optimize import linear_sum_assignment

from src.assignment.enumerators import bijective_split
from src.assignment.optimizer import optimize_and_act_with_diagnostics


# ── Solvers ───────────────────────────────────────────────────────────────────


def brute_force_assignment(cost: np.ndarray) -> tuple[list[tuple[int, int]], float, int]:
    """Minimum-cost one-to-one assignment of rows to columns by enumeration.

    Rows are sources, columns targets; requires n_rows ≤ n_cols.

    Returns:
        (pairs, total_cost, n_candidates_evaluated)
    """
    n_rows, n_cols = cost.shape

    def negated_total(pairing) -> float:
        return -float(sum(cost[r, c] for r, c in pairing))

    selection = optimize_and_act_with_diagnostics(
        range(n_rows),
        range(n_cols),
        functools.partial(bijective_split, unique=True),
        negated_total,
    )
    pairs = [(int(r), int(c)) for r, c in selection.pairing]
    return pairs, -selection.score, selection.n_evaluated


def lap_assignment(cost: np.ndarray) -> tuple[list[tuple[int, int]], float]:
    """Minimum-cost assignment via scipy (Jonker-Volgenant)."""
    row_ind, col_ind = linear_sum_assignment(cost)
    pairs = [(int(r), int(c)) for r, c in zip(row_ind, col_ind)]
    return pairs, float(cost[row_ind, col_ind].sum())


# ── Main benchmark loop ───────────────────────────────────────────────────────


def parse_size(text: str) -> tuple[int, int]:
    """'3x5' → (3, 5)."""
    rows, _, cols = text.lower().partition("x")
    n_rows, n_cols = int(rows), int(cols)
    if n_rows > n_cols:
        raise argparse.ArgumentTypeError(f"sources must not exceed targets: {text}")
    return n_rows, n_cols


def run_benchmark(
    n_scenarios: int = 50,
    sizes: list[tuple[int, int]] | None = None,
    seed: int = 42,
) -> dict[tuple[int, int], dict[str, float]]:
    """Run scenarios, print a comparison table and return the per-size summary."""

    sizes = sizes or [(2, 2), (3, 4), (4, 4), (5, 6), (6, 6)]
    rng = np.random.default_rng(seed)

    print("=" * 80)
    print("  Bijective Assignment Benchmark")
    print("=" * 80)
    print(f"  Scenarios: {n_scenarios}  |  Seed: {seed}")
    print()

    summary: dict[tuple[int, int], dict[str, float]] = {}
    for n_rows, n_cols in sizes:
        agree = 0
        candidates = 0
        brute_ms: list[float] = []
        lap_ms: list[float] = []

        for _ in range(n_scenarios):
            cost = rng.uniform(0.0, 100.0, size=(n_rows, n_cols))

            t0 = time.perf_counter()
            _, brute_total, n_eval = brute_force_assignment(cost)
            brute_ms.append((time.perf_counter() - t0) * 1e3)

            t0 = time.perf_counter()
            _, lap_total = lap_assignment(cost)
            lap_ms.append((time.perf_counter() - t0) * 1e3)

            candidates = n_eval
            if np.isclose(brute_total, lap_total):
                agree += 1

        summary[(n_rows, n_cols)] = {
            "agreement_pct": agree / max(n_scenarios, 1) * 100,
            "candidates": float(candidates),
            "brute_ms": float(np.mean(brute_ms)),
            "lap_ms": float(np.mean(lap_ms)),
        }

    # ── Print results ─────────────────────────────────────────────────────────
    print(f"  {'Size':<10}{'Candidates':>14}{'Agree %':>12}{'Brute (ms)':>14}{'LAP (ms)':>14}")
    print("  " + "─" * 64)
    for (n_rows, n_cols), row in summary.items():
        print(
            f"  {f'{n_rows}x{n_cols}':<10}{int(row['candidates']):>14}"
            f"{row['agreement_pct']:>12.1f}{row['brute_ms']:>14.3f}{row['lap_ms']:>14.3f}"
        )
    print("\n" + "=" * 80)
    return summary


# ── CLI entry point ───────────────────────────────────────────────────────────

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Benchmark brute-force bijective assignment")
    parser.add_argument("--scenarios", type=int, default=50)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument(
        "--sizes",
        nargs="+",
        type=parse_size,
        default=None,
        help="Problem sizes as SOURCESxTARGETS, e.g. 3x4 (default: 2x2 3x4 4x4 5x6 6x6)",
    )
    args = parser.parse_args()
    run_benchmark(args.scenarios, args.sizes, args.seed)
