#!/usr/bin/env python3
"""
Fee calculation throughput benchmark.

Accumulates the taker fee on a fixed amount N times per round and reports the
best round, optionally spreading rounds across worker threads.
"""

import argparse
import logging
import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fee_engine.config.logging_config import setup_logging
from fee_engine.fees import Side, fee

logger = logging.getLogger("scripts.benchmark_fees")


def run_round(iterations: int, amount: Decimal, bps: int, side: Side) -> Decimal:
    acc = Decimal('0')
    for _ in range(iterations):
        acc += fee(amount, bps, side)
    return acc


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark the fee function")
    parser.add_argument("--iterations", type=int, default=10_000, help="fee calls per round")
    parser.add_argument("--rounds", type=int, default=5)
    parser.add_argument("--workers", type=int, default=1, help="threads running rounds concurrently")
    parser.add_argument("--amount", default="1234.5678")
    parser.add_argument("--bps", type=int, default=12)
    parser.add_argument("--side", default="taker", choices=[s.value for s in Side])
    args = parser.parse_args(argv)

    setup_logging("INFO")

    amount = Decimal(args.amount)
    side = Side(args.side)
    expected = fee(amount, args.bps, side) * args.iterations

    timings = []
    with ThreadPoolExecutor(max_workers=max(1, args.workers)) as pool:
        for round_number in range(1, args.rounds + 1):
            start = time.perf_counter()
            futures = [pool.submit(run_round, args.iterations, amount, args.bps, side)
                       for _ in range(max(1, args.workers))]
            totals = [f.result() for f in futures]
            elapsed = time.perf_counter() - start
            timings.append(elapsed)

            if any(total != expected for total in totals):
                logger.error(f"Round {round_number}: accumulated fee mismatch, expected {expected}, got {totals}")
                return 1

            calls = args.iterations * max(1, args.workers)
            logger.info(f"Round {round_number}: {calls} calls in {elapsed:.4f}s ({calls / elapsed:,.0f} calls/s)")

    best = min(timings)
    calls = args.iterations * max(1, args.workers)
    logger.info(f"Best round: {best:.4f}s, {best / calls * 1e6:.2f}us per call")
    return 0


if __name__ == "__main__":
    sys.exit(main())
