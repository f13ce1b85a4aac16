"""
bench.py - Measure hashing cost for a given configuration.

Responsibilities:
- Measure encode and verify time (median over several runs)
- Report how time and working memory grow with mem_cost
- Return results as plain dicts for printing/reporting

Costs are reported, never chosen: picking parameters is up to the caller.
"""

from __future__ import annotations

import dataclasses
import logging
import statistics
import time
from typing import Any, Dict, Iterable, List

from . import hasher
from .config import ScryptConfig

logger = logging.getLogger(__name__)


def _time_ms(fn, rounds: int) -> float:
    timings = []
    for _ in range(rounds):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        timings.append((t1 - t0) * 1000.0)
    return float(statistics.median(timings))


def bench_encode(config: ScryptConfig, password: str, salt: str, rounds: int = 20) -> Dict[str, Any]:
    """Benchmark hasher.encode for one configuration."""
    ms = _time_ms(lambda: hasher.encode(password, salt, config), rounds)
    result = {
        "metric": "encode_median_ms",
        "rounds": rounds,
        "mem_cost": config.mem_cost,
        "memory_bytes": config.memory_required(),
        "value": ms,
    }
    logger.debug("bench %s", result)
    return result


def bench_verify(
    config: ScryptConfig,
    password: str,
    password_hash: str,
    salt: str,
    rounds: int = 20,
) -> Dict[str, Any]:
    """Benchmark hasher.verify. Raises if password does not match."""
    if not hasher.verify(password, password_hash, salt, config):
        raise ValueError("password does not match password_hash; nothing to benchmark")
    ms = _time_ms(lambda: hasher.verify(password, password_hash, salt, config), rounds)
    result = {"metric": "verify_median_ms", "rounds": rounds, "value": ms}
    logger.debug("bench %s", result)
    return result


def bench_mem_costs(
    config: ScryptConfig,
    password: str,
    salt: str,
    mem_costs: Iterable[int],
    rounds: int = 5,
) -> List[Dict[str, Any]]:
    """
    Run bench_encode once per mem_cost, keeping every other parameter.
    Useful to see what raising mem_cost would cost before committing to it.
    """
    results: List[Dict[str, Any]] = []
    for mem_cost in mem_costs:
        cfg = dataclasses.replace(config, mem_cost=mem_cost)
        results.append(bench_encode(cfg, password, salt, rounds=rounds))
    return results
