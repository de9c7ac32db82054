"""Concurrent analysis of several requests."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from .config import Config
from .inputs import AnalysisRequest
from .pipeline import AnalysisResult, Analyzer

logger = logging.getLogger(__name__)


def analyze_many(
    requests: list[AnalysisRequest],
    workers: int = 2,
    config: Config | None = None,
) -> list[AnalysisResult]:
    """Analyze ``requests`` on a bounded thread pool.

    Results come back in input order. A single Analyzer is shared by the
    workers; it holds no per-request state.
    """
    if workers <= 0:
        raise ValueError(f"workers must be positive, got {workers}")
    if not requests:
        return []

    analyzer = Analyzer(config)
    logger.info("Analyzing %d request(s) with %d worker(s)", len(requests), workers)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(analyzer.analyze_request, requests))
