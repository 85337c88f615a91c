"""Public entry points that turn requirements into solutions."""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

from pysbc.config.presets import get_preset
from pysbc.config.reference import ReferenceData, get_reference
from pysbc.errors import SolverError, UnknownPresetError
from pysbc.models import SolveFailure, SolveResult
from pysbc.solver.advisory import attach_advisory, check_requirements
from pysbc.solver.builder import build_squad
from pysbc.solver.normalizer import normalize


logger = logging.getLogger(__name__)


def _failure(exc: Exception) -> SolveFailure:
    return SolveFailure(error=str(exc), error_type=type(exc).__name__)


def solve(requirements: Any, *, reference: Optional[ReferenceData] = None) -> SolveResult:
    """Build a squad for ``requirements``.

    Never raises: invalid input and unexpected failures come back as a
    :class:`SolveFailure`.
    """

    start = time.perf_counter()
    try:
        reqs = normalize(requirements)
        squad = build_squad(reqs, reference if reference is not None else get_reference())
        check = check_requirements(squad, reqs)
        solution = attach_advisory(squad, reqs, check)
    except SolverError as exc:
        logger.warning("Error solving SBC requirements: %s", exc)
        return _failure(exc)
    except Exception as exc:  # noqa: BLE001 - callers always get a structured result
        logger.exception("Unexpected error solving SBC requirements")
        return _failure(exc)

    logger.info(
        "Solved %s-player squad – cost %s/%s, chemistry %s/%s, rating %s/%s, success=%s (%.3fs)",
        len(solution.players),
        solution.total_cost,
        reqs.max_cost,
        solution.total_chemistry,
        reqs.min_chemistry,
        solution.total_rating,
        reqs.min_rating,
        solution.success,
        time.perf_counter() - start,
    )
    for warning in solution.warnings:
        logger.info("Solution warning: %s", warning)
    return solution


def quick_solve(preset_name: str, *, reference: Optional[ReferenceData] = None) -> SolveResult:
    """Solve one of the configured challenge presets by name."""

    try:
        requirements = get_preset(preset_name)
    except UnknownPresetError as exc:
        logger.warning("%s", exc)
        return _failure(exc)
    logger.info("Quick solving preset %s", preset_name)
    return solve(requirements, reference=reference)
