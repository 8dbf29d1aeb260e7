from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class CityCountError(ValueError):
    """Raised when a city graph is requested with an unsupported number of cities."""


class InvariantViolation(RuntimeError):
    """Raised when a solver contract is broken by its caller or by the graph."""


def contract_failure(message: str) -> InvariantViolation:
    logger.error("%s", message)
    return InvariantViolation(message)


__all__ = ["CityCountError", "InvariantViolation", "contract_failure"]
