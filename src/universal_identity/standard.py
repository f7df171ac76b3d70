"""Standard identity registrations.

Importing this module populates the process-wide REGISTRY; it is imported
by the package, so the standard set is always in place before use.
"""

from __future__ import annotations

import logging
import operator
from typing import Any

from .missing import Missing, install_rules
from .ops import add_sum, mul_prod
from .registration import define, disambiguate
from .registry import REGISTRY

logger = logging.getLogger(__name__)

STANDARD_OPERATIONS: tuple[Any, ...] = (
    operator.mul,
    operator.add,
    operator.and_,
    operator.or_,
    min,
    max,
    add_sum,
    mul_prod,
)


def install_standard() -> None:
    """Define the standard identities and the missing-value rules in REGISTRY.

    Safe to call again: every step is idempotent.
    """
    for op in STANDARD_OPERATIONS:
        define(op)

    install_rules(REGISTRY)
    disambiguate(min, Missing)
    disambiguate(max, Missing)

    REGISTRY.check_ambiguities()
    logger.debug("Installed standard identities: %r", REGISTRY)


install_standard()
