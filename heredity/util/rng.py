"""RNG utilities for reproducible inheritance.

Random operations (mutation coin flips, Punnett square shuffles, cell
selection) take an injectable ``random.Random``. These helpers fail loudly
if one was not supplied, rather than silently creating an unseeded fallback.
"""

import random
from typing import Optional


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This error indicates a bug in the caller - every random operation in the
    model must be given a random source so that runs are reproducible.
    """


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        def mutate(self, mutant_allele, rng=None):
            rng = require_rng_param(rng, "GenePair.mutate")
            ...
    """
    if rng is None:
        raise MissingRNGError(
            f"Cannot get RNG: no rng was provided (context: {context}). "
            "Pass a random.Random, or give the GenePool one."
        )
    return rng


def round_symmetric(value: float) -> int:
    """Round half away from zero, so that 2.5 -> 3 and -2.5 -> -3.

    Python's built-in round() uses banker's rounding, which is not what
    population counts want.
    """
    rounded = int(abs(value) + 0.5)
    return rounded if value >= 0 else -rounded
