"""Heredity exception hierarchy.

Centralised base classes so callers can catch model failures narrowly
instead of relying on bare ``except Exception`` blocks.
"""


class HeredityError(Exception):
    """Root of all heredity domain exceptions."""


class GeneticsError(HeredityError, ValueError):
    """A precondition of the genetic data model was violated."""


class CellIndexError(GeneticsError, IndexError):
    """A Punnett square cell was requested with an out-of-range index."""


class PopulationSpecError(HeredityError, ValueError):
    """Malformed mutations or population setting."""


class ConfigurationError(HeredityError):
    """Invalid or missing configuration."""
