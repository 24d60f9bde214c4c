"""Allele definitions.

An allele is a variant form of a gene. The name of an allele and the name of
the phenotype it produces are the same; 'White Fur' describes both.

There is exactly one instance of each allele, created here at import time.
Alleles are compared by identity throughout the model
(``allele is gene.normal_allele``), so constructing additional instances
anywhere else is an error.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from heredity.exceptions import GeneticsError

_CONSTRUCTION_TOKEN = object()


@dataclass(frozen=True, eq=False)
class Allele:
    """A variant of a gene.

    Attributes:
        name: Human-readable name, e.g. 'Brown Fur'
        key: Stable identifier, e.g. 'brownFur'
    """

    name: str
    key: str
    _token: object = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self._token is not _CONSTRUCTION_TOKEN:
            raise GeneticsError(
                f"Allele {self.key!r} cannot be constructed; use the module-level instances"
            )

    def __str__(self) -> str:
        return self.key

    @classmethod
    def by_key(cls, key: str) -> "Allele":
        """Look up one of the singleton alleles by its key."""
        try:
            return _ALLELES_BY_KEY[key]
        except KeyError:
            raise GeneticsError(f"Unknown allele: {key!r}") from None


WHITE_FUR = Allele("White Fur", "whiteFur", _CONSTRUCTION_TOKEN)
BROWN_FUR = Allele("Brown Fur", "brownFur", _CONSTRUCTION_TOKEN)
STRAIGHT_EARS = Allele("Straight Ears", "straightEars", _CONSTRUCTION_TOKEN)
FLOPPY_EARS = Allele("Floppy Ears", "floppyEars", _CONSTRUCTION_TOKEN)
SHORT_TEETH = Allele("Short Teeth", "shortTeeth", _CONSTRUCTION_TOKEN)
LONG_TEETH = Allele("Long Teeth", "longTeeth", _CONSTRUCTION_TOKEN)

ALL_ALLELES: Tuple[Allele, ...] = (
    WHITE_FUR,
    BROWN_FUR,
    STRAIGHT_EARS,
    FLOPPY_EARS,
    SHORT_TEETH,
    LONG_TEETH,
)

_ALLELES_BY_KEY: Dict[str, Allele] = {allele.key: allele for allele in ALL_ALLELES}
