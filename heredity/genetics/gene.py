"""Gene definitions.

A gene is the unit of heredity that is passed from a parent to its offspring
and controls the expression of a trait. An allele is a variation of a gene.
This model assumes exactly 2 alleles per gene: the normal ('wild type') allele
and the mutant allele.

There is one instance of each gene in the GenePool: 1 fur gene, 1 ears gene
and 1 teeth gene. Traits differ only in their data, so there is a single Gene
class with a factory per trait.

Dominance is the effect of one allele masking the expression of the other.
Since dominance is a relationship between 2 alleles, it does not exist until
the mutant allele has appeared: ``dominant_allele`` is None until then.
Every GenePair reads the dominance of its Gene when asked for its visible
allele, so setting dominance here affects the whole population.
"""

import logging
from typing import Optional

from heredity.exceptions import GeneticsError
from heredity.genetics import allele as alleles
from heredity.genetics.allele import Allele

logger = logging.getLogger(__name__)


class Gene:
    """One gene, its two alleles, and the dominance relationship between them.

    State machine for dominance:
        undetermined (dominant_allele is None)
        -> determined (set_dominant / schedule_mutation)
        -> undetermined (reset / cancel_mutation, only before the mutation
           has propagated into the population)
    """

    def __init__(
        self,
        *,
        name: str,
        key: str,
        normal_allele: Allele,
        mutant_allele: Allele,
        dominant_abbreviation: str,
        recessive_abbreviation: str,
    ) -> None:
        if normal_allele is mutant_allele:
            raise GeneticsError(f"{key}: normal and mutant alleles must differ")
        if len(dominant_abbreviation) != 1 or len(recessive_abbreviation) != 1:
            raise GeneticsError(f"{key}: abbreviations must be single characters")
        if dominant_abbreviation == recessive_abbreviation:
            raise GeneticsError(f"{key}: dominant and recessive abbreviations must differ")

        self.name = name
        self.key = key
        self.normal_allele = normal_allele
        self.mutant_allele = mutant_allele
        self.dominant_abbreviation = dominant_abbreviation
        self.recessive_abbreviation = recessive_abbreviation

        self._dominant_allele: Optional[Allele] = None

        # Is a mutation coming in the next generation?
        self.mutation_pending = False

    def __repr__(self) -> str:
        dominant = self._dominant_allele.key if self._dominant_allele else None
        return (
            f"Gene({self.key!r}, dominant={dominant!r}, "
            f"mutation_pending={self.mutation_pending})"
        )

    @property
    def dominant_allele(self) -> Optional[Allele]:
        """The dominant allele, None until the gene has mutated."""
        return self._dominant_allele

    @property
    def recessive_allele(self) -> Optional[Allele]:
        """The recessive allele, None until the gene has mutated."""
        if self._dominant_allele is None:
            return None
        if self._dominant_allele is self.normal_allele:
            return self.mutant_allele
        return self.normal_allele

    @property
    def has_mutated(self) -> bool:
        """Whether a dominance relationship exists."""
        return self._dominant_allele is not None

    def has_allele(self, allele: Optional[Allele]) -> bool:
        """Is the allele one of this gene's two alleles?"""
        return allele is self.normal_allele or allele is self.mutant_allele

    def set_dominant(self, allele: Allele) -> None:
        """Make one of the gene's alleles dominant.

        A gene mutates exactly once; changing dominance requires reset() first.

        Raises:
            GeneticsError: If the allele is not one of this gene's alleles, or
                dominance has already been set.
        """
        if not self.has_allele(allele):
            raise GeneticsError(f"{allele} is not an allele of the {self.key} gene")
        if self._dominant_allele is not None:
            raise GeneticsError(
                f"{self.key} gene already has dominant allele {self._dominant_allele}; reset it first"
            )
        self._dominant_allele = allele
        logger.info("%s gene: %s is dominant, %s is recessive", self.key, allele, self.recessive_allele)

    def schedule_mutation(self, mutant_is_dominant: bool) -> None:
        """Schedule the mutant allele to appear in the next generation.

        This is the request made when a user picks dominant or recessive for
        a new mutation.
        """
        self.set_dominant(self.mutant_allele if mutant_is_dominant else self.normal_allele)
        self.mutation_pending = True

    def cancel_mutation(self) -> None:
        """Cancel a mutation that has been scheduled but not yet applied."""
        if not self.mutation_pending:
            raise GeneticsError(f"{self.key} mutation is not scheduled")
        self.reset()

    def clear_mutation_pending(self) -> None:
        """Mark a scheduled mutation as applied. Dominance is kept."""
        self.mutation_pending = False

    def reset(self) -> None:
        """Clear dominance and any pending mutation."""
        self._dominant_allele = None
        self.mutation_pending = False

    @classmethod
    def create_fur_gene(cls) -> "Gene":
        """Creates a gene for fur."""
        return cls(
            name="Fur",
            key="fur",
            normal_allele=alleles.WHITE_FUR,
            mutant_allele=alleles.BROWN_FUR,
            dominant_abbreviation="F",
            recessive_abbreviation="f",
        )

    @classmethod
    def create_ears_gene(cls) -> "Gene":
        """Creates a gene for ears."""
        return cls(
            name="Ears",
            key="ears",
            normal_allele=alleles.STRAIGHT_EARS,
            mutant_allele=alleles.FLOPPY_EARS,
            dominant_abbreviation="E",
            recessive_abbreviation="e",
        )

    @classmethod
    def create_teeth_gene(cls) -> "Gene":
        """Creates a gene for teeth."""
        return cls(
            name="Teeth",
            key="teeth",
            normal_allele=alleles.SHORT_TEETH,
            mutant_allele=alleles.LONG_TEETH,
            dominant_abbreviation="T",
            recessive_abbreviation="t",
        )
