"""GenePair: the two alleles an individual carries for one gene.

One allele is inherited from each parent. If the alleles are identical the
pair is homozygous, otherwise it is heterozygous.
"""

import logging
import random
from typing import Optional

from heredity.exceptions import GeneticsError
from heredity.genetics.allele import Allele
from heredity.genetics.gene import Gene
from heredity.util.rng import require_rng_param

logger = logging.getLogger(__name__)


class GenePair:
    """A pair of alleles for a specific Gene, one inherited from each parent."""

    def __init__(self, gene: Gene, father_allele: Allele, mother_allele: Allele) -> None:
        for side, allele in (("father", father_allele), ("mother", mother_allele)):
            if not gene.has_allele(allele):
                raise GeneticsError(f"{side} allele {allele} is not an allele of the {gene.key} gene")
        self._gene = gene
        self.father_allele = father_allele
        self.mother_allele = mother_allele

    def __repr__(self) -> str:
        return f"GenePair({self._gene.key!r}, father={self.father_allele}, mother={self.mother_allele})"

    @property
    def gene(self) -> Gene:
        return self._gene

    def mutate(self, mutant_allele: Allele, rng: Optional[random.Random] = None) -> None:
        """Replace one of the two alleles with the mutant allele.

        The mutation goes to the father or the mother allele with equal
        probability, never both. If the mutant allele is recessive it does not
        change appearance now; it shows up in some later generation when a
        homozygous recessive individual is born.
        """
        if mutant_allele is not self._gene.mutant_allele:
            raise GeneticsError(f"{mutant_allele} is not the mutant allele of the {self._gene.key} gene")
        rng = require_rng_param(rng, "GenePair.mutate")
        if rng.random() < 0.5:
            self.father_allele = mutant_allele
            logger.debug("%s: mutation %s applied to father allele", self._gene.key, mutant_allele)
        else:
            self.mother_allele = mutant_allele
            logger.debug("%s: mutation %s applied to mother allele", self._gene.key, mutant_allele)

    def is_homozygous(self) -> bool:
        """Is this gene pair homozygous (same alleles)?"""
        return self.father_allele is self.mother_allele

    def is_heterozygous(self) -> bool:
        """Is this gene pair heterozygous (different alleles)?"""
        return self.father_allele is not self.mother_allele

    def get_visible_allele(self) -> Allele:
        """Get the allele that determines appearance.

        This is how genotype manifests as phenotype. Dominance is read from the
        gene at call time, not cached.

        Raises:
            GeneticsError: If the pair is heterozygous and the gene has no
                dominance relationship. Heterozygous pairs only exist after a
                mutation, so this is a programming error.
        """
        if self.is_homozygous():
            return self.father_allele
        dominant_allele = self._gene.dominant_allele
        if dominant_allele is None:
            raise GeneticsError(
                f"{self._gene.key} gene pair is heterozygous but the gene has no dominant allele"
            )
        return dominant_allele

    def has_allele(self, allele: Optional[Allele]) -> bool:
        """Does this gene pair contain a specific allele?"""
        return self.father_allele is allele or self.mother_allele is allele

    def get_genotype_abbreviation(self, translated: bool = False) -> str:
        """Get the abbreviation for this pair, father first, e.g. 'Ff'.

        Returns the empty string when the gene has no dominance relationship,
        since an abbreviation is meaningless then. Only the untranslated
        abbreviations exist, so ``translated`` does not change the result.
        """
        dominant_allele = self._gene.dominant_allele
        if dominant_allele is None:
            return ""
        dominant = self._gene.dominant_abbreviation
        recessive = self._gene.recessive_abbreviation
        s = dominant if self.father_allele is dominant_allele else recessive
        s += dominant if self.mother_allele is dominant_allele else recessive
        return s
