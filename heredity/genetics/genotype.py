"""Genotype: the genetic blueprint for an individual.

A Genotype has one gene pair for each gene, and can be abbreviated as a
string of letters such as 'FfEEtt'.
"""

import logging
import random
from typing import Optional, Tuple

from heredity.exceptions import GeneticsError
from heredity.genetics.allele import Allele
from heredity.genetics.gene_pair import GenePair
from heredity.genetics.gene_pool import GenePool
from heredity.util.rng import require_rng_param

logger = logging.getLogger(__name__)


class Genotype:
    """The fur, ears and teeth gene pairs of one individual.

    Alleles default to each gene's normal allele. At most one of the
    ``mutate_*`` flags may be set: an individual receives at most 1 new
    mutation.
    """

    def __init__(
        self,
        gene_pool: GenePool,
        *,
        father_fur_allele: Optional[Allele] = None,
        mother_fur_allele: Optional[Allele] = None,
        father_ears_allele: Optional[Allele] = None,
        mother_ears_allele: Optional[Allele] = None,
        father_teeth_allele: Optional[Allele] = None,
        mother_teeth_allele: Optional[Allele] = None,
        mutate_fur: bool = False,
        mutate_ears: bool = False,
        mutate_teeth: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        if sum(bool(flag) for flag in (mutate_fur, mutate_ears, mutate_teeth)) > 1:
            raise GeneticsError("mutations are mutually exclusive")

        self.gene_pool = gene_pool
        fur_gene = gene_pool.fur_gene
        ears_gene = gene_pool.ears_gene
        teeth_gene = gene_pool.teeth_gene

        self.fur_gene_pair = GenePair(
            fur_gene,
            father_fur_allele or fur_gene.normal_allele,
            mother_fur_allele or fur_gene.normal_allele,
        )
        self.ears_gene_pair = GenePair(
            ears_gene,
            father_ears_allele or ears_gene.normal_allele,
            mother_ears_allele or ears_gene.normal_allele,
        )
        self.teeth_gene_pair = GenePair(
            teeth_gene,
            father_teeth_allele or teeth_gene.normal_allele,
            mother_teeth_allele or teeth_gene.normal_allele,
        )

        # The mutation that modified this genotype, if any.
        self.mutation: Optional[Allele] = None

        # Apply the optional mutation after the gene pairs exist, so that an
        # allele is inherited and then modified. This keeps the distribution of
        # alleles in the population correct.
        for flag, gene_pair in (
            (mutate_fur, self.fur_gene_pair),
            (mutate_ears, self.ears_gene_pair),
            (mutate_teeth, self.teeth_gene_pair),
        ):
            if flag:
                rng = require_rng_param(rng or gene_pool.rng, "Genotype.__init__")
                self.mutation = gene_pair.gene.mutant_allele
                gene_pair.mutate(self.mutation, rng)

    def __repr__(self) -> str:
        mutation = self.mutation.key if self.mutation else None
        return (
            f"Genotype(fur={self.fur_gene_pair.father_allele}/{self.fur_gene_pair.mother_allele}, "
            f"ears={self.ears_gene_pair.father_allele}/{self.ears_gene_pair.mother_allele}, "
            f"teeth={self.teeth_gene_pair.father_allele}/{self.teeth_gene_pair.mother_allele}, "
            f"mutation={mutation!r})"
        )

    @property
    def gene_pairs(self) -> Tuple[GenePair, GenePair, GenePair]:
        return (self.fur_gene_pair, self.ears_gene_pair, self.teeth_gene_pair)

    def has_allele(self, allele: Optional[Allele]) -> bool:
        """Does this genotype contain a specific allele?"""
        return any(gene_pair.has_allele(allele) for gene_pair in self.gene_pairs)

    def is_original_mutant(self) -> bool:
        """Did this individual receive a new mutation when it was created?"""
        return self.mutation is not None

    def to_abbreviation(self) -> str:
        """Untranslated abbreviation, e.g. 'FfEEtt'.

        Intended for debugging only. Do not rely on the format!
        """
        return "".join(gene_pair.get_genotype_abbreviation(False) for gene_pair in self.gene_pairs)
