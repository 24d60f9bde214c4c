"""Value objects describing the varieties that make up an initial population."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

from heredity.genetics.allele import Allele
from heredity.genetics.gene_pool import GenePool
from heredity.genetics.genotype import Genotype


@dataclass(frozen=True)
class PopulationVariety:
    """One genetic variety of the initial population.

    Attributes:
        count: Number of individuals of this variety to create
        genotype_string: The genotype letters this variety was parsed from, e.g. 'FfEE'
        father_*_allele / mother_*_allele: Alleles used to create each individual's genotype
    """

    count: int
    genotype_string: str
    father_fur_allele: Allele
    mother_fur_allele: Allele
    father_ears_allele: Allele
    mother_ears_allele: Allele
    father_teeth_allele: Allele
    mother_teeth_allele: Allele

    def create_genotype(self, gene_pool: GenePool) -> Genotype:
        return Genotype(
            gene_pool,
            father_fur_allele=self.father_fur_allele,
            mother_fur_allele=self.mother_fur_allele,
            father_ears_allele=self.father_ears_allele,
            mother_ears_allele=self.mother_ears_allele,
            father_teeth_allele=self.father_teeth_allele,
            mother_teeth_allele=self.mother_teeth_allele,
        )


def create_initial_genotypes(
    gene_pool: GenePool,
    varieties: Iterable[PopulationVariety],
    rng: Optional[random.Random] = None,
) -> List[Genotype]:
    """Create one Genotype per individual described by the varieties.

    The varieties' order is preserved unless an rng is given, in which case
    the individuals are shuffled.
    """
    genotypes = [
        variety.create_genotype(gene_pool) for variety in varieties for _ in range(variety.count)
    ]
    if rng is not None:
        rng.shuffle(genotypes)
    return genotypes
