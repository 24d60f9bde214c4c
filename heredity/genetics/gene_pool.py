"""GenePool: the pool of genes shared by a population.

There is one GenePool per simulated population. It owns the only fur, ears and
teeth Gene instances, and is passed to everything that needs to resolve
dominance, instead of the genes being module-level globals.
"""

import random
from typing import List, Optional, Tuple

from heredity.exceptions import GeneticsError
from heredity.genetics.allele import Allele
from heredity.genetics.gene import Gene


class GenePool:
    """The 3 genes of a population, plus the random source used with them."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.fur_gene = Gene.create_fur_gene()
        self.ears_gene = Gene.create_ears_gene()
        self.teeth_gene = Gene.create_teeth_gene()

        # Where genes are iterated, this order determines the order of results.
        self.genes: Tuple[Gene, ...] = (self.fur_gene, self.ears_gene, self.teeth_gene)

        # Default random source for consumers that are not given one.
        self.rng = rng

    def __repr__(self) -> str:
        return f"GenePool({list(self.genes)!r})"

    def reset(self) -> None:
        for gene in self.genes:
            gene.reset()

    def reset_mutation_pending(self) -> None:
        """Clear mutation_pending on all genes.

        Called after a mating cycle has completed and the mutations have been applied.
        """
        for gene in self.genes:
            gene.clear_mutation_pending()

    def pending_mutations(self) -> List[Gene]:
        """Genes with a mutation scheduled for the next generation."""
        return [gene for gene in self.genes if gene.mutation_pending]

    def is_recessive_mutation(self, allele: Optional[Allele]) -> bool:
        """Is the specified allele a recessive mutation?"""
        return any(
            gene.mutant_allele is allele and gene.recessive_allele is allele for gene in self.genes
        )

    def get_gene(self, key: str) -> Gene:
        """Look up a gene by key ('fur', 'ears' or 'teeth')."""
        for gene in self.genes:
            if gene.key == key:
                return gene
        raise GeneticsError(f"Unknown gene: {key!r}")

    def get_gene_for_abbreviation(self, abbreviation: str) -> Optional[Gene]:
        """Find the gene whose dominant or recessive abbreviation is this character."""
        for gene in self.genes:
            if abbreviation in (gene.dominant_abbreviation, gene.recessive_abbreviation):
                return gene
        return None

    def get_gene_for_allele(self, allele: Allele) -> Gene:
        for gene in self.genes:
            if gene.has_allele(allele):
                return gene
        raise GeneticsError(f"{allele} does not belong to any gene in the pool")
