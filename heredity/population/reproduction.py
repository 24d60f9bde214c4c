"""Reproduction: crossing genotypes to create the next generation.

Candidates are paired up at random and each pair has a litter of 4, child
``j`` taking cell ``j`` of the Punnett square for each gene. Because each
square is shuffled independently, the genes are inherited independently.

Mutations scheduled on the gene pool are applied to newborns as they are
born. Newborns that carry a new recessive mutation are remembered and, in
later generations, 'mate eagerly' with another individual that carries the
same mutant allele so that the mutation shows up in the phenotype sooner.
See the Recessive Mutants notes on Breeder.mate_eagerly.
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from heredity.config.population import LITTER_SIZE, MAX_MUTATION_PERCENTAGE, MUTATION_PERCENTAGE
from heredity.exceptions import ConfigurationError, GeneticsError
from heredity.genetics.gene import Gene
from heredity.genetics.gene_pool import GenePool
from heredity.genetics.genotype import Genotype
from heredity.genetics.punnett_square import Cell, PunnettSquare
from heredity.util.rng import require_rng_param, round_symmetric

logger = logging.getLogger(__name__)

if LITTER_SIZE != 4:
    raise ConfigurationError("LITTER_SIZE must be 4, one offspring per Punnett square cell")


@dataclass(frozen=True)
class Birth:
    """A newborn and the parents it was crossed from."""

    genotype: Genotype
    father: Genotype
    mother: Genotype


def cross(father: Genotype, mother: Genotype, rng: random.Random) -> Tuple[PunnettSquare, ...]:
    """Punnett squares for each gene of two genotypes, in gene-pool order."""
    if father.gene_pool is not mother.gene_pool:
        raise GeneticsError("cannot cross genotypes from different gene pools")
    return tuple(
        PunnettSquare(father_pair, mother_pair, rng)
        for father_pair, mother_pair in zip(father.gene_pairs, mother.gene_pairs)
    )


def genotype_from_cells(
    gene_pool: GenePool,
    cells: Sequence[Cell],
    *,
    mutation: Optional[Gene] = None,
    rng: Optional[random.Random] = None,
) -> Genotype:
    """Create a genotype from one cell per gene (fur, ears, teeth), optionally mutating one gene."""
    fur_cell, ears_cell, teeth_cell = cells
    return Genotype(
        gene_pool,
        father_fur_allele=fur_cell.father_allele,
        mother_fur_allele=fur_cell.mother_allele,
        father_ears_allele=ears_cell.father_allele,
        mother_ears_allele=ears_cell.mother_allele,
        father_teeth_allele=teeth_cell.father_allele,
        mother_teeth_allele=teeth_cell.mother_allele,
        mutate_fur=mutation is gene_pool.fur_gene,
        mutate_ears=mutation is gene_pool.ears_gene,
        mutate_teeth=mutation is gene_pool.teeth_gene,
        rng=rng,
    )


def plan_mutations(
    genes: Sequence[Gene],
    number_to_be_born: int,
    mutation_percentage: float,
    rng: random.Random,
) -> Dict[int, Gene]:
    """Choose which newborns (by birth index) receive each pending mutation.

    Each gene mutates ``max(1, round(mutation_percentage * number_to_be_born))``
    newborns. Indices are taken from one shuffled list, so a newborn receives
    at most one mutation.
    """
    if not genes or number_to_be_born <= 0:
        return {}
    number_to_mutate = max(1, round_symmetric(mutation_percentage * number_to_be_born))
    indices = list(range(number_to_be_born))
    rng.shuffle(indices)

    planned: Dict[int, Gene] = {}
    for gene in genes:
        selected, indices = indices[:number_to_mutate], indices[number_to_mutate:]
        for index in selected:
            planned[index] = gene
    return planned


class Breeder:
    """Mates a population of genotypes that share one GenePool."""

    def __init__(
        self,
        gene_pool: GenePool,
        *,
        rng: Optional[random.Random] = None,
        mutation_percentage: float = MUTATION_PERCENTAGE,
    ) -> None:
        if not (0 < mutation_percentage <= MAX_MUTATION_PERCENTAGE):
            raise ConfigurationError(
                f"mutation_percentage must be in (0, 1/3], got {mutation_percentage!r}"
            )
        self.gene_pool = gene_pool
        self.rng = require_rng_param(rng or gene_pool.rng, "Breeder.__init__")
        self.mutation_percentage = mutation_percentage

        # Original mutants whose mutation is recessive, waiting to mate eagerly.
        self.recessive_mutants: List[Genotype] = []

    def create_litter(self, father: Genotype, mother: Genotype) -> List[Genotype]:
        """Create LITTER_SIZE offspring of two genotypes, without mutations."""
        squares = cross(father, mother, self.rng)
        return [
            genotype_from_cells(self.gene_pool, [square.get_cell(i) for square in squares])
            for i in range(LITTER_SIZE)
        ]

    def mate(self, candidates: Sequence[Genotype]) -> List[Birth]:
        """Randomly pair up candidates and create the next generation.

        Any candidate can mate with any other. With an odd number of candidates
        one of them does not mate. Pending mutations on the gene pool are
        applied to the newborns and then cleared.
        """
        # Recessive mutants that are no longer candidates will never mate.
        self.recessive_mutants = [
            mutant for mutant in self.recessive_mutants if any(mutant is c for c in candidates)
        ]

        genotypes = list(candidates)
        self.rng.shuffle(genotypes)
        logger.debug("mating %d genotypes", len(genotypes))

        births: List[Birth] = []
        if self.recessive_mutants:
            births.extend(self.mate_eagerly(genotypes))

        number_to_be_born = (len(genotypes) // 2) * LITTER_SIZE

        pending = self.gene_pool.pending_mutations()
        self.gene_pool.reset_mutation_pending()
        planned = plan_mutations(pending, number_to_be_born, self.mutation_percentage, self.rng)

        born_index = 0
        for i in range(1, len(genotypes), 2):
            father = genotypes[i]
            mother = genotypes[i - 1]
            squares = cross(father, mother, self.rng)
            for j in range(LITTER_SIZE):
                child = genotype_from_cells(
                    self.gene_pool,
                    [square.get_cell(j) for square in squares],
                    mutation=planned.get(born_index),
                    rng=self.rng,
                )
                born_index += 1
                births.append(Birth(child, father, mother))

                if child.is_original_mutant() and self.gene_pool.is_recessive_mutation(child.mutation):
                    logger.debug("adding to recessive mutants: %r", child)
                    self.recessive_mutants.append(child)

        logger.info("%d offspring were born", len(births))
        return births

    def mate_eagerly(self, genotypes: List[Genotype]) -> List[Birth]:
        """Mate each recessive mutant with a genotype that has the same mutation.

        The purpose is to make a recessive mutation appear in the phenotype
        sooner. Each such pair has a full litter plus 1 additional offspring
        chosen by PunnettSquare.get_additional_cell, which prefers a cell that
        is homozygous for the mutation. No new mutations are applied here.

        Pairs that mate are removed from ``genotypes`` (modified in place) and
        from the recessive mutants.
        """
        births: List[Birth] = []
        mutants_mated = 0
        waiting = list(self.recessive_mutants)

        while waiting:
            mutant_father = waiting.pop(0)
            mutant_allele = mutant_father.mutation
            mutant_mother = next(
                (g for g in genotypes if g is not mutant_father and g.has_allele(mutant_allele)),
                None,
            )
            if mutant_mother is None:
                continue

            logger.debug("recessive mutant %r is mating with %r", mutant_father, mutant_mother)
            mutants_mated += 1

            squares = cross(mutant_father, mutant_mother, self.rng)
            for i in range(LITTER_SIZE):
                child = genotype_from_cells(self.gene_pool, [square.get_cell(i) for square in squares])
                births.append(Birth(child, mutant_father, mutant_mother))

            # 1 additional offspring, to make the recessive allele show up sooner
            additional_cells = [
                square.get_additional_cell(mutant_allele, square.gene.dominant_allele)
                for square in squares
            ]
            child = genotype_from_cells(self.gene_pool, additional_cells)
            births.append(Birth(child, mutant_father, mutant_mother))

            _remove_identity(genotypes, mutant_father)
            _remove_identity(genotypes, mutant_mother)
            _remove_identity(self.recessive_mutants, mutant_father)

            # The mother may also be a recessive mutant, from the same or a later generation.
            if _remove_identity(self.recessive_mutants, mutant_mother):
                mutants_mated += 1
                _remove_identity(waiting, mutant_mother)

        if mutants_mated > 0:
            logger.info(
                "%d recessive mutants mated eagerly to birth %d offspring", mutants_mated, len(births)
            )
        return births


def _remove_identity(items: List[Genotype], target: Genotype) -> bool:
    """Remove target from items by identity. Returns whether it was present."""
    for index, item in enumerate(items):
        if item is target:
            del items[index]
            return True
    return False
