"""Punnett square for crossing two gene pairs.

A Punnett square predicts the possible genotypes that result from breeding
two individuals. It has 4 cells, the ways that 2 pairs of alleles can be
crossed. For two parents that are heterozygous ('Ff') for fur::

        F    f
   F | FF | Ff |
   f | Ff | ff |

This models Mendelian inheritance and the Law of Segregation. The cells are
shuffled so that taking cells by index does not favour any combination,
which gives the Law of Independent Assortment across genes.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from heredity.exceptions import CellIndexError, GeneticsError
from heredity.genetics.allele import Allele
from heredity.genetics.gene_pair import GenePair
from heredity.util.rng import require_rng_param

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cell:
    """One specific cross: the allele from the father and the allele from the mother."""

    father_allele: Allele
    mother_allele: Allele

    def is_homozygous_for(self, allele: Allele) -> bool:
        return self.father_allele is allele and self.mother_allele is allele

    def has_allele(self, allele: Optional[Allele]) -> bool:
        return self.father_allele is allele or self.mother_allele is allele


class PunnettSquare:
    """The 4 possible crosses of a father and a mother gene pair, in random order."""

    def __init__(
        self,
        father_gene_pair: GenePair,
        mother_gene_pair: GenePair,
        rng: Optional[random.Random] = None,
    ) -> None:
        if father_gene_pair.gene is not mother_gene_pair.gene:
            raise GeneticsError(
                f"cannot cross a {father_gene_pair.gene.key} gene pair with a "
                f"{mother_gene_pair.gene.key} gene pair"
            )
        self._rng = require_rng_param(rng, "PunnettSquare.__init__")
        self.gene = father_gene_pair.gene

        cells = [
            Cell(father_gene_pair.father_allele, mother_gene_pair.father_allele),
            Cell(father_gene_pair.father_allele, mother_gene_pair.mother_allele),
            Cell(father_gene_pair.mother_allele, mother_gene_pair.father_allele),
            Cell(father_gene_pair.mother_allele, mother_gene_pair.mother_allele),
        ]
        self._rng.shuffle(cells)
        self._cells: List[Cell] = cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    def get_cell(self, index: int) -> Cell:
        """Get a cell by index. The cells are stored in random order."""
        if not 0 <= index < len(self._cells):
            raise CellIndexError(f"invalid Punnett square index: {index}")
        return self._cells[index]

    def get_random_cell(self) -> Cell:
        return self._rng.choice(self._cells)

    def get_additional_cell(self, mutant_allele: Allele, dominant_allele: Optional[Allele]) -> Cell:
        """Get the cell to use for an additional (5th) offspring.

        Used when a recessive mutant mates eagerly. First choice is a cell that
        is homozygous for the mutation, second choice is the first cell with
        the dominant allele, and a random cell is the last resort.
        """
        for cell in self._cells:
            if cell.is_homozygous_for(mutant_allele):
                logger.debug("%s: additional cell is homozygous %s", self.gene.key, mutant_allele)
                return cell

        if dominant_allele is not None:
            for cell in self._cells:
                if cell.has_allele(dominant_allele):
                    logger.debug("%s: additional cell has dominant %s", self.gene.key, dominant_allele)
                    return cell

        return self.get_random_cell()
