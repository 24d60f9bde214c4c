"""Genetic data model: alleles, genes, gene pairs, crosses, genotypes and phenotypes.

- Allele: one of six singleton variants (normal and mutant, per gene)
- Gene: a trait's two alleles plus the population-wide dominance relationship
- GenePair: an individual's father and mother alleles for one gene
- PunnettSquare: the 4 possible crosses of two gene pairs
- Genotype / Phenotype: an individual's gene pairs, and what they look like
- GenePool: owner of the one fur, ears and teeth Gene
"""

from heredity.genetics.allele import (
    ALL_ALLELES,
    BROWN_FUR,
    FLOPPY_EARS,
    LONG_TEETH,
    SHORT_TEETH,
    STRAIGHT_EARS,
    WHITE_FUR,
    Allele,
)
from heredity.genetics.gene import Gene
from heredity.genetics.gene_pair import GenePair
from heredity.genetics.gene_pool import GenePool
from heredity.genetics.genotype import Genotype
from heredity.genetics.phenotype import Phenotype
from heredity.genetics.punnett_square import Cell, PunnettSquare
from heredity.genetics.validation import assert_valid_genotype, validate_genotype

__all__ = [
    # Alleles
    "Allele",
    "ALL_ALLELES",
    "WHITE_FUR",
    "BROWN_FUR",
    "STRAIGHT_EARS",
    "FLOPPY_EARS",
    "SHORT_TEETH",
    "LONG_TEETH",
    # Core classes
    "Gene",
    "GenePair",
    "GenePool",
    "Genotype",
    "Phenotype",
    # Crossing
    "PunnettSquare",
    "Cell",
    # Validation
    "validate_genotype",
    "assert_valid_genotype",
]
