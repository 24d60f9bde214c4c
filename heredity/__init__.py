"""Mendelian inheritance model for a population of bunnies.

The package is split into:

- ``heredity.genetics``: alleles, genes, gene pairs, Punnett squares, genotypes and phenotypes
- ``heredity.population``: parsing of population settings and reproduction
- ``heredity.config``: population constants and settings
"""

__version__ = "1.0.0"
