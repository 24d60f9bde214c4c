"""Population and mutation configuration constants."""

# The total population described by a population spec must be below this
MAX_POPULATION = 750

# Number of offspring per mating pair. Must be 4, one per Punnett square cell
# (Mendel's Law of Segregation).
LITTER_SIZE = 4

# Fraction of newborns that receive a scheduled mutation. Rounded symmetrically,
# and at least 1 newborn receives it.
MUTATION_PERCENTAGE = 1 / 7

# Mutations are mutually exclusive per individual, and there are 3 genes, so at
# most 1/3 of the newborns can receive any one mutation.
MAX_MUTATION_PERCENTAGE = 1 / 3

# Default mutations and population: no mutations, 1 normal individual
DEFAULT_MUTATIONS = ""
DEFAULT_POPULATION = ("1",)
