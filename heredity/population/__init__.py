"""Population seeding and reproduction.

- PopulationSpecParser / parse_initial_population: turn the mutations and
  population settings into PopulationVariety records
- create_initial_genotypes: one Genotype per individual of each variety
- Breeder: crosses genotypes into the next generation
"""

from heredity.population.parser import (
    PopulationSpecParser,
    parse_genotype,
    parse_initial_population,
    parse_mutations,
    parse_population,
    validate_mutations,
)
from heredity.population.reproduction import Birth, Breeder, cross, plan_mutations
from heredity.population.variety import PopulationVariety, create_initial_genotypes

__all__ = [
    # Parsing
    "PopulationSpecParser",
    "parse_genotype",
    "parse_initial_population",
    "parse_mutations",
    "parse_population",
    "validate_mutations",
    # Seeding
    "PopulationVariety",
    "create_initial_genotypes",
    # Reproduction
    "Birth",
    "Breeder",
    "cross",
    "plan_mutations",
]
