"""Runtime settings for seeding a population."""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from heredity.config.population import (
    DEFAULT_MUTATIONS,
    DEFAULT_POPULATION,
    MAX_MUTATION_PERCENTAGE,
    MAX_POPULATION,
    MUTATION_PERCENTAGE,
)
from heredity.exceptions import ConfigurationError


@dataclass
class PopulationSettings:
    """Describes the initial population and how mutations spread.

    Attributes:
        mutations: Mutation selector, e.g. 'FeT'. Uppercase = dominant mutant allele,
            lowercase = recessive mutant allele.
        population: Population breakdown, e.g. ('5FFeETt', '5ffeett'), or ('10',)
            when there are no mutations.
        max_population: The total population must be below this.
        mutation_percentage: Fraction of newborns that receive a scheduled mutation.
    """

    mutations: str = DEFAULT_MUTATIONS
    population: Tuple[str, ...] = field(default_factory=lambda: tuple(DEFAULT_POPULATION))
    max_population: int = MAX_POPULATION
    mutation_percentage: float = MUTATION_PERCENTAGE

    def validate(self) -> None:
        """Raise ConfigurationError if the settings are unusable."""
        if not isinstance(self.max_population, int) or self.max_population <= 0:
            raise ConfigurationError(
                f"max_population must be a positive integer, got {self.max_population!r}"
            )
        if not (0 < self.mutation_percentage <= MAX_MUTATION_PERCENTAGE):
            raise ConfigurationError(
                f"mutation_percentage must be in (0, 1/3], got {self.mutation_percentage!r}"
            )

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "PopulationSettings":
        """Build settings from HEREDITY_* environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        population_raw = env.get("HEREDITY_POPULATION")
        population = (
            tuple(token.strip() for token in population_raw.split(",") if token.strip())
            if population_raw
            else tuple(DEFAULT_POPULATION)
        )
        try:
            max_population = int(env.get("HEREDITY_MAX_POPULATION", MAX_POPULATION))
            mutation_percentage = float(
                env.get("HEREDITY_MUTATION_PERCENTAGE", MUTATION_PERCENTAGE)
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid HEREDITY_* setting: {e}") from e

        settings = cls(
            mutations=env.get("HEREDITY_MUTATIONS", DEFAULT_MUTATIONS),
            population=population,
            max_population=max_population,
            mutation_percentage=mutation_percentage,
        )
        settings.validate()
        return settings
