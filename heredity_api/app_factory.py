"""Application factory and context for the heredity API.

All runtime state lives in an AppContext instead of module-level globals, so
each app (and each test) gets its own GenePool.

Routes are ``async def`` and therefore run one at a time on the event loop;
that keeps dominance changes and phenotype queries on a single writer.

Usage:
------
    app = create_app()

    # For testing
    app = create_app(AppContext(rng=random.Random(42)))
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from fastapi import FastAPI

from heredity import __version__
from heredity.config.settings import PopulationSettings
from heredity.genetics.gene_pool import GenePool
from heredity.population.parser import parse_initial_population
from heredity_api.routers.genes import setup_genes_router
from heredity_api.routers.population import setup_population_router

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Runtime context holding all application state."""

    settings: PopulationSettings = field(default_factory=PopulationSettings)
    rng: random.Random = field(default_factory=random.Random)
    gene_pool: Optional[GenePool] = None

    def __post_init__(self) -> None:
        if self.gene_pool is None:
            self.gene_pool = GenePool(rng=self.rng)


def create_app(context: Optional[AppContext] = None, *, seed_population: bool = True) -> FastAPI:
    """Create the FastAPI app.

    Args:
        context: Runtime context; a default one is created if omitted.
        seed_population: Parse ``context.settings`` into the gene pool at startup.
            A bad spec is a startup error.
    """
    context = context or AppContext()
    context.settings.validate()
    if seed_population:
        parse_initial_population(context.gene_pool, context.settings)

    app = FastAPI(title="Heredity API", version=__version__)
    app.state.context = context
    app.include_router(setup_genes_router(context))
    app.include_router(setup_population_router(context))

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    logger.info("Heredity API created (mutations=%r)", context.settings.mutations)
    return app
