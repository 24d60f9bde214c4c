"""Population endpoints: seed the gene pool from a spec, and cross two genotypes."""

import logging
import random

from fastapi import APIRouter, HTTPException

from heredity.exceptions import HeredityError
from heredity.population.parser import PopulationSpecParser, parse_genotype
from heredity.population.reproduction import cross
from heredity_api.models import (
    CellData,
    CrossRequest,
    CrossResponse,
    GeneCrossData,
    GeneData,
    ParsePopulationRequest,
    ParsePopulationResponse,
    VarietyData,
)

logger = logging.getLogger(__name__)


def setup_population_router(context) -> APIRouter:
    """Create the population router.

    Args:
        context: The AppContext holding the GenePool, settings and rng

    Returns:
        Configured APIRouter
    """
    router = APIRouter(prefix="/api", tags=["population"])

    @router.post("/population/parse", response_model=ParsePopulationResponse)
    async def parse_population(request: ParsePopulationRequest):
        """Reset the gene pool and seed it from a mutations/population spec.

        On a bad spec the gene pool is left reset and 400 is returned.
        """
        gene_pool = context.gene_pool
        gene_pool.reset()
        parser = PopulationSpecParser(gene_pool, max_population=context.settings.max_population)
        try:
            varieties = parser.parse(request.mutations, request.population)
        except HeredityError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e

        return ParsePopulationResponse(
            total_count=sum(variety.count for variety in varieties),
            varieties=[
                VarietyData.from_variety(variety, variety.create_genotype(gene_pool))
                for variety in varieties
            ],
            genes=[GeneData.from_gene(gene) for gene in gene_pool.genes],
        )

    @router.post("/cross", response_model=CrossResponse)
    async def cross_genotypes(request: CrossRequest):
        """Cross two genotypes under the gene pool's current dominance."""
        gene_pool = context.gene_pool
        try:
            father = parse_genotype(gene_pool, request.father, setting_name="father")
            mother = parse_genotype(gene_pool, request.mother, setting_name="mother")
        except HeredityError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e

        rng = random.Random(request.seed) if request.seed is not None else context.rng
        squares = cross(father.create_genotype(gene_pool), mother.create_genotype(gene_pool), rng)
        return CrossResponse(
            father=request.father,
            mother=request.mother,
            crosses=[
                GeneCrossData(
                    gene=square.gene.key,
                    cells=[CellData.from_cell(square.gene, cell) for cell in square],
                )
                for square in squares
            ],
        )

    return router
