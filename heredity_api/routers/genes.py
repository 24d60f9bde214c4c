"""Gene endpoints: list genes, schedule and cancel mutations.

These are the requests a control panel makes when a user picks dominant or
recessive for a new mutation, or changes their mind before it is applied.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from heredity.exceptions import GeneticsError
from heredity_api.models import GeneData, ScheduleMutationRequest

logger = logging.getLogger(__name__)


def setup_genes_router(context) -> APIRouter:
    """Create the genes router.

    Args:
        context: The AppContext holding the GenePool

    Returns:
        Configured APIRouter
    """
    router = APIRouter(prefix="/api/genes", tags=["genes"])

    def get_gene(key: str):
        try:
            return context.gene_pool.get_gene(key)
        except GeneticsError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e

    @router.get("", response_model=List[GeneData])
    async def list_genes():
        """List the genes in gene-pool order (fur, ears, teeth)."""
        return [GeneData.from_gene(gene) for gene in context.gene_pool.genes]

    @router.get("/{key}", response_model=GeneData)
    async def get_gene_state(key: str):
        return GeneData.from_gene(get_gene(key))

    @router.post("/{key}/mutation", response_model=GeneData)
    async def schedule_mutation(key: str, request: ScheduleMutationRequest):
        """Schedule the gene's mutation for the next generation."""
        gene = get_gene(key)
        try:
            gene.schedule_mutation(request.mutant_is_dominant)
        except GeneticsError as e:
            raise HTTPException(status_code=409, detail=str(e)) from e
        logger.info("Scheduled %s mutation (mutant dominant=%s)", key, request.mutant_is_dominant)
        return GeneData.from_gene(gene)

    @router.delete("/{key}/mutation", response_model=GeneData)
    async def cancel_mutation(key: str):
        """Cancel a scheduled mutation that has not been applied yet."""
        gene = get_gene(key)
        try:
            gene.cancel_mutation()
        except GeneticsError as e:
            raise HTTPException(status_code=409, detail=str(e)) from e
        logger.info("Cancelled %s mutation", key)
        return GeneData.from_gene(gene)

    return router
