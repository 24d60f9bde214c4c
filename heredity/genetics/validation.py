"""Validation helpers for genotypes.

These functions are intended for debugging and safety checks, not hot-path logic.
They help catch subtle bugs (alleles assigned to the wrong gene, heterozygous
pairs before dominance exists) close to the source.
"""

from __future__ import annotations

from typing import List

from heredity.exceptions import GeneticsError
from heredity.genetics.genotype import Genotype


def validate_genotype(genotype: Genotype, *, path: str = "genotype") -> List[str]:
    """Validate a genotype against its gene pool.

    Returns a list of human-readable issues; empty means valid.
    """
    issues: List[str] = []
    for gene_pair in genotype.gene_pairs:
        gene = gene_pair.gene
        pair_path = f"{path}.{gene.key}"
        if gene not in genotype.gene_pool.genes:
            issues.append(f"{pair_path}: gene is not part of the genotype's gene pool")
        for side in ("father_allele", "mother_allele"):
            allele = getattr(gene_pair, side)
            if not gene.has_allele(allele):
                issues.append(f"{pair_path}.{side}: {allele} is not an allele of the {gene.key} gene")
        if gene_pair.is_heterozygous() and gene.dominant_allele is None:
            issues.append(f"{pair_path}: heterozygous but the gene has no dominant allele")

    if genotype.mutation is not None and not genotype.has_allele(genotype.mutation):
        issues.append(f"{path}.mutation: {genotype.mutation} is not present in any gene pair")
    return issues


def assert_valid_genotype(genotype: Genotype, *, path: str = "genotype") -> None:
    """Raise GeneticsError listing every issue found by validate_genotype."""
    issues = validate_genotype(genotype, path=path)
    if issues:
        raise GeneticsError("Invalid genotype: " + "; ".join(issues))
