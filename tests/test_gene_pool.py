import pytest

from heredity.exceptions import GeneticsError
from heredity.genetics import ALL_ALLELES, BROWN_FUR, FLOPPY_EARS, LONG_TEETH, GenePool


def test_genes_in_fixed_order(gene_pool: GenePool) -> None:
    assert [gene.key for gene in gene_pool.genes] == ["fur", "ears", "teeth"]
    assert gene_pool.genes == (gene_pool.fur_gene, gene_pool.ears_gene, gene_pool.teeth_gene)


def test_pools_do_not_share_genes() -> None:
    first, second = GenePool(), GenePool()
    first.fur_gene.set_dominant(BROWN_FUR)
    assert second.fur_gene.dominant_allele is None


def test_get_gene(gene_pool: GenePool) -> None:
    assert gene_pool.get_gene("ears") is gene_pool.ears_gene
    with pytest.raises(GeneticsError, match="Unknown gene"):
        gene_pool.get_gene("tail")


@pytest.mark.parametrize(
    "abbreviation, key",
    [("F", "fur"), ("f", "fur"), ("E", "ears"), ("e", "ears"), ("T", "teeth"), ("t", "teeth")],
)
def test_get_gene_for_abbreviation(gene_pool: GenePool, abbreviation: str, key: str) -> None:
    assert gene_pool.get_gene_for_abbreviation(abbreviation).key == key


@pytest.mark.parametrize("abbreviation", ["x", "1", "", "Ff"])
def test_get_gene_for_unknown_abbreviation(gene_pool: GenePool, abbreviation: str) -> None:
    assert gene_pool.get_gene_for_abbreviation(abbreviation) is None


def test_get_gene_for_allele(gene_pool: GenePool) -> None:
    for allele in ALL_ALLELES:
        assert gene_pool.get_gene_for_allele(allele).has_allele(allele)


def test_pending_mutations_and_reset(gene_pool: GenePool) -> None:
    gene_pool.fur_gene.schedule_mutation(mutant_is_dominant=True)
    gene_pool.teeth_gene.schedule_mutation(mutant_is_dominant=False)
    assert gene_pool.pending_mutations() == [gene_pool.fur_gene, gene_pool.teeth_gene]

    gene_pool.reset_mutation_pending()
    assert gene_pool.pending_mutations() == []
    # Dominance survives once the mutation has been applied.
    assert gene_pool.fur_gene.dominant_allele is BROWN_FUR

    gene_pool.reset()
    assert not any(gene.has_mutated for gene in gene_pool.genes)


def test_is_recessive_mutation(gene_pool: GenePool) -> None:
    assert not gene_pool.is_recessive_mutation(BROWN_FUR)

    gene_pool.fur_gene.set_dominant(BROWN_FUR)
    gene_pool.ears_gene.set_dominant(gene_pool.ears_gene.normal_allele)

    assert not gene_pool.is_recessive_mutation(BROWN_FUR)
    assert gene_pool.is_recessive_mutation(FLOPPY_EARS)
    assert not gene_pool.is_recessive_mutation(LONG_TEETH)
    assert not gene_pool.is_recessive_mutation(None)
