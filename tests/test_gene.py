import pytest

from heredity.exceptions import GeneticsError
from heredity.genetics import BROWN_FUR, FLOPPY_EARS, WHITE_FUR, Gene


@pytest.fixture
def fur_gene() -> Gene:
    return Gene.create_fur_gene()


def test_new_gene_has_no_dominance(fur_gene: Gene) -> None:
    assert fur_gene.normal_allele is WHITE_FUR
    assert fur_gene.mutant_allele is BROWN_FUR
    assert fur_gene.dominant_allele is None
    assert fur_gene.recessive_allele is None
    assert fur_gene.has_mutated is False
    assert fur_gene.mutation_pending is False


def test_set_dominant_mutant(fur_gene: Gene) -> None:
    fur_gene.set_dominant(BROWN_FUR)
    assert fur_gene.dominant_allele is BROWN_FUR
    assert fur_gene.recessive_allele is WHITE_FUR


def test_set_dominant_normal(fur_gene: Gene) -> None:
    fur_gene.set_dominant(WHITE_FUR)
    assert fur_gene.dominant_allele is WHITE_FUR
    assert fur_gene.recessive_allele is BROWN_FUR


def test_set_dominant_rejects_foreign_allele(fur_gene: Gene) -> None:
    with pytest.raises(GeneticsError, match="not an allele of the fur gene"):
        fur_gene.set_dominant(FLOPPY_EARS)
    assert fur_gene.dominant_allele is None


def test_set_dominant_twice_requires_reset(fur_gene: Gene) -> None:
    fur_gene.set_dominant(BROWN_FUR)
    with pytest.raises(GeneticsError, match="already has dominant allele"):
        fur_gene.set_dominant(WHITE_FUR)

    fur_gene.reset()
    fur_gene.set_dominant(WHITE_FUR)
    assert fur_gene.dominant_allele is WHITE_FUR


def test_schedule_and_cancel_mutation(fur_gene: Gene) -> None:
    fur_gene.schedule_mutation(mutant_is_dominant=False)
    assert fur_gene.mutation_pending is True
    assert fur_gene.dominant_allele is WHITE_FUR

    fur_gene.cancel_mutation()
    assert fur_gene.mutation_pending is False
    assert fur_gene.dominant_allele is None


def test_cancel_without_pending_mutation_fails(fur_gene: Gene) -> None:
    fur_gene.set_dominant(BROWN_FUR)
    with pytest.raises(GeneticsError, match="not scheduled"):
        fur_gene.cancel_mutation()
    assert fur_gene.dominant_allele is BROWN_FUR


def test_clear_mutation_pending_keeps_dominance(fur_gene: Gene) -> None:
    fur_gene.schedule_mutation(mutant_is_dominant=True)
    fur_gene.clear_mutation_pending()
    assert fur_gene.mutation_pending is False
    assert fur_gene.dominant_allele is BROWN_FUR


@pytest.mark.parametrize(
    "factory, key, dominant, recessive",
    [
        (Gene.create_fur_gene, "fur", "F", "f"),
        (Gene.create_ears_gene, "ears", "E", "e"),
        (Gene.create_teeth_gene, "teeth", "T", "t"),
    ],
)
def test_factories(factory, key, dominant, recessive) -> None:
    gene = factory()
    assert gene.key == key
    assert gene.dominant_abbreviation == dominant
    assert gene.recessive_abbreviation == recessive
    assert gene.has_allele(gene.normal_allele)
    assert gene.has_allele(gene.mutant_allele)
