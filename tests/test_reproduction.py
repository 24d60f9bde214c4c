"""Tests for crossing genotypes and creating the next generation."""

from collections import Counter

import pytest

from heredity.exceptions import ConfigurationError, GeneticsError
from heredity.genetics import BROWN_FUR, WHITE_FUR, GenePool, Genotype
from heredity.population import Breeder, cross, parse_mutations, plan_mutations


def _normals(gene_pool: GenePool, count: int):
    return [Genotype(gene_pool) for _ in range(count)]


def _mutants(births):
    return [birth.genotype for birth in births if birth.genotype.is_original_mutant()]


class TestCross:
    def test_one_square_per_gene(self, gene_pool: GenePool, seeded_rng) -> None:
        squares = cross(Genotype(gene_pool), Genotype(gene_pool), seeded_rng)
        assert [square.gene for square in squares] == list(gene_pool.genes)
        assert all(len(square) == 4 for square in squares)

    def test_different_gene_pools(self, gene_pool: GenePool, seeded_rng) -> None:
        with pytest.raises(GeneticsError, match="different gene pools"):
            cross(Genotype(gene_pool), Genotype(GenePool()), seeded_rng)


class TestPlanMutations:
    def test_nothing_pending(self, seeded_rng) -> None:
        assert plan_mutations([], 28, 1 / 7, seeded_rng) == {}

    def test_nobody_born(self, gene_pool: GenePool, seeded_rng) -> None:
        assert plan_mutations([gene_pool.fur_gene], 0, 1 / 7, seeded_rng) == {}

    def test_percentage_of_births(self, gene_pool: GenePool, seeded_rng) -> None:
        genes = [gene_pool.fur_gene, gene_pool.teeth_gene]
        planned = plan_mutations(genes, 28, 1 / 7, seeded_rng)

        assert Counter(planned.values()) == {gene_pool.fur_gene: 4, gene_pool.teeth_gene: 4}
        assert all(0 <= index < 28 for index in planned)

    def test_at_least_one(self, gene_pool: GenePool, seeded_rng) -> None:
        planned = plan_mutations([gene_pool.ears_gene], 4, 1 / 7, seeded_rng)
        assert list(planned.values()) == [gene_pool.ears_gene]


class TestBreeder:
    def test_rejects_bad_mutation_percentage(self, gene_pool: GenePool) -> None:
        with pytest.raises(ConfigurationError):
            Breeder(gene_pool, mutation_percentage=0.5)

    def test_litter(self, gene_pool: GenePool) -> None:
        gene_pool.fur_gene.set_dominant(BROWN_FUR)
        father = Genotype(gene_pool, father_fur_allele=BROWN_FUR)
        mother = Genotype(gene_pool, mother_fur_allele=BROWN_FUR)
        litter = Breeder(gene_pool).create_litter(father, mother)

        fur = Counter(
            (child.fur_gene_pair.father_allele.key, child.fur_gene_pair.mother_allele.key)
            for child in litter
        )
        assert fur == Counter(
            [
                ("brownFur", "brownFur"),
                ("brownFur", "whiteFur"),
                ("whiteFur", "brownFur"),
                ("whiteFur", "whiteFur"),
            ]
        )
        assert not any(child.is_original_mutant() for child in litter)

    @pytest.mark.parametrize("count, born", [(0, 0), (1, 0), (2, 4), (5, 8), (14, 28)])
    def test_number_born(self, gene_pool: GenePool, count: int, born: int) -> None:
        births = Breeder(gene_pool).mate(_normals(gene_pool, count))
        assert len(births) == born

    def test_parents_are_candidates(self, gene_pool: GenePool) -> None:
        candidates = _normals(gene_pool, 6)
        births = Breeder(gene_pool).mate(candidates)
        for birth in births:
            assert any(birth.father is c for c in candidates)
            assert any(birth.mother is c for c in candidates)
            assert birth.father is not birth.mother

    def test_pending_recessive_mutation(self, gene_pool: GenePool) -> None:
        gene_pool.fur_gene.schedule_mutation(mutant_is_dominant=False)
        breeder = Breeder(gene_pool)

        births = breeder.mate(_normals(gene_pool, 14))

        assert len(births) == 28
        mutants = _mutants(births)
        assert len(mutants) == 4
        assert all(mutant.mutation is BROWN_FUR for mutant in mutants)
        assert all(mutant.fur_gene_pair.is_heterozygous() for mutant in mutants)
        assert not gene_pool.fur_gene.mutation_pending
        assert gene_pool.fur_gene.dominant_allele is WHITE_FUR
        assert len(breeder.recessive_mutants) == 4

    def test_pending_dominant_mutation_is_not_tracked(self, gene_pool: GenePool) -> None:
        gene_pool.teeth_gene.schedule_mutation(mutant_is_dominant=True)
        breeder = Breeder(gene_pool)

        births = breeder.mate(_normals(gene_pool, 14))

        assert len(_mutants(births)) == 4
        assert breeder.recessive_mutants == []

    def test_two_pending_mutations_go_to_different_newborns(self, gene_pool: GenePool) -> None:
        gene_pool.fur_gene.schedule_mutation(mutant_is_dominant=True)
        gene_pool.ears_gene.schedule_mutation(mutant_is_dominant=False)

        births = Breeder(gene_pool).mate(_normals(gene_pool, 14))

        mutations = Counter(mutant.mutation.key for mutant in _mutants(births))
        assert mutations == {"brownFur": 4, "floppyEars": 4}
        assert gene_pool.pending_mutations() == []

    def test_recessive_mutant_mates_eagerly(self, gene_pool: GenePool, seeded_rng) -> None:
        parse_mutations(gene_pool, "f")
        mutant = Genotype(gene_pool, mutate_fur=True, rng=seeded_rng)
        carrier = Genotype(gene_pool, father_fur_allele=BROWN_FUR)
        breeder = Breeder(gene_pool, rng=seeded_rng)
        breeder.recessive_mutants.append(mutant)

        births = breeder.mate([mutant, carrier] + _normals(gene_pool, 2))

        # A full litter plus 1 additional offspring, then the remaining pair.
        assert len(births) == 9
        for birth in births[:5]:
            assert birth.father is mutant
            assert birth.mother is carrier
        additional = births[4].genotype.fur_gene_pair
        assert additional.father_allele is BROWN_FUR
        assert additional.mother_allele is BROWN_FUR
        assert breeder.recessive_mutants == []

    def test_recessive_mutant_without_partner_keeps_waiting(self, gene_pool: GenePool) -> None:
        parse_mutations(gene_pool, "f")
        mutant = Genotype(gene_pool, mutate_fur=True)
        breeder = Breeder(gene_pool)
        breeder.recessive_mutants.append(mutant)

        births = breeder.mate([mutant] + _normals(gene_pool, 3))

        assert len(births) == 8
        assert breeder.recessive_mutants == [mutant]

    def test_recessive_mutants_that_did_not_survive_are_dropped(self, gene_pool: GenePool) -> None:
        parse_mutations(gene_pool, "f")
        breeder = Breeder(gene_pool)
        breeder.recessive_mutants.append(Genotype(gene_pool, mutate_fur=True))

        breeder.mate(_normals(gene_pool, 4))

        assert breeder.recessive_mutants == []

    def test_recessive_mutants_pair_up_next_generation(self, gene_pool: GenePool) -> None:
        gene_pool.fur_gene.schedule_mutation(mutant_is_dominant=False)
        breeder = Breeder(gene_pool)
        first_generation = [birth.genotype for birth in breeder.mate(_normals(gene_pool, 14))]
        assert len(breeder.recessive_mutants) == 4

        births = breeder.mate(first_generation)

        # The 4 mutants are the only brown carriers, so they pair with each other:
        # 2 eager pairs of 5 offspring, and 12 ordinary pairs of 4.
        assert len(births) == 2 * 5 + 12 * 4
        assert breeder.recessive_mutants == []
        eager_parents = {id(parent) for birth in births[:10] for parent in (birth.father, birth.mother)}
        assert all(parent.is_original_mutant() for b in births[:10] for parent in (b.father, b.mother))
        assert len(eager_parents) == 4
