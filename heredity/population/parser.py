"""Parses and validates the settings that describe the initial population.

Two settings describe the initial population:

``mutations``
    Which mutant alleles are present, and whether each is dominant or recessive.
    One character per gene at most::

        Mutation       Dominant   Recessive
        -----------------------------------
        Brown Fur         F           f
        Floppy Ears       E           e
        Long Teeth        T           t

    Valid: 'F', 'f', 'fTe'. Invalid: 'FfEt' (fur appears twice), 'Fx' ('x' is
    not a valid character).

``population``
    If there are no mutations, a single positive integer: the number of
    individuals, all with normal alleles. Otherwise a list of expressions, each
    a count followed by genotype letters. Every mutated gene must appear exactly
    twice in each expression, as an adjacent pair; the first letter of the pair
    is the father allele and the second is the mother allele, so 'Ff' and 'fF'
    are different genotypes.

    Valid: '5FF', '5FF,5Ff,5ff', '5FFeETt,5ffeett', '10' (no mutations).
    Invalid: 'FfEe' (missing count), '10FEfe' (related alleles not paired),
    '20FfEe' with mutations 'F' (ears is not mutated), '10Ff' with mutations
    'FE' (ears missing), '10FfFEe' (fur appears 3 times), '10FFx' ('x').

Parsing sets the dominant allele of each gene named in ``mutations`` and
produces the PopulationVariety records used to create the initial population.
It is all-or-nothing: if anything is invalid, no dominance is left set and
PopulationSpecError is raised.
"""

import logging
import re
from typing import Dict, List, Optional, Sequence

from heredity.config.population import MAX_POPULATION
from heredity.config.settings import PopulationSettings
from heredity.exceptions import HeredityError, PopulationSpecError
from heredity.genetics.allele import Allele
from heredity.genetics.gene import Gene
from heredity.genetics.gene_pool import GenePool
from heredity.population.variety import PopulationVariety

logger = logging.getLogger(__name__)

_COUNT_PATTERN = re.compile(r"[0-9]+")
_LETTER_PATTERN = re.compile(r"[a-zA-Z]")


def _verify(predicate: bool, message: str) -> None:
    """Raise PopulationSpecError with message if predicate is false."""
    if not predicate:
        raise PopulationSpecError(message)


def _parse_count(count_string: str, message: str) -> int:
    _verify(_COUNT_PATTERN.fullmatch(count_string) is not None, message)
    count = int(count_string)
    _verify(count > 0, message)
    return count


def validate_mutations(
    gene_pool: GenePool, mutations: str, *, setting_name: str = "mutations"
) -> List[Gene]:
    """Validate a mutation selector without changing any gene.

    Returns:
        The genes that are represented in the selector, in gene-pool order.

    Raises:
        PopulationSpecError: For an invalid character, a repeated character,
            both abbreviations of the same gene, or a gene that already has a
            dominance relationship.
    """
    mutation_chars = list(mutations)
    for char in mutation_chars:
        _verify(
            gene_pool.get_gene_for_abbreviation(char) is not None,
            f"{setting_name}: {mutations} contains an invalid character: {char!r}",
        )
        _verify(
            mutation_chars.count(char) == 1,
            f"{setting_name}: {mutations} contains {char} more than once",
        )

    mutated_genes = []
    for gene in gene_pool.genes:
        dominant = gene.dominant_abbreviation
        recessive = gene.recessive_abbreviation
        _verify(
            not (dominant in mutation_chars and recessive in mutation_chars),
            f"{setting_name}: {dominant} and {recessive} are mutually exclusive",
        )
        if dominant in mutation_chars or recessive in mutation_chars:
            _verify(
                not gene.has_mutated,
                f"{setting_name}: the {gene.key} gene already has dominant allele {gene.dominant_allele}",
            )
            mutated_genes.append(gene)
    return mutated_genes


def parse_mutations(
    gene_pool: GenePool, mutations: str, *, setting_name: str = "mutations"
) -> List[Gene]:
    """Parse a mutation selector and set dominance on the genes it names.

    An uppercase (dominant) abbreviation makes the mutant allele dominant; a
    lowercase (recessive) abbreviation makes the normal allele dominant.

    Returns:
        The genes that were mutated, in gene-pool order.

    Raises:
        PopulationSpecError: If the selector is invalid, including naming a gene
            that has already mutated. No gene is changed.
    """
    mutated_genes = validate_mutations(gene_pool, mutations, setting_name=setting_name)
    for gene in mutated_genes:
        if gene.dominant_abbreviation in mutations:
            gene.set_dominant(gene.mutant_allele)
        else:
            gene.set_dominant(gene.normal_allele)
    return mutated_genes


def _validate_genotype_string(
    gene_pool: GenePool,
    mutated_genes: Sequence[Gene],
    genotype_string: str,
    setting_name: str,
) -> None:
    for char in genotype_string:
        gene = gene_pool.get_gene_for_abbreviation(char)
        _verify(gene is not None, f"{setting_name}: {genotype_string} contains an invalid character: {char!r}")
        _verify(
            gene in mutated_genes,
            f"{setting_name}: {genotype_string} contains {char}, but the {gene.key} gene has not mutated",
        )

    genotype_error_message = f"{setting_name}: {genotype_string} is an invalid genotype"
    _verify(len(genotype_string) == 2 * len(mutated_genes), genotype_error_message)

    for gene in mutated_genes:
        letters = (gene.dominant_abbreviation, gene.recessive_abbreviation)

        # Exactly 2 alleles for each mutated gene.
        indices = [i for i, char in enumerate(genotype_string) if char in letters]
        _verify(len(indices) == 2, genotype_error_message)

        # The 2 alleles must be paired (adjacent).
        _verify(
            indices[1] == indices[0] + 1,
            f"{setting_name}: {genotype_string} is an invalid genotype, "
            f"{gene.key} alleles must be adjacent",
        )


def _abbreviation_to_allele(gene: Gene, abbreviation: str) -> Allele:
    is_mutant_dominant = gene.dominant_allele is gene.mutant_allele
    is_abbreviation_dominant = abbreviation == gene.dominant_abbreviation
    if is_mutant_dominant == is_abbreviation_dominant:
        return gene.mutant_allele
    return gene.normal_allele


def create_population_variety(
    gene_pool: GenePool, count: int, genotype_string: str
) -> PopulationVariety:
    """Convert a validated genotype expression to a PopulationVariety.

    Letters are assigned in order, the first of each gene's pair to the father
    and the second to the mother. Genes that do not appear default to their
    normal allele.
    """
    father: Dict[str, Optional[Allele]] = {gene.key: None for gene in gene_pool.genes}
    mother: Dict[str, Optional[Allele]] = {gene.key: None for gene in gene_pool.genes}

    for abbreviation in genotype_string:
        gene = gene_pool.get_gene_for_abbreviation(abbreviation)
        allele = _abbreviation_to_allele(gene, abbreviation)
        if father[gene.key] is None:
            father[gene.key] = allele
        else:
            mother[gene.key] = allele

    def pick(alleles: Dict[str, Optional[Allele]], gene: Gene) -> Allele:
        return alleles[gene.key] or gene.normal_allele

    return PopulationVariety(
        count=count,
        genotype_string=genotype_string,
        father_fur_allele=pick(father, gene_pool.fur_gene),
        mother_fur_allele=pick(mother, gene_pool.fur_gene),
        father_ears_allele=pick(father, gene_pool.ears_gene),
        mother_ears_allele=pick(mother, gene_pool.ears_gene),
        father_teeth_allele=pick(father, gene_pool.teeth_gene),
        mother_teeth_allele=pick(mother, gene_pool.teeth_gene),
    )


def parse_population(
    gene_pool: GenePool,
    population: Sequence[str],
    mutated_genes: Sequence[Gene],
    *,
    max_population: int = MAX_POPULATION,
    setting_name: str = "population",
) -> List[PopulationVariety]:
    """Parse the population breakdown into PopulationVariety records, in input order.

    ``mutated_genes`` must already have their dominance set (see parse_mutations).

    Raises:
        PopulationSpecError: If the breakdown is invalid.
    """
    if isinstance(population, str):
        population = population.split(",")

    varieties: List[PopulationVariety] = []

    if not mutated_genes:
        # No mutations, so population must be a positive integer
        count_error_message = f"{setting_name} must be a positive integer"
        _verify(len(population) == 1, count_error_message)
        count = _parse_count(population[0].strip(), count_error_message)
        _verify(
            count < max_population,
            f"{setting_name}: the total population must be < {max_population}",
        )
        varieties.append(create_population_variety(gene_pool, count, ""))
        return varieties

    # The population is described as expressions that give the number of
    # individuals per genotype, e.g. '35FFeEtt'.
    _verify(len(population) > 0, f"{setting_name} value is required")
    total_count = 0
    for raw_expression in population:
        expression = raw_expression.strip()

        # Split into count and genotype, e.g. '35FFeEtt' -> '35' and 'FFeEtt'
        match = _LETTER_PATTERN.search(expression)
        _verify(match is not None, f"{setting_name}: {expression} is missing a genotype")
        first_letter_index = match.start()
        count_string = expression[:first_letter_index]
        genotype_string = expression[first_letter_index:]

        count = _parse_count(
            count_string, f"{setting_name}: {expression} must start with a positive integer"
        )

        total_count += count
        _verify(
            total_count < max_population,
            f"{setting_name}: the total population must be < {max_population}",
        )

        _validate_genotype_string(gene_pool, mutated_genes, genotype_string, setting_name)
        varieties.append(create_population_variety(gene_pool, count, genotype_string))

    _verify(total_count > 0, f"{setting_name}: the total population must be > 0")
    return varieties


class PopulationSpecParser:
    """Parses a mutation selector and population breakdown against one GenePool."""

    def __init__(self, gene_pool: GenePool, *, max_population: int = MAX_POPULATION) -> None:
        self.gene_pool = gene_pool
        self.max_population = max_population

    def parse(self, mutations: str, population: Sequence[str]) -> List[PopulationVariety]:
        """Set dominance for the mutated genes and return the population varieties.

        If the population breakdown is invalid, dominance set by this call is
        cleared before the error propagates.
        """
        mutated_genes = parse_mutations(self.gene_pool, mutations)
        try:
            varieties = parse_population(
                self.gene_pool,
                population,
                mutated_genes,
                max_population=self.max_population,
            )
        except HeredityError:
            for gene in mutated_genes:
                gene.reset()
            raise

        logger.info(
            "Parsed population: %d varieties, %d individuals (mutations=%r)",
            len(varieties),
            sum(variety.count for variety in varieties),
            mutations,
        )
        return varieties


def parse_initial_population(
    gene_pool: GenePool,
    settings: Optional[PopulationSettings] = None,
    *,
    revert_on_error: bool = False,
) -> List[PopulationVariety]:
    """Parse the initial population described by settings.

    Because the mutations and population settings depend on each other, an
    error in either is reported against both. By default the error propagates
    and seeding is aborted. With ``revert_on_error`` a warning is logged and
    the default (one normal individual) population is used instead.
    """
    settings = settings or PopulationSettings()
    parser = PopulationSpecParser(gene_pool, max_population=settings.max_population)
    try:
        return parser.parse(settings.mutations, settings.population)
    except PopulationSpecError as error:
        if not revert_on_error:
            raise
        logger.warning(
            "Population setting error: %s (mutations=%r, population=%r); using defaults",
            error,
            settings.mutations,
            list(settings.population),
        )
        gene_pool.reset()
        defaults = PopulationSettings(max_population=settings.max_population)
        return parser.parse(defaults.mutations, defaults.population)


def parse_genotype(
    gene_pool: GenePool, genotype_string: str, *, setting_name: str = "genotype"
) -> PopulationVariety:
    """Parse genotype letters for one individual under the gene pool's current dominance.

    Every gene that has mutated must appear as an adjacent pair, e.g. 'Ff' when
    only fur has mutated. An empty string describes an all-normal individual
    when no gene has mutated.

    Raises:
        PopulationSpecError: If the letters do not describe a valid genotype.
    """
    mutated_genes = [gene for gene in gene_pool.genes if gene.has_mutated]
    _validate_genotype_string(gene_pool, mutated_genes, genotype_string, setting_name)
    return create_population_variety(gene_pool, 1, genotype_string)
