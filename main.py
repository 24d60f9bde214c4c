"""Main entry point for the heredity model.

This module provides command-line options to:
- parse: validate a mutations/population spec and show the resulting varieties
- cross: show the Punnett squares for two genotypes
- serve: run the HTTP API with uvicorn
"""

import argparse
import logging
import random
import sys

from heredity_api.logging_config import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_API_PORT = 8000
SEPARATOR_WIDTH = 60
EXIT_SPEC_ERROR = 2


def run_parse(mutations: str, population, max_population: int) -> int:
    """Parse a population spec and log each variety with its phenotype."""
    from heredity.config.settings import PopulationSettings
    from heredity.exceptions import HeredityError
    from heredity.genetics import GenePool, Phenotype
    from heredity.population import parse_initial_population

    gene_pool = GenePool()
    settings = PopulationSettings(
        mutations=mutations, population=tuple(population), max_population=max_population
    )
    try:
        settings.validate()
        varieties = parse_initial_population(gene_pool, settings)
    except HeredityError as e:
        logger.error("Invalid population spec: %s", e)
        return EXIT_SPEC_ERROR

    logger.info("=" * SEPARATOR_WIDTH)
    for gene in gene_pool.genes:
        logger.info(
            "%-6s dominant=%s recessive=%s",
            gene.key,
            gene.dominant_allele or "-",
            gene.recessive_allele or "-",
        )
    logger.info("=" * SEPARATOR_WIDTH)
    for variety in varieties:
        genotype = variety.create_genotype(gene_pool)
        phenotype = Phenotype(genotype)
        logger.info(
            "%4d x %-8s %s / %s / %s",
            variety.count,
            genotype.to_abbreviation() or "(normal)",
            phenotype.fur_allele.name,
            phenotype.ears_allele.name,
            phenotype.teeth_allele.name,
        )
    logger.info("Total: %d", sum(variety.count for variety in varieties))
    return 0


def run_cross(mutations: str, father: str, mother: str, seed=None) -> int:
    """Set dominance from mutations, then log the Punnett square for each gene."""
    from heredity.exceptions import HeredityError
    from heredity.genetics import GenePool
    from heredity.population import cross, parse_genotype, parse_mutations

    gene_pool = GenePool(rng=random.Random(seed))
    try:
        parse_mutations(gene_pool, mutations)
        father_variety = parse_genotype(gene_pool, father, setting_name="father")
        mother_variety = parse_genotype(gene_pool, mother, setting_name="mother")
    except HeredityError as e:
        logger.error("Invalid genotype: %s", e)
        return EXIT_SPEC_ERROR

    squares = cross(
        father_variety.create_genotype(gene_pool),
        mother_variety.create_genotype(gene_pool),
        gene_pool.rng,
    )
    for square in squares:
        if not square.gene.has_mutated:
            continue
        logger.info("%s:", square.gene.name)
        for index, cell in enumerate(square):
            logger.info("  cell %d: %s x %s", index, cell.father_allele.name, cell.mother_allele.name)
    return 0


def run_web_server(port: int) -> int:
    """Run the API server."""
    import uvicorn

    from heredity.config.settings import PopulationSettings
    from heredity_api.app_factory import AppContext, create_app

    app = create_app(AppContext(settings=PopulationSettings.from_env()))
    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("HEREDITY API")
    logger.info("API docs available at http://localhost:%d/docs", port)
    logger.info("=" * SEPARATOR_WIDTH)
    uvicorn.run(app, host="0.0.0.0", port=port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Mendelian inheritance for a population of bunnies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 10 bunnies, all normal
  python main.py parse --population 10

  # Dominant brown fur, recessive floppy ears
  python main.py parse --mutations Fe --population 5FFee 5Ffee 5ffEe

  # Cross two heterozygous bunnies
  python main.py cross --mutations F --father Ff --mother Ff --seed 42

  # Run the API server
  python main.py serve --port 8000
        """,
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: HEREDITY_LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse a population spec")
    parse_cmd.add_argument("--mutations", default="", help="Mutation selector, e.g. FeT")
    parse_cmd.add_argument(
        "--population", nargs="+", default=["1"], help="Population breakdown, e.g. 5FFee 5ffEe"
    )
    parse_cmd.add_argument("--max-population", type=int, default=None, help="Total population must be below this")

    cross_cmd = subparsers.add_parser("cross", help="Show the Punnett squares for two genotypes")
    cross_cmd.add_argument("--mutations", default="", help="Mutation selector, e.g. FeT")
    cross_cmd.add_argument("--father", default="", help="Father genotype letters, e.g. Ff")
    cross_cmd.add_argument("--mother", default="", help="Mother genotype letters, e.g. Ff")
    cross_cmd.add_argument("--seed", type=int, default=None, help="Random seed (optional)")

    serve_cmd = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_cmd.add_argument("--port", type=int, default=DEFAULT_API_PORT, help="Port (default: 8000)")
    return parser


def main(argv=None) -> int:
    """Parse command-line arguments and run the requested command."""
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, serving=args.command == "serve")

    if args.command == "parse":
        from heredity.config.population import MAX_POPULATION

        max_population = args.max_population if args.max_population is not None else MAX_POPULATION
        return run_parse(args.mutations, args.population, max_population)
    if args.command == "cross":
        return run_cross(args.mutations, args.father, args.mother, seed=args.seed)
    return run_web_server(args.port)


if __name__ == "__main__":
    sys.exit(main())
