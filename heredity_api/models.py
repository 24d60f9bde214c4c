"""Request and response models for the heredity API."""

from typing import List, Optional

from pydantic import BaseModel, Field

from heredity.genetics.gene import Gene
from heredity.genetics.gene_pair import GenePair
from heredity.genetics.genotype import Genotype
from heredity.genetics.phenotype import Phenotype
from heredity.genetics.punnett_square import Cell
from heredity.population.variety import PopulationVariety


class GeneData(BaseModel):
    """A gene and its dominance state."""

    key: str
    name: str
    normal_allele: str
    mutant_allele: str
    dominant_abbreviation: str
    recessive_abbreviation: str
    dominant_allele: Optional[str] = None  # null until the gene has mutated
    recessive_allele: Optional[str] = None
    mutation_pending: bool = False

    @classmethod
    def from_gene(cls, gene: Gene) -> "GeneData":
        return cls(
            key=gene.key,
            name=gene.name,
            normal_allele=gene.normal_allele.key,
            mutant_allele=gene.mutant_allele.key,
            dominant_abbreviation=gene.dominant_abbreviation,
            recessive_abbreviation=gene.recessive_abbreviation,
            dominant_allele=gene.dominant_allele.key if gene.dominant_allele else None,
            recessive_allele=gene.recessive_allele.key if gene.recessive_allele else None,
            mutation_pending=gene.mutation_pending,
        )


class ScheduleMutationRequest(BaseModel):
    """Request body for scheduling a mutation."""

    mutant_is_dominant: bool


class PhenotypeData(BaseModel):
    """Visible allele keys for each gene."""

    fur: str
    ears: str
    teeth: str

    @classmethod
    def from_phenotype(cls, phenotype: Phenotype) -> "PhenotypeData":
        return cls(
            fur=phenotype.fur_allele.key,
            ears=phenotype.ears_allele.key,
            teeth=phenotype.teeth_allele.key,
        )


class VarietyData(BaseModel):
    """One variety of the initial population."""

    count: int
    genotype_string: str
    abbreviation: str
    father_alleles: List[str]  # fur, ears, teeth
    mother_alleles: List[str]
    phenotype: PhenotypeData

    @classmethod
    def from_variety(cls, variety: PopulationVariety, genotype: Genotype) -> "VarietyData":
        return cls(
            count=variety.count,
            genotype_string=variety.genotype_string,
            abbreviation=genotype.to_abbreviation(),
            father_alleles=[pair.father_allele.key for pair in genotype.gene_pairs],
            mother_alleles=[pair.mother_allele.key for pair in genotype.gene_pairs],
            phenotype=PhenotypeData.from_phenotype(Phenotype(genotype)),
        )


class ParsePopulationRequest(BaseModel):
    """Request body for seeding the gene pool from a population spec."""

    mutations: str = ""
    population: List[str] = Field(default_factory=lambda: ["1"])


class ParsePopulationResponse(BaseModel):
    total_count: int
    varieties: List[VarietyData]
    genes: List[GeneData]


class CrossRequest(BaseModel):
    """Request body for crossing two genotypes, given as genotype letters."""

    father: str = ""
    mother: str = ""
    seed: Optional[int] = None


class CellData(BaseModel):
    father_allele: str
    mother_allele: str
    abbreviation: str
    visible_allele: Optional[str] = None  # null if heterozygous and dominance is unknown

    @classmethod
    def from_cell(cls, gene: Gene, cell: Cell) -> "CellData":
        pair = GenePair(gene, cell.father_allele, cell.mother_allele)
        visible = None
        if pair.is_homozygous() or gene.has_mutated:
            visible = pair.get_visible_allele().key
        return cls(
            father_allele=cell.father_allele.key,
            mother_allele=cell.mother_allele.key,
            abbreviation=pair.get_genotype_abbreviation(),
            visible_allele=visible,
        )


class GeneCrossData(BaseModel):
    gene: str
    cells: List[CellData]


class CrossResponse(BaseModel):
    father: str
    mother: str
    crosses: List[GeneCrossData]
