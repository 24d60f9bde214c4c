"""Phenotype: the appearance of an individual, the manifestation of its genotype."""

from heredity.genetics import allele as alleles
from heredity.genetics.allele import Allele
from heredity.genetics.genotype import Genotype


class Phenotype:
    """The visible fur, ears and teeth alleles, resolved when the phenotype is created."""

    def __init__(self, genotype: Genotype) -> None:
        self._fur_allele = genotype.fur_gene_pair.get_visible_allele()
        self._ears_allele = genotype.ears_gene_pair.get_visible_allele()
        self._teeth_allele = genotype.teeth_gene_pair.get_visible_allele()

    def __repr__(self) -> str:
        return f"Phenotype({self._fur_allele}, {self._ears_allele}, {self._teeth_allele})"

    @property
    def fur_allele(self) -> Allele:
        return self._fur_allele

    @property
    def ears_allele(self) -> Allele:
        return self._ears_allele

    @property
    def teeth_allele(self) -> Allele:
        return self._teeth_allele

    def has_white_fur(self) -> bool:
        return self._fur_allele is alleles.WHITE_FUR

    def has_brown_fur(self) -> bool:
        return self._fur_allele is alleles.BROWN_FUR

    def has_straight_ears(self) -> bool:
        return self._ears_allele is alleles.STRAIGHT_EARS

    def has_floppy_ears(self) -> bool:
        return self._ears_allele is alleles.FLOPPY_EARS

    def has_short_teeth(self) -> bool:
        return self._teeth_allele is alleles.SHORT_TEETH

    def has_long_teeth(self) -> bool:
        return self._teeth_allele is alleles.LONG_TEETH
