"""HTTP control surface for a heredity GenePool."""
