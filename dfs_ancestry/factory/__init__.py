from .forest_generator import star_parents, chain_parents, binary_tree_parents, random_parents
