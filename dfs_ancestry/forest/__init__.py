from .parent_array import forest_from_parents, parents_from_forest
from .ancestor     import ancestor_resolver
