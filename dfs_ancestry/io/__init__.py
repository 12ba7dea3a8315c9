from .text_io     import read_ancestor_problem, write_ancestor_problem, write_answers
from .yaml_forest import to_parents, to_yaml
