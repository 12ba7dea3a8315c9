from typing_extensions import TypeAlias
from _collections_abc import list_iterator

# Return type of `iter(some_list)`: used to annotate the iterators over the adjacency lists
list_iterator_type : TypeAlias = list_iterator
