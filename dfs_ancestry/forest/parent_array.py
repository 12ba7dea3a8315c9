import numpy as np

from dfs_ancestry.graph.adjacency_graph import adjacency_graph
from dfs_ancestry.utils.np_utils import all_in_range
import dfs_ancestry.utils.logging as mlog


def forest_from_parents(parents):
  """
  Build the graph of a forest given by parent references.

  Args:
    parents: for each vertex, the 1-based index of its parent, or 0 if the vertex is a root

  Returns:
    g: the graph with one edge `parent -> child` per non-root vertex, in vertex order
    root: the vertex the depth-first search should start from.
          If there are several roots, it is the last one (the other ones are reached anyway by the search).
          If there is none, it is `None`.
  """
  parents = np.asarray(parents, dtype=np.int64)
  if parents.ndim != 1:
    raise ValueError(f"Parent references should be a flat array, got shape {parents.shape}")
  n_vertex = parents.size
  if not all_in_range(parents, 0, n_vertex):
    bad = np.flatnonzero((parents < 0) | (parents > n_vertex))[0]
    raise ValueError(f"Parent of vertex {bad+1} is {parents[bad]}, "
                     f"which is neither 0 (root) nor a vertex in [1, {n_vertex}]")

  roots    = np.flatnonzero(parents == 0)
  children = np.flatnonzero(parents != 0)
  # roots first: the sweep then reaches each vertex from the root of its tree
  g = adjacency_graph.from_edges(n_vertex, parents[children]-1, children,
                                 sweep_order=np.concatenate([roots, children]))

  if roots.size == 0:
    root = None
    if n_vertex > 0:
      mlog.warning("No vertex has a 0 parent: the parent references do not describe a forest")
  else:
    root = int(roots[-1])
    if roots.size > 1:
      mlog.warning(f"{roots.size} vertices have a 0 parent, the search starts from the last one (vertex {root+1})")

  mlog.info(f"Forest of {mlog.size_to_str(n_vertex)} vertices and {mlog.size_to_str(roots.size)} root(s) built")
  return g, root


def parents_from_forest(g):
  """
  Inverse of `forest_from_parents`: return the 1-based parent reference of each vertex of `g` (0 for roots).
  Raise a `ValueError` if a vertex has more than one incoming edge.
  """
  parents = np.zeros(g.n_vertex(), dtype=np.int64)
  for e in g.edges():
    if parents[e.destination] != 0:
      raise ValueError(f"Vertex {e.destination+1} has several parents "
                       f"({parents[e.destination]} and {e.source+1}): the graph is not a forest")
    parents[e.destination] = e.source + 1
  return parents
