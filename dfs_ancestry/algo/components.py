import numpy as np

from dfs_ancestry.graph.visitor import dfs_visitor
from dfs_ancestry.graph.algo import depth_first_search


class tree_label_visitor(dfs_visitor):
  """ Label each vertex by the root of the depth-first search tree it belongs to """
  def __init__(self, n_vertex):
    self.labels = np.full(n_vertex, -1, dtype=np.int64)
    self._root = None

  def start_vertex(self, v):
    self._root = v

  def discover_vertex(self, v):
    self.labels[v] = self._root


def label_trees(g, start=None):
  """
  Return an array giving, for each vertex, the root of its depth-first search tree.
  For a forest given by its parent->child edges, this is the root of the tree of each vertex.
  """
  v = tree_label_visitor(g.n_vertex())
  depth_first_search(g, v, start)
  return v.labels
