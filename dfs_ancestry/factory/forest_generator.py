"""
  Generators of forests, given by their 1-based parent references (0 for a root).
  Vertex 1 is the root of the star, chain and binary tree.
"""
import numpy as np


def star_parents(n_vertex):
  parents = np.ones(n_vertex, dtype=np.int64)
  parents[:1] = 0
  return parents

def chain_parents(n_vertex):
  """ Vertex i+1 is the child of vertex i """
  return np.arange(n_vertex, dtype=np.int64)

def binary_tree_parents(n_vertex):
  """ Balanced binary tree: the children of vertex i are 2i and 2i+1 """
  parents = np.arange(1, n_vertex+1, dtype=np.int64) // 2
  return parents

def random_parents(n_vertex, n_root=1, seed=None):
  """
  Random forest with `n_root` trees.
  Vertices are taken in a random order, and each non-root vertex gets its parent among the vertices before it.
  """
  assert n_vertex == 0 or 1 <= n_root <= n_vertex
  rng = np.random.default_rng(seed)
  order = rng.permutation(n_vertex)
  parents = np.zeros(n_vertex, dtype=np.int64)
  pos = np.arange(n_root, n_vertex)
  parent_pos = rng.integers(0, pos) # in [0, pos)
  parents[order[pos]] = order[parent_pos] + 1
  return parents
