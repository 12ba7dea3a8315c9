import numpy as np

from dfs_ancestry.algo.time_stamps import time_stamps


class ancestor_resolver:
  """ Answer "is `a` an ancestor of `v`?" queries from the discovery and finish times of a depth-first search.

  `a` is an ancestor of `v` if and only if the interval [time_in[a], time_out[a]] contains [time_in[v], time_out[v]],
  that is, the search went through the whole sub-tree of `v` while visiting `a`.
  By default, a vertex is its own ancestor (`strict=False`).
  """
  def __init__(self, time_in, time_out):
    self.time_in  = np.asarray(time_in)
    self.time_out = np.asarray(time_out)
    assert self.time_in.shape == self.time_out.shape

  @classmethod
  def from_graph(cls, g, start=None):
    return cls(*time_stamps(g, start))

  def n_vertex(self):
    return self.time_in.size

  def is_ancestor(self, a, v, strict=False) -> bool:
    if strict and a == v:
      return False
    return bool(self.time_in[a] <= self.time_in[v] and self.time_out[v] <= self.time_out[a])

  def are_ancestors(self, ancestors, vertices, strict=False):
    """ Vectorized `is_ancestor` over arrays of queries. Return a boolean array """
    ancestors = np.asarray(ancestors, dtype=np.int64)
    vertices  = np.asarray(vertices , dtype=np.int64)
    res = (self.time_in[ancestors] <= self.time_in[vertices]) & (self.time_out[vertices] <= self.time_out[ancestors])
    if strict:
      res &= (ancestors != vertices)
    return res

  def subtree_size(self, v):
    """ Number of vertices in the search sub-tree rooted at `v` (`v` included) """
    return int(self.time_out[v] - self.time_in[v] + 1) // 2
