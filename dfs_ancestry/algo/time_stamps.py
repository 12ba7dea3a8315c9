import numpy as np

from dfs_ancestry.graph.visitor import dfs_visitor
from dfs_ancestry.graph.algo import depth_first_search


class time_stamp_visitor(dfs_visitor):
  """ Record, for each vertex, the time it was discovered (`time_in`) and finished (`time_out`).

  The time is a counter incremented at each discovery and at each finish,
  so that a complete search over `n_vertex` vertices uses the times 0, 1, ..., 2*n_vertex-1 exactly once.
  The intervals [time_in, time_out] of two vertices are either disjoint or nested.
  """
  def __init__(self, n_vertex):
    self.timer = 0
    self.time_in  = np.full(n_vertex, -1, dtype=np.int64)
    self.time_out = np.full(n_vertex, -1, dtype=np.int64)

  def discover_vertex(self, v):
    self.time_in[v] = self.timer
    self.timer += 1

  def finish_vertex(self, v):
    self.time_out[v] = self.timer
    self.timer += 1


def time_stamps(g, start=None):
  """ Return the `time_in` and `time_out` arrays of a depth-first search of `g` """
  v = time_stamp_visitor(g.n_vertex())
  depth_first_search(g, v, start)
  return v.time_in, v.time_out
