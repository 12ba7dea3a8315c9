from dfs_ancestry.graph.visitor import dfs_visitor
from dfs_ancestry.graph.algo import depth_first_search


class cycle_detector_visitor(dfs_visitor):
  """ A directed graph has a cycle if and only if a depth-first search finds a back edge """
  def __init__(self):
    self.back_edges = []

  def back_edge(self, e):
    self.back_edges.append(e)

  def has_cycle(self) -> bool:
    return len(self.back_edges) > 0


def has_cycle(g) -> bool:
  v = cycle_detector_visitor()
  depth_first_search(g, v)
  return v.has_cycle()
