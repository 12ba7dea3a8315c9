from dfs_ancestry.graph.visitor import dfs_visitor
from dfs_ancestry.graph.algo import depth_first_search


class topological_order_visitor(dfs_visitor):
  """ Vertices by decreasing finish time. If there is no back edge, each edge goes from a vertex to a later one """
  def __init__(self):
    self._finished = []
    self.back_edges = []

  def back_edge(self, e):
    self.back_edges.append(e)

  def finish_vertex(self, v):
    self._finished.append(v)

  def order(self):
    return self._finished[::-1]


def topological_sort(g, start=None):
  """
  Return the vertices of `g` ordered such that whenever there is an edge from x to y, x comes before y.
  Raise a `ValueError` if `g` has a cycle, since no such order exists.
  """
  v = topological_order_visitor()
  depth_first_search(g, v, start)
  if v.back_edges:
    e = v.back_edges[0]
    raise ValueError(f"Graph has a cycle (edge {e.source} -> {e.destination} closes it): it can not be sorted topologically")
  return v.order()
