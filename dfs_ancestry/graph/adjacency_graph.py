"""
  An 'adjacency_graph' is a directed graph over the vertices [0, n_vertex)
  stored by an adjacency list: for each vertex, the list of its outgoing edges,
  in the order they were added.

  Note:
    - Parallel edges are kept: each one is an independent edge
    - Self-loops are allowed
    - The graph is supposed to be built once, then only read (in particular during a depth-first search)
        Beware that this is by convention, nothing is actually enforced
"""
from collections import namedtuple

import numpy as np

from dfs_ancestry.graph.utils import list_iterator_type
from dfs_ancestry.utils.np_utils import group_by_key, all_in_range


edge = namedtuple('edge', ['source', 'destination'])


class adjacency_graph:
  def __init__(self, n_vertex, sweep_order=None):
    """ `sweep_order`, if given, is the order in which `vertices()` lists the vertices (default: 0, 1, ...) """
    assert n_vertex >= 0
    if sweep_order is None:
      self._vertices = list(range(n_vertex))
    else:
      self._vertices = [int(v) for v in sweep_order]
      assert sorted(self._vertices) == list(range(n_vertex)), "`sweep_order` should be a permutation of the vertices"
    self._outgoing_edges = [[] for _ in range(n_vertex)]
    self._n_edge = 0

  @classmethod
  def from_edges(cls, n_vertex, sources, destinations, sweep_order=None):
    """
      Build the graph from two arrays of the same size: edge `i` goes from `sources[i]` to `destinations[i]`.
      The relative order of the edges leaving a same vertex is preserved.
    """
    sources      = np.asarray(sources     , dtype=np.int64)
    destinations = np.asarray(destinations, dtype=np.int64)
    assert sources.shape == destinations.shape
    assert all_in_range(sources     , 0, n_vertex-1)
    assert all_in_range(destinations, 0, n_vertex-1)

    g = cls(n_vertex, sweep_order)
    idx, dest_by_source = group_by_key(sources, n_vertex, destinations)
    for v in range(n_vertex):
      g._outgoing_edges[v] = [edge(v, int(w)) for w in dest_by_source[idx[v]:idx[v+1]]]
    g._n_edge = sources.size
    return g

  def add_edge(self, source, destination=None):
    """ Add an edge, given either as an `edge` or as its two ends """
    if destination is None:
      e = edge(*source)
    else:
      e = edge(source, destination)
    assert 0 <= e.source      < self.n_vertex(), f'Edge source {e.source} is not a vertex of the graph'
    assert 0 <= e.destination < self.n_vertex(), f'Edge destination {e.destination} is not a vertex of the graph'
    self._outgoing_edges[e.source].append(e)
    self._n_edge += 1
    return e

  def n_edge(self):
    return self._n_edge

  def out_degree(self, vertex):
    return len(self._outgoing_edges[vertex])

  def edges(self):
    """ All the edges, grouped by source vertex """
    return [e for es in self._outgoing_edges for e in es]

# Interface to satisfy dfs_interface_report {
  def vertices(self) -> list_iterator_type:
    return iter(self._vertices)
  def outgoing_edges(self, vertex) -> list_iterator_type:
    return iter(self._outgoing_edges[vertex])
  def n_vertex(self):
    return len(self._vertices)
# Interface to satisfy dfs_interface_report }

  def __repr__(self):
    return f'adjacency_graph(n_vertex={self.n_vertex()}, n_edge={self.n_edge()})'


def adjacency_graph_example():
  # Edges, in insertion order:
  #   0->1  0->3  0->2   (0 reaches 3 through 1 first: 0->3 is a forward edge)
  #   1->3  3->1         (3->1 goes back to an ancestor: back edge)
  #   2->3               (3 is already finished, in another branch: cross edge)
  #   4->0  4->5  5->5   (4->0 is a cross edge, 5->5 is a self-loop: back edge)
  g = adjacency_graph(6)
  for s,d in [(0,1), (0,3), (0,2), (1,3), (3,1), (2,3), (4,0), (4,5), (5,5)]:
    g.add_edge(s,d)
  return g
