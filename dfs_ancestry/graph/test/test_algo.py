import pytest
import numpy as np

from dfs_ancestry.graph.algo import depth_first_search, depth_first_visit
from dfs_ancestry.graph.adjacency_graph import adjacency_graph, adjacency_graph_example
from dfs_ancestry.graph.colormap import color, colormap
from dfs_ancestry.graph.visitor import dfs_visitor, adapt_visitor


def _e(e):
  return f'{e.source} -> {e.destination}'

class visitor_for_testing_depth_first_search(dfs_visitor):
  def __init__(self):
    self.s = ''

  def initialize_vertex(self, v):
    self.s += f'[init    ] {v}\n'
  def start_vertex(self, v):
    self.s += f'[start   ] {v}\n'
  def discover_vertex(self, v):
    self.s += f'[discover] {v}\n'
  def examine_edge(self, e):
    self.s += f'[examine ] {_e(e)}\n'
  def tree_edge(self, e):
    self.s += f'[tree    ] {_e(e)}\n'
  def back_edge(self, e):
    self.s += f'[back    ] {_e(e)}\n'
  def forward_or_cross_edge(self, e):
    self.s += f'[fwd/crs ] {_e(e)}\n'
  def finish_edge(self, e):
    self.s += f'[fin edge] {_e(e)}\n'
  def finish_vertex(self, v):
    self.s += f'[finish  ] {v}\n'

  def accumulation_string(self):
    return self.s


def test_depth_first_search():
  # Reminder (edges in insertion order):
  #   0->1  0->3  0->2
  #   1->3  3->1
  #   2->3
  #   4->0  4->5  5->5
  g = adjacency_graph_example()
  v = visitor_for_testing_depth_first_search()
  cmap = depth_first_search(g,v)

  expected_s = \
    '[init    ] 0\n' \
    '[init    ] 1\n' \
    '[init    ] 2\n' \
    '[init    ] 3\n' \
    '[init    ] 4\n' \
    '[init    ] 5\n' \
    '[start   ] 0\n' \
    '[discover] 0\n' \
    '[examine ] 0 -> 1\n' \
    '[discover] 1\n' \
    '[examine ] 1 -> 3\n' \
    '[discover] 3\n' \
    '[examine ] 3 -> 1\n' \
    '[back    ] 3 -> 1\n' \
    '[fin edge] 3 -> 1\n' \
    '[finish  ] 3\n' \
    '[tree    ] 1 -> 3\n' \
    '[fin edge] 1 -> 3\n' \
    '[finish  ] 1\n' \
    '[tree    ] 0 -> 1\n' \
    '[fin edge] 0 -> 1\n' \
    '[examine ] 0 -> 3\n' \
    '[fwd/crs ] 0 -> 3\n' \
    '[fin edge] 0 -> 3\n' \
    '[examine ] 0 -> 2\n' \
    '[discover] 2\n' \
    '[examine ] 2 -> 3\n' \
    '[fwd/crs ] 2 -> 3\n' \
    '[fin edge] 2 -> 3\n' \
    '[finish  ] 2\n' \
    '[tree    ] 0 -> 2\n' \
    '[fin edge] 0 -> 2\n' \
    '[finish  ] 0\n' \
    '[start   ] 4\n' \
    '[discover] 4\n' \
    '[examine ] 4 -> 0\n' \
    '[fwd/crs ] 4 -> 0\n' \
    '[fin edge] 4 -> 0\n' \
    '[examine ] 4 -> 5\n' \
    '[discover] 5\n' \
    '[examine ] 5 -> 5\n' \
    '[back    ] 5 -> 5\n' \
    '[fin edge] 5 -> 5\n' \
    '[finish  ] 5\n' \
    '[tree    ] 4 -> 5\n' \
    '[fin edge] 4 -> 5\n' \
    '[finish  ] 4\n'

  assert v.accumulation_string() == expected_s
  assert cmap.count(color.black) == 6


def test_depth_first_search_from_start():
  g = adjacency_graph_example()
  v = visitor_for_testing_depth_first_search()
  depth_first_search(g, v, start=4)

  expected_s = \
    '[init    ] 0\n' \
    '[init    ] 1\n' \
    '[init    ] 2\n' \
    '[init    ] 3\n' \
    '[init    ] 4\n' \
    '[init    ] 5\n' \
    '[start   ] 4\n' \
    '[discover] 4\n' \
    '[examine ] 4 -> 0\n' \
    '[discover] 0\n' \
    '[examine ] 0 -> 1\n' \
    '[discover] 1\n' \
    '[examine ] 1 -> 3\n' \
    '[discover] 3\n' \
    '[examine ] 3 -> 1\n' \
    '[back    ] 3 -> 1\n' \
    '[fin edge] 3 -> 1\n' \
    '[finish  ] 3\n' \
    '[tree    ] 1 -> 3\n' \
    '[fin edge] 1 -> 3\n' \
    '[finish  ] 1\n' \
    '[tree    ] 0 -> 1\n' \
    '[fin edge] 0 -> 1\n' \
    '[examine ] 0 -> 3\n' \
    '[fwd/crs ] 0 -> 3\n' \
    '[fin edge] 0 -> 3\n' \
    '[examine ] 0 -> 2\n' \
    '[discover] 2\n' \
    '[examine ] 2 -> 3\n' \
    '[fwd/crs ] 2 -> 3\n' \
    '[fin edge] 2 -> 3\n' \
    '[finish  ] 2\n' \
    '[tree    ] 0 -> 2\n' \
    '[fin edge] 0 -> 2\n' \
    '[finish  ] 0\n' \
    '[tree    ] 4 -> 0\n' \
    '[fin edge] 4 -> 0\n' \
    '[examine ] 4 -> 5\n' \
    '[discover] 5\n' \
    '[examine ] 5 -> 5\n' \
    '[back    ] 5 -> 5\n' \
    '[fin edge] 5 -> 5\n' \
    '[finish  ] 5\n' \
    '[tree    ] 4 -> 5\n' \
    '[fin edge] 4 -> 5\n' \
    '[finish  ] 4\n'

  assert v.accumulation_string() == expected_s


def test_start_is_swept_only_once():
  # start at 2: vertices 0 and 1 are not reachable and are visited by the sweep
  g = adjacency_graph(3)
  g.add_edge(0,1)
  v = visitor_for_testing_depth_first_search()
  depth_first_search(g, v, start=2)

  expected_s = \
    '[init    ] 0\n' \
    '[init    ] 1\n' \
    '[init    ] 2\n' \
    '[start   ] 2\n' \
    '[discover] 2\n' \
    '[finish  ] 2\n' \
    '[start   ] 0\n' \
    '[discover] 0\n' \
    '[examine ] 0 -> 1\n' \
    '[discover] 1\n' \
    '[finish  ] 1\n' \
    '[tree    ] 0 -> 1\n' \
    '[fin edge] 0 -> 1\n' \
    '[finish  ] 0\n'

  assert v.accumulation_string() == expected_s


def test_parallel_edges():
  g = adjacency_graph(2)
  g.add_edge(0,1)
  g.add_edge(0,1)

  class edge_kinds(dfs_visitor):
    def __init__(self):
      self.kinds = []
    def tree_edge(self, e):
      self.kinds.append('tree')
    def forward_or_cross_edge(self, e):
      self.kinds.append('fwd/crs')

  v = edge_kinds()
  depth_first_search(g, v)
  assert v.kinds == ['tree', 'fwd/crs']


def test_partial_visitor():
  class discover_only:
    def __init__(self):
      self.order = []
    def discover_vertex(self, v):
      self.order.append(v)

  g = adjacency_graph_example()
  v = discover_only()
  depth_first_search(g, v)
  assert v.order == [0,1,3,2,4,5]


class color_checking_visitor(dfs_visitor):
  """ Check the color of vertices and edge destinations when the callbacks are called """
  def __init__(self, n_vertex):
    self.colors = [None]*n_vertex
    self.n_examined = 0
    self.n_classified = 0
    self.n_finished_edges = 0

  def initialize_vertex(self, v):
    self.colors[v] = color.white
  def discover_vertex(self, v):
    assert self.colors[v] == color.white
    self.colors[v] = color.gray
  def examine_edge(self, e):
    assert self.colors[e.source] == color.gray
    self.n_examined += 1
  def tree_edge(self, e):
    assert self.colors[e.destination] == color.black # the destination has been visited in between
    self.n_classified += 1
  def back_edge(self, e):
    assert self.colors[e.destination] == color.gray
    self.n_classified += 1
  def forward_or_cross_edge(self, e):
    assert self.colors[e.destination] == color.black
    self.n_classified += 1
  def finish_edge(self, e):
    self.n_finished_edges += 1
  def finish_vertex(self, v):
    assert self.colors[v] == color.gray
    self.colors[v] = color.black

@pytest.mark.parametrize('seed', [0,1,2])
def test_every_vertex_and_edge_visited_once(seed):
  rng = np.random.default_rng(seed)
  n_vertex = 40
  n_edge = 120
  g = adjacency_graph.from_edges(n_vertex, rng.integers(0, n_vertex, n_edge), rng.integers(0, n_vertex, n_edge))

  v = color_checking_visitor(n_vertex)
  depth_first_search(g, v, start=int(rng.integers(0, n_vertex)))

  assert v.colors == [color.black]*n_vertex
  assert v.n_examined == n_edge
  assert v.n_classified == n_edge
  assert v.n_finished_edges == n_edge


def _recursive_depth_first_search(g, f, start=None):
  """ Reference implementation, with recursion """
  cmap = colormap(g.n_vertex())
  for v in g.vertices():
    f.initialize_vertex(v)
  def visit(v):
    cmap.set_color(v, color.gray)
    f.discover_vertex(v)
    for e in g.outgoing_edges(v):
      f.examine_edge(e)
      c = cmap.get_color(e.destination)
      if c == color.white:
        visit(e.destination)
        f.tree_edge(e)
      elif c == color.gray:
        f.back_edge(e)
      else:
        f.forward_or_cross_edge(e)
      f.finish_edge(e)
    cmap.set_color(v, color.black)
    f.finish_vertex(v)
  if start is not None:
    f.start_vertex(start)
    visit(start)
  for v in g.vertices():
    if cmap.get_color(v) == color.white:
      f.start_vertex(v)
      visit(v)

@pytest.mark.parametrize('seed', [3,4,5])
def test_same_events_as_recursive_search(seed):
  rng = np.random.default_rng(seed)
  n_vertex = 30
  n_edge = 60
  g = adjacency_graph.from_edges(n_vertex, rng.integers(0, n_vertex, n_edge), rng.integers(0, n_vertex, n_edge))

  v_ref = visitor_for_testing_depth_first_search()
  _recursive_depth_first_search(g, v_ref, start=7)
  v = visitor_for_testing_depth_first_search()
  depth_first_search(g, v, start=7)

  assert v.accumulation_string() == v_ref.accumulation_string()


def test_deep_chain_does_not_exhaust_the_stack():
  n_vertex = 100000
  g = adjacency_graph.from_edges(n_vertex, np.arange(n_vertex-1), np.arange(1,n_vertex))

  class depth_visitor(dfs_visitor):
    def __init__(self):
      self.depth = 0
      self.max_depth = 0
    def discover_vertex(self, v):
      self.depth += 1
      self.max_depth = max(self.max_depth, self.depth)
    def finish_vertex(self, v):
      self.depth -= 1

  v = depth_visitor()
  depth_first_search(g, v)
  assert v.max_depth == n_vertex
  assert v.depth == 0


def test_depth_first_visit():
  g = adjacency_graph_example()
  cmap = colormap(g.n_vertex())
  v = visitor_for_testing_depth_first_search()
  depth_first_visit(g, cmap, adapt_visitor(v), 2)

  assert v.accumulation_string() == \
    '[discover] 2\n' \
    '[examine ] 2 -> 3\n' \
    '[discover] 3\n' \
    '[examine ] 3 -> 1\n' \
    '[discover] 1\n' \
    '[examine ] 1 -> 3\n' \
    '[back    ] 1 -> 3\n' \
    '[fin edge] 1 -> 3\n' \
    '[finish  ] 1\n' \
    '[tree    ] 3 -> 1\n' \
    '[fin edge] 3 -> 1\n' \
    '[finish  ] 3\n' \
    '[tree    ] 2 -> 3\n' \
    '[fin edge] 2 -> 3\n' \
    '[finish  ] 2\n'

  # only the vertices reachable from 2 are finished
  assert [cmap.get_color(i) for i in range(6)] == \
         [color.white, color.black, color.black, color.black, color.white, color.white]

  with pytest.raises(AssertionError):
    depth_first_visit(g, cmap, adapt_visitor(v), 2) # already visited


def test_depth_first_search_rejects_non_conforming_graph():
  class not_a_graph:
    pass
  with pytest.raises(AssertionError, match='does not satisfy the interface'):
    depth_first_search(not_a_graph(), dfs_visitor())
