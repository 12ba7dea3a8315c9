from dfs_ancestry.graph.algo_interface import dfs_interface_report
from dfs_ancestry.graph.colormap import color, colormap
from dfs_ancestry.graph.visitor import adapt_visitor


class graph_traversal_stack:
  """ Main data structure that is used to capture and update the position we are at during a graph traversal.

  Each level of the stack holds:
    - a vertex that is being visited (hence gray),
    - the iterator over its outgoing edges,
    - the tree edge we went down through, if any: the visit of its destination is not finished yet
  """
  def __init__(self, g, cmap, f):
    self._g = g
    self._cmap = cmap
    self._f = f
    self._vertices      = []
    self._edge_iters    = []
    self._pending_edges = []

  def push_vertex(self, v):
    """ Discover `v` and add a level for its outgoing edges """
    self._cmap.set_color(v, color.gray)
    self._f.discover_vertex(v)
    self._vertices     .append(v)
    self._edge_iters   .append(iter(self._g.outgoing_edges(v)))
    self._pending_edges.append(None)

  def pop_vertex(self):
    """ Finish the vertex of the current level and remove the level """
    v = self._vertices.pop(-1)
    self._edge_iters   .pop(-1)
    self._pending_edges.pop(-1)
    self._cmap.set_color(v, color.black)
    self._f.finish_vertex(v)

  def close_pending_edge(self):
    """ If we are coming back from a tree edge, it is now complete """
    e = self._pending_edges[-1]
    if e is not None:
      self._pending_edges[-1] = None
      self._f.tree_edge(e)
      self._f.finish_edge(e)

  def next_edge(self):
    return next(self._edge_iters[-1], None)

  def go_down(self, e):
    self._pending_edges[-1] = e
    self.push_vertex(e.destination)

  def is_done(self) -> bool:
    return len(self._vertices) == 0

  def vertices(self):
    return self._vertices
  def current_vertex(self):
    return self._vertices[-1]


def _depth_first_visit_stack(S, cmap, f):
  """ Depth-first graph traversal

  This is the low-level algorithm. The explicit stack replaces the recursion,
  with the same sequence of visitor calls as the recursive version.
  """
  while not S.is_done():
    S.close_pending_edge()
    e = S.next_edge()
    if e is None:
      S.pop_vertex()
    else:
      f.examine_edge(e)
      dest_color = cmap.get_color(e.destination)
      if dest_color == color.white:
        S.go_down(e) # `tree_edge` and `finish_edge` called when coming back
      else:
        if dest_color == color.gray:
          f.back_edge(e)
        else:
          f.forward_or_cross_edge(e)
        f.finish_edge(e)


def depth_first_visit(g, cmap, f, v):
  """
  Depth-first traversal of the vertices reachable from `v` that are still white in `cmap`.
  `v` itself must be white. `f` must be a complete visitor (see :func:`adapt_visitor`).
  """
  assert cmap.get_color(v) == color.white
  S = graph_traversal_stack(g, cmap, f)
  S.push_vertex(v)
  _depth_first_visit_stack(S, cmap, f)


def depth_first_search(g, f, start=None):
  """
  Depth-first graph traversal

  Args:
    g: Graph object that should conform to the depth-first search interface. See :func:`dfs_interface_report` for full documentation.
    f: A visitor object. See :class:`dfs_visitor` for the list of callbacks, and when they are called.
       Missing callbacks are treated as doing nothing.
    start: If not `None`, the vertex from which the search begins.

  All the vertices are visited exactly once, and all the edges are examined exactly once:
  once the search from `start` is done, the vertices are swept in the order given by `g.vertices()`,
  and a new search is started from each vertex that has not been visited.

  Returns:
    The colormap at the end of the search (all vertices are black)
  """
  is_ok, msg  = dfs_interface_report(g)
  assert is_ok, msg

  f = adapt_visitor(f)
  cmap = colormap(g.n_vertex())

  for v in g.vertices():
    cmap.set_color(v, color.white)
    f.initialize_vertex(v)

  if start is not None:
    f.start_vertex(start)
    depth_first_visit(g, cmap, f, start)

  for v in g.vertices():
    if cmap.get_color(v) == color.white:
      f.start_vertex(v)
      depth_first_visit(g, cmap, f, v)

  return cmap
