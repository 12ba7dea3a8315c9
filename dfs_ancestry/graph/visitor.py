_callback_names = [
  'initialize_vertex',
  'start_vertex',
  'discover_vertex',
  'examine_edge',
  'tree_edge',
  'back_edge',
  'forward_or_cross_edge',
  'finish_edge',
  'finish_vertex',
]


class dfs_visitor:
  """ Callbacks of the depth-first search algorithm. They all do nothing: derive and override the ones you need.

  For each vertex `v`, the callbacks are called in this order:
    - `initialize_vertex(v)`: before the search starts
    - `start_vertex(v)`: if `v` is the root of a search tree
    - `discover_vertex(v)`: when `v` is visited for the first time
    - then for each edge `e` going out of `v`:
      - `examine_edge(e)`
      - one of:
        - `tree_edge(e)`: the destination was not visited yet. It is called *after* the destination has been visited
        - `back_edge(e)`: the destination is being visited, i.e. it is an ancestor of `v` in the search tree
        - `forward_or_cross_edge(e)`: the destination is already finished
      - `finish_edge(e)`
    - `finish_vertex(v)`: once all the edges going out of `v` have been processed
  """
  def initialize_vertex(self, v): pass
  def start_vertex(self, v): pass
  def discover_vertex(self, v): pass
  def examine_edge(self, e): pass
  def tree_edge(self, e): pass
  def back_edge(self, e): pass
  def forward_or_cross_edge(self, e): pass
  def finish_edge(self, e): pass
  def finish_vertex(self, v): pass


class complete_visitor:
  """ The `depth_first_search` algorithm expects a visitor with all the `dfs_visitor` callbacks.

  If the user does not provide some of them, then add them on-the-fly to do nothing.
  """
  def __init__(self, v):
    def _do_nothing(*args): pass

    # take v.initialize_vertex, v.start_vertex... if they exist, otherwise, create them to do nothing
    for f_name in _callback_names:
      setattr(self, f_name, getattr(v, f_name, _do_nothing))


def adapt_visitor(v):
  if isinstance(v, dfs_visitor):
    return v
  return complete_visitor(v)


class visitor_list:
  """ Forward each callback to several visitors, in the order they are given.

  Used to compute several things during a single search.
  """
  def __init__(self, *visitors):
    self.visitors = [adapt_visitor(v) for v in visitors]

    for f_name in _callback_names:
      setattr(self, f_name, self._dispatch(f_name))

  def _dispatch(self, f_name):
    fs = [getattr(v, f_name) for v in self.visitors]
    def f(x):
      for fi in fs:
        fi(x)
    return f
