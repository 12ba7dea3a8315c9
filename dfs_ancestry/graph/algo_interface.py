import inspect
import typing
from collections.abc import Iterator


_expected_attrs = {
  #  name              signature                                                n_params  returns_iterator
  'vertices'       : ('def vertices(self) -> graph_vertex_iterator'              , 0, True ),
  'outgoing_edges' : ('def outgoing_edges(self, vertex) -> graph_edge_iterator'  , 1, True ),
  'n_vertex'       : ('def n_vertex(self) -> int'                                , 0, False),
}

def _is_iterator_type(t):
  origin = typing.get_origin(t) or t
  return isinstance(origin, type) and issubclass(origin, Iterator)

def _type_name(t):
  return getattr(t, '__name__', str(t))

def _dfs_attr_report(g, attr_name, sig, n_params, returns_iterator):
  report = ''

  attr = getattr(g, attr_name, None)
  if not attr:
    report += 'there is no such attribute\n'

  elif not hasattr(attr, '__call__'):
    report += 'it is not a method\n'
  else:
    attr_sig = inspect.signature(attr)
    attr_params = attr_sig.parameters
    attr_return_type = attr_sig.return_annotation
    if returns_iterator and attr_return_type == inspect.Signature.empty:
      report += 'it must have a return annotation so that the return type can be checked\n'
    elif returns_iterator and not _is_iterator_type(attr_return_type):
      report += f'its return type is "{_type_name(attr_return_type)}", which is not an Iterator\n'
    elif len(attr_params) != n_params:
      report += f'it must take {n_params} parameter but currently takes {len(attr_params)}\n'

  if report != '':
    return f'  Attribute "{attr_name}" should be of the form\n      `{sig}`\n    but it is not because ' + report
  else:
    return ''


def dfs_interface_report(g):
  """ Tells if `g` conforms to the depth-first search interface, and if not, why.

  To be conforming, `g` has to have:
    - a `vertices(self)` method that returns all the vertices of the graph, in the order they are swept,
    - an `outgoing_edges(self, v)` method that returns the edges leaving vertex `v`,
      each edge having a `source` and a `destination` attribute,
    - a `n_vertex(self)` method that returns the number of vertices.
  The first two methods should return iterators. Vertices are integers in [0, n_vertex).
  """
  report = ''

  for attr_name, (sig, n_params, returns_iterator) in _expected_attrs.items():
    report += _dfs_attr_report(g, attr_name, sig, n_params, returns_iterator)

  if report != '':
    return False, f'Type "{type(g).__name__}" does not satisfy the interface of the depth-first search algorithm:\n'  + report
  else:
    return True, ''
