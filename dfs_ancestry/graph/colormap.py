from enum import IntEnum

import numpy as np

class color(IntEnum):
  """ Traversal status of a vertex:
    - `color.white`: not visited yet
    - `color.gray`: discovered, but its outgoing edges are not all processed
    - `color.black`: finished
  A vertex can only go from white to gray, then from gray to black.
  """
  white = 0
  gray  = 1
  black = 2


class colormap:
  """ Color of each vertex of a graph, stored in a fixed-size array """
  def __init__(self, n_vertex):
    self._colors = np.full(n_vertex, color.white, dtype=np.int8)

  def get_color(self, vertex) -> color:
    return color(self._colors[vertex])

  def set_color(self, vertex, c):
    self._colors[vertex] = c

  def count(self, c) -> int:
    return int(np.count_nonzero(self._colors == c))

  def __len__(self):
    return self._colors.size
