import logging as LOG

import pytest

import dfs_ancestry.utils.logging as mlog
from dfs_ancestry.factory import star_parents, chain_parents, binary_tree_parents, random_parents


class printer_for_unit_tests:
  def __init__(self):
    self.buffer = ''

  def log(self, msg):
    self.buffer += msg


# --------------------------------------------------------------------------
@pytest.fixture
def capture_logger():
  """
  Redirect a logger to a buffer for the duration of a test:
    `p = capture_logger('dfs_ancestry-warnings')` then check `p.buffer`
  The printers of the logger are restored at the end of the test
  """
  saved = {}
  def capture(logger_name):
    logger = LOG.getLogger(logger_name)
    if logger_name not in saved:
      saved[logger_name] = (list(logger.handlers), logger.disabled)
    mlog.add_logger(logger_name, replace=True)
    p = printer_for_unit_tests()
    mlog.add_printer_to_logger(logger_name, p)
    return p

  yield capture

  for logger_name, (handlers, disabled) in saved.items():
    logger = LOG.getLogger(logger_name)
    for handler in list(logger.handlers):
      logger.removeHandler(handler)
    for handler in handlers:
      logger.addHandler(handler)
    logger.disabled = disabled


# --------------------------------------------------------------------------
forest_kinds = {
  'star'          : star_parents,
  'chain'         : chain_parents,
  'binary_tree'   : binary_tree_parents,
  'random_tree'   : lambda n: random_parents(n, 1, seed=n),
  'random_forest' : lambda n: random_parents(n, max(1, n//10), seed=n),
}

@pytest.fixture(params=forest_kinds.keys())
def forest_parents(request):
  """ 1-based parent references of forests of various shapes, with 50 vertices """
  return forest_kinds[request.param](50)
