"""
  Answer ancestor queries on a forest given by parent references.
  See `dfs_ancestry.io.text_io` for the input and output formats.
"""
import argparse
import sys
import time

import numpy as np

from dfs_ancestry.forest import forest_from_parents, ancestor_resolver
from dfs_ancestry.io.text_io import read_ancestor_problem, write_answers
from dfs_ancestry.utils.np_utils import all_in_range
from dfs_ancestry.utils.script_utils import determine_output_file_path
import dfs_ancestry.utils.logging as mlog


def solve(parents, queries):
  """
  Args:
    parents: 1-based parent references (0 for a root)
    queries: array of shape (Q,2) of 1-based (ancestor, vertex) pairs
  Returns:
    A boolean array telling, for each query, if the first vertex is an ancestor of the second one (or the same)
  """
  start = time.time()
  g, root = forest_from_parents(parents)
  resolver = ancestor_resolver.from_graph(g, root)
  end = time.time()
  mlog.stat(f"Time stamps of {mlog.size_to_str(g.n_vertex())} vertices computed ({end-start:.2f} s)")

  queries = np.asarray(queries, dtype=np.int64).reshape((-1,2))
  if not all_in_range(queries, 1, g.n_vertex()):
    bad = np.flatnonzero(((queries < 1) | (queries > g.n_vertex())).any(axis=1))[0]
    raise ValueError(f"Query {bad+1} ({queries[bad,0]} {queries[bad,1]}) refers to a vertex outside [1, {g.n_vertex()}]")
  queries = queries - 1
  return resolver.are_ancestors(queries[:,0], queries[:,1])


def build_parser():
  parser = argparse.ArgumentParser(prog='dfs-ancestor',
                                   description='Answer "is A an ancestor of B?" queries on a forest')
  parser.add_argument('-i', '--input', default=None,
                      help="Input file ('-' or nothing for the standard input)")
  parser.add_argument('-o', '--output', default=None,
                      help="Output file or directory ('-' or nothing for the standard output)")
  parser.add_argument('-v', '--verbose', action='store_true',
                      help="Print information and statistics on the standard error")
  parser.add_argument('--log-conf', dest='log_conf', default=None,
                      help="Logging configuration file")
  return parser


def _configure_logging(args):
  if args.log_conf is not None:
    mlog.load_conf_file(args.log_conf)
  if args.verbose:
    for logger_name in ['dfs_ancestry', 'dfs_ancestry-stats']:
      mlog.add_logger(logger_name, replace=True)
      mlog.add_printer_to_logger(logger_name, 'stderr_printer')


def main(argv=None):
  args = build_parser().parse_args(argv)
  _configure_logging(args)

  try:
    if args.input is None or args.input == '-':
      parents, queries = read_ancestor_problem(sys.stdin)
    else:
      with open(args.input) as f:
        parents, queries = read_ancestor_problem(f)
    answers = solve(parents, queries)
  except ValueError as e:
    mlog.error(str(e))
    return 1

  output_path = determine_output_file_path(args.input, args.output, '.out')
  if output_path is None:
    write_answers(sys.stdout, answers)
  else:
    with open(output_path, 'w') as f:
      write_answers(f, answers)
  mlog.info(f"{mlog.size_to_str(len(answers))} queries answered")
  return 0


if __name__ == '__main__':
  sys.exit(main())
