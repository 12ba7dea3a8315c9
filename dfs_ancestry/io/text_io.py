"""
  Text format of the ancestor problem: whitespace-separated integers
    V
    p_1 ... p_V        (1-based parent index of each vertex, 0 for a root)
    Q
    a_1 v_1 ... a_Q v_Q  (1-based queries "is a_i an ancestor of v_i?")
  Answers are written one per line, `1` for yes and `0` for no.
"""
import re

import numpy as np

import dfs_ancestry.utils.logging as mlog


_int_re = re.compile(r"-?[0-9]+")


def _to_ints(tokens):
  ints = np.empty(len(tokens), dtype=np.int64)
  for i, token in enumerate(tokens):
    if _int_re.fullmatch(token) is None:
      raise ValueError(f"Token {i+1} ('{token}') is not an integer")
    try:
      ints[i] = int(token)
    except OverflowError:
      raise ValueError(f"Token {i+1} ('{token}') does not fit in a 64-bit integer") from None
  return ints

def _check_count(count, what):
  if count < 0:
    raise ValueError(f"Number of {what} should be non-negative, got {count}")

def _check_size(ints, expected_size, what):
  if ints.size < expected_size:
    raise ValueError(f"Input is truncated: {expected_size} integers expected to read the {what}, got {ints.size}")


def read_ancestor_problem(stream):
  """
  Read an ancestor problem from a text stream.

  Returns:
    parents: array of the V 1-based parent references
    queries: array of shape (Q,2) of the 1-based (ancestor, vertex) queries
  """
  ints = _to_ints(stream.read().split())

  _check_size(ints, 1, 'number of vertices')
  n_vertex = int(ints[0])
  _check_count(n_vertex, 'vertices')
  _check_size(ints, 1+n_vertex, 'parents')
  parents = ints[1:1+n_vertex]

  _check_size(ints, 2+n_vertex, 'number of queries')
  n_query = int(ints[1+n_vertex])
  _check_count(n_query, 'queries')
  end = 2+n_vertex+2*n_query
  _check_size(ints, end, 'queries')
  queries = ints[2+n_vertex:end].reshape((n_query,2))

  if ints.size > end:
    mlog.warning(f"{ints.size-end} integer(s) after the last query are ignored")

  return parents, queries


def write_ancestor_problem(stream, parents, queries):
  """ Inverse of `read_ancestor_problem` """
  queries = np.asarray(queries).reshape((-1,2))
  stream.write(f"{len(parents)}\n")
  stream.write(' '.join(str(p) for p in parents) + '\n')
  stream.write(f"{queries.shape[0]}\n")
  for a, v in queries:
    stream.write(f"{a} {v}\n")


def write_answers(stream, answers):
  stream.write(''.join('1\n' if answer else '0\n' for answer in answers))
