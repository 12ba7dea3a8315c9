"""
  A forest can be described in yaml by nesting the 1-based labels of its vertices:

    1:
      2:
      3:
        4:

  means that 1 is a root with children 2 and 3, and that 4 is a child of 3.
  All the labels from 1 to V must appear exactly once.
"""
import numpy as np
from ruamel.yaml import YAML


def _gather_parents(yaml_dict, parent, parent_by_label):
  for label, sub_nodes in yaml_dict.items():
    if not isinstance(label, int) or isinstance(label, bool):
      raise ValueError(f"Vertex label '{label}' is not an integer")
    if label in parent_by_label:
      raise ValueError(f"Vertex {label} appears several times")
    parent_by_label[label] = parent
    if sub_nodes is not None:
      if not isinstance(sub_nodes, dict):
        raise ValueError(f"Children of vertex {label} should be given as a mapping, got '{sub_nodes}'")
      _gather_parents(sub_nodes, label, parent_by_label)

def to_parents(yaml_stream):
  """ Return the 1-based parent references of the forest described by `yaml_stream` """
  if yaml_stream == "":
    return np.empty(0, dtype=np.int64)
  yaml = YAML(typ="safe")
  yaml_dict = yaml.load(yaml_stream)
  if yaml_dict is None:
    return np.empty(0, dtype=np.int64)
  if not isinstance(yaml_dict, dict):
    raise ValueError("A yaml forest should be a mapping of vertex labels")

  parent_by_label = {}
  _gather_parents(yaml_dict, 0, parent_by_label)

  n_vertex = len(parent_by_label)
  expected = set(range(1, n_vertex+1))
  if set(parent_by_label.keys()) != expected:
    unexpected = sorted(parent_by_label.keys() - expected)
    raise ValueError(f"Vertex labels should be 1 to {n_vertex}, got unexpected labels {unexpected}")

  parents = np.zeros(n_vertex, dtype=np.int64)
  for label, parent in parent_by_label.items():
    parents[label-1] = parent
  return parents


def _generate_lines(v, children, lines, indent):
  lines.append(f"{' '*indent}{v}:")
  for c in children[v]:
    _generate_lines(c, children, lines, indent+2)

def to_yaml(parents):
  """ Inverse of `to_parents`: return the list of yaml lines describing the forest """
  parents = np.asarray(parents)
  children = {v: [] for v in range(1, parents.size+1)}
  roots = []
  for v, p in enumerate(parents, start=1):
    if p == 0:
      roots.append(v)
    else:
      children[int(p)].append(v)
  lines = []
  for r in roots:
    _generate_lines(r, children, lines, 0)
  return lines
