"""
dfs_ancestry: depth-first search with visitors, and ancestor queries on forests
"""

__version__ = '1.0'

from dfs_ancestry import utils
from dfs_ancestry import graph
from dfs_ancestry import algo
from dfs_ancestry import forest
from dfs_ancestry import io
from dfs_ancestry import factory
