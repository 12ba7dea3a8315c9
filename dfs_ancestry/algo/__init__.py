from .time_stamps      import time_stamp_visitor, time_stamps
from .cycles           import cycle_detector_visitor, has_cycle
from .topological_sort import topological_order_visitor, topological_sort
from .components       import tree_label_visitor, label_trees
