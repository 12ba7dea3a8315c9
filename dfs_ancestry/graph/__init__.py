from .adjacency_graph import edge, adjacency_graph
from .algo_interface  import dfs_interface_report
from .colormap        import color, colormap
from .visitor         import dfs_visitor, complete_visitor, visitor_list
from .algo            import depth_first_search, depth_first_visit
