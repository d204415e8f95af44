"""Classic data structures, several with small interactive console front ends."""

__version__ = "0.1.0"
__all__ = [
    "avl_tree",
    "graph",
    "graph_containers",
    "hash_dialog",
    "hash_table",
    "matrix",
    "parent_dialog",
    "parent_table",
    "ring_queue",
    "server",
    "simulation",
    "string_table",
    "table_iterator",
    "threaded_tree",
    "tree_timing",
]