"""Classic algorithms and data structures in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bits",
    "disjoint_set",
    "doubly_linked",
    "graph_traversal",
    "recursion",
    "shortest_paths",
    "singly_linked",
    "spanning_tree",
    "text",
    "trie",
]