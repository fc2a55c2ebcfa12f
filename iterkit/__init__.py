"""Iterator tools: k-way merge, intersperse, k smallest, lazy buffering and group-and-fold maps."""

__version__ = "0.1.0"
__all__ = ["grouping_map", "intersperse", "k_smallest", "kmerge", "lazy_buffer"]