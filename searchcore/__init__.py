"""Core data structures and sequence algorithms for a search engine."""

__version__ = "1.0.0"

__all__ = [
    "algorithm",
    "string_view",
    "json_builder",
    "bloom_filter",
    "csr",
    "dary_heap",
    "lru_cache",
    "mem_map_file",
    "priority_queue",
    "unordered_set",
]