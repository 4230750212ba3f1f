from .reports import load_results, similarity, summarise, write_report

__all__ = [
    "load_results",
    "similarity",
    "summarise",
    "write_report",
]
