from .damerau import dl_distance, init_dl_alphabet, init_dl_matrix
from .osa import osa_distance

__all__ = [
    "dl_distance",
    "init_dl_alphabet",
    "init_dl_matrix",
    "osa_distance",
]
