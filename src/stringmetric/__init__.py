"""stringmetric package."""
from importlib.metadata import version, PackageNotFoundError

from .metrics import dl_distance, osa_distance

try:
    __version__ = version("stringmetric")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__", "dl_distance", "osa_distance"]
