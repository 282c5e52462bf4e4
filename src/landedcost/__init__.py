"""landedcost - evidence-ranked landed cost estimates for imported products."""

from . import costing
from .version import __version__

__all__ = [
    "costing",
    "__version__",
]
