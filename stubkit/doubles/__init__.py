"""Method doubles, their pending results, and the sets that own them."""

from stubkit.doubles.double_set import DoubleSet
from stubkit.doubles.method import MethodDouble
from stubkit.doubles.pending import PendingResult

__all__ = [
    "DoubleSet",
    "MethodDouble",
    "PendingResult",
]
