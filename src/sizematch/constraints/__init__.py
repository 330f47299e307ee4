from sizematch.constraints.base import Constraint
from sizematch.constraints.count import SizeMatcher
from sizematch.constraints.logical import LogicalNot

__all__ = ["Constraint", "LogicalNot", "SizeMatcher"]
