"""
Sets of disjoint one-dimensional intervals with union, difference and
intersection, over integers, timestamps or any interval type implementing
intervalset.interval.Interval, plus intervals over modular integers.
"""

from intervalset.interval import (CLOSED_CLOSED, CLOSED_OPEN, OPEN_OPEN,
                                  DomainMismatch, Error, Interval,
                                  InvalidArgument, LinearInterval,
                                  RealInterval)
from intervalset.modular import IntInterval, Modulus
from intervalset.sets import ImmutableSet, Set, SetInput
from intervalset.timespan import Timespan, TimespanSet

__all__ = [
  "CLOSED_CLOSED", "CLOSED_OPEN", "OPEN_OPEN",
  "DomainMismatch", "Error", "InvalidArgument",
  "Interval", "LinearInterval", "RealInterval",
  "IntInterval", "Modulus",
  "ImmutableSet", "Set", "SetInput",
  "Timespan", "TimespanSet",
]
