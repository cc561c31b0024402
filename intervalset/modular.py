"""
Intervals over a cyclic integer domain.

An IntInterval knows its modulus and may wrap past the end of the domain back
to zero. It is stored as (modulus, start, size) rather than (start, end): when
start == end the interval is either empty or complete, and only the size tells
the two apart. Never infer emptiness or completeness from start() == end().

See https://fgiesen.wordpress.com/2015/09/24/intervals-in-modular-arithmetic/
for a discussion of intervals in modular arithmetic.

IntIntervals can be decomposed into ordinary RealIntervals with
realIntervals(), or turned into an ImmutableSet of them with toSet() to take
part in set algebra.
"""

import logging

from intervalset import invariant
from intervalset import sets
from intervalset.interval import CLOSED_CLOSED, InvalidArgument, RealInterval

_log = logging.getLogger(__name__)

class Modulus(int):
  """An integer modulus with the arithmetic needed by IntInterval."""

  def truncatedModulo(self, a):
    """Remainder of a divided by the modulus with the sign of a, as a
       truncating division would give. May be negative."""
    remainder = abs(a) % self
    return -remainder if a < 0 else remainder

  def arrayOffset(self, position):
    """Returns the offset into an array of length m for the position:

       0 <= position < m gives position unchanged, position >= m gives
       position mod m, and a negative position gives (position mod m) + m
       for a truncating mod. The result is never negative:

       Modulus(10).arrayOffset(-1) == 9
       Modulus(10).arrayOffset(-11) == 9
       Modulus(10).arrayOffset(11) == 1

       A zero modulus has no positions; every position maps to 0."""
    if self == 0:
      return 0
    maybeNegative = self.truncatedModulo(position)
    if maybeNegative < 0:
      return maybeNegative + self
    return maybeNegative

  def intervalSizeForward(self, a, b):
    """Size of the interval that starts at a and ends at b, travelling
       forward. Both are normalized first; equal positions give 0."""
    return self._forwardDistance(self.arrayOffset(a), self.arrayOffset(b))

  def intervalSizeMin(self, a, b):
    """The shorter of the forward distances from a to b and from b to a."""
    a = self.arrayOffset(a)
    b = self.arrayOffset(b)
    return min(self._forwardDistance(a, b), self._forwardDistance(b, a))

  def _forwardDistance(self, a, b):
    if b < a:
      b += self
    return b - a

  def __repr__(self):
    return "Modulus(%d)" % self

class IntInterval(metaclass=invariant.EnforceInvariant):
  """An interval of integers under modular arithmetic. Use fromStartSize
     to construct one."""

  def __init__(self, modulus, start, size):
    """Stores already validated fields. start must be normalized."""
    self._modulus = Modulus(modulus)
    self._start = start
    self._size = size

  @classmethod
  def fromStartSize(klass, modulus, start, size):
    """Factory method that creates an interval of size integers beginning at
       start. Raises InvalidArgument if the modulus or the size is negative.
       A size larger than the modulus is clamped to the modulus.

       The result's start() is modulus.arrayOffset(start) even when the size
       is 0 or the interval is complete."""
    modulus = Modulus(modulus)
    if modulus < 0:
      raise InvalidArgument("invalid modulus = %d is less than 0" % modulus)
    if size > modulus:
      _log.debug("clamping size %d to modulus %d", size, modulus)
      size = int(modulus)
    elif size < 0:
      raise InvalidArgument("invalid size = %d is less than 0" % size)
    return klass(modulus, modulus.arrayOffset(start), size)

  def _checkInvariant(self):
    assert self._modulus >= 0
    assert 0 <= self._size <= self._modulus
    assert self._modulus == 0 or 0 <= self._start < self._modulus

  def modulus(self):
    return self._modulus

  def size(self):
    """The number of integers in the interval."""
    return self._size

  def __len__(self):
    return self._size

  def start(self):
    """The first position. Meaningless but preserved for an empty
       interval."""
    return self._start

  def end(self):
    """The position after the last one, normalized, so it may be less than
       start() when the interval wraps. Equal to start() for both the empty
       and the complete interval."""
    return self._modulus.arrayOffset(self._start + self._size)

  def isEmpty(self):
    return self._size == 0

  def isComplete(self):
    return self._size == self._modulus

  def expandStart(self, *positions):
    """Returns the interval with its start moved back as little as possible
       so that it contains every position. The end stays fixed. An empty
       interval expands from the start it was created with."""
    if self.isComplete() or not positions:
      return self
    end = self._start + self._size
    floor = end - self._modulus
    minStart = self._start
    for position in positions:
      # Representative of position in [end - m, end).
      candidate = floor + self._modulus.arrayOffset(position - floor)
      minStart = min(minStart, candidate)
    return IntInterval.fromStartSize(self._modulus, minStart, end - minStart)

  def expandEnd(self, *positions):
    """Returns the interval with its end moved forward as little as possible
       so that it contains every position. The start stays fixed."""
    if self.isComplete() or not positions:
      return self
    maxEnd = self._start + self._size
    for position in positions:
      # Representative of position in [start, start + m).
      candidate = self._start + self._modulus.arrayOffset(position -
                                                          self._start)
      maxEnd = max(maxEnd, candidate + 1)
    return IntInterval.fromStartSize(self._modulus, self._start,
                                     maxEnd - self._start)

  def expandMinimal(self, *positions):
    """Returns whichever of expandStart and expandEnd grows the interval
       less, preferring expandStart on a tie."""
    a = self.expandStart(*positions)
    b = self.expandEnd(*positions)
    if a.size() > b.size():
      return b
    return a

  def contains(self, position):
    """True iff the interval contains modulus.arrayOffset(position)."""
    return self.containsExact(self._modulus.arrayOffset(position))

  def containsExact(self, i):
    """True iff the interval contains i. No modulo is applied to i, so values
       outside [0, modulus) are never contained."""
    return any(part.contains(i) for part in self.realIntervals())

  def realIntervals(self):
    """Returns a list of zero, one or two RealIntervals that together contain
       exactly the integers of this interval. The first part always starts at
       start(); a second part, present only when the interval wraps, starts
       at 0."""
    if self.isEmpty():
      return []
    sameStartSize = min(self._size, self._modulus - self._start)
    parts = [RealInterval(self._start, sameStartSize)]
    if self._size > sameStartSize:
      parts.append(RealInterval(0, self._size - sameStartSize))
    return parts

  def toSet(self):
    """Returns the integers of the interval as an ImmutableSet of
       RealIntervals."""
    return sets.Set(self.realIntervals(), zero=RealInterval.empty).snapshot()

  def _normalized(self):
    if not self.isComplete():
      return self
    return IntInterval.fromStartSize(self._modulus, 0, self._size)

  def equalSets(self, other):
    """True iff both intervals contain exactly the same integers. The moduli
       themselves are not compared."""
    if self.size() != other.size():
      return False
    if self.isEmpty():
      return True
    return self._normalized().start() == other._normalized().start()

  def __eq__(self, other):
    if not isinstance(other, IntInterval):
      return NotImplemented
    return (self._modulus, self._start, self._size) == \
           (other._modulus, other._start, other._size)

  def __hash__(self):
    return hash((int(self._modulus), self._start, self._size))

  def __str__(self):
    if self.isEmpty():
      return "<mod=%d; empty>" % self._modulus
    return "<mod=%d; %s>" % (self._modulus, ", ".join(
        part.format(CLOSED_CLOSED) for part in self.realIntervals()))

  def __repr__(self):
    return "IntInterval.fromStartSize(%d, %d, %d)" % \
           (self._modulus, self._start, self._size)
