"""
Provides the interval capability contract used by the set engine, the errors
shared by the package, and RealInterval, a half-open interval over plain
integers.

Any type that implements the Interval methods can be stored in an
intervalset.sets.Set. The engine never looks at points directly; it only asks
intervals to intersect, bisect, adjoin and encompass each other.
"""

import abc

from intervalset import invariant

class Error(Exception):
  """Base error for the intervalset package."""

class InvalidArgument(Error, ValueError):
  """An interval was constructed from arguments that describe no valid
     interval, such as a negative size or modulus."""

class DomainMismatch(Error, TypeError):
  """Two intervals over different point domains were combined. This is a
     programming error; the geometry of the result would be meaningless."""

# Boundary styles for RealInterval.format.
CLOSED_CLOSED = "[]"
CLOSED_OPEN = "[)"
OPEN_OPEN = "()"

class Interval(metaclass=invariant.EnforceInvariant):
  """A contiguous, possibly empty range in some totally ordered domain.

     Intervals are values: no method mutates self, all of them return new
     intervals. Each concrete type has a distinguished empty value returned by
     empty() and recognised by isEmpty()."""

  @classmethod
  @abc.abstractmethod
  def empty(klass):
    """Returns the empty value of this interval type."""

  def _checkInvariant(self):
    pass

  def _cast(self, other):
    """Returns other if it shares self's point domain, raises DomainMismatch
       otherwise."""
    if type(other) is not type(self):
      raise DomainMismatch("cannot combine %s with %s" %
                           (type(self).__name__, type(other).__name__))
    return other

  @abc.abstractmethod
  def isEmpty(self):
    """True iff the interval denotes no points."""

  @abc.abstractmethod
  def intersect(self, other):
    """Returns the overlap of self and other, or the empty value."""

  @abc.abstractmethod
  def before(self, other):
    """True iff self ends at or before the point where other begins."""

  @abc.abstractmethod
  def bisect(self, other):
    """Splits self around its overlap with other. Returns a pair (lower,
       upper) of the parts of self strictly before and strictly after the
       overlap; either may be empty. If there is no overlap the whole of self
       is returned on the side of other it lies on."""

  @abc.abstractmethod
  def adjoin(self, other):
    """Returns the union of self and other if they touch exactly at an edge
       without overlapping, and the empty value otherwise."""

  @abc.abstractmethod
  def encompass(self, other):
    """Returns the smallest interval containing both self and other, gap
       included."""

class LinearInterval(Interval):
  """Shared implementation of the contract for half-open [lower, upper)
     intervals over a non-cyclic ordered domain. Subclasses provide storage
     through _lower, _upper and _fromBounds."""

  @abc.abstractmethod
  def _lower(self):
    pass

  @abc.abstractmethod
  def _upper(self):
    pass

  @classmethod
  def _fromBounds(klass, lower, upper):
    raise NotImplementedError

  def intersect(self, other):
    other = self._cast(other)
    if self.isEmpty() or other.isEmpty():
      return self.empty()
    return self._fromBounds(max(self._lower(), other._lower()),
                            min(self._upper(), other._upper()))

  def before(self, other):
    other = self._cast(other)
    if self.isEmpty() or other.isEmpty():
      return False
    return self._upper() <= other._lower()

  def bisect(self, other):
    overlap = self.intersect(other)
    if overlap.isEmpty():
      if self.before(other):
        return self, self.empty()
      return self.empty(), self
    return (self._fromBounds(self._lower(), overlap._lower()),
            self._fromBounds(overlap._upper(), self._upper()))

  def adjoin(self, other):
    other = self._cast(other)
    if self.isEmpty() or other.isEmpty():
      return self.empty()
    if self._upper() == other._lower():
      return self._fromBounds(self._lower(), other._upper())
    if other._upper() == self._lower():
      return self._fromBounds(other._lower(), self._upper())
    return self.empty()

  def encompass(self, other):
    other = self._cast(other)
    if self.isEmpty():
      return other
    if other.isEmpty():
      return self
    return self._fromBounds(min(self._lower(), other._lower()),
                            max(self._upper(), other._upper()))

class RealInterval(LinearInterval):
  """An integer interval that does not use modular arithmetic, covering
     [start, start + size). Used both as the integer domain of the set engine
     and as the pieces an IntInterval decomposes into."""

  def __init__(self, start=0, size=0):
    if size < 0:
      raise InvalidArgument("invalid size = %d is less than 0" % size)
    self._start = start
    self._size = size

  @classmethod
  def empty(klass):
    return klass()

  @classmethod
  def fromStartEnd(klass, start, end):
    """Factory for [start, end). An end before the start is an error; an end
       equal to the start gives the empty interval."""
    if end < start:
      raise InvalidArgument("end %d is before start %d" % (end, start))
    return klass(start, end - start)

  @classmethod
  def _fromBounds(klass, lower, upper):
    if upper <= lower:
      return klass.empty()
    return klass(lower, upper - lower)

  def _checkInvariant(self):
    assert self._size >= 0

  def _lower(self):
    return self._start

  def _upper(self):
    return self._start + self._size

  def start(self):
    """The inclusive first position. Undefined for an empty interval."""
    return self._start

  def end(self):
    """The exclusive end position. Undefined for an empty interval."""
    return self._start + self._size

  def size(self):
    return self._size

  def __len__(self):
    return self._size

  def isEmpty(self):
    return self._size == 0

  def contains(self, i):
    return self._start <= i < self.end()

  def containsInterval(self, other):
    return other.isEmpty() or \
           (self._start <= other.start() and self.end() >= other.end())

  def expand(self, *values):
    """Returns the smallest interval containing self and every value."""
    if not values:
      return self
    low, high = min(values), max(values)
    if not self.isEmpty():
      low, high = min(low, self._start), max(high, self.end() - 1)
    return RealInterval(low, high - low + 1)

  def shift(self, offset):
    """Returns the interval moved by offset in the positive direction."""
    return RealInterval(self._start + offset, self._size)

  def format(self, boundaries=CLOSED_CLOSED):
    if self.isEmpty():
      return "[empty]"
    if boundaries == CLOSED_CLOSED:
      low, high = self._start, self.end() - 1
    elif boundaries == CLOSED_OPEN:
      low, high = self._start, self.end()
    elif boundaries == OPEN_OPEN:
      low, high = self._start - 1, self.end()
    else:
      raise InvalidArgument("unknown boundaries %r" % (boundaries,))
    return "%s%d, %d%s" % (boundaries[0], low, high, boundaries[1])

  def __str__(self):
    return self.format(CLOSED_OPEN)

  def __repr__(self):
    return "RealInterval(%d, %d)" % (self._start, self._size)

  def __eq__(self, other):
    if not isinstance(other, RealInterval):
      return NotImplemented
    if self.isEmpty() or other.isEmpty():
      return self.isEmpty() and other.isEmpty()
    return self._start == other._start and self._size == other._size

  def __hash__(self):
    if self.isEmpty():
      return hash(())
    return hash((self._start, self._size))
