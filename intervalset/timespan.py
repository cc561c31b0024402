"""
Sets of time ranges. Timespan is a half-open [start, end) range of datetimes
that can be stored in an intervalset.sets.Set; TimespanSet wraps such a set
behind an API that takes and returns plain datetimes.

Naive and timezone-aware datetimes cannot be compared with each other, so all
the datetimes given to one set must be of the same kind.
"""

import datetime

from intervalset import sets
from intervalset.interval import InvalidArgument, LinearInterval

class Timespan(LinearInterval):
  """The half-open time range [start, end). The empty timespan has neither a
     start nor an end."""

  def __init__(self, start=None, end=None):
    if start is None or end is None:
      if start is not None or end is not None:
        raise InvalidArgument("a timespan needs both a start and an end")
    elif end < start:
      raise InvalidArgument("end %s is before start %s" % (end, start))
    elif end == start:
      start = end = None
    self._start = start
    self._end = end

  @classmethod
  def empty(klass):
    return klass()

  @classmethod
  def _fromBounds(klass, lower, upper):
    if upper <= lower:
      return klass.empty()
    return klass(lower, upper)

  def _checkInvariant(self):
    assert (self._start is None) == (self._end is None)
    assert self._start is None or self._start < self._end

  def _lower(self):
    return self._start

  def _upper(self):
    return self._end

  def start(self):
    return self._start

  def end(self):
    return self._end

  def duration(self):
    if self.isEmpty():
      return datetime.timedelta(0)
    return self._end - self._start

  def isEmpty(self):
    return self._start is None

  def __eq__(self, other):
    if not isinstance(other, Timespan):
      return NotImplemented
    return (self._start, self._end) == (other._start, other._end)

  def __hash__(self):
    return hash((self._start, self._end))

  def __str__(self):
    if self.isEmpty():
      return "[empty]"
    return "[%s, %s)" % (self._start.isoformat(), self._end.isoformat())

  def __repr__(self):
    return "Timespan(%r, %r)" % (self._start, self._end)

class TimespanSet:
  """A mutable set of disjoint time ranges."""

  def __init__(self):
    self._set = sets.Set.empty(Timespan.empty)

  @classmethod
  def empty(klass):
    return klass()

  def insert(self, start, end):
    """Adds the range [start, end). An empty range is ignored."""
    self._set.insert(Timespan(start, end))

  def add(self, other):
    self._set.add(other._set)

  def sub(self, other):
    self._set.sub(other._set)

  def intersect(self, other):
    self._set.intersect(other._set)

  def contains(self, start, end):
    """True iff [start, end) lies entirely within one range of the set."""
    return self._set.contains(Timespan(start, end))

  def extent(self):
    """Returns (start, end) of the smallest range covering the whole set, or
       (None, None) if the set is empty."""
    span = self._set.extent()
    return span.start(), span.end()

  def intervalsBetween(self, start, end, visit):
    """Calls visit(start, end) for each range of the set clipped to
       [start, end), in order, until visit returns a false value."""
    self._set.intervalsBetween(Timespan(start, end),
                               lambda span: visit(span.start(), span.end()))

  def copy(self):
    rval = TimespanSet()
    rval._set = self._set.copy()
    return rval

  def isEmpty(self):
    return self._set.isEmpty()

  def __len__(self):
    return len(self._set)

  def __iter__(self):
    return ((span.start(), span.end()) for span in self._set)

  def __eq__(self, other):
    if not isinstance(other, TimespanSet):
      return NotImplemented
    return self._set == other._set

  __hash__ = None

  def __str__(self):
    return str(self._set)
