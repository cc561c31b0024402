"""
Sets of disjoint intervals over any interval type implementing
intervalset.interval.Interval.

A set is an ascending sequence of non-empty intervals in which no two
intervals overlap or touch; touching intervals are always merged into one.
Set owns a list and rewrites it in place under add, sub and intersect.
ImmutableSet is a read-only view whose algebra returns new views, so it can be
handed out and used as the argument of an operation without the caller having
to worry about it changing. Operations never modify their argument.

All algorithms are linear merge scans over the two sorted sequences and only
talk to intervals through the capability methods, never through their points.
"""

import functools
import logging

from intervalset import invariant

_log = logging.getLogger(__name__)

def _compareStarts(x, y):
  """Orders intervals by where they begin."""
  if not x.bisect(y)[0].isEmpty():
    return -1
  if not y.bisect(x)[0].isEmpty():
    return 1
  return 0

_byStart = functools.cmp_to_key(_compareStarts)

def _zeroFor(intervals, zero):
  """Returns zero, or the empty-value factory of the first interval's type if
     zero is not given. None if neither is known."""
  if zero is not None:
    return zero
  for ival in intervals:
    return type(ival).empty
  return None

def _mergeByStart(a, b):
  """Walks two sorted sequences together in order of start."""
  a_i = b_i = 0
  while a_i < len(a) and b_i < len(b):
    if _compareStarts(a[a_i], b[b_i]) <= 0:
      yield a[a_i]
      a_i += 1
    else:
      yield b[b_i]
      b_i += 1
  for ival in a[a_i:]:
    yield ival
  for ival in b[b_i:]:
    yield ival

def _add(a, b):
  """Union of two sorted sequences. Neither needs to be disjoint from the
     other."""
  merged = []
  # The current open interval
  cur = None
  for ival in _mergeByStart(a, b):
    if ival.isEmpty():
      continue
    if cur is None:
      cur = ival
    elif not cur.intersect(ival).isEmpty() or not cur.adjoin(ival).isEmpty():
      # We can merge this with the current interval.
      cur = cur.encompass(ival)
    else:
      # There was a gap so we need to save the old current and start a new
      # one.
      merged.append(cur)
      cur = ival

  # Don't forget to push the final interval, if applicable
  if cur is not None:
    merged.append(cur)
  return merged

def _sub(a, b):
  """Every part of a that is not in b."""
  result = []
  a_i = b_i = 0
  cur = a[0] if a else None
  while cur is not None:
    if b_i == len(b) or cur.before(b[b_i]):
      # Nothing left in b can reach the current interval.
      result.append(cur)
      a_i += 1
      cur = a[a_i] if a_i < len(a) else None
    elif b[b_i].before(cur):
      b_i += 1
    else:
      lower, upper = cur.bisect(b[b_i])
      if not lower.isEmpty():
        result.append(lower)
      if upper.isEmpty():
        a_i += 1
        cur = a[a_i] if a_i < len(a) else None
      else:
        # The rest of cur lies after b[b_i], which is done with.
        cur = upper
        b_i += 1
  return result

def _intersect(a, b):
  """Every part of a that is also in b."""
  result = []
  a_i = b_i = 0
  while a_i < len(a) and b_i < len(b):
    x, y = a[a_i], b[b_i]
    overlap = x.intersect(y)
    if not overlap.isEmpty():
      result.append(overlap)
    if x.before(y):
      a_i += 1
    elif y.before(x):
      b_i += 1
    else:
      # They overlap; whichever has nothing left past the other ends first
      # and cannot meet anything further along in the other sequence.
      x_done = x.bisect(y)[1].isEmpty()
      y_done = y.bisect(x)[1].isEmpty()
      if x_done:
        a_i += 1
      if y_done:
        b_i += 1
  return result

class SetInput(metaclass=invariant.EnforceInvariant):
  """The read-only operations of a set. Any SetInput, mutable or not, may be
     passed as the argument of an algebra operation."""

  def _checkInvariant(self):
    prev = None
    for ival in self._intervals:
      assert not ival.isEmpty()
      if prev is not None:
        assert prev.before(ival)
        assert prev.adjoin(ival).isEmpty()
      prev = ival

  def _zeroWith(self, other):
    return self._zero if self._zero is not None else other._zero

  def isEmpty(self):
    return not self._intervals

  def allIntervals(self):
    """Returns the intervals of the set in ascending order."""
    return list(self._intervals)

  def extent(self):
    """Returns the smallest single interval containing the whole set, gaps
       included. For an empty set this is the empty value of the set's
       interval type, or None if the set has never known one."""
    if not self._intervals:
      return self._zero() if self._zero is not None else None
    result = self._intervals[0]
    for ival in self._intervals[1:]:
      result = result.encompass(ival)
    return result

  def contains(self, candidate):
    """True iff candidate lies entirely within one interval of the set. The
       empty interval is contained in every set."""
    if candidate.isEmpty():
      return True
    for ival in self._intervals:
      lower, upper = candidate.bisect(ival)
      if lower.isEmpty() and upper.isEmpty():
        return True
    return False

  def iterBetween(self, bounds):
    """Returns an iterator over the non-empty intersections of each interval
       of the set with bounds, in ascending order."""
    for ival in self._intervals:
      if bounds.before(ival):
        break
      overlap = ival.intersect(bounds)
      if not overlap.isEmpty():
        yield overlap

  def intervalsBetween(self, bounds, visit):
    """Calls visit with each interval iterBetween would produce. Stops as
       soon as visit returns a false value."""
    for overlap in self.iterBetween(bounds):
      if not visit(overlap):
        return

  def __len__(self):
    return len(self._intervals)

  def __iter__(self):
    return iter(tuple(self._intervals))

  def __eq__(self, other):
    if not isinstance(other, SetInput):
      return NotImplemented
    return tuple(self._intervals) == tuple(other._intervals)

  def __str__(self):
    return "{%s}" % ", ".join(str(ival) for ival in self._intervals)

  def __repr__(self):
    return "%s(%r)" % (type(self).__name__, list(self._intervals))

class ImmutableSet(SetInput):
  """A read-only set. The intervals given must already be sorted, disjoint
     and non-adjacent; this is the caller's responsibility and is checked only
     when invariant checking is on."""

  def __init__(self, intervals=(), zero=None):
    self._intervals = tuple(intervals)
    self._zero = _zeroFor(self._intervals, zero)

  def union(self, other):
    """Returns a new set of everything in self or other."""
    return ImmutableSet(_add(self._intervals, other._intervals),
                        self._zeroWith(other))

  def sub(self, other):
    """Returns a new set of everything in self and not in other."""
    return ImmutableSet(_sub(self._intervals, other._intervals),
                        self._zeroWith(other))

  def intersect(self, other):
    """Returns a new set of everything in both self and other."""
    return ImmutableSet(_intersect(self._intervals, other._intervals),
                        self._zeroWith(other))

  def snapshot(self):
    return self

  def __or__(self, other):
    return self.union(other)

  def __sub__(self, other):
    return self.sub(other)

  def __and__(self, other):
    return self.intersect(other)

  def __hash__(self):
    return hash(self._intervals)

class Set(SetInput):
  """A mutable set of disjoint intervals."""

  __hash__ = None

  def __init__(self, intervals=(), zero=None):
    """Creates a set holding the given intervals. They need not be sorted and
       may overlap or touch; empty intervals are dropped. zero is a callable
       returning the empty interval and is only needed to give extent() a
       typed result while the set is empty."""
    intervals = [ival for ival in intervals if not ival.isEmpty()]
    self._zero = _zeroFor(intervals, zero)
    # We need to canonicalize any overlapping or adjacent user inputs.
    self._intervals = _add(sorted(intervals, key=_byStart), ())

  @classmethod
  def empty(klass, zero=None):
    """Factory method that creates a set with no intervals."""
    return klass((), zero)

  def _adoptZero(self, other):
    if self._zero is None:
      self._zero = other._zero

  def add(self, other):
    """Adds every interval of other to the set."""
    before = len(self._intervals)
    self._intervals = _add(self._intervals, other._intervals)
    self._adoptZero(other)
    _log.debug("add: %d + %d intervals -> %d", before, len(other),
               len(self._intervals))

  def insert(self, ival):
    """Adds a single interval to the set."""
    if ival.isEmpty():
      return
    self._intervals = _add(self._intervals, (ival,))
    if self._zero is None:
      self._zero = type(ival).empty

  def sub(self, other):
    """Removes every point of other from the set."""
    before = len(self._intervals)
    self._intervals = _sub(self._intervals, other._intervals)
    self._adoptZero(other)
    _log.debug("sub: %d - %d intervals -> %d", before, len(other),
               len(self._intervals))

  def intersect(self, other):
    """Removes every point not also in other from the set."""
    before = len(self._intervals)
    self._intervals = _intersect(self._intervals, other._intervals)
    self._adoptZero(other)
    _log.debug("intersect: %d & %d intervals -> %d", before, len(other),
               len(self._intervals))

  def snapshot(self):
    """Returns an ImmutableSet of the current contents. Later changes to this
       set are not visible through it."""
    return ImmutableSet(self._intervals, self._zero)

  def copy(self):
    """Returns an independent mutable copy."""
    rval = Set(zero=self._zero)
    rval._intervals = list(self._intervals)
    return rval
