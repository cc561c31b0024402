import datetime
import mock
import unittest

from intervalset.interval import InvalidArgument
from intervalset.timespan import Timespan, TimespanSet

_TZ = datetime.timezone(datetime.timedelta(hours=-8), "PST")

def _date(year, month, day, hour=0):
  return datetime.datetime(year, month, day, hour, tzinfo=_TZ)

# Dates before and after all the other dates.
PAST = _date(1980, 6, 1)
FUTURE = _date(2030, 6, 1)

WEEK1 = (_date(2015, 6, 1), _date(2015, 6, 8))
WEEK2 = (_date(2015, 6, 8), _date(2015, 6, 15))
WEEK3 = (_date(2015, 6, 15), _date(2015, 6, 22))

def _weeks1And3():
  s = TimespanSet()
  s.insert(*WEEK1)
  s.insert(*WEEK3)
  return s

def _weeks123():
  s = TimespanSet()
  s.insert(*WEEK1)
  s.insert(*WEEK3)
  s.insert(*WEEK2)
  return s

def _between(s, start, end):
  spans = []
  def visit(start, end):
    spans.append((start, end))
    return True
  s.intervalsBetween(start, end, visit)
  return spans

def _weekdaysWeekends(year):
  weekdays, weekends = TimespanSet(), TimespanSet()
  day = _date(year, 1, 1)
  while day.year == year:
    nextDay = day + datetime.timedelta(days=1)
    if day.weekday() >= 5:
      weekends.insert(day, nextDay)
    else:
      weekdays.insert(day, nextDay)
    day = nextDay
  return weekdays, weekends

def _middays(year):
  middays = TimespanSet()
  day = _date(year, 1, 1)
  while day.year == year:
    middays.insert(day.replace(hour=11), day.replace(hour=13))
    day += datetime.timedelta(days=1)
  return middays

class test_Timespan(unittest.TestCase):
  def test_construction(self):
    a = Timespan(*WEEK1)
    self.assertEqual((a.start(), a.end()), WEEK1)
    self.assertEqual(a.duration(), datetime.timedelta(days=7))
    self.assertTrue(Timespan().isEmpty())
    self.assertTrue(Timespan(WEEK1[0], WEEK1[0]).isEmpty())
    self.assertEqual(Timespan(WEEK1[0], WEEK1[0]), Timespan.empty())
    self.assertEqual(Timespan().duration(), datetime.timedelta(0))
    self.assertRaises(InvalidArgument, Timespan, WEEK1[1], WEEK1[0])
    self.assertRaises(InvalidArgument, Timespan, WEEK1[0], None)

  def test_algebra(self):
    week1, week2 = Timespan(*WEEK1), Timespan(*WEEK2)
    self.assertTrue(week1.before(week2))
    self.assertEqual(week1.adjoin(week2), Timespan(WEEK1[0], WEEK2[1]))
    self.assertTrue(week1.intersect(week2).isEmpty())
    self.assertEqual(week1.encompass(Timespan(*WEEK3)),
                     Timespan(WEEK1[0], WEEK3[1]))
    self.assertEqual(Timespan(WEEK1[0], WEEK2[1]).bisect(week2),
                     (week1, Timespan.empty()))

  def test_str(self):
    self.assertEqual(str(Timespan()), "[empty]")
    self.assertEqual(str(Timespan(*WEEK1)),
                     "[2015-06-01T00:00:00-08:00, 2015-06-08T00:00:00-08:00)")

class test_TimespanSet(unittest.TestCase):
  def test_intervalsBetween(self):
    # Iterating over a single value.
    visit = mock.Mock(return_value=False)
    _weeks1And3().intervalsBetween(PAST, FUTURE, visit)
    visit.assert_called_once_with(*WEEK1)

    for (name, s, bounds, want) in (
        ("entire range overlaps with weeks 1 and 3", _weeks1And3(),
         (PAST, FUTURE), [WEEK1, WEEK3]),
        ("[week2.start, week3.end) overlaps with week3", _weeks1And3(),
         (WEEK2[0], WEEK3[1]), [WEEK3]),
        ("zero overlap with week 2", _weeks1And3(), WEEK2, []),
        ("clipped to the bounds", _weeks1And3(),
         (_date(2015, 6, 4), _date(2015, 6, 18)),
         [(_date(2015, 6, 4), WEEK1[1]), (WEEK3[0], _date(2015, 6, 18))]),
        ("weeks123 should be one continuous range", _weeks123(),
         (PAST, FUTURE), [(WEEK1[0], WEEK3[1])])):
      self.assertEqual(_between(s, *bounds), want, name)

  def test_sub(self):
    eternity = TimespanSet()
    eternity.insert(PAST, FUTURE)
    for (name, a, b, want) in (
        ("empty - empty", TimespanSet(), TimespanSet(), []),
        ("empty - weeks 1 and 3", TimespanSet(), _weeks1And3(), []),
        ("weeks 1 and 3 - empty", _weeks1And3(), TimespanSet(),
         [WEEK1, WEEK3]),
        ("weeks123 - weeks 1 and 3", _weeks123(), _weeks1And3(), [WEEK2]),
        ("weeks 1 and 3 - eternity", _weeks1And3(), eternity, [])):
      a.sub(b)
      self.assertEqual(_between(a, PAST, FUTURE), want, name)

  def test_extent(self):
    w = _weeks123()
    w.sub(_weeks1And3())
    self.assertEqual(w.extent(), WEEK2)

    w = _weeks123()
    w.sub(TimespanSet())
    self.assertEqual(w.extent(), (WEEK1[0], WEEK3[1]))

    w = _weeks123()
    w.add(TimespanSet())
    self.assertEqual(w.extent(), (WEEK1[0], WEEK3[1]))

    w = TimespanSet()
    w.add(_weeks123())
    self.assertEqual(w.extent(), (WEEK1[0], WEEK3[1]))

    self.assertEqual(TimespanSet().extent(), (None, None))

  def test_contains(self):
    self.assertTrue(_weeks1And3().contains(*WEEK1))
    self.assertTrue(_weeks1And3().contains(_date(2015, 6, 2),
                                           _date(2015, 6, 3)))
    self.assertFalse(_weeks1And3().contains(WEEK1[0], WEEK2[1]))
    self.assertTrue(_weeks123().contains(WEEK1[0], WEEK2[1]))
    self.assertTrue(TimespanSet().contains(WEEK1[0], WEEK1[0]))

  def test_calendar(self):
    weekdays, weekends = _weekdaysWeekends(2017)
    middays = _middays(2017)
    aug6, aug13 = _date(2017, 8, 6), _date(2017, 8, 13)
    lunches = [(_date(2017, 8, day, 11), _date(2017, 8, day, 13))
               for day in range(7, 12)]

    s = weekdays.copy()
    s.intersect(middays)
    self.assertEqual(_between(s, aug6, aug13), lunches)

    s = middays.copy()
    s.intersect(weekdays)
    self.assertEqual(_between(s, aug6, aug13), lunches)

    s = weekdays.copy()
    s.sub(middays)
    self.assertEqual(_between(s, aug6, _date(2017, 8, 9)),
                     [(_date(2017, 8, 7), _date(2017, 8, 7, 11)),
                      (_date(2017, 8, 7, 13), _date(2017, 8, 8, 11)),
                      (_date(2017, 8, 8, 13), _date(2017, 8, 9))])

    # Weekdays and weekends together cover the year without a gap.
    year = weekdays.copy()
    year.add(weekends)
    self.assertEqual(len(year), 1)
    self.assertEqual(year.extent(), (_date(2017, 1, 1), _date(2018, 1, 1)))

  def test_copy(self):
    weekdays, _ = _weekdaysWeekends(2017)
    weekdays.intersect(_middays(2017))
    c = weekdays.copy()
    self.assertEqual(str(c), str(weekdays))
    self.assertEqual(c, weekdays)
    c.sub(_weeks123())
    c.insert(PAST, _date(1981, 1, 1))
    self.assertNotEqual(c, weekdays)

  def test_str(self):
    self.assertEqual(str(TimespanSet()), "{}")
    s = TimespanSet()
    s.insert(*WEEK1)
    self.assertEqual(str(s),
        "{[2015-06-01T00:00:00-08:00, 2015-06-08T00:00:00-08:00)}")
    self.assertEqual(list(s), [WEEK1])

if __name__ == '__main__':
  unittest.main()
