"""
# Primary public module.

# Provides constructors for the time value kinds, period helpers, the
# arithmetic and ordering functions, the interval algebra, and access to the
# coercion and zone functions.

#!python
	from horology import library as t

	i = t.interval(t.instant(1986), t.instant(1990))
	assert t.contains(i, t.instant(1987, 6))
	assert t.duration_in(i, 'years') == 4
	assert t.plus(t.instant(1986, 10, 14), t.months(1), t.weeks(3)) == t.instant(1986, 12, 5)
"""
from . import abstract
from . import libzone
from . import types
from .types import Instant, Date, DateTime, YearMonth, Period, Interval
from .core import Error, InvalidCalendarValueError, InvalidIntervalError, UnknownZoneError, ParseError
from .coerce import (
	to_instant,
	to_epoch_millis,
	to_epoch_seconds,
	to_calendar_date,
	to_calendar_date_time,
	to_year_month,
	to_string,
	to_platform_date,
	in_zone,
	from_epoch_millis,
	from_string,
	from_platform_date,
)
from .sysclock import now

utc = libzone.utc

def instant(year, month=1, day=1, hour=0, minute=0, second=0, millisecond=0, zone=utc) -> Instant:
	"""
	# Construct the instant whose fields in &zone are those given; UTC by default.
	"""
	if isinstance(zone, str):
		zone = libzone.resolve(zone)
	return Instant.of(year, month, day, hour, minute, second, millisecond, zone=zone)

def date(year, month=1, day=1) -> Date:
	return Date.of(year, month, day)

def date_time(year, month=1, day=1, hour=0, minute=0, second=0, millisecond=0) -> DateTime:
	return DateTime.of(year, month, day, hour, minute, second, millisecond)

def year_month(year, month=1) -> YearMonth:
	return YearMonth.of(year, month)

def period(**units) -> Period:
	"""
	# Construct a &Period from keywords named by &types.units.
	"""
	return Period.of(**units)

def _unit(name):
	def constructor(quantity=1):
		return Period.of(**{name: quantity})
	constructor.__name__ = constructor.__qualname__ = name
	constructor.__doc__ = "\n\t# A &Period of &quantity %s.\n\t" %(name,)
	return constructor

years = _unit('years')
months = _unit('months')
weeks = _unit('weeks')
days = _unit('days')
hours = _unit('hours')
minutes = _unit('minutes')
seconds = _unit('seconds')
millis = _unit('milliseconds')

def plus(value:abstract.Shift, period, *periods):
	"""
	# Apply &period and then each of &periods to &value in order. Each period
	# is applied to the result of the previous one.
	"""
	value = value.elapse(period)
	for p in periods:
		value = value.elapse(p)
	return value

def minus(value:abstract.Shift, period, *periods):
	"""
	# Remove &period and then each of &periods from &value in order.
	"""
	value = value.rollback(period)
	for p in periods:
		value = value.rollback(p)
	return value

def before(a:abstract.Ordering, b) -> bool:
	"""
	# Whether &a is strictly before &b.
	"""
	return a.leads(b)

def after(a:abstract.Ordering, b) -> bool:
	"""
	# Whether &a is strictly after &b.
	"""
	return a.follows(b)

def same(a, b) -> bool:
	"""
	# Whether &a and &b identify the same moment.
	"""
	return a.millis == b.millis

# Component access.

def year(value:abstract.Fields) -> int:
	return value.year

def month(value:abstract.Fields) -> int:
	return value.month

def day(value:abstract.Fields) -> int:
	return value.day

def day_of_week(value:abstract.Fields) -> int:
	return value.day_of_week

def hour(value:abstract.Fields) -> int:
	return value.hour

def minute(value:abstract.Fields) -> int:
	return value.minute

def second(value:abstract.Fields) -> int:
	return value.second

def millisecond(value:abstract.Fields) -> int:
	return value.millisecond

# Interval algebra.

def interval(a, b) -> Interval:
	"""
	# Construct the interval from &a to &b. Both are coerced with &to_instant.
	# Raises &InvalidIntervalError when &b is before &a.
	"""
	return Interval.of(to_instant(a), to_instant(b))

def start(i:Interval) -> Instant:
	return i.start

def end(i:Interval) -> Instant:
	return i.end

def contains(i:Interval, value) -> bool:
	"""
	# Whether &value falls inside &i; the end is excluded.
	"""
	return i.contains(value)
within = contains

def overlaps(i1:Interval, i2:Interval) -> bool:
	return i1.overlaps(i2)

def overlap(i1:Interval, i2:Interval):
	"""
	# The interval shared by &i1 and &i2; &None if they do not overlap.
	"""
	if not i1.overlaps(i2):
		return None
	s = i1.start if i1.start.millis >= i2.start.millis else i2.start
	e = i1.end if i1.end.millis <= i2.end.millis else i2.end
	return Interval.of(s, e)

def abuts(i1:Interval, i2:Interval) -> bool:
	return i1.abuts(i2)

def duration_in(i:Interval, unit:str) -> int:
	"""
	# The number of whole &unit in &i. Years and months are counted on the
	# calendar of the start's zone.
	"""
	return i.measure(unit)

def _measure(unit):
	def measure(i):
		return i.measure(unit)
	measure.__name__ = measure.__qualname__ = 'in_' + unit
	return measure

in_millis = _measure('milliseconds')
in_seconds = _measure('seconds')
in_minutes = _measure('minutes')
in_hours = _measure('hours')
in_days = _measure('days')
in_weeks = _measure('weeks')
in_months = _measure('months')
in_years = _measure('years')

def extend(i:Interval, *periods) -> Interval:
	"""
	# Move the end of &i by each of the &periods; the start is retained.
	"""
	return i.extend(*periods)

# Clock.

def epoch() -> Instant:
	"""
	# 1970-01-01T00:00:00Z
	"""
	return Instant.from_millis(0)

def today_at_midnight(zone=utc) -> Instant:
	"""
	# The first moment of the current day in &zone.
	"""
	if isinstance(zone, str):
		zone = libzone.resolve(zone)
	local = now().to_zone(zone).local
	return Instant.of(local.year, local.month, local.day, zone=zone)

def ago(period) -> Instant:
	return now().rollback(period)

def from_now(period) -> Instant:
	return now().elapse(period)

def minutes_ago(value) -> int:
	"""
	# The whole minutes between &value and now.
	"""
	return in_minutes(interval(value, now()))

# Zones.

def to_zone(value, zone) -> Instant:
	"""
	# The same moment as &value displayed in &zone.
	"""
	if isinstance(zone, str):
		zone = libzone.resolve(zone)
	return to_instant(value).to_zone(zone)

def from_zone(value, zone) -> Instant:
	"""
	# The moment in &zone with the same calendar fields as &value.
	"""
	if isinstance(zone, str):
		zone = libzone.resolve(zone)
	return to_instant(value).from_zone(zone)

zone_for_offset = libzone.offset
zone_for_id = libzone.resolve
default_zone = libzone.local
