"""
# Kind and calendar predicates.

# The kind predicates accept any object; the calendar predicates accept
# values with calendar fields, &types.Instant, &types.Date, and &types.DateTime,
# and read them in the value's own zone.

# &validators maps the kind identifiers used by &.generation to the
# corresponding kind predicate.
"""
from . import gregorian
from . import libzone
from . import types

def is_instant(value) -> bool:
	return isinstance(value, types.Instant)

def is_utc_instant(value) -> bool:
	"""
	# Whether &value is an instant in the shared &libzone.utc zone.
	"""
	return isinstance(value, types.Instant) and value.zone is libzone.utc

def is_date(value) -> bool:
	return isinstance(value, types.Date)

def is_date_time(value) -> bool:
	return isinstance(value, types.DateTime)

def is_zone(value) -> bool:
	return isinstance(value, libzone.Zone)

def is_period(value) -> bool:
	return isinstance(value, types.Period)

def is_interval(value) -> bool:
	return isinstance(value, types.Interval)

validators = {
	'instant': is_instant,
	'utc-instant': is_utc_instant,
	'date': is_date,
	'date-time': is_date_time,
	'zone': is_zone,
	'period': is_period,
	'interval': is_interval,
}

def _weekday(number):
	def predicate(value):
		return value.day_of_week == number
	predicate.__name__ = predicate.__qualname__ = gregorian.weekday_names[number - 1]
	return predicate

def _month(number):
	def predicate(value):
		return value.month == number
	predicate.__name__ = predicate.__qualname__ = gregorian.month_names[number - 1]
	return predicate

monday = _weekday(1)
tuesday = _weekday(2)
wednesday = _weekday(3)
thursday = _weekday(4)
friday = _weekday(5)
saturday = _weekday(6)
sunday = _weekday(7)

def weekend(value) -> bool:
	return value.day_of_week > 5

def weekday(value) -> bool:
	return value.day_of_week <= 5

january = _month(1)
february = _month(2)
march = _month(3)
april = _month(4)
may = _month(5)
june = _month(6)
july = _month(7)
august = _month(8)
september = _month(9)
october = _month(10)
november = _month(11)
december = _month(12)

def first_day_of_month(value) -> bool:
	return value.day == 1

def last_day_of_month(value) -> bool:
	return value.day == gregorian.days_in_month(value.year, value.month)
