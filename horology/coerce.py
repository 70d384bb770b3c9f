"""
# Conversion of external representations into &types.Instant.

# &to_instant is the single entry point; it scans &conversions in order and
# applies the first entry whose type matches. The remaining functions are
# derived conversions that route through &to_instant and produce &None when
# it does.

#!python
	assert to_instant(None) is None
	assert to_epoch_millis('1970-01-01T00:00:01Z') == 1000
	assert to_calendar_date(0) == types.Date.of(1970, 1, 1)
"""
import datetime
import functools

from . import format
from . import gregorian
from . import libzone
from . import types

_epoch = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
_millisecond = datetime.timedelta(milliseconds=1)

def _identity(value):
	return value

def _from_point(value):
	# Zone-less kinds are read as UTC.
	return types.Instant.from_millis(value.millis)

def _from_year_month(value):
	return types.Instant.from_millis(value.date.millis)

def _from_datetime(value):
	if value.utcoffset() is not None:
		return types.Instant.from_millis((value - _epoch) // _millisecond)

	return types.Instant.from_millis(gregorian.millis_from_fields(
		value.year, value.month, value.day,
		value.hour, value.minute, value.second,
		value.microsecond // 1000,
	))

def _from_date(value):
	return types.Instant.from_millis(gregorian.millis_from_fields(value.year, value.month, value.day))

#: Ordered conversion table; the first matching type wins.
conversions = (
	(types.Instant, _identity),
	(types.DateTime, _from_point),
	(types.Date, _from_point),
	(types.YearMonth, _from_year_month),
	(int, types.Instant.from_millis),
	(str, format.parse),
	# datetime is a subclass of date.
	(datetime.datetime, _from_datetime),
	(datetime.date, _from_date),
)

def to_instant(value, isinstance=isinstance):
	"""
	# Convert &value into a &types.Instant.

	# &None is passed through. Raises &TypeError when &value has no
	# conversion and &.core.ParseError when a string is not recognized.
	"""
	if value is None:
		return None

	# bool is an int subclass, but not a moment.
	if not isinstance(value, bool):
		for kind, convert in conversions:
			if isinstance(value, kind):
				return convert(value)

	raise TypeError("cannot convert %r to an instant" %(type(value).__name__,))

def derived(function):
	"""
	# Decorate &function so that it receives the instant coerced from its
	# first argument; &None short circuits.
	"""
	@functools.wraps(function)
	def conversion(value, *args):
		instant = to_instant(value)
		if instant is None:
			return None
		return function(instant, *args)
	return conversion

@derived
def to_epoch_millis(instant) -> int:
	return instant.millis

@derived
def to_epoch_seconds(instant) -> int:
	"""
	# Seconds since the unix epoch truncated toward zero.
	"""
	millis = instant.millis
	if millis < 0:
		return -(-millis // gregorian.millis_in_second)
	return millis // gregorian.millis_in_second

@derived
def to_calendar_date(instant) -> types.Date:
	"""
	# The calendar date of the instant in its own zone.
	"""
	return instant.local.date

@derived
def to_calendar_date_time(instant) -> types.DateTime:
	"""
	# The calendar fields of the instant in its own zone.
	"""
	return instant.local

@derived
def to_year_month(instant) -> types.YearMonth:
	local = instant.local
	return types.YearMonth((local.year, local.month))

@derived
def to_string(instant) -> str:
	"""
	# ISO-8601 text in UTC with milliseconds.
	"""
	return format.format(instant)

@derived
def to_platform_date(instant) -> datetime.datetime:
	"""
	# An aware &datetime.datetime in UTC. Sub-millisecond precision is zero.
	"""
	return _epoch + (instant.millis * _millisecond)

@derived
def in_zone(instant, zone) -> types.Date:
	"""
	# The calendar date of the instant in &zone; a &libzone.Zone or an identifier.
	"""
	if isinstance(zone, str):
		zone = libzone.resolve(zone)
	return instant.to_zone(zone).local.date

def from_epoch_millis(millis:int) -> types.Instant:
	return types.Instant.from_millis(millis)

def from_string(text:str) -> types.Instant:
	return format.parse(text)

def from_platform_date(value) -> types.Instant:
	"""
	# Convert a &datetime.datetime or &datetime.date.
	"""
	if isinstance(value, datetime.datetime):
		return _from_datetime(value)
	return _from_date(value)
