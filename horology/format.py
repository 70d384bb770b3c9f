"""
# Format and parse instant strings.

# Primarily this module exposes two functions: &parser,
# &formatter. These functions provide access to formats defined by a
# standard or deemed common enough to merit a builtin implementation.
# &parse and &format are the conveniences used by &.coerce.

# While formatting instants can usually occur without error, parsing them from strings
# can result in a variety of errors. The parsers available here
# raise subclasses of &.core.ParseError:

# - &.core.ParseError when the text does not have the shape of the format.
# - &.core.StructureError when the fields could not be converted into integers.
# - &.core.IntegrityError when the fields do not identify a valid moment.

# In all cases the underlying exception is available as `__cause__`.
"""
import operator
import functools

from . import core
from . import gregorian
from . import types

rfc1123 = "{day_of_week}, {day:02} {month} {year:04} {hour:02}:{minute:02}:{second:02} GMT"
iso8601 = "{0:04}-{1:02}-{2:02}T{3:02}:{4:02}:{5:02}.{6:03}Z"

models = {
	'rfc1123' : rfc1123,
	'iso8601' : iso8601,
}

def parse_rfc1123(s, len=len):
	# be loose with the comma; don't break
	# if there's whitespace between the DOW and comma.
	comma = s.find(',')
	if comma == -1:
		raise ValueError('comma not found')
	day_of_week = s[:comma].strip()
	fields = s[comma+1:].strip().split()
	trail = fields[4:]
	day, month, year, time = fields[:4]
	hour, minute, second = time.split(':')

	timezone = None
	if trail:
		if len(trail) > 1:
			raise ValueError('unexpected data at end of string')
		timezone = trail[0]
	return (
		('day_of_week', day_of_week),
		('year', year),
		('month', month),
		('day', day),
		('hour', hour),
		('minute', minute),
		('second', second),
		('timezone', timezone)
	)

def parse_iso8601(s, mstrip=operator.methodcaller('strip')):
	s = s.strip().lower()
	if 't' in s:
		date, time = s.split('t', 1)
	else:
		date = s
		time = ''

	# be sure to process the zone from the end.
	zone = ('+', '0', '0')
	if time.endswith('z'):
		time = time[:-1]
	else:
		for sign in '+-':
			if sign in time:
				time, tz = time.rsplit(sign, 1)
				tzh, _, tzm = tz.partition(':')
				if not tzm and len(tzh) == 4:
					# compact form: +0530
					tzh, tzm = tzh[:2], tzh[2:]
				zone = (sign, tzh, tzm or '0')
				break

	if '.' in time:
		time, subsecond = time.rsplit('.', 1)
	else:
		# no subseconds
		subsecond = '0'

	if time:
		hms = time.split(':')
		if not 2 <= len(hms) <= 3:
			raise ValueError('invalid time of day: ' + time)
		hms.extend(['0'] * (3 - len(hms)))
	else:
		hms = ['0', '0', '0']
	hour, minute, second = hms

	date = zip(('year', 'month', 'day'), map(mstrip, date.rsplit('-', 2)))
	return tuple(date) + (
		('hour', hour),
		('minute', minute),
		('second', second),
		('subsecond', subsecond),
		('timezone', zone),
	)

parsers = {
	'rfc1123': parse_rfc1123,
	'iso8601': parse_iso8601,
}

def transform_iso8601(args, int=int):
	struct = args[1]
	sign, tzh, tzm = struct['timezone']
	offset = (int(tzh) * 60) + int(tzm)

	subsecond = struct['subsecond']
	if not subsecond.isdigit():
		raise ValueError('invalid fraction of a second: ' + subsecond)

	return args + (
		(
			(
				int(struct['year']),
				int(struct['month']),
				int(struct['day']),
				int(struct['hour']),
				int(struct['minute']),
				int(struct['second']),
				# precision beyond milliseconds is truncated.
				int(subsecond.ljust(3, '0')[:3]),
			),
			-offset if sign == '-' else offset,
		),
	)

def transform_rfc1123(args, int=int):
	struct = args[1]
	month = gregorian.month_name_to_number[struct['month'].lower()]
	return args + (
		(
			(
				int(struct['year']),
				month + 1, # for consistency with ISO.
				int(struct['day']),
				int(struct['hour']),
				int(struct['minute']),
				int(struct['second']),
				0, # no subsecond
			),
			0,
		),
	)

transformers = {
	'iso8601' : transform_iso8601,
	'rfc1123' : transform_rfc1123,
}

def validate_iso8601(args):
	src, struct, tup = args
	fields, offset = tup

	types.check_fields(types.Instant.kind, fields)
	if not -24*60 < offset < 24*60:
		raise ValueError("offset out of range: %d minutes" %(offset,))

	return tup

def validate_rfc1123(args, weekdays=gregorian.weekday_name_to_number):
	# check the integrity of the parse rfc1123 timestamp
	src, struct, tup = args
	fields = tup[0]

	if (struct['timezone'] or '').strip().lower() not in ('zulu', 'z', 'gmt', 'utc'):
		raise ValueError("timezone not GMT")

	types.check_fields(types.Instant.kind, fields)

	dow = struct['day_of_week'].lower()
	if dow not in weekdays:
		raise ValueError("invalid day of week: " + dow)
	if weekdays[dow] != gregorian.day_of_week(gregorian.days_from_date(fields[:3])):
		raise ValueError("day of week does not match the date: " + dow)

	return tup

validators = {
	'iso8601': validate_iso8601,
	'rfc1123': validate_rfc1123,
}

aliases = {'http' : 'rfc1123'}

def _parse(fun, format):
	def EXCEPTION(src, fun = fun, format = format):
		try:
			return (src, dict(fun(src)))
		except core.ParseError:
			raise
		except Exception as e:
			raise core.ParseError(src, format = format) from e
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def _structure(fun, format):
	def EXCEPTION(state):
		try:
			return fun(state)
		except core.StructureError:
			raise
		except Exception as e:
			raise core.StructureError(*state, format = format) from e
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def _integrity(fun, format):
	def EXCEPTION(state):
		try:
			return fun(state)
		except core.IntegrityError:
			raise
		except Exception as e:
			raise core.IntegrityError(*state, format = format) from e
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

@functools.lru_cache(8)
def parser(fmt, _deref = aliases.get):
	"""
	# Given a format identifier, return the function that can be used to parse
	# the formatted string into a UTC &types.Instant.
	"""
	fmt = _deref(fmt, fmt)
	def parser_composition(
		x,
		integ = _integrity(validators[fmt], fmt),
		struct = _structure(transformers[fmt], fmt),
		parse = _parse(parsers[fmt], fmt),
		minute = gregorian.millis_in_minute,
	):
		fields, offset = integ(struct(parse(x)))
		return types.Instant.from_millis(gregorian.millis_from_fields(*fields) - (offset * minute))
	return parser_composition

def format_rfc1123(point, _fmt = models['rfc1123'].format,
	month_abbrev = gregorian.month_abbreviations.__getitem__,
	dow_abbrev = gregorian.weekday_abbreviations.__getitem__,
):
	millis = point.millis
	y, m, d, h, min, s, ms = gregorian.fields_from_millis(millis)
	dow = gregorian.day_of_week((millis // gregorian.millis_in_day) + gregorian.unix_epoch_days)

	return _fmt(
		year = y, month = month_abbrev(m-1).capitalize(), day = d,
		hour = h, minute = min, second = s,
		day_of_week = dow_abbrev(dow-1).capitalize(),
	)

def format_iso8601(point, _fmt = models['iso8601'].format):
	return _fmt(*gregorian.fields_from_millis(point.millis))

formatters = {
	'rfc1123' : format_rfc1123,
	'iso8601' : format_iso8601,
}

def formatter(fmt, _deref = aliases.get):
	"""
	# Given a format identifier, return the function that can be used to format
	# a point in time. Instants are rendered in UTC.
	"""
	return formatters[_deref(fmt, fmt)]

#: The formats attempted by &parse in order.
default_formats = ('iso8601', 'rfc1123')

def parse(text, formats=default_formats):
	"""
	# Parse &text using the first of the &formats that accepts it.

	# Raises &core.ParseError when none of the formats accept the text; the
	# failure of the last format attempted is the cause.
	"""
	failure = None
	for fmt in formats:
		try:
			return parser(fmt)(text)
		except core.ParseError as exc:
			failure = exc

	raise core.ParseError(text, format = tuple(formats)) from failure

def format(point, fmt='iso8601'):
	"""
	# Render &point in the format identified by &fmt.
	"""
	return formatter(fmt)(point)
