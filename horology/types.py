"""
# Time value kinds.

#!python
	t = types.Instant.of(1986, 10, 14)
	later = t.elapse(types.Period.of(months=1)).elapse(types.Period.of(weeks=3))

	assert later == types.Instant.of(1986, 12, 5)
	assert t.leads(later) == True
	assert t.follows(later) == False

# All kinds are immutable tuples. Operations that change a value return a new
# instance of the same kind.

# [ Elements ]

# /Instant/
	# A physical moment: milliseconds since the unix epoch and the
	# &.libzone.Zone used to read its calendar fields.
# /Date/
	# A zone-less calendar date.
# /DateTime/
	# A zone-less calendar date and time of day with millisecond precision.
# /YearMonth/
	# A zone-less calendar month.
# /Period/
	# A calendar relative, signed quantity of years, months, weeks, days,
	# hours, minutes, seconds, and milliseconds.
# /Interval/
	# A half-open span between two &Instant values.
"""
import operator

from . import core
from . import gregorian
from . import libzone

#: The components of a &Period in order.
units = (
	'years',
	'months',
	'weeks',
	'days',
	'hours',
	'minutes',
	'seconds',
	'milliseconds',
)

#: Length of the fixed length units in milliseconds.
unit_millis = {
	'weeks': gregorian.millis_in_week,
	'days': gregorian.millis_in_day,
	'hours': gregorian.millis_in_hour,
	'minutes': gregorian.millis_in_minute,
	'seconds': gregorian.millis_in_second,
	'milliseconds': 1,
}

def select_unit(name:str) -> str:
	"""
	# Normalize the unit &name to its plural form; `'day'` becomes `'days'`.
	"""
	if name in units:
		return name
	if name + 's' in units:
		return name + 's'
	raise ValueError("unknown unit of time: %r" %(name,))

_date_fields = ('year', 'month', 'day')
_time_fields = (
	('hour', 24),
	('minute', 60),
	('second', 60),
	('millisecond', 1000),
)

def check_fields(kind, fields):
	"""
	# Validate the date and, when present, the time of day &fields.
	# Raises &core.InvalidCalendarValueError identifying the first offending field.
	"""
	for name, value in zip(_date_fields + tuple(x[0] for x in _time_fields), fields):
		if not isinstance(value, int) or isinstance(value, bool):
			raise core.InvalidCalendarValueError(kind, fields, name)

	year, month, day = fields[:3]
	if not 1 <= month <= gregorian.months_in_year:
		raise core.InvalidCalendarValueError(kind, fields, 'month')
	if not 1 <= day <= gregorian.days_in_month(year, month):
		raise core.InvalidCalendarValueError(kind, fields, 'day')

	for (name, limit), value in zip(_time_fields, fields[3:]):
		if not 0 <= value < limit:
			raise core.InvalidCalendarValueError(kind, fields, name)

def shift_calendar(local, months, divmod=divmod):
	"""
	# Move the local time, &local, by &months clamping the day of the month.
	# The time of day is retained.
	"""
	if not months:
		return local

	days, remainder = divmod(local, gregorian.millis_in_day)
	date = gregorian.date_from_days(days + gregorian.unix_epoch_days)
	date = gregorian.shift_months(date, months)
	days = gregorian.days_from_date(date) - gregorian.unix_epoch_days
	return (days * gregorian.millis_in_day) + remainder

class Period(tuple):
	"""
	# A signed quantity of calendar units.

	# Years and months vary in length depending on the point they are applied
	# to; the remaining units are fixed length.
	"""
	__slots__ = ()
	kind = 'period'
	units = units

	years = property(operator.itemgetter(0))
	months = property(operator.itemgetter(1))
	weeks = property(operator.itemgetter(2))
	days = property(operator.itemgetter(3))
	hours = property(operator.itemgetter(4))
	minutes = property(operator.itemgetter(5))
	seconds = property(operator.itemgetter(6))
	milliseconds = property(operator.itemgetter(7))

	@classmethod
	def of(Class,
			years=0, months=0, weeks=0, days=0,
			hours=0, minutes=0, seconds=0, milliseconds=0,
		):
		return Class((years, months, weeks, days, hours, minutes, seconds, milliseconds))

	@property
	def calendar_months(self) -> int:
		"""
		# The calendar components expressed in months.
		"""
		return (self[0] * gregorian.months_in_year) + self[1]

	@property
	def duration(self) -> int:
		"""
		# The fixed length components expressed in milliseconds.
		"""
		return sum(map(operator.mul, self[2:], (
			gregorian.millis_in_week,
			gregorian.millis_in_day,
			gregorian.millis_in_hour,
			gregorian.millis_in_minute,
			gregorian.millis_in_second,
			1,
		)))

	@property
	def fixed(self) -> bool:
		"""
		# Whether the period has no calendar components.
		"""
		return self[0] == 0 and self[1] == 0

	def __neg__(self):
		return self.__class__(-x for x in self)

	def __bool__(self):
		return any(self)

	def elapse(self, period):
		return self.__class__(map(operator.add, self, period))

	def rollback(self, period):
		return self.__class__(map(operator.sub, self, period))

	def __repr__(self):
		parts = ', '.join(
			'%s=%d' %(name, value)
			for name, value in zip(self.units, self)
			if value
		)
		return '%s(%s)' %(self.__class__.__name__, parts)

class Point(tuple):
	"""
	# Common implementation of &.abstract.Point for the point kinds.

	# Subclasses provide &millis, the position used for ordering, and &elapse.
	"""
	__slots__ = ()

	def leads(self, ob):
		if isinstance(ob, Interval):
			return ob.follows(self)
		return self.millis < ob.millis

	def follows(self, ob):
		if isinstance(ob, Interval):
			return ob.leads(self)
		return self.millis > ob.millis

	def rollback(self, period):
		return self.elapse(-period)

	@property
	def day_of_week(self):
		return gregorian.day_of_week(gregorian.days_from_date((self.year, self.month, self.day)))

class Date(Point):
	"""
	# A calendar date without a zone or time of day.
	"""
	__slots__ = ()
	kind = 'date'

	year = property(operator.itemgetter(0))
	month = property(operator.itemgetter(1))
	day = property(operator.itemgetter(2))

	# Dates have no time of day.
	hour = minute = second = millisecond = 0

	@classmethod
	def of(Class, year, month=1, day=1):
		fields = (year, month, day)
		check_fields(Class.kind, fields)
		return Class(fields)

	@classmethod
	def from_days(Class, days):
		"""
		# Construct the date &days after 1970-01-01.
		"""
		return Class(gregorian.date_from_days(days + gregorian.unix_epoch_days))

	@property
	def days(self) -> int:
		"""
		# Days since 1970-01-01.
		"""
		return gregorian.days_from_date(self) - gregorian.unix_epoch_days

	@property
	def millis(self) -> int:
		return self.days * gregorian.millis_in_day

	def elapse(self, period):
		"""
		# Move the date by the years, months, weeks, and days of &period.
		# Components smaller than a day do not affect a date.
		"""
		months = period.calendar_months
		date = gregorian.shift_months(self, months) if months else self
		days = gregorian.days_from_date(date) - gregorian.unix_epoch_days
		return self.from_days(days + (period.weeks * gregorian.days_in_week) + period.days)

	def __str__(self):
		return '%04d-%02d-%02d' % self

	def __repr__(self):
		return "(horology.date@'%s')" %(self,)

class DateTime(Point):
	"""
	# A calendar date and time of day without a zone.
	"""
	__slots__ = ()
	kind = 'date-time'

	year = property(operator.itemgetter(0))
	month = property(operator.itemgetter(1))
	day = property(operator.itemgetter(2))
	hour = property(operator.itemgetter(3))
	minute = property(operator.itemgetter(4))
	second = property(operator.itemgetter(5))
	millisecond = property(operator.itemgetter(6))

	@classmethod
	def of(Class, year, month=1, day=1, hour=0, minute=0, second=0, millisecond=0):
		fields = (year, month, day, hour, minute, second, millisecond)
		check_fields(Class.kind, fields)
		return Class(fields)

	@classmethod
	def from_millis(Class, millis):
		"""
		# Construct the fields of &millis read as UTC.
		"""
		return Class(gregorian.fields_from_millis(millis))

	@property
	def millis(self) -> int:
		return gregorian.millis_from_fields(*self)

	@property
	def date(self) -> Date:
		return Date(self[:3])

	def elapse(self, period):
		local = shift_calendar(self.millis, period.calendar_months)
		return self.from_millis(local + period.duration)

	def __str__(self):
		return '%04d-%02d-%02dT%02d:%02d:%02d.%03d' % self

	def __repr__(self):
		return "(horology.date-time@'%s')" %(self,)

def _local_field(index):
	return property(lambda self: self.local[index])

class Instant(Point):
	"""
	# A physical moment identified by milliseconds since the unix epoch.

	# The zone only affects the calendar fields; instants with equal &millis
	# identify the same moment regardless of their zones. Equality compares
	# both fields; &same compares the moments.
	"""
	__slots__ = ()
	kind = 'instant'

	millis = property(operator.itemgetter(0))
	zone = property(operator.itemgetter(1))

	@classmethod
	def of(Class,
			year, month=1, day=1,
			hour=0, minute=0, second=0, millisecond=0,
			zone=libzone.utc,
		):
		"""
		# Construct the instant whose local fields in &zone are those given.
		"""
		fields = (year, month, day, hour, minute, second, millisecond)
		check_fields(Class.kind, fields)
		return Class((zone.normalize(gregorian.millis_from_fields(*fields)), zone))

	@classmethod
	def from_millis(Class, millis, zone=libzone.utc):
		return Class((millis, zone))

	@property
	def offset(self) -> libzone.Offset:
		"""
		# The &libzone.Offset in effect at the instant.
		"""
		return self[1].find(self[0])

	@property
	def local(self) -> DateTime:
		"""
		# The calendar fields of the instant in its zone.
		"""
		return DateTime.from_millis(self[1].localize(self[0])[0])

	year = _local_field(0)
	month = _local_field(1)
	day = _local_field(2)
	hour = _local_field(3)
	minute = _local_field(4)
	second = _local_field(5)
	millisecond = _local_field(6)

	@property
	def day_of_week(self):
		return self.local.day_of_week

	def elapse(self, period):
		"""
		# Move the instant by &period. Calendar components are applied to the
		# local fields in the instant's zone; the zone is retained.
		"""
		millis, zone = self
		months = period.calendar_months
		if months:
			local = zone.localize(millis)[0]
			millis = zone.normalize(shift_calendar(local, months))
		return self.__class__((millis + period.duration, zone))

	def same(self, ob) -> bool:
		"""
		# Whether &ob identifies the same moment.
		"""
		return self[0] == ob.millis

	def to_zone(self, zone):
		"""
		# The same moment read in &zone.
		"""
		return self.__class__((self[0], zone))

	def from_zone(self, zone):
		"""
		# The moment in &zone having the same local fields.
		"""
		return self.__class__((zone.normalize(self.local.millis), zone))

	def __str__(self):
		return str(self.local) + self.offset.iso()

	def __repr__(self):
		return "(horology.instant@'%s')" %(self,)

class YearMonth(tuple):
	"""
	# A calendar month without a zone.
	"""
	__slots__ = ()
	kind = 'year-month'

	year = property(operator.itemgetter(0))
	month = property(operator.itemgetter(1))

	@classmethod
	def of(Class, year, month=1):
		check_fields(Class.kind, (year, month, 1))
		return Class((year, month))

	@property
	def date(self) -> Date:
		"""
		# The first day of the month.
		"""
		return Date(self + (1,))

	def __str__(self):
		return '%04d-%02d' % self

	def __repr__(self):
		return "(horology.year-month@'%s')" %(self,)

class Interval(tuple):
	"""
	# A span between two &Instant values: inclusive of &start and exclusive of &end.

	#!python
		i = Interval.of(Instant.of(1986), Instant.of(1990))
		assert Instant.of(1987, 6) in i
		assert i.measure('years') == 4
	"""
	__slots__ = ()
	kind = 'interval'

	start = property(operator.itemgetter(0))
	end = property(operator.itemgetter(1))

	@classmethod
	def of(Class, start, end):
		"""
		# Construct the interval from &start to &end.
		# Raises &core.InvalidIntervalError when &end precedes &start.
		"""
		if start.millis > end.millis:
			raise core.InvalidIntervalError(start, end)
		return Class((start, end))

	@property
	def magnitude(self) -> int:
		"""
		# The length of the interval in milliseconds.
		"""
		return self[1].millis - self[0].millis

	def contains(self, pit) -> bool:
		"""
		# Whether &pit falls between &start, inclusive, and &end, exclusive.
		"""
		return self[0].millis <= pit.millis < self[1].millis
	__contains__ = contains

	def overlaps(self, ob) -> bool:
		"""
		# Whether the intervals share any moment. Abutting intervals do not overlap.
		"""
		return max(self[0].millis, ob[0].millis) < min(self[1].millis, ob[1].millis)

	def abuts(self, ob) -> bool:
		"""
		# Whether one interval ends exactly where the other starts.
		"""
		return self[1].millis == ob[0].millis or ob[1].millis == self[0].millis

	def leads(self, ob) -> bool:
		"""
		# Whether the interval ends at or before &ob; or before the start of
		# &ob when it is an interval.
		"""
		if isinstance(ob, Interval):
			return self[1].millis <= ob[0].millis
		return self[1].millis <= ob.millis

	def follows(self, ob) -> bool:
		"""
		# Whether the interval starts after &ob; or at or after the end of
		# &ob when it is an interval.
		"""
		if isinstance(ob, Interval):
			return self[0].millis >= ob[1].millis
		return self[0].millis > ob.millis

	def months(self) -> int:
		"""
		# The number of whole calendar months in the interval.

		# Months are counted on the local fields of the start's zone; the count
		# is the largest that, applied to &start, does not pass &end.
		"""
		start, end = self
		zone = start.zone
		a = start.local
		b = end.to_zone(zone).local

		months = max(0, ((b.year - a.year) * gregorian.months_in_year) + (b.month - a.month))
		if months and start.elapse(Period.of(months=months)).millis > end.millis:
			months -= 1
		return months

	def measure(self, unit:str) -> int:
		"""
		# The number of whole &unit in the interval, truncating any remainder.

		# [ Parameters ]
		# /unit/
			# One of &units; singular forms are accepted.
		"""
		unit = select_unit(unit)
		if unit == 'years':
			return self.months() // gregorian.months_in_year
		if unit == 'months':
			return self.months()
		return self.magnitude // unit_millis[unit]

	def period(self) -> Period:
		"""
		# Decompose the interval into a &Period such that
		# `interval.start.elapse(interval.period())` is the moment of &end.
		"""
		start = self[0]
		months = self.months()
		anchor = start.elapse(Period.of(months=months)) if months else start
		remainder = self[1].millis - anchor.millis

		fixed = []
		for unit in units[2:-1]:
			quantity, remainder = divmod(remainder, unit_millis[unit])
			fixed.append(quantity)

		years, months = divmod(months, gregorian.months_in_year)
		return Period((years, months) + tuple(fixed) + (remainder,))

	def elapse(self, period):
		"""
		# Lengthen the interval by &period; the start is retained.
		"""
		start = self[0]
		return self.of(start, start.elapse(self.period().elapse(period)))

	def rollback(self, period):
		"""
		# Shorten the interval by &period; the start is retained.
		"""
		start = self[0]
		return self.of(start, start.elapse(self.period().rollback(period)))

	def extend(self, *periods):
		"""
		# Move the end of the interval by each of the &periods in order.
		"""
		end = self[1]
		for period in periods:
			end = end.elapse(period)
		return self.of(self[0], end)

	def __repr__(self):
		return "(horology.interval@'%s/%s')" % self
