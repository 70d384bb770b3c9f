"""
# Proleptic Gregorian calendar functions and data.

# Days are counted from the first day of year zero; months are counted in the
# same manner: `(year * 12) + (month - 1)`. &unix_epoch_days is the day count
# of 1970-01-01 and is used to move between day counts and epoch milliseconds.

# The calendar is described as a tree of repeating nodes, &cycle, that is
# aggregated once and then searched by &resolve in order to convert between
# month and day addresses.
"""
import itertools
import operator

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: english names of the months of the year.
month_names = (
	"january",
	"february",
	"march",
	"april",
	"may",
	"june",
	"july",
	"august",
	"september",
	"october",
	"november",
	"december",
)

#: number of months in a year.
months_in_year = len(month_names)

#: abbreviations for the english names of the months of the year.
month_abbreviations = (
	"jan", "feb", "mar",
	"apr", "may", "jun",
	"jul", "aug", "sep",
	"oct", "nov", "dec",
)

#: Finite map associating the names and abbreviations of the months with a zero-based index.
month_name_to_number = {
	month_names[i] : i for i in range(len(month_names))
}
month_name_to_number.update([
	(k[:3], v) for (k,v) in month_name_to_number.items()
])

#: English names of the days of the week in ISO order.
weekday_names = (
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
	'sunday',
)

#: Total number of days in a week.
days_in_week = len(weekday_names)

#: Abbreviations for the english names of the days of the week.
weekday_abbreviations = tuple(x[:3] for x in weekday_names)

#: Map of weekday names and abbreviations to the ISO number; Monday is one.
weekday_name_to_number = {
	weekday_names[i]: i + 1
	for i in range(len(weekday_names))
}
weekday_name_to_number.update([
	(k[:3], v) for (k,v) in weekday_name_to_number.items()
])

millis_in_second = 1000
millis_in_minute = millis_in_second * 60
millis_in_hour = millis_in_minute * 60
millis_in_day = millis_in_hour * 24
millis_in_week = millis_in_day * days_in_week

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

# Nodes take the form: (title, repeat, subnodes).
# Leaves list the days of their months.
leap_cycle = (
	('leap', 1, calendar_leap),
	('years', 3, calendar_year)
)

cycle = (
	'gregorian-cycle', 1, (
		# First century; normal leap cycle throughout.
		('first-century', 25, leap_cycle),

		# Subsequent three centuries in the cycle.
		# First year in century is leap exception.
		('centuries', 3, (
			('first-year-exception', 4, calendar_year),
			('regular-cycle', 24, leap_cycle),
		)),
	)
)

def aggregate(node, accumulate=itertools.accumulate):
	"""
	# Recursively total the months and days of a calendar &node.

	# Returns `(title, repeat, inner, unit, total)` where &unit is the
	# `(months, days)` of a single repetition of the node and &total is
	# &unit multiplied by the repetitions. The &inner of a leaf is the pair of
	# month and day accumulations used to find the month of a remainder.
	"""
	title, repeat, sub = node

	if isinstance(sub[0], int):
		inner = (
			tuple(range(len(sub) + 1)),
			tuple(accumulate(sub, initial=0)),
		)
		unit = (len(sub), inner[1][-1])
	else:
		inner = tuple([aggregate(x) for x in sub])
		unit = (
			sum([x[-1][0] for x in inner]),
			sum([x[-1][1] for x in inner]),
		)

	return (title, repeat, inner, unit, (repeat * unit[0], repeat * unit[1]))

def resolve(selectors, address, calendar, divmod=divmod):
	"""
	# Search the aggregated &calendar for the month containing &address.

	# Returns `(cycles, position, remainder, span)`: the number of complete
	# cycles consumed, the count of the other unit leading up to the located
	# month, the part of &address that was not consumed, and the number of
	# days in the located month.

	# [ Parameters ]
	# /selectors/
		# Pair of item getters; the first selects the unit of &address
		# and the second selects the unit of the result.
	# /address/
		# The count of months or days to resolve.
	# /calendar/
		# The result of &aggregate.
	"""
	inward, outward = selectors
	cycles, address = divmod(address, inward(calendar[-1]))
	position = 0

	node = calendar
	while not isinstance(node[2][0][0], int):
		for sub in node[2]:
			total = inward(sub[4])
			if address >= total:
				# Consumed entirely.
				address -= total
				position += outward(sub[4])
			else:
				parts, address = divmod(address, inward(sub[3]))
				position += parts * outward(sub[3])
				node = sub
				break
		else:
			raise RuntimeError("address exceeds the calendar cycle")

	iparts = inward(node[2])
	oparts = outward(node[2])
	for i in range(len(iparts) - 1):
		if iparts[i+1] > address:
			break

	return (cycles, position + oparts[i], address - iparts[i], oparts[i+1] - oparts[i])

calendar = aggregate(cycle)

#: Total number of months in a Gregorian cycle.
months_in_cycle = calendar[-1][0]

#: Total number of days in a Gregorian cycle.
days_in_cycle = calendar[-1][1]

def resolve_by_months(months,
	_select_months = operator.itemgetter(0),
	_select_days = operator.itemgetter(1),
	_calendar = calendar,
):
	return resolve((_select_months, _select_days), months, _calendar)

def resolve_by_days(days,
	_select_months = operator.itemgetter(0),
	_select_days = operator.itemgetter(1),
	_calendar = calendar,
):
	return resolve((_select_days, _select_months), days, _calendar)

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	return y % 4 == 0 and (y % 400 == 0 or y % 100 != 0)

def days_in_month(year, month):
	"""
	# The number of days in the one-based &month of &year.
	"""
	return (calendar_leap if year_is_leap(year) else calendar_year)[month - 1]

def date_from_days(days, _resolver=resolve_by_days):
	"""
	# Convert the given Earth-days into a Gregorian date in the common form:
	# `(year, month, day)`.
	"""
	cycles, months, day, _d = _resolver(days)
	year_of_cycle, moy = divmod(months, months_in_year)
	return ((cycles * 400) + year_of_cycle, moy + 1, day + 1)

def days_from_date(date, _resolver=resolve_by_months):
	"""
	# Convert a Gregorian date in the common form, `(year, month, day)`, to the number
	# of days leading up to the date.
	"""
	year, month, day = date
	cycles, day_of_cycle, _m, _d = _resolver((year * months_in_year) + month - 1)
	return (cycles * days_in_cycle) + day_of_cycle + day - 1

#: Days leading up to 1970-01-01.
unix_epoch_days = days_from_date((1970, 1, 1))

def day_of_week(days, _offset=(3 - unix_epoch_days) % 7):
	"""
	# The ISO day of week of the day count, &days; Monday is `1` and Sunday is `7`.
	"""
	# 1970-01-01 was a Thursday.
	return ((days + _offset) % 7) + 1

def shift_months(date, months):
	"""
	# Move the &date by the given number of &months, clamping the day to the
	# last day of the target month when it would overflow.
	"""
	year, month, day = date
	year, month = divmod((year * months_in_year) + (month - 1) + months, months_in_year)
	month += 1
	return (year, month, min(day, days_in_month(year, month)))

def millis_from_fields(year, month, day, hour=0, minute=0, second=0, millisecond=0):
	"""
	# Convert calendar fields read on the UTC line to milliseconds since the unix epoch.

	# Fields are not validated; excess values overflow onto the larger units.
	"""
	days = days_from_date((year, month, day)) - unix_epoch_days
	return (
		(days * millis_in_day) +
		(hour * millis_in_hour) +
		(minute * millis_in_minute) +
		(second * millis_in_second) +
		millisecond
	)

def fields_from_millis(millis, divmod=divmod):
	"""
	# Convert milliseconds since the unix epoch into the seven calendar fields:
	# `(year, month, day, hour, minute, second, millisecond)`.
	"""
	days, remainder = divmod(millis, millis_in_day)
	hour, remainder = divmod(remainder, millis_in_hour)
	minute, remainder = divmod(remainder, millis_in_minute)
	second, millisecond = divmod(remainder, millis_in_second)
	return date_from_days(days + unix_epoch_days) + (hour, minute, second, millisecond)
