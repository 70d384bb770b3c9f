"""
# Calendar arithmetic over instants, dates, periods, and intervals.

# horology represents points in time as integers counting milliseconds since
# the unix epoch. Instants carry a zone used to read their calendar fields;
# dates and date-times are zone-less. Periods are calendar relative
# quantities, and intervals span two instants.

# Calendar Support:

	# - Proleptic Gregorian

# The surface functionality is provided by &.library:

#!python
	from horology import library as t

	t.plus(t.instant(1986, 10, 14), t.months(1), t.weeks(3))
	t.in_years(t.interval(t.instant(1986), t.instant(1990)))

# Zones are resolved using the system's catalog through &zoneinfo; see &.libzone.
"""
