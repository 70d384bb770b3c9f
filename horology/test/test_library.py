import os
from .. import core
from .. import libzone
from .. import sysclock
from .. import generation
from .. import library as t

la = 'America/Los_Angeles'

def test_documented_examples(test):
	i = t.interval(t.instant(1986, 1, 1), t.instant(1990, 1, 1))
	test/t.contains(i, t.instant(1987, 6, 1)) == True
	test/t.duration_in(i, 'years') == 4
	test/t.in_years(i) == 4

	test/t.plus(t.instant(1986, 10, 14), t.months(1), t.weeks(3)) == t.instant(1986, 12, 5)
	test/t.to_instant(None) == None
	test/t.to_epoch_millis(None) == None

def test_constructors(test):
	test/t.instant(2000, zone=la).zone == libzone.resolve(la)
	test/t.date(2000, 2, 29) == t.Date.of(2000, 2, 29)
	test/t.date_time(2000, 2, 29, 23) == t.DateTime.of(2000, 2, 29, 23)
	test/t.year_month(2000, 2) == t.YearMonth.of(2000, 2)
	test/t.period(years=1, days=2) == t.Period.of(years=1, days=2)
	test/t.years(2) == t.Period.of(years=2)
	test/t.millis(5) == t.Period.of(milliseconds=5)
	test/t.days() == t.Period.of(days=1)
	test/t.hours.__name__ == 'hours'
	test/t.InvalidCalendarValueError ^ (lambda: t.date(2001, 2, 29))

def test_sequential_application(test):
	# Each period is applied to the result of the previous application.
	start = t.instant(2000, 1, 30)
	test/t.plus(start, t.days(1), t.months(1)) == t.instant(2000, 2, 29)
	test/t.plus(start, t.period(months=1, days=1)) == t.instant(2000, 3, 1)
	test/t.minus(t.instant(2000, 3, 31), t.months(1), t.days(1)) == t.instant(2000, 2, 28)

def test_plus_kinds(test):
	test/t.plus(t.date(2000, 1, 31), t.months(1)) == t.date(2000, 2, 29)
	test/t.plus(t.date_time(2000, 1, 31, 23), t.hours(2)) == t.date_time(2000, 2, 1, 1)
	test/t.plus(t.days(1), t.hours(2), t.days(1)) == t.period(days=2, hours=2)

	i = t.interval(t.instant(2000), t.instant(2000, 2))
	test/t.plus(i, t.days(1)) == t.interval(t.instant(2000), t.instant(2000, 2, 2))
	test/t.minus(i, t.days(1)) == t.interval(t.instant(2000), t.instant(2000, 1, 31))

def test_fixed_inverse(test):
	g = generation.Generator(seed=12)
	periods = [t.weeks(3), t.days(-2), t.hours(49), t.period(minutes=3, seconds=4, milliseconds=5)]
	for x in g.sample('instant', 200):
		for p in periods:
			test/t.minus(t.plus(x, p), p) == x

def test_ordering(test):
	a = t.instant(2000)
	b = t.instant(2001)
	test/t.before(a, b) == True
	test/t.after(b, a) == True
	test/t.before(b, a) == False
	test/t.before(a, a) == False
	test/t.after(a, a) == False
	test/t.same(a, t.to_zone(a, la)) == True

def test_ordering_intervals(test):
	p = t.from_epoch_millis
	i = t.interval(10, 20)
	test/t.before(p(5), i) == True
	test/t.before(p(10), i) == False
	test/t.after(p(20), i) == True
	test/t.after(p(19), i) == False
	test/t.before(i, p(20)) == True
	test/t.before(i, p(19)) == False
	test/t.after(i, p(9)) == True
	test/t.after(i, p(10)) == False
	test/t.before(i, t.interval(20, 30)) == True
	test/t.after(t.interval(20, 30), i) == True

def test_accessors(test):
	v = t.instant(1986, 10, 14, 1, 2, 3, 4)
	test/t.year(v) == 1986
	test/t.month(v) == 10
	test/t.day(v) == 14
	test/t.day_of_week(v) == 2
	test/t.hour(v) == 1
	test/t.minute(v) == 2
	test/t.second(v) == 3
	test/t.millisecond(v) == 4
	test/t.hour(t.date(1986, 10, 14)) == 0

def test_interval_algebra(test):
	i = t.interval('1986-01-01', '1990-01-01')
	test/t.start(i) == t.instant(1986)
	test/t.end(i) == t.instant(1990)
	test/t.within(i, t.instant(1986)) == True
	test/t.within(i, t.instant(1990)) == False
	test/t.InvalidIntervalError ^ (lambda: t.interval(t.instant(1990), t.instant(1986)))

	j = t.interval(t.instant(1989), t.instant(1991))
	test/t.overlaps(i, j) == True
	test/t.overlap(i, j) == t.interval(t.instant(1989), t.instant(1990))
	test/t.overlap(j, i) == t.interval(t.instant(1989), t.instant(1990))

	k = t.interval(t.instant(1990), t.instant(1991))
	test/t.overlaps(i, k) == False
	test/t.abuts(i, k) == True
	test/t.overlap(i, k) == None

def test_duration_units(test):
	i = t.interval(t.instant(2000), t.instant(2000, 3, 1, 1, 1, 1, 1))
	test/t.in_years(i) == 0
	test/t.in_months(i) == 2
	test/t.in_weeks(i) == 8
	test/t.in_days(i) == 60
	test/t.in_hours(i) == (60 * 24) + 1
	test/t.in_minutes(i) == (60 * 24 * 60) + 61
	test/t.in_seconds(i) == (60 * 24 * 3600) + 3661
	test/t.in_millis(i) == ((60 * 24 * 3600) + 3661) * 1000 + 1
	test/t.duration_in(i, 'day') == 60

def test_duration_daylight_savings(test):
	spring = t.interval(t.instant(2019, 3, 10, zone=la), t.instant(2019, 3, 11, zone=la))
	test/t.in_hours(spring) == 23
	fall = t.interval(t.instant(2019, 11, 3, zone=la), t.instant(2019, 11, 4, zone=la))
	test/t.in_hours(fall) == 25

def test_duration_daylight_savings_east(test):
	berlin = 'Europe/Berlin'
	spring = t.interval(t.instant(2021, 3, 28, zone=berlin), t.instant(2021, 3, 29, zone=berlin))
	test/t.in_hours(spring) == 23
	test/t.duration_in(spring, 'days') == 0
	fall = t.interval(t.instant(2021, 10, 31, zone=berlin), t.instant(2021, 11, 1, zone=berlin))
	test/t.in_hours(fall) == 25

	shifted = t.plus(t.instant(2021, 2, 28, 2, 30, zone=berlin), t.months(1))
	test/t.hour(shifted) == 3
	test/t.in_months(t.interval(t.instant(2021, 2, 28, 2, 30, zone=berlin), shifted)) == 1

	adelaide = 'Australia/Adelaide'
	spring = t.interval(t.instant(2021, 10, 3, zone=adelaide), t.instant(2021, 10, 4, zone=adelaide))
	test/t.in_minutes(spring) == 23 * 60

def test_extend(test):
	i = t.interval(t.instant(2000, 1, 31), t.instant(2000, 1, 31))
	test/t.end(t.extend(i, t.months(1))) == t.instant(2000, 2, 29)
	test/t.end(t.extend(i, t.months(1), t.months(1))) == t.instant(2000, 3, 29)
	test/t.start(t.extend(i, t.years(1))) == t.start(i)

def test_clock(test):
	test/t.epoch().millis == 0

	before = sysclock.now()
	n = t.now()
	after = sysclock.now()
	test/(before.millis <= n.millis <= after.millis) == True
	test/n.zone % libzone.utc

	test/t.before(t.ago(t.minutes(5)), t.now()) == True
	test/t.after(t.from_now(t.minutes(5)), t.now()) == True
	test/t.minutes_ago(t.ago(t.minutes(10))) == 10
	test/core.InvalidIntervalError ^ (lambda: t.minutes_ago(t.from_now(t.minutes(10))))

def test_today_at_midnight(test):
	m = t.today_at_midnight()
	test/(m.hour, m.minute, m.second, m.millisecond) == (0, 0, 0, 0)
	test/t.before(m, t.now()) == True

	tokyo = t.today_at_midnight('Asia/Tokyo')
	test/tokyo.zone == libzone.resolve('Asia/Tokyo')
	test/tokyo.hour == 0

def test_zones(test):
	i = t.instant(2019, 7, 1, 12)
	test/t.to_zone(i, la).hour == 5
	test/t.from_zone(i, la).hour == 12
	test/t.from_zone(i, libzone.resolve(la)).millis == i.millis + (7 * 3600 * 1000)
	test/t.to_zone('2019-07-01T12:00Z', la) == t.to_zone(i, la)

	skipped = t.from_zone(t.instant(2021, 3, 28, 2, 30), 'Europe/Berlin')
	test/t.hour(skipped) == 3
	test/skipped.millis == t.instant(2021, 3, 28, 1, 30).millis
	repeated = t.from_zone(t.instant(2021, 10, 31, 2, 30), 'Europe/Berlin')
	test/repeated.millis == t.instant(2021, 10, 31, 0, 30).millis

	test/t.zone_for_offset(5, 30).name == '+05:30'
	test/t.zone_for_offset(0) % t.utc
	test/t.zone_for_id('UTC') % t.utc
	test/t.UnknownZoneError ^ (lambda: t.zone_for_id('Not/AZone'))

def test_default_zone(test):
	prior = os.environ.get(libzone.tzenviron)
	os.environ[libzone.tzenviron] = la
	try:
		test/t.default_zone() % libzone.resolve(la)
	finally:
		if prior is None:
			del os.environ[libzone.tzenviron]
		else:
			os.environ[libzone.tzenviron] = prior

def test_coercion_surface(test):
	test/t.to_string(t.instant(2000)) == '2000-01-01T00:00:00.000Z'
	test/t.from_string('2000-01-01') == t.instant(2000)
	test/t.to_calendar_date(t.instant(2000, zone=la)) == t.date(2000)
	test/t.in_zone(t.instant(2000), la) == t.date(1999, 12, 31)
	test/t.ParseError ^ (lambda: t.from_string('never'))

if __name__ == '__main__':
	import sys; from . import harness
	harness.execute(sys.modules[__name__])
