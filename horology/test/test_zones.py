import os
import shutil
import tempfile
import importlib.resources
from .. import core
from .. import gregorian
from .. import libzone

la = (lambda: libzone.resolve('America/Los_Angeles'))
berlin = (lambda: libzone.resolve('Europe/Berlin'))
adelaide = (lambda: libzone.resolve('Australia/Adelaide'))
at = gregorian.millis_from_fields

def _environ(test, value):
	prior = os.environ.get(libzone.tzenviron)
	os.environ[libzone.tzenviron] = value

	def restore():
		if prior is None:
			del os.environ[libzone.tzenviron]
		else:
			os.environ[libzone.tzenviron] = prior
	test.exits.callback(restore)

def test_utc(test):
	test/libzone.resolve('UTC') % libzone.utc
	test/libzone.fixed(0) % libzone.utc
	test/libzone.utc.find(0) == libzone.Offset((0, 'UTC', 'std'))
	test/libzone.utc.localize(5) == (5, libzone.utc.find(5))
	test/libzone.utc.normalize(5) == 5

def test_offset(test):
	o = libzone.Offset((19800, 'IST', 'std'))
	test/o.iso() == '+05:30'
	test/o.millis == 19800 * 1000
	test/int(o) == 19800
	test/o.is_dst == False
	test/libzone.Offset((-28800, 'PST', 'std')).iso() == '-08:00'
	test/libzone.Offset((0, 'GMT', 'std')).iso() == 'Z'

def test_fixed(test):
	z = libzone.fixed(330)
	test/z.name == '+05:30'
	test/z.find(0).millis == 330 * 60 * 1000
	test/libzone.fixed(-90).name == '-01:30'
	test/libzone.resolve('+05:30') % z
	test/libzone.resolve('-0130') % libzone.fixed(-90)
	test/libzone.offset(-5, 30) % libzone.fixed(-330)
	test/libzone.offset(5, 30) % z

	test/core.UnknownZoneError ^ (lambda: libzone.fixed(24 * 60))
	test/core.UnknownZoneError ^ (lambda: libzone.resolve('+xx:00'))

def test_resolve_unknown(test):
	with test/core.UnknownZoneError as exc:
		libzone.resolve('Not/AZone')
	test/exc().identifier == 'Not/AZone'
	test.isinstance(exc(), LookupError)

def test_resolve_cache(test):
	test/la() % la()
	test/la() == la()
	test/la() != libzone.utc
	test/hash(la()) == hash(la())

def test_zone_dst_offset(test):
	# if this test fails, it *may* be due to timezone database changes
	# 2019-11-03T09:00:00Z is the end of daylight savings in Los Angeles.
	transition = at(2019, 11, 3, 9)
	before = la().find(transition - 1000)
	after = la().find(transition)

	test/before.magnitude == -25200
	test/before.is_dst == True
	test/after.magnitude == -28800
	test/after.is_dst == False

	local, offset = la().localize(transition)
	test/local == at(2019, 11, 3, 1)
	test/offset == after

def test_normalize_overlap(test):
	# 01:30 occurs twice; the earlier moment, in daylight time, is chosen.
	test/la().normalize(at(2019, 11, 3, 1, 30)) == at(2019, 11, 3, 8, 30)

def test_normalize_gap(test):
	# 02:30 does not occur; it is moved forward by the length of the gap.
	test/la().normalize(at(2019, 3, 10, 2, 30)) == at(2019, 3, 10, 10, 30)

def test_normalize_inverse(test):
	for moment in range(at(2019, 1, 1), at(2020, 1, 1), gregorian.millis_in_day // 3):
		local, offset = la().localize(moment)
		test/la().normalize(local) == moment

def test_normalize_east(test):
	# Berlin skipped 02:00 to 03:00 on 2021-03-28 and repeated it on 2021-10-31.
	test/berlin().normalize(at(2021, 3, 28, 2, 30)) == at(2021, 3, 28, 1, 30)
	test/berlin().normalize(at(2021, 10, 31, 2, 30)) == at(2021, 10, 31, 0, 30)
	test/berlin().normalize(at(2021, 7, 1, 12)) == at(2021, 7, 1, 10)

def test_normalize_half_hour(test):
	# Adelaide is +09:30 in winter and +10:30 in summer.
	test/adelaide().normalize(at(2021, 10, 3, 2, 30)) == at(2021, 10, 2, 17)
	test/adelaide().normalize(at(2021, 4, 4, 2, 30)) == at(2021, 4, 3, 16)
	test/adelaide().normalize(at(2021, 7, 1, 12)) == at(2021, 7, 1, 2, 30)

def test_normalize_inverse_east(test):
	for zone in (berlin(), adelaide(), libzone.fixed(330)):
		for moment in range(at(2021, 1, 1), at(2022, 1, 1), gregorian.millis_in_day // 3):
			local, offset = zone.localize(moment)
			test/zone.normalize(local) == moment

def test_identifiers(test):
	ids = libzone.identifiers()
	test/ids << 'America/Los_Angeles'
	test/ids << 'Asia/Tokyo'
	test/libzone.identifiers() % ids

def test_local_environment(test):
	_environ(test, 'Asia/Tokyo')
	test/libzone.local() % libzone.resolve('Asia/Tokyo')

def test_local_environment_utc(test):
	_environ(test, ':UTC')
	test/libzone.local() % libzone.utc

def test_local_invalid_environment(test):
	# An unknown identifier falls back to the system zone.
	_environ(test, 'Not/AZone')
	test.isinstance(libzone.local(), libzone.Zone)

def test_local_file(test):
	# A system zone outside of the catalog is read from the file once.
	_environ(test, '')
	directory = tempfile.mkdtemp()
	test.exits.callback(shutil.rmtree, directory)

	path = os.path.join(directory, 'localtime')
	source = importlib.resources.files('tzdata').joinpath('zoneinfo').joinpath('Europe').joinpath('Berlin')
	with open(path, 'wb') as f:
		f.write(source.read_bytes())

	prior = libzone.tzdefault
	libzone.tzdefault = path
	test.exits.callback(setattr, libzone, 'tzdefault', prior)

	zone = libzone.local()
	test/zone.name == 'localtime'
	test/libzone.local() % zone
	test/libzone.local() == zone
	test/zone.find(at(2021, 7, 1)).magnitude == 7200

if __name__ == '__main__':
	import sys; from . import harness
	harness.execute(sys.modules[__name__])
