"""
# Time zone support.

# Zones are views that map epoch milliseconds to the offset in effect at that
# moment. Named zones are resolved from the system's zone catalog using
# &zoneinfo; fixed offsets are represented by the same class with a constant
# &Offset.

#!python
	from horology import libzone
	la = libzone.resolve('America/Los_Angeles')
	local, offset = la.localize(0)

# Resolution is cached so that an identifier always yields the same &Zone
# instance; zones compare equal when their resolved rules are equal.
"""
import os
import os.path
import datetime
import functools
import logging
import threading
import zoneinfo

from . import core

logger = logging.getLogger(__name__)

#: Environment variable selecting the default zone.
tzenviron = 'TZ'

#: Path of the system's default zone.
tzdefault = '/etc/localtime'

_epoch = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
_resolution = datetime.timedelta(milliseconds=1)

# Outside of this range, &datetime cannot represent the local time.
_earliest = (datetime.datetime(1, 1, 2, tzinfo=datetime.timezone.utc) - _epoch) // _resolution
_latest = (datetime.datetime(9999, 12, 30, tzinfo=datetime.timezone.utc) - _epoch) // _resolution

class Offset(tuple):
	"""
	# Offsets are constructed by a tuple of the form: `(offset, abbreviation, type)`.
	# Primarily, the type signifies whether or not the offset is daylight
	# savings or not.

	# &Offset instances are usually extracted from &Zone objects by &Zone.find.
	"""
	__slots__ = ()

	unit = 'second'

	@property
	def magnitude(self):
		"""
		# The offset in seconds from UTC.
		"""
		return self[0]

	@property
	def millis(self):
		"""
		# The offset in milliseconds from UTC.
		"""
		return self[0] * 1000

	@property
	def abbreviation(self):
		"""
		# The Offset's timezone abbreviation; such as UTC, GMT, and EST.
		"""
		return self[1]

	@property
	def type(self):
		"""
		# Field used to identify if the &Offset is daylight savings time.
		"""
		return self[2]

	@property
	def is_dst(self):
		return self.type == 'dst'

	def __str__(self):
		return '%s%s%d' %(
			self.abbreviation,
			"+" if self.magnitude >= 0 else "-",
			abs(self.magnitude)
		)

	def __repr__(self):
		return '<%s(%s: %d)>' %(self.__class__.__name__, self.abbreviation, self.magnitude)

	def __int__(self):
		return self.magnitude

	def iso(self):
		"""
		# The `±HH:MM` form of the offset; `Z` for UTC.
		"""
		if self[0] == 0:
			return 'Z'
		sign = '+' if self[0] > 0 else '-'
		hours, minutes = divmod(abs(self[0]) // 60, 60)
		return '%s%02d:%02d' %(sign, hours, minutes)

	@classmethod
	def from_datetime(Class, dt):
		"""
		# Construct an &Offset from an aware &datetime.datetime.
		"""
		return Class((
			int(dt.utcoffset().total_seconds()),
			dt.tzname(),
			'dst' if dt.dst() else 'std',
		))

class Zone(object):
	"""
	# A rule mapping moments to the &Offset in effect.

	# [ Properties ]
	# /name/
		# The identifier of the zone.
	# /rule/
		# The &datetime.tzinfo implementing the offsets.
	# /fixed/
		# The constant &Offset of a fixed offset zone; &None for named zones.
	"""
	__slots__ = ('name', 'rule', 'fixed')

	def __init__(self, name, rule, fixed=None):
		self.name = name
		self.rule = rule
		self.fixed = fixed

	def __repr__(self):
		return '<%s: %s>' %(self.__class__.__name__, self.name)

	def __str__(self):
		return self.name

	def __eq__(self, ob):
		if not isinstance(ob, Zone):
			return NotImplemented
		return self.rule == ob.rule

	def __hash__(self):
		return hash(self.rule)

	def find(self, millis, timedelta=datetime.timedelta):
		"""
		# Get the offset in effect at &millis, milliseconds since the unix epoch.

		# Moments beyond the range of &datetime use the offset at the nearest
		# representable moment.
		"""
		if self.fixed is not None:
			return self.fixed

		millis = min(max(millis, _earliest), _latest)
		dt = (_epoch + timedelta(milliseconds=millis)).astimezone(self.rule)
		return Offset.from_datetime(dt)

	def localize(self, millis):
		"""
		# Given &millis, return the local time in milliseconds and the &Offset used.
		"""
		offset = self.find(millis)
		return (millis + offset.millis, offset)

	def normalize(self, local, window=86400000):
		"""
		# Identify the moment whose local time in the zone is &local.

		# When the local time occurs twice, the earlier moment is chosen.
		# When it does not occur at all, the moment is moved forward by the
		# length of the gap.
		"""
		# Offsets on either side of any transition near &local.
		before = self.find(local - window).millis
		after = self.find(local + window).millis

		valid = [
			local - x for x in (before, after)
			if self.find(local - x).millis == x
		]
		if valid:
			return min(valid)

		# Gap; read with the offset preceding the transition.
		return local - before

#: The UTC zone.
utc = Zone('UTC', datetime.timezone.utc, Offset((0, 'UTC', 'std')))

@functools.lru_cache(64)
def fixed(minutes:int) -> Zone:
	"""
	# Construct the zone at a constant offset of &minutes from UTC.
	# A zero offset is &utc.
	"""
	if minutes == 0:
		return utc
	if not -24*60 < minutes < 24*60:
		raise core.UnknownZoneError(minutes)

	sign = '+' if minutes > 0 else '-'
	hours, remainder = divmod(abs(minutes), 60)
	name = '%s%02d:%02d' %(sign, hours, remainder)
	rule = datetime.timezone(datetime.timedelta(minutes=minutes), name)
	return Zone(name, rule, Offset((minutes * 60, name, 'std')))

def offset(hours:int, minutes:int=0) -> Zone:
	"""
	# Construct a fixed offset zone from &hours and &minutes.
	# The sign of &hours applies to &minutes.
	"""
	if hours < 0:
		minutes = -abs(minutes)
	return fixed((hours * 60) + minutes)

def _parse_offset(identifier):
	sign = -1 if identifier[0] == '-' else 1
	hours, _, minutes = identifier[1:].partition(':')
	if not minutes and len(hours) == 4:
		hours, minutes = hours[:2], hours[2:]
	if not hours.isdigit() or (minutes and not minutes.isdigit()):
		raise core.UnknownZoneError(identifier)
	return fixed(sign * ((int(hours) * 60) + int(minutes or 0)))

@functools.lru_cache(None)
def resolve(identifier:str) -> Zone:
	"""
	# Resolve the zone identified by &identifier.

	# [ Parameters ]
	# /identifier/
		# A catalog identifier in region/city form, `'UTC'`, or an
		# offset in the form `'±HH:MM'`.
	"""
	if identifier == 'UTC':
		return utc
	if identifier[:1] in ('+', '-'):
		return _parse_offset(identifier)

	try:
		rule = zoneinfo.ZoneInfo(identifier)
	except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError) as exc:
		raise core.UnknownZoneError(identifier) from exc

	return Zone(identifier, rule)

@functools.lru_cache(8)
def _read(path:str) -> Zone:
	"""
	# Construct the zone stored in the TZif file at &path.
	# Repeated reads of the same path yield the same &Zone.
	"""
	with open(path, 'rb') as f:
		return Zone('localtime', zoneinfo.ZoneInfo.from_file(f, key='localtime'))

_catalog = None
_catalog_lock = threading.Lock()

def identifiers() -> frozenset:
	"""
	# The set of zone identifiers available in the system catalog.

	# The catalog is loaded on first use and is read-only afterwards.
	"""
	global _catalog

	if _catalog is None:
		with _catalog_lock:
			if _catalog is None:
				ids = frozenset(zoneinfo.available_timezones())
				logger.debug("loaded %d zone identifiers", len(ids))
				_catalog = ids

	return _catalog

def local() -> Zone:
	"""
	# The default zone configured by the environment.

	# The &tzenviron variable is consulted first, then the system zone at
	# &tzdefault. When neither identifies a zone, &utc is returned.
	"""
	identifier = os.environ.get(tzenviron, '').lstrip(':')
	if identifier:
		try:
			return resolve(identifier)
		except core.UnknownZoneError:
			logger.warning("%s=%r does not identify a zone", tzenviron, identifier)

	if os.path.exists(tzdefault):
		path = os.path.realpath(tzdefault)
		if 'zoneinfo' + os.sep in path:
			try:
				return resolve(path.rsplit('zoneinfo' + os.sep, 1)[1])
			except core.UnknownZoneError:
				logger.debug("%s is not in the catalog; reading it directly", path)

		return _read(tzdefault)

	logger.warning("no default zone configured; using UTC")
	return utc
