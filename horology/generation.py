"""
# Bounded random generation of time values for property based testing.

# A &Generator draws epoch milliseconds from the &Era instances of a
# &Configuration and lifts them into the requested kind. The era is chosen
# uniformly first, then the moment uniformly within the era; short eras are
# not under-represented.

#!python
	g = Generator(default.derive(eras=(modern,)), seed=1)
	for x in g.sample('instant', 100):
		assert predicates.is_instant(x)

# Every value produced satisfies the predicate in &.predicates.validators
# for its kind and its moment lies inside one of the configured eras.
"""
import dataclasses
import functools
import logging
import operator
import random

from . import gregorian
from . import libzone
from . import types

logger = logging.getLogger(__name__)

# Constructor for immutable records.
record = functools.partial(dataclasses.dataclass, slots=True, eq=True, frozen=True)

@record()
class Era(object):
	"""
	# A half-open window of epoch milliseconds.

	# [ Properties ]
	# /start/
		# The first millisecond of the era.
	# /stop/
		# The millisecond after the last of the era.
	# /name/
		# Optional label used in log messages and errors.
	"""
	start: (int)
	stop: (int)
	name: (str) = None

	def __post_init__(self):
		if not self.stop > self.start:
			raise ValueError("era %r does not stop after it starts" %(self.name,))

	def __contains__(self, millis):
		return self.start <= millis < self.stop

	@classmethod
	def between(Class, start, stop, name=None):
		"""
		# Construct the era from two points in time.
		"""
		return Class(start.millis, stop.millis, name)

_at = gregorian.millis_from_fields

past = Era(_at(2001, 1, 1), _at(2010, 12, 31), 'past')
past_and_future = Era(_at(2011, 1, 1), _at(2030, 12, 31, 23, 59, 59), 'past-and-future')
future = Era(_at(2031, 1, 1), _at(2040, 12, 31, 23, 59, 59), 'future')
modern = Era(_at(1986, 3, 24, 14, 49, 31), _at(2017, 1, 20, 16), 'modern')

#: The preset eras by name.
eras = {
	x.name: x for x in (past, past_and_future, future, modern)
}

def utc_only():
	"""
	# The zone pool containing only &libzone.utc.
	"""
	return (libzone.utc,)

def sampled(count:int, source=None):
	"""
	# The zone pool containing &libzone.utc and &count zones drawn from the
	# system catalog using &source, a &random.Random instance.
	"""
	if source is None:
		source = random.Random()

	ids = sorted(libzone.identifiers())
	chosen = source.sample(ids, min(count, len(ids)))
	return (libzone.utc,) + tuple(libzone.resolve(x) for x in chosen)

@record()
class Configuration(object):
	"""
	# The eras and zones used by a &Generator.

	# [ Properties ]
	# /eras/
		# Disjoint &Era instances.
	# /zones/
		# The pool of zones assigned to generated instants. Always includes
		# &libzone.utc.
	"""
	eras: (tuple)
	zones: (tuple)

	def __post_init__(self):
		object.__setattr__(self, 'eras', tuple(self.eras))
		object.__setattr__(self, 'zones', tuple(self.zones))

		if not self.eras:
			raise ValueError("configuration has no eras")
		if not self.zones:
			raise ValueError("configuration has no zones")
		if libzone.utc not in self.zones:
			raise ValueError("zone pool does not include UTC")

		ordered = sorted(self.eras, key=operator.attrgetter('start'))
		for a, b in zip(ordered, ordered[1:]):
			if b.start < a.stop:
				raise ValueError("eras %r and %r overlap" %(a.name, b.name))

	def derive(self, **fields):
		"""
		# Construct a new configuration replacing the given &fields.
		"""
		return dataclasses.replace(self, **fields)

default = Configuration((past, past_and_future, future), utc_only())

class Generator(object):
	"""
	# Random time value source.

	# [ Properties ]
	# /configuration/
		# The &Configuration limiting the generated values.
	# /source/
		# The &random.Random instance values are drawn from.
	"""
	kinds = ('instant', 'utc-instant', 'date', 'date-time', 'zone')

	def __init__(self, configuration=default, source=None, seed=None):
		if source is None:
			source = random.Random(seed)

		self.configuration = configuration
		self.source = source
		logger.debug(
			"generator configured with eras %s and %d zones",
			', '.join(str(x.name) for x in configuration.eras),
			len(configuration.zones),
		)

	def era(self) -> Era:
		return self.source.choice(self.configuration.eras)

	def millis(self) -> int:
		"""
		# Milliseconds since the unix epoch inside one of the configured eras.
		"""
		era = self.era()
		return self.source.randrange(era.start, era.stop)

	def zone(self) -> libzone.Zone:
		return self.source.choice(self.configuration.zones)

	def instant(self) -> types.Instant:
		"""
		# An instant in a zone drawn from the configured pool.
		"""
		return types.Instant.from_millis(self.millis(), self.zone())

	def utc_instant(self) -> types.Instant:
		return types.Instant.from_millis(self.millis(), libzone.utc)

	def date(self, day=gregorian.millis_in_day) -> types.Date:
		"""
		# A date whose midnight, read as UTC, lies inside one of the configured eras.

		# The day is drawn uniformly from the midnights inside the era, not
		# lifted from a drawn millisecond.
		"""
		era = self.era()
		first = -(-era.start // day)
		last = (era.stop - 1) // day
		if first > last:
			raise ValueError("era %r does not contain a midnight" %(era.name,))
		return types.Date.from_days(self.source.randint(first, last))

	def date_time(self) -> types.DateTime:
		"""
		# The UTC fields of a generated moment.
		"""
		return types.DateTime.from_millis(self.millis())

	def generate(self, kind:str):
		"""
		# Produce a value of the given &kind; one of &kinds.
		"""
		if kind not in self.kinds:
			raise ValueError("unknown kind: %r" %(kind,))
		return getattr(self, kind.replace('-', '_'))()

	def sample(self, kind:str, count:int) -> list:
		return [self.generate(kind) for i in range(count)]
