"""
# Capability protocols implemented by the time value kinds.

# Primarily, this module exists to document the interfaces shared by
# &.types.Instant, &.types.Date, &.types.DateTime, &.types.Period, and
# &.types.Interval. The redundant method declarations are intentional.

# [ Capabilities ]
# /&Fields/
	# Component access: year, month, day, day of week, and time of day.
# /&Shift/
	# Forward and backward movement by &.types.Period instances.
# /&Ordering/
	# Strict comparison between points and intervals.
"""
from abc import abstractmethod
import typing

@typing.runtime_checkable
class Fields(typing.Protocol):
	"""
	# Access to the calendar components of a point in time.

	# For zoned kinds, the components are read in the point's own zone.
	"""

	@property
	@abstractmethod
	def year(self) -> int:
		"""
		# The proleptic Gregorian year.
		"""

	@property
	@abstractmethod
	def month(self) -> int:
		"""
		# The month of the year; `1` through `12`.
		"""

	@property
	@abstractmethod
	def day(self) -> int:
		"""
		# The day of the month starting at `1`.
		"""

	@property
	@abstractmethod
	def day_of_week(self) -> int:
		"""
		# The ISO day of the week; Monday is `1` and Sunday is `7`.
		"""

	@property
	@abstractmethod
	def hour(self) -> int:
		"""
		# The hour of the day; `0` through `23`. A time of 12:01am has an hour of `0`.
		# Kinds without a time of day report `0`.
		"""

	@property
	@abstractmethod
	def minute(self) -> int:
		"""
		# The minute of the hour.
		"""

	@property
	@abstractmethod
	def second(self) -> int:
		"""
		# The second of the minute.
		"""

	@property
	@abstractmethod
	def millisecond(self) -> int:
		"""
		# The millisecond of the second.
		"""

@typing.runtime_checkable
class Shift(typing.Protocol):
	"""
	# Movement by &.types.Period instances. Shifting never modifies the
	# subject; a new instance of the same kind is always returned.
	"""

	@abstractmethod
	def elapse(self, period):
		"""
		# Move forwards by &period.

		# Calendar components, years and months, are applied to the local
		# calendar fields and clamp the day of the month. The remaining
		# components are applied as exact durations.
		"""

	@abstractmethod
	def rollback(self, period):
		"""
		# Move backwards by &period. The semantics are identical to &elapse
		# with the components of &period negated.

		# [ Invariants ]
		#!python
			assert point.elapse(fixed).rollback(fixed) == point
		"""

@typing.runtime_checkable
class Ordering(typing.Protocol):
	"""
	# Strict ordering. Equal points neither lead nor follow each other.
	"""

	@abstractmethod
	def leads(self, ob) -> bool:
		"""
		# Whether &self comes strictly *before* &ob.

		# When &ob is an interval, a point leads it when it precedes the
		# interval's start.
		"""

	@abstractmethod
	def follows(self, ob) -> bool:
		"""
		# Whether &self comes strictly *after* &ob.

		# When &ob is an interval, a point follows it when the interval
		# ends at or before the point.
		"""

@typing.runtime_checkable
class Point(Fields, Shift, Ordering, typing.Protocol):
	"""
	# A point in time: all three capabilities and a position on the
	# millisecond line.
	"""

	@property
	@abstractmethod
	def millis(self) -> int:
		"""
		# Milliseconds since the unix epoch. Zone-less kinds are read as UTC.
		"""
