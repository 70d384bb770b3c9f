"""
# Exceptions raised by horology.

# All errors are local and synchronous. Calendar, interval, and zone errors
# identify misuse by the caller and are never trapped by the package.
"""

class Error(Exception):
	"""
	# Base class for the exceptions raised by horology.
	"""

class InvalidCalendarValueError(Error, ValueError):
	"""
	# Raised when a date or time of day field is out of range at construction.

	# [ Properties ]
	# /kind/
		# The name of the kind being constructed; `'date'`, `'date-time'`, etc.
	# /fields/
		# The fields that were given.
	# /field/
		# The name of the offending field.
	"""

	def __init__(self, kind, fields, field):
		self.kind = kind
		self.fields = fields
		self.field = field

	def __str__(self):
		return "%s field %r is out of range in %r" %(self.kind, self.field, self.fields)

class InvalidIntervalError(Error, ValueError):
	"""
	# Raised when an interval's end precedes its start.
	"""

	def __init__(self, start, end):
		self.start = start
		self.end = end

	def __str__(self):
		return "interval end %s precedes start %s" %(self.end, self.start)

class UnknownZoneError(Error, LookupError):
	"""
	# Raised when a zone identifier or offset cannot be resolved.
	"""

	def __init__(self, identifier):
		self.identifier = identifier

	def __str__(self):
		return "unknown time zone: %r" %(self.identifier,)

class ParseError(Error, ValueError):
	"""
	# Raised when text could not be parsed by any of the requested formats.

	# [ Properties ]
	# /source/
		# The text that was given to the parser.
	# /format/
		# The format identifier, or the sequence of identifiers, that was attempted.
	"""

	def __init__(self, source, format=None):
		self.source = source
		self.format = format

	def __str__(self):
		return "could not parse %r as %s" %(self.source, self.format)

class StructureError(ParseError):
	"""
	# Raised when the parsed fields of a format could not be converted into integers.
	"""

	def __init__(self, source, struct, format=None):
		super().__init__(source, format=format)
		self.struct = struct

class IntegrityError(ParseError):
	"""
	# Raised when the converted fields do not identify a valid point in time.
	"""

	def __init__(self, source, struct, fields, format=None):
		super().__init__(source, format=format)
		self.struct = struct
		self.fields = fields
