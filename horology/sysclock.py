"""
# Typed System Clock access.
"""
import time

from . import types

def _real_clock_read(time_ns=time.time_ns, divisor=10**6):
	return time_ns() // divisor

def now(Instant=types.Instant) -> types.Instant:
	"""
	# Get the current point in time according to the system's real clock as a UTC &types.Instant.
	"""
	return Instant.from_millis(_real_clock_read())
