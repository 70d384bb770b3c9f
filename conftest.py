"""
# Expose the contention harness to pytest as the `test` fixture.
"""
import pytest

from horology.test import harness

@pytest.fixture
def test(request):
	t = harness.Test(request.node.nodeid, request.function)
	with t.exits:
		yield t
