"""
# Contention primitives for the locator tests.

# Test functions receive a `test` object and form assertions with true division:

#!syntax/python
	def test_feature(test):
		test/expectation == module.functionality()
		test/module.Error ^ (lambda: module.failure())

# A failed contention raises &Absurdity, reported by pytest as a failed test.
"""
import builtins
import functools
import operator

import pytest

class Absurdity(AssertionError):
	"""
	# Exception raised by &Contention instances designating a failed assertion.
	"""

	# for re-constituting the expression
	operator_names_mapping = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__gt__': '>',
		'__le__': '<=',
		'__ge__': '>=',
		'__mod__': 'is',
		'__lshift__': '<<',
	}

	def __init__(self, operator, former, latter, inverse=False):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse
		super().__init__(str(self))

	def __str__(self):
		opchars = self.operator_names_mapping.get(self.operator, self.operator)
		prefix = ('not ' if self.inverse else '')
		return prefix + ' '.join((repr(self.former), opchars, repr(self.latter)))

class Contention(object):
	"""
	# Assertion operand created by the true division of a &Test.

	# Comparisons are passed on to the operand. `^` contends that calling the
	# right-hand operand raises the exception type on the left.
	"""

	__slots__ = ('_operand', '_inverse', '_storage')

	def __init__(self, object, inverse=False):
		self._operand = object
		self._inverse = inverse
		self._storage = None

	def _check(self, opname, comparison, operand):
		x = self._operand
		if self._inverse:
			if comparison(x, operand): raise Absurdity(opname, x, operand, inverse=True)
			return False
		else:
			if not comparison(x, operand): raise Absurdity(opname, x, operand, inverse=False)
			return True

	def __eq__(self, operand):
		return self._check('__eq__', operator.eq, operand)

	def __ne__(self, operand):
		return self._check('__ne__', operator.ne, operand)

	def __lt__(self, operand):
		return self._check('__lt__', operator.lt, operand)

	def __gt__(self, operand):
		return self._check('__gt__', operator.gt, operand)

	def __le__(self, operand):
		return self._check('__le__', operator.le, operand)

	def __ge__(self, operand):
		return self._check('__ge__', operator.ge, operand)

	def __mod__(self, operand):
		return self._check('__mod__', operator.is_, operand)

	__hash__ = None

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, '_storage', None)

	def __exit__(self, typ, val, tb):
		x = self._operand
		y = self._storage = val

		if self._inverse:
			if isinstance(y, x): raise Absurdity("isinstance", x, y, inverse=True)
		else:
			if not isinstance(y, x): raise Absurdity("isinstance", x, y, inverse=False)
		return True # Trap the exception if it is expected.

	def __xor__(self, operand):
		"""
		# Contend that the &operand raises the given exception when it is called.
		"""

		with self as exc:
			operand()
		return exc()

	def __lshift__(self, operand):
		"""
		# Contend that the &operand is contained by the object.
		"""

		contained = operand in self._operand

		if self._inverse:
			if contained: raise Absurdity("__lshift__", self._operand, operand, inverse=True)
			return False
		else:
			if not contained: raise Absurdity("__lshift__", self._operand, operand, inverse=False)
			return True

class Test(object):
	"""
	# Provides interfaces for constructing and checking &Contention's.
	"""

	__slots__ = ('identifier', 'contentions', '_invert_contention')

	def __init__(self, identifier):
		self.identifier = identifier
		self.contentions = 0
		self._invert_contention = 0

	def _inverse(self):
		if self._invert_contention:
			self._invert_contention -= 1
			return True
		return False

	@property
	def invert(self):
		"""
		# Invert the next contention.
		"""

		self._invert_contention += 1
		return self

	def __truediv__(self, operand):
		self.contentions += 1
		return Contention(operand, inverse=self._inverse())

	def __rtruediv__(self, operand):
		self.contentions += 1
		return Contention(operand, inverse=self._inverse())

	def isinstance(self, *args):
		self.contentions += 1
		i = self._inverse()
		if builtins.isinstance(*args) == i:
			raise Absurdity("isinstance", *args, inverse=i)

	def skip(self, condition):
		"""
		# Explicitly conclude that the test skipped when &condition is &True.
		"""

		if condition: pytest.skip("skipped")

	def fail(self, message=None):
		"""
		# Explicitly conclude that the test failed.
		"""

		pytest.fail(message or "explicit failure")

@pytest.fixture
def test(request):
	return Test(request.node.nodeid)
