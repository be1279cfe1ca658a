"""
# Exception hierarchy for locator parsing and resolution.

# All locator errors are argument errors; &Error derives from &ValueError.
"""

class Error(ValueError):
	"""
	# Base class for locator errors.
	"""

class ParseError(Error):
	"""
	# The text could not be decomposed into locator components.
	"""

class SchemeError(Error):
	"""
	# A non-empty scheme did not start with a letter or contained characters
	# other than letters, digits, `+`, `-`, or `.`.
	"""

class PortError(Error):
	"""
	# Port outside of the range `1-65535`.
	"""

class IncompatibleBaseError(Error):
	"""
	# The base given to a resolution operation cannot anchor the target.

	# Raised when the absoluteness of a path and its base differ, or when
	# an absolute result is requested against a relative base.
	"""

class RelativizeError(Error):
	"""
	# A locator could not be made relative.

	# The base was not absolute, scheme or authority of the target and base
	# differ, or no base was given for a locator with a relative path.
	"""
