"""
# locator is a Python project providing an immutable URL type and the path
# arithmetic needed to resolve references against a base.

# [ Paths ]
# -----------

# &.path canonicalizes `/` separated path strings and converts between
# absolute and relative forms. It has no knowledge of schemes or authorities.

# [ URLs ]
# --------

# &.types.URL is an immutable tuple of URL components. Text is split by &.ri.
# &.types.URL.make_absolute and &.types.URL.make_relative compare the
# scheme and authority and delegate the path component to &.path.
"""
from .project import version
