"""
# Path canonicalization and relative/absolute conversion.

# Paths are plain strings of `/` separated segments. A path is absolute when it
# begins with `/` and designates a directory when it ends with `/`; the empty
# string is a relative, non-directory path.

# [ Entry Points ]
# - &canonicalize
# - &relative
# - &absolute
"""
from collections.abc import Sequence

from .core import IncompatibleBaseError

def is_absolute(path:str) -> bool:
	"""
	# Whether &path is anchored at the root.
	"""
	return path[:1] == '/'

def is_relative(path:str) -> bool:
	return not is_absolute(path)

def segments(path:str) -> list[str]:
	"""
	# The segments of &path excluding empty and `.` segments.
	"""
	return [x for x in path.split('/') if x and x != '.']

def resolve(points:Sequence[str], anchored:bool, delta=({'':0, '.':0, '..':1}).get) -> list[str]:
	"""
	# Resolve the dot-segments within &points.

	# Ascents beyond the first point are discarded when &anchored, otherwise
	# they are retained as leading `'..'` points.
	"""
	r:list[str] = []
	add = r.append

	for x in points:
		a = delta(x)
		if a is None:
			add(x)
		elif a:
			if r and r[-1] != '..':
				del r[-1]
			elif not anchored:
				add('..')

	return r

def canonicalize(path:str) -> str:
	"""
	# Resolve `.` and `..` segments and remove redundant slashes.

	# A trailing slash is preserved when anything remains of the path.
	# Relative paths that resolve to the current directory produce `'./'`
	# when the trailing slash was present, and an empty string otherwise.
	"""
	if not path:
		return ''

	anchored = is_absolute(path)
	trailing = path[-1:] == '/'

	result = '/'.join(resolve(path.split('/'), anchored))
	if not result:
		if anchored:
			return '/'
		return './' if trailing else ''

	if anchored:
		result = '/' + result
	if trailing and result != '/':
		result += '/'

	return result

def relative(path:str, base:str) -> str:
	"""
	# Construct the path that arrives at &path from the directory of &base.

	# When &base does not end with a slash, its final segment is considered
	# a file and the containing directory is used.

	# [ Exceptions ]
	# /&IncompatibleBaseError/
		# One of &path or &base is absolute and the other is not.
	"""
	if is_absolute(path) != is_absolute(base):
		raise IncompatibleBaseError("cannot relate an absolute path to a relative path")

	path = canonicalize(path)
	base = canonicalize(base)

	source = segments(base)
	target = segments(path)
	if base != '/' and base[-1:] != '/':
		del source[-1:]

	# Common leading segments.
	cl = 0
	for x, y in zip(source, target):
		if x != y:
			break
		cl += 1

	ascent = len(source) - cl
	points = ['..'] * ascent + target[cl:]

	if points and path != '/' and path[-1:] == '/':
		# Directory target; includes ancestors of base.
		points.append('')

	if not points:
		if target and target[-1] != '..' and path[-1:] != '/':
			# The directory of base referenced as a file.
			return '../' + target[-1]
		return '.'

	return '/'.join(points)

def directory(path:str) -> str:
	"""
	# The directory portion of the absolute &path; &path itself when it ends with a slash.
	"""
	if path[-1:] == '/':
		return path

	return path[:path.rfind('/')] or '/'

def absolute(path:str, base:str) -> str:
	"""
	# Resolve &path against the directory of &base.

	# Already absolute paths are canonicalized and returned without consulting &base.

	# [ Exceptions ]
	# /&IncompatibleBaseError/
		# &path is relative and &base is not absolute.
	"""
	if is_absolute(path):
		return canonicalize(path)

	if is_relative(base):
		raise IncompatibleBaseError("base path must be absolute to form an absolute path")

	bd = directory(base)
	if path in ('', '.'):
		if bd[-1:] != '/':
			bd += '/'
		return canonicalize(bd)

	return canonicalize(bd.rstrip('/') + '/' + path)
