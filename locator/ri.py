"""
# Split Resource Indicators into their components.

# &.ri decomposes URI strings into the raw fields consumed by &.types.URL.
# Fields are not percent decoded and, aside from the port, not validated;
# validation is left to the consumer.

# [ Entry Points ]
# - &split
# - &split_netloc
# - &parse

# [ Types ]

# A split indicator is designated a type identified by the text following
# the scheme field:

# /authority/
	# A scheme followed by (characters)`'://'`.
# /relative/
	# A pair of slashes without a scheme. The scheme is implied by context.
# /absolute/
	# A colon following the scheme field and no authority; `mailto:` and `urn:`.
# /amorphous/
	# A `host:port` pair without a scheme or slashes.
# /none/
	# No scheme or authority; a plain path reference.
"""
import collections

from .core import ParseError

scheme_chars = '-.+0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ'
digits = '0123456789'

Parts = collections.namedtuple("Parts",
	('type', 'scheme', 'netloc', 'path', 'query', 'fragment')
)

def _isdigits(s, _digit_set=set(digits)):
	return bool(s) and set(s) <= _digit_set

def split(iri, _scheme_char_set=set(scheme_chars)) -> Parts:
	"""
	# Split an IRI into its base components based on the markers:

		# (: | ://), /, ?, #

	# The path field retains its leading slash so that root-relative paths
	# can be distinguished from relative paths.

	# [ Parameters ]
	# /iri/
		# A complete IRI or URI, or any trailing portion of one.
	"""
	type = None
	scheme = None
	netloc = None
	path = None
	query = None
	fragment = None

	s = iri.lstrip()
	pos = 0

	fragment_pos = s.find('#')
	if fragment_pos != -1:
		fragment = s[fragment_pos+1:]
		s = s[:fragment_pos]

	query_pos = s.find('?')
	if query_pos != -1:
		query = s[query_pos+1:]
		s = s[:query_pos]

	if s[:2] == '//':
		type = 'relative' # scheme is defined by context.
		pos = 2
	else:
		scheme_pos = s.find(':')
		candidate = s[:scheme_pos] if scheme_pos > 0 else ''

		if not candidate or not set(candidate) <= _scheme_char_set:
			# Delimiters before the ':', or no ':' at all.
			type = 'none'
		elif s.startswith('//', scheme_pos+1):
			type = 'authority'
			scheme = candidate
			pos = scheme_pos + 3
		else:
			tail = s[scheme_pos+1:].split('/', 1)[0]
			if _isdigits(tail):
				# just digits? host:port
				type = 'amorphous'
			else:
				type = 'absolute'
				scheme = candidate
				pos = scheme_pos + 1

	if type in ('none', 'absolute'):
		if pos < len(s):
			path = s[pos:]
	else:
		path_pos = s.find('/', pos)
		if path_pos == -1:
			netloc = s[pos:]
		else:
			netloc = s[pos:path_pos]
			path = s[path_pos:]

	return Parts(type, scheme, netloc, path, query, fragment)

def split_netloc(netloc):
	"""
	# Split a net location into a 4-tuple, (user, password, host, port).

	# [ Exceptions ]
	# /&ParseError/
		# An IPv6 literal was not terminated or was followed by text other than a port.
	"""
	pos = netloc.find('@')
	if pos == -1:
		# No user information
		pos = 0
		user = None
		password = None
	else:
		userpw = netloc[:pos].split(':', 1)
		if len(userpw) == 2:
			user, password = userpw
		else:
			user = userpw[0]
			password = None
		pos += 1

	if pos >= len(netloc):
		return (user, password, None, None)

	if netloc[pos] == '[':
		# IPvN addr
		next_pos = netloc.find(']', pos)
		if next_pos == -1:
			raise ParseError("unterminated address literal in %r" %(netloc,))
		addr = netloc[pos:next_pos+1]
		remainder = netloc[next_pos+1:]
		if not remainder:
			port = None
		elif remainder[:1] == ':':
			port = remainder[1:]
		else:
			raise ParseError("unexpected text following address literal in %r" %(netloc,))
	else:
		if ']' in netloc[pos:]:
			raise ParseError("unbalanced brackets in %r" %(netloc,))

		next_pos = netloc.find(':', pos)
		if next_pos == -1:
			addr = netloc[pos:]
			port = None
		else:
			addr = netloc[pos:next_pos]
			port = netloc[next_pos+1:]

	return (user, password, addr, port)

def structure(t) -> dict:
	"""
	# Create a dictionary from a split RI.

	# The keys, `'scheme'`, `'user'`, `'pass'`, `'host'`, `'port'`,
	# `'path'`, `'query'`, and `'fragment'`, are only present when the
	# corresponding field was present in &t. The port is converted to an &int.
	"""
	d = {}

	if t[1] is not None:
		d['scheme'] = t[1]

	if t[2] is not None:
		user, password, host, port = split_netloc(t[2])
		if not host:
			raise ParseError("authority without a host")

		if user is not None:
			d['user'] = user
		if password is not None:
			d['pass'] = password
		d['host'] = host

		if port:
			if not _isdigits(port):
				raise ParseError("malformed port %r" %(port,))
			d['port'] = int(port)
	elif t[0] in ('authority', 'relative'):
		raise ParseError("authority without a host")

	if t[3] is not None:
		d['path'] = t[3]
	if t[4] is not None:
		d['query'] = t[4]
	if t[5] is not None:
		d['fragment'] = t[5]

	return d

def parse(iri, structure=structure, split=split) -> dict:
	"""
	# Parse an RI into a dictionary object. Synonym for `structure(split(x))`.

	# [ Exceptions ]
	# /&ParseError/
		# The authority was missing its host, the port was not a decimal
		# number, or an address literal was malformed.
	"""
	return structure(split(iri))

if __name__ == '__main__':
	import sys
	print(split(sys.argv[1]))
	print(parse(sys.argv[1]))
