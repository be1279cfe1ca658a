"""
# Immutable URL value type.

# &URL instances are tuples of the components of a Resource Indicator. The
# with-methods validate their argument and return a new instance; the original
# is never modified.

# [ Data ]

# /standard_ports/
	# Mapping of scheme names to their registered port. A stored port
	# equal to the standard port of the URL's scheme is not reported by
	# &URL.port or rendered in the authority.
"""
import re
import typing

from . import ri
from . import path as libpath
from .core import SchemeError, PortError, IncompatibleBaseError, RelativizeError

standard_ports = {
	'ftp': 21,
	'ftps': 990,
	'gopher': 70,
	'http': 80,
	'https': 443,
	'imap': 143,
	'imaps': 993,
	'ldap': 389,
	'ldaps': 636,
	'nntp': 119,
	'pop3': 110,
	'pop3s': 995,
	'rtsp': 554,
	'smtp': 25,
	'ssh': 22,
	'telnet': 23,
	'ws': 80,
	'wss': 443,
}

scheme_pattern = re.compile(r'^[a-zA-Z][a-zA-Z0-9+.-]*$')

def check_scheme(scheme:str) -> str:
	if scheme and scheme_pattern.match(scheme) is None:
		raise SchemeError(
			"invalid scheme %r: must start with a letter and only contain "
			"letters, digits, '+', '-', or '.'" %(scheme,)
		)
	return scheme.lower()

def check_port(port:typing.Optional[int]) -> typing.Optional[int]:
	if port is not None and not (1 <= port <= 65535):
		raise PortError("invalid port %r: must be between 1 and 65535" %(port,))
	return port

class URL(tuple):
	"""
	# A parsed Uniform Resource Locator.

	# Construct from a string with `URL(string)` or &from_string. The empty
	# string and &None construct the empty URL, which renders as `''`.

	# Equality and hashing are performed against the string form; a URL with
	# an explicit standard port equals the same URL without it.

	# [ Elements ]
	# /scheme/
		# The lowercase scheme; empty when absent.
	# /username/
		# The user of the userinfo field; empty when absent.
	# /password/
		# The password of the userinfo field; &None when absent.
	# /host/
		# The lowercase host; empty when there is no authority.
	# /port/
		# The explicit port unless it is the standard port for the scheme.
	# /path/
		# The path as given; not canonicalized.
	# /query/
		# The text following `?`; not parsed.
	# /fragment/
		# The text following `#`.
	"""
	__slots__ = ()

	_fields = (
		'scheme', 'username', 'password', 'host', 'port',
		'path', 'query', 'fragment',
	)
	_empty = ('', '', None, '', None, '', '', '')

	def __new__(Class, url:typing.Optional[str]=None):
		if not url:
			return tuple.__new__(Class, Class._empty)

		parts = ri.parse(url)
		return Class.from_parts(
			scheme=parts.get('scheme', ''),
			username=parts.get('user', ''),
			password=parts.get('pass'),
			host=parts.get('host', ''),
			port=parts.get('port'),
			path=parts.get('path', ''),
			query=parts.get('query', ''),
			fragment=parts.get('fragment', ''),
		)

	@classmethod
	def from_string(Class, url:str):
		"""
		# Construct an instance by parsing &url with &ri.parse.
		"""
		return Class(url)

	@classmethod
	def from_parts(Class,
			scheme='', username='', password=None, host='', port=None,
			path='', query='', fragment='',
		):
		"""
		# Construct an instance from its components performing
		# the same validation as the with-methods.
		"""
		return tuple.__new__(Class, (
			check_scheme(scheme),
			username,
			password,
			host.lower(),
			check_port(port),
			path,
			query,
			fragment,
		))

	def _replace(self, **fields):
		current = dict(zip(self._fields, self))
		current.update(fields)
		return tuple.__new__(self.__class__, [current[k] for k in self._fields])

	def __reduce__(self):
		return (self.__class__.from_parts, tuple(self))

	def __str__(self):
		uri = ''

		if self[0]:
			uri += self[0] + ':'

		authority = self.authority
		if authority:
			uri += '//' + authority

		uri += libpath.canonicalize(self[5])

		if self[6]:
			uri += '?' + self[6]
		if self[7]:
			uri += '#' + self[7]

		return uri

	def __repr__(self):
		return "%s.%s(%r)" %(__name__, self.__class__.__name__, str(self))

	def __eq__(self, operand):
		if not isinstance(operand, URL):
			return NotImplemented
		return str(self) == str(operand)

	def __ne__(self, operand):
		if not isinstance(operand, URL):
			return NotImplemented
		return str(self) != str(operand)

	def __hash__(self):
		return hash(str(self))

	@property
	def scheme(self) -> str:
		return self[0]

	@property
	def username(self) -> str:
		return self[1]

	@property
	def password(self) -> typing.Optional[str]:
		return self[2]

	@property
	def host(self) -> str:
		return self[3]

	@property
	def port(self) -> typing.Optional[int]:
		"""
		# The port number or &None if no port was given or the port
		# is the standard port of the scheme.
		"""
		port = self[4]
		if port is not None and standard_ports.get(self[0]) == port:
			return None
		return port

	@property
	def path(self) -> str:
		return self[5]

	@property
	def query(self) -> str:
		return self[6]

	@property
	def fragment(self) -> str:
		return self[7]

	@property
	def userinfo(self) -> str:
		"""
		# `username` or `username:password`. Empty when there is no username,
		# regardless of the presence of a password.
		"""
		if not self[1]:
			return ''

		if self[2] is not None:
			return self[1] + ':' + self[2]
		return self[1]

	@property
	def authority(self) -> str:
		"""
		# `[userinfo@]host[:port]`; empty when there is no host.
		"""
		if not self[3]:
			return ''

		authority = self[3]
		userinfo = self.userinfo
		if userinfo:
			authority = userinfo + '@' + authority

		port = self.port
		if port is not None:
			authority += ':' + str(port)

		return authority

	def is_absolute(self) -> bool:
		"""
		# Whether the URL has both a scheme and an authority.
		"""
		return bool(self[0]) and bool(self.authority)

	def is_relative(self) -> bool:
		return not self.is_absolute()

	def with_scheme(self, scheme:str):
		return self._replace(scheme=check_scheme(scheme))

	def with_username(self, username:str):
		return self._replace(username=username)

	def with_password(self, password:typing.Optional[str]):
		return self._replace(password=password)

	def with_userinfo(self, username:str, password:typing.Optional[str]=None):
		"""
		# Replace both the username and password; the password is cleared when not given.
		"""
		return self._replace(username=username, password=password)

	def with_host(self, host:str):
		return self._replace(host=host.lower())

	def with_port(self, port:typing.Optional[int]):
		return self._replace(port=check_port(port))

	def with_path(self, path:str):
		return self._replace(path=path)

	def with_query(self, query:str):
		return self._replace(query=query)

	def with_fragment(self, fragment:str):
		return self._replace(fragment=fragment)

	@classmethod
	def coerce(Class, base) -> 'URL':
		"""
		# Interpret &base as a URL. Strings are parsed and foreign URL-like
		# objects are parsed from their string form.
		"""
		if isinstance(base, Class):
			return base
		if isinstance(base, str):
			return Class.from_string(base)
		return Class.from_string(str(base))

	def make_absolute(self, base):
		"""
		# Resolve &self against &base.

		# Already absolute URLs have their path canonicalized. Scheme-relative URLs
		# adopt the scheme of &base. Otherwise, the scheme and authority of &base are
		# adopted and the path is resolved against the path of &base.

		# [ Parameters ]
		# /base/
			# The absolute URL, or its string form, to resolve against.

		# [ Exceptions ]
		# /&IncompatibleBaseError/
			# &base was not absolute.
		"""
		base = self.coerce(base)
		if not base.is_absolute():
			raise IncompatibleBaseError("base URL must be absolute: %r" %(str(base),))

		if self.is_absolute():
			return self._replace(path=libpath.canonicalize(self[5]))

		if self[3]:
			# Scheme-relative; //host/path
			return self._replace(scheme=base.scheme, path=libpath.canonicalize(self[5]))

		new = self._replace(
			scheme=base.scheme,
			host=base.host,
			port=base.port,
			# An absolute URL with an empty path is at the root.
			path=libpath.absolute(self[5], base.path or '/'),
		)

		if base.userinfo:
			new = new._replace(username=base.username, password=base.password)

		return new

	def make_relative(self, base=None):
		"""
		# Construct a relative URL referring to &self from &base.

		# When &base is &None, the scheme and authority are removed leaving a
		# root-relative URL with the path, query, and fragment unchanged.

		# [ Exceptions ]
		# /&RelativizeError/
			# &base was not absolute; the scheme or authority of &self, once made
			# absolute, differs from &base; or &base was &None and &self has a relative path.
		"""
		if base is None:
			if libpath.is_relative(self[5]):
				raise RelativizeError("cannot make a root-relative URL from a relative path")
			return self.__class__.from_parts(path=self[5], query=self[6], fragment=self[7])

		base = self.coerce(base)
		if not base.is_absolute():
			raise RelativizeError("base URL must be absolute: %r" %(str(base),))

		target = self if self.is_absolute() else self.make_absolute(base)
		if target.scheme != base.scheme or target.authority != base.authority:
			raise RelativizeError(
				"scheme or authority of %r does not match %r" %(str(target), str(base))
			)

		return self.__class__.from_parts(
			path=libpath.relative(target.path or '/', base.path or '/'),
			query=target.query,
			fragment=target.fragment,
		)
