identity = 'http://fault.io/python/locator'
name = 'locator'
abstract = 'URL value type with path canonicalization and relative/absolute resolution'
icon = '🧭'

fork = 'darpa'
versioning = 'continuous'
status = 'flux'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'

#: Version tuple: (major, minor, patch)
version_info = (0, 1, 0)

#: The version string.
version = '.'.join(map(str, version_info))
