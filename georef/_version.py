__version__ = '0.3.0'
__version_info__ = tuple(int(n) for n in __version__.split('.'))
