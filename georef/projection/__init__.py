"""
This package wraps the external projection library.

Projections are configured by PROJ token strings of the form
``+proj=stere +lat_0=90 +lon_0=0 +units=m`` (:mod:`~georef.projection.proj4`).
The strings are evaluated by a :class:`~georef.projection.provider.ProjectionProvider`,
by default backed by `pyproj <https://pyproj4.github.io>`_.
The :class:`~georef.projection.engine.ProjectionEngine` owns a provider and
converts between projected points and longitude/latitude in degrees.
"""
