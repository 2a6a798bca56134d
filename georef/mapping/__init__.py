"""
The mapping package ties pixel transform, datum and projection together in the
:class:`~georef.mapping.georeference.GeoReference` class.

- :mod:`~georef.mapping.lonrange` decides which longitude window
  ([-180,180] or [0,360]) contains the footprint of an image
- :mod:`~georef.mapping.reproject` approximates bounding boxes across
  pixel, projected and longitude/latitude space
- :mod:`~georef.mapping.wkt` converts datum and projection from and to WKT

The starting point is the :mod:`georef.mapping.georeference` module.
"""
