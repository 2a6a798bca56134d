"""
This package contains the projection-independent parts of a georeference:
the pixel transform (:mod:`~georef.coordinates.affine`), longitude windows
(:mod:`~georef.coordinates.longitude`), datums (:mod:`~georef.coordinates.datum`)
and axis-aligned bounding boxes (:mod:`~georef.coordinates.bbox`).

This package does not depend on the projection library or on
:class:`~georef.mapping.georeference.GeoReference` and can therefore be re-used
generically for other purposes.
"""
