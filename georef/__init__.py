"""
The georef package relates the pixels of a georeferenced raster image to
map coordinates.

The :mod:`georef.coordinates` package contains the building blocks which do not
depend on a projection: the affine pixel transform
(:mod:`~georef.coordinates.affine`), longitude window helpers
(:mod:`~georef.coordinates.longitude`), datums (:mod:`~georef.coordinates.datum`)
and axis-aligned bounding boxes (:mod:`~georef.coordinates.bbox`).

The :mod:`georef.projection` package wraps the external projection library.
Projections are configured by PROJ token strings (:mod:`~georef.projection.proj4`)
and evaluated by a provider (:mod:`~georef.projection.provider`) which is driven by
the :class:`~georef.projection.engine.ProjectionEngine`.

The :mod:`georef.mapping` package contains the
:class:`~georef.mapping.georeference.GeoReference` main class which ties
everything together, the longitude window policy (:mod:`~georef.mapping.lonrange`),
bounding box reprojection (:mod:`~georef.mapping.reproject`) and WKT interchange
(:mod:`~georef.mapping.wkt`).

Reading and writing georeferencing information from and to raster files is
delegated to resources implementing :class:`georef.resource.GeoReferenceResource`.
"""

from ._version import __version__, __version_info__
