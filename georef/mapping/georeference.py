# Copyright European Space Agency, 2013

"""
This module provides the GeoReference class which relates the pixels
of a raster image to projected and geographic coordinates.

Three coordinate spaces are involved:

- pixel: (column, row) of the image
- point: (x,y) in the projected space of the map projection
- lonlat: (longitude, latitude) in degrees

pixel <-> point is given by a 3x3 homogeneous transform and is exact.
point <-> lonlat is evaluated by the projection library and is nonlinear
and may be undefined for some coordinates.
"""

import copy
import logging
import math

import numpy as np

from georef.coordinates.affine import AffineTransform, PixelAsArea
from georef.coordinates.bbox import growToInt
from georef.coordinates.datum import Datum, WGS84_SPHEROID_NAMES
from georef.coordinates.longitude import normalizeLongitude, windowName
from georef.projection import proj4
from georef.projection.engine import ProjectionEngine
from georef.projection.provider import PyprojProvider
from georef.mapping.lonrange import chooseLonCenter, logDecision
from georef.mapping import reproject

class GeoReference(object):
    """
    Georeference of a raster image.

    All mutators (:meth:`setTransform`, :meth:`setDatum`, :meth:`setProjection`, ...)
    derive the dependent state (shifted and inverse transforms, projection provider,
    longitude window) before any of it becomes visible. If a mutator fails,
    the georeference keeps its previous state.

    Conversions are read-only and can be called concurrently. Mutators
    must not run concurrently with anything else.
    """
    def __init__(self, datum=None, transform=None, pixelInterpretation=PixelAsArea,
                 projection=None, providerFactory=PyprojProvider):
        """
        :param Datum datum: WGS84 if None
        :param transform: 3x3 pixel to point matrix, identity if None
        :param PixelInterpretation pixelInterpretation:
        :param str projection: PROJ token string without datum, '+proj=longlat' if None
        :param providerFactory: see :class:`~georef.projection.engine.ProjectionEngine`
        :raise ConfigurationError: on singular transform or invalid projection
        """
        if datum is None:
            datum = Datum.wellKnown('WGS84')
        if projection is None:
            projection = proj4.geographic()
        affine = AffineTransform(transform, pixelInterpretation)
        engine = ProjectionEngine(projection, _patchDatum(datum), providerFactory)
        self._commit(affine, engine)

    def _commit(self, affine, engine):
        """
        Derive the longitude window for the given (not yet visible) transform
        and engine, then make all of them visible at once.
        """
        def pointToLonLatRaw(point):
            return engine.inverse(point)
        decision = chooseLonCenter(engine.proj4Str, affine.xScale, affine.pixelToPoint,
                                   pointToLonLatRaw)
        logDecision(decision)
        if decision.clearOver:
            engine.clearOver()
        self._affine = affine
        self._engine = engine
        self._centerLonZero = decision.centerLonZero

    def _newEngine(self, proj4Str, datum):
        return ProjectionEngine(proj4Str, datum, self._engine._providerFactory)

    # transform

    @property
    def transform(self):
        return self._affine.transform

    @property
    def shiftedTransform(self):
        return self._affine.shiftedTransform

    @property
    def inverseTransform(self):
        return self._affine.inverseTransform

    @property
    def inverseShiftedTransform(self):
        return self._affine.inverseShiftedTransform

    @property
    def pixelInterpretation(self):
        return self._affine.pixelInterpretation

    def setTransform(self, transform):
        """
        :raise ConfigurationError: if the transform is singular
        """
        affine = self._affine.withTransform(transform)
        self._commit(affine, self._newEngine(self.proj4Str, self.datum))

    def setPixelInterpretation(self, pixelInterpretation):
        affine = self._affine.withPixelInterpretation(pixelInterpretation)
        self._commit(affine, self._newEngine(self.proj4Str, self.datum))

    # datum and projection

    @property
    def datum(self):
        return self._engine.datum

    @property
    def proj4Str(self):
        """
        The projection tokens without datum tokens.
        """
        return self._engine.proj4Str

    @property
    def overallProj4Str(self):
        """
        The full token string including datum tokens and '+no_defs'.
        """
        return self._engine.overallProj4Str

    @property
    def isProjected(self):
        return self._engine.isProjected

    @property
    def isLonCenterAroundZero(self):
        """
        True if longitudes are reported in [-180,180), False for [0,360).
        """
        return self._centerLonZero

    def setDatum(self, datum):
        """
        :raise ConfigurationError: if the projection library rejects the datum
        """
        engine = self._newEngine(self.proj4Str, _patchDatum(datum))
        self._commit(self._affine, engine)

    def setWellKnownGeogcs(self, name):
        """
        :param str name: see :meth:`georef.coordinates.datum.Datum.wellKnown`
        """
        self.setDatum(Datum.wellKnown(name))

    def setProjection(self, proj4Str):
        """
        :param str proj4Str: projection tokens without datum tokens,
                             e.g. '+proj=stere +lat_0=90 +lon_0=0 +units=m'
        :raise ConfigurationError: if the string is empty or rejected by the projection library
        """
        engine = self._newEngine(proj4Str, self.datum)
        self._commit(self._affine, engine)

    def setLonCenter(self, centerLonZero):
        """
        Override the longitude window. Ignored for UTM which is always
        centered on 0.
        """
        if not proj4.isUTM(self.proj4Str):
            self._centerLonZero = bool(centerLonZero)

    def setGeographic(self):
        self.setProjection(proj4.geographic())

    def setEquirectangular(self, centerLatitude, centerLongitude, latitudeOfTrueScale=0,
                           falseEasting=0, falseNorthing=0):
        self.setProjection(proj4.equirectangular(centerLatitude, centerLongitude,
                                                 latitudeOfTrueScale, falseEasting, falseNorthing))

    def setSinusoidal(self, centerLongitude, falseEasting=0, falseNorthing=0):
        self.setProjection(proj4.sinusoidal(centerLongitude, falseEasting, falseNorthing))

    def setMercator(self, centerLatitude, centerLongitude, latitudeOfTrueScale=0,
                    falseEasting=0, falseNorthing=0):
        self.setProjection(proj4.mercator(centerLatitude, centerLongitude,
                                          latitudeOfTrueScale, falseEasting, falseNorthing))

    def setTransverseMercator(self, centerLatitude, centerLongitude, scale=1,
                              falseEasting=0, falseNorthing=0):
        self.setProjection(proj4.transverseMercator(centerLatitude, centerLongitude, scale,
                                                    falseEasting, falseNorthing))

    def setOrthographic(self, centerLatitude, centerLongitude, falseEasting=0, falseNorthing=0):
        self.setProjection(proj4.orthographic(centerLatitude, centerLongitude,
                                              falseEasting, falseNorthing))

    def setStereographic(self, centerLatitude, centerLongitude, scale=1,
                         falseEasting=0, falseNorthing=0):
        self.setProjection(proj4.stereographic(centerLatitude, centerLongitude, scale,
                                               falseEasting, falseNorthing))

    def setObliqueStereographic(self, centerLatitude, centerLongitude, scale=1,
                                falseEasting=0, falseNorthing=0):
        self.setProjection(proj4.obliqueStereographic(centerLatitude, centerLongitude, scale,
                                                      falseEasting, falseNorthing))

    def setGnomonic(self, centerLatitude, centerLongitude, scale=1, falseEasting=0, falseNorthing=0):
        self.setProjection(proj4.gnomonic(centerLatitude, centerLongitude, scale,
                                          falseEasting, falseNorthing))

    def setLambertAzimuthal(self, centerLatitude, centerLongitude, falseEasting=0, falseNorthing=0):
        self.setProjection(proj4.lambertAzimuthal(centerLatitude, centerLongitude,
                                                  falseEasting, falseNorthing))

    def setLambertConformal(self, stdParallel1, stdParallel2, centerLatitude, centerLongitude,
                            falseEasting=0, falseNorthing=0):
        self.setProjection(proj4.lambertConformal(stdParallel1, stdParallel2, centerLatitude,
                                                  centerLongitude, falseEasting, falseNorthing))

    def setUTM(self, zone, north=True):
        self.setProjection(proj4.utm(zone, north))

    # WKT

    @property
    def wkt(self):
        """
        WKT of datum and projection. The pixel transform is not part of it.
        """
        from georef.mapping.wkt import exportWkt
        return exportWkt(self.datum, self.proj4Str)

    def setWkt(self, wkt):
        """
        Replace datum and projection by the ones described in the WKT string.

        :raise ConfigurationError: if the WKT cannot be parsed
        """
        from georef.mapping.wkt import importWkt
        datum, proj4Str = importWkt(wkt)
        engine = self._newEngine(proj4Str, _patchDatum(datum))
        self._commit(self._affine, engine)

    # point conversions

    def pixelToPoint(self, pixel):
        """
        :param pixel: (x,y) pixel coordinate
        :rtype: ndarray of shape (2,)
        """
        return self._affine.pixelToPoint(pixel)

    def pointToPixel(self, point):
        """
        :param point: (x,y) projected coordinate
        :rtype: ndarray of shape (2,)
        """
        return self._affine.pointToPixel(point)

    def pointToLonLat(self, point):
        """
        :rtype: ndarray (lon,lat) in degrees, lon within the longitude window
        :raise ProjectionMathError:
        """
        lon, lat = self._engine.inverse(point)
        return np.array([normalizeLongitude(lon, self._centerLonZero), lat])

    def pointToLonLatRaw(self, point):
        """
        As :meth:`pointToLonLat` but the longitude is not wrapped into the window.
        """
        return np.array(self._engine.inverse(point), dtype=float)

    def lonLatToPoint(self, lonlat):
        """
        :param lonlat: (lon,lat) in degrees, lon in any window
        :rtype: ndarray (x,y)
        :raise ProjectionMathError:
        """
        lon, lat = lonlat
        lon = normalizeLongitude(lon, self._centerLonZero)
        return np.array(self._engine.forward((lon, lat)), dtype=float)

    def pixelToLonLat(self, pixel):
        return self.pointToLonLat(self.pixelToPoint(pixel))

    def lonLatToPixel(self, lonlat):
        return self.pointToPixel(self.lonLatToPoint(lonlat))

    def tryPointToLonLat(self, point):
        """
        As :meth:`pointToLonLat` but returns None if the point cannot be unprojected.
        """
        res = self._engine.tryInverse(point)
        if res is None:
            return None
        lon, lat = res
        return np.array([normalizeLongitude(lon, self._centerLonZero), lat])

    def tryLonLatToPoint(self, lonlat):
        """
        As :meth:`lonLatToPoint` but returns None if the coordinate cannot be projected.
        """
        lon, lat = lonlat
        lon = normalizeLongitude(lon, self._centerLonZero)
        res = self._engine.tryForward((lon, lat))
        if res is None:
            return None
        return np.array(res, dtype=float)

    def tryPixelToLonLat(self, pixel):
        return self.tryPointToLonLat(self.pixelToPoint(pixel))

    def testPixelReprojectionError(self, pixel):
        """
        Return the distance in pixels between `pixel` and the result of
        converting it to longitude/latitude and back.
        """
        outPixel = self.lonLatToPixel(self.pixelToLonLat(pixel))
        return math.hypot(*(outPixel - np.asarray(pixel, dtype=float)))

    # bounding box conversions

    def pixelToPointBBox(self, pixelBBox):
        """
        Exact, the transform is linear.

        :type pixelBBox: georef.coordinates.bbox.BBox
        :rtype: georef.coordinates.bbox.BBox
        """
        return reproject.transformCorners(pixelBBox, self.pixelToPoint)

    def pointToPixelBBox(self, pointBBox):
        """
        Exact, the transform is linear. The result is grown to integer bounds.
        """
        return growToInt(reproject.transformCorners(pointBBox, self.pointToPixel))

    def _normalizeLonLats(self, lonlats):
        """
        Wrap the longitude column of an (n,2) array into the window.
        """
        lonlats = np.array(lonlats, dtype=float)
        lonlats[:,0] = normalizeLongitude(lonlats[:,0], self._centerLonZero)
        return lonlats

    def _pixelToLonLatRaw(self, pixel):
        return self._engine.tryInverse(self.pixelToPoint(pixel))

    def pixelToLonLatBBox(self, pixelBBox):
        """
        Approximate the longitude/latitude box covered by a (half-open) pixel box.
        Every pixel along the box edges and both diagonals is sampled.
        """
        if not self.isProjected:
            return self.pixelToPointBBox(pixelBBox)
        return reproject.samplePixelBBox(pixelBBox, self._pixelToLonLatRaw,
                                         finish=self._normalizeLonLats)

    def lonLatToPointBBox(self, lonlatBBox, nsamples=reproject.DEFAULT_NSAMPLES):
        """
        Approximate the projected box covered by a longitude/latitude box.
        Without projection, the box is returned unchanged.
        """
        if not self.isProjected:
            return reproject.transformCorners(lonlatBBox, lambda p: p)
        return reproject.sampleBBox(lonlatBBox, self._engine.tryForward, nsamples,
                                    prepare=self._normalizeLonLats)

    def pointToLonLatBBox(self, pointBBox, nsamples=reproject.DEFAULT_NSAMPLES):
        """
        Approximate the longitude/latitude box covered by a projected box.
        Without projection, the box is returned unchanged.
        """
        if not self.isProjected:
            return reproject.transformCorners(pointBBox, lambda p: p)
        return reproject.sampleBBox(pointBBox, self._engine.tryInverse, nsamples,
                                    finish=self._normalizeLonLats)

    def lonLatToPixelBBox(self, lonlatBBox, nsamples=reproject.DEFAULT_NSAMPLES):
        """
        Approximate the pixel box covered by a longitude/latitude box.
        """
        if not self.isProjected:
            return self.pointToPixelBBox(lonlatBBox)
        return self.pointToPixelBBox(self.lonLatToPointBBox(lonlatBBox, nsamples))

    # copying

    def __copy__(self):
        other = self.__class__.__new__(self.__class__)
        other._affine = self._affine
        other._engine = copy.copy(self._engine)
        other._centerLonZero = self._centerLonZero
        return other

    def __deepcopy__(self, memo):
        return self.__copy__()

    def __str__(self):
        interp = 'pixel as area' if self.pixelInterpretation == PixelAsArea else 'pixel as point'
        return '\n'.join(['-- Proj.4 Geospatial Reference Object --',
                          '\tTransform  : ' + str(self.transform.tolist()),
                          '\t' + str(self.datum),
                          '\tProj.4 String: ' + self.proj4Str,
                          '\tPixel Interpretation: ' + interp,
                          'longitude range: ' + windowName(self._centerLonZero)])

    def __repr__(self):
        return 'GeoReference(datum={0!r}, transform={1}, pixelInterpretation={2}, projection={3!r})'.format(
                       self.datum, self.transform.tolist(), self.pixelInterpretation, self.proj4Str)

def _patchDatum(datum):
    """
    Name a WGS84 spheroid without datum tokens 'WGS_1984' and add '+datum=WGS84',
    e.g. for '+proj=longlat +ellps=WGS84 +no_defs'.
    """
    if datum.spheroidName in WGS84_SPHEROID_NAMES and \
       ('+datum=' not in datum.proj4Str or datum.name == 'unknown'):
        logging.warning('WGS84 spheroid without datum name, assuming datum WGS_1984')
        proj4Str = datum.proj4Str
        if not proj4.hasToken(proj4Str, '+datum=WGS84'):
            proj4Str = proj4.appendToken(proj4Str, '+datum=WGS84')
        datum = datum.replace(name='WGS_1984', proj4Str=proj4Str)
    return datum
