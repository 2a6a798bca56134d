# Copyright European Space Agency, 2013

"""
Selection of the longitude window of a georeference.

Longitudes of a georeferenced image are reported either in [-180,180) or
in [0,360). The window is chosen such that the footprint of the image is
contiguous, e.g. an image crossing the antimeridian gets [0,360).
The decision only depends on the projection and the pixel transform.
"""

import logging
from collections import namedtuple

from georef.errors import ConfigurationError, ProjectionMathError
from georef.coordinates.longitude import degreeDiff, windowName
from georef.projection import proj4

LonCenter = namedtuple('LonCenter', ['centerLonZero', 'clearOver', 'reason'])
LonCenter.__doc__ = """
centerLonZero: True for [-180,180), False for [0,360)
clearOver: whether '+over' can be stripped from the projection
reason: short description of the rule that decided
"""

def _centeredOnZero(reason):
    return LonCenter(True, True, reason)

def _centeredOn180(reason):
    return LonCenter(False, False, reason)

def chooseLonCenter(proj4Str, xScale, pixelToPoint, pointToLonLatRaw):
    """
    Decide which longitude window contains the footprint of an image.
    
    Rules in order:
    
    1. UTM is always centered on 0.
    2. Orthographic: pixel (0,0) may be off the visible hemisphere,
       therefore the window whose center is closer to +lon_0 is used.
    3. Otherwise the unwrapped longitude of pixel (0,0) decides if it is
       outside [0,180]. Inside [0,180] the window is chosen in which the
       image can grow: [0,360) if projected x increases with the pixel column,
       else [-180,180).
    
    :param str proj4Str: projection tokens
    :param number xScale: x-scale coefficient of the pixel transform
    :param pixelToPoint: callable pixel -> projected point
    :param pointToLonLatRaw: callable point -> (lon,lat) without longitude wrapping
    :rtype: LonCenter
    :raise ConfigurationError: if the longitude of pixel (0,0) cannot be computed
    """
    if proj4.isUTM(proj4Str):
        return _centeredOnZero('UTM')
    
    if proj4.isOrthographic(proj4Str):
        lon0 = proj4.extractValue(proj4Str, 'lon_0')
        if lon0 is None:
            return _centeredOnZero('orthographic without +lon_0')
        if degreeDiff(lon0, 180) < degreeDiff(lon0, 0):
            return _centeredOn180('orthographic, +lon_0=' + str(lon0) + ' closer to 180')
        return _centeredOnZero('orthographic, +lon_0=' + str(lon0) + ' closer to 0')
    
    try:
        startLon, _ = pointToLonLatRaw(pixelToPoint((0, 0)))
    except ProjectionMathError as e:
        raise ConfigurationError('Cannot determine the longitude range, pixel (0,0) '
                                 'does not unproject: ' + str(e)) from e
    
    if startLon > 180:
        return _centeredOn180('start longitude ' + str(startLon) + ' > 180')
    if startLon < 0:
        return _centeredOnZero('start longitude ' + str(startLon) + ' < 0')
    
    # TODO use the direction of the full first row instead of the x-scale only,
    #      rotated transforms can grow in the other direction
    if xScale > 0:
        return _centeredOn180('start longitude ' + str(startLon) + ' in [0,180], increasing')
    return _centeredOnZero('start longitude ' + str(startLon) + ' in [0,180], decreasing')

def logDecision(decision):
    logging.debug('longitude range ' + windowName(decision.centerLonZero) +
                  ': ' + decision.reason)
