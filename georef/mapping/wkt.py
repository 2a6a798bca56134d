# Copyright European Space Agency, 2013

"""
Conversion of datum and projection from and to OGC WKT,
using the CRS support of `pyproj <https://pyproj4.github.io>`_.
"""

import logging
import warnings

from pyproj import CRS
from pyproj.exceptions import CRSError

from georef.errors import ConfigurationError
from georef.coordinates.datum import Datum
from georef.projection import proj4

# tokens describing the map projection, everything else except datum tokens is dropped
_projectionPrefixes = ('+proj=', '+x_0=', '+y_0=', '+lon', '+lat', '+k=', '+ns', '+no_cut',
                       '+h=', '+W=', '+units=', '+zone=')
_datumPrefixes = ('+ellps=', '+datum=')

def splitProj4(proj4Str):
    """
    Split a CRS token string into projection tokens and datum tokens.
    
    :rtype: tuple (projection tokens, datum tokens) as lists
    """
    projTokens, datumTokens = [], []
    for token in proj4.tokenize(proj4Str):
        if token == '+k=0':
            logging.warning('Input contained an illegal scale_factor of zero. Ignored.')
        elif token.startswith(_projectionPrefixes):
            projTokens.append(token)
        elif token.startswith(_datumPrefixes):
            datumTokens.append(token)
    return projTokens, datumTokens

def _datumFromCRS(crs, datumTokens):
    ellipsoid = crs.ellipsoid
    if ellipsoid is None:
        raise ConfigurationError('WKT does not define an ellipsoid')
    datumName = crs.datum.name if crs.datum is not None else 'unknown'
    meridian = crs.prime_meridian
    meridianName = meridian.name if meridian is not None else 'Greenwich'
    meridianOffset = meridian.longitude if meridian is not None else 0.0
    proj4Str = ' '.join(datumTokens) or None
    return Datum(datumName, ellipsoid.name, meridianName,
                 ellipsoid.semi_major_metre, ellipsoid.semi_minor_metre,
                 meridianOffset, proj4Str)

def importWkt(wkt):
    """
    Read datum and projection from a WKT string.
    
    :rtype: tuple (Datum, projection token string)
    :raise ConfigurationError: if the WKT cannot be parsed
    """
    try:
        crs = CRS.from_wkt(wkt)
    except CRSError as e:
        raise ConfigurationError('Invalid WKT: ' + str(e)) from e
    
    with warnings.catch_warnings():
        # pyproj warns about information lost when converting to PROJ strings
        warnings.simplefilter('ignore', UserWarning)
        crsProj4 = crs.to_proj4()
    if crsProj4 is None:
        raise ConfigurationError('WKT cannot be expressed as PROJ string: ' + wkt)
    
    projTokens, datumTokens = splitProj4(crsProj4)
    
    # geographic if no projection related information is there
    if not projTokens or proj4.isGeographic(' '.join(projTokens)):
        proj4Str = proj4.geographic()
    else:
        proj4Str = ' '.join(projTokens)
    
    utmZone = crs.utm_zone
    if utmZone:
        proj4Str = proj4.utm(int(utmZone[:-1]), north=utmZone[-1].upper() == 'N')
        
    datum = _datumFromCRS(crs, datumTokens)
    return datum, proj4Str

def exportWkt(datum, proj4Str):
    """
    Return the WKT of the given datum and projection.
    
    :param Datum datum:
    :param str proj4Str: projection tokens without datum tokens
    :raise ConfigurationError: if the combination cannot be expressed as CRS
    """
    proj4Str = proj4.removeToken(proj4Str, '+over')
    if datum.isSphere:
        # flattening of zero instead of infinite inverse flattening
        datumStr = '+a={0!r} +b={0!r}'.format(datum.semiMajorAxis)
    else:
        datumStr = datum.proj4Str
    crsStr = proj4.joinProj4(proj4Str, datumStr, '+no_defs +type=crs')
    try:
        crs = CRS.from_proj4(crsStr)
    except CRSError as e:
        raise ConfigurationError('Cannot express as CRS: ' + crsStr + '\n\tError was: ' + str(e)) from e
    return crs.to_wkt()
