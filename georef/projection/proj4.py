# Copyright European Space Agency, 2013

"""
Helpers for PROJ token strings (space-separated ``+key=value`` tokens)
and builders for commonly used projections.
"""

GEOGRAPHIC_PROJ_NAMES = ('longlat', 'latlong', 'lonlat', 'latlon')

def tokenize(proj4Str):
    """
    :rtype: list of str
    """
    return proj4Str.split()

def _key(key):
    return key if key.startswith('+') else '+' + key

def hasToken(proj4Str, token):
    """
    Return whether the exact token (e.g. '+over' or '+south') is present.
    """
    return token in tokenize(proj4Str)

def findValue(proj4Str, key):
    """
    Return the raw value of the first ``+key=value`` token or None.
    
    :param str key: with or without leading '+'
    """
    prefix = _key(key) + '='
    for token in tokenize(proj4Str):
        if token.startswith(prefix):
            return token[len(prefix):]
    return None

def extractValue(proj4Str, key):
    """
    Return the numerical value of the first ``+key=value`` token,
    or None if the key is missing or its value is not a number.
    """
    value = findValue(proj4Str, key)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None

def projName(proj4Str):
    """
    Return the projection name, e.g. 'utm' for '+proj=utm +zone=11', or None.
    """
    return findValue(proj4Str, 'proj')

def isGeographic(proj4Str):
    """
    Return whether the string denotes unprojected longitude/latitude.
    """
    return projName(proj4Str) in GEOGRAPHIC_PROJ_NAMES

def isUTM(proj4Str):
    return projName(proj4Str) == 'utm'

def isOrthographic(proj4Str):
    return projName(proj4Str) == 'ortho'

def removeToken(proj4Str, token):
    """
    Remove every occurrence of the token and normalize the spacing.
    """
    return ' '.join(t for t in tokenize(proj4Str) if t != token)

def appendToken(proj4Str, token):
    return (proj4Str.strip() + ' ' + token).strip()

def joinProj4(*parts):
    """
    Join trimmed partial token strings into a single one.
    """
    return ' '.join(p.strip() for p in parts if p and p.strip())

def _num(value):
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)

def _build(name, **params):
    tokens = ['+proj=' + name]
    for key, value in params.items():
        tokens.append('+{0}={1}'.format(key, _num(value)))
    tokens.append('+units=m')
    return ' '.join(tokens)

def geographic():
    return '+proj=longlat'

def equirectangular(centerLatitude, centerLongitude, latitudeOfTrueScale=0, falseEasting=0, falseNorthing=0):
    return _build('eqc', lon_0=centerLongitude, lat_0=centerLatitude, lat_ts=latitudeOfTrueScale,
                  x_0=falseEasting, y_0=falseNorthing)

def sinusoidal(centerLongitude, falseEasting=0, falseNorthing=0):
    return _build('sinu', lon_0=centerLongitude, x_0=falseEasting, y_0=falseNorthing)

def mercator(centerLatitude, centerLongitude, latitudeOfTrueScale=0, falseEasting=0, falseNorthing=0):
    return _build('merc', lon_0=centerLongitude, lat_0=centerLatitude, lat_ts=latitudeOfTrueScale,
                  x_0=falseEasting, y_0=falseNorthing)

def transverseMercator(centerLatitude, centerLongitude, scale=1, falseEasting=0, falseNorthing=0):
    return _build('tmerc', lon_0=centerLongitude, lat_0=centerLatitude, k=scale,
                  x_0=falseEasting, y_0=falseNorthing)

def orthographic(centerLatitude, centerLongitude, falseEasting=0, falseNorthing=0):
    return _build('ortho', lon_0=centerLongitude, lat_0=centerLatitude,
                  x_0=falseEasting, y_0=falseNorthing)

def stereographic(centerLatitude, centerLongitude, scale=1, falseEasting=0, falseNorthing=0):
    return _build('stere', lon_0=centerLongitude, lat_0=centerLatitude, k=scale,
                  x_0=falseEasting, y_0=falseNorthing)

def obliqueStereographic(centerLatitude, centerLongitude, scale=1, falseEasting=0, falseNorthing=0):
    return _build('sterea', lon_0=centerLongitude, lat_0=centerLatitude, k=scale,
                  x_0=falseEasting, y_0=falseNorthing)

def gnomonic(centerLatitude, centerLongitude, scale=1, falseEasting=0, falseNorthing=0):
    return _build('gnom', lon_0=centerLongitude, lat_0=centerLatitude, k=scale,
                  x_0=falseEasting, y_0=falseNorthing)

def lambertAzimuthal(centerLatitude, centerLongitude, falseEasting=0, falseNorthing=0):
    return _build('laea', lon_0=centerLongitude, lat_0=centerLatitude,
                  x_0=falseEasting, y_0=falseNorthing)

def lambertConformal(stdParallel1, stdParallel2, centerLatitude, centerLongitude,
                     falseEasting=0, falseNorthing=0):
    return _build('lcc', lat_1=stdParallel1, lat_2=stdParallel2, lon_0=centerLongitude,
                  lat_0=centerLatitude, x_0=falseEasting, y_0=falseNorthing)

def utm(zone, north=True):
    """
    :param int zone: UTM zone in [1,60]
    :param bool north: northern or southern hemisphere
    """
    s = '+proj=utm +zone=' + str(int(zone))
    if not north:
        s += ' +south'
    return s + ' +units=m'
