# Copyright European Space Agency, 2013

"""
Longitudes can be represented in two equivalent 360 degree windows,
[-180,180) and [0,360). This module wraps longitudes into either window.
"""

from astropy.coordinates import Angle
import astropy.units as u

def normalizeLongitude(lon, centerLonZero=True):
    """
    Wrap a longitude into the window [-180,180) if `centerLonZero` is True,
    otherwise into [0,360).
    
    :param lon: longitude(s) in degrees, scalar or array
    :rtype: same shape as `lon`, in degrees
    """
    wrapAngle = 180 if centerLonZero else 360
    return Angle(lon * u.deg).wrap_at(wrapAngle * u.deg).degree

def degreeDiff(lon1, lon2):
    """
    Return the length in degrees of the shortest arc between
    two longitudes on the 360 degree circle, in [0,180].
    """
    return abs(normalizeLongitude(lon1 - lon2, centerLonZero=True))

def windowName(centerLonZero):
    return '[-180, 180]' if centerLonZero else '[0, 360]'
