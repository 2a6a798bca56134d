# Copyright European Space Agency, 2013

"""
This module relates pixel coordinates of an image to coordinates in the
projected (planar) space of a map projection.

The relation is given by a 3x3 homogeneous matrix. Usually it only scales
and translates, but rotations and full projective transforms are supported
as well.
"""

from enum import Enum

import numpy as np

from georef.errors import ConfigurationError

class PixelInterpretation(Enum):
    """
    Whether a pixel index addresses the area covered by the pixel
    (its upper left corner is at the transform origin)
    or a point (the pixel center is at the transform origin).
    """
    PixelAsArea = 0
    PixelAsPoint = 1

PixelAsArea = PixelInterpretation.PixelAsArea
PixelAsPoint = PixelInterpretation.PixelAsPoint

def applyHomogeneous(matrix, xy):
    """
    Apply a 3x3 homogeneous matrix to a 2D coordinate.
    
    The result is undefined (inf/nan) if the coordinate maps to infinity.
    
    :param matrix: array of shape (3,3)
    :param xy: (x,y) pair
    :rtype: ndarray of shape (2,)
    """
    x, y = xy
    m = matrix
    denom = x*m[2,0] + y*m[2,1] + m[2,2]
    return np.array([(x*m[0,0] + y*m[0,1] + m[0,2]) / denom,
                     (x*m[1,0] + y*m[1,1] + m[1,2]) / denom])

def _readonly(a):
    a.flags.writeable = False
    return a

def shiftedTransform(transform):
    """
    Return the transform moved by half a pixel along each axis.
    """
    shifted = np.array(transform, dtype=float)
    shifted[0,2] += 0.5*transform[0,0]
    shifted[1,2] += 0.5*transform[1,1]
    return shifted

def _inverse(matrix, name):
    try:
        inv = np.linalg.inv(matrix)
    except np.linalg.LinAlgError as e:
        raise ConfigurationError('The ' + name + ' is not invertible: ' + str(matrix.tolist())) from e
    if not np.all(np.isfinite(inv)):
        raise ConfigurationError('The ' + name + ' is numerically singular: ' + str(matrix.tolist()))
    return inv

class AffineTransform(object):
    """
    Immutable pixel <-> projected point transform.
    
    Next to the given transform, a variant shifted by half a pixel is kept
    together with the inverses of both. Which pair is used for conversions
    depends on the pixel interpretation: the shifted pair for
    :attr:`PixelAsArea`, the given transform for :attr:`PixelAsPoint`.
    """
    def __init__(self, transform=None, pixelInterpretation=PixelAsArea):
        """
        :param transform: 3x3 matrix mapping pixel to projected coordinates,
                          identity if None
        :param PixelInterpretation pixelInterpretation:
        :raise ConfigurationError: if the transform is not an invertible 3x3 matrix
        """
        if transform is None:
            transform = np.identity(3)
        transform = np.array(transform, dtype=float)
        if transform.shape != (3,3):
            raise ConfigurationError('Transform must be a 3x3 matrix, got shape ' + str(transform.shape))
        if not np.all(np.isfinite(transform)):
            raise ConfigurationError('Transform contains non-finite values: ' + str(transform.tolist()))
        if not isinstance(pixelInterpretation, PixelInterpretation):
            raise ConfigurationError('Unknown pixel interpretation: ' + repr(pixelInterpretation))
        
        shifted = shiftedTransform(transform)
        inv = _inverse(transform, 'transform')
        invShifted = _inverse(shifted, 'shifted transform')
        
        self._transform = _readonly(transform)
        self._shifted = _readonly(shifted)
        self._inv = _readonly(inv)
        self._invShifted = _readonly(invShifted)
        self._pixelInterpretation = pixelInterpretation
        
    @property
    def transform(self):
        return self._transform
    
    @property
    def shiftedTransform(self):
        return self._shifted
    
    @property
    def inverseTransform(self):
        return self._inv
    
    @property
    def inverseShiftedTransform(self):
        return self._invShifted
    
    @property
    def pixelInterpretation(self):
        return self._pixelInterpretation
    
    @property
    def nativeTransform(self):
        """
        The transform used by :meth:`pixelToPoint`.
        """
        if self._pixelInterpretation == PixelAsArea:
            return self._shifted
        else:
            return self._transform
        
    @property
    def nativeInverseTransform(self):
        """
        The transform used by :meth:`pointToPixel`.
        """
        if self._pixelInterpretation == PixelAsArea:
            return self._invShifted
        else:
            return self._inv
        
    @property
    def xScale(self):
        """
        The x-scale coefficient of the transform. Positive if the projected x
        coordinate increases with the pixel column.
        """
        return self._transform[0,0]
    
    def withTransform(self, transform):
        return AffineTransform(transform, self._pixelInterpretation)
    
    def withPixelInterpretation(self, pixelInterpretation):
        return AffineTransform(self._transform, pixelInterpretation)
    
    def pixelToPoint(self, pixel):
        """
        :param pixel: (x,y) pixel coordinate
        :rtype: ndarray of shape (2,) in projected coordinates
        """
        return applyHomogeneous(self.nativeTransform, pixel)
    
    def pointToPixel(self, point):
        """
        :param point: (x,y) projected coordinate
        :rtype: ndarray of shape (2,) in pixel coordinates
        """
        return applyHomogeneous(self.nativeInverseTransform, point)
    
    def __eq__(self, obj):
        return isinstance(obj, AffineTransform) and \
           self._pixelInterpretation == obj._pixelInterpretation and \
           np.array_equal(self._transform, obj._transform)
           
    def __ne__(self, obj):
        return not self == obj
    
    def __repr__(self):
        return 'AffineTransform({0}, {1})'.format(self._transform.tolist(), self._pixelInterpretation)
