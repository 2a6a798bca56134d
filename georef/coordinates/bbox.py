# Copyright European Space Agency, 2013

"""
Axis-aligned bounding boxes in pixel, projected or longitude/latitude space.
"""

import math

import numpy as np

class BBox(object):
    """
    Axis-aligned 2D bounding box which can be grown point by point.
    
    A box created without arguments is empty and contains nothing.
    For pixel boxes, `max` is exclusive, i.e. a box (0,0,10,10) covers
    the pixels 0 to 9 in each direction.
    """
    def __init__(self, minX=None, minY=None, maxX=None, maxY=None):
        """
        :param number minX: None for an empty box
        """
        if minX is None:
            self._min = np.array([np.inf, np.inf])
            self._max = np.array([-np.inf, -np.inf])
        else:
            assert minX <= maxX and minY <= maxY, 'Invalid box: ' + str((minX, minY, maxX, maxY))
            self._min = np.array([minX, minY], dtype=float)
            self._max = np.array([maxX, maxY], dtype=float)
    
    @staticmethod
    def fromPoints(points):
        """
        Return the smallest box containing all given points.
        
        :param points: iterable of (x,y) pairs
        :rtype: BBox
        """
        bb = BBox()
        for point in points:
            bb.grow(point)
        return bb
        
    @property
    def min(self):
        return self._min.copy()
    
    @property
    def max(self):
        return self._max.copy()
    
    @property
    def minX(self):
        return self._min[0]
    
    @property
    def minY(self):
        return self._min[1]
    
    @property
    def maxX(self):
        return self._max[0]
    
    @property
    def maxY(self):
        return self._max[1]
    
    @property
    def width(self):
        return 0.0 if self.isEmpty else self._max[0] - self._min[0]
    
    @property
    def height(self):
        return 0.0 if self.isEmpty else self._max[1] - self._min[1]
    
    @property
    def isEmpty(self):
        return bool(np.any(self._min > self._max))
    
    @property
    def corners(self):
        """
        The four corners in the order min, (max x, min y), max, (min x, max y).
        
        :rtype: ndarray of shape (4,2)
        """
        return np.array([[self.minX, self.minY], [self.maxX, self.minY],
                         [self.maxX, self.maxY], [self.minX, self.maxY]])
        
    def grow(self, point):
        """
        Grow the box in-place such that it contains the given point.
        """
        point = np.asarray(point, dtype=float)
        np.minimum(self._min, point, out=self._min)
        np.maximum(self._max, point, out=self._max)
        
    def growBBox(self, bbox):
        """
        Grow the box in-place such that it contains the given box.
        """
        if bbox.isEmpty:
            return
        self.grow(bbox._min)
        self.grow(bbox._max)
        
    def contains(self, point):
        x, y = point
        return bool(self.minX <= x <= self.maxX and self.minY <= y <= self.maxY)
    
    def __eq__(self, obj):
        if not isinstance(obj, BBox):
            return False
        if self.isEmpty or obj.isEmpty:
            return self.isEmpty and obj.isEmpty
        return np.array_equal(self._min, obj._min) and np.array_equal(self._max, obj._max)
    
    def __ne__(self, obj):
        return not self == obj
    
    def __repr__(self):
        if self.isEmpty:
            return 'BBox()'
        return 'BBox(minX={0}, minY={1}, maxX={2}, maxY={3})'.format(
                       self.minX, self.minY, self.maxX, self.maxY)

def growToInt(bbox):
    """
    Return the smallest box with integer bounds that contains the given box.
    
    :rtype: BBox
    """
    if bbox.isEmpty:
        return BBox()
    return BBox(math.floor(bbox.minX), math.floor(bbox.minY),
                math.ceil(bbox.maxX), math.ceil(bbox.maxY))
