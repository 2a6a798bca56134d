# Copyright European Space Agency, 2013

import unittest

import numpy as np
from numpy.testing import assert_array_almost_equal, assert_array_equal

from georef.errors import ConfigurationError
from georef.coordinates.affine import AffineTransform, PixelAsArea, PixelAsPoint, shiftedTransform

class Test(unittest.TestCase):
    
    # scale, rotation and a slightly projective bottom row
    transform = np.array([[30.0,   2.0, 500000.0],
                          [-1.5, -30.0, 4100000.0],
                          [1e-7,  2e-7,       1.0]])
    
    def testIdentity(self):
        area = AffineTransform(pixelInterpretation=PixelAsArea)
        assert_array_equal(area.pixelToPoint((0,0)), [0.5, 0.5])
        assert_array_equal(area.pointToPixel((0.5,0.5)), [0, 0])
        
        point = AffineTransform(pixelInterpretation=PixelAsPoint)
        assert_array_equal(point.pixelToPoint((0,0)), [0, 0])
        assert_array_equal(point.pixelToPoint((3,7)), [3, 7])
        
    def testShiftedTransform(self):
        t = np.array([[10.0, 0, 100], [0, -5.0, 200], [0, 0, 1]])
        shifted = shiftedTransform(t)
        assert_array_equal(shifted, [[10, 0, 105], [0, -5, 197.5], [0, 0, 1]])
        # the input is not modified
        assert_array_equal(t[:,2], [100, 200, 1])
        
        affine = AffineTransform(t)
        assert_array_equal(affine.shiftedTransform, shifted)
        assert_array_almost_equal(affine.inverseShiftedTransform.dot(shifted), np.identity(3))
        assert_array_almost_equal(affine.inverseTransform.dot(t), np.identity(3))
        
    def testRoundTrip(self):
        pixels = [(0,0), (10.5,3), (-20,1000), (4096,4096)]
        for interp in [PixelAsArea, PixelAsPoint]:
            affine = AffineTransform(self.transform, interp)
            for pixel in pixels:
                point = affine.pixelToPoint(pixel)
                assert_array_almost_equal(affine.pointToPixel(point), pixel, 3)
                
    def testProjective(self):
        t = np.array([[1.0, 0, 0], [0, 1.0, 0], [0.5, 0, 1.0]])
        affine = AffineTransform(t, PixelAsPoint)
        # denominator 0.5*2 + 1 = 2
        assert_array_almost_equal(affine.pixelToPoint((2,4)), [1, 2])
        
    def testNativeTransform(self):
        area = AffineTransform(self.transform, PixelAsArea)
        point = AffineTransform(self.transform, PixelAsPoint)
        assert_array_equal(area.nativeTransform, area.shiftedTransform)
        assert_array_equal(area.nativeInverseTransform, area.inverseShiftedTransform)
        assert_array_equal(point.nativeTransform, point.transform)
        assert_array_equal(point.nativeInverseTransform, point.inverseTransform)
        
    def testSingular(self):
        with self.assertRaises(ConfigurationError):
            AffineTransform(np.zeros((3,3)))
        with self.assertRaises(ConfigurationError):
            AffineTransform([[1, 2, 0], [2, 4, 0], [0, 0, 1]])
        with self.assertRaises(ConfigurationError):
            AffineTransform(np.identity(2))
        with self.assertRaises(ConfigurationError):
            AffineTransform([[np.nan, 0, 0], [0, 1, 0], [0, 0, 1]])
            
    def testImmutable(self):
        affine = AffineTransform(self.transform)
        with self.assertRaises(ValueError):
            affine.transform[0,0] = 1
        
        # a new object is created instead
        other = affine.withTransform(np.identity(3))
        assert_array_equal(affine.transform, self.transform)
        assert_array_equal(other.transform, np.identity(3))
        self.assertEqual(other.pixelInterpretation, affine.pixelInterpretation)
        self.assertNotEqual(other, affine)
        self.assertEqual(affine, AffineTransform(self.transform))
