# Copyright European Space Agency, 2013

import unittest

from numpy.testing import assert_almost_equal

from georef.errors import ConfigurationError
from georef.coordinates.datum import Datum
from georef.mapping.georeference import GeoReference
from georef.mapping.wkt import splitProj4, importWkt, exportWkt
from georef.projection import proj4

class Test(unittest.TestCase):
    
    def testSplitProj4(self):
        projTokens, datumTokens = splitProj4('+proj=tmerc +lat_0=0 +lon_0=9 +k=0 +x_0=500000 '
                                             '+ellps=GRS80 +towgs84=0,0,0 +units=m +no_defs +type=crs')
        self.assertEqual(projTokens, ['+proj=tmerc', '+lat_0=0', '+lon_0=9', '+x_0=500000', '+units=m'])
        self.assertEqual(datumTokens, ['+ellps=GRS80'])
        
    def testUTM(self):
        georef = GeoReference()
        georef.setUTM(11)
        wkt = georef.wkt
        self.assertIn('UTM', wkt)
        
        other = GeoReference()
        other.setWkt(wkt)
        self.assertEqual(other.proj4Str, '+proj=utm +zone=11 +units=m')
        self.assertTrue(other.isLonCenterAroundZero)
        assert_almost_equal(other.datum.semiMajorAxis, 6378137)
        assert_almost_equal(other.datum.inverseFlattening, 298.257223563, 6)
        
    def testSouthernUTM(self):
        datum, proj4Str = importWkt(exportWkt(Datum.wellKnown('WGS84'), proj4.utm(33, north=False)))
        self.assertEqual(proj4Str, '+proj=utm +zone=33 +south +units=m')
        
    def testGeographic(self):
        georef = GeoReference()
        other = GeoReference(projection='+proj=merc +units=m')
        other.setWkt(georef.wkt)
        self.assertFalse(other.isProjected)
        self.assertEqual(other.proj4Str.split()[0], '+proj=longlat')
        
    def testStereographic(self):
        georef = GeoReference()
        georef.setStereographic(90, 0)
        datum, proj4Str = importWkt(georef.wkt)
        self.assertEqual(proj4.projName(proj4Str), 'stere')
        self.assertEqual(proj4.extractValue(proj4Str, 'lat_0'), 90)
        self.assertEqual(proj4.extractValue(proj4Str, 'lon_0'), 0)
        self.assertNotIn('+over', proj4Str)
        
    def testSphere(self):
        wkt = exportWkt(Datum.wellKnown('D_MOON'), proj4.geographic())
        datum, proj4Str = importWkt(wkt)
        self.assertTrue(datum.isSphere)
        assert_almost_equal(datum.semiMajorAxis, 1737400)
        self.assertEqual(proj4Str, '+proj=longlat')
        
    def testInvalid(self):
        georef = GeoReference()
        with self.assertRaises(ConfigurationError):
            georef.setWkt('this is not WKT')
        self.assertFalse(georef.isProjected)
