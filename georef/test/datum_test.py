# Copyright European Space Agency, 2013

import math
import unittest

from numpy.testing import assert_almost_equal

from georef.errors import ConfigurationError
from georef.coordinates.datum import Datum

class Test(unittest.TestCase):
    
    def testWGS84(self):
        datum = Datum.wellKnown('WGS84')
        self.assertEqual(datum.name, 'WGS_1984')
        assert_almost_equal(datum.semiMajorAxis, 6378137)
        assert_almost_equal(datum.semiMinorAxis, 6356752.314245, 5)
        assert_almost_equal(datum.inverseFlattening, 298.257223563, 6)
        self.assertIn('+datum=WGS84', datum.proj4Str)
        self.assertEqual(Datum.wellKnown('wgs_1984'), datum)
        
    def testSphere(self):
        moon = Datum.wellKnown('D_MOON')
        self.assertTrue(moon.isSphere)
        self.assertEqual(moon.inverseFlattening, math.inf)
        self.assertEqual(moon.proj4Str, '+a=1737400 +b=1737400')
        
    def testUnknown(self):
        with self.assertRaises(ConfigurationError):
            Datum.wellKnown('D_PLUTO')
            
    def testDerivedProj4(self):
        datum = Datum('custom', 'custom', 'Greenwich', 1000.0, 900.0)
        self.assertEqual(datum.proj4Str, '+a=1000.0 +b=900.0')
        assert_almost_equal(datum.inverseFlattening, 10)
        
    def testInvalidAxes(self):
        with self.assertRaises(ConfigurationError):
            Datum('custom', 'custom', 'Greenwich', 0, 900.0)
            
    def testReplace(self):
        datum = Datum.wellKnown('D_MARS')
        renamed = datum.replace(name='Mars 2000')
        self.assertEqual(renamed.name, 'Mars 2000')
        self.assertEqual(renamed.semiMajorAxis, datum.semiMajorAxis)
        self.assertEqual(datum.name, 'D_MARS')
        self.assertNotEqual(renamed, datum)
