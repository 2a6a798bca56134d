# Copyright European Space Agency, 2013

import unittest

from georef.errors import UnsupportedOperationError
from georef.mapping.georeference import GeoReference
from georef.resource import GeoReferenceResource, MemoryResource, readGeoReference, writeGeoReference

class PlainResource(GeoReferenceResource):
    """
    A resource format without georeferencing support.
    """
    def canReadGeoReference(self):
        return False
    
    def canWriteGeoReference(self):
        return False
    
    def _readGeoReference(self):
        raise AssertionError('must not be called')
    
    def _writeGeoReference(self, georef):
        raise AssertionError('must not be called')

class Test(unittest.TestCase):
    
    def testMemory(self):
        resource = MemoryResource()
        self.assertIsNone(readGeoReference(resource))
        
        georef = GeoReference()
        georef.setUTM(11)
        writeGeoReference(resource, georef)
        georef.setGeographic()
        
        stored = readGeoReference(resource)
        self.assertEqual(stored.proj4Str, '+proj=utm +zone=11 +units=m')
        stored.setGeographic()
        self.assertEqual(readGeoReference(resource).proj4Str, '+proj=utm +zone=11 +units=m')
        
    def testReadOnly(self):
        georef = GeoReference()
        resource = MemoryResource(georef, header={'AREA_OR_POINT': 'Area'}, readOnly=True)
        self.assertTrue(resource.canReadGeoReference())
        self.assertFalse(resource.canWriteGeoReference())
        self.assertIsNotNone(readGeoReference(resource))
        self.assertEqual(resource.readHeaderString('AREA_OR_POINT'), 'Area')
        self.assertIsNone(resource.readHeaderString('missing'))
        with self.assertRaises(UnsupportedOperationError):
            writeGeoReference(resource, georef)
        with self.assertRaises(UnsupportedOperationError):
            resource.writeHeaderString('AREA_OR_POINT', 'Point')
            
    def testHeader(self):
        resource = MemoryResource()
        resource.writeHeaderString('scale', 2.5)
        self.assertEqual(resource.readHeaderString('scale'), '2.5')
        
    def testUnsupported(self):
        resource = PlainResource()
        self.assertIsNone(readGeoReference(resource))
        with self.assertRaises(UnsupportedOperationError):
            writeGeoReference(resource, GeoReference())
        with self.assertRaises(UnsupportedOperationError):
            resource.readHeaderString('any')
        with self.assertRaises(UnsupportedOperationError):
            resource.writeHeaderString('any', 'value')
