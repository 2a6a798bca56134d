# Copyright European Space Agency, 2013

"""
Exceptions shared by all georef packages.
"""

class ConfigurationError(Exception):
    """
    Invalid georeference configuration, e.g. a singular transform or a
    projection string the projection library cannot initialize from.
    """
    pass

class ProjectionMathError(Exception):
    """
    The projection library could not evaluate a single coordinate.
    """
    pass

class UnsupportedOperationError(Exception):
    """
    The operation is not supported by a resource, e.g. writing
    georeferencing information into a read-only format.
    """
    pass
