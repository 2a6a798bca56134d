# Copyright European Space Agency, 2013

"""
Reprojection of axis-aligned bounding boxes.

Between pixel and projected space the transform is linear and the
transformed corners give the exact result.

Whenever longitude/latitude space is involved, the mapping is nonlinear
and may be undefined for parts of the box (beyond the horizon of an
orthographic projection, at a pole, ...). The box is then approximated by
sampling its four edges and its two diagonals. The diagonals catch
singularities strictly inside the box, like a pole, which would be missed
by sampling the edges only. Samples that cannot be transformed are skipped.

The result is an approximation: features of the mapping that are smaller
than the sampling interval may be missed.
"""

import logging

import numpy as np
from skimage.draw import line

from georef.coordinates.bbox import BBox

# number of samples per box edge for continuous (non-pixel) boxes
DEFAULT_NSAMPLES = 100

def transformCorners(bbox, fn):
    """
    Return the box spanned by the four transformed corners of `bbox`.
    Exact for linear mappings.
    
    :param fn: callable (x,y) -> (x',y')
    :rtype: BBox
    """
    if bbox.isEmpty:
        return BBox()
    return BBox.fromPoints(fn(corner) for corner in bbox.corners)

def _growAll(points, fn, finish=None):
    """
    Return the box of all successfully transformed points
    and the number of points that could not be transformed.
    
    :param finish: callable applied once to the (n,2) array of all
                   transformed points, e.g. to wrap longitudes
    """
    transformed = []
    failed = 0
    for point in points:
        p = fn(point)
        if p is None:
            failed += 1
        else:
            transformed.append(p)
    if not transformed:
        return BBox(), failed
    transformed = np.asarray(transformed, dtype=float)
    if finish is not None:
        transformed = finish(transformed)
    mins = transformed.min(axis=0)
    maxs = transformed.max(axis=0)
    return BBox(mins[0], mins[1], maxs[0], maxs[1]), failed

def diagonalLines(x0, y0, x1, y1):
    """
    Return the integer points on both diagonals of the box with the
    corners (x0,y0) and (x1,y1), corners included.
    
    :rtype: ndarray of shape (n,2)
    """
    xs1, ys1 = line(int(x0), int(y0), int(x1), int(y1))
    xs2, ys2 = line(int(x1), int(y0), int(x0), int(y1))
    return np.concatenate((np.column_stack((xs1, ys1)), np.column_stack((xs2, ys2))))

def pixelSamples(pixelBBox):
    """
    Return all pixels on the edges of the (half-open) pixel box and on the
    diagonals from its min to its max corner.
    
    :type pixelBBox: BBox with integer bounds
    :rtype: ndarray of shape (n,2)
    """
    x0, y0 = int(pixelBBox.minX), int(pixelBBox.minY)
    x1, y1 = int(pixelBBox.maxX), int(pixelBBox.maxY)
    xs = np.arange(x0, x1)
    ys = np.arange(y0+1, y1-1)
    perimeter = [np.column_stack((xs, np.full_like(xs, y0))),
                 np.column_stack((xs, np.full_like(xs, y1-1))),
                 np.column_stack((np.full_like(ys, x0), ys)),
                 np.column_stack((np.full_like(ys, x1-1), ys))]
    return np.concatenate(perimeter + [diagonalLines(x0, y0, x1, y1)])

def continuousSamples(bbox, nsamples=DEFAULT_NSAMPLES):
    """
    Return `nsamples` evenly spaced points on each edge of the box, starting
    at the min corner, and the points of both diagonals walked on a
    nsamples x nsamples grid spanning the box.
    
    :rtype: ndarray of shape (n,2)
    """
    if nsamples < 1:
        raise ValueError('nsamples must be positive, got ' + str(nsamples))
    step = np.array([bbox.width / nsamples, bbox.height / nsamples])
    i = np.arange(nsamples)
    xs = bbox.minX + i*step[0]
    ys = bbox.minY + i*step[1]
    perimeter = [np.column_stack((xs, np.full_like(xs, bbox.minY))),
                 np.column_stack((xs, np.full_like(xs, bbox.maxY))),
                 np.column_stack((np.full_like(ys, bbox.minX), ys)),
                 np.column_stack((np.full_like(ys, bbox.maxX), ys))]
    diagonals = diagonalLines(0, 0, nsamples, nsamples) * step + bbox.min
    return np.concatenate(perimeter + [diagonals])

def samplePixelBBox(pixelBBox, fn, finish=None):
    """
    Approximate the image of a pixel box by transforming every pixel on its
    edges and diagonals.
    
    :param fn: callable pixel -> transformed point, or None if the pixel
               cannot be transformed
    :param finish: see :func:`sampleBBox`
    :rtype: BBox, empty if no sample could be transformed
    """
    if pixelBBox.isEmpty or pixelBBox.width == 0 or pixelBBox.height == 0:
        logging.warning('Empty pixel box ' + repr(pixelBBox) + ', returning empty box')
        return BBox()
    result, failed = _growAll(pixelSamples(pixelBBox), fn, finish)
    if failed:
        logging.debug(str(failed) + ' samples could not be transformed and were skipped')
    return result

def sampleBBox(bbox, fn, nsamples=DEFAULT_NSAMPLES, prepare=None, finish=None):
    """
    Approximate the image of a continuous box by transforming `nsamples` points
    per edge and the points along both diagonals.
    
    :param fn: callable point -> transformed point, or None if the point
               cannot be transformed
    :param prepare: callable applied once to the (n,2) array of samples
                    before they are transformed
    :param finish: callable applied once to the (n,2) array of transformed
                   samples before the box is computed
    :rtype: BBox, empty if no sample could be transformed
    """
    if bbox.isEmpty:
        return BBox()
    samples = continuousSamples(bbox, nsamples)
    if prepare is not None:
        samples = prepare(samples)
    result, failed = _growAll(samples, fn, finish)
    if failed:
        logging.debug(str(failed) + ' samples could not be transformed and were skipped')
    return result
