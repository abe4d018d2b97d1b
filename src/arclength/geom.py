## minimal vector and point operations for arclength
## Copyright (c) 2020 Richard DeVaul

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""vector and point helpers consumed by the curve types

====================
OVERVIEW
====================

Points and vectors are Python lists of four numbers, ``[x,y,z,w]``.
Points lie in the ``w=1`` hyperplane; the curve evaluators in this
package return points, and derivatives are returned as vectors with
``w=0``.  The operations below treat everything as 3 vectors and
ignore ``w`` except where noted.

A bounding box is a list of two points spanning the "lower bottom
left" to "upper top right" of a figure, *e.g.* ``[[xmin,ymin,zmin,1],
[xmax,ymax,zmax,1]]``.

"""

from math import sqrt

## constants
epsilon = 0.000005


def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def close(a, b):
    """ are two scalars the same within epsilon
    """
    return abs(a-b) < epsilon


def vect(a=False, b=False, c=False, d=False):
    """Make a homogeneous coordinates 4 vector from scalars or a
    sequence; unspecified components default to ``[0,0,0,1]``
    """
    r = [0, 0, 0, 1]
    if isgoodnum(a):
        r[0] = a
        if isgoodnum(b):
            r[1] = b
            if isgoodnum(c):
                r[2] = c
                if isgoodnum(d):
                    r[3] = d
    elif isinstance(a, (tuple, list)):
        for i in range(min(4, len(a))):
            if isgoodnum(a[i]):
                r[i] = a[i]
    return r


def isvect(x):
    return isinstance(x, list) and len(x) == 4 and all(isgoodnum(c) for c in x)


def ispoint(x):
    return isvect(x) and x[3] > 0


def point(x=False, y=False, z=False):
    """Point creation from a sequence or from scalars.  Sequences of
    two or three numbers are lifted into the ``w=1`` plane.
    """
    if isinstance(x, (tuple, list)):
        if len(x) < 2:
            raise ValueError('point needs at least two coordinates: {}'.format(x))
        r = vect(x)
        if len(x) == 4:
            if r[3] <= 0:
                raise ValueError('bad point, w must be positive: {}'.format(x))
            return [r[0]/r[3], r[1]/r[3], r[2]/r[3], 1.0]
        r[3] = 1.0
        return r
    return vect(x, y, z, 1.0)


def vclose(a, b):
    """ are two vectors the same within epsilon"""
    return close(mag(sub(a, b)), 0)


## R^3 -> R^3 functions: ignore w component
## ------------------------------------------------
def add(a, b):
    """ 3 vector, `a + b`"""
    return [a[0]+b[0], a[1]+b[1], a[2]+b[2], 1.0]


def sub(a, b):
    """ 3 vector, `a - b`"""
    return [a[0]-b[0], a[1]-b[1], a[2]-b[2], 1.0]


def scale3(a, c):
    """ 3 vector, vector ``a`` times scalar ``c``"""
    return [a[0]*c, a[1]*c, a[2]*c, 1.0]


def cross(a, b):
    """ 3 vector cross product ``a x b``"""
    return [a[1]*b[2] - a[2]*b[1],
            a[2]*b[0] - a[0]*b[2],
            a[0]*b[1] - a[1]*b[0],
            1.0]


def lerp(a, b, u):
    """ linear interpolation between points ``a`` and ``b``, with
    ``u=0`` giving ``a`` and ``u=1`` giving ``b``"""
    return [a[0] + (b[0]-a[0])*u,
            a[1] + (b[1]-a[1])*u,
            a[2] + (b[2]-a[2])*u,
            1.0]


def direction(a):
    """ strip a 3 vector down to a free vector, i.e. ``w=0``"""
    return [a[0], a[1], a[2], 0.0]


## R^3 -> R functions -- ignore w component
## ----------------------------------------
def dot(a, b):
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]


def mag(a):
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])


def dist(a, b):
    """ euclidean distance between two points ``a`` and ``b``"""
    return mag(sub(a, b))


def unit(a):
    """Return the unit direction (``w=0``) of vector ``a``, or ``None``
    if ``a`` is exactly the zero vector and so has no direction.
    """
    m = mag(a)
    if m == 0.0:
        return None
    return [a[0]/m, a[1]/m, a[2]/m, 0.0]


## bounding boxes
## --------------
def pointlistbbox(pts):
    """Return the bounding box of a non-empty list of points"""
    if not pts:
        raise ValueError('empty point list passed to pointlistbbox()')
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    zs = [p[2] for p in pts]
    return [[min(xs), min(ys), min(zs), 1.0],
            [max(xs), max(ys), max(zs), 1.0]]


def isinsidebbox(bbox, p):
    """ does point ``p`` lie inside 3D bounding box ``bbox``?"""
    return bbox[0][0] - epsilon <= p[0] <= bbox[1][0] + epsilon and \
        bbox[0][1] - epsilon <= p[1] <= bbox[1][1] + epsilon and \
        bbox[0][2] - epsilon <= p[2] <= bbox[1][2] + epsilon


def vstr(a):
    """ format vectors and lists of vectors compactly, leaving out
    ``z`` when it is zero and ``w`` when it is one.  Falls back to
    ``str()`` for anything else.
    """
    if isvect(a):
        if abs(a[3]-1.0) > epsilon:
            return "[{}, {}, {}, {}]".format(a[0], a[1], a[2], a[3])
        elif abs(a[2]) > epsilon:
            return "[{}, {}, {}]".format(a[0], a[1], a[2])
        else:
            return "[{}, {}]".format(a[0], a[1])
    elif isinstance(a, list) and a and all(isvect(x) for x in a):
        return "[" + ", ".join(vstr(x) for x in a) + "]"
    return str(a)
