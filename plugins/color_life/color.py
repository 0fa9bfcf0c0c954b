"""
Color Vector Operations

A color is a float64 array of shape (3,) holding r, g, b, conventionally in
[0, 1] but never clamped on construction. Every function here also accepts a
whole grid of shape (H, W, 3) and works along the last axis, which is what
lets the engines evaluate a generation without a Python loop per cell.
"""

import numpy as np


BLACK = np.zeros(3)
WHITE = np.ones(3)
RED = np.array([1.0, 0.0, 0.0])
GREEN = np.array([0.0, 1.0, 0.0])
BLUE = np.array([0.0, 0.0, 1.0])


def length(c):
    """Euclidean norm over the channel axis."""
    c = np.asarray(c, dtype=np.float64)
    return np.sqrt((c * c).sum(axis=-1))


def normalize(c):
    """Unit vector in the direction of c. The zero color normalizes to itself."""
    c = np.asarray(c, dtype=np.float64)
    n = length(c)[..., None]
    return np.divide(c, n, out=np.zeros_like(c), where=n != 0)


def dot(a, b):
    """Channel-wise product sum (cosine similarity for unit vectors)."""
    return (np.asarray(a, dtype=np.float64) * np.asarray(b, dtype=np.float64)).sum(axis=-1)


def clamp(c, lo, hi):
    """Per-channel clamp to [lo, hi]. Returns a new array."""
    return np.clip(np.asarray(c, dtype=np.float64), lo, hi)


def threshold(c, t):
    """Keep c where its length is at least t, zero it elsewhere."""
    c = np.asarray(c, dtype=np.float64)
    keep = (length(c) >= t)[..., None]
    return np.where(keep, c, 0.0)


def safe_divide(c, s):
    """Divide c by scalar(s) s; a zero divisor yields the zero color."""
    c = np.asarray(c, dtype=np.float64)
    s = np.asarray(s, dtype=np.float64)[..., None]
    return np.divide(c, s, out=np.zeros_like(c), where=s != 0)


def random_color(rng=None, shape=()):
    """Three independent uniform samples in [0, 1).

    With shape, returns an array of shape + (3,) random colors.
    """
    rng = rng if rng is not None else np.random.default_rng()
    return rng.random(tuple(shape) + (3,))


def similarity(color, neighbor):
    """Cosine similarity between a cell's color and a neighbor's color.

    A zero-length cell color has no direction. In that case any neighbor
    with nonzero length counts as fully similar (1.0) and a zero neighbor
    as dissimilar (0.0), so a black cell sees its lit neighbors the way a
    dead cell counts live ones in classic Life.
    """
    color = np.asarray(color, dtype=np.float64)
    neighbor = np.asarray(neighbor, dtype=np.float64)
    sim = dot(normalize(color), normalize(neighbor))
    lit = (length(neighbor) > 0).astype(np.float64)
    return np.where(length(color) == 0, lit, sim)
