"""
Vectorized source-over blending on ``uint8`` RGBA arrays.

The arithmetic mirrors :py:func:`rasm.api.pixel.compose` exactly: integer
ceil division by 255, straight alpha, a transparent source leaves the
destination as is and a transparent destination takes the source verbatim.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def _ceil_div255(value: np.ndarray) -> np.ndarray:
    return (value + 254) // 255


def compose(dst: np.ndarray, src: np.ndarray) -> np.ndarray:
    """
    Composite ``src`` over ``dst`` and return a new ``uint8`` array.

    Both arguments are ``(..., 4)`` arrays; ``src`` may also be a single
    pixel that broadcasts over ``dst``.
    """
    src = np.broadcast_to(np.asarray(src, dtype=np.uint8), dst.shape)
    Cb = dst.astype(np.uint32)
    Cs = src.astype(np.uint32)
    alpha = Cs[..., 3:4]
    inverse = 255 - alpha

    result = np.empty(dst.shape, dtype=np.uint8)
    result[..., :3] = _ceil_div255(alpha * Cs[..., :3] + inverse * Cb[..., :3])
    result[..., 3:4] = _ceil_div255(alpha * 255 + inverse * Cb[..., 3:4])

    transparent = (dst[..., 3] == 0) & (src[..., 3] != 0)
    result[transparent] = src[transparent]
    return result


def compose_into(dst: np.ndarray, src: np.ndarray) -> None:
    """Composite ``src`` over ``dst`` in place."""
    dst[...] = compose(dst, src)
