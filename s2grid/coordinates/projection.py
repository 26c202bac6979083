from ..config import np
from ..s2_definitions import MAX_SI_TI


def si_ti_to_st(si):
  """
  Rescale fixed-point (si, ti) coordinates to [0, 1].

  Parameters
  ----------
  si: `int` or `Array[..., Int]`
      Coordinate in [0, MAX_SI_TI].

  Returns
  -------
  float or `Array[..., Float]`
  """
  return (1.0 / MAX_SI_TI) * si


def st_to_uv(s):
  """
  Quadratic projection from (s, t) in [0, 1] to (u, v) in [-1, 1].

  Parameters
  ----------
  s: `float` or `Array[..., Float]`
      Face coordinate in [0, 1].

  Returns
  -------
  float or `Array[..., Float]`
      `(4 s^2 - 1) / 3` for `s >= 0.5`, otherwise
      `(1 - 4 (1 - s)^2) / 3`.

  Notes
  -----
  The warp roughly equalizes cell areas across a face, which a
  linear map to the cube would badly distort near the corners.
  Both branches are evaluated for array input.
  """
  if np.ndim(s) == 0:
    if s >= 0.5:
      return (1.0 / 3.0) * (4.0 * s * s - 1.0)
    return (1.0 / 3.0) * (1.0 - 4.0 * (1.0 - s) * (1.0 - s))
  s = np.asarray(s, dtype=np.float64)
  return np.where(s >= 0.5,
                  (1.0 / 3.0) * (4.0 * s * s - 1.0),
                  (1.0 / 3.0) * (1.0 - 4.0 * (1.0 - s) * (1.0 - s)))
