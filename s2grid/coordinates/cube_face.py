from ..config import np
from ..errors import InvalidArgumentError
from ..s2_definitions import NUM_FACES
from .projection import si_ti_to_st, st_to_uv

# (axis of the face normal, its sign, axis and sign of u, axis and sign of v)
axis_info = {0: (0, 1.0, 1, 1.0, 2, 1.0),
             1: (1, 1.0, 0, -1.0, 2, 1.0),
             2: (2, 1.0, 0, -1.0, 1, -1.0),
             3: (0, -1.0, 2, -1.0, 1, -1.0),
             4: (1, -1.0, 2, -1.0, 0, 1.0),
             5: (2, -1.0, 1, 1.0, 0, 1.0)}


def face_uv_to_xyz(face, u, v):
  """
  Map face-local (u, v) to a point on the surface of the cube [-1, 1]^3.

  Parameters
  ----------
  face: `int`
      Cube face, 0..5.
  u, v: `float` or `Array[..., Float]`
      Face coordinates in [-1, 1].

  Returns
  -------
  `Array[..., xyz, Float]`
      Unnormalized direction; one coordinate is exactly +-1.

  Notes
  -----
  Face by face:
  ```
  0: ( 1,  u,  v)     3: (-1, -v, -u)
  1: (-u,  1,  v)     4: ( v, -1, -u)
  2: (-u, -v,  1)     5: ( v,  u, -1)
  ```
  """
  if face not in axis_info:
    raise InvalidArgumentError(f"face must be in the range [0-{NUM_FACES - 1}], got {face}")
  normal_axis, normal_sign, u_axis, u_sign, v_axis, v_sign = axis_info[face]
  u = np.asarray(u, dtype=np.float64)
  v = np.asarray(v, dtype=np.float64)
  xyz = np.zeros(shape=(*np.broadcast(u, v).shape, 3))
  xyz[..., normal_axis] = normal_sign
  xyz[..., u_axis] = u_sign * u
  xyz[..., v_axis] = v_sign * v
  return xyz


def face_si_ti_to_xyz(face, si, ti):
  u = st_to_uv(si_ti_to_st(si))
  v = st_to_uv(si_ti_to_st(ti))
  return face_uv_to_xyz(face, u, v)
