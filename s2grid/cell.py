from . import config
from .config import np, supports_uint64
from .errors import UnsupportedEnvironmentError, InvalidArgumentError
from .cell_id import (TOKEN_PATTERN, check_cell_id, cell_id_from_token, token_from_cell_id,
                      get_level, child_cell_id, parent_cell_id)
from .face_ij import get_face_si_ti
from .s2_definitions import MAX_LEVEL, POS_BITS, NUM_FACES
from .s2_types import CellIdArray, XYZArray
from .coordinates.cube_face import face_si_ti_to_xyz
from .coordinates.ellipsoid import (UNIT_SPHERE, get_ellipsoid, normalize,
                                    cartesian_to_cartographic, cartographic_to_cartesian)


def sphere_to_ellipsoid(xyz, ellipsoid):
  """
  Reinterpret unit-sphere positions as geodetic positions on `ellipsoid`.

  Parameters
  ----------
  xyz: `Array[..., xyz, Float]`
      Points on the unit sphere.
  ellipsoid: `Ellipsoid` or `str`

  Returns
  -------
  `Array[..., xyz, Float]`
      Points on the surface of `ellipsoid` with the same geodetic
      longitude and latitude.
  """
  cartographic = cartesian_to_cartographic(xyz, UNIT_SPHERE)
  return cartographic_to_cartesian(cartographic, get_ellipsoid(ellipsoid))


class Cell:
  """
  A cell of the hierarchical cube-sphere grid.

  Parameters
  ----------
  cell_id: `int`
      A valid 64-bit cell id.

  Raises
  ------
  UnsupportedEnvironmentError
      If 64-bit unsigned integer arithmetic is unavailable.
  InvalidArgumentError
      If `cell_id` is missing or not an integer.
  InvalidCellIdError
      If `cell_id` violates the cell id bit layout.
  """

  __slots__ = ("_cell_id", "_level")

  def __init__(self, cell_id):
    if not supports_uint64():
      raise UnsupportedEnvironmentError("S2 cells require 64-bit integer support.")
    self._cell_id = check_cell_id(cell_id)
    self._level = get_level(self._cell_id)

  @classmethod
  def from_token(cls, token):
    """
    Create a cell from its hexadecimal token.

    Raises
    ------
    InvalidArgumentError
        If `token` is not a string of 1-16 hex digits.
    InvalidCellIdError
        If the padded token is not a valid cell id.
    """
    if not isinstance(token, str):
      raise InvalidArgumentError(f"token must be a string, got {type(token).__name__}")
    if TOKEN_PATTERN.fullmatch(token) is None:
      raise InvalidArgumentError(f"token {token!r} is invalid.")
    return cls(cell_id_from_token(token))

  @property
  def cell_id(self):
    return self._cell_id

  @property
  def level(self):
    return self._level

  @property
  def face(self):
    return self._cell_id >> POS_BITS

  @property
  def token(self):
    return token_from_cell_id(self._cell_id)

  def is_leaf(self):
    return self._level == MAX_LEVEL

  def is_face(self):
    return self._level == 0

  def get_child(self, index):
    """Child `index` (0..3) in Hilbert curve order."""
    return Cell(child_cell_id(self._cell_id, index))

  def get_parent(self):
    return Cell(parent_cell_id(self._cell_id))

  def children(self):
    return [self.get_child(index) for index in range(4)]

  def get_center_on_sphere(self):
    """
    Centre of the cell as a unit vector.

    Returns
    -------
    `Array[xyz, Float]`
    """
    face, si, ti = get_face_si_ti(self._cell_id)
    return normalize(face_si_ti_to_xyz(face, si, ti))

  def get_center(self, ellipsoid=None):
    """
    Centre of the cell on the surface of a reference ellipsoid.

    Parameters
    ----------
    ellipsoid: `Ellipsoid` or `str`, optional
        Target surface, by default the configured ellipsoid (WGS84).

    Returns
    -------
    `Array[xyz, Float]`
        Cartesian position whose geodetic longitude and latitude on
        `ellipsoid` equal those of the cell centre on the unit sphere.
    """
    if ellipsoid is None:
      ellipsoid = config.DEFAULT_ELLIPSOID
    return sphere_to_ellipsoid(self.get_center_on_sphere(), ellipsoid)

  def __eq__(self, other):
    if not isinstance(other, Cell):
      return NotImplemented
    return self._cell_id == other._cell_id

  def __hash__(self):
    return hash(self._cell_id)

  def __repr__(self):
    return f"Cell({self.token!r})"


def cell_centers(cell_ids: CellIdArray, ellipsoid=None) -> XYZArray:
  """
  Centres of many cells at once.

  Parameters
  ----------
  cell_ids: `Array[tuple[cell_idx], UInt64]` or iterable of `int`
      Valid cell ids.
  ellipsoid: `Ellipsoid` or `str`, optional
      Target surface, by default the configured ellipsoid.

  Returns
  -------
  `Array[tuple[cell_idx, xyz], Float]`
  """
  if ellipsoid is None:
    ellipsoid = config.DEFAULT_ELLIPSOID
  face_si_ti = np.array([get_face_si_ti(cell_id) for cell_id in cell_ids],
                        dtype=np.int64).reshape((-1, 3))
  xyz = np.zeros(shape=(face_si_ti.shape[0], 3))
  for face_idx in range(NUM_FACES):
    face_mask = face_si_ti[:, 0] == face_idx
    if np.any(face_mask):
      xyz[face_mask] = face_si_ti_to_xyz(face_idx, face_si_ti[face_mask, 1], face_si_ti[face_mask, 2])
  if xyz.shape[0] == 0:
    return xyz
  return sphere_to_ellipsoid(normalize(xyz), ellipsoid)
