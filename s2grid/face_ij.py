from .lookup_tables import get_lookup_tables
from .cell_id import check_cell_id, lsb, get_level
from .s2_types import FaceIJOrientation
from .s2_definitions import (MAX_LEVEL, POS_BITS, LOOKUP_BITS, SWAP_MASK, INVERT_MASK,
                             FACE_ORIENTATION_CORRECTION_MASK)

LOOKUP_GROUPS = 8
LOOKUP_MASK = (1 << LOOKUP_BITS) - 1


def decode_face_ij(cell_id):
  """
  Walk the position bits four levels at a time through `lookup_ij`.

  Parameters
  ----------
  cell_id: `int`
      A valid cell id.

  Returns
  -------
  tuple[int, int, int, int]
      (face, i, j, bits) where `bits` is the orientation after the
      last lookup, before any face-orientation correction.

  Notes
  -----
  The top group only carries MAX_LEVEL - 7 * LOOKUP_BITS = 2 levels.
  Feeding it to the table as a 4-level position with two leading zero
  pairs is harmless: position 0 flips SWAP_MASK twice, which restores
  the starting orientation.

  For a non-leaf cell the level marker is decoded as if it were
  position data, so (i, j) names a leaf cell adjacent to the centre
  of the cell rather than its corner.
  """
  _, lookup_ij = get_lookup_tables()
  i = 0
  j = 0
  face = cell_id >> POS_BITS
  bits = face & SWAP_MASK
  for k in range(LOOKUP_GROUPS - 1, -1, -1):
    nbits = MAX_LEVEL - 7 * LOOKUP_BITS if k == LOOKUP_GROUPS - 1 else LOOKUP_BITS
    bits += ((cell_id >> (k * 2 * LOOKUP_BITS + 1)) & ((1 << (2 * nbits)) - 1)) << 2
    bits = int(lookup_ij[bits])
    i += (bits >> (LOOKUP_BITS + 2)) << (k * LOOKUP_BITS)
    j += ((bits >> 2) & LOOKUP_MASK) << (k * LOOKUP_BITS)
    bits &= SWAP_MASK | INVERT_MASK
  return face, i, j, bits


def face_ij(cell_id):
  """Return `(face, i, j)` for a cell id."""
  cell_id = check_cell_id(cell_id)
  face, i, j, _ = decode_face_ij(cell_id)
  return face, i, j


def face_ij_orientation(cell_id) -> FaceIJOrientation:
  """
  Decode a cell id into its face, leaf coordinates and orientation.

  Parameters
  ----------
  cell_id: `int`
      A valid cell id.

  Returns
  -------
  FaceIJOrientation
      `orientation` is the Hilbert curve orientation of the cell itself,
      so for every child `k` of a cell
      `child.orientation == cell.orientation ^ POS_TO_ORIENTATION[k]`.

  Notes
  -----
  The lookup loop always consumes a multiple of LOOKUP_BITS levels,
  treating the level marker and padding as position data. When the
  marker lies on an even level below MAX_LEVEL that leaves one
  SWAP_MASK flip too many, which is undone here.
  """
  cell_id = check_cell_id(cell_id)
  face, i, j, bits = decode_face_ij(cell_id)
  if lsb(cell_id) & FACE_ORIENTATION_CORRECTION_MASK:
    bits ^= SWAP_MASK
  return FaceIJOrientation(face, i, j, bits)


def get_face_si_ti(cell_id):
  """
  Centre of a cell in (si, ti) coordinates.

  Parameters
  ----------
  cell_id: `int`
      A valid cell id.

  Returns
  -------
  tuple[int, int, int]
      (face, si, ti) with si, ti in [0, MAX_SI_TI].

  Notes
  -----
  Leaf cells are centred one unit past their corner. For other cells
  the decoded (i, j) sits either just below or just above the centre;
  the parity of `i ^ (cell_id >> 2)` tells which.
  """
  cell_id = check_cell_id(cell_id)
  face, i, j, _ = decode_face_ij(cell_id)
  if get_level(cell_id) == MAX_LEVEL:
    delta = 1
  elif (i ^ (cell_id >> 2)) & 1:
    delta = 2
  else:
    delta = 0
  return face, 2 * i + delta, 2 * j + delta
