"""
Validation, token conversion and hierarchy navigation for 64-bit cell ids.

Cell ids are plain Python integers kept inside [0, 2**64). Every
operation is integer bit arithmetic; results are masked back to
64 bits where two's-complement wraparound is implied.
"""
import re
from numbers import Integral
from .config import np
from .errors import InvalidArgumentError, InvalidCellIdError, InvalidHierarchyError
from .s2_definitions import MAX_LEVEL, POS_BITS, NUM_FACES, UINT64_MASK, LEVEL_MARKER_MASK
from .s2_types import CellId, Token

TOKEN_PATTERN = re.compile("[0-9a-fA-F]{1,16}")
ZERO_TOKEN = "X"
TOKEN_LENGTH = 16


def as_cell_id(cell_id) -> CellId:
  """
  Coerce an integer-like cell id to a Python int.

  Raises
  ------
  InvalidArgumentError
      If `cell_id` is missing or not an integer (bools are rejected).
  """
  if cell_id is None:
    raise InvalidArgumentError("cell id is required.")
  if isinstance(cell_id, (bool, np.bool_)) or not isinstance(cell_id, (Integral, np.integer)):
    raise InvalidArgumentError(f"cell id must be an integer, got {type(cell_id).__name__}")
  return int(cell_id)


def lsb(cell_id):
  """Isolate the lowest set bit of a 64-bit value."""
  return cell_id & ((~cell_id + 1) & UINT64_MASK)


def is_valid_cell_id(cell_id):
  """
  Check the structural invariants of a cell id.

  Parameters
  ----------
  cell_id: `int`
      Candidate 64-bit cell id.

  Returns
  -------
  bool
      False for zero or negative values, values whose face bits
      exceed 5, and values whose lowest set bit is not at one of
      the even level-marker offsets.
  """
  cell_id = as_cell_id(cell_id)
  if cell_id <= 0:
    return False
  if cell_id >> POS_BITS >= NUM_FACES:
    return False
  if not lsb(cell_id) & LEVEL_MARKER_MASK:
    return False
  return True


def check_cell_id(cell_id):
  cell_id = as_cell_id(cell_id)
  if not is_valid_cell_id(cell_id):
    raise InvalidCellIdError(f"cell id {cell_id:#x} is invalid.")
  return cell_id


def is_valid_token(token):
  """
  Check a token against the hex grammar and the cell id invariants.

  The literal "X" denotes id 0, which is never a valid cell.
  """
  if not isinstance(token, str):
    raise InvalidArgumentError(f"token must be a string, got {type(token).__name__}")
  if TOKEN_PATTERN.fullmatch(token) is None:
    return False
  return is_valid_cell_id(cell_id_from_token(token))


def cell_id_from_token(token: Token) -> CellId:
  """
  Convert a token to its cell id.

  Parameters
  ----------
  token: `str`
      Hex token of 1-16 digits, or "X".

  Returns
  -------
  int
      The token right-padded with zero digits to 16 hex digits.

  Notes
  -----
  The token grammar is not re-checked here, see `is_valid_token`.
  """
  if not isinstance(token, str):
    raise InvalidArgumentError(f"token must be a string, got {type(token).__name__}")
  if token == ZERO_TOKEN:
    return 0
  return int(token.ljust(TOKEN_LENGTH, "0"), 16)


def token_from_cell_id(cell_id: CellId) -> Token:
  """
  Convert a cell id to its lowercase hex token with trailing zeros stripped.
  """
  cell_id = as_cell_id(cell_id)
  if cell_id == 0:
    return ZERO_TOKEN
  return f"{cell_id & UINT64_MASK:016x}".rstrip("0")


def get_level(cell_id):
  """
  Hierarchy level of a cell id, 0 for a whole face and 30 for a leaf.

  Raises
  ------
  InvalidCellIdError
      If `cell_id` is not a valid cell id.
  """
  cell_id = check_cell_id(cell_id)
  lsb_position = lsb(cell_id).bit_length() - 1
  return MAX_LEVEL - (lsb_position >> 1)


def get_face(cell_id):
  cell_id = check_cell_id(cell_id)
  return cell_id >> POS_BITS


def is_leaf(cell_id):
  return bool(check_cell_id(cell_id) & 1)


def is_face(cell_id):
  return get_level(cell_id) == 0


def child_cell_id(cell_id: CellId, index: int) -> CellId:
  """
  Cell id of one of the four children, in Hilbert curve order.

  Parameters
  ----------
  cell_id: `int`
      A valid non-leaf cell id.
  index: `int`
      Child position along the curve, 0..3.

  Returns
  -------
  int
      `cell_id + (2 * index - 3) * (lsb(cell_id) >> 2)`: the
      level marker moves two bits down and the new pair
      holds `index`.

  Raises
  ------
  InvalidArgumentError
      If `index` is not an integer in [0, 3].
  InvalidHierarchyError
      If `cell_id` is a leaf.
  """
  cell_id = check_cell_id(cell_id)
  if isinstance(index, bool) or not isinstance(index, (Integral, np.integer)):
    raise InvalidArgumentError(f"child index must be an integer, got {type(index).__name__}")
  if index < 0 or index > 3:
    raise InvalidArgumentError("child index must be in the range [0-3].")
  if get_level(cell_id) == MAX_LEVEL:
    raise InvalidHierarchyError("cannot get child of leaf cell.")
  new_lsb = lsb(cell_id) >> 2
  return (cell_id + (2 * int(index) - 3) * new_lsb) & UINT64_MASK


def parent_cell_id(cell_id: CellId) -> CellId:
  """
  Cell id one level up: bits below the new marker are cleared.

  Raises
  ------
  InvalidHierarchyError
      If `cell_id` is a face (level 0) cell.
  """
  cell_id = check_cell_id(cell_id)
  if get_level(cell_id) == 0:
    raise InvalidHierarchyError("cannot get parent of root cell.")
  new_lsb = lsb(cell_id) << 2
  return (cell_id & ((~new_lsb + 1) & UINT64_MASK)) | new_lsb
