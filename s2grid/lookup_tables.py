import logging
from threading import Lock
from .config import np, EAGER_LOOKUP_TABLES, versatile_assert
from .s2_types import LookupTable
from .s2_definitions import LOOKUP_BITS, SWAP_MASK, INVERT_MASK, POS_TO_IJ, POS_TO_ORIENTATION

logger = logging.getLogger(__name__)

TABLE_SIZE = 1 << (2 * LOOKUP_BITS + 2)


def init_lookup_cell(lookup_pos,
                     lookup_ij,
                     level,
                     i,
                     j,
                     orig_orientation,
                     pos,
                     orientation):
  """
  Recursively fill both lookup tables for one quadrant.

  Parameters
  ----------
  lookup_pos: `Array[tuple[ij_orientation], Int]`
      Table from packed (i, j, starting orientation) to
      packed (position, final orientation). Written in place.
  lookup_ij: `Array[tuple[pos_orientation], Int]`
      Inverse of `lookup_pos`. Written in place.
  level: `int`
      Recursion depth, 0..LOOKUP_BITS.
  i, j: `int`
      Quadrant coordinates accumulated so far.
  orig_orientation: `int`
      Orientation the traversal started with; part of the table key.
  pos: `int`
      Hilbert position accumulated so far.
  orientation: `int`
      Orientation of the current quadrant.
  """
  if level == LOOKUP_BITS:
    ij = (i << LOOKUP_BITS) + j
    lookup_pos[(ij << 2) + orig_orientation] = (pos << 2) + orientation
    lookup_ij[(pos << 2) + orig_orientation] = (ij << 2) + orientation
    return
  r = POS_TO_IJ[orientation]
  for sub_pos in range(4):
    init_lookup_cell(lookup_pos,
                     lookup_ij,
                     level + 1,
                     (i << 1) + (r[sub_pos] >> 1),
                     (j << 1) + (r[sub_pos] & 1),
                     orig_orientation,
                     (pos << 2) + sub_pos,
                     orientation ^ POS_TO_ORIENTATION[sub_pos])


def init_lookup_tables() -> tuple[LookupTable, LookupTable]:
  """
  Build the Hilbert curve lookup tables for LOOKUP_BITS levels.

  Returns
  -------
  lookup_pos: `Array[tuple[ij_orientation], Int64]`
      Maps `(i << (LOOKUP_BITS + 2)) + (j << 2) + orientation`
      to `(pos << 2) + orientation`.
  lookup_ij: `Array[tuple[pos_orientation], Int64]`
      Maps `(pos << 2) + orientation` to
      `(i << (LOOKUP_BITS + 2)) + (j << 2) + orientation`.

  Notes
  -----
  Both arrays are returned read-only. Each of the four starting
  orientations seeds its own traversal, so every key is written
  exactly once.
  """
  lookup_pos = np.full(TABLE_SIZE, -1, dtype=np.int64)
  lookup_ij = np.full(TABLE_SIZE, -1, dtype=np.int64)
  for orientation in (0, SWAP_MASK, INVERT_MASK, SWAP_MASK | INVERT_MASK):
    init_lookup_cell(lookup_pos, lookup_ij, 0, 0, 0, orientation, 0, orientation)
  versatile_assert(np.all(lookup_pos >= 0) and np.all(lookup_ij >= 0))
  lookup_pos.flags.writeable = False
  lookup_ij.flags.writeable = False
  return lookup_pos, lookup_ij


_tables = None
_tables_lock = Lock()


def get_lookup_tables() -> tuple[LookupTable, LookupTable]:
  """
  Return the shared `(lookup_pos, lookup_ij)` pair, building it on first use.
  """
  global _tables
  tables = _tables
  if tables is None:
    with _tables_lock:
      if _tables is None:
        logger.debug("Building %d-entry Hilbert lookup tables", TABLE_SIZE)
        _tables = init_lookup_tables()
      tables = _tables
  return tables


def lookup_tables_initialized():
  return _tables is not None


if EAGER_LOOKUP_TABLES:
  get_lookup_tables()
