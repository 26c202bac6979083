from concurrent.futures import ThreadPoolExecutor
import pytest
from s2grid.config import np
from s2grid.lookup_tables import init_lookup_tables, get_lookup_tables, lookup_tables_initialized, TABLE_SIZE
from s2grid.s2_definitions import LOOKUP_BITS


def unpack_ij(packed):
  return packed >> (LOOKUP_BITS + 2), (packed >> 2) & ((1 << LOOKUP_BITS) - 1), packed & 3


def test_table_shapes():
  lookup_pos, lookup_ij = init_lookup_tables()
  assert (TABLE_SIZE == 1024)
  assert (lookup_pos.shape == (TABLE_SIZE,))
  assert (lookup_ij.shape == (TABLE_SIZE,))
  assert (np.all(lookup_pos >= 0) and np.all(lookup_pos < TABLE_SIZE))
  assert (np.all(lookup_ij >= 0) and np.all(lookup_ij < TABLE_SIZE))


def test_tables_are_inverse():
  lookup_pos, lookup_ij = init_lookup_tables()
  for key in range(TABLE_SIZE):
    ij = key >> 2
    orig_orientation = key & 3
    pos_orientation = int(lookup_pos[key])
    pos = pos_orientation >> 2
    orientation = pos_orientation & 3
    assert (int(lookup_ij[(pos << 2) + orig_orientation]) == (ij << 2) + orientation)


def test_positions_are_permutation():
  lookup_pos, _ = init_lookup_tables()
  for orig_orientation in range(4):
    positions = lookup_pos[orig_orientation::4] >> 2
    assert (np.array_equal(np.sort(positions), np.arange(256)))


def test_hilbert_steps_are_adjacent():
  _, lookup_ij = init_lookup_tables()
  for orig_orientation in range(4):
    for pos in range(255):
      i0, j0, _ = unpack_ij(int(lookup_ij[(pos << 2) + orig_orientation]))
      i1, j1, _ = unpack_ij(int(lookup_ij[((pos + 1) << 2) + orig_orientation]))
      assert (abs(i1 - i0) + abs(j1 - j0) == 1)


def test_known_entries():
  lookup_pos, lookup_ij = init_lookup_tables()
  # position 0 stays in the corner and four swap flips cancel
  assert (lookup_ij[0] == 0)
  assert (lookup_pos[0] == 0)
  # the last position of an unoriented traversal ends in the (15, 0) corner
  assert (unpack_ij(int(lookup_ij[255 << 2]))[:2] == (15, 0))


def test_tables_read_only():
  lookup_pos, lookup_ij = get_lookup_tables()
  with pytest.raises(ValueError):
    lookup_pos[0] = 1
  with pytest.raises(ValueError):
    lookup_ij[0] = 1


def test_shared_tables_built_once():
  tables = get_lookup_tables()
  assert (lookup_tables_initialized())
  with ThreadPoolExecutor(max_workers=8) as pool:
    results = list(pool.map(lambda _: get_lookup_tables(), range(32)))
  for result in results:
    assert (result is tables)
  assert (np.array_equal(tables[0], init_lookup_tables()[0]))
