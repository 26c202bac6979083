import pytest
from s2grid.errors import InvalidCellIdError
from s2grid.cell_id import child_cell_id, get_level, is_leaf
from s2grid.face_ij import face_ij, face_ij_orientation, get_face_si_ti
from s2grid.s2_definitions import MAX_LEVEL, MAX_SI_TI, SWAP_MASK, POS_TO_ORIENTATION, POS_TO_IJ


def test_face_cells(face_cell_ids):
  for face, cell_id in enumerate(face_cell_ids):
    decoded = face_ij_orientation(cell_id)
    assert (decoded.face == face)
    assert (decoded.i == 1 << (MAX_LEVEL - 1))
    assert (decoded.j == 1 << (MAX_LEVEL - 1))
    assert (decoded.orientation == face & SWAP_MASK)
    assert (face_ij(cell_id) == (face, decoded.i, decoded.j))


def test_face_cell_si_ti(face_cell_ids):
  for face, cell_id in enumerate(face_cell_ids):
    assert (get_face_si_ti(cell_id) == (face, MAX_SI_TI // 2, MAX_SI_TI // 2))


def test_leaf_corner():
  # first leaf along the curve of face 0 is its (0, 0) corner
  assert (face_ij_orientation(1) == (0, 0, 0, 0))
  assert (get_face_si_ti(1) == (0, 1, 1))


def test_child_orientation(walk_cell_ids):
  for cell_id in walk_cell_ids:
    if is_leaf(cell_id):
      continue
    orientation = face_ij_orientation(cell_id).orientation
    for index in range(4):
      child_orientation = face_ij_orientation(child_cell_id(cell_id, index)).orientation
      assert (child_orientation == orientation ^ POS_TO_ORIENTATION[index])


def test_child_centers(walk_cell_ids):
  for cell_id in walk_cell_ids:
    if is_leaf(cell_id):
      continue
    level = get_level(cell_id)
    face, si, ti = get_face_si_ti(cell_id)
    orientation = face_ij_orientation(cell_id).orientation
    offset = 1 << (MAX_LEVEL - 1 - level)
    for index in range(4):
      child_face, child_si, child_ti = get_face_si_ti(child_cell_id(cell_id, index))
      ij = POS_TO_IJ[orientation][index]
      assert (child_face == face)
      assert (child_si == si + (offset if ij >> 1 else -offset))
      assert (child_ti == ti + (offset if ij & 1 else -offset))


def test_si_ti_range(walk_cell_ids):
  for cell_id in walk_cell_ids:
    _, si, ti = get_face_si_ti(cell_id)
    assert (0 < si < MAX_SI_TI)
    assert (0 < ti < MAX_SI_TI)
    if is_leaf(cell_id):
      assert (si % 2 == 1 and ti % 2 == 1)


def test_invalid_cell_id():
  for cell_id in [0, 0b10, 0xd000000000000000]:
    with pytest.raises(InvalidCellIdError):
      face_ij_orientation(cell_id)
    with pytest.raises(InvalidCellIdError):
      get_face_si_ti(cell_id)
