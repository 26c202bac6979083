import sys
import os
from pytest import fixture

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from s2grid.cell_id import child_cell_id  # noqa: E402
from s2grid.s2_definitions import NUM_FACES, POS_BITS, MAX_LEVEL  # noqa: E402


def child_walk(cell_id, path):
  cell_ids = [cell_id]
  for index in path:
    cell_id = child_cell_id(cell_id, index)
    cell_ids.append(cell_id)
  return cell_ids


@fixture
def face_cell_ids():
  return [(face << POS_BITS) | (1 << (POS_BITS - 1)) for face in range(NUM_FACES)]


@fixture
def walk_cell_ids(face_cell_ids):
  """Cells from every face down to a leaf along fixed child paths, 186 in all."""
  cell_ids = []
  for face, face_cell_id in enumerate(face_cell_ids):
    path = [(face + 3 * level) % 4 for level in range(MAX_LEVEL)]
    cell_ids.extend(child_walk(face_cell_id, path))
  return cell_ids
