import pytest
from s2grid.config import np
from s2grid.errors import InvalidArgumentError
from s2grid.coordinates.projection import si_ti_to_st, st_to_uv
from s2grid.coordinates.cube_face import face_uv_to_xyz, face_si_ti_to_xyz
from s2grid.s2_definitions import MAX_SI_TI, NUM_FACES

face_axes = [(1.0, 0.0, 0.0),
             (0.0, 1.0, 0.0),
             (0.0, 0.0, 1.0),
             (-1.0, 0.0, 0.0),
             (0.0, -1.0, 0.0),
             (0.0, 0.0, -1.0)]


def test_si_ti_to_st():
  assert (si_ti_to_st(0) == 0.0)
  assert (si_ti_to_st(MAX_SI_TI // 2) == 0.5)
  assert (si_ti_to_st(MAX_SI_TI) == 1.0)
  assert (np.array_equal(si_ti_to_st(np.array([0, MAX_SI_TI // 4, MAX_SI_TI])), [0.0, 0.25, 1.0]))


def test_st_to_uv_endpoints():
  assert (st_to_uv(0.0) == -1.0)
  assert (st_to_uv(0.5) == 0.0)
  assert (st_to_uv(1.0) == 1.0)
  assert (st_to_uv(0.75) == pytest.approx(5.0 / 12.0))
  assert (st_to_uv(0.25) == pytest.approx(-5.0 / 12.0))


def test_st_to_uv_monotone_and_odd():
  s = np.linspace(0.0, 1.0, 1001)
  u = st_to_uv(s)
  assert (np.all(np.diff(u) > 0.0))
  assert (np.max(np.abs(u + u[::-1])) < 1e-14)
  # continuous across the branch point
  assert (abs(st_to_uv(0.5 - 1e-12) - st_to_uv(0.5 + 1e-12)) < 1e-11)


def test_st_to_uv_array_matches_scalar():
  s = np.random.default_rng(0).uniform(size=100)
  u = st_to_uv(s)
  for s_val, u_val in zip(s, u):
    assert (st_to_uv(float(s_val)) == u_val)


def test_face_centers():
  for face in range(NUM_FACES):
    assert (np.array_equal(face_uv_to_xyz(face, 0.0, 0.0), face_axes[face]))
    assert (np.array_equal(face_si_ti_to_xyz(face, MAX_SI_TI // 2, MAX_SI_TI // 2), face_axes[face]))


def test_face_uv_to_xyz_formulas():
  u = 0.25
  v = -0.5
  expected = [(1.0, u, v),
              (-u, 1.0, v),
              (-u, -v, 1.0),
              (-1.0, -v, -u),
              (v, -1.0, -u),
              (v, u, -1.0)]
  for face in range(NUM_FACES):
    assert (np.array_equal(face_uv_to_xyz(face, u, v), expected[face]))


def test_face_uv_to_xyz_vectorized():
  rng = np.random.default_rng(1)
  u = rng.uniform(-1.0, 1.0, size=(10, 4))
  v = rng.uniform(-1.0, 1.0, size=(10, 4))
  for face in range(NUM_FACES):
    xyz = face_uv_to_xyz(face, u, v)
    assert (xyz.shape == (10, 4, 3))
    assert (np.allclose(np.max(np.abs(xyz), axis=-1), 1.0))
    assert (np.array_equal(xyz[3, 2], face_uv_to_xyz(face, u[3, 2], v[3, 2])))


def test_invalid_face():
  for face in [-1, NUM_FACES]:
    with pytest.raises(InvalidArgumentError):
      face_uv_to_xyz(face, 0.0, 0.0)
