from typing import NamedTuple
from ..config import np
from ..errors import InvalidArgumentError
from ..s2_definitions import WGS84_NAME, UNIT_SPHERE_NAME

EPSILON12 = 1e-12
CENTER_TOLERANCE_SQUARED = 0.1
MAX_NEWTON_ITERATIONS = 50


class Ellipsoid:
  """
  Axis-aligned ellipsoid centred at the origin.

  Parameters
  ----------
  x, y, z: `float`
      Radii along each Cartesian axis.
  """

  def __init__(self, x, y, z):
    if x < 0.0 or y < 0.0 or z < 0.0:
      raise InvalidArgumentError("ellipsoid radii must be non-negative.")
    self.radii = np.array([x, y, z], dtype=np.float64)
    self.radii_squared = self.radii**2
    self.one_over_radii = np.array([1.0 / r if r != 0.0 else 0.0 for r in self.radii])
    self.one_over_radii_squared = self.one_over_radii**2
    for array in (self.radii, self.radii_squared, self.one_over_radii, self.one_over_radii_squared):
      array.flags.writeable = False

  def __eq__(self, other):
    return isinstance(other, Ellipsoid) and np.array_equal(self.radii, other.radii)

  def __hash__(self):
    return hash(tuple(self.radii))

  def __repr__(self):
    return f"Ellipsoid({self.radii[0]!r}, {self.radii[1]!r}, {self.radii[2]!r})"


WGS84 = Ellipsoid(6378137.0, 6378137.0, 6356752.3142451793)
UNIT_SPHERE = Ellipsoid(1.0, 1.0, 1.0)

ellipsoids = {WGS84_NAME: WGS84,
              UNIT_SPHERE_NAME: UNIT_SPHERE}


def get_ellipsoid(ellipsoid):
  if isinstance(ellipsoid, Ellipsoid):
    return ellipsoid
  if ellipsoid not in ellipsoids:
    raise InvalidArgumentError(f"Unknown ellipsoid: {ellipsoid}, must be one of {list(ellipsoids)}")
  return ellipsoids[ellipsoid]


class Cartographic(NamedTuple):
  """Geodetic longitude and latitude in radians, height in ellipsoid units."""
  longitude: float
  latitude: float
  height: float = 0.0


def normalize(xyz):
  """
  Scale vectors along the last axis to unit length.

  Raises
  ------
  InvalidArgumentError
      If any vector has zero length.
  """
  xyz = np.asarray(xyz, dtype=np.float64)
  norm = np.linalg.norm(xyz, axis=-1, keepdims=True)
  if np.any(norm == 0.0):
    raise InvalidArgumentError("cannot normalize a zero vector.")
  return xyz / norm


def unit_sphere_to_cart_coords(lonlat):
  lon = np.take(lonlat, 0, axis=-1)
  lat = np.take(lonlat, 1, axis=-1)
  cos_lat = np.cos(lat)
  cart = np.stack((cos_lat * np.cos(lon),
                   cos_lat * np.sin(lon),
                   np.sin(lat)), axis=-1)
  return cart


def scale_to_geodetic_surface(xyz, ellipsoid):
  """
  Project points onto the ellipsoid surface along the geodetic normal.

  Parameters
  ----------
  xyz: `Array[..., xyz, Float]`
      Cartesian positions.
  ellipsoid: `Ellipsoid`

  Returns
  -------
  `Array[..., xyz, Float]`
      Surface points whose geodetic normal passes through `xyz`.

  Notes
  -----
  Solves for the Lagrange multiplier of the closest-point problem by
  Newton iteration. Points within sqrt(CENTER_TOLERANCE_SQUARED) (in
  scaled units) of the centre are scaled radially instead, where the
  iteration is poorly conditioned.
  """
  xyz = np.asarray(xyz, dtype=np.float64)
  scaled_squared = (xyz * ellipsoid.one_over_radii)**2
  squared_norm = np.sum(scaled_squared, axis=-1)
  if np.any(squared_norm == 0.0):
    raise InvalidArgumentError("cannot scale the ellipsoid centre to its surface.")
  ratio = np.sqrt(1.0 / squared_norm)
  intersection = xyz * np.expand_dims(ratio, -1)

  gradient = 2.0 * intersection * ellipsoid.one_over_radii_squared
  lam = (1.0 - ratio) * np.linalg.norm(xyz, axis=-1) / (0.5 * np.linalg.norm(gradient, axis=-1))
  correction = np.zeros_like(lam)
  for _ in range(MAX_NEWTON_ITERATIONS):
    lam = lam - correction
    multiplier = 1.0 / (1.0 + np.expand_dims(lam, -1) * ellipsoid.one_over_radii_squared)
    func = np.sum(scaled_squared * multiplier**2, axis=-1) - 1.0
    if np.max(np.abs(func)) <= EPSILON12:
      break
    denominator = np.sum(scaled_squared * multiplier**3 * ellipsoid.one_over_radii_squared, axis=-1)
    correction = func / (-2.0 * denominator)
  surface = xyz * multiplier
  near_center = np.expand_dims(squared_norm < CENTER_TOLERANCE_SQUARED, -1)
  return np.where(near_center, intersection, surface)


def geodetic_surface_normal(xyz, ellipsoid):
  return normalize(np.asarray(xyz, dtype=np.float64) * ellipsoid.one_over_radii_squared)


def cartesian_to_cartographic(xyz, ellipsoid):
  """
  Geodetic coordinates of Cartesian positions.

  Parameters
  ----------
  xyz: `Array[..., xyz, Float]`
      Cartesian positions.
  ellipsoid: `Ellipsoid`
      Reference surface the geodetic coordinates are measured on.

  Returns
  -------
  Cartographic
      Fields are scalars for a single point, arrays otherwise.
  """
  xyz = np.asarray(xyz, dtype=np.float64)
  surface = scale_to_geodetic_surface(xyz, ellipsoid)
  normal = geodetic_surface_normal(surface, ellipsoid)
  height_vector = xyz - surface
  longitude = np.arctan2(normal[..., 1], normal[..., 0])
  latitude = np.arcsin(np.clip(normal[..., 2], -1.0, 1.0))
  height = np.sign(np.sum(height_vector * xyz, axis=-1)) * np.linalg.norm(height_vector, axis=-1)
  return Cartographic(longitude, latitude, height)


def cartographic_to_cartesian(cartographic, ellipsoid):
  """
  Cartesian positions of geodetic coordinates on an ellipsoid.

  Parameters
  ----------
  cartographic: `Cartographic`
  ellipsoid: `Ellipsoid`

  Returns
  -------
  `Array[..., xyz, Float]`
  """
  lonlat = np.stack((np.asarray(cartographic.longitude, dtype=np.float64),
                     np.asarray(cartographic.latitude, dtype=np.float64)), axis=-1)
  normal = unit_sphere_to_cart_coords(lonlat)
  k = ellipsoid.radii_squared * normal
  gamma = np.sqrt(np.sum(normal * k, axis=-1, keepdims=True))
  height = np.expand_dims(np.asarray(cartographic.height, dtype=np.float64), -1)
  return k / gamma + normal * height
