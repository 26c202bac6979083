class S2Error(Exception):
  """Base class for errors raised by s2grid."""


class UnsupportedEnvironmentError(S2Error, RuntimeError):
  """The interpreter cannot do unsigned 64-bit integer arithmetic."""


class InvalidArgumentError(S2Error, ValueError):
  """Malformed token, out-of-range child index, or missing argument."""


class InvalidCellIdError(S2Error, ValueError):
  """A 64-bit value that does not satisfy the cell id bit layout."""


class InvalidHierarchyError(S2Error, ValueError):
  """Child of a leaf cell or parent of a face cell was requested."""
