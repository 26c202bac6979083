from typing import NamedTuple, NewType
from jaxtyping import Float, Int64, UInt64
from numpy import ndarray

CellId = NewType("CellId", int)
Token = NewType("Token", str)
FaceIdx = NewType("FaceIdx", int)
Orientation = NewType("Orientation", int)


class FaceIJOrientation(NamedTuple):
  face: FaceIdx
  i: int
  j: int
  orientation: Orientation


LookupTable = Int64[ndarray, "packed_key"]
CellIdArray = UInt64[ndarray, "cell_idx"]
XYZArray = Float[ndarray, "cell_idx xyz"]
