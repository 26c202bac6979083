"""
Bit layout and Hilbert curve conventions for 64-bit cell ids.

A cell id is laid out, most significant bit first, as
    [fff][p1 p1][p2 p2] ... [p30 p30][1]
         |<------- 61 position bits ------->|
where `fff` selects one of six cube faces and each pair `pk`
is the Hilbert position (0..3) of the level-k sub-quadrant.
A cell at level L stores L pairs followed by a single 1 bit
(the level marker) and zero padding, so the marker sits at
bit 2 * (MAX_LEVEL - L).

Faces are numbered by the axis their centre lies on
              --------------
              |            |
              |     2      |
              |    (+z)    |
              |            |
  ----------------------------------------------------
  |           |            |            |            |
  |     4     |     0      |     1      |     3      |
  |    (-y)   |    (+x)    |    (+y)    |    (-x)    |
  |           |            |            |            |
  ----------------------------------------------------
              |            |
              |     5      |
              |    (-z)    |
              |            |
              --------------
and each face carries its own (u, v) axes, see `coordinates.cube_face`.

Orientation is a two-bit flag set. SWAP_MASK exchanges the
roles of i and j inside a quadrant, INVERT_MASK reverses the
traversal direction.
"""
MAX_LEVEL = 30
FACE_BITS = 3
NUM_FACES = 6
POS_BITS = 2 * MAX_LEVEL + 1
MAX_SI_TI = 1 << (MAX_LEVEL + 1)

# bits per i and j coordinate resolved by one lookup
LOOKUP_BITS = 4

SWAP_MASK = 1
INVERT_MASK = 2

# two bits of ij (i in the high bit) for each Hilbert position, per orientation
POS_TO_IJ = ((0, 1, 3, 2),
             (0, 2, 3, 1),
             (3, 2, 0, 1),
             (3, 1, 0, 2))

# xor'ed with the parent orientation to give the sub-quadrant orientation
POS_TO_ORIENTATION = (SWAP_MASK, 0, 0, SWAP_MASK | INVERT_MASK)

UINT64_MASK = (1 << 64) - 1

# even bit offsets 0, 2, ..., 60 where a level marker may sit
LEVEL_MARKER_MASK = 0x1555555555555555

# level markers of the even levels 0, 2, ..., 28
FACE_ORIENTATION_CORRECTION_MASK = 0x1111111111111110

WGS84_NAME = "wgs84"
UNIT_SPHERE_NAME = "unit_sphere"
