from raycaster.core.color import BLACK, WHITE, Color
from raycaster.core.matrix import IDENTITY, Matrix, SingularMatrixError, SquareMatrix
from raycaster.core.ray import Ray
from raycaster.core.utils import EPSILON, equal
from raycaster.core.vector import ORIGIN, X_AXIS, Y_AXIS, Z_AXIS, Point3, Vector3
