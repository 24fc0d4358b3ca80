from raycaster.materials.light import PointLight
from raycaster.materials.material import Material
from raycaster.materials.pattern import Pattern, PatternError, PatternKind
