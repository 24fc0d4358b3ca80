from raycaster.renderer.canvas import Canvas
from raycaster.renderer.tone_mapping import TONE_MAPPERS, tone_map
