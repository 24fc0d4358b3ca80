# renderer/tone_mapping.py
import numpy as np

def clamp_tone_mapping(linear):
    """
    Clamp each channel to [0, 1], scale to 255 and round half up.
    """
    clamped = np.clip(linear, 0.0, 1.0)
    return np.floor(clamped * 255.0 + 0.5).astype("uint8")

def reinhard_tone_mapping(linear, gamma=2.2):
    """
    Compress unbounded radiance with c / (1 + c), then gamma-encode.
    Negative channels map to black.
    """
    radiance = np.maximum(linear, 0.0)
    encoded = (radiance / (1.0 + radiance)) ** (1.0 / gamma)
    return np.clip(encoded * 255.0, 0, 255).astype("uint8")

TONE_MAPPERS = {
    "clamp": clamp_tone_mapping,
    "reinhard": reinhard_tone_mapping,
}

def tone_map(linear, operator: str = "clamp"):
    try:
        mapper = TONE_MAPPERS[operator]
    except KeyError:
        raise ValueError(f"Unknown tone mapping operator {operator!r}; choose from {sorted(TONE_MAPPERS)}") from None
    return mapper(linear)
