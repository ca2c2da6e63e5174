# renderer/tone_mapping.py
import numpy as np

def gamma_correct(accumulated: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Averages summed sample colors, applies gamma 2 and quantizes to 8 bits.
    """
    scaled = accumulated * (1.0 / samples_per_pixel)
    mapped = np.sqrt(np.maximum(scaled, 0.0))
    return np.floor(np.clip(mapped, 0.0, 0.999) * 256.0).astype("uint8")

def reinhard_tone_mapping(linear: np.ndarray, exposure: float = 1.0, white_point: float = 1.0,
                          gamma: float = 2.2) -> np.ndarray:
    """
    Maps averaged linear colors to 8 bits with the Reinhard curve
    x / (1 + x / white_point), then gamma encodes them.
    """
    scaled = np.maximum(linear, 0.0) * exposure
    compressed = scaled / (1.0 + scaled / white_point)
    encoded = compressed ** (1.0 / gamma)
    return np.clip(encoded * 255.0, 0.0, 255.0).astype("uint8")
