import numpy as np
from am_analysis.base import NumericAnomaly


def hamming(N: int) -> np.ndarray:
    # w(i) = 0.54 - 0.46 cos(2pi i / (N-1)), symmetric
    N = int(N)
    if N <= 1:
        raise NumericAnomaly(f"Hamming window needs N > 1, got N={N}")
    return np.hamming(N)


class Windower:
    def __init__(self, signal_length: int):
        self.signal_length = int(signal_length)
        self.coefficients  = hamming(self.signal_length)

    def apply(self, x) -> np.ndarray:
        x = np.asarray(x, dtype=np.float64)
        if x.shape != self.coefficients.shape:
            raise NumericAnomaly(f"expected {self.signal_length} samples, got {x.shape}")
        return x * self.coefficients
