import numpy as np
from am_analysis.base import NumericAnomaly
from typing import *


def is_power_of_two(n: int) -> bool:
    n = int(n)
    return n > 0 and (n & (n - 1)) == 0


class SpectrumAnalyzer:
    def __init__(self, signal_length: int):
        self.signal_length = int(signal_length)
        # fixed radix-2 length, same as the original fft
        if not is_power_of_two(self.signal_length):
            raise NumericAnomaly(f"signal_length must be a power of two, got {self.signal_length}")

    def transform(self, x) -> np.ndarray:
        # real samples -> complex with zero imaginary part
        z = np.asarray(x, dtype=np.float64).astype(np.complex128)
        if z.size != self.signal_length:
            raise NumericAnomaly(f"expected {self.signal_length} samples, got {z.size}")
        return np.fft.fft(z)

    def magnitude(self, x, one_sided=True) -> np.ndarray:
        X   = self.transform(x)
        mag = np.hypot(X.real, X.imag)

        if not np.all(np.isfinite(mag)):
            raise NumericAnomaly("non-finite values in magnitude spectrum")

        if one_sided:
            # 0 .. Nyquist (exclusive), real input => symmetric spectrum
            return mag[: self.signal_length // 2]
        return mag

    def analyze(self, *signals) -> List[np.ndarray]:
        return [self.magnitude(s) for s in signals]
