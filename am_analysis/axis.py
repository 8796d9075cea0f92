import numpy as np


def time_axis(signal_length, sampling_rate) -> np.ndarray:
    """t[i] = i / fs, in seconds."""
    return np.arange(int(signal_length)) / float(sampling_rate)


def frequency_axis(signal_length, sampling_rate) -> np.ndarray:
    """f[i] = i / N * fs, in Hz. Only the first N/2 bins (below Nyquist)."""
    N = int(signal_length)
    return np.arange(N // 2) / N * float(sampling_rate)


def frequency_range(freqs, f_min, f_max) -> slice:
    """Index slice of freqs covering [f_min, f_max]. freqs must be ascending."""
    if f_min > f_max:
        raise ValueError(f"f_min ({f_min}) > f_max ({f_max})")
    freqs = np.asarray(freqs)
    start = int(np.searchsorted(freqs, f_min, side="left"))
    stop  = int(np.searchsorted(freqs, f_max, side="right"))
    return slice(start, stop)


class AxisBuilder:
    def __init__(self, signal_length, sampling_rate):
        self.signal_length = int(signal_length)
        self.sampling_rate = float(sampling_rate)

    def time(self) -> np.ndarray:
        return time_axis(self.signal_length, self.sampling_rate)

    def frequency(self) -> np.ndarray:
        return frequency_axis(self.signal_length, self.sampling_rate)
