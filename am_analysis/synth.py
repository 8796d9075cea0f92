# synth.py

import numpy as np
from am_analysis.base import *
from typing import *


class SignalSynthesizer:
    def __init__(self, config: SignalConfig = None):
        config = config or SignalConfig()
        self.signal_length = int(config.signal_length)
        self.sampling_rate = config.fs

    def tone(self, freq) -> np.ndarray:
        n = np.arange(self.signal_length)
        return np.sin(2.0 * np.pi * freq * n / self.sampling_rate)

    def modulate(self, params: ModulationParameters) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Returns (carrier, information, modulated), each with signal_length samples.
        No range checks here, that happens in analyze().
        Tones at/above Nyquist alias silently, see SignalConfig.aliases.
        """
        fc = float(params.carrier_freq)
        fi = float(params.information_freq)
        m  = float(params.modulation_index)

        carrier     = self.tone(fc)
        information = self.tone(fi)

        # envelope 1 + m.x(t)
        modulated = (1.0 + m * information) * carrier

        return carrier, information, modulated
