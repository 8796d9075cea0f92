'''

AM ANALYSIS

s(t) = [1 + m . x(t)] . c(t)

c(t) = sin(2pif{c}t)   ... portadora (carrier)
x(t) = sin(2pif{i}t)   ... sinal de informacao

    --- m ~= Indice de modulacao, 0 <= m <= 1 (m > 1 => sobremodulacao)
    --- f{s} ~= Taxa de amostragem, por padrao f{s} = N => 1 segundo de sinal
    --- Resolucao em frequencia = f{s} / N Hz por bin
    --- Nyquist = f{s} / 2 ... so os primeiros N/2 bins sao exibidos

'''

import math
from typing import *

import numpy as np


class AnalysisError(Exception):
    pass


class InvalidParameter(AnalysisError, ValueError):
    """Frequency <= 0, modulation index outside [0,1], or a non-numeric value."""


class NumericAnomaly(AnalysisError, ArithmeticError):
    """Window/FFT length problems and NaN/Inf leaking into the results."""


def _as_float(name, value) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(value):
        raise InvalidParameter(f"{name} must be finite, got {value}")
    return value


class SignalConfig(NamedTuple):
    signal_length: int             = 4096
    sampling_rate: Optional[float] = None

    @property
    def fs(self) -> float:
        # None => sampling_rate == signal_length, one second of signal
        if self.sampling_rate is None:
            return float(self.signal_length)
        return float(self.sampling_rate)

    @property
    def nyquist(self) -> float:
        return self.fs / 2.0

    @property
    def bin_width(self) -> float:
        return self.fs / self.signal_length

    def aliases(self, freq) -> bool:
        return freq >= self.nyquist

    def validate(self) -> "SignalConfig":
        if int(self.signal_length) != self.signal_length or self.signal_length < 2:
            raise NumericAnomaly(f"signal_length must be an integer >= 2, got {self.signal_length}")
        try:
            fs = self.fs
        except (TypeError, ValueError):
            raise NumericAnomaly(f"sampling_rate must be a number, got {self.sampling_rate!r}") from None
        if not (math.isfinite(fs) and fs > 0):
            raise NumericAnomaly(f"sampling_rate must be > 0, got {self.sampling_rate}")
        return self._replace(signal_length=int(self.signal_length), sampling_rate=fs)


class ModulationParameters(NamedTuple):
    carrier_freq:     float = 100.0
    information_freq: float = 10.0
    modulation_index: float = 0.5

    @classmethod
    def from_values(cls, carrier_freq, information_freq, modulation_index):
        return cls(carrier_freq, information_freq, modulation_index).validate()

    def validate(self) -> "ModulationParameters":
        carrier_freq     = _as_float("carrier_freq", self.carrier_freq)
        information_freq = _as_float("information_freq", self.information_freq)
        modulation_index = _as_float("modulation_index", self.modulation_index)

        if carrier_freq <= 0:
            raise InvalidParameter(f"carrier_freq must be > 0, got {carrier_freq}")
        if information_freq <= 0:
            raise InvalidParameter(f"information_freq must be > 0, got {information_freq}")
        if not (0.0 <= modulation_index <= 1.0):
            raise InvalidParameter(f"modulation_index must be in [0, 1], got {modulation_index}")
        return self._replace(carrier_freq=carrier_freq,
                             information_freq=information_freq,
                             modulation_index=modulation_index)


CHANNELS = ("carrier", "information", "modulated")


class AnalysisResult(NamedTuple):
    params:               ModulationParameters
    config:               SignalConfig
    carrier:              np.ndarray
    information:          np.ndarray
    modulated:            np.ndarray
    carrier_spectrum:     np.ndarray
    information_spectrum: np.ndarray
    modulated_spectrum:   np.ndarray
    time_axis:            np.ndarray
    frequency_axis:       np.ndarray

    def channel(self, name) -> Tuple[np.ndarray, np.ndarray]:
        """Returns (samples, magnitude spectrum) for one of CHANNELS."""
        if name not in CHANNELS:
            raise KeyError(f"unknown channel {name!r}, expected one of {CHANNELS}")
        return getattr(self, name), getattr(self, name + "_spectrum")

    def frequency_slice(self, f_min, f_max) -> Dict[str, np.ndarray]:
        """
        Cuts the frequency axis and the three spectra to [f_min, f_max] Hz.
        The returned arrays stay index-aligned with each other.
        """
        from am_analysis.axis import frequency_range

        sl = frequency_range(self.frequency_axis, f_min, f_max)
        out = {"frequency_axis": self.frequency_axis[sl]}
        for name in CHANNELS:
            out[name] = getattr(self, name + "_spectrum")[sl]
        return out
