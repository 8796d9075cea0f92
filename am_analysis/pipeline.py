import numpy as np
from am_analysis.base import *
from am_analysis.synth import SignalSynthesizer
from am_analysis.window import Windower
from am_analysis.spectrum import SpectrumAnalyzer
from am_analysis.axis import AxisBuilder


def analyze(params: ModulationParameters, config: SignalConfig = None) -> AnalysisResult:
    """
    parameters -> synth -> hamming -> radix-2 FFT -> |X| (first N/2 bins)

    Everything is recomputed on every call, nothing is cached.
    Raises InvalidParameter for bad params, NumericAnomaly for a bad config.
    """
    config = (config or SignalConfig()).validate()
    params = params.validate()

    N  = int(config.signal_length)
    fs = float(config.sampling_rate)

    synth    = SignalSynthesizer(config)
    windower = Windower(N)
    analyzer = SpectrumAnalyzer(N)
    axes     = AxisBuilder(N, fs)

    carrier, information, modulated = synth.modulate(params)

    windowed = [windower.apply(s) for s in (carrier, information, modulated)]
    carrier_spec, information_spec, modulated_spec = analyzer.analyze(*windowed)

    return AnalysisResult(
        params=params,
        config=config,
        carrier=carrier,
        information=information,
        modulated=modulated,
        carrier_spectrum=carrier_spec,
        information_spectrum=information_spec,
        modulated_spectrum=modulated_spec,
        time_axis=axes.time(),
        frequency_axis=axes.frequency(),
    )


def peak_frequency(result: AnalysisResult, channel: str) -> float:
    _, spectrum = result.channel(channel)
    return float(result.frequency_axis[int(np.argmax(spectrum))])
