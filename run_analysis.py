import warnings
warnings.filterwarnings("ignore", category=UserWarning)

import sys
import argparse

import numpy as np

from am_analysis.base import ModulationParameters, SignalConfig, AnalysisError, CHANNELS
from am_analysis.pipeline import analyze, peak_frequency
from am_analysis.plot import plot_analysis


def parse_args(argv=None):
    CARRIER_FREQ     = 100.0
    INFORMATION_FREQ = 10.0
    MODULATION_INDEX = 0.5
    SIGNAL_LENGTH    = 4096
    F_MAX            = 200.0

    parser = argparse.ArgumentParser(description="AM modulation: time signals and magnitude spectra")
    parser.add_argument("--carrier", type=float, default=CARRIER_FREQ, help="carrier frequency (Hz)")
    parser.add_argument("--information", type=float, default=INFORMATION_FREQ, help="information frequency (Hz)")
    parser.add_argument("--index", type=float, default=MODULATION_INDEX, help="modulation index [0,1]")
    parser.add_argument("--length", type=int, default=SIGNAL_LENGTH, help="samples, power of two")
    parser.add_argument("--rate", type=float, default=None, help="sampling rate (Hz), defaults to --length")
    parser.add_argument("--fmax", type=float, default=F_MAX, help="upper display frequency (Hz)")
    parser.add_argument("--out", default="plots/am_analysis.png")
    parser.add_argument("--show", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    print("[INFO] Starting AM Analysis")

    try:
        config = SignalConfig(args.length, args.rate).validate()
        print(f"[INFO] N = {config.signal_length}, fs = {config.sampling_rate} Hz, "
              f"resolution = {config.bin_width} Hz/bin")

        params = ModulationParameters.from_values(args.carrier, args.information, args.index)
        for name, freq in (("carrier_freq", params.carrier_freq),
                           ("information_freq", params.information_freq)):
            if config.aliases(freq):
                print(f"[WARNING] {name} {freq} Hz is at/above Nyquist ({config.nyquist} Hz), it will alias")

        result = analyze(params, config)
    except AnalysisError as e:
        print(f"[ERROR] {type(e).__name__}: {e}")
        return 1

    print("-----------------------------------------------------------------------------")
    for name in CHANNELS:
        samples, spectrum = result.channel(name)
        print(f"{name:<12} peak: {peak_frequency(result, name):8.2f} Hz   "
              f"|X|max: {np.max(spectrum):10.3f}   x[0]: {samples[0]:+.3f}")
    print("-----------------------------------------------------------------------------")

    plot_analysis(result, args.out, show=args.show, f_max=args.fmax)
    return 0


if __name__ == "__main__":
    sys.exit(main())
