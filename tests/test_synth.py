import numpy as np

from am_analysis.base import ModulationParameters, SignalConfig
from am_analysis.synth import SignalSynthesizer


def test_lengths_follow_config():
    synth = SignalSynthesizer(SignalConfig(512, 512.0))
    c, x, s = synth.modulate(ModulationParameters(50, 5, 0.3))
    assert c.shape == x.shape == s.shape == (512,)


def test_first_sample_is_zero():
    c, x, s = SignalSynthesizer().modulate(ModulationParameters(100, 10, 0.5))
    assert c[0] == 0.0
    assert x[0] == 0.0
    assert s[0] == 0.0


def test_zero_index_leaves_carrier_untouched():
    c, _, s = SignalSynthesizer().modulate(ModulationParameters(100, 10, 0.0))
    assert np.array_equal(s, c)


def test_envelope_formula():
    c, x, s = SignalSynthesizer().modulate(ModulationParameters(100, 10, 0.8))
    np.testing.assert_allclose(s, (1 + 0.8 * x) * c)
    assert np.max(np.abs(s)) <= 1.8 + 1e-12


def test_tone_matches_sine():
    synth = SignalSynthesizer(SignalConfig(8, 8.0))
    np.testing.assert_allclose(synth.tone(1.0), np.sin(2 * np.pi * np.arange(8) / 8), atol=1e-15)


def test_synthesis_above_nyquist_is_silent(capsys):
    c, _, _ = SignalSynthesizer().modulate(ModulationParameters(3000, 10, 0.5))
    assert c.shape == (4096,)
    assert capsys.readouterr().out == ""


def test_default_rate_follows_length():
    synth = SignalSynthesizer(SignalConfig(1024))
    assert synth.sampling_rate == 1024.0
    # whole number of cycles over one second
    np.testing.assert_allclose(synth.tone(1.0), np.sin(2 * np.pi * np.arange(1024) / 1024))
