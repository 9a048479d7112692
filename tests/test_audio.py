"""Tests for the synthesized beep samples (no audio device needed)."""

from __future__ import annotations

import numpy as np

from src.audio import CUE_TONES, square_wave
from src.game import tetris


def test_square_wave_stereo_int16():
    samples = square_wave(440.0, 0.1, sample_rate=8000)
    assert samples.shape == (800, 2)
    assert samples.dtype == np.int16
    assert np.array_equal(samples[:, 0], samples[:, 1])


def test_square_wave_mono():
    assert square_wave(440.0, 0.05, sample_rate=8000, channels=1).shape == (400,)


def test_every_game_cue_has_a_tone():
    cues = {value for name, value in vars(tetris).items() if name.startswith("CUE_")}
    assert cues <= set(CUE_TONES)
