"""
Synthesized sound cues.

No sample files: each cue is a short square-wave beep generated with numpy
and handed to pygame.sndarray. If no audio device is available the board
stays silent and play() becomes a no-op.
"""

from __future__ import annotations

import numpy as np

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]


SAMPLE_RATE = 44100

# cue name -> (frequency Hz, duration s)
CUE_TONES: dict[str, tuple[float, float]] = {
    "move": (440.0, 0.03),
    "rotate": (880.0, 0.04),
    "hold": (523.0, 0.06),
    "hard-drop": (180.0, 0.08),
    "lock": (220.0, 0.06),
    "line-clear": (660.0, 0.15),
    "game-over": (110.0, 0.5),
}


def square_wave(freq: float, duration: float, volume: float = 0.1,
                sample_rate: int = SAMPLE_RATE, channels: int = 2) -> np.ndarray:
    """Return an int16 sample array of a square wave.

    Args:
        freq: Tone frequency in Hz.
        duration: Length in seconds.
        volume: Peak amplitude in [0, 1].
        sample_rate: Samples per second.
        channels: 1 for mono, 2 for stereo (columns are duplicated).

    Returns:
        Array of shape (samples,) for mono or (samples, channels).
    """
    t = np.linspace(0, duration, int(sample_rate * duration), False)
    wave = np.sign(np.sin(2 * np.pi * freq * t)) * volume
    samples = (wave * 32767).astype(np.int16)
    if channels == 1:
        return samples
    return np.ascontiguousarray(np.column_stack([samples] * channels))


class SoundBoard:
    """Plays one beep per game cue; pass `play` as TetrisGame's on_cue.

    Attributes:
        enabled: False when audio could not be initialized.
    """

    def __init__(self, enabled: bool = True, volume: float = 0.1) -> None:
        self.enabled = False
        self._sounds: dict = {}
        if not enabled or pygame is None:
            return
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
            rate, _, channels = pygame.mixer.get_init()
            for cue, (freq, duration) in CUE_TONES.items():
                samples = square_wave(freq, duration, volume, rate, channels)
                self._sounds[cue] = pygame.sndarray.make_sound(samples)
        except pygame.error as e:
            print(f"Audio disabled: {e}")
            self._sounds = {}
            return
        self.enabled = True

    def play(self, cue: str) -> None:
        """Start the beep for a cue without waiting for it to finish."""
        if not self.enabled:
            return
        sound = self._sounds.get(cue)
        if sound is not None:
            sound.play()
