"""
Short sine cues for the visualizer.

Each cue is rendered up front into a numpy buffer and handed to the pygame
mixer as a Sound, so playback never blocks the sort loop.

ENVELOPE, raised-cosine (Hann) attack and release:
  Attack:  env[t] = 0.5 * (1 - cos(pi * t / A))          t in [0, A)
  Release: env[t] = 0.5 * (1 + cos(pi * (t - s) / R))    t in [s, s + R)
"""

import math
import time

import numpy as np
import pygame

from .settings import (
    SAMPLE_RATE, TONE_ATTACK, TONE_DURATION, TONE_RELEASE, TONE_VOLUME,
    TRIGGER_MIN_INTERVAL,
)

TWO_PI = 2.0 * math.pi


def tone_buffer(freq: float, seconds: float, sample_rate: int = SAMPLE_RATE,
                volume: float = TONE_VOLUME) -> np.ndarray:
    """Return an int16 (samples, 2) stereo buffer holding one enveloped sine."""
    n = max(1, int(seconds * sample_rate))
    t = np.arange(n, dtype=np.float64)
    wave = np.sin(TWO_PI * freq * t / sample_rate)

    env = np.ones(n, dtype=np.float64)
    a = min(n, max(1, int(TONE_ATTACK * sample_rate)))
    r = min(n, max(1, int(TONE_RELEASE * sample_rate)))
    env[:a] = 0.5 * (1.0 - np.cos(math.pi * t[:a] / a))
    env[n-r:] *= 0.5 * (1.0 + np.cos(math.pi * np.arange(r) / r))

    pcm = (np.clip(wave * env * volume, -1.0, 1.0) * 32767).astype(np.int16)
    return np.column_stack((pcm, pcm))


class ToneSynth:
    def __init__(self, sample_rate=SAMPLE_RATE, volume=TONE_VOLUME,
                 min_interval=TRIGGER_MIN_INTERVAL):
        self.sample_rate  = sample_rate
        self.volume       = volume
        self.min_interval = min_interval
        self.enabled      = True
        self._running     = False
        self._last        = 0.0

    def start(self):
        pygame.mixer.pre_init(self.sample_rate, -16, 2, 512)
        pygame.mixer.init()
        self._running = True

    def stop(self):
        if self._running:
            pygame.mixer.quit()
        self._running = False

    def play(self, freq: float, seconds: float = TONE_DURATION):
        if not (self._running and self.enabled):
            return
        now = time.monotonic()
        if now - self._last < self.min_interval:
            return
        self._last = now
        buf = tone_buffer(freq, seconds, self.sample_rate, self.volume)
        pygame.mixer.Sound(buffer=buf.tobytes()).play()
