"""Tests for the presentation helpers (colors, bars, tones)."""

import numpy as np
import pygame
import pytest

from sortvis.render import PygameRenderer, draw_bars, interpolate_color, step_tone
from sortvis.settings import BACKGROUND_COLOR, HIGHLIGHT_COLOR
from sortvis.sound import ToneSynth, tone_buffer
from sortvis.steps import StepKind, make_step


class TestInterpolateColor:
    def test_endpoints(self):
        assert interpolate_color(0, 0, 10) == (255, 80, 0)
        assert interpolate_color(10, 0, 10) == (255, 255, 50)

    def test_flat_range(self):
        assert interpolate_color(7, 7, 7) == (255, 80, 0)


class TestDrawBars:
    def test_highlight_and_background(self):
        surf = pygame.Surface((100, 50))
        draw_bars(surf, [0, 10], highlight=(1,))
        # the minimum has zero height, the highlighted maximum is most of the height
        assert tuple(surf.get_at((25, 45)))[:3] == BACKGROUND_COLOR
        assert tuple(surf.get_at((75, 45)))[:3] == HIGHLIGHT_COLOR

    def test_unhighlighted_bar_uses_ramp(self):
        surf = pygame.Surface((100, 50))
        draw_bars(surf, [0, 10])
        assert tuple(surf.get_at((75, 45)))[:3] == interpolate_color(10, 0, 10)

    def test_empty_values(self):
        surf = pygame.Surface((20, 20))
        draw_bars(surf, [])
        assert tuple(surf.get_at((10, 10)))[:3] == BACKGROUND_COLOR


class TestStepTone:
    def test_done(self):
        assert step_tone(make_step(StepKind.DONE, [1, 2])) == (800.0, 0.2)

    def test_value_plus_offset(self):
        assert step_tone(make_step(StepKind.COMPARE, [5, 7], (1, 0))) == (107.0, 0.05)

    def test_highlight(self):
        assert step_tone(make_step(StepKind.HIGHLIGHT, [5, 7])) == (440.0, 0.2)
        assert step_tone(make_step(StepKind.HIGHLIGHT, [5, 7], (0,))) == (205.0, 0.05)

    def test_silent_shuffle(self):
        assert step_tone(make_step(StepKind.SWAP, [2, 1])) is None


class TestPygameRenderer:
    def test_forwards_events_and_plays(self, monkeypatch):
        events, tones = [], []
        ev = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
        monkeypatch.setattr(pygame.event, "get", lambda: [ev])
        monkeypatch.setattr(pygame.display, "flip", lambda: None)

        class Synth:
            def play(self, freq, seconds):
                tones.append((freq, seconds))

        r = PygameRenderer(pygame.Surface((40, 40)), Synth(), events.append)
        r(make_step(StepKind.SWAP, [3, 1], (0, 1)))
        assert events == [ev]
        assert tones == [(103.0, 0.05)]

    def test_keyword_arguments(self):
        r = PygameRenderer(pygame.Surface((40, 40)), synth=None, on_event=None, label="Heap Sort")
        assert r.label == "Heap Sort"
        assert r.synth is None and r.on_event is None


class TestToneBuffer:
    def test_shape_and_envelope(self):
        buf = tone_buffer(440.0, 0.01, sample_rate=8000, volume=0.5)
        assert buf.shape == (80, 2)
        assert buf.dtype == np.int16
        assert buf[0, 0] == 0
        assert np.array_equal(buf[:, 0], buf[:, 1])
        assert np.abs(buf).max() <= int(0.5 * 32767)

    def test_minimum_length(self):
        assert tone_buffer(440.0, 0.0).shape == (1, 2)


class TestToneSynth:
    def test_play_before_start_is_noop(self):
        synth = ToneSynth()
        synth.play(440.0)
        assert synth._last == 0.0

    def test_stop_without_start(self):
        ToneSynth().stop()
