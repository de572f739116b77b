import pygame

from .settings import (
    BACKGROUND_COLOR, DONE_TONE_HZ, HIGHLIGHT_COLOR, HIGHLIGHT_TONE_HZ,
    LONG_TONE_DURATION, MAX_DRAWN_BARS, SUBTEXT_COLOR, TONE_DURATION,
    TONE_OFFSET_HZ,
)
from .steps import StepKind

# ============================================================
# ======================= COLOR / DRAW =======================
# ============================================================

def interpolate_color(value, lo, hi):
    """Warm ramp: deep orange at the minimum, pale yellow at the maximum."""
    r = (value - lo) / ((hi - lo) or 1)
    return (255, int(80 + r * 175), int(r * 50))


def draw_bars(screen, values, highlight=(), label=""):
    screen.fill(BACKGROUND_COLOR)
    n = len(values)
    if n:
        w, h = screen.get_size()
        lo, hi = min(values), max(values)
        bw   = w / n
        skip = -(-n // MAX_DRAWN_BARS)
        for i in range(0, n, skip):
            v  = values[i]
            bh = (v - lo) / (hi - lo + 1) * (h - 20)
            c  = HIGHLIGHT_COLOR if i in highlight else interpolate_color(v, lo, hi)
            pygame.draw.rect(screen, c, (i * bw, h - bh, bw * skip, bh))
    if label:
        f = pygame.font.SysFont("consolas", 18)
        screen.blit(f.render(label, True, SUBTEXT_COLOR), (12, 10))


def step_tone(step):
    """Pick the (frequency, seconds) cue for a step, or None for silence."""
    if step.kind is StepKind.DONE:
        return DONE_TONE_HZ, LONG_TONE_DURATION
    if not step.indices:
        if step.kind is StepKind.HIGHLIGHT:
            return HIGHLIGHT_TONE_HZ, LONG_TONE_DURATION
        return None
    i = step.indices[0]
    if not 0 <= i < len(step.snapshot):
        return None
    offset = TONE_OFFSET_HZ * (2 if step.kind is StepKind.HIGHLIGHT else 1)
    return step.snapshot[i] + offset, TONE_DURATION


class PygameRenderer:
    """
    Presentation adapter: draws each step and plays its cue.

    Window events are pumped on every step so the app can cancel a run
    from its on_event hook while the driver is blocked inside it.
    """

    def __init__(self, screen, synth=None, on_event=None, label=""):
        self.screen   = screen
        self.synth    = synth
        self.on_event = on_event
        self.label    = label

    def __call__(self, step):
        self.render(step)

    def render(self, step):
        for ev in pygame.event.get():
            if self.on_event: self.on_event(ev)
        lbl = self.label + ("  [DONE]" if step.kind is StepKind.DONE else "")
        draw_bars(self.screen, step.snapshot, step.indices, lbl)
        pygame.display.flip()
        cue = step_tone(step)
        if cue and self.synth:
            self.synth.play(*cue)
