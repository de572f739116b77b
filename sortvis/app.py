import logging
import sys

import pygame

from .algorithms import ALGORITHMS
from .data import DATA_KINDS
from .driver import RunOutcome, SortDriver
from .render import PygameRenderer, draw_bars
from .settings import (
    DEFAULT_ALGORITHM, DEFAULT_DATA_KIND, DEFAULT_SIZE, DEFAULT_SPEED,
    ENABLE_SOUND, FPS, MAX_SIZE, MIN_SIZE, SIZE_STEP, TEXT_COLOR,
    WINDOW_HEIGHT, WINDOW_WIDTH,
)
from .sound import ToneSynth

logger = logging.getLogger(__name__)

HELP = "<- -> algorithm   up/down size   TAB data   R shuffle   S sound   SPACE start   ESC stop/quit"

STATUS = {
    RunOutcome.SORTED:    "SORTED",
    RunOutcome.GAVE_UP:   "GAVE UP (attempt ceiling)",
    RunOutcome.CANCELLED: "CANCELLED",
}


class App:
    def __init__(self, screen, synth):
        self.screen  = screen
        self.synth   = synth
        self.sel     = [k for _, k in ALGORITHMS].index(DEFAULT_ALGORITHM)
        self.kind    = DEFAULT_DATA_KIND
        self.size    = DEFAULT_SIZE
        self.status  = ""
        self.quit    = False
        self.reshuffle_pending = False

        self.renderer = PygameRenderer(screen, synth, self.on_run_event)
        self.driver   = SortDriver(render=self.renderer,
                                   sleep=lambda s: pygame.time.wait(int(s * 1000)),
                                   speed=DEFAULT_SPEED)
        self.driver.generate(self.kind, self.size)

    # ---- events while a run is active ----
    def on_run_event(self, ev):
        if ev.type == pygame.QUIT:
            self.quit = True
            self.driver.cancel_run()
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_ESCAPE:
                self.driver.cancel_run()
            elif ev.key == pygame.K_r:
                self.reshuffle_pending = True
                self.driver.cancel_run()
            elif ev.key == pygame.K_s:
                self.synth.enabled = not self.synth.enabled

    # ---- events while idle ----
    def handle(self, ev):
        if ev.type == pygame.QUIT:
            self.quit = True
        if ev.type != pygame.KEYDOWN:
            return
        k = ev.key
        if k == pygame.K_ESCAPE:
            self.quit = True
        elif k == pygame.K_LEFT:
            self.sel = (self.sel - 1) % len(ALGORITHMS)
        elif k == pygame.K_RIGHT:
            self.sel = (self.sel + 1) % len(ALGORITHMS)
        elif k in (pygame.K_UP, pygame.K_DOWN):
            d = SIZE_STEP if k == pygame.K_UP else -SIZE_STEP
            self.size = max(MIN_SIZE, min(MAX_SIZE, self.size + d))
            self.shuffle()
        elif k == pygame.K_TAB:
            self.kind = DATA_KINDS[(DATA_KINDS.index(self.kind) + 1) % len(DATA_KINDS)]
            self.shuffle()
        elif k == pygame.K_r:
            self.shuffle()
        elif k == pygame.K_s:
            self.synth.enabled = not self.synth.enabled
        elif k in (pygame.K_SPACE, pygame.K_RETURN):
            self.run()

    def shuffle(self):
        if self.driver.generate(self.kind, self.size):
            self.status = ""

    def run(self):
        name, key = ALGORITHMS[self.sel]
        self.renderer.label = name
        result = self.driver.start_run(key)
        self.status = f"{name}: {STATUS[result.outcome]} in {result.steps} steps"
        if self.reshuffle_pending:
            self.reshuffle_pending = False
            self.driver.generate(self.kind, self.size)

    def draw(self):
        name, _ = ALGORITHMS[self.sel]
        snd = "on" if self.synth.enabled else "off"
        label = f"{name}   {self.kind} x{self.size}   sound {snd}   {self.status}"
        draw_bars(self.screen, self.driver.data, (), label)
        f = pygame.font.SysFont("consolas", 14)
        self.screen.blit(f.render(HELP, True, TEXT_COLOR), (12, 34))
        pygame.display.flip()


def main():
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    synth = ToneSynth()
    if ENABLE_SOUND:
        try:
            synth.start()
        except pygame.error as e:
            logger.warning("Sound disabled: %s", e)
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption("sortvis")
    clock = pygame.time.Clock()

    app = App(screen, synth)
    while not app.quit:
        clock.tick(FPS)
        for ev in pygame.event.get():
            app.handle(ev)
            if app.quit: break
        app.draw()

    synth.stop()
    pygame.quit()
    sys.exit()
