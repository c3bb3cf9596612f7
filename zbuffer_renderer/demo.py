#
# PROJECT: zbuffer-renderer
# MODULE: zbuffer_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import time

from .config import RenderConfig
from .renderer import Renderer
from .scene import Scene, default_scene
from .zbuffer import ZBuffer
from .export import DumpTrigger, dump_state

logger = logging.getLogger(__name__)


class DemoApp:
    """
    Interactive harness: each space press reveals one more polygon and
    re-renders the buffer. The buffer is only rebuilt when the scene
    changes, since a full pass in Python is far slower than a frame.
    """

    def __init__(self, stdscr, config: RenderConfig, scene: Scene = None,
                 reveal_all=False):
        self.stdscr = stdscr
        self.running = True
        self.dirty = True

        curses.curs_set(0)
        stdscr.nodelay(True)

        self.config = config
        self.buffer = ZBuffer.from_config(config)
        self.scene = scene if scene is not None else default_scene()
        if reveal_all:
            self.scene.reveal_all()

        self.renderer = Renderer(config)
        self.renderer.init_colors()

        self.dump_trigger = DumpTrigger(config.dump_file, config.dump_index)
        self.last_ms = 0.0
        self.status = ""

    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1

        if key == -1:
            return

        if key == ord('q'):
            self.running = False
        elif key == ord(' '):
            poly = self.scene.reveal_next()
            if poly is not None:
                self.dirty = True
                logger.debug(f"Revealed polygon {self.scene.revealed}/{len(self.scene)}")
        elif key == ord('r'):
            self.scene.reset()
            self.dump_trigger.reset()
            self.dirty = True
        elif key == ord('d'):
            if dump_state(self.buffer, self.config.dump_file):
                self.status = f"dumped to {self.config.dump_file}"
            else:
                self.status = "dump failed"
        elif key == curses.KEY_RESIZE:
            self.dirty = True

    def draw_hud(self):
        th, tw = self.stdscr.getmaxyx()
        hdr = (f" POLY:{self.scene.revealed}/{len(self.scene)}"
               f" | ACC:{self.renderer.accepted}"
               f" | {self.buffer.w}x{self.buffer.h}"
               f" | {self.last_ms:.1f}ms"
               f" | [SPACE] next [r] reset [d] dump [q] quit ")
        if self.status:
            hdr += f"| {self.status} "
        try:
            self.stdscr.addstr(0, 0, hdr.center(tw - 1, '=')[:tw - 1],
                               curses.color_pair(0) | curses.A_BOLD)
        except curses.error:
            pass

    def run(self):
        while self.running:
            self.handle_input()

            if self.dirty:
                start_time = time.time()
                self.renderer.render_frame(self.buffer, self.scene,
                                           on_filled=self.dump_trigger)
                self.renderer.draw(self.stdscr, self.buffer)
                self.last_ms = (time.time() - start_time) * 1000
                self.dirty = False

            self.draw_hud()
            self.stdscr.refresh()
            time.sleep(0.02)


def main(stdscr, config, reveal_all=False):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, config, reveal_all=reveal_all)
    app.run()
