#!/usr/bin/env python3
#
# PROJECT: zbuffer-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import argparse
import logging
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from zbuffer_renderer.config import RenderConfig
from zbuffer_renderer.color import parse_hex_color
from zbuffer_renderer.demo import main as demo_main
from zbuffer_renderer.zbuffer import BACKGROUND_COLOR


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                                  Space reveals the demo polygons one by one
  %(prog)s --reveal-all                     Start with every polygon drawn
  %(prog)s --bg-color #1A1A2E --mono        Dark background, ASCII shading
  %(prog)s --dump-index 3 --dump-file z.txt Dump the 3rd polygon's box
  %(prog)s --log-file zb.log --verbose      Debug log of every fill
"""
    parser = argparse.ArgumentParser(
        description="Z-Buffer polygon rasterizer (terminal demo)",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--width", type=int, default=800,
                        help="Buffer width in pixels (default: 800)")
    parser.add_argument("--height", type=int, default=600,
                        help="Buffer height in pixels (default: 600)")
    parser.add_argument("--max-depth", type=float, default=1000.0,
                        help="Sentinel depth for cleared cells (default: 1000.0)")
    parser.add_argument("--bg-color", default="#FFFFFF",
                        help="Background color in hex #RRGGBB (default: #FFFFFF)")
    parser.add_argument("--min-vertices", type=int, default=3,
                        help="Smallest accepted vertex count (default: 3)")
    parser.add_argument("--max-vertices", type=int, default=6,
                        help="Largest accepted vertex count (default: 6)")
    parser.add_argument("--dump-file", default="zbuffer_output.txt",
                        help="Buffer dump path (default: zbuffer_output.txt)")
    parser.add_argument("--dump-index", type=int, default=1,
                        help="Dump the bounding box of the N-th fill, 0 disables (default: 1)")
    parser.add_argument("--mono", action="store_true",
                        help="Force monochrome ASCII output")
    parser.add_argument("--reveal-all", action="store_true",
                        help="Draw every polygon from the start")
    parser.add_argument("--log-file",
                        help="Write log messages to this file")
    parser.add_argument("--verbose", action="store_true",
                        help="Log at DEBUG level")
    return parser.parse_args(argv)


def build_config(args) -> RenderConfig:
    bg = parse_hex_color(args.bg_color)
    if bg is None:
        print(f"Warning: invalid --bg-color '{args.bg_color}', using #FFFFFF",
              file=sys.stderr)
        bg = BACKGROUND_COLOR
    config = RenderConfig.detect_terminal(
        width=args.width, height=args.height, max_depth=args.max_depth,
        background=bg, min_vertices=args.min_vertices,
        max_vertices=args.max_vertices, dump_file=args.dump_file,
        dump_index=args.dump_index)
    if args.mono:
        config.use_color = False
    return config


if __name__ == "__main__":
    args = parse_args()
    if args.log_file:
        # curses owns the terminal, so logs only go to a file
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG if args.verbose else logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    try:
        curses.wrapper(lambda s: demo_main(s, config, reveal_all=args.reveal_all))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        curses.endwin()
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
