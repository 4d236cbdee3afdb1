#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import argparse
import sys

from .color import AVAILABLE, DEFAULT_COLOR, select_palette
from .config import RenderConfig, parse_speed_factor
from .demo import DonutApp
from .renderer import Renderer
from .terminal import Terminal, TerminalError


def build_parser():
    epilog = f"""\
Press 'q' or ESC to quit.

colors:
  {', '.join(AVAILABLE)}

examples:
  %(prog)s                  Green donut at normal speed
  %(prog)s red              Red donut
  %(prog)s cyan 2.5         Cyan donut, 2.5x faster
  %(prog)s white 0.5 --no-color
"""
    parser = argparse.ArgumentParser(
        description="Spinning ASCII torus for the terminal",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("color", nargs='?', default=DEFAULT_COLOR,
                        help=f"Color name (default: {DEFAULT_COLOR})")
    parser.add_argument("speed", nargs='?', default=None,
                        help="Positive speed factor (default: 1.0); "
                             "> 1.0 is faster, < 1.0 slower")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    return parser


def parse_args(argv=None):
    """
    Parse the command line.

    Only `-h` and `--long` options are treated as flags; every other word is
    a positional value, so a speed like `-1` or `-fast` reaches the speed
    check instead of being mistaken for an option.  Surplus positional
    arguments are ignored with a warning rather than rejected.
    """
    if argv is None:
        argv = sys.argv[1:]
    options, values = split_argv(argv)

    parser = build_parser()
    args = parser.parse_args(options)
    if values:
        args.color = values[0]
    if len(values) > 1:
        args.speed = values[1]
    if len(values) > 2:
        print(f"Warning: Too many arguments. Use '{parser.prog} --help' for help.",
              file=sys.stderr)
    return args


def split_argv(argv):
    """Separate option flags from positional values; `--` ends the options."""
    options, values = [], []
    for pos, arg in enumerate(argv):
        if arg == '--':
            values.extend(argv[pos + 1:])
            break
        if arg == '-h' or arg.startswith('--'):
            options.append(arg)
        else:
            values.append(arg)
    return options, values


def build_config(args) -> RenderConfig:
    config = RenderConfig.detect_terminal()
    config.color = args.color
    if args.speed is not None:
        config.speed_factor = parse_speed_factor(args.speed)
    if args.no_color:
        config.use_color = False
    return config


def main(argv=None) -> int:
    args = parse_args(argv)
    config = build_config(args)
    # Resolve the palette (and warn) before raw mode clears the screen
    palette = select_palette(config.color) if config.use_color else None
    renderer = Renderer(palette)

    try:
        with Terminal() as terminal:
            app = DonutApp(terminal, config, renderer)
            app.run()
    except TerminalError as e:
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


def run():
    """Console-script entry point."""
    sys.exit(main())
