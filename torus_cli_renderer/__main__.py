#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/__main__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

from .cli import run

if __name__ == "__main__":
    run()
