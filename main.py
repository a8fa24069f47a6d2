"""
Entry-point.  Keeps top-level script tiny.
"""
import logging
import signal
import sys

import pygame
from radarscope import config, gui
from radarscope.errors import RadarError

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def main():
    cfg = config.load()
    try:
        config.validate(cfg)
        logging.basicConfig(level=cfg["log_level"], format=LOG_FORMAT)
        pygame.init()
        app = gui.RadarGUI(cfg)
        for sig in (signal.SIGINT, signal.SIGTERM):
            signal.signal(sig, lambda *_: app.stop.set())
        app.run()
    except RadarError as exc:
        logging.basicConfig(format=LOG_FORMAT)     # no-op once configured
        logging.getLogger("radarscope").error("%s", exc)
        sys.exit(1)
    finally:
        pygame.quit()
    config.save(cfg)

if __name__ == "__main__":
    main()
