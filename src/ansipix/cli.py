import argparse
import logging
import sys

from PIL import Image

from ansipix.config import Settings
from ansipix.converter import image_to_ansi, load_image
from ansipix.glyphs import CLEAR
from ansipix.logging_conf import setup_logging

log = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render an image in the terminal with truecolor ANSI escapes")
    parser.add_argument("image", help="Path to input image")
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    setup_logging(settings.log_level)

    try:
        image = load_image(args.image)
        frame = image_to_ansi(image, background=settings.background, workers=settings.workers)
    except (OSError, Image.DecompressionBombError) as exc:
        log.debug("Render failed", exc_info=True)
        print(f"ansipix: {exc}", file=sys.stderr)
        sys.exit(1)

    sys.stdout.write(CLEAR + frame)
    sys.stdout.flush()
