from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from combiner.controllers.combine_controller import CombineController
from combiner.errors import CombineError
from combiner.models.options_model import (
    DEFAULT_FORMAT,
    DEFAULT_OUT,
    DEFAULT_SIDE,
    MAX_INPUT_FILES,
    CombineOptions,
)

logger = logging.getLogger("combiner")

USAGE = "combiner [options] <file1> <file2> ..."
EXAMPLE = "Ex: combiner -format=png -side=bottom -out=go.png 1.png 2.png"


def setup_logging(verbose: bool = False) -> None:
    """Настраивает вывод лога в stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


class CombinerApp:
    def __init__(self, controller: Optional[CombineController] = None) -> None:
        self._controller = controller or CombineController()
        self._parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        p = argparse.ArgumentParser(
            prog="combiner",
            usage=USAGE,
            description=f"Склеивает до {MAX_INPUT_FILES} изображений PNG/JPEG снизу или справа.",
            epilog=EXAMPLE,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            add_help=False,
        )
        p.add_argument("-format", "--format", default=DEFAULT_FORMAT,
                       help=f"Формат выходного файла, png/jpg (default: {DEFAULT_FORMAT})")
        p.add_argument("-side", "--side", default=DEFAULT_SIDE,
                       help=f"bottom или right (default: {DEFAULT_SIDE})")
        p.add_argument("-out", "--out", default=DEFAULT_OUT,
                       help=f"Имя выходного файла (default: {DEFAULT_OUT})")
        p.add_argument("-v", "-verbose", "--verbose", action="store_true", help="Подробный лог")
        p.add_argument("-h", "-help", "--help", dest="show_help", action="store_true",
                       help="Показать справку и выйти")
        p.add_argument("files", nargs="*", help="Входные изображения (в порядке склейки)")
        return p

    def print_usage(self) -> None:
        self._parser.print_help(sys.stdout)

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Разбирает аргументы, выполняет склейку и возвращает код выхода.

        Единственное место, где ошибки конвейера превращаются в диагностику и код 1.
        """
        args = self._parser.parse_args(argv)
        if args.show_help:
            self.print_usage()
            return 0

        setup_logging(args.verbose)
        try:
            options = CombineOptions.from_namespace(args)
            self._controller.run(options)
        except CombineError as exc:
            logger.error("%s", exc)
            return 1
        return 0
