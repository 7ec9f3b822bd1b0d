import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from modelprint import (
    ASCII_TERMINAL,
    ModelFormatError,
    TERMINAL,
    latex_formulation,
    load_model_file,
    model_string,
)
from modelprint.render import name_or_default_name, name_or_noname

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Print an optimization model")
    parser.add_argument("path", help="Path to the JSON model description")
    parser.add_argument(
        "--latex",
        action="store_true",
        help="Emit a LaTeX display-math block instead of plain text",
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Restrict plain-text output to ASCII-safe symbols",
    )
    parser.add_argument(
        "--noname",
        action="store_true",
        help="Print unnamed variables as 'noname' instead of x[<index>]",
    )
    parser.add_argument(
        "--output",
        help="Write the document to the given path instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Loading model from %s", args.path)
    try:
        model = load_model_file(args.path)
    except (OSError, ModelFormatError) as exc:
        logger.error("Cannot load model: %s", exc)
        raise SystemExit(1)

    variable_name = name_or_noname if args.noname else name_or_default_name
    if args.latex:
        document = latex_formulation(model, variable_name=variable_name) + "\n"
    else:
        mode = ASCII_TERMINAL if args.ascii else TERMINAL
        document = model_string(mode, model, variable_name)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing document to %s", output_path)
        output_path.write_text(document, encoding="utf-8")
    else:
        sys.stdout.write(document)


if __name__ == "__main__":
    main(sys.argv[1:])
