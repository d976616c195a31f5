"""Entry point for numfield."""

import logging

from textual.logging import TextualHandler

from numfield.app import NumfieldApp
from numfield.config import parse_args, resolve_options


def main() -> None:
    """Run the numfield demo application."""
    args = parse_args()
    logging.basicConfig(level=args.log_level, handlers=[TextualHandler()])
    app = NumfieldApp(options=resolve_options(args))
    app.run()


if __name__ == "__main__":
    main()
