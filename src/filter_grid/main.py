"""Main application entry point for Filter Grid."""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from filter_grid import __version__
from filter_grid.application.facade import FilterGridFacade
from filter_grid.infrastructure.config import get_config_manager
from filter_grid.infrastructure.config.paths import get_log_dir
from filter_grid.infrastructure.logging import LogContext, setup_logging
from filter_grid.shared.exceptions import FilterGridError


def setup_argument_parser() -> argparse.ArgumentParser:
    """Setup command line argument parser.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog='filter-grid',
        description='Record grid with an embedded per-column filter row',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '--debug',
        type=str,
        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default=None,
        help='Debug level (default: from config, INFO)'
    )

    parser.add_argument(
        '--seed',
        type=Path,
        help='YAML file with records to load (default: built-in samples)'
    )

    parser.add_argument(
        '--config',
        type=Path,
        help='Configuration file (default: platform config directory)'
    )

    parser.add_argument(
        '--no-gui',
        action='store_true',
        help='Run one filter query and print the matches'
    )

    parser.add_argument(
        '--code',
        default='',
        help='Substring filter on the Code column (with --no-gui)'
    )

    parser.add_argument(
        '--description',
        default='',
        help='Substring filter on the Description column (with --no-gui)'
    )

    return parser


def run_cli_mode(args: argparse.Namespace, facade: FilterGridFacade) -> int:
    """Run one query and print the matching records.

    Args:
        args: Parsed command line arguments
        facade: Application facade

    Returns:
        Exit code (0 for success)
    """
    facade.open(args.seed)
    with LogContext(operation="search", code=args.code, description=args.description):
        records = facade.search(code=args.code, description=args.description)

    for record in records:
        print(f"{record.code:<14}{record.description}")
    print(f"{len(records)} record(s)", file=sys.stderr)
    return 0


def run_gui_mode(args: argparse.Namespace, facade: FilterGridFacade) -> int:
    """Run in GUI mode.

    Args:
        args: Parsed command line arguments
        facade: Application facade

    Returns:
        Exit code (0 for success)
    """
    from PyQt5.QtWidgets import QApplication
    from filter_grid.presentation.gui.main_window import MainWindow
    from filter_grid.presentation.gui.qt_scheduler import QtScheduler

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Filter Grid")
    app.setOrganizationName("FilterGrid")

    with LogContext(operation="gui_startup"):
        facade.open(args.seed)
        controller = facade.create_controller(QtScheduler(app))

        window = MainWindow(controller, facade.config)
        # Form load: first, unfiltered page
        controller.initialize()
        window.show()

        return app.exec_()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Exit code
    """
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    logger = setup_logging(log_level=args.debug or "INFO", console_output=True)

    try:
        config = get_config_manager(args.config).get_config()
        log_level = args.debug or config.log_level
        if args.no_gui:
            logger = setup_logging(log_level=log_level, console_output=True)
        else:
            logger = setup_logging(
                log_level=log_level,
                log_file=get_log_dir() / "log.jsonl",
                console_output=True,
                json_output=True
            )

        facade = FilterGridFacade(config)
        try:
            if args.no_gui:
                return run_cli_mode(args, facade)
            return run_gui_mode(args, facade)
        finally:
            facade.close()

    except FilterGridError as e:
        logger.error(f"Error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
