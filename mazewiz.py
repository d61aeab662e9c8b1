# --- mazewiz.py ---
import argparse
import logging
import os
import sys

from maze_lib.config import ConfigService, DEFAULT_COLORS
from maze_lib.log_utils import setup_logging
from maze_lib.service import solve_rectangular_maze

APPROVED_EXTENSIONS = ("bmp", "jpg", "png")

DESCRIPTION = (
    "Solves a maze image and outputs a solved version. The maze must follow "
    "these pixel-color rules:\n"
    "  Entrance: red pixels   (RGB 255, 0, 0)\n"
    "  Exit:     blue pixels  (RGB 0, 0, 255)\n"
    "  Walls:    black pixels (RGB 0, 0, 0)\n"
    "The maze must also be fully surrounded by black walls. "
    "The solution, if found, is painted in green."
)


def get_cli_args(argv=None):
    """Configures and parses command-line arguments."""
    supported = ", ".join(APPROVED_EXTENSIONS)
    p = argparse.ArgumentParser(
        prog="mazewiz",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "source", help=f"The maze image to solve. Supported file types: [{supported}]."
    )
    p.add_argument(
        "destination",
        help=f"The output image to write. Supported file types: [{supported}].",
    )
    p.add_argument(
        "--overwrite",
        "--o",
        action="store_true",
        help="Allow overwriting the destination file if it already exists.",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="INI file overriding the maze colors ([Colors] section).",
    )
    # Logging arguments
    g_log = p.add_argument_group("Logging & Output")
    g_log.add_argument(
        "-v", "--verbose", action="store_true", help="Enable INFO logging."
    )
    g_log.add_argument(
        "--color-logs", action="store_true", help="Enable colored logging."
    )
    g_log.add_argument(
        "--log-file", metavar="FILE", help="Redirect log output to a file."
    )
    g_log.add_argument(
        "-d",
        "--debug",
        nargs="?",
        const="all",
        dest="debug_topics",
        metavar="TOPICS",
        help="Enable DEBUG logging (all,analysis,regions,segments,solver,trim,render,config).",
    )
    g_log.add_argument(
        "--ascii-debug",
        action="store_true",
        help="Log an ASCII map of the maze and its solution.",
    )
    g_log.add_argument(
        "--save-intermediate",
        metavar="DIR",
        help="Save a corridor debug image to a directory.",
    )
    g_log.add_argument(
        "--report", metavar="FILE", help="Write a JSON summary of the solve."
    )
    return p.parse_args(argv)


def _has_approved_extension(path: str) -> bool:
    ext = os.path.splitext(path)[1].lstrip(".").lower()
    return ext in APPROVED_EXTENSIONS


def validate_arguments(args) -> list:
    """Checks the source and destination paths, collecting every problem found."""
    errors = []

    if not os.path.isfile(args.source):
        errors.append("Argument 'source': file does not exist.")
    if not _has_approved_extension(args.source):
        errors.append("Argument 'source': invalid file type.")

    if not _has_approved_extension(args.destination):
        errors.append("Argument 'destination': invalid file type.")
    dest_dir = os.path.dirname(os.path.abspath(args.destination))
    if not os.path.isdir(dest_dir):
        errors.append("The specified directory for argument 'destination' does not exist.")
    elif os.path.exists(args.destination) and not args.overwrite:
        errors.append(
            "Destination file already exists. Use --overwrite to allow replacing it."
        )

    return errors


def write_errors(errors) -> None:
    print("Unable to solve maze:", file=sys.stderr)
    for error in errors:
        print(error, file=sys.stderr)


def main(argv=None) -> int:
    """Main entry point for the mazewiz CLI."""
    args = get_cli_args(argv)
    log_level = logging.INFO if args.verbose else logging.WARNING
    if args.debug_topics:
        log_level = logging.DEBUG

    setup_logging(log_level, args.color_logs, args.debug_topics, args.log_file)
    log = logging.getLogger("mazewiz.main")
    log.info("--- MAZEWIZ CLI Initialized ---")
    log.debug("Arguments received: %s", vars(args))

    errors = validate_arguments(args)
    if errors:
        write_errors(errors)
        return 1

    colors = DEFAULT_COLORS
    if args.config:
        try:
            colors = ConfigService(args.config).get_colors()
        except ValueError as e:
            write_errors([f"Invalid configuration: {e}"])
            return 1

    if args.save_intermediate:
        try:
            os.makedirs(args.save_intermediate, exist_ok=True)
        except OSError as e:
            log.error("Could not create intermediate image directory: %s", e)
            args.save_intermediate = None

    success, errors = solve_rectangular_maze(
        args.source,
        args.destination,
        colors=colors,
        ascii_debug=args.ascii_debug,
        save_intermediate_path=args.save_intermediate,
        report_path=args.report,
    )
    if not success:
        write_errors(errors)
        return 1

    log.info("--- Processing complete. ---")
    return 0


if __name__ == "__main__":
    sys.exit(main())
