import argparse
import logging
import sys

from unix_emulator.exceptions import BaseAppError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str, log_file: str | None) -> None:
    """Send logs to a file when configured so they never mix with the session view."""
    kwargs: dict[str, object] = {"level": getattr(logging, level, logging.WARNING), "format": LOG_FORMAT}
    if log_file:
        kwargs["filename"] = log_file
    logging.basicConfig(**kwargs)  # type: ignore[arg-type]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unix-emulator",
        description="Interactive interpreter for a small set of Unix-like commands.",
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Open the session in a desktop window instead of the terminal",
    )
    parser.add_argument(
        "--memory",
        action="store_true",
        help="Use a throwaway in-memory filesystem",
    )
    parser.add_argument(
        "--sandbox",
        default=None,
        metavar="PATH",
        help="Refuse any path outside PATH (default: UNIX_EMU_SANDBOX_ROOT)",
    )
    parser.add_argument(
        "--start-dir",
        default=None,
        metavar="PATH",
        help="Directory the session starts in (default: UNIX_EMU_START_DIR or home)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        from unix_emulator.container import container

        settings = container.get_settings()
        container.configure(
            use_memory_fs=args.memory,
            sandbox_root=args.sandbox,
            start_directory=args.start_dir,
        )
        configure_logging(settings.log_level, settings.log_file)
        container.get_file_system().get_current_directory()
    except BaseAppError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.gui:
        from unix_emulator.ui.app import main as gui_main

        return gui_main([sys.argv[0]], deps=container)

    from unix_emulator.adapters.display.rich_display import RichConsoleDisplay

    display = RichConsoleDisplay()
    session = container.create_session_loop(display)
    return session.run(display.read_line)


def gui(argv: list[str] | None = None) -> int:
    """Desktop window entry point; same bootstrap as `unix-emulator --gui`."""
    argv = argv if argv is not None else sys.argv[1:]
    return main(["--gui", *argv])


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
