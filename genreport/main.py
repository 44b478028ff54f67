import sys
from pathlib import Path

from .config import Settings
from .processor import ReportProcessor
from .watcher import FolderWatcher


def main(report_path: Path | str | None = None) -> int:
    """
    Main entrypoint that processes one report, or watches the input folder for new ones.

    Args:
        report_path: Single report to process. When omitted, watch until interrupted.

    Returns:
        Process exit status
    """
    settings = Settings.from_env()
    settings.ensure_directories()
    processor = ReportProcessor(settings.output_dir, settings.reference_path)

    if report_path is not None:
        return 0 if processor.process_safely(Path(report_path)) else 1

    if not settings.reference_path.exists():
        print(f"Warning: Reference data not found yet: {settings.reference_path}", file=sys.stderr)

    watcher = FolderWatcher(settings.input_dir, include_existing=settings.process_existing)
    print(f"Watching {settings.input_dir} for new XML files. Press Ctrl+C to exit.")
    try:
        for path in watcher.watch(settings.poll_interval):
            processor.process_safely(path)
    except KeyboardInterrupt:
        print("\nStopped watching.")
    return 0


def cli() -> None:
    if len(sys.argv) > 1:
        path = Path(sys.argv[1])
        if not path.exists():
            print(f"Error: Report file not found: {path}")
            sys.exit(1)
        sys.exit(main(path))
    sys.exit(main())


if __name__ == "__main__":
    cli()
