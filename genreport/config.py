"""
Folder locations and polling settings, read from the environment or a .env file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_REFERENCE_FILE = "ReferenceData.xml"
DEFAULT_POLL_INTERVAL = 1.0


def _env_path(name: str, default: Path) -> Path:
    value = os.getenv(name)
    return Path(value).expanduser() if value else default


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Where reports are read from and results written to."""

    input_dir: Path
    output_dir: Path
    reference_dir: Path
    reference_file: str = DEFAULT_REFERENCE_FILE
    poll_interval: float = DEFAULT_POLL_INTERVAL
    process_existing: bool = False

    @property
    def reference_path(self) -> Path:
        return self.reference_dir / self.reference_file

    @classmethod
    def from_env(cls) -> Settings:
        """
        Build settings from GENREPORT_* environment variables.

        Folders default to InputFolder, OutputFolder and ReferenceFolder on the
        user's desktop.

        Raises:
            ValueError: If GENREPORT_POLL_INTERVAL is not a positive number, or the
                output folder is the input folder
        """
        load_dotenv()
        desktop = Path.home() / "Desktop"

        interval_str = os.getenv("GENREPORT_POLL_INTERVAL")
        poll_interval = DEFAULT_POLL_INTERVAL
        if interval_str:
            try:
                poll_interval = float(interval_str)
            except ValueError as e:
                raise ValueError(f"Invalid GENREPORT_POLL_INTERVAL '{interval_str}'") from e
            if poll_interval <= 0:
                raise ValueError(f"GENREPORT_POLL_INTERVAL must be positive, got {poll_interval}")

        settings = cls(
            input_dir=_env_path("GENREPORT_INPUT_DIR", desktop / "InputFolder"),
            output_dir=_env_path("GENREPORT_OUTPUT_DIR", desktop / "OutputFolder"),
            reference_dir=_env_path("GENREPORT_REFERENCE_DIR", desktop / "ReferenceFolder"),
            reference_file=os.getenv("GENREPORT_REFERENCE_FILE") or DEFAULT_REFERENCE_FILE,
            poll_interval=poll_interval,
            process_existing=_env_bool("GENREPORT_PROCESS_EXISTING"),
        )
        if settings.input_dir.resolve() == settings.output_dir.resolve():
            raise ValueError(f"GENREPORT_OUTPUT_DIR must differ from GENREPORT_INPUT_DIR ({settings.input_dir})")
        return settings

    def ensure_directories(self) -> None:
        for directory in (self.input_dir, self.output_dir, self.reference_dir):
            directory.mkdir(parents=True, exist_ok=True)
