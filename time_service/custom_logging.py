import sys
from pathlib import Path
from datetime import datetime
import logging
from typing import Optional

LOG_FILE_NAME = "platform-time.log"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


def log_file_path(log_dir: str) -> Path:
    return Path(log_dir) / LOG_FILE_NAME


def setup_logging(log_dir: str = "logs", level: str = "INFO") -> Optional[Path]:
    """
    Set up logging to stdout and a single append-only log file.

    Args:
        log_dir: Directory to store the log file
        level: Name of the root log level, e.g. INFO

    Returns:
        Path to the log file or None if setup fails
    """
    try:
        # Create logs directory if needed
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        service_log = log_file_path(log_dir)

        # Add a session start marker to the log
        with open(service_log, 'a') as f:
            f.write(f"\n{'='*80}\n")
            f.write(f"New logging session started at {datetime.now()}\n")
            f.write(f"{'='*80}\n\n")

        logging.basicConfig(
            level=getattr(logging, level, logging.INFO),
            format=LOG_FORMAT,
            handlers=[
                logging.StreamHandler(sys.stdout),
                logging.FileHandler(service_log, mode='a'),
            ]
        )

        return service_log

    except OSError as e:
        logging.error(f"Failed to setup logging: {e}")
        return None


def rotate_log_if_needed(log_file: Path, max_size_bytes: int = 10_000_000) -> Optional[Path]:  # 10MB default
    """
    Rotate the log file if it exceeds the maximum size.
    Moves it aside with a timestamp suffix so the next session starts fresh.

    Returns:
        Path of the rotated backup, or None if no rotation happened
    """
    if log_file.exists() and log_file.stat().st_size > max_size_bytes:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        backup_file = log_file.with_name(f"{log_file.stem}_{timestamp}{log_file.suffix}")
        log_file.rename(backup_file)
        return backup_file
    return None
