import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO


class TeeStdout:
    """
    Helper class to tee stdout to multiple streams, e.g. stdout and a log file
    """
    # Initialize with multiple streams
    def __init__(self, *streams: TextIO):
        self.streams = streams

    # Write data to all streams, flushing so the log survives a crash
    def write(self, data: str) -> int:
        for s in self.streams:
            s.write(data)
            s.flush()
        return len(data)

    # Flush all streams
    def flush(self) -> None:
        for s in self.streams:
            s.flush()


@contextmanager
def tee_stdout(log_path: Optional[str]) -> Iterator[None]:
    """
    Duplicate everything printed inside the block into `log_path`.

    The parent directory is created if needed. With `log_path = None` the
    block runs with stdout untouched. `sys.stdout` is always restored.
    """
    if log_path is None:
        yield
        return

    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    original_stdout = sys.stdout
    with open(log_path, "w", encoding="utf-8") as f:
        sys.stdout = TeeStdout(original_stdout, f)
        try:
            yield
        finally:
            sys.stdout = original_stdout
