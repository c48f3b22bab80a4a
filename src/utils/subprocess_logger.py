"""
Logs the outputs of a spawned subprocess without waiting for it.
"""

import logging
import threading
import subprocess
from typing import IO, Optional, List
from typing import Protocol


logger = logging.getLogger(__name__)

class LineConsumer(Protocol):
    def __call__(self, line: str) -> None:
        ...


class SubprocessReader():
    def __init__(self, stdout: Optional[IO[str]] = None, stderr: Optional[IO[str]] = None,
                 stdout_handler: Optional[LineConsumer] = None, stderr_handler: Optional[LineConsumer] = None,
                 process_name: Optional[str] = None):
        self.process_name = process_name
        self.stdout = stdout
        self.stderr = stderr
        self.stdout_handler = stdout_handler
        self.stderr_handler = stderr_handler
        self.threads: List[threading.Thread] = []
        self._stop_event = threading.Event()

    def start(self) -> None:
        name = "SubprocessReader"
        if self.process_name:
            name += "-" + self.process_name
        if self.stdout and self.stdout_handler:
            self._start_thread(self.stdout, self.stdout_handler, "stdout", name)
        if self.stderr and self.stderr_handler:
            self._start_thread(self.stderr, self.stderr_handler, "stderr", name)

    def _start_thread(self, stream: IO[str], handler: LineConsumer, stream_name: str, name: str) -> None:
        thread = threading.Thread(target=self.read_io, args=(stream, handler, stream_name),
                                  name=f"{name}-{stream_name}", daemon=True)
        self.threads.append(thread)
        thread.start()

    def stop(self) -> None:
        self._stop_event.set()

    def read_io(self, stream: IO[str], handler: LineConsumer, stream_name: str) -> None:
        """Monitor a single stream"""
        try:
            for line in iter(stream.readline, ''):
                if self._stop_event.is_set():
                    break

                # Drop the line ending and the \r spinner frames the CLI prints
                decoded_line = line.rstrip()
                if decoded_line.strip():
                    handler(decoded_line.strip())
        except Exception as e:
            logger.error(f"Error reading from {stream_name}: {e}")
        finally:
            try:
                stream.close()
            except OSError:
                pass

    def join_with_timeout(self, timeout: float = 3.0) -> bool:
        """Join the reader threads with a timeout. Returns True if all of them finished."""
        for thread in self.threads:
            thread.join(timeout=timeout)
        return not any(thread.is_alive() for thread in self.threads)


def make_log_handler(logger_to_log_to: logging.Logger, level: int, prefix: str) -> LineConsumer:
    """Return a LineConsumer that logs each incoming line to a logger"""
    def log_handler(line: str) -> None:
        logger_to_log_to.log(level, f"[{prefix}] {line}")
    return log_handler


class SubprocessLogger(SubprocessReader):
    """Logs stdout lines at INFO and stderr lines at ERROR.

    When given the process, it is also waited for once its output ends, so a
    fire-and-forget child does not linger as a zombie.
    """

    def __init__(self, stdout: Optional[IO[str]] = None, stderr: Optional[IO[str]] = None,
                 process_name: Optional[str] = None, logger: Optional[logging.Logger] = None,
                 process: Optional["subprocess.Popen[str]"] = None):
        if not logger:
            logger = logging.getLogger()
        self.logger = logger
        self.process = process

        prefix = process_name or "process"
        stdout_handler = make_log_handler(logger, logging.INFO, prefix)
        stderr_handler = make_log_handler(logger, logging.ERROR, prefix)

        super().__init__(stdout, stderr,
                         stdout_handler,
                         stderr_handler,
                         process_name)

    def start(self) -> None:
        super().start()
        if self.process is not None:
            readers = list(self.threads)
            name = "SubprocessWaiter"
            if self.process_name:
                name += "-" + self.process_name
            waiter = threading.Thread(target=self.wait_for_exit, args=(readers,), name=name, daemon=True)
            self.threads.append(waiter)
            waiter.start()

    def wait_for_exit(self, readers: List[threading.Thread]) -> None:
        """Reap the process after its output streams are drained"""
        for reader in readers:
            reader.join()
        if self.process is None:
            return
        returncode = self.process.wait()
        self.logger.debug(f"[{self.process_name or 'process'}] exited with code {returncode}")
