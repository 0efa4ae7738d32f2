import sys
import threading

FRAMES = ['|', '/', '-', '\\']


class Spinner:
    """Terminal busy indicator that ticks on its own thread until stopped."""

    def __init__(self, stream=None, interval=0.15):
        self.stream = stream or sys.stderr
        self.interval = interval
        self.ticks = 0
        self._done = threading.Event()
        self._thread = threading.Thread(target=self._spin, daemon=True)

    def _spin(self):
        while not self._done.wait(self.interval):
            frame = FRAMES[self.ticks % len(FRAMES)]
            self.stream.write(f'\r{frame}')
            self.stream.flush()
            self.ticks += 1

    def start(self):
        self._thread.start()
        return self

    def stop(self):
        self._done.set()
        if self._thread.is_alive():
            self._thread.join()
        if self.ticks:
            self.stream.write('\r \r')
            self.stream.flush()

    def __enter__(self):
        return self.start()

    def __exit__(self, *exc):
        self.stop()
