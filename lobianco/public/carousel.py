# lobianco/public/carousel.py

import time

DEFAULT_INTERVAL = 5.0


class Carousel:
    """
    Index over a slide list with timed auto-advance.

    The timer is a deadline checked by tick(): every full interval elapsed
    since it was (re)started moves the index one slide forward. Loading a
    different slide list restarts the timer, an empty list keeps it stopped,
    and stop() cancels it until the next load().
    """

    def __init__(self, slides=(), interval=DEFAULT_INTERVAL, clock=time.monotonic):
        self.interval = float(interval)
        self.clock = clock
        self.slides = None
        self.index = 0
        self.advances = 0
        self._timer_started = None
        self.load(slides)

    def __len__(self):
        return len(self.slides)

    @property
    def running(self):
        return self._timer_started is not None

    @property
    def interval_ms(self):
        return int(self.interval * 1000)

    @property
    def current(self):
        return self.slides[self.index] if self.slides else None

    def load(self, slides):
        if slides is None:
            slides = []
        if slides is self.slides:
            return
        self.slides = slides
        if self.index >= len(slides):
            self.index = 0
        self._restart_timer()

    def _restart_timer(self):
        self._timer_started = self.clock() if self.slides else None

    def stop(self):
        self._timer_started = None

    def tick(self):
        if not self.running or not self.slides:
            return self.index
        elapsed = self.clock() - self._timer_started
        steps = int(elapsed // self.interval)
        if steps:
            self.index = (self.index + steps) % len(self.slides)
            self.advances += steps
            self._timer_started += steps * self.interval
        return self.index

    def next_index(self):
        return (self.index + 1) % len(self.slides) if self.slides else 0

    def previous_index(self):
        if not self.slides:
            return 0
        return len(self.slides) - 1 if self.index == 0 else self.index - 1

    def next(self):
        self.index = self.next_index()
        return self.index

    def previous(self):
        self.index = self.previous_index()
        return self.index

    def go_to(self, index):
        if not self.slides:
            return self.index
        if not 0 <= index < len(self.slides):
            raise IndexError(f"slide {index} out of range")
        self.index = index
        return self.index
