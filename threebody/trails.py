#!/usr/bin/env python3
"""
Fading motion trails.

TrailBuffer keeps one TrailSample per body per running step in insertion order.
Every sample fades by the same factor each step, so the oldest sample is always the
faintest and eviction only ever has to look at the front of the deque.
"""
import logging
from collections import deque
from typing import Deque, Iterator, Optional, Sequence

from .constants import TRAIL_CUTOFF, TRAIL_DECAY
from .data_models import Body, TrailSample

logger = logging.getLogger(__name__)


class TrailBuffer:
    """
    FIFO of trail samples with exponential fade.

    With decay=None samples never fade and the buffer grows for as long as the
    run lasts.
    """

    def __init__(self, decay: Optional[float] = TRAIL_DECAY, cutoff: float = TRAIL_CUTOFF):
        self.decay = decay
        self.cutoff = cutoff
        self._samples: Deque[TrailSample] = deque()

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[TrailSample]:
        return iter(self._samples)

    def clear(self) -> None:
        self._samples.clear()

    def fade(self) -> int:
        """
        Decay every sample once and evict the ones that dropped below the cutoff.

        Returns the number of evicted samples.
        """
        if self.decay is None:
            return 0
        for sample in self._samples:
            sample.alpha *= self.decay
        evicted = 0
        while self._samples and self._samples[0].alpha < self.cutoff:
            self._samples.popleft()
            evicted += 1
        return evicted

    def record(self, bodies: Sequence[Body]) -> None:
        """Fade existing samples, then append a fully opaque sample per body."""
        evicted = self.fade()
        if evicted:
            logger.debug("Evicted %d faded trail samples (%d left)", evicted, len(self._samples))
        self._samples.extend(TrailSample.from_body(b) for b in bodies)
