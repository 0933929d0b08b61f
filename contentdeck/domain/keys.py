"""Opaque, chronologically sortable keys for decks and deck contents."""
from __future__ import annotations

import secrets
import threading
import time

# Characters in ASCII order so that lexical order follows generation order.
PUSH_CHARS = "-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"
TIMESTAMP_LENGTH = 8
RANDOM_LENGTH = 12
KEY_LENGTH = TIMESTAMP_LENGTH + RANDOM_LENGTH


class PushKeyGenerator:
    """
    Build 20-character keys: 8 chars of millisecond timestamp, 12 random.

    Keys produced in the same millisecond reuse the previous random part
    incremented by one, so keys from one generator are strictly increasing.
    """

    def __init__(self, clock=None) -> None:
        self._clock = clock or (lambda: int(time.time() * 1000))
        self._lock = threading.Lock()
        self._last_ts = -1
        self._last_rand = [0] * RANDOM_LENGTH

    def _encode_timestamp(self, ts: int) -> str:
        chars = []
        for _ in range(TIMESTAMP_LENGTH):
            chars.append(PUSH_CHARS[ts % 64])
            ts //= 64
        return "".join(reversed(chars))

    def _increment_random(self) -> None:
        i = RANDOM_LENGTH - 1
        while i >= 0 and self._last_rand[i] == 63:
            self._last_rand[i] = 0
            i -= 1
        if i < 0:
            # 64**12 keys in one millisecond; wait for the clock instead.
            raise OverflowError("push key space exhausted for this millisecond")
        self._last_rand[i] += 1

    def generate(self) -> str:
        with self._lock:
            now = self._clock()
            if now <= self._last_ts:
                now = self._last_ts
                self._increment_random()
            else:
                self._last_rand = [secrets.randbelow(64) for _ in range(RANDOM_LENGTH)]
            self._last_ts = now
            rand = "".join(PUSH_CHARS[n] for n in self._last_rand)
            return self._encode_timestamp(now) + rand


_generator = PushKeyGenerator()


def generate_push_key() -> str:
    """Return a new key from the process-wide generator."""
    return _generator.generate()

