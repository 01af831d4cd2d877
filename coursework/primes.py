"""Prime testing and a one-slot channel for handing primes between threads."""

from __future__ import annotations

import math
import threading


def is_prime(num: int) -> bool:
    """Return True if ``num`` is a prime number."""
    if num <= 1:
        return False
    return all(num % divisor for divisor in range(2, math.isqrt(num) + 1))


class PrimeChannel:
    """A one-slot hand-off: a publisher waits while an unread prime is pending."""

    def __init__(self) -> None:
        self._condition = threading.Condition()
        self.last_prime: int | None = None
        self.new_prime_found = False
        self._closed = False

    def publish(self, value: int) -> None:
        """Store a new prime, first waiting until the previous one has been taken."""
        with self._condition:
            self._condition.wait_for(lambda: not self.new_prime_found or self._closed)
            if self._closed:
                raise EOFError("channel is closed")
            self.last_prime = value
            self.new_prime_found = True
            self._condition.notify_all()

    def take(self, timeout: float | None = None) -> int | None:
        """Return the pending prime, or None if none arrives within ``timeout``.

        Raises EOFError once the channel is closed and nothing is pending.
        """
        with self._condition:
            ready = self._condition.wait_for(
                lambda: self.new_prime_found or self._closed, timeout
            )
            if not ready:
                return None
            if not self.new_prime_found:
                raise EOFError("channel is closed")
            self.new_prime_found = False
            self._condition.notify_all()
            return self.last_prime

    def _close(self) -> None:
        with self._condition:
            self._closed = True
            self._condition.notify_all()


def find_primes(limit: int) -> list[int]:
    """Find the primes below ``limit`` with a searching thread and a collecting one."""
    channel = PrimeChannel()
    found: list[int] = []

    def search() -> None:
        try:
            for number in range(limit):
                if is_prime(number):
                    channel.publish(number)
            # Wait for the last prime to be collected before closing.
            with channel._condition:
                channel._condition.wait_for(lambda: not channel.new_prime_found)
        finally:
            channel._close()

    def collect() -> None:
        while True:
            try:
                value = channel.take()
            except EOFError:
                return
            if value is not None:
                found.append(value)

    workers = [threading.Thread(target=search), threading.Thread(target=collect)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return found