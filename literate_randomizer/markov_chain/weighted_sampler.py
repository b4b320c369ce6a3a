"""
Weighted Sampler

Samples words from a built chain. Successors are drawn in proportion to their
observed transition counts; word, first word, chain key and punctuation draws
are uniform.

Randomness comes from a randomizer object exposing rand(limit), which returns
an integer in [0, limit). Three implementations are provided:
    - PythonRandomizer: wraps random.Random (optionally seeded).
    - SequenceRandomizer: replays a fixed list of draws, for tests and demos.
    - ThreadSafeRandomizer: serialises draws of another randomizer with a lock,
      for chains shared between threads.
"""

import random
import threading
from itertools import cycle

from literate_randomizer.errors import ConfigurationError

DEFAULT_PUNCTUATION_DISTRIBUTION = (".",) * 16 + ("?", "!")


def validate_punctuation_distribution(distribution):
    """Returns the distribution as a tuple, rejecting empty or non-string entries."""
    if isinstance(distribution, str):
        raise ConfigurationError("punctuation_distribution must be a sequence of strings, not a string")
    distribution = tuple(distribution)
    if not distribution:
        raise ConfigurationError("punctuation_distribution must not be empty")
    for entry in distribution:
        if not isinstance(entry, str):
            raise ConfigurationError(f"Invalid punctuation entry: {entry!r}")
    return distribution


class PythonRandomizer:
    """Randomizer backed by random.Random."""

    def __init__(self, seed=None):
        self._random = random.Random(seed)

    def rand(self, limit):
        return self._random.randrange(limit)


class SequenceRandomizer:
    """
    Randomizer that replays a fixed sequence of draws.

    Each value is reduced modulo the requested limit so a sequence such as
    [0] can serve any call. With repeat=False an exhausted sequence raises
    IndexError, which makes tests fail loudly on unexpected extra draws.
    """

    def __init__(self, values, repeat=True):
        self.values = list(values)
        if not self.values:
            raise ValueError("SequenceRandomizer needs at least one value")
        self.calls = []
        self._values = cycle(self.values) if repeat else iter(self.values)

    def rand(self, limit):
        try:
            value = next(self._values)
        except StopIteration:
            raise IndexError("SequenceRandomizer ran out of values") from None
        self.calls.append(limit)
        return value % limit


class ThreadSafeRandomizer:
    """Wraps another randomizer so concurrent callers draw one at a time."""

    def __init__(self, randomizer):
        self.randomizer = randomizer
        self._lock = threading.Lock()

    def rand(self, limit):
        with self._lock:
            return self.randomizer.rand(limit)


class WeightedSampler:
    """
    Draws words and punctuation from a ChainData instance.

    Args:
        chain (ChainData): The chain to sample from.
        randomizer: Object exposing rand(limit).
        punctuation_distribution (sequence): Punctuation strings; repeat an
            entry to make it more likely.
    """

    def __init__(self, chain, randomizer, punctuation_distribution=DEFAULT_PUNCTUATION_DISTRIBUTION):
        self.chain = chain
        self.randomizer = randomizer
        self.punctuation_distribution = validate_punctuation_distribution(punctuation_distribution)

    def rand(self, limit):
        return self.randomizer.rand(limit)

    def next_word(self, current):
        """
        Samples a successor of `current` weighted by transition count.

        A self-transition keeps its share of the weight sum but is never
        returned; the scan moves past it, so its mass falls to the next
        successor in order. When no other successor reaches the draw, None is
        returned.

        Args:
            current (str): The current word.

        Returns:
            str or None: The next word, or None if the chain ends here.
        """
        followers = self.chain.transitions.get(current)
        if not followers:
            return None

        target = self.rand(self.chain.weight_sums[current]) + 1
        partial_sum = 0
        for word, count in followers.items():
            partial_sum += count
            if word != current and partial_sum >= target:
                return word
        return None

    def _uniform(self, items):
        if not items:
            return None
        return items[self.rand(len(items))]

    def random_word(self):
        return self._uniform(self.chain.words)

    def random_first_word(self):
        return self._uniform(self.chain.first_words)

    def random_markov_key(self):
        return self._uniform(self.chain.markov_keys)

    def random_punctuation(self):
        return self._uniform(self.punctuation_distribution)
