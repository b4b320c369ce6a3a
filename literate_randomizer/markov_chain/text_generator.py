"""
Text Generator

Composes sampled words into sentences, paragraphs and documents.

Classes:
    - FixedCount / RangeCount: Word, sentence and paragraph counts. A range
      resolves to rand(maximum - minimum) + minimum, so the drawn value stays
      below `maximum`; `maximum` itself is the ceiling for trailing
      preposition extension.
    - SentenceOptions / ParagraphOptions / DocumentOptions: Per-call options.
      Unset fields fall back to the generator defaults.
    - TextGenerator: The sentence, paragraph and document generators.

Propagation rules for multi-unit calls:
    - Only the last unit keeps the caller's `punctuation`; earlier units draw
      their own.
    - Only the first unit keeps the caller's `first_word`; later units start
      from a random chain key.
"""

import logging
from dataclasses import dataclass, replace

from literate_randomizer.errors import ConfigurationError, InvalidRangeError

# Sentences ending on one of these words are extended by one more word at a time.
PREPOSITIONS = frozenset(
    ["the", "to", "and", "a", "in", "that", "it", "if", "of", "is", "was", "for", "on", "as", "an"]
)

DEFAULT_JOIN = "\n\n"


def _is_count(value):
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class FixedCount:
    value: int

    def __post_init__(self):
        if not _is_count(self.value) or self.value < 1:
            raise InvalidRangeError(f"Count must be a positive integer, got {self.value!r}")

    @property
    def maximum(self):
        return self.value

    def resolve(self, randomizer):
        return self.value


@dataclass(frozen=True)
class RangeCount:
    minimum: int
    maximum: int

    def __post_init__(self):
        if not (_is_count(self.minimum) and _is_count(self.maximum)):
            raise InvalidRangeError(
                f"Range bounds must be integers, got ({self.minimum!r}, {self.maximum!r})"
            )
        if self.minimum < 1:
            raise InvalidRangeError(f"Range minimum must be positive, got {self.minimum}")
        if self.maximum < self.minimum:
            raise InvalidRangeError(
                f"Range maximum {self.maximum} is smaller than minimum {self.minimum}"
            )

    def resolve(self, randomizer):
        if self.maximum == self.minimum:
            return self.minimum
        return randomizer.rand(self.maximum - self.minimum) + self.minimum


def to_count(value, name="count"):
    """
    Converts an option value to a FixedCount or RangeCount.

    Args:
        value: An int, a (minimum, maximum) pair, or a count object.
        name (str): Option name used in error messages.

    Returns:
        FixedCount or RangeCount

    Raises:
        InvalidRangeError: If the value is not a valid count.
    """
    if isinstance(value, (FixedCount, RangeCount)):
        return value
    if _is_count(value):
        return FixedCount(value)
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return RangeCount(value[0], value[1])
    raise InvalidRangeError(
        f"Invalid value for '{name}': expected an integer or a (min, max) pair, got {value!r}"
    )


def capitalize(text):
    """Upper-cases the first character only, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def _normalize_counts(options, *names):
    for name in names:
        value = getattr(options, name)
        if value is not None:
            object.__setattr__(options, name, to_count(value, name))


@dataclass(frozen=True)
class SentenceOptions:
    first_word: str = None
    words: object = None
    punctuation: str = None

    def __post_init__(self):
        _normalize_counts(self, "words")


@dataclass(frozen=True)
class ParagraphOptions(SentenceOptions):
    sentences: object = None

    def __post_init__(self):
        _normalize_counts(self, "words", "sentences")


@dataclass(frozen=True)
class DocumentOptions(ParagraphOptions):
    paragraphs: object = None
    # None joins with the generator default; False returns a list of paragraphs.
    join: object = None

    def __post_init__(self):
        _normalize_counts(self, "words", "sentences", "paragraphs")
        if self.join is not None and self.join is not False and not isinstance(self.join, str):
            raise ConfigurationError(
                f"join must be a string, False or None, got {self.join!r}")


def unit_options(options, index, count):
    """
    Derives the options for unit `index` out of `count` in a paragraph or document.

    The caller's punctuation applies to the last unit only, the caller's first
    word to the first unit only.
    """
    is_first = index == 0
    is_last = index == count - 1
    return replace(
        options,
        first_word=options.first_word if is_first else None,
        punctuation=options.punctuation if is_last else None,
    )


class TextGenerator:
    """
    Generates sentences, paragraphs and documents from a WeightedSampler.

    Args:
        sampler (WeightedSampler): Source of words and punctuation.
        logger (logging.Logger, optional): Logger for generation events.
        default_words: Word count used when a call sets none (default 3..15).
        default_sentences: Sentences per paragraph (default 5..15).
        default_paragraphs: Paragraphs per document (default 3..5).
        default_join (str): Paragraph separator (default two newlines).
    """

    def __init__(
        self,
        sampler,
        logger=None,
        default_words=(3, 15),
        default_sentences=(5, 15),
        default_paragraphs=(3, 5),
        default_join=DEFAULT_JOIN,
    ):
        self.sampler = sampler
        self.logger = logger or logging.getLogger(__name__)
        self.default_words = to_count(default_words, "words")
        self.default_sentences = to_count(default_sentences, "sentences")
        self.default_paragraphs = to_count(default_paragraphs, "paragraphs")
        self.default_join = default_join

    def extend_trailing_preposition(self, max_words, words):
        """
        Appends words while the sentence ends on a preposition or article.

        Stops at `max_words` words or when the chain has no successor.
        """
        while len(words) < max_words and words and words[-1] in PREPOSITIONS:
            following = self.sampler.next_word(words[-1])
            if following is None:
                break
            words.append(following)
        return words

    def generate_sentence(self, options=None):
        """
        Generates one capitalised sentence ending in punctuation.

        Random draws happen in a fixed order: start word (when not given), word
        count (when a range), punctuation (when not given), then one successor
        draw per word.

        Args:
            options (SentenceOptions, optional): first_word, words, punctuation.

        Returns:
            str: The sentence, e.g. "The cat sat on the mat."
        """
        options = options or SentenceOptions()

        word = options.first_word
        if word is None:
            word = self.sampler.random_markov_key()
        word_count = options.words or self.default_words
        count = word_count.resolve(self.sampler)
        punctuation = options.punctuation
        if punctuation is None:
            punctuation = self.sampler.random_punctuation()

        words = []
        for _ in range(count):
            if word is None:
                break
            words.append(word)
            word = self.sampler.next_word(word)

        if len(words) < count:
            self.logger.debug("Chain ended before requested sentence length", extra={
                "metrics": {"requested_words": count, "words_generated": len(words)}
            })

        words = self.extend_trailing_preposition(word_count.maximum, words)
        sentence = capitalize(" ".join(words) + punctuation)

        self.logger.debug("Sentence generated", extra={
            "metrics": {"words": len(words), "punctuation": punctuation}
        })
        return sentence

    def generate_paragraph(self, options=None):
        """
        Generates a paragraph of sentences joined by single spaces.

        Args:
            options (ParagraphOptions, optional): first_word, words, sentences,
                punctuation.

        Returns:
            str: The paragraph.
        """
        options = options or ParagraphOptions()
        sentence_count = options.sentences or self.default_sentences
        count = sentence_count.resolve(self.sampler)

        sentences = [
            self.generate_sentence(unit_options(options, index, count))
            for index in range(count)
        ]

        self.logger.debug("Paragraph generated", extra={"metrics": {"sentences": count}})
        return " ".join(sentences)

    def generate_document(self, options=None):
        """
        Generates several paragraphs.

        Args:
            options (DocumentOptions, optional): first_word, words, sentences,
                paragraphs, punctuation, join.

        Returns:
            str or list: The paragraphs joined by `join`, or the list of
                         paragraphs when join is False.
        """
        options = options or DocumentOptions()
        paragraph_count = options.paragraphs or self.default_paragraphs
        count = paragraph_count.resolve(self.sampler)

        paragraphs = [
            self.generate_paragraph(unit_options(options, index, count))
            for index in range(count)
        ]

        self.logger.debug("Document generated", extra={"metrics": {"paragraphs": count}})

        if options.join is False:
            return paragraphs
        join = self.default_join if options.join is None else options.join
        return join.join(paragraphs)
