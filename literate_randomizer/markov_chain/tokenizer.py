"""
Tokenizer

Splits raw corpus text into sentences and sentences into scrubbed words.

Functions:
    - split_sentences: Splits a corpus on sentence delimiters.
    - scrub_word: Trims a token down to its alphabetic core.
    - tokenize_sentence: Splits a sentence on whitespace and scrubs every piece.

Notes:
    - Words are case-sensitive; nothing is lowercased.
    - Only ASCII letters count as word characters, so accented characters
      and other unicode noise are stripped from the edges of a token.
"""

import re

# Runs of sentence-ending punctuation (or a closing quote) followed by
# ASCII whitespace, double dashes and space-apostrophe pairs.
SENTENCE_DELIMITER_REGEX = re.compile(r"(?:[.?!\"]\s|--| ')+", re.ASCII)
WHITESPACE_REGEX = re.compile(r"\s+", re.ASCII)

WORD_START_REGEX = re.compile(r"[A-Za-z][A-Za-z'-]*")
WORD_END_REGEX = re.compile(r"[A-Za-z'-]*[A-Za-z]")


def split_sentences(corpus):
    """
    Splits a corpus into raw sentence strings.

    The delimiters are discarded. Leading or trailing empty strings may be
    returned; they tokenize to an empty word list and contribute nothing.

    Args:
        corpus (str): The source text.

    Returns:
        list: Raw sentence strings in corpus order.

    Example:
        >>> split_sentences("The cat sat. The cat ran.")
        ['The cat sat', 'The cat ran.']
    """
    if not corpus:
        return []
    return SENTENCE_DELIMITER_REGEX.split(corpus)


def scrub_word(token):
    """
    Removes everything but the alphabetic core of a token.

    Leading characters are dropped up to the first letter, then the result is
    cut after its last letter, so apostrophes and hyphens survive only inside
    a word ("don't", "well-known").

    Args:
        token (str): A whitespace-free piece of a sentence.

    Returns:
        str: The scrubbed word, or "" when the token holds no letters.
    """
    if not token:
        return ""

    match = WORD_START_REGEX.search(token)
    if match is None:
        return ""

    match = WORD_END_REGEX.search(match.group(0))
    if match is None:
        return ""

    return match.group(0).strip()


def tokenize_sentence(sentence):
    """
    Splits a sentence into an ordered list of scrubbed, non-empty words.

    Args:
        sentence (str): A raw sentence as returned by split_sentences.

    Returns:
        list: The words of the sentence in order.
    """
    if not sentence:
        return []
    words = (scrub_word(piece) for piece in WHITESPACE_REGEX.split(sentence))
    return [word for word in words if len(word) > 0]
