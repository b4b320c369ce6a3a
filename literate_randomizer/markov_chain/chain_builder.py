"""
Chain Builder

Builds the first-order word transition table for a corpus.

The result is a ChainData value object holding:
    - transitions: word -> {next word: count}, dead ends pruned
    - weight_sums: word -> sum of its successor counts
    - words: every distinct word seen, in first-seen order
    - first_words: every word that opened a sentence, in first-seen order
    - markov_keys: the keys of the transition table, in first-seen order

All of it is computed once and is read-only afterwards. Construction is a pure
function of the corpus text.
"""

from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType

from literate_randomizer.markov_chain.tokenizer import split_sentences, tokenize_sentence


@dataclass(frozen=True)
class ChainData:
    transitions: MappingProxyType
    weight_sums: MappingProxyType
    words: tuple
    first_words: tuple
    markov_keys: tuple

    def is_empty(self):
        return len(self.words) == 0


def count_transitions(sentences):
    """
    Counts word transitions over tokenized sentences.

    Args:
        sentences (iterable): Lists of words, one list per sentence.

    Returns:
        tuple: (transitions, words, first_words) where transitions is a dict of
               dicts of counts and words/first_words are insertion-ordered dicts
               used as ordered sets.
    """
    transitions = {}
    words = {}
    first_words = {}

    for word_list in sentences:
        if not word_list:
            continue
        first_words[word_list[0]] = True

        for index, word in enumerate(word_list):
            words[word] = True
            if index + 1 < len(word_list):
                followers = transitions.setdefault(word, defaultdict(int))
                followers[word_list[index + 1]] += 1

    return transitions, words, first_words


def prune_dead_ends(transitions):
    """Drops every word whose successor mapping is empty."""
    return {word: followers for word, followers in transitions.items() if len(followers) > 0}


def compute_weight_sums(transitions):
    return {word: sum(followers.values()) for word, followers in transitions.items()}


def build_chain(corpus):
    """
    Builds the chain data for a corpus.

    An empty or all-punctuation corpus produces empty structures; deciding
    whether that is an error is left to the caller.

    Args:
        corpus (str): The source text.

    Returns:
        ChainData: The frozen chain.

    Example:
        >>> chain = build_chain("The cat sat. The cat ran.")
        >>> dict(chain.transitions["cat"])
        {'sat': 1, 'ran': 1}
    """
    sentences = (tokenize_sentence(sentence) for sentence in split_sentences(corpus))
    transitions, words, first_words = count_transitions(sentences)
    transitions = prune_dead_ends(transitions)
    weight_sums = compute_weight_sums(transitions)

    frozen_transitions = MappingProxyType(
        {word: MappingProxyType(dict(followers)) for word, followers in transitions.items()}
    )

    return ChainData(
        transitions=frozen_transitions,
        weight_sums=MappingProxyType(weight_sums),
        words=tuple(words),
        first_words=tuple(first_words),
        markov_keys=tuple(frozen_transitions),
    )
