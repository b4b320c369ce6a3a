"""
Analytics for built Markov chains.

Reports the shape of a chain (vocabulary, branching, entropy) and the
distribution next_word actually samples from, which differs from the raw
transition weights whenever a word can follow itself.
"""

import logging

import numpy as np


class MarkovChainAnalytics:
    """
    Statistics over a MarkovChain instance (or anything exposing `.chain`).

    Args:
        markov_chain: A MarkovChain instance
        logger: A logger instance for logging analytics activities
    """

    def __init__(self, markov_chain, logger=None):
        self.markov_chain = markov_chain
        self.chain = markov_chain.chain
        self.logger = logger or getattr(markov_chain, "logger", None) or logging.getLogger(__name__)

    def analyze_model(self, top_n=5):
        """
        Analyze model characteristics.

        Args:
            top_n (int): Number of most frequent transitions to report

        Returns:
            dict: Statistics including:
                - words_count, word_chains_count, first_words_count
                - transitions_count: distinct (word, next word) pairs
                - total_weight: sum of all transition counts
                - branching_mean / branching_max: successors per chain key
                - entropy_mean: mean Shannon entropy (bits) of the successor
                  distributions
                - self_loops_count: chain keys that can follow themselves
                - self_loop_mass: share of the total weight that next_word
                  can never return
                - top_transitions: the `top_n` heaviest transitions
        """
        transitions = self.chain.transitions
        branching = np.array([len(followers) for followers in transitions.values()], dtype=float)

        entropies = []
        all_transitions = []
        self_loop_weight = 0
        self_loops_count = 0
        for word, followers in transitions.items():
            counts = np.fromiter(followers.values(), dtype=float)
            probabilities = counts / counts.sum()
            entropies.append(float(-(probabilities * np.log2(probabilities)).sum()))
            if word in followers:
                self_loops_count += 1
                self_loop_weight += followers[word]
            for next_word, count in followers.items():
                all_transitions.append((word, next_word, count))

        total_weight = int(sum(self.chain.weight_sums.values()))
        top_transitions = sorted(all_transitions, key=lambda x: x[2], reverse=True)[:top_n]

        stats = {
            "words_count": len(self.chain.words),
            "word_chains_count": len(self.chain.markov_keys),
            "first_words_count": len(self.chain.first_words),
            "transitions_count": len(all_transitions),
            "total_weight": total_weight,
            "branching_mean": float(branching.mean()) if branching.size else 0.0,
            "branching_max": int(branching.max()) if branching.size else 0,
            "entropy_mean": float(np.mean(entropies)) if entropies else 0.0,
            "self_loops_count": self_loops_count,
            "self_loop_mass": self_loop_weight / total_weight if total_weight else 0.0,
            "top_transitions": [
                {"word": word, "next_word": next_word, "count": count}
                for word, next_word, count in top_transitions
            ],
        }

        self.logger.info("Model analysis completed", extra={
            "metrics": {key: value for key, value in stats.items() if key != "top_transitions"}
        })
        return stats

    def get_transition_probability(self, word, next_word):
        """
        Raw probability of `next_word` following `word` in the corpus.

        Returns:
            float: count / weight sum, 0.0 for unknown pairs
        """
        followers = self.chain.transitions.get(word)
        if not followers or next_word not in followers:
            return 0.0
        return followers[next_word] / self.chain.weight_sums[word]

    def effective_distribution(self, word):
        """
        The distribution next_word(word) samples from.

        Each draw target t in [1, weight_sum] goes to the first non-self
        successor whose cumulative count reaches t. A self-loop's mass is
        therefore given to the successor after it, or to None when the
        self-loop is last.

        Returns:
            dict: successor (or None) -> probability; empty for dead ends
        """
        followers = self.chain.transitions.get(word)
        if not followers:
            return {}

        total = self.chain.weight_sums[word]
        cumulative = np.cumsum(np.fromiter(followers.values(), dtype=np.int64))
        distribution = {}
        claimed = 0
        for successor, upper in zip(followers, cumulative):
            if successor == word:
                continue
            distribution[successor] = (int(upper) - claimed) / total
            claimed = int(upper)
        if claimed < total:
            distribution[None] = (total - claimed) / total
        return distribution
