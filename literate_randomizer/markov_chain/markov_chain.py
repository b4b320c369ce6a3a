"""
MarkovChain

Public entry point of literate_randomizer: loads source material, builds the
chain once and generates words, sentences and paragraphs from it.

Example:
    >>> from literate_randomizer.markov_chain.weighted_sampler import SequenceRandomizer
    >>> chain = MarkovChain(source_material="The cat sat. The cat ran.",
    ...                     randomizer=SequenceRandomizer([0]))
    >>> chain
    <MarkovChain: 4 words, 2 word-chains, 1 first_words>
    >>> chain.sentence(first_word="The", words=3, punctuation="!")
    'The cat sat!'
"""

from literate_randomizer.errors import EmptyCorpusError
from literate_randomizer.markov_chain.chain_builder import build_chain
from literate_randomizer.markov_chain.text_generator import (
    DocumentOptions,
    ParagraphOptions,
    SentenceOptions,
    TextGenerator,
)
from literate_randomizer.markov_chain.weighted_sampler import (
    PythonRandomizer,
    ThreadSafeRandomizer,
    WeightedSampler,
)
from literate_randomizer.utils.config_loader import load_config
from literate_randomizer.utils.loggers.json_logger import get_logger
from literate_randomizer.utils.source_material import load_source_material
from literate_randomizer.utils.system_monitoring import ResourceMonitor


class MarkovChain:
    """
    First-order Markov chain over a corpus, with text generators on top.

    The chain is immutable after construction. The default randomizer is
    lock-protected so one instance can be shared between threads; an injected
    randomizer is used as given.
    """

    def __init__(
        self,
        source_material=None,
        source_material_file=None,
        punctuation_distribution=None,
        randomizer=None,
        seed=None,
        environment="development",
        config=None,
        logger=None,
    ):
        """
        Loads the corpus and builds the chain.

        Args:
            source_material (str, optional): Corpus text.
            source_material_file (str, optional): Corpus file (.txt or .csv),
                read when no text is given. Falls back to the configured file,
                then to the bundled default corpus.
            punctuation_distribution (sequence, optional): Terminal punctuation
                to draw from; defaults to the configured distribution.
            randomizer (optional): Object exposing rand(limit) -> int in [0, limit).
            seed (int, optional): Seed for the default randomizer.
            environment (str): Selects the environment specific config file.
            config (dict, optional): Configuration overrides.
            logger (logging.Logger, optional): Logger for chain events.

        Raises:
            EmptyCorpusError: If the corpus contains no words.
            SourceMaterialError: If a corpus file cannot be read.
        """
        self.environment = environment
        self.config = load_config(environment=environment, config=config, logger=logger)

        if logger is None:
            logging_config = self.config["logging"]
            logger = get_logger(
                "literate_randomizer",
                log_file=logging_config["log_file"],
                console_json=logging_config["console_json"],
                console_level=logging_config["console_level"],
            )
        self.logger = logger

        corpus = load_source_material(
            source_material=source_material,
            source_material_file=source_material_file or self.config["source_material_file"],
            logger=self.logger,
        )

        resource_monitor = ResourceMonitor(logger=self.logger)
        resource_monitor.start("markov_chain_build")
        self.chain = build_chain(corpus)
        resources = resource_monitor.stop()

        if self.chain.is_empty():
            self.logger.error("Source material contains no words", extra={
                "metrics": {"characters": len(corpus)}
            })
            raise EmptyCorpusError("Source material contains no words to build a chain from")

        self.randomizer = randomizer or ThreadSafeRandomizer(PythonRandomizer(seed))
        self.sampler = WeightedSampler(
            self.chain,
            self.randomizer,
            self.config["punctuation_distribution"]
            if punctuation_distribution is None
            else punctuation_distribution,
        )

        defaults = self.config["defaults"]
        self.generator = TextGenerator(
            self.sampler,
            logger=self.logger,
            default_words=defaults["words"],
            default_sentences=defaults["sentences"],
            default_paragraphs=defaults["paragraphs"],
            default_join=defaults["join"],
        )

        self.logger.info("Markov chain built", extra={
            "metrics": {
                "words": len(self.chain.words),
                "word_chains": len(self.chain.markov_keys),
                "first_words": len(self.chain.first_words),
                "characters": len(corpus),
                "duration": resources.get("duration"),
                "memory_delta_mb": resources.get("memory_delta_mb"),
            }
        })

    def __repr__(self):
        return (
            f"<{type(self).__name__}: {len(self.chain.words)} words, "
            f"{len(self.chain.markov_keys)} word-chains, "
            f"{len(self.chain.first_words)} first_words>"
        )

    @property
    def words(self):
        return self.chain.words

    @property
    def first_words(self):
        return self.chain.first_words

    @property
    def markov_words(self):
        return self.chain.markov_keys

    @property
    def transitions(self):
        return self.chain.transitions

    @property
    def weight_sums(self):
        return self.chain.weight_sums

    @property
    def punctuation_distribution(self):
        return self.sampler.punctuation_distribution

    def next_word(self, word):
        return self.sampler.next_word(word)

    def word(self):
        """Return a random word."""
        return self.sampler.random_word()

    def first_word(self):
        """Return a random word that began a sentence in the corpus."""
        return self.sampler.random_first_word()

    def markov_word(self):
        """Return a random word that has at least one successor."""
        return self.sampler.random_markov_key()

    def punctuation(self):
        return self.sampler.random_punctuation()

    def sentence(self, first_word=None, words=None, punctuation=None):
        """
        Return a random sentence.

        Args:
            first_word (str, optional): The start word.
            words (int or (min, max), optional): Number of words, default 3..15.
            punctuation (str, optional): Terminal punctuation, drawn when not given.
        """
        return self.generator.generate_sentence(
            SentenceOptions(first_word=first_word, words=words, punctuation=punctuation)
        )

    def paragraph(self, first_word=None, words=None, sentences=None, punctuation=None):
        """
        Return a random paragraph.

        Args:
            first_word (str, optional): The first word of the paragraph.
            words (int or (min, max), optional): Words per sentence.
            sentences (int or (min, max), optional): Sentences, default 5..15.
            punctuation (str, optional): Punctuation ending the paragraph.
        """
        return self.generator.generate_paragraph(
            ParagraphOptions(
                first_word=first_word, words=words, sentences=sentences, punctuation=punctuation
            )
        )

    def paragraphs(self, first_word=None, words=None, sentences=None, paragraphs=None,
                   punctuation=None, join=None):
        """
        Return random paragraphs.

        Args:
            first_word (str, optional): The first word of the first paragraph.
            words (int or (min, max), optional): Words per sentence.
            sentences (int or (min, max), optional): Sentences per paragraph.
            paragraphs (int or (min, max), optional): Paragraphs, default 3..5.
            punctuation (str, optional): Punctuation ending the last paragraph.
            join (str or False, optional): Paragraph separator, default two
                newlines. False returns the list of paragraphs.
        """
        return self.generator.generate_document(
            DocumentOptions(
                first_word=first_word,
                words=words,
                sentences=sentences,
                paragraphs=paragraphs,
                punctuation=punctuation,
                join=join,
            )
        )
