# tests/conftest.py
# shared fixture corpus: five n-gram files plus the two frequency files

import pytest

from wordpredictor import EngineConfig, PredictionEngine


BIGRAMS = [
    "the last", "the great", "the end", "for the", "you know", "of the", "thank you",
]
TRIGRAMS = ["for the great", "for the last", "at the end", "thank you very"]
QUADGRAMS = ["at the end of", "one of the best"]
PENTAGRAMS = ["at the end of the", "in the middle of the"]
SEXTAGRAMS = ["at the end of the day", "in the middle of the night"]

FREQUENCIES = {
    "for": 10, "the": 50, "last": 3, "great": 2, "end": 4,
    "of": 40, "at": 8, "day": 6, "night": 5, "know": 7,
}


def write_corpus(directory, bigrams=BIGRAMS, trigrams=TRIGRAMS, quadgrams=QUADGRAMS,
                 pentagrams=PENTAGRAMS, sextagrams=SEXTAGRAMS, frequencies=FREQUENCIES):
    files = {
        "bigram.txt": bigrams,
        "trigram.txt": trigrams,
        "quadgram.txt": quadgrams,
        "pentagram.txt": pentagrams,
        "sextagram.txt": sextagrams,
        "term_freq_vector.txt": [str(c) for c in frequencies.values()],
        "term_freq_names.txt": list(frequencies.keys()),
    }
    for name, lines in files.items():
        (directory / name).write_text("\n".join(lines) + "\n", encoding="utf-8")
    return directory


@pytest.fixture
def corpus_dir(tmp_path):
    return write_corpus(tmp_path)


@pytest.fixture
def make_engine(corpus_dir):
    """Factory: engine over the fixture corpus, seeded, with config overrides."""
    def _make(**overrides):
        overrides.setdefault("seed", 1234)
        config = EngineConfig(data_dir=str(corpus_dir), **overrides)
        return PredictionEngine(config)
    return _make
