"""Round-trip and size checks over seeded synthetic corpora.

Corpora are generated with numpy from fixed seeds so every run sees the
same bytes. The larger corpora are marked slow:
    pytest tests/test_vectors.py -m "not slow"
"""

import numpy as np
import pytest

from huffcodec import compress, decompress
from huffcodec.bitreader import BitReader
from huffcodec.constants import PSEUDO_EOF
from huffcodec.header import read_header
from huffcodec.tree import make_codings_from_tree, make_tree_from_counts, read_for_counts

SEED = 42


def uniform(size: int) -> bytes:
    """Uniformly random bytes."""
    rng = np.random.default_rng(SEED)
    return rng.integers(0, 256, size, dtype=np.uint8).tobytes()


def geometric(size: int) -> bytes:
    """Heavily skewed bytes: small values dominate."""
    rng = np.random.default_rng(SEED)
    values = np.minimum(rng.geometric(0.3, size) - 1, 255)
    return values.astype(np.uint8).tobytes()


def text_like(size: int) -> bytes:
    """Lowercase letters and spaces with English-like frequencies."""
    alphabet = np.frombuffer(b" etaoinshrdlu", dtype=np.uint8)
    weights = np.array([18, 12, 9, 8, 7, 7, 6, 6, 6, 6, 4, 4, 3], dtype=float)
    rng = np.random.default_rng(SEED)
    return rng.choice(alphabet, size, p=weights / weights.sum()).tobytes()


def runs(size: int) -> bytes:
    """Long runs of a few byte values."""
    rng = np.random.default_rng(SEED)
    lengths = rng.integers(1, 200, size // 50 + 1)
    values = rng.choice(np.array([0x00, 0x7F, 0xFF], dtype=np.uint8), len(lengths))
    return np.repeat(values, lengths)[:size].tobytes()


CORPORA = {
    "uniform": uniform,
    "geometric": geometric,
    "text": text_like,
    "runs": runs,
}


def get_parametrized_vectors():
    """Get corpus parameters with slow markers applied."""
    params = []
    for name, generator in CORPORA.items():
        params.append(pytest.param(generator, 2000, id=f"{name}-2k"))
        params.append(
            pytest.param(generator, 100_000, marks=pytest.mark.slow, id=f"{name}-100k")
        )
    return params


PARAMETRIZED_VECTORS = get_parametrized_vectors()


class TestVectorRoundTrip:
    """Test round-trip over synthetic corpora."""

    @pytest.mark.parametrize("generator, size", PARAMETRIZED_VECTORS)
    def test_round_trip(self, generator, size: int) -> None:
        """Test that compress then decompress returns original."""
        data = generator(size)
        assert len(data) == size
        assert decompress(compress(data)) == data

    @pytest.mark.parametrize("generator, size", PARAMETRIZED_VECTORS)
    def test_deterministic(self, generator, size: int) -> None:
        """Test that compressing twice gives identical output."""
        data = generator(size)
        assert compress(data) == compress(data)


class TestVectorSize:
    """Test compressed sizes against the code table."""

    @pytest.mark.parametrize("generator", list(CORPORA.values()), ids=list(CORPORA))
    def test_body_matches_code_lengths(self, generator) -> None:
        """Test that the body is exactly the sum of code lengths."""
        data = generator(5000)
        counts = read_for_counts(BitReader(data))
        codings = make_codings_from_tree(make_tree_from_counts(counts))
        body_bits = sum(
            count * len(codings[value]) for value, count in enumerate(counts) if count
        )

        compressed = compress(data)
        reader = BitReader(compressed)
        reader.read_bits(32)
        read_header(reader)
        total_bits = reader.position + body_bits

        assert len(compressed) == (total_bits + 7) // 8

    def test_skewed_beats_uniform(self) -> None:
        """Test that skewed data compresses much better than noise."""
        assert len(compress(geometric(20000))) < len(compress(uniform(20000))) // 2

    def test_uniform_does_not_shrink(self) -> None:
        """Test that random bytes cannot be compressed."""
        data = uniform(20000)
        assert len(compress(data)) >= len(data)

    def test_text_terminator_present(self) -> None:
        """Test that the terminator is a leaf of every corpus tree."""
        for generator in CORPORA.values():
            reader = BitReader(compress(generator(1000)))
            reader.read_bits(32)
            assert read_header(reader).leaves().count(PSEUDO_EOF) == 1
