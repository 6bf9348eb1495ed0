from rkmatch.bloom.filter import (
    BloomFilter,
    H1_PRIME,
    H2_PRIME,
    derive_index,
    filter_size_for,
    theoretical_false_positive_rate,
)
