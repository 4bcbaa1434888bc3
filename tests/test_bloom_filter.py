import pytest

from searchcore.bloom_filter import BloomFilter


def test_inserted_items_are_contained():
    bloom = BloomFilter(100, 0.01)
    words = [f"word-{i}" for i in range(100)]
    for word in words:
        bloom.insert(word)
    assert all(word in bloom for word in words)


def test_empty_filter_contains_nothing():
    bloom = BloomFilter(100, 0.01)
    assert not any(f"item-{i}" in bloom for i in range(200))


def test_false_positive_rate_is_bounded():
    bloom = BloomFilter(1000, 0.01)
    for i in range(1000):
        bloom.insert(f"present-{i}")
    false_positives = sum(f"absent-{i}" in bloom for i in range(10000))
    assert false_positives / 10000 < 0.05


def test_memory_usage_pinned():
    assert BloomFilter(1000, 0.01).memory_usage() == 1200


def test_memory_usage_minimum_block():
    assert BloomFilter(1, 0.5).memory_usage() == 8


def test_memory_usage_is_whole_blocks_and_grows():
    small = BloomFilter(100, 0.01).memory_usage()
    large = BloomFilter(10000, 0.01).memory_usage()
    assert small % 8 == 0
    assert large % 8 == 0
    assert large > small


def test_lower_rate_needs_more_memory():
    assert BloomFilter(500, 0.001).memory_usage() > BloomFilter(500, 0.1).memory_usage()


def test_str_and_bytes_hash_the_same():
    bloom = BloomFilter(10, 0.01)
    bloom.insert("héllo")
    assert "héllo".encode("utf-8") in bloom


def test_non_string_is_not_contained():
    bloom = BloomFilter(10, 0.01)
    bloom.insert("1")
    assert (1 in bloom) is False


@pytest.mark.parametrize(
    "num_objects, rate",
    [(0, 0.1), (-5, 0.1), (10, 0.0), (10, 1.0), (10, -0.2), (10, 1.5)],
)
def test_invalid_parameters_raise(num_objects, rate):
    with pytest.raises(ValueError):
        BloomFilter(num_objects, rate)