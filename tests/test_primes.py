import struct

import pytest

from edados.primes import PrimeList, create_prime_file


def _small_primes(limit):
    flags = [True] * (limit + 1)
    flags[0] = flags[1] = False
    for i in range(2, int(limit ** 0.5) + 1):
        if flags[i]:
            for j in range(i * i, limit + 1, i):
                flags[j] = False
    return [i for i, is_prime in enumerate(flags) if is_prime]


@pytest.fixture
def prime_file(tmp_path):
    primes = _small_primes(2000)
    txt = tmp_path / "primes.txt"
    txt.write_text("".join(f"{p}\n" for p in primes), encoding="ascii")
    out = tmp_path / "primes.dat"
    written = create_prime_file(txt, out, len(primes))
    return out, primes, written


def test_next_prime_after_1000(prime_file):
    path, primes, _ = prime_file
    pl = PrimeList.load(path, len(primes))
    assert pl.next_prime(1000) == 1009


def test_create_writes_four_bytes_per_prime(prime_file):
    path, primes, written = prime_file
    assert written == len(primes)
    data = path.read_bytes()
    assert len(data) == 4 * len(primes)
    assert struct.unpack_from("<i", data, 0)[0] == 2


def test_round_trip(prime_file):
    path, primes, _ = prime_file
    assert PrimeList.load(path, len(primes)).primes == primes


def test_create_limits_count(tmp_path):
    txt = tmp_path / "p.txt"
    txt.write_text("2\n3\n5\n7\n11\n", encoding="ascii")
    out = tmp_path / "p.dat"
    assert create_prime_file(txt, out, 3) == 3
    assert PrimeList.load(out, 10).primes == [2, 3, 5]


def test_load_truncates_to_requested(prime_file):
    path, primes, _ = prime_file
    pl = PrimeList.load(path, 5)
    assert len(pl) == 5
    assert pl.primes == primes[:5]


def test_next_prime_of_prime_is_strictly_greater():
    pl = PrimeList(_small_primes(100))
    assert pl.next_prime(7) == 11
    assert pl.next_prime(6) == 7
    assert pl.next_prime(0) == 2


def test_next_prime_is_successor_everywhere():
    primes = _small_primes(500)
    pl = PrimeList(primes)
    for n in range(0, primes[-1]):
        p = pl.next_prime(n)
        assert p > n
        assert p in primes
        assert not any(n < q < p for q in primes)


def test_next_prime_past_end_raises():
    pl = PrimeList([2, 3, 5])
    with pytest.raises(ValueError):
        pl.next_prime(5)


def test_unsorted_primes_rejected():
    with pytest.raises(ValueError):
        PrimeList([3, 2, 5])


def test_negative_count_rejected(tmp_path):
    with pytest.raises(ValueError):
        PrimeList.load(tmp_path / "missing.dat", -1)