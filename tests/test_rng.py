from laberinto.rng import (
    Mulberry32, fnv1a32, seed_to_state, make_rng, derive_seed,
    seeded_shuffle, shuffle_with, walls_rng, TARGETS_STREAM, ACTIVE_STREAM,
)

def test_fnv1a32_reference_vectors():
    assert fnv1a32(b"") == 0x811C9DC5
    assert fnv1a32(b"a") == 0xE40C292C
    assert fnv1a32(b"foobar") == 0xBF9CF968

def test_seed_to_state_is_utf8_and_32bit():
    assert seed_to_state("foobar") == 0xBF9CF968
    assert seed_to_state("soñar") == fnv1a32("soñar".encode("utf-8"))
    for s in ("", "aula1", "x" * 500):
        assert 0 <= seed_to_state(s) <= 0xFFFFFFFF

def test_same_state_same_stream():
    a, b = make_rng(1234), make_rng(1234)
    assert [a() for _ in range(50)] == [b() for _ in range(50)]

def test_generators_do_not_share_state():
    a, b = make_rng(99), make_rng(99)
    first = a()
    a(); a()
    assert b() == first

def test_random_range_and_index_bounds():
    rng = Mulberry32(seed_to_state("aula1"))
    for _ in range(2000):
        v = rng.random()
        assert 0.0 <= v < 1.0
    for n in (1, 2, 3, 7):
        for _ in range(200):
            assert 0 <= rng.index(n) < n

def test_derive_seed():
    assert derive_seed("aula1", "targets") == "aula1|targets"

def test_shuffle_reproducible_and_pure():
    xs = list(range(10))
    a = seeded_shuffle(xs, "seed1")
    assert a == seeded_shuffle(xs, "seed1")
    assert sorted(a) == xs
    assert xs == list(range(10))  # input untouched

def test_shuffle_differs_between_seeds():
    xs = list(range(10))
    assert seeded_shuffle(xs, "seed1") != seeded_shuffle(xs, "seed2")

def test_shuffle_tiny_inputs():
    assert seeded_shuffle([], "s") == []
    assert seeded_shuffle(["only"], "s") == ["only"]
    assert shuffle_with((1, 2), Mulberry32(0)) in ([1, 2], [2, 1])

def test_walls_stream_is_not_the_carve_stream():
    carve = Mulberry32(seed_to_state("aula1"))
    walls = walls_rng("aula1")
    assert [carve.next32() for _ in range(4)] != [walls.next32() for _ in range(4)]

def _first_draws(rng, n=4):
    return [rng.next32() for _ in range(n)]

def test_targets_and_active_streams_do_not_alias():
    for s in ("aula1", "", "seed1"):
        carve = _first_draws(Mulberry32(seed_to_state(s)))
        walls = _first_draws(walls_rng(s))
        targets = _first_draws(Mulberry32(seed_to_state(derive_seed(s, TARGETS_STREAM))))
        active = _first_draws(Mulberry32(seed_to_state(derive_seed(s, ACTIVE_STREAM))))
        assert len({tuple(carve), tuple(walls), tuple(targets), tuple(active)}) == 4
