from rbsql.snowflake import DEFAULT_EPOCH, Snowflake, new_snowflake_id
from rbsql.timing import bench


def _fixed_clock(millis):
    return lambda: millis


def _parts(value):
    return value >> 22, (value >> 17) & 0x1F, (value >> 12) & 0x1F, value & 0xFFF


def test_new_block_id():
    first = new_snowflake_id()
    second = new_snowflake_id()
    assert second > first


def test_bench_new_block_id():
    ids = []
    elapsed = bench(1000, lambda: ids.append(new_snowflake_id()))
    assert elapsed > 0
    assert len(set(ids)) == 1000
    assert ids == sorted(ids)


def test_defaults():
    flake = Snowflake()
    assert flake.epoch == 1_564_790_400_000
    assert (flake.worker_id, flake.datacenter_id) == (1, 1)


def test_layout_of_id():
    flake = Snowflake(
        epoch=DEFAULT_EPOCH,
        worker_id=3,
        datacenter_id=7,
        clock=_fixed_clock(DEFAULT_EPOCH + 1000),
    )
    assert _parts(flake.generate()) == (1000, 3, 7, 0)


def test_same_millisecond_increments_sequence():
    flake = Snowflake(clock=_fixed_clock(DEFAULT_EPOCH + 50))
    sequences = [_parts(flake.generate())[3] for _ in range(4)]
    assert sequences == [0, 1, 2, 3]


def test_new_millisecond_resets_sequence():
    ticks = iter([DEFAULT_EPOCH + 10, DEFAULT_EPOCH + 10, DEFAULT_EPOCH + 11])
    flake = Snowflake(clock=lambda: next(ticks))
    parts = [_parts(flake.generate()) for _ in range(3)]
    assert [p[3] for p in parts] == [0, 1, 0]
    assert [p[0] for p in parts] == [10, 10, 11]


def test_sequence_wraps_and_rereads_clock():
    calls = {"n": 0}

    def clock():
        calls["n"] += 1
        return DEFAULT_EPOCH + (5 if calls["n"] <= 4096 else 6)

    flake = Snowflake(clock=clock)
    ids = [flake.generate() for _ in range(4096)]
    last = flake.generate()
    assert _parts(ids[-1])[3] == 4095
    assert _parts(last)[0] == 6
    assert _parts(last)[3] == 0


def test_copy_keeps_state():
    flake = Snowflake(clock=_fixed_clock(DEFAULT_EPOCH + 20))
    flake.generate()
    flake.generate()
    clone = flake.copy()
    assert clone.generate() == flake.generate()
    assert clone == flake