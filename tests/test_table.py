import io

import pytest

from philosophers.args import Config
from philosophers.clock import now_ms
from philosophers.table import Table


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def table(out):
    return Table(Config(3, 800, 200, 200, 2), out)


def test_seating(table):
    assert [p.num for p in table.philosophers] == [1, 2, 3]
    first, second, third = table.philosophers
    assert first.fork_right is second.fork_left
    assert third.fork_right is first.fork_left
    assert len({id(f) for f in table.forks}) == 3


def test_single_philosopher_shares_one_fork(out):
    table = Table(Config(1, 800, 200, 200), out)
    only = table.philosophers[0]
    assert only.fork_left is only.fork_right


def test_stop(table):
    assert table.is_running() is True
    assert table.stop() is True
    assert table.stop() is False
    assert table.is_running() is False


def test_print_status_format(table, out):
    start = table.set_start()
    table.print_status(table.philosophers[0], "has taken a fork")
    elapsed = now_ms() - start
    stamp, num, *words = out.getvalue().split()
    assert 0 <= int(stamp) <= elapsed
    assert num == "1"
    assert " ".join(words) == "has taken a fork"
    assert out.getvalue().endswith("\n")


def test_print_status_silent_after_stop(table, out):
    assert table.stop() is True
    table.print_status(table.philosophers[1], "is sleeping")
    assert table.is_running() is False
    assert out.getvalue() == ""


def test_set_start_resets_last_meal(table):
    start = table.set_start()
    assert table.t_start == start
    assert all(p.t_last == start for p in table.philosophers)


def test_all_ate(table):
    assert table.all_ate() is False
    for philosopher in table.philosophers:
        philosopher.finish_meal()
    assert table.all_ate() is False
    for philosopher in table.philosophers:
        philosopher.finish_meal()
    assert table.all_ate() is True
    assert all(p.ate == 2 for p in table.philosophers)


def test_all_ate_without_limit(out):
    table = Table(Config(2, 800, 200, 200), out)
    for philosopher in table.philosophers:
        philosopher.finish_meal()
    assert table.all_ate() is False


def test_starved(table):
    philosopher = table.philosophers[0]
    philosopher.t_last = 1000
    limit = philosopher.t_last + table.config.time_to_die
    assert philosopher.starved(limit) is False
    assert philosopher.starved(limit + 1) is True


def test_record_meal_start(table, out):
    table.set_start()
    philosopher = table.philosophers[2]
    before = philosopher.t_last
    philosopher.record_meal_start()
    assert philosopher.t_last >= before
    assert out.getvalue().split(maxsplit=2)[1:] == ["3", "is eating\n"]


def test_pick_up_and_put_down(table, out):
    table.set_start()
    philosopher = table.philosophers[0]
    assert philosopher.pick_up_forks() is True
    assert philosopher.fork_left.locked() and philosopher.fork_right.locked()
    assert out.getvalue().count("has taken a fork") == 2
    philosopher.put_down_forks()
    assert not philosopher.fork_left.locked()
    assert not philosopher.fork_right.locked()


def test_odd_takes_left_first_and_backs_off(table, out):
    philosopher = table.philosophers[0]
    philosopher.fork_right.acquire()
    table.stop()
    assert philosopher.pick_up_forks() is False
    assert not philosopher.fork_left.locked()
    assert out.getvalue() == ""
    philosopher.fork_right.release()


def test_even_takes_right_first_and_backs_off(table):
    philosopher = table.philosophers[1]
    philosopher.fork_left.acquire()
    table.stop()
    assert philosopher.pick_up_forks() is False
    assert not philosopher.fork_right.locked()
    philosopher.fork_left.release()