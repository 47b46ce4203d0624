import io

import pytest

from philosophers.parse import Settings
from philosophers.simulation import Simulation


def _parse(output):
    result = []
    for line in output.splitlines():
        stamp, rest = line.split(" ", 1)
        result.append((int(stamp), rest))
    return result


def _run(settings):
    out = io.StringIO()
    Simulation(settings, out).run()
    return _parse(out.getvalue())


def test_single_philosopher_takes_one_fork_and_dies():
    lines = _run(Settings(1, 300, 100, 100))
    assert [text for _, text in lines] == ["1 has taken a fork", "1 died"]
    assert lines[-1][0] >= 300


def test_starving_table_ends_with_one_death():
    lines = _run(Settings(4, 310, 200, 100))
    texts = [text for _, text in lines]
    assert texts[-1].endswith("died")
    assert sum(text.endswith("died") for text in texts) == 1


def test_timestamps_never_decrease():
    lines = _run(Settings(4, 310, 200, 100))
    stamps = [stamp for stamp, _ in lines]
    assert stamps == sorted(stamps)


@pytest.mark.parametrize("count", [4, 5])
def test_everyone_finishes_meals(count):
    lines = _run(Settings(count, 800, 200, 200, 2))
    texts = [text for _, text in lines]
    assert texts[-1] == "Everyone finished 2 meals"
    assert not any(text.endswith("died") for text in texts)
    for philo_id in range(1, count + 1):
        assert texts.count(f"{philo_id} is eating") >= 2


def test_messages_follow_eat_sleep_think_order():
    lines = _run(Settings(4, 800, 200, 200, 2))
    own = [text.split(" ", 1)[1] for _, text in lines if text.startswith("2 ")]
    eat_index = own.index("is eating")
    assert own[eat_index - 2 : eat_index] == ["has taken a fork", "has taken a fork"]
    assert own[eat_index + 1 : eat_index + 3] == ["is sleeping", "is thinking"]


def test_check_dead_reports_starved_philosopher():
    out = io.StringIO()
    sim = Simulation(Settings(3, 1000, 100, 100), out)
    assert sim.check_dead() is False
    assert out.getvalue() == ""
    sim.philosophers[2].last_meal -= 1000
    assert sim.check_dead() is True
    assert out.getvalue().splitlines()[-1].endswith(" 3 died")
    assert sim.is_over() is True


def test_check_finished_meals_without_limit_is_false():
    out = io.StringIO()
    sim = Simulation(Settings(2, 1000, 100, 100), out)
    for philo in sim.philosophers:
        philo.finished_meals = 50
    assert sim.check_finished_meals() is False
    assert sim.is_over() is False


def test_check_finished_meals_requires_everyone():
    out = io.StringIO()
    sim = Simulation(Settings(3, 1000, 100, 100, 1), out)
    sim.philosophers[0].finished_meals = 1
    sim.philosophers[1].finished_meals = 1
    assert sim.check_finished_meals() is False
    sim.philosophers[2].finished_meals = 1
    assert sim.check_finished_meals() is True
    assert out.getvalue().splitlines()[-1].endswith(" Everyone finished 1 meals")
    assert sim.is_over() is True


def test_write_formats_and_stops_after_end():
    out = io.StringIO()
    sim = Simulation(Settings(2, 1000, 100, 100), out)
    sim.write(2, "is thinking")
    [(stamp, text)] = _parse(out.getvalue())
    assert text == "2 is thinking"
    assert stamp >= 0
    sim.philosophers[0].last_meal -= 2000
    sim.check_dead()
    before = out.getvalue()
    sim.write(1, "is eating")
    assert out.getvalue() == before


def test_philosophers_sit_between_neighbouring_forks():
    sim = Simulation(Settings(3, 1000, 100, 100), io.StringIO())
    seats = [(p.id, p.left, p.right) for p in sim.philosophers]
    assert seats == [(1, 0, 1), (2, 1, 2), (3, 2, 0)]