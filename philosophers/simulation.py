"""The dining philosophers simulation: philosopher threads and their monitor."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from philosophers.clock import now_ms
from philosophers.parse import Settings

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"

_MONITOR_PAUSE = 0.0005
_WAIT_STEP = 0.0003
_ALONE_STEP = 0.00005
_ODD_START_DELAY = 0.001


def _wait_until(deadline_ms: int) -> None:
    while now_ms() < deadline_ms:
        time.sleep(_WAIT_STEP)


class Philosopher:
    """One diner sitting between fork ``left`` and fork ``right``."""

    def __init__(self, sim: Simulation, index: int) -> None:
        self.sim = sim
        self.id = index + 1
        self.left = index
        self.right = (index + 1) % sim.settings.philo_count
        self.last_meal = sim.start_time
        self.finished_meals = 0
        self.lock = threading.Lock()

    def run(self) -> None:
        """Thread body: wait for the start signal, then dine until the end."""
        with self.sim._start_lock:
            pass
        if self.id % 2 == 0:
            self._dine_left_first()
        else:
            self._dine_right_first()

    def _dine_left_first(self) -> None:
        while not self.sim.is_over():
            self._take_fork(self.left)
            self._take_fork(self.right)
            self.eat()
            self.sleep()
            self.think()

    def _dine_right_first(self) -> None:
        time.sleep(_ODD_START_DELAY)
        while not self.sim.is_over():
            self._take_fork(self.right)
            if self.sim.settings.philo_count == 1:
                self._wait_alone()
            else:
                self._take_fork(self.left)
                self.eat()
                self.sleep()
                self.think()
                time.sleep(_WAIT_STEP)

    def _take_fork(self, fork: int) -> None:
        self.sim.forks[fork].acquire()
        self.sim.write(self.id, TAKEN_FORK)

    def _wait_alone(self) -> None:
        # A lone philosopher has a single fork and can never eat.
        started = now_ms()
        while now_ms() - started <= self.sim.settings.time_to_die:
            time.sleep(_ALONE_STEP)
        self.sim.forks[self.left].release()

    def eat(self) -> None:
        """Eat for ``time_to_eat`` ms, then put both forks down."""
        finish_at = now_ms() + self.sim.settings.time_to_eat
        with self.lock:
            self.last_meal = now_ms()
        self.sim.write(self.id, EATING)
        _wait_until(finish_at)
        with self.lock:
            self.finished_meals += 1
        self.sim.forks[self.left].release()
        self.sim.forks[self.right].release()

    def sleep(self) -> None:
        """Sleep for ``time_to_sleep`` ms."""
        wake_at = now_ms() + self.sim.settings.time_to_sleep
        self.sim.write(self.id, SLEEPING)
        _wait_until(wake_at)

    def think(self) -> None:
        """Announce thinking; thinking lasts until forks are free."""
        self.sim.write(self.id, THINKING)


class Simulation:
    """Owns the forks and philosophers and watches for the end condition."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = sys.stdout if out is None else out
        self.forks = [threading.Lock() for _ in range(settings.philo_count)]
        self._write_lock = threading.Lock()
        self._start_lock = threading.Lock()
        self._ended = threading.Event()
        self.start_time = now_ms()
        self.philosophers = [
            Philosopher(self, index) for index in range(settings.philo_count)
        ]

    def run(self) -> None:
        """Start every philosopher, monitor until the end, and join them."""
        threads = []
        with self._start_lock:
            self.start_time = now_ms()
            for philo in self.philosophers:
                with philo.lock:
                    philo.last_meal = self.start_time
                thread = threading.Thread(
                    target=philo.run, name=f"philosopher-{philo.id}", daemon=True
                )
                thread.start()
                threads.append(thread)
        while not (self.check_dead() or self.check_finished_meals()):
            time.sleep(_MONITOR_PAUSE)
        for thread in threads:
            thread.join()

    def check_dead(self) -> bool:
        """Announce and end the simulation if a philosopher has starved."""
        for philo in self.philosophers:
            with philo.lock:
                elapsed = now_ms() - philo.last_meal
            if elapsed >= self.settings.time_to_die:
                self._finish(f"{philo.id} died")
                return True
        return False

    def check_finished_meals(self) -> bool:
        """Announce and end the simulation once everyone has eaten enough."""
        meals = self.settings.meals_to_eat
        if meals is None:
            return False
        for philo in self.philosophers:
            with philo.lock:
                if philo.finished_meals < meals:
                    return False
        self._finish(f"Everyone finished {meals} meals")
        return True

    def write(self, philo_id: int, msg: str) -> None:
        """Print a timestamped status line unless the simulation has ended."""
        with self._write_lock:
            if self._ended.is_set():
                return
            self._emit(f"{philo_id} {msg}")

    def is_over(self) -> bool:
        """Whether the end of the simulation has been announced."""
        return self._ended.is_set()

    def _finish(self, text: str) -> None:
        with self._write_lock:
            self._emit(text)
            self._ended.set()

    def _emit(self, text: str) -> None:
        self.out.write(f"{now_ms() - self.start_time} {text}\n")
        self.out.flush()