"""Game state and rules of the clicker."""

from __future__ import annotations

import os
from collections.abc import Callable

from . import savefile
from .savefile import SaveData

ScoreListener = Callable[[int], None]


class InsufficientScoreError(Exception):
    """Raised when a change would take the score below zero."""

    def __init__(self, score: int, change: int) -> None:
        super().__init__(f"score {score} cannot cover a change of {change}")
        self.score = score
        self.change = change


class ClickerGame:
    """Score, upgrades and the auto-clicker of one game."""

    def __init__(self) -> None:
        defaults = SaveData()
        self.score = defaults.score
        self.clicks = defaults.clicks
        self.click_value = defaults.click_value
        self.auto_clicker_value = defaults.auto_clicker_value
        self.auto_clicker_upgrade_cost = defaults.auto_clicker_upgrade_cost
        self.upgrade_cost = defaults.upgrade_cost
        self.auto_clicker_enabled = defaults.auto_clicker_enabled
        self._listeners: list[ScoreListener] = []

    def subscribe(self, callback: ScoreListener) -> None:
        """Call ``callback`` with the new score whenever the score changes."""
        self._listeners.append(callback)

    def _score_changed(self) -> None:
        self.auto_clicker_enabled = self.auto_clicker_value > 0
        for listener in list(self._listeners):
            listener(self.score)

    def click(self) -> None:
        """Register one click."""
        self.score += self.click_value
        self.clicks += 1
        self._score_changed()

    def update_score(self, value: int) -> None:
        """Add ``value`` to the score; refuse to go below zero."""
        if self.score + value < 0:
            raise InsufficientScoreError(self.score, value)
        self.score += value
        self._score_changed()

    def set_score(self, value: int) -> None:
        """Replace the score."""
        self.score = value
        self._score_changed()

    def tick(self) -> None:
        """Advance the auto-clicker by one second."""
        if self.auto_clicker_enabled:
            self.update_score(self.auto_clicker_value)

    def can_buy_upgrade(self) -> bool:
        return self.score >= self.upgrade_cost

    def can_buy_auto_clicker(self) -> bool:
        return self.score >= self.auto_clicker_upgrade_cost

    def buy_upgrade(self) -> None:
        """Raise points per click by one; the price doubles."""
        cost = self.upgrade_cost
        if not self.can_buy_upgrade():
            raise InsufficientScoreError(self.score, -cost)
        self.click_value += 1
        self.upgrade_cost = cost * 2
        self.update_score(-cost)

    def buy_auto_clicker(self) -> None:
        """Raise auto-clicker points per second by one; the price grows tenfold."""
        cost = self.auto_clicker_upgrade_cost
        if not self.can_buy_auto_clicker():
            raise InsufficientScoreError(self.score, -cost)
        self.auto_clicker_value += 1
        self.auto_clicker_upgrade_cost = cost * 10
        self.update_score(-cost)

    def snapshot(self) -> SaveData:
        """Return the persistent state."""
        return SaveData(
            score=self.score,
            clicks=self.clicks,
            click_value=self.click_value,
            auto_clicker_value=self.auto_clicker_value,
            auto_clicker_upgrade_cost=self.auto_clicker_upgrade_cost,
            upgrade_cost=self.upgrade_cost,
            auto_clicker_enabled=self.auto_clicker_enabled,
        )

    def restore(self, data: SaveData) -> None:
        """Replace the state with ``data`` and notify listeners."""
        self.score = data.score
        self.clicks = data.clicks
        self.click_value = data.click_value
        self.auto_clicker_value = data.auto_clicker_value
        self.auto_clicker_upgrade_cost = data.auto_clicker_upgrade_cost
        self.upgrade_cost = data.upgrade_cost
        self.auto_clicker_enabled = data.auto_clicker_enabled
        self._score_changed()

    def save(self, path: str | os.PathLike[str]) -> None:
        savefile.write(path, self.snapshot())

    def load(self, path: str | os.PathLike[str]) -> None:
        self.restore(savefile.read(path))