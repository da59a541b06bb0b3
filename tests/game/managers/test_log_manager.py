"""
Tests for LogManager collection and filtering.
"""

import pytest
from turnduel.core.events import LogMessage
from turnduel.game.managers import LogCategory, LogLevel, LogManager


def publish(event_manager, message, category="BATTLE", level="INFO", turn=1):
    event_manager.publish_immediate(
        LogMessage(turn=turn, message=message, category=category, level=level, source="test")
    )


@pytest.fixture
def log_manager(event_manager):
    return LogManager(event_manager, max_messages=5)


class TestLogManager:

    def test_collects_log_events(self, log_manager, event_manager):
        publish(event_manager, "Hero faces Goblin!", turn=0)

        entry = log_manager.latest()
        assert entry.text == "Hero faces Goblin!"
        assert entry.category == LogCategory.BATTLE
        assert entry.turn == 0

    def test_buffer_is_bounded(self, log_manager, event_manager):
        for i in range(8):
            publish(event_manager, f"line {i}")

        assert [m.text for m in log_manager.get_messages()] == [f"line {i}" for i in range(3, 8)]

    def test_debug_hidden_at_info_level(self, log_manager, event_manager):
        publish(event_manager, "visible")
        publish(event_manager, "hidden", category="DEBUG", level="DEBUG")

        assert [m.text for m in log_manager.get_messages()] == ["visible"]

        log_manager.set_log_level(LogLevel.DEBUG)
        assert len(log_manager.get_messages()) == 2

    def test_unknown_category_and_level_fall_back(self, log_manager, event_manager):
        publish(event_manager, "odd", category="weird", level="loud")

        entry = log_manager.latest()
        assert entry.category == LogCategory.SYSTEM
        assert entry.level == LogLevel.INFO

    def test_filter_by_category(self, log_manager, event_manager):
        publish(event_manager, "Your turn. Choose an action!", category="TURN")
        publish(event_manager, "Hero uses Attack on Goblin for 10 damage!")

        turn_only = log_manager.get_messages(categories={LogCategory.TURN})
        assert [m.text for m in turn_only] == ["Your turn. Choose an action!"]

    def test_disable_category(self, log_manager, event_manager):
        publish(event_manager, "Enemy's turn...", category="TURN")
        log_manager.disable_category(LogCategory.TURN)

        assert log_manager.get_messages() == []

    def test_count_returns_newest(self, log_manager, event_manager):
        for i in range(4):
            publish(event_manager, f"line {i}")

        assert [m.text for m in log_manager.get_messages(count=2)] == ["line 2", "line 3"]

    def test_count_zero_returns_nothing(self, log_manager, event_manager):
        publish(event_manager, "line")

        assert log_manager.get_messages(count=0) == []

    def test_formatted(self, log_manager, event_manager):
        publish(event_manager, "You are victorious!")
        assert log_manager.formatted() == ["[BTL] You are victorious!"]

    def test_direct_log_and_clear(self, log_manager):
        log_manager.log("Engine ready", LogCategory.SYSTEM)
        assert log_manager.latest().format() == "[SYS] Engine ready"

        log_manager.clear()
        assert log_manager.latest() is None

    def test_toggle_debug(self, log_manager):
        assert not log_manager.is_debug_enabled()

        log_manager.toggle_debug()
        assert log_manager.is_debug_enabled()

        log_manager.toggle_debug()
        assert not log_manager.is_debug_enabled()
        assert log_manager.log_level == LogLevel.INFO
