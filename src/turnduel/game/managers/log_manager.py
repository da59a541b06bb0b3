"""
Log management for match narration and debugging.

This module collects every ``LogMessage`` event published on the event bus
into a bounded, categorized buffer that a host can filter and display.
"""
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from ...core.events import EventType, LogMessage as LogEvent

if TYPE_CHECKING:
    from ...core.events.event_manager import EventManager


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # Engine lifecycle messages
    BATTLE = auto()     # Action narration
    TURN = auto()       # Turn announcements
    AI = auto()         # AI decision messages
    DEBUG = auto()      # Debug messages
    WARNING = auto()    # Warning messages
    ERROR = auto()      # Error messages


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.BATTLE: "BTL",
    LogCategory.TURN: "TRN",
    LogCategory.AI: "AI",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
}


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class LogEntry:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    level: LogLevel = LogLevel.INFO
    turn: int = 0
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            parts.append(f"[{CATEGORY_TAGS.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


class LogManager:
    """Collects match log messages with categorization and filtering."""

    def __init__(
        self,
        event_manager: "EventManager",
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO
    ):
        """Initialize the log manager.

        Args:
            event_manager: Event bus whose LogMessage events are collected
            max_messages: Maximum number of messages to store in the buffer
            default_level: Minimum level returned by ``get_messages``
        """
        self.messages: deque[LogEntry] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories = set(LogCategory)  # All categories enabled by default
        self.event_manager = event_manager

        self.event_manager.subscribe(
            EventType.LOG_MESSAGE,
            self._handle_log_message_event,
            subscriber_name="LogManager.log_message"
        )

    def _handle_log_message_event(self, event) -> None:
        """Store a log message event in the buffer."""
        if not isinstance(event, LogEvent):
            return

        try:
            category = LogCategory[event.category.upper()]
        except (KeyError, AttributeError):
            category = LogCategory.SYSTEM

        try:
            level = LogLevel[event.level.upper()]
        except (KeyError, AttributeError):
            level = LogLevel.INFO

        self.messages.append(LogEntry(text=event.message, category=category, level=level, turn=event.turn))

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM, level: LogLevel = LogLevel.INFO) -> None:
        """Add a message to the log directly, bypassing the event bus."""
        self.messages.append(LogEntry(text=text, category=category, level=level))

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogEntry]:
        """Get recent messages, filtered by category and level.

        Args:
            count: Maximum number of messages to return (None for all)
            categories: Set of categories to include (None for all enabled)

        Returns:
            List of recent messages, oldest first
        """
        wanted = categories if categories else self.enabled_categories
        filtered = [
            msg for msg in self.messages
            if msg.category in wanted
            and msg.category in self.enabled_categories
            and msg.level.value >= self.log_level.value
        ]

        if count == 0:
            return []
        if count is not None and count < len(filtered):
            return filtered[-count:]
        return filtered

    def latest(self) -> Optional[LogEntry]:
        """The most recent visible message, or None."""
        visible = self.get_messages(count=1)
        return visible[0] if visible else None

    def formatted(self, count: Optional[int] = None, include_timestamp: bool = False) -> list[str]:
        """Visible messages formatted for display."""
        return [msg.format(include_timestamp=include_timestamp) for msg in self.get_messages(count)]

    def clear(self) -> None:
        """Clear all messages from the log."""
        self.messages.clear()

    def enable_category(self, category: LogCategory) -> None:
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        self.enabled_categories.discard(category)

    def set_log_level(self, level: LogLevel) -> None:
        """Set the minimum log level."""
        self.log_level = level

    def is_debug_enabled(self) -> bool:
        """Check if debug messages are currently enabled."""
        return LogCategory.DEBUG in self.enabled_categories and self.log_level == LogLevel.DEBUG

    def toggle_debug(self) -> None:
        """Toggle debug message visibility."""
        if self.is_debug_enabled():
            self.disable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.INFO)
        else:
            self.enable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.DEBUG)
