"""State managers for the transient per-page widget state.

State is held in memory only and guarded by asyncio.Lock. All state managers
inherit from the StateManager ABC.
"""

import asyncio
import secrets
from abc import ABC, abstractmethod
from collections import OrderedDict

from weather_widget.exceptions import WidgetNotFoundException
from weather_widget.logging_config import get_logger, log_with_context
from weather_widget.models.weather import WeatherData
from weather_widget.models.widget import WidgetState

logger = get_logger(__name__)


class StateManager(ABC):
    """Base class for all state managers.

    Subclasses must implement the lifecycle methods.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the state manager (called during app startup)."""
        pass

    @abstractmethod
    async def cleanup(self) -> None:
        """Cleanup resources (called during app shutdown)."""
        pass


class WeatherWidget:
    """View-state of one displayed widget page.

    Each mutator writes only its own fields, so a search that completes
    after a newer one simply overwrites the result.
    """

    def __init__(self, widget_id: str):
        self.widget_id = widget_id
        self._state = WidgetState()
        self._lock = asyncio.Lock()

    async def snapshot(self) -> WidgetState:
        """Return a copy of the current state."""
        async with self._lock:
            return self._state.model_copy(deep=True)

    async def set_location(self, location: str) -> None:
        async with self._lock:
            self._state.location = location

    async def start_loading(self) -> None:
        """Mark a search as in flight and clear any previous error."""
        async with self._lock:
            self._state.is_loading = True
            self._state.error = None

    async def show_weather(self, weather: WeatherData) -> None:
        """Replace the displayed weather wholesale."""
        async with self._lock:
            self._state.weather = weather
            self._state.error = None

    async def show_error(self, message: str) -> None:
        """Show an error and drop the displayed weather."""
        async with self._lock:
            self._state.error = message
            self._state.weather = None

    async def stop_loading(self) -> None:
        async with self._lock:
            self._state.is_loading = False


class WidgetStateManager(StateManager):
    """In-memory registry of live widgets, one per rendered page.

    Bounded by max_widgets; the least recently used widget is evicted first.
    """

    def __init__(self, max_widgets: int = 1000):
        self._widgets: OrderedDict[str, WeatherWidget] = OrderedDict()
        self._max_widgets = max_widgets
        self._lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Initialize the widget registry."""
        # No initialization needed for now
        pass

    async def cleanup(self) -> None:
        """Drop all widget states on shutdown."""
        async with self._lock:
            self._widgets.clear()

    def _register(self, widget: WeatherWidget) -> None:
        """Add a widget and evict the least recently used ones over the bound.

        Caller must hold the lock.
        """
        self._widgets[widget.widget_id] = widget
        while len(self._widgets) > self._max_widgets:
            evicted_id, _ = self._widgets.popitem(last=False)
            log_with_context(
                logger,
                "debug",
                "Widget state evicted",
                widget_id=evicted_id,
                event_type="widget_evicted",
            )

    async def create(self) -> WeatherWidget:
        """Register a fresh widget with a random id.

        Returns:
            The new WeatherWidget
        """
        widget = WeatherWidget(secrets.token_urlsafe(16))
        async with self._lock:
            self._register(widget)
        return widget

    async def get(self, widget_id: str) -> WeatherWidget:
        """Look up a live widget and mark it as recently used.

        Raises:
            WidgetNotFoundException: If the widget is unknown or was evicted
        """
        async with self._lock:
            widget = self._widgets.get(widget_id)
            if widget is not None:
                self._widgets.move_to_end(widget_id)
        if widget is None:
            raise WidgetNotFoundException(widget_id)
        return widget

    async def get_or_restore(self, widget_id: str) -> WeatherWidget:
        """Look up a widget, re-registering an empty one if it was evicted.

        Used by the page routes so a long-open page keeps working after
        its state was dropped.
        """
        async with self._lock:
            widget = self._widgets.get(widget_id)
            if widget is not None:
                self._widgets.move_to_end(widget_id)
                return widget

            widget = WeatherWidget(widget_id)
            self._register(widget)

        log_with_context(
            logger,
            "info",
            "Widget state restored",
            widget_id=widget_id,
            event_type="widget_restored",
        )
        return widget

    async def count(self) -> int:
        """Number of live widgets."""
        async with self._lock:
            return len(self._widgets)
