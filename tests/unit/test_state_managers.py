"""Tests for widget state management."""

import pytest

from weather_widget.exceptions import WidgetNotFoundException
from weather_widget.models.weather import WeatherData
from weather_widget.state_managers import StateManager, WidgetStateManager


@pytest.fixture
def paris_weather():
    return WeatherData(temperature=18.0, description="Cloudy", location="Paris")


class TestWeatherWidget:
    """Tests for the per-page widget state."""

    @pytest.mark.asyncio
    async def test_set_location(self, widget):
        await widget.set_location("Ber")
        await widget.set_location("Berlin")

        assert (await widget.snapshot()).location == "Berlin"

    @pytest.mark.asyncio
    async def test_show_weather_clears_error(self, widget, paris_weather):
        await widget.show_error("boom")
        await widget.show_weather(paris_weather)

        state = await widget.snapshot()
        assert state.weather == paris_weather
        assert state.error is None

    @pytest.mark.asyncio
    async def test_show_error_clears_weather(self, widget, paris_weather):
        await widget.show_weather(paris_weather)
        await widget.show_error("City not found. Please try again.")

        state = await widget.snapshot()
        assert state.weather is None
        assert state.error == "City not found. Please try again."

    @pytest.mark.asyncio
    async def test_start_and_stop_loading(self, widget):
        await widget.show_error("old error")
        await widget.start_loading()

        state = await widget.snapshot()
        assert state.is_loading is True
        assert state.error is None

        await widget.stop_loading()
        assert (await widget.snapshot()).is_loading is False

    @pytest.mark.asyncio
    async def test_snapshot_is_a_copy(self, widget):
        snapshot = await widget.snapshot()
        snapshot.location = "changed"

        assert (await widget.snapshot()).location == ""


class TestWidgetStateManager:
    """Tests for the widget registry."""

    def test_is_state_manager(self, widget_state_manager):
        assert isinstance(widget_state_manager, StateManager)

    @pytest.mark.asyncio
    async def test_create_and_get(self, widget_state_manager):
        widget = await widget_state_manager.create()

        assert await widget_state_manager.get(widget.widget_id) is widget
        assert await widget_state_manager.count() == 1

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, widget_state_manager):
        first = await widget_state_manager.create()
        second = await widget_state_manager.create()

        assert first.widget_id != second.widget_id

    @pytest.mark.asyncio
    async def test_unknown_widget_raises(self, widget_state_manager):
        with pytest.raises(WidgetNotFoundException) as exc_info:
            await widget_state_manager.get("missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.details == {"widget_id": "missing"}

    @pytest.mark.asyncio
    async def test_least_recently_used_widget_evicted(self, widget_state_manager):
        widgets = [await widget_state_manager.create() for _ in range(4)]

        assert await widget_state_manager.count() == 3
        with pytest.raises(WidgetNotFoundException):
            await widget_state_manager.get(widgets[0].widget_id)
        assert await widget_state_manager.get(widgets[-1].widget_id) is widgets[-1]

    @pytest.mark.asyncio
    async def test_get_refreshes_recency(self):
        manager = WidgetStateManager(max_widgets=2)
        first = await manager.create()
        second = await manager.create()

        await manager.get(first.widget_id)
        await manager.create()

        assert await manager.get(first.widget_id) is first
        with pytest.raises(WidgetNotFoundException):
            await manager.get(second.widget_id)

    @pytest.mark.asyncio
    async def test_get_or_restore_returns_live_widget(self, widget_state_manager):
        widget = await widget_state_manager.create()

        assert await widget_state_manager.get_or_restore(widget.widget_id) is widget
        assert await widget_state_manager.count() == 1

    @pytest.mark.asyncio
    async def test_get_or_restore_recreates_evicted_widget(self, paris_weather):
        manager = WidgetStateManager(max_widgets=1)
        evicted = await manager.create()
        await evicted.show_weather(paris_weather)
        await manager.create()

        restored = await manager.get_or_restore(evicted.widget_id)

        assert restored is not evicted
        assert restored.widget_id == evicted.widget_id
        assert (await restored.snapshot()).weather is None
        assert await manager.get(evicted.widget_id) is restored
        assert await manager.count() == 1

    @pytest.mark.asyncio
    async def test_cleanup_drops_everything(self, widget_state_manager):
        await widget_state_manager.initialize()
        await widget_state_manager.create()

        await widget_state_manager.cleanup()

        assert await widget_state_manager.count() == 0
