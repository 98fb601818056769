"""Tests for the rolling price window."""

from datetime import timedelta

import pytest

from pricepixel.core.exceptions import ClassificationError
from pricepixel.core.services.window import (
    HISTORIC_LIMIT,
    PriceWindow,
    split_prices,
    update_window,
)


class TestSplitPrices:
    """Test partitioning into historic and upcoming records."""

    def test_partition_preserves_order(self, now, make_prices):
        prices = make_prices(now.replace(minute=0, second=0) - timedelta(hours=3), [1, 2, 3, 4, 5, 6])

        historic, upcoming = split_prices(prices, now)

        assert [p.total for p in historic] == [1, 2, 3, 4]
        assert [p.total for p in upcoming] == [5, 6]

    def test_record_exactly_at_now_is_an_error(self, now, make_prices):
        prices = make_prices(now, [0.3])

        with pytest.raises(ClassificationError) as exc_info:
            split_prices(prices, now)

        assert exc_info.value.error_code == "CLASSIFICATION_ERROR"
        assert exc_info.value.starts_at == now

    def test_empty_input(self, now):
        assert split_prices([], now) == ((), ())


class TestUpdateWindow:
    """Test merging fetched prices into the window."""

    def test_empty_fetch_keeps_window(self, now, make_prices):
        window = PriceWindow.from_records(make_prices(now + timedelta(minutes=35), [0.2, 0.3]))

        assert update_window(window, [], now) is window

    def test_fetched_prices_replace_window(self, now, make_prices):
        old = PriceWindow.from_records(make_prices(now + timedelta(minutes=35), [0.9] * 5))
        fresh = make_prices(now + timedelta(minutes=35), [0.1, 0.2])

        updated = update_window(old, fresh, now)

        assert list(updated) == fresh

    def test_historic_trimmed_to_latest_four(self, now, make_prices):
        start = now.replace(minute=0, second=0) - timedelta(hours=7)
        fetched = make_prices(start, [1, 2, 3, 4, 5, 6, 7, 8, 9, 10])

        updated = update_window(PriceWindow(), fetched, now)

        historic, upcoming = split_prices(updated.records, now)
        assert len(historic) == HISTORIC_LIMIT
        assert [p.total for p in historic] == [5, 6, 7, 8]
        assert [p.total for p in upcoming] == [9, 10]
        assert [p.total for p in updated] == [5, 6, 7, 8, 9, 10]

    @pytest.mark.parametrize("historic_count", [0, 1, 3, 4, 5, 12])
    def test_window_length(self, now, make_prices, historic_count):
        start = now.replace(minute=0, second=0) - timedelta(hours=historic_count - 1)
        upcoming_count = 7
        fetched = make_prices(start, [0.25] * (historic_count + upcoming_count))

        updated = update_window(PriceWindow(), fetched, now)

        assert len(split_prices(updated.records, now)[0]) <= HISTORIC_LIMIT
        assert len(updated) == min(HISTORIC_LIMIT, historic_count) + upcoming_count

    def test_two_consecutive_fetches(self, now, make_prices):
        hour = now.replace(minute=0, second=0)

        first = make_prices(hour - timedelta(hours=1), [0.2] * 32)
        window = update_window(PriceWindow(), first, now)
        assert len(window) == 2 + 30

        second = make_prices(hour - timedelta(hours=5), [0.3] * 36)
        window = update_window(window, second, now)
        assert len(window) == 4 + 30
        assert window.records[0].starts_at == hour - timedelta(hours=3)

    def test_exact_now_aborts_update(self, now, make_prices):
        fetched = make_prices(now - timedelta(hours=1), [0.2, 0.3, 0.4])

        with pytest.raises(ClassificationError):
            update_window(PriceWindow(), fetched, now)
