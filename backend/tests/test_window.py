"""Tests for ranking window parsing."""

import pytest

from ranking_api.core.app_exceptions import BadRequestError
from ranking_api.ranking.window import (
    MAX_RANK_INDEX,
    MAX_RANKING_RANGE_LENGTH,
    RankWindow,
    parse_window,
)


class TestRankWindow:
    def test_length_of_regular_window(self):
        assert len(RankWindow(start=10, end=25)) == 15

    @pytest.mark.parametrize("start,end", [(5, 5), (10, 3), (0, 0)])
    def test_reversed_or_equal_bounds_are_empty(self, start, end):
        window = RankWindow(start=start, end=end)
        assert len(window) == 0
        assert window.limit == 0
        assert window.offset == start

    @pytest.mark.parametrize(
        "start,end",
        [(-1, 10), (0, -5), (MAX_RANK_INDEX + 1, MAX_RANK_INDEX + 11), (0, MAX_RANK_INDEX + 1)],
    )
    def test_out_of_range_bounds_are_bad_request(self, start, end):
        with pytest.raises(BadRequestError) as exc_info:
            RankWindow(start=start, end=end)
        assert exc_info.value.status_code == 400
        assert exc_info.value.code == "RANKING_RANGE_INVALID"

    def test_largest_index_accepted(self):
        window = RankWindow(start=MAX_RANK_INDEX - 10, end=MAX_RANK_INDEX)
        assert len(window) == 10


class TestParseWindow:
    def test_max_length_is_one_thousand(self):
        assert MAX_RANKING_RANGE_LENGTH == 1000

    def test_exactly_max_length_accepted(self):
        window = parse_window(0, 1000)
        assert window == RankWindow(start=0, end=1000)
        assert len(window) == 1000

    def test_one_past_max_length_rejected(self):
        with pytest.raises(BadRequestError) as exc_info:
            parse_window(0, 1001)
        err = exc_info.value
        assert err.status_code == 400
        assert err.code == "RANKING_RANGE_TOO_LARGE"
        assert err.details == {"from": 0, "to": 1001, "length": 1001, "max_length": 1000}

    def test_far_offset_window_accepted(self):
        window = parse_window(50_000, 51_000)
        assert window.offset == 50_000
        assert window.limit == 1000

    def test_empty_window_accepted(self):
        # A page past the end is a valid (empty) request
        assert len(parse_window(300, 100)) == 0
