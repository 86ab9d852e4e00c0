"""
Tests for frontend/utils/pagination.py - Records table pagination.
"""
import pytest

from frontend.utils.pagination import PAGE_KEY, PAGE_SIZE_KEY, Paginator, paginate, total_pages


class TestTotalPages:
    """Tests for total_pages function."""

    def test_rounds_up(self):
        assert total_pages(25, 20) == 2
        assert total_pages(40, 20) == 2
        assert total_pages(41, 20) == 3

    def test_no_records_means_no_pages(self):
        """An empty collection has zero pages."""
        assert total_pages(0, 20) == 0

    def test_rejects_non_positive_page_size(self):
        with pytest.raises(ValueError):
            total_pages(10, 0)


class TestPaginate:
    """Tests for paginate function."""

    def test_twenty_five_records_in_pages_of_twenty(self, records_25):
        """r1..r25 split into 20 + 5."""
        first = paginate(records_25, 20, 1)
        second = paginate(records_25, 20, 2)

        assert first.total_pages == 2
        assert [r["key"] for r in first.records] == [f"r{i}" for i in range(1, 21)]
        assert [r["key"] for r in second.records] == ["r21", "r22", "r23", "r24", "r25"]
        assert (second.start_index, second.end_index) == (20, 25)

    @pytest.mark.parametrize("page_size", [1, 3, 7, 20, 25, 100])
    def test_pages_cover_every_record_once(self, records_25, page_size):
        """Concatenated pages equal the collection, in order."""
        pages = total_pages(len(records_25), page_size)
        joined = []
        for page in range(1, pages + 1):
            joined.extend(paginate(records_25, page_size, page).records)

        assert joined == records_25

    def test_page_past_the_end_is_empty(self, records_25):
        page = paginate(records_25, 20, 5)

        assert page.records == []
        assert page.start_index == page.end_index == 25

    def test_empty_collection(self):
        page = paginate([], 20, 1)

        assert page.records == []
        assert page.total_pages == 0

    def test_rejects_page_zero(self, records_25):
        with pytest.raises(ValueError):
            paginate(records_25, 20, 0)


class TestPaginator:
    """Tests for the session-backed Paginator."""

    def _paginator(self, store, records, page_size=20):
        return Paginator(store, lambda: len(records), page_size)

    def test_defaults_written_to_store(self, mock_session_state):
        self._paginator(mock_session_state, [])

        assert mock_session_state[PAGE_KEY] == 1
        assert mock_session_state[PAGE_SIZE_KEY] == 20

    def test_existing_page_kept(self, mock_session_state):
        """A rerun keeps the page the user was on."""
        mock_session_state[PAGE_KEY] = 2

        paginator = self._paginator(mock_session_state, [])

        assert paginator.current_page == 2

    def test_navigation(self, mock_session_state, records_25):
        paginator = self._paginator(mock_session_state, records_25)

        assert paginator.next() is True
        assert paginator.current_page == 2
        assert [r["key"] for r in paginator.page(records_25).records][0] == "r21"
        assert paginator.previous() is True
        assert paginator.current_page == 1

    def test_out_of_range_is_rejected(self, mock_session_state, records_25):
        """Page 3 of 2 is refused and the page does not change."""
        paginator = self._paginator(mock_session_state, records_25)

        assert paginator.go_to(3) is False
        assert paginator.previous() is False
        assert paginator.current_page == 1

    def test_no_navigation_without_records(self, mock_session_state):
        paginator = self._paginator(mock_session_state, [])

        assert paginator.total_pages == 0
        assert paginator.next() is False

    def test_page_size_change_resets_page(self, mock_session_state, records_25):
        paginator = self._paginator(mock_session_state, records_25)
        paginator.go_to(2)

        paginator.set_page_size(10)

        assert paginator.page_size == 10
        assert paginator.current_page == 1
        assert paginator.total_pages == 3

    def test_page_size_must_be_positive(self, mock_session_state):
        paginator = self._paginator(mock_session_state, [])

        with pytest.raises(ValueError):
            paginator.set_page_size(0)
