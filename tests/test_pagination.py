from __future__ import annotations

import unittest

from label_finder.pagination import PageState, needs_pager, paginate, total_pages


class PaginateTest(unittest.TestCase):
    def setUp(self) -> None:
        self.results = list(range(25))

    def test_total_pages(self) -> None:
        self.assertEqual(total_pages(25, 10), 3)
        self.assertEqual(total_pages(20, 10), 2)
        self.assertEqual(total_pages(1, 10), 1)
        self.assertEqual(total_pages(0, 10), 1)

    def test_first_and_last_page(self) -> None:
        self.assertEqual(paginate(self.results, 1, 10), list(range(10)))
        self.assertEqual(paginate(self.results, 3, 10), list(range(20, 25)))

    def test_page_past_end_is_empty(self) -> None:
        self.assertEqual(paginate(self.results, 4, 10), [])

    def test_page_below_one_is_empty(self) -> None:
        self.assertEqual(paginate(self.results, 0, 10), [])

    def test_needs_pager(self) -> None:
        self.assertFalse(needs_pager(10, 10))
        self.assertTrue(needs_pager(11, 10))


class PageStateTest(unittest.TestCase):
    def test_next_stops_at_last_page(self) -> None:
        page = PageState()
        self.assertTrue(page.next(2))
        self.assertEqual(page.current, 2)
        self.assertFalse(page.next(2))
        self.assertEqual(page.current, 2)

    def test_previous_stops_at_first_page(self) -> None:
        page = PageState()
        self.assertFalse(page.previous())
        self.assertEqual(page.current, 1)

    def test_go_to_clamps(self) -> None:
        page = PageState()
        page.go_to(7, 3)
        self.assertEqual(page.current, 3)
        page.go_to(-2, 3)
        self.assertEqual(page.current, 1)

    def test_clamp_and_reset(self) -> None:
        page = PageState(current=5)
        page.clamp(2)
        self.assertEqual(page.current, 2)
        page.reset()
        self.assertEqual(page.current, 1)

    def test_has_next_and_previous(self) -> None:
        page = PageState(current=2)
        self.assertTrue(page.has_previous())
        self.assertTrue(page.has_next(3))
        self.assertFalse(page.has_next(2))


if __name__ == "__main__":
    unittest.main()
