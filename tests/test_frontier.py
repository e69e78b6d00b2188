from site_sketch.crawler.frontier import Frontier

START = "http://example.com/"


def test_drain_marks_visited_and_respects_batch_size():
    frontier = Frontier(START, max_pages=10)
    frontier.enqueue(["http://example.com/a", "http://example.com/b"])
    assert frontier.drain(2) == [START, "http://example.com/a"]
    assert frontier.visited == {START, "http://example.com/a"}
    assert frontier.pending == ["http://example.com/b"]


def test_drain_never_exceeds_page_budget():
    frontier = Frontier(START, max_pages=3)
    frontier.enqueue(f"http://example.com/{i}" for i in range(10))
    assert len(frontier.drain(10)) == 3
    assert frontier.budget == 0
    assert not frontier.has_work()
    assert frontier.drain(10) == []


def test_enqueue_skips_visited_and_queued():
    frontier = Frontier(START, max_pages=10)
    frontier.drain(1)
    added = frontier.enqueue([START, "http://example.com/a", "http://example.com/a"])
    assert added == 1
    assert frontier.pending == ["http://example.com/a"]


def test_raw_string_equality_no_canonicalization():
    frontier = Frontier(START, max_pages=10)
    frontier.drain(1)
    frontier.enqueue(["http://example.com", "http://example.com/#x", "http://example.com/?b=1&a=2"])
    assert len(frontier) == 3


def test_visited_entries_skipped_without_using_a_slot():
    frontier = Frontier(START, max_pages=10)
    # a stale entry that got visited while still queued
    frontier._queue.extend(["http://example.com/a", "http://example.com/b", "http://example.com/c"])
    frontier.visited.add("http://example.com/a")
    assert frontier.drain(3) == [START, "http://example.com/b", "http://example.com/c"]


def test_truncate_drops_from_the_back():
    frontier = Frontier(START, max_pages=10, max_queue_size=1000)
    links = [f"http://example.com/p{i}" for i in range(1500)]
    frontier.enqueue(links)
    assert frontier.truncate() == 501
    assert len(frontier) == 1000
    assert frontier.pending == [START] + links[:999]
    # dropped links may be rediscovered later
    assert frontier.enqueue([links[-1]]) == 1
