from elvdispatch.core.stop_queue import StopQueue


def test_ascending_queue_yields_lowest_first():
    queue = StopQueue(floors=[5, 3, 4])
    assert queue.peek() == 3
    assert list(queue) == [3, 4, 5]
    assert queue.pop() == 3
    assert queue.pop() == 4
    assert len(queue) == 1


def test_descending_queue_yields_highest_first():
    queue = StopQueue(descending=True, floors=[1, 3, 2])
    assert queue.peek() == 3
    assert list(queue) == [3, 2, 1]
    assert queue.pop() == 3


def test_pop_if_equal_only_removes_the_next_floor():
    queue = StopQueue(floors=[2, 4])
    assert not queue.pop_if_equal(4)
    assert queue.pop_if_equal(2)
    assert list(queue) == [4]


def test_duplicate_floors_are_removed_one_at_a_time():
    queue = StopQueue(floors=[3, 3])
    assert queue.pop_if_equal(3)
    assert queue.top_equals(3)
    assert queue.pop_if_equal(3)
    assert not queue
    assert queue.peek() is None
    assert not queue.top_equals(3)
