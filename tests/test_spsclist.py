import threading

import pytest

from fastqprep.spsclist import SingleProducerSingleConsumerList


def test_fifo_order():
    q = SingleProducerSingleConsumerList()
    for i in range(10):
        q.produce(i)
    assert len(q) == 10
    assert [q.consume() for _ in range(10)] == list(range(10))
    assert q.is_empty()
    assert not q.can_be_consumed()


def test_consume_empty_raises():
    q = SingleProducerSingleConsumerList()
    with pytest.raises(IndexError):
        q.consume()


def test_flags():
    q = SingleProducerSingleConsumerList()
    assert not q.is_producer_finished()
    assert not q.is_consumer_finished()
    q.set_producer_finished()
    q.set_consumer_finished()
    assert q.is_producer_finished()
    assert q.is_consumer_finished()


def test_counters_track_traffic():
    q = SingleProducerSingleConsumerList()
    q.produce("a")
    q.produce("b")
    q.consume()
    assert (q.produced, q.consumed, len(q)) == (2, 1, 1)


def test_threaded_producer_consumer():
    q = SingleProducerSingleConsumerList()
    n = 5000
    received = []

    def producer():
        for i in range(n):
            q.produce(i)
        q.set_producer_finished()

    def consumer():
        while True:
            while q.can_be_consumed():
                received.append(q.consume())
            if q.is_producer_finished() and not q.can_be_consumed():
                break
        q.set_consumer_finished()

    tp = threading.Thread(target=producer)
    tc = threading.Thread(target=consumer)
    tc.start()
    tp.start()
    tp.join(10)
    tc.join(10)
    assert received == list(range(n))
    assert q.is_consumer_finished()