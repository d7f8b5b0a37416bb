import pytest

from bankdesk.service_queue import Customer, EmptyQueueError, ServiceQueue


def test_fifo_order():
    queue = ServiceQueue()
    queue.enqueue(1, 10)
    queue.enqueue(2, 20)
    queue.enqueue(3, 30)
    assert queue.dequeue() == Customer(1, 10)
    assert queue.dequeue() == Customer(2, 20)
    assert list(queue) == [Customer(3, 30)]


def test_enqueue_returns_customer():
    queue = ServiceQueue()
    customer = queue.enqueue(4, 40)
    assert customer.account == 4
    assert customer.agency == 40
    assert len(queue) == 1


def test_dequeue_empty_raises():
    queue = ServiceQueue()
    with pytest.raises(EmptyQueueError):
        queue.dequeue()


def test_dequeue_until_empty_then_reuse():
    queue = ServiceQueue()
    queue.enqueue(1, 1)
    queue.dequeue()
    assert len(queue) == 0
    queue.enqueue(2, 2)
    assert queue.dequeue() == Customer(2, 2)


def test_render_empty():
    assert ServiceQueue().render() == "Fila está vazia.\n"


def test_render_lists_in_order():
    queue = ServiceQueue()
    queue.enqueue(1, 10)
    queue.enqueue(2, 20)
    lines = queue.render().splitlines()
    assert lines[0] == "Clientes na fila:"
    assert lines[1:] == ["Conta 1 | Agência 10", "Conta 2 | Agência 20"]