import sys
import os
import pytest
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.structures.circular_queue import CircularQueue

def test_circular_queue_logic():
    print("--- Iniciando Teste da Fila Circular ---")

    q = CircularQueue(capacity=3)
    q.enqueue(10)
    q.enqueue(20)
    q.enqueue(30)
    assert q.is_full() is True
    assert len(q) == 3

    # Sair um e entrar outro: o tail dá a volta no array
    assert q.dequeue() == 10
    q.enqueue(40)
    print(f"Estado atual: {q}")

    assert [q.dequeue(), q.dequeue(), q.dequeue()] == [20, 30, 40], "Ordem FIFO quebrada"
    assert q.is_empty()
    assert q.dequeue() is None
    print(">> SUCESSO: Fila manteve a ordem FIFO após a volta.")

def test_overflow_raises():
    q = CircularQueue(capacity=1)
    q.enqueue("a")
    with pytest.raises(OverflowError):
        q.enqueue("b")

def test_invalid_capacity():
    with pytest.raises(ValueError):
        CircularQueue(capacity=0)

if __name__ == "__main__":
    test_circular_queue_logic()
