from typing import List, Optional, Any

class CircularQueue:
    """
    Fila FIFO de capacidade fixa sobre um array pré-alocado.
    Usada pelo percurso por níveis da AVL: cada nó entra na fila no máximo
    uma vez, então capacidade = número de nós é suficiente.
    """
    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError("A capacidade da fila deve ser maior que zero.")

        self.capacity = capacity
        self.buffer: List[Optional[Any]] = [None] * capacity
        self.head = 0        # Próximo item a sair
        self.tail = 0        # Onde o próximo item será escrito
        self.size = 0

    def enqueue(self, item: Any):
        """
        Adiciona um item ao final da fila.
        Complexidade: O(1)
        """
        if self.is_full():
            raise OverflowError(f"Fila cheia (capacidade {self.capacity}).")

        self.buffer[self.tail] = item
        self.tail = (self.tail + 1) % self.capacity
        self.size += 1

    def dequeue(self) -> Optional[Any]:
        """Remove e retorna o item mais antigo (O(1)). None se vazia."""
        if self.size == 0:
            return None

        item = self.buffer[self.head]
        self.buffer[self.head] = None   # Libera a referência
        self.head = (self.head + 1) % self.capacity
        self.size -= 1
        return item

    def is_empty(self) -> bool:
        return self.size == 0

    def is_full(self) -> bool:
        return self.size == self.capacity

    def __len__(self):
        return self.size

    def __repr__(self):
        return f"CircularQueue(size={self.size}/{self.capacity})"
