from typing import Iterable, List, Optional, Tuple

from src.core import config
from src.core.structures.circular_queue import CircularQueue


class _AVLNode:
    """
    Nó interno da Árvore AVL.
    Só a AVLTree cria nós (na inserção de um código ausente); nenhum método
    público devolve um nó.
    """
    __slots__ = ("code", "left", "right", "height")

    def __init__(self, code: int):
        self.code = code        # Código do produto
        self.left = None        # Menores
        self.right = None       # Maiores
        self.height = 1         # Folha tem altura 1


class AVLTree:
    """
    Índice de códigos de produto auto-balanceado (Árvore AVL).
    Conjunto puro: códigos duplicados são ignorados.
    Garante altura O(log n), logo inserção e busca em O(log n).
    """
    def __init__(self, verbose: bool = config.VERBOSE):
        self._root = None
        self._size = 0
        self.rotation_count = 0
        self.verbose = verbose

    # --- Inserção ---

    def insert(self, code: int) -> bool:
        """
        Insere um código e rebalanceia a árvore automaticamente.
        Retorna True se o código era novo, False se já existia (nada muda).
        """
        size_before = self._size
        self._root = self._insert_recursive(self._root, code)
        inserted = self._size > size_before

        if self.verbose:
            if inserted:
                print(f"[AVL INSERT] Código {code} inserido (total: {self._size}, altura: {self.height()})")
            else:
                print(f"[AVL INSERT] Código {code} já existe, ignorado.")
        return inserted

    def insert_many(self, codes: Iterable[int]) -> int:
        """Insere os códigos na ordem dada. Retorna quantos eram novos."""
        return sum(1 for code in codes if self.insert(code))

    def _insert_recursive(self, node, code):
        # 1. Inserção normal de BST
        if node is None:
            self._size += 1
            return _AVLNode(code)

        if code < node.code:
            node.left = self._insert_recursive(node.left, code)
        elif code > node.code:
            node.right = self._insert_recursive(node.right, code)
        else:
            # Duplicado: a árvore não muda
            return node

        # 2. Atualizar altura do ancestral
        self._update_height(node)

        # 3. Fator de balanceamento
        balance = self._get_balance(node)

        # 4. Rotações (no máximo um caso dispara por nó)

        # Caso 1 - Left-Left
        if balance > 1 and code < node.left.code:
            self._log_rotation("LL", node)
            return self._rotate_right(node)

        # Caso 2 - Right-Right
        if balance < -1 and code > node.right.code:
            self._log_rotation("RR", node)
            return self._rotate_left(node)

        # Caso 3 - Left-Right
        if balance > 1 and code > node.left.code:
            self._log_rotation("LR", node)
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        # Caso 4 - Right-Left
        if balance < -1 and code < node.right.code:
            self._log_rotation("RL", node)
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    # --- Busca ---

    def search(self, code: int) -> bool:
        """Busca um código em O(log n). Não altera a árvore."""
        current = self._root
        while current is not None:
            if code == current.code:
                return True
            elif code < current.code:
                current = current.left
            else:
                current = current.right
        return False

    def __contains__(self, code):
        return self.search(code)

    # --- Percursos ---

    def in_order(self) -> List[int]:
        """Códigos em ordem crescente (esquerda, nó, direita)."""
        codes: List[int] = []
        self._in_order(self._root, codes)
        return codes

    def reverse_in_order(self) -> List[int]:
        """Códigos em ordem decrescente (direita, nó, esquerda)."""
        codes: List[int] = []
        self._reverse_in_order(self._root, codes)
        return codes

    def pre_order(self) -> List[int]:
        """Percurso hierárquico: pai antes dos filhos (nó, esquerda, direita)."""
        codes: List[int] = []
        self._pre_order(self._root, codes)
        return codes

    def level_order(self) -> List[int]:
        """
        Percurso por níveis (largura), da esquerda para a direita.
        Cada nó entra na fila uma única vez, então a fila tem capacidade = size.
        """
        if self._root is None:
            return []

        codes: List[int] = []
        queue = CircularQueue(capacity=self._size)
        queue.enqueue(self._root)

        while not queue.is_empty():
            current = queue.dequeue()
            codes.append(current.code)

            if current.left is not None:
                queue.enqueue(current.left)
            if current.right is not None:
                queue.enqueue(current.right)
        return codes

    def _in_order(self, node, codes: List[int]):
        if node:
            self._in_order(node.left, codes)
            codes.append(node.code)
            self._in_order(node.right, codes)

    def _reverse_in_order(self, node, codes: List[int]):
        if node:
            self._reverse_in_order(node.right, codes)
            codes.append(node.code)
            self._reverse_in_order(node.left, codes)

    def _pre_order(self, node, codes: List[int]):
        if node:
            codes.append(node.code)
            self._pre_order(node.left, codes)
            self._pre_order(node.right, codes)

    # --- Estatísticas e diagnóstico ---

    def size(self) -> int:
        return self._size

    def __len__(self):
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Altura da árvore (0 se vazia)."""
        return self._get_height(self._root)

    def min_code(self) -> Optional[int]:
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.code

    def max_code(self) -> Optional[int]:
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.code

    def is_balanced(self) -> bool:
        """Verifica (recursivamente) |fator de balanceamento| <= 1 em todos os nós."""
        return self._is_balanced(self._root)

    def _is_balanced(self, node) -> bool:
        if node is None:
            return True
        return (abs(self._get_balance(node)) <= 1
                and self._is_balanced(node.left)
                and self._is_balanced(node.right))

    def is_valid(self) -> bool:
        """
        Checagem completa dos invariantes, para testes:
        ordem BST estrita, balanceamento, cache de altura e contador de tamanho.
        """
        ok, count = self._check_subtree(self._root, None, None)
        return ok and count == self._size

    def _check_subtree(self, node, low, high) -> Tuple[bool, int]:
        if node is None:
            return True, 0
        if (low is not None and node.code <= low) or (high is not None and node.code >= high):
            return False, 0

        left_ok, left_count = self._check_subtree(node.left, low, node.code)
        right_ok, right_count = self._check_subtree(node.right, node.code, high)

        expected_height = 1 + max(self._get_height(node.left), self._get_height(node.right))
        ok = (left_ok and right_ok
              and node.height == expected_height
              and abs(self._get_balance(node)) <= 1)
        return ok, left_count + right_count + 1

    def shape(self):
        """
        Retrato somente-leitura da estrutura: (código, forma_esq, forma_dir) ou None.
        Usado pelo visualizador e para comparar formas em testes.
        """
        return self._shape(self._root)

    def _shape(self, node):
        if node is None:
            return None
        return (node.code, self._shape(node.left), self._shape(node.right))

    # --- Métodos Auxiliares e Rotações ---

    def _get_height(self, node):
        if not node:
            return 0
        return node.height

    def _get_balance(self, node):
        if not node:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    def _update_height(self, node):
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def _rotate_left(self, x):
        """
        Rotação simples à esquerda (Right-Right).

            x                y
             \\             / \\
              y     ->     x   C
             / \\           \\
            B   C            B
        """
        y = x.right
        B = y.left

        y.left = x
        x.right = B

        # Filho antes do ancestral
        self._update_height(x)
        self._update_height(y)

        self.rotation_count += 1
        return y

    def _rotate_right(self, y):
        """
        Rotação simples à direita (Left-Left).

              y            x
             / \\          / \\
            x   C   ->    A   y
           / \\               / \\
          A   B             B   C
        """
        x = y.left
        B = x.right

        x.right = y
        y.left = B

        self._update_height(y)
        self._update_height(x)

        self.rotation_count += 1
        return x

    def _log_rotation(self, case: str, node):
        if self.verbose:
            print(f"[AVL ROTAÇÃO] Caso {case} no nó {node.code} (fator: {self._get_balance(node)})")

    def __repr__(self):
        return f"AVLTree(size={self._size}, height={self.height()})"
