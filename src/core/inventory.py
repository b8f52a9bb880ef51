import threading
from dataclasses import dataclass
from typing import Iterable, List, Optional

from src.core import config
from src.core.structures.avl_tree import AVLTree


@dataclass
class InventoryStats:
    """Resumo do estado do inventário (bloco de estatísticas)."""
    total_codes: int
    height: int
    balanced: bool
    rotations: int
    min_code: Optional[int] = None
    max_code: Optional[int] = None

    def __repr__(self):
        return (f"[Inventário] {self.total_codes} códigos | altura {self.height} | "
                f"balanceada: {self.balanced} | rotações: {self.rotations}")


class InventorySystem:
    """
    Sistema de inventário de códigos de produto.
    Fachada sobre a AVLTree: valida os códigos e serializa cada operação
    pública com um único lock (as rotações tocam vários nós).
    """
    def __init__(self, verbose: bool = config.VERBOSE):
        self._tree = AVLTree(verbose=verbose)
        self._lock = threading.Lock()
        self.verbose = verbose

    @staticmethod
    def _validate_code(code):
        # bool é subclasse de int, mas não é um código de produto
        if isinstance(code, bool) or not isinstance(code, int):
            raise TypeError(f"Código de produto deve ser inteiro, recebido: {code!r}")

    # --- Cadastro e consulta ---

    def add_product(self, code: int) -> bool:
        """
        Cadastra um código. Retorna True se era novo.
        Código repetido não é erro: o inventário fica igual e retorna False.
        """
        self._validate_code(code)
        with self._lock:
            return self._tree.insert(code)

    def add_products(self, codes: Iterable[int]) -> int:
        """Cadastra vários códigos em ordem. Retorna quantos eram novos."""
        codes = list(codes)
        for code in codes:
            self._validate_code(code)
        with self._lock:
            added = self._tree.insert_many(codes)

        if self.verbose:
            print(f"[Inventário] {added} de {len(codes)} códigos cadastrados.")
        return added

    def has_product(self, code: int) -> bool:
        self._validate_code(code)
        with self._lock:
            return self._tree.search(code)

    # --- Listagens ---

    def ascending(self) -> List[int]:
        with self._lock:
            return self._tree.in_order()

    def descending(self) -> List[int]:
        with self._lock:
            return self._tree.reverse_in_order()

    def hierarchical(self) -> List[int]:
        with self._lock:
            return self._tree.pre_order()

    def by_levels(self) -> List[int]:
        with self._lock:
            return self._tree.level_order()

    def shape(self):
        with self._lock:
            return self._tree.shape()

    # --- Estatísticas ---

    def get_size(self) -> int:
        with self._lock:
            return self._tree.size()

    def is_empty(self) -> bool:
        with self._lock:
            return self._tree.is_empty()

    def get_stats(self) -> InventoryStats:
        with self._lock:
            return InventoryStats(
                total_codes=self._tree.size(),
                height=self._tree.height(),
                balanced=self._tree.is_balanced(),
                rotations=self._tree.rotation_count,
                min_code=self._tree.min_code(),
                max_code=self._tree.max_code()
            )

    def __repr__(self):
        return f"InventorySystem({self._tree!r})"
