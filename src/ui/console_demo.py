# src/ui/console_demo.py
import sys
import os
from typing import List

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from src.core import config
from src.core.inventory import InventorySystem


def _format_codes(codes: List[int]) -> str:
    return " ".join(str(code) for code in codes)


def show_stats(inventory: InventorySystem):
    stats = inventory.get_stats()
    print("=== ESTATÍSTICAS DO SISTEMA ===")
    print(f"Total de códigos: {stats.total_codes}")
    print(f"Altura da árvore: {stats.height}")
    print(f"Árvore balanceada: {stats.balanced}")
    print()


def show_traversals(inventory: InventorySystem):
    print("=== ORDEM CRESCENTE ===")
    print(_format_codes(inventory.ascending()))

    print("=== ORDEM DECRESCENTE ===")
    print(_format_codes(inventory.descending()))

    print("=== PERCURSO HIERÁRQUICO (Pai->Filhos) ===")
    print(_format_codes(inventory.hierarchical()))

    print("=== PERCURSO POR NÍVEIS ===")
    if inventory.is_empty():
        print("Árvore vazia")
    else:
        print(_format_codes(inventory.by_levels()))
    print()


def show_searches(inventory: InventorySystem, search_codes: List[int]):
    print("=== TESTES DE BUSCA ===")
    for code in search_codes:
        found = inventory.has_product(code)
        print(f"Código {code}: {'ENCONTRADO' if found else 'NÃO ENCONTRADO'}")


def run_demo(codes: List[int] = None, search_codes: List[int] = None, verbose: bool = config.VERBOSE) -> InventorySystem:
    """Demonstração completa: cadastro, estatísticas, percursos e buscas."""
    codes = config.SAMPLE_CODES if codes is None else codes
    search_codes = config.SAMPLE_SEARCH_CODES if search_codes is None else search_codes

    inventory = InventorySystem(verbose=verbose)

    print("=== DEMO DO SISTEMA DE INVENTÁRIO ===\n")
    print("Inserindo códigos:")
    print(_format_codes(codes))
    inventory.add_products(codes)
    print()

    show_stats(inventory)
    show_traversals(inventory)
    show_searches(inventory, search_codes)
    return inventory


if __name__ == "__main__":
    run_demo(verbose="-v" in sys.argv)
