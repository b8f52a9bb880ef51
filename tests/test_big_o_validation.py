"""
Validação da garantia de altura da AVL.
A altura de uma AVL com n nós nunca passa de ~1.44 * log2(n + 2),
qualquer que seja a ordem de inserção.
"""
import sys
import os
import time
import random
import numpy as np
import matplotlib.pyplot as plt

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core import config
from src.core.structures.avl_tree import AVLTree

def avl_height_bound(sizes):
    return 1.44 * np.log2(np.asarray(sizes, dtype=float) + 2)

def test_height_bound_sorted_insertion():
    """Inserção crescente: pior caso para uma BST comum."""
    print("--- Teste: Altura com inserção ordenada ---")
    avl = AVLTree()
    sizes, heights = [], []
    for n in range(1, 3001):
        avl.insert(n)
        sizes.append(n)
        heights.append(avl.height())

    bound = avl_height_bound(sizes)
    assert np.all(np.asarray(heights) <= bound), "Altura acima do limite AVL"
    print(f"  n=3000: altura {heights[-1]} (limite {bound[-1]:.2f})")

def test_height_bound_random_insertion():
    print("--- Teste: Altura com inserção aleatória ---")
    rng = random.Random(7)
    sizes = [10, 100, 1000, 5000]
    heights = []
    for n in sizes:
        codes = rng.sample(range(n * 10), n)
        avl = AVLTree()
        avl.insert_many(codes)
        assert avl.size() == n
        heights.append(avl.height())

    bound = avl_height_bound(sizes)
    print(f"  alturas: {heights} | limites: {np.round(bound, 2).tolist()}")
    assert np.all(np.asarray(heights) <= bound)
    # Nunca abaixo do mínimo teórico (árvore perfeita)
    assert np.all(np.asarray(heights) >= np.ceil(np.log2(np.asarray(sizes) + 1)))

def test_sample_height():
    avl = AVLTree()
    avl.insert_many(config.SAMPLE_CODES)
    assert avl.height() == 4

def measure_search_times(sizes, searches=config.BENCHMARK_SEARCHES):
    """Tempo médio de busca (ms) por tamanho. Usado só na execução manual."""
    times = []
    for size in sizes:
        avl = AVLTree()
        avl.insert_many(range(size))
        keys = [random.randint(0, size - 1) for _ in range(searches)]
        start = time.perf_counter()
        for key in keys:
            avl.search(key)
        times.append((time.perf_counter() - start) / searches * 1000)
    return times

def plot_height_results():
    print("\n--- Gerando Gráfico de Alturas ---")
    sizes = np.arange(1, 2001)
    heights = []
    avl = AVLTree()
    for n in sizes:
        avl.insert(int(n))
        heights.append(avl.height())

    plt.figure(figsize=(10, 6))
    plt.plot(sizes, heights, 'b-', label='Altura observada (inserção ordenada)')
    plt.plot(sizes, avl_height_bound(sizes), 'r--', label='1.44 log2(n+2)')
    plt.plot(sizes, np.log2(sizes + 1), 'g:', label='log2(n+1) (árvore perfeita)')
    plt.xlabel('Número de códigos (n)')
    plt.ylabel('Altura')
    plt.title('Validação: altura O(log n)')
    plt.legend()
    plt.grid(True)
    os.makedirs('data', exist_ok=True)
    plt.savefig('data/height_validation.png')
    print("  >> Gráfico salvo em data/height_validation.png")

if __name__ == "__main__":
    print("=" * 60)
    print("VALIDAÇÃO DE ALTURA E COMPLEXIDADE")
    print("=" * 60)
    test_height_bound_sorted_insertion()
    test_height_bound_random_insertion()
    for n, t in zip(config.BENCHMARK_SIZES[:4], measure_search_times(config.BENCHMARK_SIZES[:4])):
        print(f"  n={n:6d}: {t:.4f} ms/busca")
    plot_height_results()
