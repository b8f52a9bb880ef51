from typing import Dict, List, Tuple

from src.core import config


def compute_layout(shape, width: float = config.VIEWER_WIDTH,
                   level_height: float = config.VIEWER_LEVEL_HEIGHT) -> Dict[int, Tuple[float, float]]:
    """
    Calcula a posição (x, y) de cada código para desenhar a árvore.
    Cada nível divide ao meio o intervalo horizontal do pai, então
    filhos nunca se cruzam.

    Args:
        shape: forma da árvore, como devolvida por AVLTree.shape()
        width: largura total disponível
        level_height: distância vertical entre níveis
    """
    positions: Dict[int, Tuple[float, float]] = {}
    _place(shape, 0.0, float(width), 0, level_height, positions)
    return positions


def _place(shape, x_min, x_max, depth, level_height, positions):
    if shape is None:
        return
    code, left, right = shape
    x_mid = (x_min + x_max) / 2
    positions[code] = (x_mid, level_height * (depth + 0.5))
    _place(left, x_min, x_mid, depth + 1, level_height, positions)
    _place(right, x_mid, x_max, depth + 1, level_height, positions)


def compute_edges(shape) -> List[Tuple[int, int]]:
    """Lista de arestas (pai, filho) em pré-ordem."""
    edges: List[Tuple[int, int]] = []
    _collect_edges(shape, edges)
    return edges


def _collect_edges(shape, edges):
    if shape is None:
        return
    code, left, right = shape
    for child in (left, right):
        if child is not None:
            edges.append((code, child[0]))
            _collect_edges(child, edges)
