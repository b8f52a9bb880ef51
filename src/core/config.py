# src/core/config.py

# Saída de diagnóstico (rotações, inserções) no console
VERBOSE = False

# Dados de demonstração do enunciado
SAMPLE_CODES = [50, 30, 70, 20, 40, 60, 80, 10, 25, 35, 45]
SAMPLE_SEARCH_CODES = [50, 25, 100, 80, 15]

# Benchmark de escalabilidade
BENCHMARK_SIZES = [100, 500, 1000, 5000, 10000, 20000, 50000]
BENCHMARK_SEARCHES = 1000
BENCHMARK_PLOT_PATH = "data/benchmark_results.png"

# Visualizador (tkinter)
VIEWER_WIDTH = 900
VIEWER_LEVEL_HEIGHT = 70
VIEWER_NODE_RADIUS = 18
