# src/ui/fallback_gui.py
import tkinter as tk
from tkinter import messagebox
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from src.core import config
from src.core.inventory import InventorySystem
from src.ui.tree_layout import compute_layout, compute_edges

class InventoryViewerApp:
    def __init__(self, root):
        self.root = root
        self.root.title("Inventário AVL - Visualizador")
        self.root.minsize(config.VIEWER_WIDTH, 500)

        self.inventory = InventorySystem()
        self.inventory.add_products(config.SAMPLE_CODES)

        self.highlighted_code = None
        self.view_mode = "NIVEIS"

        self.create_layout()
        self.draw_tree()
        self.update_dashboard()

    def create_layout(self):
        # --- 1. BARRA DE FERRAMENTAS ---
        toolbar = tk.Frame(self.root, bd=1, relief=tk.RAISED, bg="#f0f0f0")
        toolbar.pack(side=tk.TOP, fill=tk.X)

        btn_opts = {'side': tk.LEFT, 'padx': 5, 'pady': 5}

        tk.Label(toolbar, text="Código:", bg="#f0f0f0").pack(**btn_opts)
        self.entry_code = tk.Entry(toolbar, width=10)
        self.entry_code.pack(**btn_opts)
        self.entry_code.bind("<Return>", lambda e: self.insert_code())

        tk.Button(toolbar, text="+ Inserir", command=self.insert_code, bg="#ddffdd").pack(**btn_opts)
        tk.Button(toolbar, text="🔍 Buscar", command=self.search_code, bg="#ddeeff").pack(**btn_opts)

        for label, mode in (("Crescente", "CRESCENTE"), ("Decrescente", "DECRESCENTE"),
                            ("Hierárquico", "HIERARQUICO"), ("Níveis", "NIVEIS")):
            tk.Button(toolbar, text=label, command=lambda m=mode: self.set_view_mode(m)).pack(side=tk.RIGHT, padx=3, pady=5)

        # --- 2. CANVAS ---
        self.canvas = tk.Canvas(self.root, bg="white", width=config.VIEWER_WIDTH, height=380)
        self.canvas.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

        # --- 3. PAINEL INFERIOR ---
        bottom = tk.Frame(self.root, bd=1, relief=tk.SUNKEN)
        bottom.pack(side=tk.BOTTOM, fill=tk.X)
        self.lbl_stats = tk.Label(bottom, text="", anchor="w", font=("Consolas", 10))
        self.lbl_stats.pack(side=tk.TOP, fill=tk.X, padx=5)
        self.lbl_traversal = tk.Label(bottom, text="", anchor="w", font=("Consolas", 10), wraplength=config.VIEWER_WIDTH - 20, justify=tk.LEFT)
        self.lbl_traversal.pack(side=tk.TOP, fill=tk.X, padx=5, pady=(0, 5))

    def _read_code(self):
        raw = self.entry_code.get().strip()
        try:
            return int(raw)
        except ValueError:
            messagebox.showerror("Código inválido", f"'{raw}' não é um código inteiro.")
            return None

    def insert_code(self):
        code = self._read_code()
        if code is None:
            return
        if not self.inventory.add_product(code):
            messagebox.showinfo("Inventário", f"Código {code} já cadastrado.")
        self.highlighted_code = code
        self.entry_code.delete(0, tk.END)
        self.draw_tree()
        self.update_dashboard()

    def search_code(self):
        code = self._read_code()
        if code is None:
            return
        found = self.inventory.has_product(code)
        self.highlighted_code = code if found else None
        self.draw_tree()
        messagebox.showinfo("Busca", f"Código {code}: {'ENCONTRADO' if found else 'NÃO ENCONTRADO'}")

    def set_view_mode(self, mode):
        self.view_mode = mode
        self.update_dashboard()

    def draw_tree(self):
        self.canvas.delete("all")
        shape = self.inventory.shape()
        if shape is None:
            self.canvas.create_text(config.VIEWER_WIDTH / 2, 40, text="Árvore vazia", font=("Arial", 12))
            return

        positions = compute_layout(shape)
        r = config.VIEWER_NODE_RADIUS

        # 1. Arestas
        for parent, child in compute_edges(shape):
            (x1, y1), (x2, y2) = positions[parent], positions[child]
            self.canvas.create_line(x1, y1, x2, y2, fill="#aaaaaa", width=2)

        # 2. Nós
        for code, (x, y) in positions.items():
            fill = "#ffe680" if code == self.highlighted_code else "#cce5ff"
            self.canvas.create_oval(x - r, y - r, x + r, y + r, fill=fill, outline="#336699", width=2)
            self.canvas.create_text(x, y, text=str(code), font=("Arial", 9, "bold"))

    def update_dashboard(self):
        s = self.inventory.get_stats()
        self.lbl_stats.config(text=f"Total: {s.total_codes} | Altura: {s.height} | Balanceada: {s.balanced} | Rotações: {s.rotations}")
        traversals = {
            "CRESCENTE": self.inventory.ascending,
            "DECRESCENTE": self.inventory.descending,
            "HIERARQUICO": self.inventory.hierarchical,
            "NIVEIS": self.inventory.by_levels,
        }
        codes = traversals[self.view_mode]()
        self.lbl_traversal.config(text=f"{self.view_mode}: " + " ".join(str(c) for c in codes))

if __name__ == "__main__": root = tk.Tk(); app = InventoryViewerApp(root); root.mainloop()
