import matplotlib.pyplot as plt
import numpy as np

from .huffman import HuffmanTree
from .models import FrequencyTable, symbol_to_str


class CodeLengthDisplay:
    def __init__(self, tree: HuffmanTree, frequencies: FrequencyTable,
                 fig_size=(10, 6), dpi=100, font_size=12,
                 bar_color='blue', bar_alpha=0.7,
                 trend_line_color='red', trend_line_linewidth=2):
        self.tree = tree
        self.frequencies = frequencies
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.bar_color = bar_color
        self.bar_alpha = bar_alpha
        self.trend_line_color = trend_line_color
        self.trend_line_linewidth = trend_line_linewidth

    def _finish(self, title, xlabel, ylabel, show_graph=False, save_path=None):
        plt.title(title, fontsize=self.font_size + 2)
        plt.xlabel(xlabel, fontsize=self.font_size)
        plt.ylabel(ylabel, fontsize=self.font_size)
        plt.grid(True)
        plt.legend(fontsize=self.font_size)
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        plt.close()

    def average_code_length(self):
        total = self.frequencies.total()
        if total == 0:
            return 0.0
        return self.tree.weighted_path_length(self.frequencies) / total

    def generate_code_length_plot(self, show_graph=False, save_path=None):
        """
        Bar chart of the code length of every symbol, with the ideal
        -log2(p) length drawn on top.
        """
        items = self.frequencies.items()
        symbols = [symbol for symbol, _ in items]
        counts = np.array([count for _, count in items], dtype=np.float64)
        lengths = np.array([len(self.tree.get_code(symbol)) for symbol in symbols])
        ideal = -np.log2(counts / counts.sum())
        x = np.arange(len(symbols))

        plt.figure(figsize=self.fig_size, dpi=self.dpi)
        plt.bar(x, lengths, color=self.bar_color, alpha=self.bar_alpha, label="Code length")
        plt.plot(x, ideal, color=self.trend_line_color, linewidth=self.trend_line_linewidth, label="Ideal length")
        if len(symbols) <= 32:
            plt.xticks(x, [symbol_to_str(symbol) for symbol in symbols], rotation=90)
        self._finish("Huffman Code Lengths", "Symbol", "Bits", show_graph, save_path)

    def generate_code_length_histogram(self, show_graph=False, save_path=None):
        lengths = list(self.tree.codes.code_lengths().values())
        bins = np.arange(1, max(lengths) + 2)

        plt.figure(figsize=self.fig_size, dpi=self.dpi)
        plt.hist(lengths, bins=bins, color=self.bar_color, alpha=self.bar_alpha, align='left', label="Symbols")
        plt.axvline(self.average_code_length(), color=self.trend_line_color,
                    linewidth=self.trend_line_linewidth, label="Average code length")
        self._finish("Code Length Distribution", "Code length (bits)", "Symbols", show_graph, save_path)
