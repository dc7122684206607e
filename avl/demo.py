"""
AVL Tree Demo -- Scripted operations, height growth, range queries, and successor walks.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

from pathlib import Path
from typing import Dict, List, Tuple

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from avl.avl_tree import AVLTree

SEED = 42

VIZ_DIR = Path.cwd() / "viz"

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

SCRIPTED_VALUES = [1, 2, 3, 12, 0, 56, -3, -5, 4, 9]
GROWTH_SIZES = [16, 64, 256, 1024, 4096]


def tree_layout(tree: AVLTree) -> Tuple[Dict[object, Tuple[float, float]], List[Tuple[object, object]]]:
    """Position every value at (in-order index, -depth) and list parent/child edges."""
    positions: Dict[object, Tuple[float, float]] = {}
    edges: List[Tuple[object, object]] = []

    def walk(node, depth):
        if node is None:
            return
        walk(node.left, depth + 1)
        positions[node.value] = (float(len(positions)), float(-depth))
        walk(node.right, depth + 1)
        for child in (node.left, node.right):
            if child is not None:
                edges.append((node.value, child.value))

    walk(tree.root, 0)
    return positions, edges


def plot_tree_structure(tree: AVLTree, title: str, path: Path):
    positions, edges = tree_layout(tree)

    fig, ax = plt.subplots(figsize=(10, 5))
    for parent, child in edges:
        (x0, y0), (x1, y1) = positions[parent], positions[child]
        ax.plot([x0, x1], [y0, y1], color=COLORS["dark"], linewidth=1.2, zorder=1)
    for value, (x, y) in positions.items():
        ax.scatter(x, y, s=700, color=COLORS["blue"], edgecolors=COLORS["dark"], zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", color="white",
                fontsize=10, fontweight="bold", zorder=3)
    ax.set_title(f"{title} (n={tree.count}, height={tree.height()})")
    ax.axis("off")
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return fig


def example_1_scripted_operations():
    """Fixed insert/query/delete sequence over a small integer tree."""
    print("=" * 60)
    print("Example 1: Scripted Operations")
    print("=" * 60)

    tree: AVLTree[int] = AVLTree()
    for value in SCRIPTED_VALUES:
        tree.insert(value)

    print("\nIn-order traversal of the AVL tree:")
    print(tree.to_string())

    print(f"\nThere are {tree.count_greater_than(5)} nodes larger than 5.")
    print(f"\nLargest node: {tree.find_max().value}")
    print(f"Smallest node: {tree.find_min().value}")

    fig = plot_tree_structure(tree, "Tree after scripted inserts", VIZ_DIR / "01_tree_structure.png")

    print("\nDeleting node with value 2:")
    if tree.delete(2):
        print("Node with value 2 deleted.")
    else:
        print("Node with value 2 not found.")

    print("\nIn-order traversal of the AVL tree:")
    print(tree.to_string())
    print(f"Number of nodes between 1 and 15: {tree.count_in_range(1, 15)}")
    print(f"Tree is valid: {tree.validate()}")

    return fig, tree


def example_2_height_growth():
    """Tree height for sorted vs random insertion against the AVL bound."""
    print("\n" + "=" * 60)
    print("Example 2: Height Growth")
    print("=" * 60)

    np.random.seed(SEED)
    sorted_heights = []
    random_heights = []
    for n in GROWTH_SIZES:
        sorted_tree: AVLTree[int] = AVLTree()
        for value in range(n):
            sorted_tree.insert(value)

        random_tree: AVLTree[int] = AVLTree()
        for value in np.random.permutation(n):
            random_tree.insert(int(value))

        sorted_heights.append(sorted_tree.height())
        random_heights.append(random_tree.height())
        print(f"n={n:<6} sorted height={sorted_tree.height():<4} random height={random_tree.height():<4} "
              f"1.44*log2(n+2)={1.44 * np.log2(n + 2):.2f}")

    sizes = np.array(GROWTH_SIZES)
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(sizes, sorted_heights, "o-", color=COLORS["blue"], linewidth=2, label="Sorted insertion")
    ax.plot(sizes, random_heights, "s-", color=COLORS["orange"], linewidth=2, label="Random insertion")
    ax.plot(sizes, np.log2(sizes + 1), "g--", label="log2(n+1) (perfect)")
    ax.plot(sizes, 1.44 * np.log2(sizes + 2), "r--", label="1.44 log2(n+2) (AVL bound)")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("Number of values (n)")
    ax.set_ylabel("Height")
    ax.set_title("AVL Tree Height Growth")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_height_growth.png", dpi=150)
    plt.close(fig)

    return fig, (sorted_heights, random_heights)


def example_3_range_queries():
    """count_in_range against a brute-force count over sliding windows."""
    print("\n" + "=" * 60)
    print("Example 3: Range Queries")
    print("=" * 60)

    np.random.seed(SEED)
    values = np.unique(np.random.randint(0, 1000, size=400))
    tree: AVLTree[int] = AVLTree()
    for value in values:
        tree.insert(int(value))

    starts = np.arange(0, 1000, 50)
    width = 100
    tree_counts = [tree.count_in_range(int(s), int(s) + width) for s in starts]
    brute_counts = [int(np.sum((values >= s) & (values <= s + width))) for s in starts]
    mismatches = sum(a != b for a, b in zip(tree_counts, brute_counts))

    print(f"Stored distinct values: {tree.count}")
    print(f"Windows checked: {len(starts)}, mismatches: {mismatches}")
    print(f"Values in [100, 130]: {tree.values_in_range(100, 130)}")
    print(f"Values < 50: {tree.count_less_than(50)}, values > 950: {tree.count_greater_than(950)}")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.bar(starts, tree_counts, width=40, color=COLORS["purple"], alpha=0.7, label="count_in_range")
    ax.plot(starts, brute_counts, "o", color=COLORS["red"], label="Brute force")
    ax.set_xlabel(f"Window start (width {width})")
    ax.set_ylabel("Values in window")
    ax.set_title("Range Query Counts")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_range_queries.png", dpi=150)
    plt.close(fig)

    return fig, tree


def example_4_successor_walk():
    """Walk the tree through next() and show deletion with two children."""
    print("\n" + "=" * 60)
    print("Example 4: Successor Walk and Deletion")
    print("=" * 60)

    tree: AVLTree[int] = AVLTree()
    for value in SCRIPTED_VALUES:
        tree.insert(value)

    chain = []
    node = tree.find_min()
    while node is not None:
        chain.append(node.value)
        node = tree.next(node.value)
    print(f"Successor chain from minimum: {chain}")
    print(f"next(7) for an absent value: {tree.next(7)}")

    print(f"\nRoot before deleting it: {tree.root_value()}")
    tree.delete(tree.root_value())
    print(f"Root after deletion: {tree.root_value()}")
    print(f"Breadth-first order: {list(tree.breadth_first())}")
    print(f"Pre-order: {list(tree.pre_order())}")
    print(f"Post-order: {list(tree.post_order())}")

    clone = tree.clone()
    clone.merge(_tree_of([100, 0, 200]))
    print(f"\nClone after merge: {clone.to_string()}")
    print(f"Original unchanged: {tree.to_string()}")

    return chain


def _tree_of(values):
    tree: AVLTree[int] = AVLTree()
    for value in values:
        tree.insert(value)
    return tree


def generate_pdf_report(figures_data):
    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "AVL Tree Report", fontsize=24, ha="center", fontweight="bold")
        summary_text = """
Summary
-------
Self-balancing binary search tree with strict ordering and no duplicates.

• Operations:
  - insert / delete with rotation-based rebalancing
  - find, find_min, find_max, next (successor)
  - count_in_range, values_in_range, count_greater_than, count_less_than
  - lazy in-order, pre-order, post-order, and breadth-first traversal
  - clone, merge, validate

• Checked here:
  - Height stays within 1.44 log2(n+2) for sorted and random insertion
  - Range counts match a brute-force scan
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, image_path in figures_data:
            page = plt.figure(figsize=(11, 8.5))
            page.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            ax = page.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(plt.imread(image_path))
            ax.axis("off")
            pdf.savefig(page)
            plt.close(page)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 23 + "AVL TREE DEMO" + " " * 22 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")
    VIZ_DIR.mkdir(exist_ok=True)

    example_1_scripted_operations()
    example_2_height_growth()
    example_3_range_queries()
    example_4_successor_walk()

    generate_pdf_report([
        ("Example 1: Tree Structure", VIZ_DIR / "01_tree_structure.png"),
        ("Example 2: Height Growth", VIZ_DIR / "02_height_growth.png"),
        ("Example 3: Range Queries", VIZ_DIR / "03_range_queries.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
