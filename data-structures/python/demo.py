"""
Binary Tree Demo -- Placement, leftmost duplicates, splice-based deletion,
and the cost of never rebalancing.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_tree import BinaryTree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}


def build_tree(values):
    tree = BinaryTree()
    for value in values:
        tree.insert(int(value))
    return tree


def layout(tree):
    """Place each node at (in-order rank, -depth)."""
    positions = {}
    for rank, node in enumerate(tree.nodes()):
        depth = 0
        parent = node.parent
        while parent is not None:
            depth += 1
            parent = parent.parent
        positions[id(node)] = (rank, -depth)
    return positions


def draw_tree(ax, tree, title, highlight=None):
    positions = layout(tree)
    for node in tree.nodes():
        x, y = positions[id(node)]
        if node.parent is not None:
            px, py = positions[id(node.parent)]
            ax.plot([x, px], [y, py], color=COLORS["dark"], linewidth=1, zorder=1)
        color = COLORS["red"] if node.value == highlight else COLORS["blue"]
        ax.scatter([x], [y], s=500, color=color, zorder=2)
        ax.text(x, y, str(node.value), ha="center", va="center", color="white",
                fontsize=10, fontweight="bold", zorder=3)
    ax.set_title(title)
    ax.axis("off")
    if not positions:
        ax.text(0.5, 0.5, "(empty)", ha="center", va="center", transform=ax.transAxes)


# ---------------------------------------------------------------------------
# Example 1: Insert, dump, search
# ---------------------------------------------------------------------------
def example_1_basic_walkthrough():
    """Insert duplicates, dump the tree in order, find the leftmost duplicate."""
    print("=" * 60)
    print("Example 1: Insert, Dump, Search")
    print("=" * 60)

    tree = build_tree([2, 2, 3])
    print("\n  In-order dump after inserting [2, 2, 3]:")
    for line in tree.dump():
        print(f"    {line}")

    found = tree.search(2)
    print(f"\n  search(2) -> {found}")
    print(f"  search(9) -> {tree.search(9)}")

    fig, ax = plt.subplots(figsize=(6, 4))
    draw_tree(ax, tree, "Duplicates descend left", highlight=2)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_walkthrough.png", dpi=150)
    plt.close(fig)

    return fig, tree


# ---------------------------------------------------------------------------
# Example 2: Two-child deletion
# ---------------------------------------------------------------------------
def example_2_two_child_delete():
    """Delete a root with two children; the largest left value moves up."""
    print("\n" + "=" * 60)
    print("Example 2: Two-Child Deletion")
    print("=" * 60)

    values = [5, 3, 8, 1, 4, 7, 9]
    tree = build_tree(values)
    successor = tree.successor(tree.root())
    print(f"\n  Inserted: {values}")
    print(f"  Successor of root 5: {successor.value} (largest in left subtree)")

    fig, axes = plt.subplots(1, 2, figsize=(12, 4))
    draw_tree(axes[0], tree, "Before delete(5)", highlight=5)

    tree.delete(5)
    print(f"  In-order after delete(5): {tree.in_order()}")
    print(f"  New root: {tree.root()}")
    print(f"  Invariants hold: {tree.is_valid()}")

    draw_tree(axes[1], tree, "After delete(5)", highlight=4)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_two_child_delete.png", dpi=150)
    plt.close(fig)

    return fig, tree


# ---------------------------------------------------------------------------
# Example 3: Duplicate chains under deletion
# ---------------------------------------------------------------------------
def example_3_duplicate_chains():
    """Repeatedly delete a duplicated value and track which node goes."""
    print("\n" + "=" * 60)
    print("Example 3: Duplicate Chains Under Deletion")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    values = [int(v) for v in rng.integers(0, 6, size=14)]
    tree = build_tree(values)
    target = max(set(values), key=values.count)
    print(f"\n  Inserted: {values}")
    print(f"  Most frequent value: {target} (x{values.count(target)})")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    draw_tree(axes[0], tree, f"Before removing every {target}", highlight=target)

    step = 0
    while target in tree:
        step += 1
        print(f"  step {step}: deleting {tree.search(target)}")
        tree.delete(target)
        assert tree.is_valid()

    print(f"  Remaining in-order: {tree.in_order()}")
    draw_tree(axes[1], tree, f"After removing every {target}")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_duplicate_chains.png", dpi=150)
    plt.close(fig)

    return fig, tree


# ---------------------------------------------------------------------------
# Example 4: Height growth without rebalancing
# ---------------------------------------------------------------------------
def example_4_height_growth():
    """Compare tree height for random versus sorted insertion orders."""
    print("\n" + "=" * 60)
    print("Example 4: Height Growth Without Rebalancing")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    sizes = np.array([10, 50, 100, 200, 400, 800])
    random_heights = []
    sorted_heights = []
    for n in sizes:
        random_heights.append(build_tree(rng.permutation(n)).height())
        sorted_heights.append(build_tree(np.arange(n)).height())
        print(f"  n={n:4d}  random height={random_heights[-1]:4d}  sorted height={sorted_heights[-1]:4d}")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(sizes, random_heights, "o-", color=COLORS["green"], linewidth=2, label="Random order")
    ax.plot(sizes, sorted_heights, "s-", color=COLORS["red"], linewidth=2, label="Sorted order")
    ax.plot(sizes, np.log2(sizes + 1), "--", color=COLORS["purple"], label="log2(n + 1)")
    ax.set_xlabel("Number of nodes")
    ax.set_ylabel("Height")
    ax.set_title("Unbalanced Tree Height")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_height_growth.png", dpi=150)
    plt.close(fig)

    return fig, (random_heights, sorted_heights)


# ---------------------------------------------------------------------------
# Example 5: Mixed workload
# ---------------------------------------------------------------------------
def example_5_mixed_workload():
    """Random inserts and deletes; size and height tracked after every step."""
    print("\n" + "=" * 60)
    print("Example 5: Mixed Insert/Delete Workload")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    tree = BinaryTree()
    sizes = []
    heights = []
    deletes = 0
    for _ in range(600):
        value = int(rng.integers(0, 50))
        if rng.random() < 0.55:
            tree.insert(value)
        else:
            if value in tree:
                deletes += 1
            tree.delete(value)
        sizes.append(tree.size())
        heights.append(tree.height())

    print(f"\n  Successful deletes: {deletes}")
    print(f"  Final size: {tree.size()}, final height: {tree.height()}")
    print(f"  Invariants hold: {tree.is_valid()}")
    print(f"  In-order sorted: {tree.in_order() == sorted(tree.in_order())}")

    fig, ax = plt.subplots(figsize=(10, 5))
    steps = np.arange(1, len(sizes) + 1)
    ax.plot(steps, sizes, color=COLORS["blue"], label="Size")
    ax.plot(steps, heights, color=COLORS["orange"], label="Height")
    ax.set_xlabel("Operation")
    ax.set_ylabel("Count")
    ax.set_title("Mixed Workload")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "05_mixed_workload.png", dpi=150)
    plt.close(fig)

    return fig, tree


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Binary Tree", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Unbalanced BST With Duplicates", fontsize=24, ha="center")
        fig.text(0.5, 0.35, "Demonstration & Analysis Report", fontsize=18, ha="center", style="italic")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Summary", fontsize=24, ha="center", fontweight="bold")

        summary_text = """
This report demonstrates an unbalanced binary search tree that keeps
duplicate values.

• Placement:
  - value <= node goes left, value > node goes right
  - duplicates form a chain down the left side

• Search returns the leftmost duplicate of a value

• Deletion:
  - leaf: unlinked
  - one child: the child and its subtree move up
  - two children: the largest node of the left subtree is moved
    into place; no stored value is ever rewritten

Key Findings:
  1. Invariants hold after every insert and delete
  2. Sorted input degenerates the tree into a chain
  3. Random input keeps height close to a small multiple of log2(n)
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, image in figures_data:
            page = plt.figure(figsize=(11, 8.5))
            page.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            ax = page.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(plt.imread(VIZ_DIR / image))
            ax.axis("off")
            pdf.savefig(page)
            plt.close(page)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 22 + "BINARY TREE DEMO" + " " * 20 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_basic_walkthrough()
    example_2_two_child_delete()
    example_3_duplicate_chains()
    example_4_height_growth()
    example_5_mixed_workload()

    figures = [
        ("Example 1: Insert, Dump, Search", "01_walkthrough.png"),
        ("Example 2: Two-Child Deletion", "02_two_child_delete.png"),
        ("Example 3: Duplicate Chains", "03_duplicate_chains.png"),
        ("Example 4: Height Growth", "04_height_growth.png"),
        ("Example 5: Mixed Workload", "05_mixed_workload.png"),
    ]
    generate_pdf_report(figures)

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
