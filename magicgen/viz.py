"""
Visualization and diagnostics toolkit.

Provides functions for previewing generated pages as line art, comparing
the styles side by side, and checking what the generator produces over
many seeds.

Usage (CLI):
    python -m magicgen.viz layout  [--theme sea] [--style scene] [--difficulty kid] [--seed 42]
    python -m magicgen.viz layout  --input outputs/page.json [--save-path ...]
    python -m magicgen.viz styles  [--theme sea] [--difficulty kid] [--seed 42] [--save-path ...]
    python -m magicgen.viz stats   [--num-samples 200] [--style scene] [--save-path ...]

Or from a notebook:
    from magicgen.viz import plot_layout
    plot_layout(generate(create_request("sea", seed=1)))
"""

import argparse
import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Polygon
from tqdm import tqdm

from magicgen.config import DIFFICULTIES, SHAPE_KINDS, STYLES, THEMES
from magicgen.shapes import CircleShape, HeartShape, StarShape, TriangleShape

_CURVE_POINTS = 64


# -----------------------------------------------------------------------
# Outline geometry
# -----------------------------------------------------------------------

def _rotate(points, center, angle):
    c, s = np.cos(angle), np.sin(angle)
    rot = np.array([[c, -s], [s, c]])
    return (points - center) @ rot.T + center


def _heart(width, height):
    """Classic parametric heart fitted to a (width, height) box, point down."""
    t = np.linspace(0, 2 * np.pi, _CURVE_POINTS, endpoint=False)
    hx = 16 * np.sin(t) ** 3
    hy = -(13 * np.cos(t) - 5 * np.cos(2 * t) - 2 * np.cos(3 * t) - np.cos(4 * t))
    hx = (hx - hx.min()) / np.ptp(hx) * width
    hy = (hy - hy.min()) / np.ptp(hy) * height
    return np.stack([hx, hy], axis=1)


def shape_outline(shape):
    """Closed outline of *shape* as an ``(N, 2)`` array in canvas fractions.

    Canvas y grows downward.  Box shapes rotate about their box centre,
    circles and stars about their anchor.
    """
    if isinstance(shape, CircleShape):
        t = np.linspace(0, 2 * np.pi, _CURVE_POINTS, endpoint=False)
        return np.stack([shape.x + shape.radius * np.cos(t),
                         shape.y + shape.radius * np.sin(t)], axis=1)

    if isinstance(shape, StarShape):
        n = 2 * shape.points
        angles = np.arange(n) * np.pi / shape.points - np.pi / 2 + shape.rotation
        radii = np.where(np.arange(n) % 2 == 0, shape.outer_radius, shape.inner_radius)
        return np.stack([shape.x + radii * np.cos(angles),
                         shape.y + radii * np.sin(angles)], axis=1)

    w, h = shape.width, shape.height
    if isinstance(shape, TriangleShape):
        local = np.array([[w / 2, 0.0], [w, h], [0.0, h]])
    elif isinstance(shape, HeartShape):
        local = _heart(w, h)
    else:
        local = np.array([[0.0, 0.0], [w, 0.0], [w, h], [0.0, h]])
    points = local + np.array([shape.x, shape.y])
    center = np.array([shape.x + w / 2, shape.y + h / 2])
    return _rotate(points, center, shape.rotation)


def _draw_page(ax, shapes, title=None):
    for shape in shapes:
        ax.add_patch(Polygon(shape_outline(shape), closed=True, fill=False,
                             edgecolor=shape.stroke_color, linewidth=1.0))
    ax.set_xlim(0, 1)
    ax.set_ylim(1, 0)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    if title:
        ax.set_title(title, fontsize=9)


def _save(fig, save_path):
    plt.tight_layout()
    os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
    fig.savefig(save_path, dpi=120, bbox_inches="tight")
    plt.close(fig)


# -----------------------------------------------------------------------
# 1. Single page preview
# -----------------------------------------------------------------------

def plot_layout(result, save_path="outputs/layout.png"):
    """Draw every shape of *result* as an outline on a unit canvas."""
    if not result.shapes:
        raise ValueError("Nothing to plot: the result has no shapes")

    meta = result.metadata
    fig, ax = plt.subplots(figsize=(6, 6))
    _draw_page(ax, result.shapes,
               f"{meta.theme} / {meta.style} / {meta.difficulty}  "
               f"seed={meta.seed}  n={meta.shape_count}")
    _save(fig, save_path)
    print(f"Layout saved to {save_path}")


# -----------------------------------------------------------------------
# 2. Style comparison grid
# -----------------------------------------------------------------------

def visualize_styles(theme="random", difficulty="kid", seed=42,
                     save_path="outputs/styles.png"):
    """One tile per style, same theme, difficulty and seed."""
    from magicgen.generator import create_request, generate

    cols = 3
    rows = (len(STYLES) + cols - 1) // cols
    fig, axes = plt.subplots(rows, cols, figsize=(4 * cols, 4 * rows))
    axes = [ax for row in np.atleast_2d(axes) for ax in row]

    for ax, style in zip(axes, STYLES):
        result = generate(create_request(theme, style, difficulty, seed=seed))
        _draw_page(ax, result.shapes, f"{style} ({len(result.shapes)})")

    for j in range(len(STYLES), len(axes)):
        axes[j].axis("off")

    _save(fig, save_path)
    print(f"Style comparison saved to {save_path}")


# -----------------------------------------------------------------------
# 3. Generation statistics
# -----------------------------------------------------------------------

def generation_statistics(num_samples=200, theme="random", style="scene",
                          difficulty="kid", save_path="outputs/generation_stats.png"):
    """Plot distributions of kinds, counts, sizes and positions over seeds 1..N."""
    from magicgen.generator import create_request, plan

    if num_samples <= 0:
        raise ValueError("Nothing to plot: num_samples must be positive")

    request = create_request(theme, style, difficulty)
    kinds, counts, layers, forced = [], [], [], []
    xs, ys, sizes = [], [], []

    for seed in tqdm(range(1, num_samples + 1), desc="Sampling", leave=False):
        placements, _ = plan(request, seed)
        counts.append(len(placements))
        for p in placements:
            kinds.append(p.archetype.kind)
            layers.append(p.layer)
            forced.append(p.forced)
            xs.append(p.x)
            ys.append(p.y)
            sizes.append(max(p.width, p.height))

    fig, axes = plt.subplots(2, 3, figsize=(14, 8))

    ax = axes[0, 0]
    active = [(k, kinds.count(k)) for k in SHAPE_KINDS if k in kinds]
    if active:
        labels, values = zip(*active)
        ax.barh(list(labels), list(values))
    ax.set_title("Archetype kinds")

    ax = axes[0, 1]
    ax.hist(counts, bins=20, alpha=0.7, color="steelblue")
    ax.set_title(f"Shapes per page (forced {np.mean(forced) if forced else 0:.1%})")

    ax = axes[0, 2]
    ax.hist(sizes, bins=50, alpha=0.7, color="seagreen")
    ax.set_title("Shape size (longer side)")

    ax = axes[1, 0]
    if layers:
        ax.bar(*np.unique(layers, return_counts=True))
    ax.set_title("Layer distribution")

    ax = axes[1, 1]
    ax.hist(xs, bins=50, alpha=0.7, color="coral", label="x")
    ax.hist(ys, bins=50, alpha=0.5, color="slateblue", label="y")
    ax.legend()
    ax.set_title("Position distribution")

    ax = axes[1, 2]
    heatmap, _, _ = np.histogram2d(xs, ys, bins=32, range=[[-0.1, 1.1], [-0.1, 1.1]])
    ax.imshow(heatmap.T, origin="upper", aspect="auto", cmap="hot")
    ax.set_title("Position heatmap")

    _save(fig, save_path)
    print(f"Generation statistics saved to {save_path}")


# -----------------------------------------------------------------------
# CLI
# -----------------------------------------------------------------------

def main():
    p = argparse.ArgumentParser(description="magicgen visualization toolkit")
    sub = p.add_subparsers(dest="command")

    ly = sub.add_parser("layout", help="Preview one generated page")
    ly.add_argument("--input", default=None, help="Saved result JSON (skips generation)")
    ly.add_argument("--theme", choices=THEMES, default="random")
    ly.add_argument("--style", choices=STYLES, default="scene")
    ly.add_argument("--difficulty", choices=DIFFICULTIES, default="kid")
    ly.add_argument("--seed", type=int, default=None)
    ly.add_argument("--save-path", default="outputs/layout.png")

    st = sub.add_parser("styles", help="Compare all styles for one seed")
    st.add_argument("--theme", choices=THEMES, default="random")
    st.add_argument("--difficulty", choices=DIFFICULTIES, default="kid")
    st.add_argument("--seed", type=int, default=42)
    st.add_argument("--save-path", default="outputs/styles.png")

    ss = sub.add_parser("stats", help="Generation statistics over many seeds")
    ss.add_argument("--num-samples", type=int, default=200)
    ss.add_argument("--theme", choices=THEMES, default="random")
    ss.add_argument("--style", choices=STYLES, default="scene")
    ss.add_argument("--difficulty", choices=DIFFICULTIES, default="kid")
    ss.add_argument("--save-path", default="outputs/generation_stats.png")

    args = p.parse_args()

    if args.command == "layout":
        if args.input:
            from magicgen.export import load_result
            result = load_result(args.input)
        else:
            from magicgen.generator import create_request, generate
            result = generate(create_request(args.theme, args.style, args.difficulty,
                                             seed=args.seed))
        plot_layout(result, save_path=args.save_path)

    elif args.command == "styles":
        visualize_styles(args.theme, args.difficulty, args.seed, save_path=args.save_path)

    elif args.command == "stats":
        generation_statistics(args.num_samples, args.theme, args.style, args.difficulty,
                              save_path=args.save_path)

    else:
        p.print_help()


if __name__ == "__main__":
    main()
