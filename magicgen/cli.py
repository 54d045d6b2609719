"""
Command-line page generator.

Generates coloring pages and writes them as JSON shape lists for the
drawing store.

Usage (CLI):
    python -m magicgen.cli generate --theme sea --style mandala --difficulty teen --seed 42
    python -m magicgen.cli batch    --num-pages 20 --output-dir outputs/pages
    python -m magicgen.cli classic  --complexity 0.5 --seed 7

Or from a notebook:
    from magicgen.cli import generate_page
    generate_page("space", "kaleidoscope", "adult", seed=3)
"""

import argparse
import os
from collections import Counter

from tqdm import tqdm

from magicgen.classic import generate_random_shapes
from magicgen.config import DIFFICULTIES, STYLES, THEMES
from magicgen.export import save_result, save_shapes
from magicgen.generator import create_request, generate
from magicgen.rng import random_seed


def _summary(result):
    meta = result.metadata
    kinds = Counter(shape.type for shape in result.shapes)
    breakdown = ", ".join(f"{k}={n}" for k, n in sorted(kinds.items()))
    return (f"{meta.theme}/{meta.style}/{meta.difficulty} seed={meta.seed}: "
            f"{meta.shape_count} shapes ({breakdown or 'none'})")


def generate_page(theme="random", style="scene", difficulty="kid", seed=None,
                  save_path="outputs/page.json"):
    """Generate one page, save it, and print a one-line summary."""
    result = generate(create_request(theme, style, difficulty, seed=seed))
    save_result(result, save_path)
    print(_summary(result))
    print(f"Page saved to {save_path}")
    return result


def generate_batch(num_pages=10, theme="random", style="scene", difficulty="kid",
                   start_seed=1, output_dir="outputs/pages"):
    """Generate pages for seeds ``start_seed .. start_seed + num_pages - 1``."""
    os.makedirs(output_dir, exist_ok=True)
    total = 0
    for seed in tqdm(range(start_seed, start_seed + num_pages), desc="Pages"):
        result = generate(create_request(theme, style, difficulty, seed=seed))
        save_result(result, os.path.join(output_dir, f"{style}_{theme}_{seed}.json"))
        total += result.metadata.shape_count
    print(f"{num_pages} pages ({total} shapes) saved to {output_dir}")


def classic_page(complexity=0.5, seed=None, save_path="outputs/classic.json"):
    """Generate a classic random-rectangle page."""
    seed = random_seed() if seed is None else seed
    shapes = generate_random_shapes(complexity, seed=seed)
    save_shapes(shapes, save_path, seed=seed, complexity=complexity)
    print(f"classic complexity={complexity} seed={seed}: {len(shapes)} rectangles")
    print(f"Page saved to {save_path}")
    return shapes


def main():
    p = argparse.ArgumentParser(description="magicgen coloring-page generator")
    sub = p.add_subparsers(dest="command")

    gen = sub.add_parser("generate", help="Generate a single page")
    gen.add_argument("--theme", choices=THEMES, default="random")
    gen.add_argument("--style", choices=STYLES, default="scene")
    gen.add_argument("--difficulty", choices=DIFFICULTIES, default="kid")
    gen.add_argument("--seed", type=int, default=None)
    gen.add_argument("--save-path", default="outputs/page.json")

    bt = sub.add_parser("batch", help="Generate pages for a range of seeds")
    bt.add_argument("--num-pages", type=int, default=10)
    bt.add_argument("--theme", choices=THEMES, default="random")
    bt.add_argument("--style", choices=STYLES, default="scene")
    bt.add_argument("--difficulty", choices=DIFFICULTIES, default="kid")
    bt.add_argument("--start-seed", type=int, default=1)
    bt.add_argument("--output-dir", default="outputs/pages")

    cl = sub.add_parser("classic", help="Classic random-rectangle page")
    cl.add_argument("--complexity", type=float, default=0.5)
    cl.add_argument("--seed", type=int, default=None)
    cl.add_argument("--save-path", default="outputs/classic.json")

    args = p.parse_args()

    if args.command == "generate":
        generate_page(args.theme, args.style, args.difficulty, args.seed,
                      save_path=args.save_path)

    elif args.command == "batch":
        generate_batch(args.num_pages, args.theme, args.style, args.difficulty,
                       start_seed=args.start_seed, output_dir=args.output_dir)

    elif args.command == "classic":
        classic_page(args.complexity, args.seed, save_path=args.save_path)

    else:
        p.print_help()


if __name__ == "__main__":
    main()
