"""
Themed coloring-page generator.

Dispatches a ``GenerationRequest`` to the layout planner(s) for its style,
merges multi-pass layouts, and synthesizes the placements into shape
descriptors:

    scene         free scatter, layered around a focal point
    freeform      free scatter, flat, medium density
    mandala       concentric symmetric rings
    kaleidoscope  mandala + smaller mandala rotated half a step
    pattern       jittered grid
    mosaic        enlarged grid + shrunken grid shifted half a cell

Usage::

    from magicgen.generator import create_request, generate
    result = generate(create_request("space", "mandala", "toddler", seed=42))
    result.metadata.seed    # pass back as ``seed`` to regenerate the page

A request is a pure function of its fields and seed: the same seed always
yields the same placements and shapes (ids included; creation timestamps
come from *clock*).
"""

import time
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from magicgen._types import (
    CompositionRules, DifficultyProfile, GenerationMetadata, GenerationRequest,
    GenerationResult, Theme,
)
from magicgen.config import (
    GRID_PRESETS, KALEIDOSCOPE_MIN_PER_RING, KALEIDOSCOPE_MIN_RINGS,
    KALEIDOSCOPE_OVERLAY_SEED_OFFSET, KALEIDOSCOPE_OVERLAY_SIZE,
    KALEIDOSCOPE_PRESETS, MANDALA_PRESETS, MOSAIC_BASE_JITTER, MOSAIC_BASE_SIZE,
    MOSAIC_OVERLAY_JITTER, MOSAIC_OVERLAY_SEED_OFFSET, MOSAIC_OVERLAY_SIZE,
    PATTERN_JITTER, SYNTH_SEED_OFFSET,
)
from magicgen.layouts import PlacedShape, place_grid, place_mandala, place_shapes
from magicgen.rng import SeededRandom, normalize_seed, random_seed
from magicgen.synth import Clock, IdSource, counter_ids, synthesize_all
from magicgen.themes import get_difficulty, get_theme

# (placements in paint order, generator state the synthesis seed derives from)
Plan = Tuple[List[PlacedShape], int]


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

_CENTER = (0.5, 0.5)

DEFAULT_COMPOSITIONS: Dict[str, CompositionRules] = {
    "scene": CompositionRules(focal_point=_CENTER, layering=True, density="medium", min_spacing=0.02),
    "mandala": CompositionRules(focal_point=_CENTER, layering=False, density="dense", min_spacing=0.01),
    "kaleidoscope": CompositionRules(focal_point=_CENTER, layering=True, density="dense", min_spacing=0.005),
    "pattern": CompositionRules(focal_point=None, layering=False, density="dense", min_spacing=0.02),
    "mosaic": CompositionRules(focal_point=None, layering=True, density="dense", min_spacing=0.01),
    "freeform": CompositionRules(focal_point=None, layering=True, density="medium", min_spacing=0.03),
}


def default_composition(style: str) -> CompositionRules:
    """Composition rules for *style*; unknown styles get the freeform set."""
    return DEFAULT_COMPOSITIONS.get(style, DEFAULT_COMPOSITIONS["freeform"])


def create_request(theme="random", style="scene", difficulty="kid", seed=None,
                   composition: Optional[CompositionRules] = None) -> GenerationRequest:
    """Request with the style's default composition unless one is given."""
    return GenerationRequest(
        theme=theme,
        style=style,
        difficulty=difficulty,
        composition=composition or default_composition(style),
        seed=seed,
    )


# ---------------------------------------------------------------------------
# Per-style planning
# ---------------------------------------------------------------------------

def _plan_scene(theme: Theme, profile: DifficultyProfile, rules, seed, difficulty) -> Plan:
    rng = SeededRandom(seed)
    target_count = rng.int_between(*profile.shape_count)
    layout = place_shapes(theme.archetypes, target_count, rules,
                          size_multiplier=profile.size_multiplier, rng=rng)
    return layout.shapes, layout.final_seed


def _plan_freeform(theme, profile, rules, seed, difficulty) -> Plan:
    flat = replace(rules, layering=False, density="medium")
    return _plan_scene(theme, profile, flat, seed, difficulty)


def _plan_mandala(theme, profile, rules, seed, difficulty) -> Plan:
    preset = MANDALA_PRESETS[difficulty]
    layout = place_mandala(theme.archetypes, preset.rings, preset.shapes_per_ring,
                           size_multiplier=profile.size_multiplier, seed=seed)
    return layout.shapes, layout.final_seed


def _plan_kaleidoscope(theme, profile, rules, seed, difficulty) -> Plan:
    preset = KALEIDOSCOPE_PRESETS[difficulty]
    primary = place_mandala(theme.archetypes, preset.rings, preset.shapes_per_ring,
                            size_multiplier=profile.size_multiplier, seed=seed)
    overlay = place_mandala(
        theme.archetypes,
        max(KALEIDOSCOPE_MIN_RINGS, preset.rings - 1),
        max(KALEIDOSCOPE_MIN_PER_RING, preset.shapes_per_ring - 2),
        size_multiplier=profile.size_multiplier * KALEIDOSCOPE_OVERLAY_SIZE,
        seed=primary.final_seed + KALEIDOSCOPE_OVERLAY_SEED_OFFSET,
    )
    # Turn the overlay half a primary step so its shapes fall between the primary's
    half_step = np.pi / preset.shapes_per_ring
    rotated = [s.moved(rotation=half_step) for s in overlay.shapes]
    return primary.shapes + rotated, primary.final_seed


def _plan_pattern(theme, profile, rules, seed, difficulty) -> Plan:
    preset = GRID_PRESETS[difficulty]
    layout = place_grid(theme.archetypes, preset.cols, preset.rows,
                        size_multiplier=profile.size_multiplier,
                        jitter=PATTERN_JITTER, seed=seed)
    return layout.shapes, layout.final_seed


def _plan_mosaic(theme, profile, rules, seed, difficulty) -> Plan:
    preset = GRID_PRESETS[difficulty]
    base = place_grid(theme.archetypes, preset.cols, preset.rows,
                      size_multiplier=profile.size_multiplier * MOSAIC_BASE_SIZE,
                      jitter=MOSAIC_BASE_JITTER, seed=seed)
    overlay = place_grid(theme.archetypes, preset.cols - 1, preset.rows - 1,
                         size_multiplier=profile.size_multiplier * MOSAIC_OVERLAY_SIZE,
                         jitter=MOSAIC_OVERLAY_JITTER,
                         seed=base.final_seed + MOSAIC_OVERLAY_SEED_OFFSET)
    # Half of a whole-canvas cell, so overlay shapes sit over base-grid seams
    dx, dy = 0.5 / preset.cols, 0.5 / preset.rows
    shifted = [s.moved(dx=dx, dy=dy) for s in overlay.shapes]
    return base.shapes + shifted, base.final_seed


STYLE_PLANNERS: Dict[str, Callable[..., Plan]] = {
    "scene": _plan_scene,
    "freeform": _plan_freeform,
    "mandala": _plan_mandala,
    "kaleidoscope": _plan_kaleidoscope,
    "pattern": _plan_pattern,
    "mosaic": _plan_mosaic,
}


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def plan(request: GenerationRequest, seed: int) -> Plan:
    """Run the placement pass(es) for *request* without synthesizing."""
    theme = get_theme(request.theme)
    profile = get_difficulty(request.difficulty)
    rules = request.composition or default_composition(request.style)
    planner = STYLE_PLANNERS.get(request.style, _plan_scene)
    return planner(theme, profile, rules, seed, request.difficulty)


def generate(
    request: GenerationRequest,
    id_source: Optional[IdSource] = None,
    clock: Optional[Clock] = None,
) -> GenerationResult:
    """Generate a themed coloring page.

    Parameters
    ----------
    request : GenerationRequest
        Theme, style, difficulty, optional composition override and seed.
        Without a seed a random one is drawn; either way the seed actually
        used is reported in ``metadata.seed``.
    id_source : callable or None
        Returns a fresh shape id per call.  Defaults to ``gen-<seed>-<n>``.
    clock : callable or None
        Returns the creation timestamp.  Defaults to ``time.time``.

    Returns
    -------
    GenerationResult
    """
    seed = random_seed() if request.seed is None else normalize_seed(request.seed)
    placements, final_seed = plan(request, seed)

    # Separate stream for stylistic detail (e.g. star points)
    synth_rng = SeededRandom(final_seed + SYNTH_SEED_OFFSET)
    generated_at = (clock or time.time)()
    shapes = synthesize_all(placements, synth_rng,
                            id_source=id_source or counter_ids(f"gen-{seed}"),
                            clock=lambda: generated_at)

    style = request.style if request.style in STYLE_PLANNERS else "scene"
    metadata = GenerationMetadata(
        seed=seed,
        theme=request.theme,
        style=style,
        difficulty=request.difficulty,
        shape_count=len(shapes),
        generated_at=generated_at,
    )
    return GenerationResult(shapes=tuple(shapes), metadata=metadata)


def quick_generate(theme="random", difficulty="kid", seed=None, **kwargs) -> GenerationResult:
    """Scene-style page with default composition."""
    return generate(create_request(theme, "scene", difficulty, seed=seed), **kwargs)
