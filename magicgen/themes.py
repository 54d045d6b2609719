"""
Theme palettes and difficulty parameters.

Each theme is an ordered palette of ``ShapeArchetype`` entries: what kinds of
shape may appear, how large, how elongated, which depth layer they prefer
and how often they are chosen.  Difficulty profiles scale shape count and
size for the intended age group.

Usage::

    from magicgen.themes import get_theme, get_difficulty
    theme = get_theme("sea")
    profile = get_difficulty("kid")
"""

from dataclasses import replace
from typing import List

from magicgen._types import DifficultyProfile, ShapeArchetype, Theme
from magicgen.config import DIFFICULTIES, THEMES

_BASE = ShapeArchetype(kind="rectangle")


def _archetype(kind, **overrides) -> ShapeArchetype:
    """Archetype with catalog defaults (size 0.08-0.25, ±30° rotation, any layer)."""
    return replace(_BASE, kind=kind, **overrides)


# ---------------------------------------------------------------------------
# Sea
# ---------------------------------------------------------------------------

SEA = Theme(
    id="sea",
    name="Ocean",
    icon="🌊",
    description="Underwater world with fish, shells, and coral",
    preview_colors=("#87CEEB", "#4169E1", "#00CED1", "#F0E68C", "#FF7F50", "#40E0D0"),
    background_style="gradient",
    archetypes=(
        # fish bodies
        _archetype("oval", size_range=(0.1, 0.3), aspect_range=(1.5, 2.5),
                   weight=3, layer_preference="midground"),
        # shells
        _archetype("triangle", size_range=(0.06, 0.15), aspect_range=(0.8, 1.2),
                   weight=2, layer_preference="foreground"),
        # bubbles
        _archetype("circle", size_range=(0.03, 0.1), can_rotate=False, weight=4),
        # starfish
        _archetype("star", size_range=(0.08, 0.18), weight=2, layer_preference="foreground"),
        # coral
        _archetype("rectangle", size_range=(0.05, 0.15), aspect_range=(0.3, 0.6),
                   weight=2, layer_preference="background"),
        _archetype("heart", size_range=(0.05, 0.12), weight=1, layer_preference="foreground"),
        # waves
        _archetype("crescent", size_range=(0.15, 0.4), aspect_range=(2, 4),
                   weight=1, layer_preference="background"),
    ),
)

# ---------------------------------------------------------------------------
# Space
# ---------------------------------------------------------------------------

SPACE = Theme(
    id="space",
    name="Space",
    icon="🚀",
    description="Cosmic adventure with planets, stars, and rockets",
    preview_colors=("#1a1a2e", "#16213e", "#FFD700", "#FF6B6B", "#9333EA", "#22D3EE"),
    background_style="pattern",
    archetypes=(
        # planets
        _archetype("circle", size_range=(0.12, 0.35), can_rotate=False,
                   weight=3, layer_preference="midground"),
        _archetype("star", size_range=(0.05, 0.2), weight=5),
        # rocket bodies
        _archetype("rectangle", size_range=(0.1, 0.25), aspect_range=(0.3, 0.5),
                   weight=2, layer_preference="midground"),
        # rocket fins
        _archetype("triangle", size_range=(0.05, 0.12), weight=2, layer_preference="midground"),
        # moons
        _archetype("crescent", size_range=(0.08, 0.2), weight=2, layer_preference="background"),
        # asteroids
        _archetype("diamond", size_range=(0.05, 0.12), weight=2, layer_preference="foreground"),
        # planet rings
        _archetype("oval", size_range=(0.2, 0.4), aspect_range=(2, 3),
                   weight=1, layer_preference="midground"),
    ),
)

# ---------------------------------------------------------------------------
# Garden
# ---------------------------------------------------------------------------

GARDEN = Theme(
    id="garden",
    name="Garden",
    icon="🌸",
    description="Beautiful garden with flowers, butterflies, and sunshine",
    preview_colors=("#86EFAC", "#FDE047", "#F472B6", "#A78BFA", "#FB923C", "#38BDF8"),
    background_style="gradient",
    archetypes=(
        # flower centres
        _archetype("circle", size_range=(0.05, 0.15), can_rotate=False,
                   weight=3, layer_preference="midground"),
        # petals
        _archetype("oval", size_range=(0.04, 0.12), aspect_range=(1.5, 2.5),
                   weight=5, layer_preference="midground"),
        # butterfly wings
        _archetype("heart", size_range=(0.06, 0.15), weight=3, layer_preference="foreground"),
        # sun rays
        _archetype("triangle", size_range=(0.08, 0.2), aspect_range=(0.5, 0.8),
                   weight=2, layer_preference="background"),
        # leaves
        _archetype("oval", size_range=(0.05, 0.15), aspect_range=(2, 3),
                   weight=3, layer_preference="background"),
        # sparkles
        _archetype("star", size_range=(0.03, 0.08), weight=2, layer_preference="foreground"),
        # clouds
        _archetype("oval", size_range=(0.15, 0.3), aspect_range=(1.5, 2.5),
                   weight=1, layer_preference="background"),
    ),
)

# ---------------------------------------------------------------------------
# Fantasy
# ---------------------------------------------------------------------------

FANTASY = Theme(
    id="fantasy",
    name="Fantasy",
    icon="🏰",
    description="Magical kingdom with castles, unicorns, and dragons",
    preview_colors=("#A78BFA", "#F472B6", "#FFD700", "#60A5FA", "#34D399", "#FB923C"),
    background_style="gradient",
    archetypes=(
        # towers
        _archetype("rectangle", size_range=(0.1, 0.25), aspect_range=(0.3, 0.5),
                   weight=2, layer_preference="background"),
        # turret tops
        _archetype("triangle", size_range=(0.05, 0.15), aspect_range=(0.8, 1.2),
                   weight=3, layer_preference="background"),
        _archetype("star", size_range=(0.05, 0.18), weight=4),
        _archetype("heart", size_range=(0.06, 0.15), weight=3, layer_preference="foreground"),
        # gems
        _archetype("diamond", size_range=(0.05, 0.12), weight=3, layer_preference="foreground"),
        # sun / moon
        _archetype("circle", size_range=(0.1, 0.25), can_rotate=False,
                   weight=2, layer_preference="background"),
        # dragon wings
        _archetype("triangle", size_range=(0.1, 0.2), aspect_range=(1.2, 2),
                   weight=1, layer_preference="midground"),
        # swirls
        _archetype("crescent", size_range=(0.08, 0.2), weight=2, layer_preference="foreground"),
    ),
)

# ---------------------------------------------------------------------------
# Mix
# ---------------------------------------------------------------------------

RANDOM = Theme(
    id="random",
    name="Mix",
    icon="🎲",
    description="A fun mix of all shapes for creative coloring",
    preview_colors=("#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEAA7", "#DDA0DD"),
    background_style="plain",
    archetypes=(
        _archetype("rectangle", weight=3),
        _archetype("circle", weight=3, can_rotate=False),
        _archetype("triangle", weight=3),
        _archetype("star", weight=3),
        _archetype("heart", weight=3),
        _archetype("oval", weight=2, aspect_range=(1.3, 2)),
        _archetype("diamond", weight=2),
    ),
)

THEME_REGISTRY = {theme.id: theme for theme in (SEA, SPACE, GARDEN, FANTASY, RANDOM)}

# ---------------------------------------------------------------------------
# Difficulty
# ---------------------------------------------------------------------------

DIFFICULTY_PROFILES = {
    "toddler": DifficultyProfile(
        shape_count=(6, 12), size_multiplier=1.5, min_region_size=0.08,
        complexity="simple", include_details=False,
    ),
    "kid": DifficultyProfile(
        shape_count=(12, 25), size_multiplier=1.2, min_region_size=0.05,
        complexity="medium", include_details=False,
    ),
    "teen": DifficultyProfile(
        shape_count=(25, 45), size_multiplier=1.0, min_region_size=0.03,
        complexity="medium", include_details=True,
    ),
    "adult": DifficultyProfile(
        shape_count=(40, 75), size_multiplier=0.8, min_region_size=0.02,
        complexity="detailed", include_details=True,
    ),
}


def get_theme(theme_id: str) -> Theme:
    if theme_id not in THEME_REGISTRY:
        raise ValueError(f"Unknown theme {theme_id!r}; expected one of {THEMES}")
    return THEME_REGISTRY[theme_id]


def get_all_themes() -> List[Theme]:
    return [THEME_REGISTRY[t] for t in THEMES]


def get_difficulty(level: str) -> DifficultyProfile:
    if level not in DIFFICULTY_PROFILES:
        raise ValueError(f"Unknown difficulty {level!r}; expected one of {DIFFICULTIES}")
    return DIFFICULTY_PROFILES[level]


# ---------------------------------------------------------------------------
# Display tables (id, label, icon, blurb) for picker UIs
# ---------------------------------------------------------------------------

THEME_DISPLAY = [
    ("sea", "Ocean", "🌊", "Fish, shells, coral"),
    ("space", "Space", "🚀", "Planets, stars, rockets"),
    ("garden", "Garden", "🌸", "Flowers, butterflies"),
    ("fantasy", "Fantasy", "🏰", "Castles, unicorns"),
    ("random", "Mix", "🎲", "All shapes"),
]

STYLE_DISPLAY = [
    ("scene", "Scene", "🖼️", "Layered themed scene"),
    ("mandala", "Mandala", "🔷", "Circular symmetry"),
    ("kaleidoscope", "Kaleidoscope", "❄️", "Overlapping symmetry"),
    ("pattern", "Pattern", "🔳", "Repeating grid"),
    ("mosaic", "Mosaic", "🧩", "Interlocking tiles"),
    ("freeform", "Freeform", "🎨", "Artistic scatter"),
]

DIFFICULTY_DISPLAY = [
    ("toddler", "Simple", "⭐", "Few large shapes"),
    ("kid", "Easy", "🌟", "Medium shapes"),
    ("teen", "Medium", "✨", "More shapes"),
    ("adult", "Detailed", "💫", "Many shapes"),
]
