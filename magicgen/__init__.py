"""magicgen - procedural coloring-page composition: themed shape layouts from a seed."""

from magicgen.config import THEMES, STYLES, DIFFICULTIES, MANDALA_PRESETS, GRID_PRESETS
from magicgen._types import CompositionRules, GenerationRequest, GenerationResult
from magicgen.generator import create_request, generate, quick_generate
from magicgen.rng import SeededRandom
from magicgen.themes import get_all_themes, get_difficulty, get_theme
