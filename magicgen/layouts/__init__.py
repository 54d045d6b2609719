"""
Layout planners for the generator.

Each planner turns an archetype palette and a seed into a ``Layout``: an
ordered list of ``PlacedShape`` entries plus the generator state at the end
of the pass, so passes can be chained.

Usage::

    from magicgen.layouts import place_mandala
    layout = place_mandala(theme.archetypes, rings=3, shapes_per_ring=5, seed=42)
"""

from magicgen.layouts._types import Layout, PlacedShape  # noqa: F401
from magicgen.layouts.grid import place_grid  # noqa: F401
from magicgen.layouts.mandala import place_mandala  # noqa: F401
from magicgen.layouts.scatter import place_shapes  # noqa: F401
