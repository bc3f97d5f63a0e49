"""Resolve a document's raw colors into the semantic roles renderers use."""

from dataclasses import dataclass

from vitae.resume_models import ColorScheme

# One default per accent slot: primary, secondary, border/divider, muted
DEFAULT_ACCENTS = ('#1f2937', '#4b5563', '#e5e7eb', '#6b7280')
DEFAULT_TEXT = '#111827'
DEFAULT_BACKGROUND = '#ffffff'


@dataclass(frozen=True)
class ResolvedColors:
    text: str
    primary: str
    secondary: str
    border: str
    muted: str
    background: str = DEFAULT_BACKGROUND


def resolve_color_scheme(colors: ColorScheme | None) -> ResolvedColors:
    """Map ``accents[0..3]`` to roles, using a fixed default for missing slots."""
    colors = colors or ColorScheme()
    accents = list(colors.accents)
    slots = [
        accents[i] if i < len(accents) and accents[i] else DEFAULT_ACCENTS[i]
        for i in range(len(DEFAULT_ACCENTS))
    ]
    return ResolvedColors(
        text=colors.text or DEFAULT_TEXT,
        primary=slots[0],
        secondary=slots[1],
        border=slots[2],
        muted=slots[3],
        background=colors.background or DEFAULT_BACKGROUND,
    )


def as_resolved(colors: 'ResolvedColors | ColorScheme | None') -> ResolvedColors:
    """Accept either raw document colors or an already resolved scheme."""
    if isinstance(colors, ResolvedColors):
        return colors
    return resolve_color_scheme(colors)
