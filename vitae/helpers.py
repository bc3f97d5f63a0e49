"""Type predicates and display formatters for resume items."""

from typing import Any, Callable

from vitae.resume_models import (
    STRING_ITEM_TYPES,
    LINK_ITEM_TYPES,
    DateRangeValue,
    LinkValue,
    Resume,
)


# --- Type predicates ---


def is_string_item(item: Any) -> bool:
    return item.type in STRING_ITEM_TYPES


def is_date_range_item(item: Any) -> bool:
    return item.type == 'date-range'


def is_link_item(item: Any) -> bool:
    return item.type in LINK_ITEM_TYPES


def is_rating_item(item: Any) -> bool:
    return item.type == 'rating'


def is_image_item(item: Any) -> bool:
    return item.type == 'image'


def is_separator_item(item: Any) -> bool:
    return item.type == 'separator'


ITEM_PREDICATES = (
    is_string_item,
    is_date_range_item,
    is_link_item,
    is_rating_item,
    is_image_item,
    is_separator_item,
)


# --- Formatters ---


def format_date_range(value: DateRangeValue, translate: Callable[[str], str]) -> str:
    """Format ``start - end``; a missing or empty end date reads as "present"."""
    end = value.end_date or translate('present')
    return f'{value.start_date} - {end}'


def display_label(value: LinkValue) -> str:
    return value.label or value.url


def format_score(score: float, maximum: float) -> str:
    return f'{score:g}/{maximum:g}'


def suggested_filename(resume: Resume, *, extension: str = 'pdf') -> str:
    """File name offered for a download: the owner's name, else "resume"."""
    name = (resume.personal.full_name or '').strip() or 'resume'
    for ch in '/\\:*?"<>|':
        name = name.replace(ch, '_')
    return f'{name}.{extension}'
