"""Pydantic models for the editable resume document.

The document arrives camelCased (``fullName``, ``startDate``...); attributes are
snake_case. All models are frozen: a render pass works on an immutable snapshot.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    model_validator,
)
from pydantic.alias_generators import to_camel


class ItemType(str, Enum):
    """Declared item types."""

    HEADING = 'heading'
    SUB_HEADING = 'sub-heading'
    TEXT = 'text'
    BULLET = 'bullet'
    NUMBER = 'number'
    DATE = 'date'
    DATE_RANGE = 'date-range'
    LOCATION = 'location'
    EMAIL = 'email'
    PHONE = 'phone'
    LINK = 'link'
    SOCIAL = 'social'
    TAG = 'tag'
    RATING = 'rating'
    SEPARATOR = 'separator'
    IMAGE = 'image'


STRING_ITEM_TYPES = frozenset(
    {
        'heading',
        'sub-heading',
        'text',
        'bullet',
        'number',
        'date',
        'location',
        'phone',
        'email',
        'tag',
    }
)
LINK_ITEM_TYPES = frozenset({'link', 'social'})
LIST_ITEM_TYPES = frozenset({'bullet', 'number'})

StringItemType = Literal[
    'heading',
    'sub-heading',
    'text',
    'bullet',
    'number',
    'date',
    'location',
    'phone',
    'email',
    'tag',
]


class _Model(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


# --- Items ---


class ItemMetadata(_Model):
    color: str | None = Field(None, max_length=20, description='Hex override, e.g. #ff0000')
    align: Literal['left', 'center', 'right'] | None = None
    col_span: int | None = Field(None, ge=1, le=12, description='Grid tracks to span')


class _BaseItem(_Model):
    id: str = Field(..., min_length=1, max_length=50)
    visible: bool = True
    metadata: ItemMetadata | None = None


class StringItem(_BaseItem):
    type: StringItemType
    value: str = ''


class DateRangeValue(_Model):
    start_date: str = Field(..., max_length=20, description='e.g. 2020-01')
    end_date: str | None = Field(
        None, max_length=20, description='Missing or empty means ongoing'
    )
    format: str | None = Field(None, max_length=20, description='e.g. MM/YYYY')


class DateRangeItem(_BaseItem):
    type: Literal['date-range']
    value: DateRangeValue


class LinkValue(_Model):
    label: str = ''
    url: str = Field('', max_length=2048)


class LinkItem(_BaseItem):
    type: Literal['link', 'social']
    value: LinkValue


class RatingValue(_Model):
    label: str = ''
    score: float = Field(..., ge=0, le=10)
    max: float = Field(5, ge=1, le=10)
    # stars | bar | dots; anything else renders as plain "score/max"
    display: str = 'stars'

    @model_validator(mode='after')
    def _score_within_max(self) -> 'RatingValue':
        if self.score > self.max:
            raise ValueError(f'score {self.score} exceeds max {self.max}')
        return self


class RatingItem(_BaseItem):
    type: Literal['rating']
    value: RatingValue


class ImageValue(_Model):
    url: str = Field(..., max_length=2048)
    alt: str | None = Field(None, max_length=200)
    shape: Literal['circle', 'square'] | None = None


class ImageItem(_BaseItem):
    type: Literal['image']
    value: ImageValue


class SeparatorItem(_BaseItem):
    type: Literal['separator']
    value: None = None


class UnknownItem(_BaseItem):
    """An item whose type this version does not know. Renders nothing."""

    model_config = ConfigDict(extra='allow')
    type: str
    value: Any = None


def _item_tag(value: Any) -> str:
    item_type = value.get('type') if isinstance(value, dict) else getattr(value, 'type', None)
    if isinstance(item_type, Enum):
        item_type = item_type.value
    if item_type in STRING_ITEM_TYPES:
        return 'string'
    if item_type in LINK_ITEM_TYPES:
        return 'link'
    if item_type in ('date-range', 'rating', 'image', 'separator'):
        return item_type
    return 'unknown'


Item = Annotated[
    Union[
        Annotated[StringItem, Tag('string')],
        Annotated[DateRangeItem, Tag('date-range')],
        Annotated[LinkItem, Tag('link')],
        Annotated[RatingItem, Tag('rating')],
        Annotated[ImageItem, Tag('image')],
        Annotated[SeparatorItem, Tag('separator')],
        Annotated[UnknownItem, Tag('unknown')],
    ],
    Discriminator(_item_tag),
]


# --- Sections ---


DEFAULT_GRID_COLUMNS = 3


class SectionContent(_Model):
    id: str = Field(..., min_length=1, max_length=50)
    layout: Literal['list', 'grid', 'inline'] = 'list'
    columns: int | None = Field(None, ge=1, le=4, description='Only used by grid')
    items: tuple[Item, ...] = ()

    @property
    def effective_columns(self) -> int:
        return self.columns or DEFAULT_GRID_COLUMNS


class Section(_Model):
    id: str = Field(..., min_length=1, max_length=50)
    title: str = ''
    visible: bool = True
    content: SectionContent


class PersonalInfo(_Model):
    full_name: str = ''
    job_title: str | None = None
    avatar: str | None = None
    details: tuple[Item, ...] = Field(
        (), description='Contact items: email, phone, location, links...'
    )


# --- Document ---


class ColorScheme(_Model):
    background: str = '#ffffff'
    text: str = '#111827'
    # 0 primary, 1 secondary, 2 border/divider, 3 muted
    accents: tuple[str, ...] = ()


class Typography(_Model):
    font_family: str = 'Helvetica'
    font_size: Literal['sm', 'md', 'lg'] = 'md'


class ResumeMetadata(_Model):
    template: str = 'modern'
    typography: Typography = Field(default_factory=Typography)
    colors: ColorScheme = Field(default_factory=ColorScheme)


class Resume(_Model):
    """The sole input of the rendering pipeline."""

    id: str | None = None
    user_id: str | None = None
    title: str | None = None
    metadata: ResumeMetadata = Field(default_factory=ResumeMetadata)
    personal: PersonalInfo = Field(default_factory=PersonalInfo)
    sections: tuple[Section, ...] = ()
