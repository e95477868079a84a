"""
UI element types for NWL pages.

Every element is a frozen pydantic model tagged by its `element` field.
`Element` is the closed, discriminated union of all kinds; the code
generator keeps one renderer per member of this union.

YAML keys are camelCase (`onClick`, `minLength`); attributes are
snake_case. Either spelling is accepted on input.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .layout import Layout


class NwlModel(BaseModel):
    """Base model for document types: immutable, camelCase aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class ElementBase(NwlModel):
    """Fields shared by every element kind."""

    element: str
    style: list[str] = Field(default_factory=list)


# =============================================================================
# Shared item types
# =============================================================================


class ListItem(NwlModel):
    content: str
    on_click: str | None = None


class SelectOption(NwlModel):
    value: str
    label: str | None = None

    @property
    def display(self) -> str:
        return self.label if self.label is not None else self.value


class TabItem(NwlModel):
    """A tab; its value is written as `id` in YAML."""

    value: str = Field(alias="id")
    label: str | None = None
    icon: str | None = None

    @property
    def display(self) -> str:
        return self.label if self.label is not None else self.value


class AccordionItem(NwlModel):
    title: str
    content: str
    icon: str | None = None


class BreadcrumbItem(NwlModel):
    label: str
    href: str | None = None


class NavLink(NwlModel):
    label: str
    href: str | None = None
    active: bool | None = None


class CaptchaProvider(str, Enum):
    CLOUDFLARE = "cloudflare"
    RECAPTCHA = "recaptcha"
    HCAPTCHA = "hcaptcha"


class CaptchaConfig(NwlModel):
    provider: CaptchaProvider
    site_key: str | None = None
    theme: str | None = None
    version: str | None = None
    action: str | None = None


class ValidationRule(NwlModel):
    """
    One validation rule for a form field.

    A rule may combine several checks; each check emits its own runtime test
    and shares the rule's `message` when one is given.
    """

    required: bool | None = None
    pattern: str | None = None
    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)
    message: str | None = None


# =============================================================================
# Content elements
# =============================================================================


class HeadingElement(ElementBase):
    element: Literal["heading"] = "heading"
    content: str


class TextElement(ElementBase):
    element: Literal["text"] = "text"
    content: str


class ButtonElement(ElementBase):
    element: Literal["button"] = "button"
    content: str
    on_click: str | None = None


class ImageElement(ElementBase):
    element: Literal["image"] = "image"
    src: str | None = None
    alt: str | None = None


class SpacerElement(ElementBase):
    element: Literal["spacer"] = "spacer"
    size: str | None = None


class BadgeElement(ElementBase):
    element: Literal["badge"] = "badge"
    content: str
    variant: str | None = None


class TagElement(ElementBase):
    element: Literal["tag"] = "tag"
    content: str
    removable: bool | None = None
    on_remove: str | None = None


class AlertElement(ElementBase):
    element: Literal["alert"] = "alert"
    content: str
    alert_type: str | None = None
    dismissible: bool | None = None
    on_dismiss: str | None = None


class SpinnerElement(ElementBase):
    element: Literal["spinner"] = "spinner"
    size: str | None = None
    label: str | None = None


class AvatarElement(ElementBase):
    element: Literal["avatar"] = "avatar"
    src: str | None = None
    name: str | None = None
    size: str | None = None
    fallback: str | None = None


class CopyButtonElement(ElementBase):
    element: Literal["copy-button"] = "copy-button"
    content: str | None = None
    text: str | None = None
    on_copy: str | None = None


class BreadcrumbElement(ElementBase):
    element: Literal["breadcrumb"] = "breadcrumb"
    items: list[BreadcrumbItem] = Field(default_factory=list)


class UrlElement(ElementBase):
    element: Literal["url"] = "url"
    href: str | None = None
    content: str | None = None
    target: str | None = None
    placeholder: str | None = None
    bind: str | None = None


class EmailElement(ElementBase):
    element: Literal["email"] = "email"
    address: str | None = None
    subject: str | None = None
    content: str | None = None
    placeholder: str | None = None
    bind: str | None = None


# =============================================================================
# Containers
# =============================================================================


class CardElement(ElementBase):
    element: Literal["card"] = "card"
    children: list[Element] = Field(default_factory=list)


class ContainerElement(ElementBase):
    element: Literal["container"] = "container"
    children: list[Element] = Field(default_factory=list)


class LayoutElement(ElementBase):
    element: Literal["layout"] = "layout"
    layout: Layout
    children: list[Element] = Field(default_factory=list)


class ListElement(ElementBase):
    """
    A list of rows.

    Static mode renders `items`. When `data` names an array, the list is
    repeated over it at runtime; `children` (if any) become the row
    template, otherwise each row shows the item itself.
    """

    element: Literal["list"] = "list"
    items: list[ListItem] = Field(default_factory=list)
    data: str | None = None
    children: list[Element] = Field(default_factory=list)


class FormElement(ElementBase):
    element: Literal["form"] = "form"
    on_submit: str | None = None
    validation: dict[str, list[ValidationRule]] | None = None
    captcha: CaptchaConfig | None = None
    on_validation_error: str | None = None
    children: list[Element] = Field(default_factory=list)


class FieldsetElement(ElementBase):
    element: Literal["fieldset"] = "fieldset"
    legend: str | None = None
    children: list[Element] = Field(default_factory=list)


class DialogElement(ElementBase):
    """Modal dialog; `open` names the state flag that controls it."""

    element: Literal["dialog", "modal"] = "dialog"
    title: str | None = None
    open: str | None = None
    on_close: str | None = None
    children: list[Element] = Field(default_factory=list)


# =============================================================================
# Inputs
# =============================================================================


class InputElement(ElementBase):
    element: Literal["input"] = "input"
    placeholder: str | None = None
    value: str | None = None
    bind: str | None = None
    on_change: str | None = None


class TextareaElement(ElementBase):
    element: Literal["textarea"] = "textarea"
    placeholder: str | None = None
    bind: str | None = None
    rows: int | None = Field(default=None, ge=1)
    on_change: str | None = None


class CheckboxElement(ElementBase):
    element: Literal["checkbox"] = "checkbox"
    label: str | None = None
    bind: str | None = None
    on_change: str | None = None


class SliderElement(ElementBase):
    element: Literal["slider"] = "slider"
    bind: str | None = None
    min: int | None = None
    max: int | None = None
    step: int | None = None
    label: str | None = None
    on_change: str | None = None


class SelectElement(ElementBase):
    element: Literal["select"] = "select"
    placeholder: str | None = None
    bind: str | None = None
    options: list[SelectOption] = Field(default_factory=list)
    on_change: str | None = None


class RadioGroupElement(ElementBase):
    element: Literal["radio-group"] = "radio-group"
    label: str | None = None
    bind: str | None = None
    options: list[SelectOption] = Field(default_factory=list)
    on_change: str | None = None


class FieldElement(ElementBase):
    element: Literal["field"] = "field"
    name: str
    label: str | None = None
    placeholder: str | None = None


class DateInputElement(ElementBase):
    element: Literal["date-input"] = "date-input"
    bind: str | None = None
    min: str | None = None
    max: str | None = None
    placeholder: str | None = None
    on_change: str | None = None


class TimeInputElement(ElementBase):
    element: Literal["time-input"] = "time-input"
    bind: str | None = None
    min: str | None = None
    max: str | None = None
    step: int | None = None
    placeholder: str | None = None
    on_change: str | None = None


class DateTimeInputElement(ElementBase):
    element: Literal["datetime-input"] = "datetime-input"
    bind: str | None = None
    min: str | None = None
    max: str | None = None
    placeholder: str | None = None
    on_change: str | None = None


class ColorPickerElement(ElementBase):
    element: Literal["color-picker"] = "color-picker"
    bind: str | None = None
    show_palette: bool | None = None
    on_change: str | None = None


class FileUploadElement(ElementBase):
    element: Literal["file-upload"] = "file-upload"
    bind: str | None = None
    accept: str | None = None
    max_size: str | None = None
    multiple: bool | None = None
    on_change: str | None = None


class ProgressElement(ElementBase):
    element: Literal["progress"] = "progress"
    value: str | None = None
    bind: str | None = None
    max: int | None = None
    show_label: bool | None = None


class ToggleElement(ElementBase):
    element: Literal["toggle"] = "toggle"
    label: str | None = None
    bind: str | None = None
    on_color: str | None = None
    off_color: str | None = None
    on_change: str | None = None


class CounterElement(ElementBase):
    element: Literal["counter"] = "counter"
    bind: str | None = None
    min: int | None = None
    max: int | None = None
    step: int | None = None
    on_change: str | None = None


class SearchInputElement(ElementBase):
    element: Literal["search-input"] = "search-input"
    bind: str | None = None
    placeholder: str | None = None
    clearable: bool | None = None
    on_search: str | None = None
    on_change: str | None = None


class ChipInputElement(ElementBase):
    element: Literal["chip-input"] = "chip-input"
    bind: str | None = None
    suggestions: list[str] = Field(default_factory=list)
    placeholder: str | None = None
    on_add: str | None = None
    on_remove: str | None = None


class PaginationElement(ElementBase):
    element: Literal["pagination"] = "pagination"
    bind: str | None = None
    total: int | None = Field(default=None, ge=0)
    per_page: int | None = Field(default=None, ge=1)
    on_change: str | None = None


class RatingElement(ElementBase):
    element: Literal["rating"] = "rating"
    bind: str | None = None
    max: int = Field(default=5, ge=1)
    readonly: bool | None = None
    on_change: str | None = None


# =============================================================================
# Compound / overlay elements
# =============================================================================


class TabsElement(ElementBase):
    element: Literal["tabs"] = "tabs"
    label: str | None = None
    bind: str | None = None
    options: list[TabItem] = Field(default_factory=list)
    on_change: str | None = None


class AccordionElement(ElementBase):
    element: Literal["accordion"] = "accordion"
    multiple: bool | None = None
    items: list[AccordionItem] = Field(default_factory=list)


class TooltipElement(ElementBase):
    element: Literal["tooltip"] = "tooltip"
    content: str
    trigger: str | None = None
    open: str | None = None
    side: str | None = None


class PopoverElement(ElementBase):
    element: Literal["popover"] = "popover"
    content: str
    trigger: str | None = None
    open: str | None = None
    side: str | None = None
    title: str | None = None


class NavElement(ElementBase):
    element: Literal["nav"] = "nav"
    links: list[NavLink] = Field(default_factory=list)
    logo: str | None = None
    sticky: bool | None = None
    transparent: bool | None = None


class NavigationMenuElement(ElementBase):
    element: Literal["navigation-menu"] = "navigation-menu"
    items: list[NavLink] = Field(default_factory=list)
    mobile_breakpoint: int | None = None
    hamburger: bool | None = None
    mobile_style: list[str] = Field(default_factory=list)


Element = Annotated[
    HeadingElement
    | TextElement
    | ButtonElement
    | CardElement
    | ListElement
    | LayoutElement
    | InputElement
    | ImageElement
    | SpacerElement
    | ContainerElement
    | CheckboxElement
    | SliderElement
    | SelectElement
    | RadioGroupElement
    | TextareaElement
    | FormElement
    | FieldElement
    | FieldsetElement
    | DateInputElement
    | TimeInputElement
    | DateTimeInputElement
    | ColorPickerElement
    | FileUploadElement
    | ProgressElement
    | ToggleElement
    | TabsElement
    | AccordionElement
    | DialogElement
    | TooltipElement
    | PopoverElement
    | BadgeElement
    | TagElement
    | AlertElement
    | SpinnerElement
    | CounterElement
    | SearchInputElement
    | CopyButtonElement
    | PaginationElement
    | BreadcrumbElement
    | AvatarElement
    | ChipInputElement
    | NavElement
    | NavigationMenuElement
    | UrlElement
    | EmailElement
    | RatingElement,
    Field(discriminator="element"),
]

CONTAINER_TYPES: tuple[type[ElementBase], ...] = (
    CardElement,
    ContainerElement,
    LayoutElement,
    ListElement,
    FormElement,
    FieldsetElement,
    DialogElement,
)

for _container in CONTAINER_TYPES:
    _container.model_rebuild()
