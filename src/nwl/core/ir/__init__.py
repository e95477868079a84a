"""
NWL document model.

Typed tree produced by the loader and consumed by the code generator
and the style resolver. All types are frozen pydantic models.
"""

from .elements import (
    CONTAINER_TYPES,
    AccordionElement,
    AccordionItem,
    AlertElement,
    AvatarElement,
    BadgeElement,
    BreadcrumbElement,
    BreadcrumbItem,
    ButtonElement,
    CaptchaConfig,
    CaptchaProvider,
    CardElement,
    CheckboxElement,
    ChipInputElement,
    ColorPickerElement,
    ContainerElement,
    CopyButtonElement,
    CounterElement,
    DateInputElement,
    DateTimeInputElement,
    DialogElement,
    Element,
    ElementBase,
    EmailElement,
    FieldElement,
    FieldsetElement,
    FileUploadElement,
    FormElement,
    HeadingElement,
    ImageElement,
    InputElement,
    LayoutElement,
    ListElement,
    ListItem,
    NavElement,
    NavigationMenuElement,
    NavLink,
    NwlModel,
    PaginationElement,
    PopoverElement,
    ProgressElement,
    RadioGroupElement,
    RatingElement,
    SearchInputElement,
    SelectElement,
    SelectOption,
    SliderElement,
    SpacerElement,
    SpinnerElement,
    TabItem,
    TabsElement,
    TagElement,
    TextareaElement,
    TextElement,
    TimeInputElement,
    ToggleElement,
    TooltipElement,
    UrlElement,
    ValidationRule,
)
from .layout import LAYOUT_BASE_CLASSES, Layout, LayoutType
from .page import Document, Page, ProjectConfig, RouteConfig, StateDefinition

__all__ = [
    # Layout
    "LAYOUT_BASE_CLASSES",
    "Layout",
    "LayoutType",
    # Page / project
    "Document",
    "Page",
    "ProjectConfig",
    "RouteConfig",
    "StateDefinition",
    # Element union and bases
    "CONTAINER_TYPES",
    "Element",
    "ElementBase",
    "NwlModel",
    # Item types
    "AccordionItem",
    "BreadcrumbItem",
    "CaptchaConfig",
    "CaptchaProvider",
    "ListItem",
    "NavLink",
    "SelectOption",
    "TabItem",
    "ValidationRule",
    # Elements
    "AccordionElement",
    "AlertElement",
    "AvatarElement",
    "BadgeElement",
    "BreadcrumbElement",
    "ButtonElement",
    "CardElement",
    "CheckboxElement",
    "ChipInputElement",
    "ColorPickerElement",
    "ContainerElement",
    "CopyButtonElement",
    "CounterElement",
    "DateInputElement",
    "DateTimeInputElement",
    "DialogElement",
    "EmailElement",
    "FieldElement",
    "FieldsetElement",
    "FileUploadElement",
    "FormElement",
    "HeadingElement",
    "ImageElement",
    "InputElement",
    "LayoutElement",
    "ListElement",
    "NavElement",
    "NavigationMenuElement",
    "PaginationElement",
    "PopoverElement",
    "ProgressElement",
    "RadioGroupElement",
    "RatingElement",
    "SearchInputElement",
    "SelectElement",
    "SliderElement",
    "SpacerElement",
    "SpinnerElement",
    "TabsElement",
    "TagElement",
    "TextareaElement",
    "TextElement",
    "TimeInputElement",
    "ToggleElement",
    "TooltipElement",
    "UrlElement",
]
