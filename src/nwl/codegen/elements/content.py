"""
Renderers for static content: text, buttons, images, status indicators, links.
"""

from __future__ import annotations

from ...core import ir
from ..emitter import JsxWriter
from ..props import Props, arrow, binding_of, element, format_style, js_string, open_tag, tag
from .registry import renders

BADGE_VARIANTS = ("success", "warning", "error", "info")
ALERT_TYPES = ("success", "warning", "error", "info")
AVATAR_SIZES = {
    "sm": "w-8 h-8 text-xs",
    "md": "w-10 h-10 text-sm",
    "lg": "w-16 h-16 text-lg",
}


@renders(ir.HeadingElement)
def render_heading(heading: ir.HeadingElement, out: JsxWriter) -> None:
    out.line(element("h1", heading.content, Props().class_name(format_style(heading.style))))


@renders(ir.TextElement)
def render_text(text: ir.TextElement, out: JsxWriter) -> None:
    out.line(element("p", text.content, Props().class_name(format_style(text.style))))


def click_handler(on_click: str | None) -> str | None:
    """Arrow for an onClick value; a leading `/` means navigate to that path."""
    if on_click is None:
        return None
    if on_click.startswith("/"):
        return f"() => window.location.href = {js_string(on_click)}"
    return arrow("", on_click)


@renders(ir.ButtonElement)
def render_button(button: ir.ButtonElement, out: JsxWriter) -> None:
    props = Props().class_name("Button", format_style(button.style))
    props.expr("onClick", click_handler(button.on_click))
    out.line(element("Button", button.content, props))


@renders(ir.ImageElement)
def render_image(image: ir.ImageElement, out: JsxWriter) -> None:
    props = Props().class_name(format_style(image.style)).text("src", image.src).text("alt", image.alt)
    out.line(tag("img", props))


@renders(ir.SpacerElement)
def render_spacer(spacer: ir.SpacerElement, out: JsxWriter) -> None:
    out.line(tag("Separator", Props().class_name(format_style(spacer.style))))


@renders(ir.BadgeElement)
def render_badge(badge: ir.BadgeElement, out: JsxWriter) -> None:
    variant = badge.variant if badge.variant in BADGE_VARIANTS else "default"
    props = Props().class_name("Badge", format_style(badge.style), f"Badge-{variant}")
    out.line(element("span", badge.content, props))


@renders(ir.TagElement)
def render_tag(tag_element: ir.TagElement, out: JsxWriter) -> None:
    props = Props().class_name("Tag", format_style(tag_element.style))
    if not tag_element.removable:
        out.line(element("span", tag_element.content, props))
        return
    close = Props().text("className", "Tag-close").text("aria-label", "Remove")
    close.expr("onClick", arrow("", tag_element.on_remove))
    with out.block(open_tag("span", props), "</span>"):
        out.line(tag_element.content)
        out.line(element("button", "", close))


@renders(ir.AlertElement)
def render_alert(alert: ir.AlertElement, out: JsxWriter) -> None:
    alert_type = alert.alert_type if alert.alert_type in ALERT_TYPES else "info"
    props = Props().class_name("Alert", f"Alert-{alert_type}", format_style(alert.style))
    props.text("role", "alert")
    with out.block(open_tag("div", props), "</div>"):
        if alert.dismissible:
            dismiss = Props().text("className", "Alert-dismiss").text("aria-label", "Dismiss")
            dismiss.expr("onClick", arrow("", alert.on_dismiss))
            out.line(tag("button", dismiss))
        out.line(element("p", alert.content))


@renders(ir.SpinnerElement)
def render_spinner(spinner: ir.SpinnerElement, out: JsxWriter) -> None:
    size_class = {"sm": "Spinner-sm", "lg": "Spinner-lg"}.get(spinner.size or "md")
    with out.block(open_tag("div", Props().class_name("Spinner", format_style(spinner.style))), "</div>"):
        if spinner.label:
            out.line(element("span", spinner.label, Props().text("className", "Spinner-label")))
        out.line(tag("div", Props().class_name("Spinner-spinner", size_class)))
        if not spinner.label:
            out.line(element("span", "Loading...", Props().text("className", "sr-only")))


def avatar_initials(avatar: ir.AvatarElement) -> str:
    """Up to two characters shown when there is no image."""
    if avatar.fallback:
        return avatar.fallback[:2]
    if avatar.name:
        words = avatar.name.split()
        return "".join(word[0].upper() for word in words[:2])
    return "?"


@renders(ir.AvatarElement)
def render_avatar(avatar: ir.AvatarElement, out: JsxWriter) -> None:
    size = AVATAR_SIZES.get(avatar.size or "md", AVATAR_SIZES["md"])
    wrapper = Props().class_name("flex items-center", format_style(avatar.style))
    with out.block(open_tag("div", wrapper), "</div>"):
        frame = Props().class_name(size, "rounded-full overflow-hidden bg-gray-100")
        with out.block(open_tag("div", frame), "</div>"):
            if avatar.src:
                image = Props().text("src", avatar.src).text("alt", avatar.name or "")
                image.text("className", "w-full h-full object-cover rounded-full")
                out.line(tag("img", image))
            else:
                fallback = Props().text(
                    "className",
                    "flex items-center justify-center w-full h-full rounded-full "
                    "bg-gray-200 text-gray-600 font-medium",
                )
                out.line(element("span", avatar_initials(avatar), fallback))
        if avatar.name:
            out.line(
                element("span", avatar.name, Props().text("className", "ml-2 font-medium text-gray-700"))
            )


@renders(ir.CopyButtonElement)
def render_copy_button(copy: ir.CopyButtonElement, out: JsxWriter) -> None:
    payload = copy.content if copy.content is not None else (copy.text or "")
    write = f"navigator.clipboard.writeText({js_string(payload)})"
    if copy.on_copy:
        write = f"{write}.then(() => {copy.on_copy.rstrip(';')})"
    props = Props().expr("onClick", f"() => {write}").text("type", "button")
    props.class_name("inline-flex items-center", format_style(copy.style))
    out.line(element("button", copy.text or "Copy", props))


@renders(ir.BreadcrumbElement)
def render_breadcrumb(breadcrumb: ir.BreadcrumbElement, out: JsxWriter) -> None:
    nav = Props().text("aria-label", "Breadcrumb").class_name(format_style(breadcrumb.style))
    separator = element("span", "/", Props().text("className", "mx-2 text-gray-400"))
    with out.block(open_tag("nav", nav), "</nav>"):
        with out.block('<ol className="flex items-center space-x-2">', "</ol>"):
            last = len(breadcrumb.items) - 1
            for index, item in enumerate(breadcrumb.items):
                if item.href:
                    link = Props().text("href", item.href).text("className", "text-blue-600 hover:underline")
                    content = element("a", item.label, link)
                else:
                    current = Props().text("className", "text-gray-600").text("aria-current", "page")
                    content = element("span", item.label, current)
                out.line(element("li", content + (separator if index < last else "")))


def render_bound_text_input(
    out: JsxWriter,
    input_type: str,
    style: list[str],
    placeholder: str | None,
    bind: str | None,
) -> None:
    binding = binding_of(bind)
    props = Props().text("type", input_type).text("placeholder", placeholder)
    if binding:
        props.expr("value", binding.accessor)
        props.expr("onChange", arrow("e", binding.set("e.target.value")))
    props.class_name(format_style(style))
    out.line(tag("input", props))


@renders(ir.UrlElement)
def render_url(url: ir.UrlElement, out: JsxWriter) -> None:
    if url.placeholder is not None or url.bind:
        render_bound_text_input(out, "url", url.style, url.placeholder, url.bind)
        return
    href = url.href or ""
    props = Props().text("href", href).class_name(format_style(url.style)).text("target", url.target)
    if url.target == "_blank":
        props.text("rel", "noopener noreferrer")
    out.line(element("a", url.content if url.content is not None else href, props))


@renders(ir.EmailElement)
def render_email(email: ir.EmailElement, out: JsxWriter) -> None:
    if email.placeholder is not None or email.bind:
        render_bound_text_input(out, "email", email.style, email.placeholder, email.bind)
        return
    address = email.address or ""
    mailto = f"mailto:{address}"
    if email.subject:
        mailto += f"?subject={email.subject}"
    props = Props().text("href", mailto).class_name(format_style(email.style))
    out.line(element("a", email.content if email.content is not None else address, props))
