"""
Renderers for interactive controls.

Bindable controls follow one pattern: with `bind`, the value attribute reads
the accessor and the change handler calls the mutator with the new value.
A user `onChange` runs after the mutator inside the same handler.
"""

from __future__ import annotations

import math

from ...core import ir
from ...core.naming import Binding
from ..emitter import JsxWriter
from ..props import Props, arrow, binding_of, element, format_style, js_string, open_tag, tag
from .registry import renders


def change_handler(
    param: str,
    binding: Binding | None,
    new_value: str,
    on_change: str | None,
) -> str | None:
    """Handler that stores `new_value` in the bound state, then runs `on_change`."""
    return arrow(param, binding.set(new_value) if binding else None, on_change)


def _native_input(
    out: JsxWriter,
    input_type: str | None,
    style: list[str],
    bind: str | None,
    on_change: str | None,
    *,
    new_value: str = "e.target.value",
    extra: Props | None = None,
) -> None:
    binding = binding_of(bind)
    props = Props().text("type", input_type).class_name(format_style(style))
    if extra is not None:
        props.extend(extra)
    if binding:
        props.expr("value", binding.accessor)
    props.expr("onChange", change_handler("e", binding, new_value, on_change))
    out.line(tag("input", props))


@renders(ir.InputElement)
def render_input(input_element: ir.InputElement, out: JsxWriter) -> None:
    binding = binding_of(input_element.bind)
    props = Props().class_name(format_style(input_element.style))
    props.text("placeholder", input_element.placeholder)
    if binding:
        props.expr("value", binding.accessor)
    else:
        props.text("value", input_element.value)
    props.expr("onChange", change_handler("e", binding, "e.target.value", input_element.on_change))
    out.line(tag("input", props))


@renders(ir.TextareaElement)
def render_textarea(textarea: ir.TextareaElement, out: JsxWriter) -> None:
    binding = binding_of(textarea.bind)
    props = Props().class_name(format_style(textarea.style))
    props.text("placeholder", textarea.placeholder).expr("rows", textarea.rows)
    if binding:
        props.expr("value", binding.accessor)
    props.expr("onChange", change_handler("e", binding, "e.target.value", textarea.on_change))
    out.line(tag("textarea", props))


@renders(ir.CheckboxElement)
def render_checkbox(checkbox: ir.CheckboxElement, out: JsxWriter) -> None:
    binding = binding_of(checkbox.bind)
    wrapper = Props().class_name("flex items-center gap-2 cursor-pointer", format_style(checkbox.style))
    root = Props().text("className", "Checkbox-root")
    if binding:
        root.expr("checked", binding.accessor)
    root.expr("onCheckedChange", change_handler("checked", binding, "checked", checkbox.on_change))
    with out.block(open_tag("label", wrapper), "</label>"):
        with out.block(open_tag("Checkbox.Root", root), "</Checkbox.Root>"):
            out.line(tag("Checkbox.Indicator", Props().text("className", "Checkbox-indicator")))
        if checkbox.label:
            out.line(element("span", checkbox.label))


@renders(ir.SliderElement)
def render_slider(slider: ir.SliderElement, out: JsxWriter) -> None:
    bounds = Props().text("min", slider.min).text("max", slider.max).text("step", slider.step)
    if not slider.label:
        _native_input(
            out, "range", slider.style, slider.bind, slider.on_change,
            new_value="Number(e.target.value)", extra=bounds,
        )
        return
    with out.block('<label className="flex flex-col gap-1">', "</label>"):
        out.line(element("span", slider.label))
        _native_input(
            out, "range", slider.style, slider.bind, slider.on_change,
            new_value="Number(e.target.value)", extra=bounds,
        )


@renders(ir.SelectElement)
def render_select(select: ir.SelectElement, out: JsxWriter) -> None:
    binding = binding_of(select.bind)
    root = Props()
    if binding:
        root.expr("value", binding.accessor)
    root.expr("onValueChange", change_handler("value", binding, "value", select.on_change))
    trigger = Props().class_name("Select-trigger", format_style(select.style))
    with out.block(open_tag("Select.Root", root), "</Select.Root>"):
        with out.block(open_tag("Select.Trigger", trigger), "</Select.Trigger>"):
            out.line(tag("Select.Value", Props().text("placeholder", select.placeholder)))
            out.line(tag("Select.Icon"))
        with out.block("<Select.Portal>", "</Select.Portal>"):
            with out.block("<Select.Positioner sideOffset={8}>", "</Select.Positioner>"):
                with out.block('<Select.Popup className="Select-popup">', "</Select.Popup>"):
                    for option in select.options:
                        item = Props().text("className", "Select-item").text("value", option.value)
                        with out.block(open_tag("Select.Item", item), "</Select.Item>"):
                            out.line(element("Select.ItemText", option.display))


@renders(ir.RadioGroupElement)
def render_radio_group(radio: ir.RadioGroupElement, out: JsxWriter) -> None:
    binding = binding_of(radio.bind)
    group = Props().class_name("RadioGroup", format_style(radio.style))
    if binding:
        group.expr("value", binding.accessor)
    elif radio.options:
        group.text("defaultValue", radio.options[0].value)
    group.expr("onValueChange", change_handler("value", binding, "value", radio.on_change))
    with out.block(open_tag("RadioGroup", group), "</RadioGroup>"):
        if radio.label:
            out.line(element("p", radio.label))
        for option in radio.options:
            with out.block('<label className="flex items-center gap-2 cursor-pointer py-1">', "</label>"):
                root = Props().text("className", "Radio-root").text("value", option.value)
                with out.block(open_tag("Radio.Root", root), "</Radio.Root>"):
                    out.line(tag("Radio.Indicator", Props().text("className", "Radio-indicator")))
                out.line(element("span", option.display))


@renders(ir.DateInputElement)
def render_date_input(date: ir.DateInputElement, out: JsxWriter) -> None:
    extra = Props().text("min", date.min).text("max", date.max).text("placeholder", date.placeholder)
    _native_input(out, "date", date.style, date.bind, date.on_change, extra=extra)


@renders(ir.TimeInputElement)
def render_time_input(time: ir.TimeInputElement, out: JsxWriter) -> None:
    extra = Props().text("min", time.min).text("max", time.max).text("step", time.step)
    extra.text("placeholder", time.placeholder)
    _native_input(out, "time", time.style, time.bind, time.on_change, extra=extra)


@renders(ir.DateTimeInputElement)
def render_datetime_input(datetime: ir.DateTimeInputElement, out: JsxWriter) -> None:
    extra = Props().text("min", datetime.min).text("max", datetime.max)
    extra.text("placeholder", datetime.placeholder)
    _native_input(out, "datetime-local", datetime.style, datetime.bind, datetime.on_change, extra=extra)


PALETTE = ("#ef4444", "#f59e0b", "#10b981", "#3b82f6", "#8b5cf6", "#000000")


@renders(ir.ColorPickerElement)
def render_color_picker(color: ir.ColorPickerElement, out: JsxWriter) -> None:
    if not color.show_palette:
        _native_input(out, "color", color.style, color.bind, color.on_change)
        return
    binding = binding_of(color.bind)
    with out.block('<div className="flex items-center gap-2">', "</div>"):
        _native_input(out, "color", color.style, color.bind, color.on_change)
        for swatch in PALETTE:
            props = Props().text("type", "button").text("className", "w-6 h-6 rounded-full border")
            props.expr("style", f"{{ backgroundColor: {js_string(swatch)} }}")
            props.text("aria-label", swatch)
            props.expr("onClick", arrow("", binding.set(js_string(swatch)) if binding else None))
            out.line(element("button", "", props))


@renders(ir.FileUploadElement)
def render_file_upload(upload: ir.FileUploadElement, out: JsxWriter) -> None:
    # File inputs are uncontrolled: the handler is attached without a value.
    binding = binding_of(upload.bind)
    props = Props().text("type", "file").class_name(format_style(upload.style))
    props.text("accept", upload.accept).text("data-max-size", upload.max_size)
    props.flag("multiple", upload.multiple)
    props.expr("onChange", change_handler("e", binding, "e.target.files", upload.on_change))
    out.line(tag("input", props))


@renders(ir.ProgressElement)
def render_progress(progress: ir.ProgressElement, out: JsxWriter) -> None:
    binding = binding_of(progress.bind)
    if binding:
        value = binding.accessor
    elif progress.value is not None:
        value = progress.value
    else:
        value = "0"
    percent = f"({value} / {progress.max}) * 100" if progress.max else value
    props = Props().text("role", "progressbar").class_name(format_style(progress.style))
    props.text("aria-valuemin", 0 if progress.max else None).text("aria-valuemax", progress.max)
    props.expr("aria-valuenow", value)
    props.expr("style", f"{{ width: `${{{percent}}}%` }}")
    if not progress.show_label:
        out.line(tag("div", props))
        return
    with out.block('<div className="flex items-center">', "</div>"):
        out.line(tag("div", props))
        out.line(element("span", f"{{{percent}}}%", Props().text("className", "text-sm ml-2")))


@renders(ir.ToggleElement)
def render_toggle(toggle: ir.ToggleElement, out: JsxWriter) -> None:
    binding = binding_of(toggle.bind)
    root = Props().class_name("Switch-root", format_style(toggle.style))
    if binding:
        root.expr("checked", binding.accessor)
        if toggle.on_color or toggle.off_color:
            on = js_string(toggle.on_color or "")
            off = js_string(toggle.off_color or "")
            root.expr("style", f"{{ backgroundColor: {binding.accessor} ? {on} : {off} }}")
    root.expr("onCheckedChange", change_handler("checked", binding, "checked", toggle.on_change))
    with out.block('<label className="inline-flex items-center cursor-pointer gap-3">', "</label>"):
        if toggle.label:
            out.line(element("span", toggle.label, Props().text("className", "font-medium")))
        with out.block(open_tag("Switch.Root", root), "</Switch.Root>"):
            out.line(tag("Switch.Thumb", Props().text("className", "Switch-thumb")))


@renders(ir.CounterElement)
def render_counter(counter: ir.CounterElement, out: JsxWriter) -> None:
    binding = binding_of(counter.bind)
    root = Props().class_name("NumberField-root", format_style(counter.style))
    if binding:
        root.expr("value", binding.accessor)
    root.expr("min", counter.min).expr("max", counter.max).expr("step", counter.step)
    root.expr("onValueChange", change_handler("value", binding, "value", counter.on_change))
    with out.block(open_tag("NumberField.Root", root), "</NumberField.Root>"):
        decrement = open_tag("NumberField.Decrement", Props().text("className", "NumberField-decrement"))
        with out.block(decrement, "</NumberField.Decrement>"):
            out.line(element("span", "-"))
        out.line(tag("NumberField.Input", Props().text("className", "NumberField-input")))
        increment = open_tag("NumberField.Increment", Props().text("className", "NumberField-increment"))
        with out.block(increment, "</NumberField.Increment>"):
            out.line(element("span", "+"))


@renders(ir.SearchInputElement)
def render_search_input(search: ir.SearchInputElement, out: JsxWriter) -> None:
    binding = binding_of(search.bind)
    props = Props().text("type", "search").class_name(format_style(search.style))
    props.text("placeholder", search.placeholder)
    if binding:
        props.expr("value", binding.accessor)
    props.expr("onChange", change_handler("e", binding, "e.target.value", search.on_change))
    if search.on_search:
        on_search = search.on_search.rstrip(";")
        props.expr("onKeyDown", f"(e) => {{ if (e.key === 'Enter') {{ {on_search}; }} }}")
    with out.block('<div className="relative flex items-center">', "</div>"):
        out.line(tag("input", props))
        if search.clearable:
            clear = Props().text("type", "button").text("className", "ml-2").text("aria-label", "Clear")
            clear.expr("onClick", arrow("", binding.set(js_string("")) if binding else None))
            out.line(element("button", "×", clear))


CHIP_INPUT_DEFAULT_PLACEHOLDER = "Add tags..."


@renders(ir.ChipInputElement)
def render_chip_input(chip: ir.ChipInputElement, out: JsxWriter) -> None:
    binding = binding_of(chip.bind)
    with out.block(open_tag("div", Props().class_name(format_style(chip.style))), "</div>"):
        if binding:
            chips, mutator = binding.accessor, binding.mutator
            remove = arrow("", binding.set(f"{chips}.filter((_, j) => j !== i)"), chip.on_remove)
            with out.block('<div className="flex flex-wrap gap-2 mb-2">', "</div>"):
                with out.block(f"{{{chips}.map((chip, i) => (", "))}"):
                    span = (
                        '<span key={i} className="px-2 py-1 bg-blue-100 text-blue-800 '
                        'rounded-full text-sm flex items-center">'
                    )
                    with out.block(span, "</span>"):
                        out.line("{chip}")
                        close = Props().text("type", "button")
                        close.text("className", "ml-1 text-blue-600 hover:text-blue-800")
                        close.expr("onClick", remove)
                        out.line(element("button", "×", close))
        if chip.suggestions:
            with out.block('<div className="mb-2 flex flex-wrap">', "</div>"):
                for suggestion in chip.suggestions:
                    literal = js_string(suggestion)
                    props = Props().text("key", suggestion).text(
                        "className",
                        "inline-block px-2 py-1 bg-gray-100 text-gray-700 text-xs rounded-full "
                        "mr-2 mb-1 cursor-pointer hover:bg-gray-200",
                    )
                    if binding:
                        props.expr(
                            "onClick",
                            f"() => {{ if (!{chips}.includes({literal})) {{ "
                            f"{mutator}([...{chips}, {literal}]); }} }}",
                        )
                    out.line(element("span", suggestion, props))
        field = Props().text("type", "text")
        field.text("placeholder", chip.placeholder or CHIP_INPUT_DEFAULT_PLACEHOLDER)
        if binding:
            add = f" {chip.on_add.rstrip(';')};" if chip.on_add else ""
            field.expr(
                "onKeyDown",
                "(e) => { if (e.key === 'Enter') { const newValue = e.target.value.trim(); "
                f"if (newValue && !{chips}.includes(newValue)) {{ "
                f"{mutator}([...{chips}, newValue]);{add} }} e.target.value = ''; }} }}",
            )
        field.text(
            "className",
            "w-full px-3 py-2 border rounded-lg focus:outline-none focus:ring-2 focus:ring-blue-500",
        )
        out.line(tag("input", field))


PAGINATION_DEFAULT_TOTAL = 100
PAGINATION_DEFAULT_PER_PAGE = 10


@renders(ir.PaginationElement)
def render_pagination(pagination: ir.PaginationElement, out: JsxWriter) -> None:
    total = pagination.total if pagination.total is not None else PAGINATION_DEFAULT_TOTAL
    per_page = pagination.per_page or PAGINATION_DEFAULT_PER_PAGE
    pages = math.ceil(total / per_page)
    binding = binding_of(pagination.bind)

    previous = Props().text("type", "button")
    following = Props().text("type", "button")
    if binding:
        page = binding.accessor
        previous.expr("onClick", _step_handler(binding, f"{page} > 1", f"{page} - 1", pagination.on_change))
        following.expr(
            "onClick", _step_handler(binding, f"{page} < {pages}", f"{page} + 1", pagination.on_change)
        )
        current = f"Page {{{page}}} of {pages}"
    else:
        current = f"Page 1 of {pages}"
    button_class = "px-3 py-1 border rounded hover:bg-gray-100"
    previous.text("className", button_class)
    following.text("className", button_class)

    wrapper = Props().class_name("flex items-center justify-center space-x-2", format_style(pagination.style))
    with out.block(open_tag("div", wrapper), "</div>"):
        out.line(element("button", "Previous", previous))
        out.line(
            element(
                "span",
                current,
                Props().text("className", "px-4 py-2 border bg-blue-50 text-blue-600 font-medium"),
            )
        )
        out.line(element("button", "Next", following))


def _step_handler(binding: Binding, guard: str, new_page: str, on_change: str | None) -> str:
    if not on_change:
        return f"() => {guard} && {binding.set(new_page)}"
    return f"() => {{ if ({guard}) {{ {binding.set(new_page)}; {on_change.rstrip(';')}; }} }}"


@renders(ir.RatingElement)
def render_rating(rating: ir.RatingElement, out: JsxWriter) -> None:
    binding = binding_of(rating.bind)
    wrapper = Props().class_name("inline-flex items-center gap-1", format_style(rating.style))
    wrapper.text("role", "radiogroup")
    with out.block(open_tag("div", wrapper), "</div>"):
        for star in range(1, rating.max + 1):
            props = Props().text("type", "button").text("className", "text-yellow-500")
            props.text("aria-label", f"{star} star" if star == 1 else f"{star} stars")
            if rating.readonly:
                props.flag("disabled")
            else:
                props.expr("onClick", change_handler("", binding, str(star), rating.on_change))
            glyph = f"{{{binding.accessor} >= {star} ? '★' : '☆'}}" if binding else "☆"
            out.line(element("button", glyph, props))
