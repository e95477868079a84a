"""
Form submit-handler lowering and captcha widgets.

The submit handler always cancels the browser submission, then runs each
declared validation check in declaration order. Checks never short-circuit:
every failing rule logs its message before the handler bails out.
"""

from __future__ import annotations

from ..core import ir
from ..core.naming import to_camel_case
from .props import Props, js_single_quoted

CAPTCHA_TOKEN = "window.captchaToken"
CAPTCHA_MESSAGE = "Please complete the captcha"
VALIDATION_FAILED_MESSAGE = "Validation failed"


def default_message(field: str, check: str, limit: int | None = None) -> str:
    """Message logged for a failing check that has no custom `message`."""
    if check == "required":
        return f"{field} is required"
    if check == "pattern":
        return f"Invalid format for {field}"
    if check == "minLength":
        return f"{field} must be at least {limit} characters"
    if check == "maxLength":
        return f"{field} must be no more than {limit} characters"
    raise ValueError(f"Unknown validation check: {check}")


def _failure(condition: str, message: str) -> str:
    return f"if ({condition}) {{ console.error({js_single_quoted(message)}); _hasError = true; }}"


def rule_checks(field: str, rule: ir.ValidationRule) -> list[str]:
    """Runtime checks for one rule: required, pattern, minLength, maxLength."""
    value = to_camel_case(field)
    checks = []
    if rule.required:
        checks.append(_failure(f"!{value}.trim()", rule.message or default_message(field, "required")))
    if rule.pattern is not None:
        checks.append(
            _failure(
                f"!new RegExp({js_single_quoted(rule.pattern)}).test({value})",
                rule.message or default_message(field, "pattern"),
            )
        )
    if rule.min_length is not None:
        checks.append(
            _failure(
                f"{value}.length < {rule.min_length}",
                rule.message or default_message(field, "minLength", rule.min_length),
            )
        )
    if rule.max_length is not None:
        checks.append(
            _failure(
                f"{value}.length > {rule.max_length}",
                rule.message or default_message(field, "maxLength", rule.max_length),
            )
        )
    return checks


def validation_checks(form: ir.FormElement) -> list[str]:
    checks: list[str] = []
    for field, rules in (form.validation or {}).items():
        for rule in rules:
            checks.extend(rule_checks(field, rule))
    if form.captcha is not None:
        checks.append(_failure(f"!{CAPTCHA_TOKEN}", CAPTCHA_MESSAGE))
    return checks


def needs_submit_handler(form: ir.FormElement) -> bool:
    return bool(form.on_submit or form.validation or form.captcha)


def submit_handler_body(form: ir.FormElement) -> list[str]:
    """
    Statements of the `(e) => { ... }` submit handler, one per line.

    Example for `validation: {username: [{required: true}]}` and
    `onSubmit: save()`:

        e.preventDefault();
        let _hasError = false;
        if (!username.trim()) { console.error('username is required'); _hasError = true; }
        if (_hasError) { console.error('Validation failed'); return; }
        save();
    """
    body = ["e.preventDefault();"]
    checks = validation_checks(form)
    if checks:
        body.append("let _hasError = false;")
        body.extend(checks)
        bail = [f"console.error({js_single_quoted(VALIDATION_FAILED_MESSAGE)});"]
        if form.on_validation_error:
            bail.append(f"{form.on_validation_error.rstrip(';')};")
        bail.append("return;")
        body.append(f"if (_hasError) {{ {' '.join(bail)} }}")
    if form.on_submit:
        body.append(f"{form.on_submit.rstrip(';')};")
    return body


def captcha_widget(captcha: ir.CaptchaConfig) -> str:
    """Placeholder element the provider's script renders its widget into."""
    site_key = captcha.site_key or ""
    props = Props()
    if captcha.provider is ir.CaptchaProvider.CLOUDFLARE:
        props.text("className", "cf-turnstile").text("data-sitekey", site_key)
        props.text("data-theme", captcha.theme or "auto")
    elif captcha.provider is ir.CaptchaProvider.RECAPTCHA:
        if (captcha.version or "v2") == "v3":
            props.text("id", "recaptcha-container").text("data-sitekey", site_key)
            props.text("data-action", captcha.action or "submit")
        else:
            props.text("className", "g-recaptcha").text("data-sitekey", site_key)
    else:
        props.text("className", "h-captcha").text("data-sitekey", site_key)
        props.text("data-theme", captcha.theme or "light")
    return f"<div{props.render()}></div>"
