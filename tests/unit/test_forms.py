"""Tests for form submit handlers, validation, and captcha widgets."""

from __future__ import annotations

import pytest

from nwl.codegen.forms import (
    captcha_widget,
    default_message,
    needs_submit_handler,
    rule_checks,
    submit_handler_body,
)
from nwl.core import ir


class TestDefaultMessages:
    @pytest.mark.parametrize(
        "check, limit, expected",
        [
            ("required", None, "username is required"),
            ("pattern", None, "Invalid format for username"),
            ("minLength", 3, "username must be at least 3 characters"),
            ("maxLength", 20, "username must be no more than 20 characters"),
        ],
    )
    def test_messages(self, check: str, limit: int | None, expected: str) -> None:
        assert default_message("username", check, limit) == expected

    def test_unknown_check(self) -> None:
        with pytest.raises(ValueError):
            default_message("username", "email")


class TestRuleChecks:
    def test_check_order(self) -> None:
        rule = ir.ValidationRule(required=True, pattern="^[a-z]+$", min_length=3, max_length=20)
        checks = rule_checks("username", rule)
        assert checks == [
            "if (!username.trim()) { console.error('username is required'); _hasError = true; }",
            "if (!new RegExp('^[a-z]+$').test(username)) "
            "{ console.error('Invalid format for username'); _hasError = true; }",
            "if (username.length < 3) "
            "{ console.error('username must be at least 3 characters'); _hasError = true; }",
            "if (username.length > 20) "
            "{ console.error('username must be no more than 20 characters'); _hasError = true; }",
        ]

    def test_custom_message_shared(self) -> None:
        rule = ir.ValidationRule(required=True, min_length=8, message="Password too weak")
        checks = rule_checks("password", rule)
        assert all("console.error('Password too weak')" in check for check in checks)

    def test_field_name_camel_cased(self) -> None:
        checks = rule_checks("first_name", ir.ValidationRule(required=True))
        assert checks[0].startswith("if (!firstName.trim())")
        assert "first_name is required" in checks[0]

    def test_quote_in_pattern_escaped(self) -> None:
        checks = rule_checks("name", ir.ValidationRule(pattern="^[^']+$"))
        assert "new RegExp('^[^\\']+$')" in checks[0]


class TestSubmitHandler:
    def test_validation_then_submit(self) -> None:
        form = ir.FormElement.model_validate(
            {"validation": {"username": [{"required": True}]}, "onSubmit": "save()"}
        )
        assert submit_handler_body(form) == [
            "e.preventDefault();",
            "let _hasError = false;",
            "if (!username.trim()) { console.error('username is required'); _hasError = true; }",
            "if (_hasError) { console.error('Validation failed'); return; }",
            "save();",
        ]

    def test_validation_error_hook(self) -> None:
        form = ir.FormElement.model_validate(
            {"validation": {"a": [{"required": True}]}, "onValidationError": "showErrors()"}
        )
        assert "if (_hasError) { console.error('Validation failed'); showErrors(); return; }" in (
            submit_handler_body(form)
        )

    def test_captcha_check_last(self) -> None:
        form = ir.FormElement.model_validate(
            {
                "validation": {"a": [{"required": True}]},
                "captcha": {"provider": "cloudflare", "siteKey": "k"},
            }
        )
        body = submit_handler_body(form)
        assert body[3] == (
            "if (!window.captchaToken) "
            "{ console.error('Please complete the captcha'); _hasError = true; }"
        )

    def test_submit_only(self) -> None:
        form = ir.FormElement(on_submit="save();")
        assert submit_handler_body(form) == ["e.preventDefault();", "save();"]

    def test_no_handler_needed(self) -> None:
        assert not needs_submit_handler(ir.FormElement())


class TestCaptchaWidget:
    def test_turnstile(self) -> None:
        captcha = ir.CaptchaConfig(provider="cloudflare", site_key="abc")
        assert captcha_widget(captcha) == '<div className="cf-turnstile" data-sitekey="abc" data-theme="auto"></div>'

    def test_recaptcha_v2(self) -> None:
        captcha = ir.CaptchaConfig(provider="recaptcha", site_key="abc")
        assert captcha_widget(captcha) == '<div className="g-recaptcha" data-sitekey="abc"></div>'

    def test_recaptcha_v3(self) -> None:
        captcha = ir.CaptchaConfig(provider="recaptcha", site_key="abc", version="v3", action="login")
        assert captcha_widget(captcha) == (
            '<div id="recaptcha-container" data-sitekey="abc" data-action="login"></div>'
        )

    def test_hcaptcha_theme(self) -> None:
        captcha = ir.CaptchaConfig(provider="hcaptcha", site_key="abc")
        assert 'className="h-captcha"' in captcha_widget(captcha)
        assert 'data-theme="light"' in captcha_widget(captcha)

    def test_unknown_provider_rejected(self) -> None:
        with pytest.raises(ValueError):
            ir.CaptchaConfig(provider="turing")


class TestFormRendering:
    def test_handler_on_form(self, render) -> None:
        jsx = render(
            {
                "element": "form",
                "onSubmit": "save()",
                "validation": {"username": [{"required": True}]},
                "children": [{"element": "input", "bind": "username"}],
            }
        )
        assert jsx.splitlines() == [
            '<Form className="Form" onSubmit={(e) => {',
            "  e.preventDefault();",
            "  let _hasError = false;",
            "  if (!username.trim()) { console.error('username is required'); _hasError = true; }",
            "  if (_hasError) { console.error('Validation failed'); return; }",
            "  save();",
            "}}>",
            "  <input value={username} onChange={(e) => setUsername(e.target.value)} />",
            "</Form>",
        ]

    def test_plain_form(self, render) -> None:
        assert render({"element": "form"}) == '<Form className="Form">\n</Form>'

    def test_captcha_widget_after_children(self, render) -> None:
        jsx = render(
            {
                "element": "form",
                "captcha": {"provider": "hcaptcha", "siteKey": "k"},
                "children": [{"element": "button", "content": "Send"}],
            }
        )
        lines = jsx.splitlines()
        assert lines[-2].strip().startswith('<div className="h-captcha"')
        assert lines[-3].strip() == '<Button className="Button">Send</Button>'

    def test_field(self, render) -> None:
        jsx = render({"element": "field", "name": "email", "label": "Email", "placeholder": "you@x"})
        assert jsx.splitlines() == [
            '<Field.Root name="email" className="Field-root">',
            '  <Field.Label className="Field-label">Email</Field.Label>',
            '  <Field.Control placeholder="you@x" className="Field-control" />',
            '  <Field.Error className="Field-error" />',
            "</Field.Root>",
        ]
