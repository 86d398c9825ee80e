"""Turn raw tool parameters into validated scan configurations."""

import re
from dataclasses import replace
from typing import Any
from urllib.parse import urlparse

from a11yscan.errors import ValidationError

from .models import (
    DEFAULT_HTML_WAIT_MS,
    DEFAULT_MAX_RESULTS,
    DEFAULT_URL_WAIT_MS,
    DEFAULT_VIEWPORT_HEIGHT,
    DEFAULT_VIEWPORT_WIDTH,
    MAX_BATCH_URLS,
    HtmlTarget,
    RuleSelection,
    ScanConfig,
    ScanTarget,
    Standard,
    UrlTarget,
    Viewport,
)


URL_MESSAGE = "Must be a valid URL starting with http:// or https://"
HOST_PATTERN = re.compile(r"[\w.-]+|[0-9a-f:.]*:[0-9a-f:.]*")


def require_url(value: Any, field: str = "url") -> str:
    """Return ``value`` when it is an absolute http(s) URL with a well-formed host."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, URL_MESSAGE)
    url = value.strip()
    if any(char.isspace() or not char.isprintable() for char in url):
        raise ValidationError(field, URL_MESSAGE)
    try:
        parsed = urlparse(url)
        # port is parsed lazily and raises on junk such as ":80x"
        parsed.port
    except ValueError as exc:
        raise ValidationError(field, URL_MESSAGE) from exc
    if parsed.scheme.lower() not in {"http", "https"} or not parsed.hostname:
        raise ValidationError(field, URL_MESSAGE)
    if not HOST_PATTERN.fullmatch(parsed.hostname):
        raise ValidationError(field, URL_MESSAGE)
    return url


def require_html(value: Any, field: str = "html") -> str:
    """Return non-empty HTML content."""
    if not isinstance(value, str):
        raise ValidationError(field, "HTML content must be a string")
    if not value:
        raise ValidationError(field, "HTML content cannot be empty")
    return value


def optional_positive_int(params: dict[str, Any], field: str, default: int) -> int:
    """Return a positive integer parameter or its default when absent."""
    value = params.get(field)
    if value is None:
        return default
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValidationError(field, "must be a positive integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(field, "must be a positive integer")
        value = int(value)
    if value <= 0:
        raise ValidationError(field, "must be a positive integer")
    return value


def optional_bool(params: dict[str, Any], field: str, default: bool = False) -> bool:
    """Return a boolean parameter or its default when absent."""
    value = params.get(field)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(field, "must be a boolean")
    return value


def parse_viewport(value: Any) -> Viewport:
    """Validate the optional ``viewport`` object."""
    if value is None:
        return Viewport()
    if not isinstance(value, dict):
        raise ValidationError("viewport", "must be an object with width and height")
    width = optional_positive_int(value, "width", DEFAULT_VIEWPORT_WIDTH)
    height = optional_positive_int(value, "height", DEFAULT_VIEWPORT_HEIGHT)
    return Viewport(width=width, height=height)


def parse_rule_selection(value: Any) -> RuleSelection:
    """Validate the optional ``axeOptions`` object.

    ``runOnly`` names at most one standard. ``rules`` maps rule ids to
    ``{"enabled": bool}`` and is kept alongside whatever tags are active.
    """
    if value is None:
        return RuleSelection()
    if not isinstance(value, dict):
        raise ValidationError("axeOptions", "must be an object")

    standard = None
    run_only = value.get("runOnly")
    if run_only is not None:
        if run_only not in Standard.values():
            allowed = ", ".join(Standard.values())
            raise ValidationError("axeOptions.runOnly", f"must be one of: {allowed}")
        standard = Standard(run_only)

    overrides: dict[str, bool] = {}
    rules = value.get("rules")
    if rules is not None:
        if not isinstance(rules, dict):
            raise ValidationError("axeOptions.rules", "must map rule ids to {enabled: bool}")
        for rule_id, setting in rules.items():
            field = f"axeOptions.rules.{rule_id}"
            if not isinstance(setting, dict) or not isinstance(setting.get("enabled"), bool):
                raise ValidationError(field, "must be an object with a boolean 'enabled'")
            overrides[str(rule_id)] = setting["enabled"]

    return RuleSelection(standard=standard, rule_overrides=overrides)


def _build_config(target: ScanTarget, params: dict[str, Any], default_wait_ms: int) -> ScanConfig:
    return ScanConfig(
        target=target,
        viewport=parse_viewport(params.get("viewport")),
        wait_after_load_ms=optional_positive_int(params, "waitForPageLoad", default_wait_ms),
        rules=parse_rule_selection(params.get("axeOptions")),
        include_html_snippets=optional_bool(params, "includeHtml", False),
        max_results=optional_positive_int(params, "maxResults", DEFAULT_MAX_RESULTS),
    )


def build_url_config(params: dict[str, Any]) -> ScanConfig:
    """Validate ``scan-url`` parameters."""
    url = require_url(params.get("url"))
    return _build_config(UrlTarget(url), params, DEFAULT_URL_WAIT_MS)


def build_html_config(params: dict[str, Any]) -> ScanConfig:
    """Validate ``scan-html`` parameters."""
    html = require_html(params.get("html"))
    return _build_config(HtmlTarget(html), params, DEFAULT_HTML_WAIT_MS)


def build_batch_configs(params: dict[str, Any]) -> list[ScanConfig]:
    """Validate ``scan-batch`` parameters into one config per URL, in order.

    More than ``MAX_BATCH_URLS`` targets is rejected rather than truncated.
    """
    urls = params.get("urls")
    if not isinstance(urls, list):
        raise ValidationError("urls", "must be an array of URLs")
    if not urls:
        raise ValidationError("urls", "At least one URL must be provided")
    if len(urls) > MAX_BATCH_URLS:
        raise ValidationError("urls", f"Maximum {MAX_BATCH_URLS} URLs allowed per batch")

    targets = [UrlTarget(require_url(url, field=f"urls[{index}]")) for index, url in enumerate(urls)]
    shared = _build_config(targets[0], params, DEFAULT_URL_WAIT_MS)
    return [replace(shared, target=target) for target in targets]
