from __future__ import annotations

import re
from typing import Any, Callable, Iterable, Optional

COLOR_KEYS = (
    "color",
    "colour",
    "color_name",
    "colour_name",
    "product_color",
    "item_color",
    "color_en",
    "color_ar",
    "لون",
    "اللون",
)

SIZE_KEYS = (
    "size",
    "size_name",
    "product_size",
    "variant_size",
    "size_en",
    "size_ar",
    "مقاس",
    "المقاس",
    "قياس",
)

_VARIANT_SPLIT_RE = re.compile(r"[/\-|،]")
_ENTRY_KEY_FIELDS = ("name", "label", "title", "key", "option", "option_name", "optionName", "id")


def _normalize_value(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, dict):
        return (
            _normalize_value(value.get("value"))
            or _normalize_value(value.get("name"))
            or _normalize_value(value.get("label"))
        )
    return None


def _key_matcher(attribute_names: Iterable[str]) -> Callable[[Optional[str]], bool]:
    targets = [n.lower() for n in attribute_names if n]

    def _matches(key: Optional[str]) -> bool:
        if not key:
            return False
        k = key.lower()
        return any(k == t or t in k for t in targets)

    return _matches


def _search_object(source: Any, matches: Callable[[Optional[str]], bool]) -> Optional[str]:
    if not isinstance(source, dict):
        return None
    for key, raw in source.items():
        if matches(str(key)):
            value = _normalize_value(raw)
            if value:
                return value
    return None


def _entry_key(entry: dict) -> str:
    for name in _ENTRY_KEY_FIELDS:
        if entry.get(name) is not None:
            return str(entry[name])
    return ""


def _search_array(entries: Any, matches: Callable[[Optional[str]], bool]) -> Optional[str]:
    if not isinstance(entries, list):
        return None
    for entry in entries:
        if not isinstance(entry, dict) or not entry:
            continue
        if matches(_entry_key(entry)):
            value = (
                _normalize_value(entry.get("value"))
                or _normalize_value(entry.get("name"))
                or _normalize_value(entry.get("label"))
            )
            if value:
                return value
    return None


def _sub(record: Any, key: str) -> Any:
    return record.get(key) if isinstance(record, dict) else None


def _from_variant_name(item: dict, includes_color: bool, includes_size: bool) -> Optional[str]:
    variant = _sub(item, "variant")
    variant_name = (
        _sub(variant, "name")
        or _sub(variant, "value")
        or _sub(variant, "label")
        or item.get("variantName")
        or item.get("variant_name")
    )
    if not variant_name or not isinstance(variant_name, str):
        return None

    parts = [p.strip() for p in _VARIANT_SPLIT_RE.split(variant_name) if p.strip()]
    # "Red / XL": colour first, size last.
    if len(parts) > 1:
        if includes_color:
            return parts[0]
        if includes_size:
            return parts[-1]
    elif len(parts) == 1 and (includes_color or includes_size):
        return parts[0]
    return None


def extract_item_attribute(item: Any, attribute_names: Iterable[str]) -> Optional[str]:
    if not item or not isinstance(item, dict):
        return None

    names = [n for n in attribute_names if n]
    keys = [n.lower() for n in names]
    includes_size = any("size" in k or "مقاس" in k or "قياس" in k for k in keys)
    includes_color = any("color" in k or "لون" in k for k in keys)
    matches = _key_matcher(names)

    product = _sub(item, "product")
    details = _sub(item, "details")
    variant = _sub(item, "variant")
    metadata = _sub(item, "metadata")

    for source in (item, product, details, variant, metadata, item.get("attributes")):
        found = _search_object(source, matches)
        if found:
            return found

    array_sources = (
        item.get("options"),
        item.get("attributes"),
        _sub(variant, "options"),
        _sub(variant, "attributes"),
        _sub(variant, "values"),
        _sub(product, "options"),
        _sub(details, "options"),
        _sub(metadata, "options"),
    )
    for entries in array_sources:
        found = _search_array(entries, matches)
        if found:
            return found

    return _from_variant_name(item, includes_color, includes_size)


def get_item_color(item: Any, extra_keys: Iterable[str] = ()) -> Optional[str]:
    return extract_item_attribute(item, [*COLOR_KEYS, *(k.lower() for k in extra_keys)])


def get_item_size(item: Any, extra_keys: Iterable[str] = ()) -> Optional[str]:
    return extract_item_attribute(item, [*SIZE_KEYS, *(k.lower() for k in extra_keys)])


def get_item_attributes(item: Any) -> dict:
    return {"color": get_item_color(item), "size": get_item_size(item)}
