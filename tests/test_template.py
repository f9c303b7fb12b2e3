from featherdev.locales import Locale
from featherdev.template import (
    CSS_OUTPUT,
    JS_OUTPUT,
    LOCALE_NAME,
    PACKAGE_JSON,
    TRANSLATE,
    inject_package_fields,
    localize,
    scan_markers,
    substitute,
)

LOCALE = Locale("fr-FR", {"greeting": "Bonjour", "save": "Save"})
PACKAGE = {"name": "feather-wiki", "repository": {"url": "https://codeberg.org/Alamantus/FeatherWiki"}}


def test_scan_markers_kinds_and_payloads():
    text = "{{localeName}} {{translate: a}} {{translate:b}} {{package.json: x.y }} {{cssOutput}} {{jsOutput}}"
    markers = [(m.kind, m.payload) for m in scan_markers(text)]
    assert markers == [
        (LOCALE_NAME, ""),
        (TRANSLATE, "a"),
        (TRANSLATE, "b"),
        (PACKAGE_JSON, "x.y"),
        (CSS_OUTPUT, ""),
        (JS_OUTPUT, ""),
    ]


def test_scan_markers_offsets():
    text = "ab{{translate:x}}cd"
    (marker,) = scan_markers(text)
    assert text[marker.start:marker.end] == "{{translate:x}}"


def test_scan_skips_unknown_and_retries_inside_braces():
    markers = list(scan_markers("{{ unknown }} {{{package.json:name}}"))
    assert [(m.kind, m.payload) for m in markers] == [(PACKAGE_JSON, "name")]


def test_scan_ignores_markers_across_lines():
    assert list(scan_markers("{{translate:\ngreeting}}")) == []


def test_localize_replaces_locale_name_and_keys():
    text = '<html lang="{{localeName}}">{{translate: greeting}} {{translate:save}}'
    assert localize(text, LOCALE) == '<html lang="fr-FR">Bonjour Save'


def test_localize_leaves_unknown_keys():
    text = "{{translate: missing}} {{translate:  greeting}}"
    assert localize(text, LOCALE) == text


def test_localize_inserts_text_literally():
    locale = Locale("en-US", {"price": "$1 costs \\1 and $&"})
    assert localize("{{translate:price}}", locale) == "$1 costs \\1 and $&"


def test_package_fields():
    text = "{{package.json:name}} {{package.json: repository.url}} [{{package.json:a.b.c}}]"
    assert inject_package_fields(text, PACKAGE) == (
        "feather-wiki https://codeberg.org/Alamantus/FeatherWiki []"
    )


def test_every_occurrence_is_replaced():
    text = "{{package.json:name}}/{{package.json:name}}"
    assert inject_package_fields(text, PACKAGE) == "feather-wiki/feather-wiki"


def test_substitute_runs_both_passes():
    text = "{{translate:greeting}}, {{package.json:name}} ({{localeName}})"
    assert substitute(text, LOCALE, PACKAGE) == "Bonjour, feather-wiki (fr-FR)"


def test_text_without_markers_is_unchanged():
    text = "function f(){ return {a: {b: 1}}; }"
    assert substitute(text, LOCALE, PACKAGE) == text


def test_marker_inside_unfinished_marker_is_still_found():
    text = "{{translate: a {{localeName}}"
    assert [(m.kind, m.start) for m in scan_markers(text)] == [(LOCALE_NAME, 15)]
    assert localize(text, LOCALE) == "{{translate: a fr-FR"
