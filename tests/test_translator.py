from __future__ import annotations

from custom_rule import DEFAULT_LINES, DictTranslator


def test_nested_key_lookup() -> None:
    translator = DictTranslator({"en": {"validation": {"even": "Must be even."}}})

    assert translator.get("validation.even") == "Must be even."


def test_missing_key_is_returned_unchanged() -> None:
    translator = DictTranslator()

    assert translator.get("validation.unknown") == "validation.unknown"
    assert not translator.has("validation.unknown")


def test_group_key_is_not_a_message() -> None:
    translator = DictTranslator({"en": {"validation": {"even": "Must be even."}}})

    assert translator.get("validation") == "validation"


def test_verbatim_key_with_dots() -> None:
    translator = DictTranslator({"de": {"Value must be even.": "Wert muss gerade sein."}}, locale="de")

    assert translator.get("Value must be even.") == "Wert muss gerade sein."


def test_fallback_locale() -> None:
    translator = DictTranslator(
        {"en": {"greeting": "Hello"}, "de": {"farewell": "Tschuss"}},
        locale="de",
        fallback="en",
    )

    assert translator.get("farewell") == "Tschuss"
    assert translator.get("greeting") == "Hello"


def test_explicit_locale_argument() -> None:
    translator = DictTranslator({"en": {"greeting": "Hello"}, "fr": {"greeting": "Bonjour"}})

    assert translator.get("greeting", locale="fr") == "Bonjour"


def test_replacements_in_all_cases() -> None:
    translator = DictTranslator({"en": {"msg": ":Attribute / :attribute / :ATTRIBUTE"}})

    assert translator.get("msg", {"attribute": "name"}) == "Name / name / NAME"


def test_longer_placeholders_replaced_first() -> None:
    translator = DictTranslator({"en": {"msg": ":attribute_name vs :attribute"}})

    result = translator.get("msg", {"attribute": "a", "attribute_name": "full"})

    assert result == "full vs a"


def test_add_lines_with_dotted_keys() -> None:
    translator = DictTranslator(DEFAULT_LINES)

    translator.add_lines({"validation.even": "The :attribute must be even."})

    assert translator.get("validation.even", {"attribute": "count"}) == "The count must be even."
    assert translator.get("validation.required", {"attribute": "count"}) == (
        "The count field is required."
    )


def test_default_lines_are_not_mutated() -> None:
    translator = DictTranslator(DEFAULT_LINES)

    translator.add_lines({"validation.required": "changed"})

    assert DEFAULT_LINES["en"]["validation"]["required"] == "The :attribute field is required."


def test_set_locale() -> None:
    translator = DictTranslator({"en": {"k": "en"}, "nl": {"k": "nl"}})

    translator.set_locale("nl")

    assert translator.locale == "nl"
    assert translator.get("k") == "nl"
