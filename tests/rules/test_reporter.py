from lint_rule_sync.rules.reporter import format_report


def test_in_sync_is_single_line() -> None:
    assert format_report("ESLint", [], []) == "ESLint rules are in sync!"


def test_in_sync_without_deprecated_category() -> None:
    assert format_report("TSLint", []) == "TSLint rules are in sync!"


def test_missing_and_deprecated_sections() -> None:
    text = format_report(
        "ESLint",
        ["noExtraSemi", "curly"],
        ["validJsdoc"],
        docs_url="http://eslint.org/docs/rules",
    )
    assert text.splitlines() == [
        "Missing ESLint rules (http://eslint.org/docs/rules):",
        "- no-extra-semi",
        "- curly",
        "Deprecated ESLint rules:",
        "- valid-jsdoc",
    ]


def test_only_deprecated_section() -> None:
    text = format_report("ESLint", [], ["noCommaDangle"])
    assert text == "Deprecated ESLint rules:\n- no-comma-dangle"


def test_missing_header_without_docs_url() -> None:
    assert format_report("TSLint", ["noConsole"]) == "Missing TSLint rules:\n- no-console"
