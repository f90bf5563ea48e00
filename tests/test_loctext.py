from pin_parser.loctext import parse_localized_text

SPLIT_PIN_NAME = (
    'LOCGEN_FORMAT_NAMED(NSLOCTEXT("KismetSchema", "SplitPinFriendlyNameFormat", '
    '"{PinDisplayName} {ProtoPinDisplayName}"), "PinDisplayName", INVTEXT("Return Value"), '
    '"ProtoPinDisplayName", INVTEXT("X"))'
)


def test_plain_quoted_string():
    assert parse_localized_text('"Target"') == "Target"


def test_nsloctext_returns_last_argument():
    assert parse_localized_text('NSLOCTEXT("K2Node", "Target", "Target")') == "Target"


def test_nsloctext_keeps_commas_inside_text():
    assert parse_localized_text('NSLOCTEXT("UMG", "Key", "Hello, World")') == "Hello, World"


def test_invtext():
    assert parse_localized_text('INVTEXT("Return Value")') == "Return Value"


def test_format_named_substitutes_placeholders():
    assert parse_localized_text(SPLIT_PIN_NAME) == "Return Value X"


def test_format_named_accepts_nsloctext_and_plain_arguments():
    value = ('LOCGEN_FORMAT_NAMED(NSLOCTEXT("KismetSchema", "F", "{A}-{B}"), '
             '"A", NSLOCTEXT("ns", "k", "One"), "B", "Two")')
    assert parse_localized_text(value) == "One-Two"


def test_format_named_leaves_unknown_placeholders():
    value = ('LOCGEN_FORMAT_NAMED(NSLOCTEXT("KismetSchema", "F", "{PinDisplayName} {Missing}"), '
             '"PinDisplayName", INVTEXT("Return Value"))')
    assert parse_localized_text(value) == "Return Value {Missing}"


def test_format_named_outside_schema_namespace_is_not_substituted():
    value = 'LOCGEN_FORMAT_NAMED(NSLOCTEXT("Other", "F", "{A}!"), "A", INVTEXT("x"))'
    assert parse_localized_text(value) == "{A}!"


def test_unrecognized_input_is_returned_unchanged():
    assert parse_localized_text("Target") == "Target"
    assert parse_localized_text("SOMEMACRO(abc)") == "SOMEMACRO(abc)"
    assert parse_localized_text("NSLOCTEXT(a, b, c)") == "NSLOCTEXT(a, b, c)"
    assert parse_localized_text(None) == ""


def test_nested_macros_resolve():
    assert parse_localized_text('INVTEXT(INVTEXT(NSLOCTEXT("ns", "k", "Deep")))') == "Deep"


def test_excessive_nesting_is_returned_unchanged():
    value = "INVTEXT(" * 600 + '"x"' + ")" * 600
    assert parse_localized_text(value) == value
