import pytest

from sqlident.quoting import normalize


@pytest.mark.parametrize("value", ["", "   ", "\t\n"])
def test_blank_input_yields_empty_output(value):
    assert normalize(value, '"', '"') == ""


def test_wildcard_is_never_quoted():
    assert normalize("*", "`", "`") == "*"
    assert normalize("  *  ", "[", "]") == "*"


def test_plain_identifier_is_wrapped():
    assert normalize("users", '"', '"') == '"users"'


def test_surrounding_whitespace_is_trimmed():
    assert normalize("  users ", "`", "`") == "`users`"


def test_dotted_identifier_quotes_each_segment():
    assert normalize("public.users", '"', '"') == '"public"."users"'
    assert normalize("db.schema.table", "[", "]") == "[db].[schema].[table]"


def test_already_quoted_segments_are_kept():
    assert normalize('"public"."users"', '"', '"') == '"public"."users"'
    assert normalize("[dbo].[orders]", "[", "]") == "[dbo].[orders]"


def test_backtick_segments_are_rewritten_to_canonical_quotes():
    assert normalize("`col`", '"', '"') == '"col"'
    assert normalize("`t`.`col`", "[", "]") == "[t].[col]"


def test_mixed_quoted_and_bare_segments():
    assert normalize('`schema`.table."col"', '"', '"') == '"schema"."table"."col"'


def test_quoted_segment_may_contain_dots():
    assert normalize("`a.b`.c", '"', '"') == '"a.b"."c"'


def test_unterminated_quote_runs_to_end_of_input():
    assert normalize("`users", '"', '"') == '"users"'
    assert normalize('"users', '"', '"') == '"users"'


def test_segment_after_closing_quote_without_dot_is_wrapped_separately():
    assert normalize("`a`b", '"', '"') == '"a""b"'


def test_embedded_quote_in_bare_token_is_copied_verbatim():
    assert normalize('fo"o', '"', '"') == '"fo"o"'
    assert normalize("fo`o", "[", "]") == "[fo`o]"


def test_foreign_quotes_other_than_backtick_are_treated_as_bare_text():
    assert normalize('"col"', "[", "]") == '["col"]'


def test_normalize_is_idempotent():
    once = normalize("`schema`.table", "[", "]")
    assert normalize(once, "[", "]") == once
