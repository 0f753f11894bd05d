"""Unit tests for ${namespace.identifier} interpolation."""

from __future__ import annotations

from flowscribe.compiler.interpolation import has_variables, translate


class TestTranslate:
    # ------------------------------------------------------------------ literals

    def test_plain_string_becomes_quoted_literal(self):
        assert translate("laptop stand") == "'laptop stand'"

    def test_plain_string_quotes_escaped(self):
        assert translate("O'Reilly") == "'O\\'Reilly'"

    def test_unknown_namespace_is_literal(self):
        assert translate("${secrets.token}") == "'${secrets.token}'"

    def test_bad_identifier_is_literal(self):
        assert translate("${input.1abc}") == "'${input.1abc}'"

    # ------------------------------------------------------------------ single variable

    def test_full_variable_is_bare_expression(self):
        assert translate("${input.amount}") == "input.amount"

    def test_each_namespace_recognised(self):
        assert translate("${extract.price}") == "extract.price"
        assert translate("${constants.BASE_URL}") == "constants.BASE_URL"

    def test_variable_with_trailing_newline_is_not_full_match(self):
        assert translate("${input.x}\n") == "`${input.x}\n`"

    # ------------------------------------------------------------------ mixed content

    def test_mixed_content_uses_template_literal(self):
        assert translate("Hello ${input.name}!") == "`Hello ${input.name}!`"

    def test_multiple_variables(self):
        result = translate("${input.first} ${input.last}")
        assert result == "`${input.first} ${input.last}`"

    def test_backtick_escaped_in_template(self):
        assert translate("`${input.cmd}` run") == "`\\`${input.cmd}\\` run`"

    def test_stray_placeholder_escaped_in_template(self):
        assert translate("${foo} and ${input.x}") == "`\\${foo} and ${input.x}`"

    def test_single_quote_kept_in_template(self):
        assert translate("It's ${input.name}") == "`It's ${input.name}`"


class TestHasVariables:
    def test_detects_token(self):
        assert has_variables("a ${input.b} c")

    def test_plain_text(self):
        assert not has_variables("no variables here")
