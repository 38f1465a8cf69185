"""Unit tests for the console helpers (projgen.utils)."""

from __future__ import annotations

import pytest

from projgen.utils import (
    print_banner,
    print_error,
    print_info,
    print_output,
    print_success,
    print_warning,
)

pytestmark = pytest.mark.unit


class TestPrintHelpers:
    @pytest.mark.parametrize(
        "helper", [print_success, print_error, print_warning, print_info]
    )
    def test_markup_in_message_is_literal(self, helper, console, console_text):
        helper("Project app[/v2] and [bold]x[/bold]", console)
        assert "Project app[/v2] and [bold]x[/bold]" in console_text(console)

    def test_banner_title_is_literal(self, console, console_text):
        print_banner("Hello [red]there", console)
        assert "Hello [red]there" in console_text(console)

    def test_output_is_literal(self, console, console_text):
        print_output("[/oops] npm notice", console)
        assert "[/oops] npm notice" in console_text(console)

    def test_output_skips_empty_text(self, console, console_text):
        print_output("", console)
        assert console_text(console) == ""
