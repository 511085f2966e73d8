"""Display formatting tests."""

import pytest
from django.template import Context, Template

from showroom.projects.formatting import format_amount


class TestFormatAmount:
    """Tests for format_amount()."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1500, "$1,500"),
            (1500.0, "$1,500"),
            (99.5, "$99.50"),
            (0, "$0"),
            (2500000, "$2,500,000"),
            (None, ""),
        ],
    )
    def test_format_amount(self, value, expected):
        assert format_amount(value) == expected

    def test_currency(self):
        assert format_amount(10, currency="€") == "€10"


class TestTemplateFilters:
    """Tests for the showroom_tags template library."""

    def test_money_filter(self):
        template = Template("{% load showroom_tags %}{{ amount|money }}")
        assert template.render(Context({"amount": 1234.5})) == "$1,234.50"

    def test_section_template_filter(self):
        template = Template("{% load showroom_tags %}{{ section|section_template }}")

        class Section:
            kind = "hero"

        assert template.render(Context({"section": Section()})) == "projects/sections/hero.html"
