"""Tests for message template utilities."""

import pytest
from stud_cli.template_utils import (
    render_template,
    get_template_variables,
    TemplateError
)


def test_render_template_simple():
    """Test basic template rendering."""
    template = "Configuration migrated to version {{version}}"
    context = {'version': '202501150000001'}
    result = render_template(template, context)
    assert result == "Configuration migrated to version 202501150000001"


def test_render_template_multiple_variables():
    """Test template with multiple variables."""
    template = "Running migration {{ id }}: {{ description }}"
    context = {'id': '202501150000001', 'description': 'Git token format'}
    result = render_template(template, context)
    assert result == "Running migration 202501150000001: Git token format"


def test_render_template_undefined_variable():
    """Test that undefined variables raise TemplateError in strict mode."""
    template = "Auto-detected {{key}}: {{value}}"
    context = {'key': 'baseBranch'}  # Missing 'value'

    with pytest.raises(TemplateError) as exc_info:
        render_template(template, context)
    assert "undefined" in str(exc_info.value).lower()


def test_render_template_lenient_keeps_placeholder():
    """Test that lenient mode leaves undefined placeholders visible."""
    template = "Auto-detected {{ key }}: {{ value }}"
    result = render_template(template, {'key': 'baseBranch'}, strict=False)
    assert result == "Auto-detected baseBranch: {{ value }}"


def test_render_template_invalid_syntax():
    """Test that invalid template syntax raises TemplateError."""
    template = "Migration {{id"  # Missing closing braces
    context = {'id': '1'}

    with pytest.raises(TemplateError) as exc_info:
        render_template(template, context)
    assert "syntax" in str(exc_info.value).lower()


def test_render_template_keeps_trailing_newline():
    assert render_template("line {{ n }}\n", {'n': 1}) == "line 1\n"


def test_get_template_variables():
    """Test extracting variables from template."""
    template = "Migration {{id}} failed: {{error}}"
    variables = get_template_variables(template)
    assert variables == {'id', 'error'}


def test_get_template_variables_empty():
    """Test template with no variables."""
    template = "Upgrade cancelled"
    variables = get_template_variables(template)
    assert variables == set()


def test_get_template_variables_invalid_syntax():
    """Test that invalid syntax raises TemplateError."""
    template = "Migration {{id"

    with pytest.raises(TemplateError):
        get_template_variables(template)
