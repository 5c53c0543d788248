# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""Message template rendering using Jinja2."""

from typing import Dict, Set, Any
from jinja2 import Template, TemplateSyntaxError, UndefinedError, StrictUndefined, DebugUndefined


class TemplateError(Exception):
    """Exception raised for template-related errors."""
    pass


def render_template(template_str: str, context: Dict[str, Any], strict: bool = True) -> str:
    """
    Render a Jinja2 message template with the given parameters.

    Args:
        template_str: Jinja2 template string using {{ variable }} syntax
        context: Dictionary of variables available to the template
        strict: If True, undefined variables raise; otherwise the
            placeholder is left in the output as written

    Returns:
        Rendered string

    Raises:
        TemplateError: If template syntax is invalid or (in strict mode)
            uses undefined variables
    """
    try:
        undefined = StrictUndefined if strict else DebugUndefined
        template = Template(template_str, undefined=undefined, keep_trailing_newline=True)
        return template.render(**context)
    except TemplateSyntaxError as e:
        raise TemplateError(f"Invalid template syntax: {e}")
    except UndefinedError as e:
        raise TemplateError(f"Template uses undefined variable: {e}")
    except Exception as e:
        raise TemplateError(f"Template rendering error: {e}")


def get_template_variables(template_str: str) -> Set[str]:
    """
    Extract all variable names used in a template.

    Raises:
        TemplateError: If template syntax is invalid
    """
    try:
        from jinja2 import meta
        template = Template(template_str)
        env = template.environment
        ast = env.parse(template_str)
        return meta.find_undeclared_variables(ast)
    except TemplateSyntaxError as e:
        raise TemplateError(f"Invalid template syntax: {e}")
    except Exception as e:
        raise TemplateError(f"Error parsing template: {e}")
