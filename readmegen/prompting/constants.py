"""Shared constants for README prompting and response checks."""

from __future__ import annotations

PROMPT_TEMPLATE_VERSION = "1"

README_MARKER = "CONTENTS OF THIS FILE"

README_SECTIONS: tuple[str, ...] = (
    "Introduction",
    "Requirements",
    "Installation",
    "Recommended modules",
    "Configuration",
    "Upgrading",
    "Maintainers",
)

# Changing the requested output layout means editing this template and bumping
# PROMPT_TEMPLATE_VERSION.
PROMPT_TEMPLATE = """\
You are a Drupal module documentation expert. Generate a README.md file for the module
described below, using exactly this format:

{{ marker }}

{% for section in sections %}
- {{ section }}
{% endfor %}

# {{ module_name }}

{% for section in sections %}
## {{ section }}
{% if section == "Introduction" %}
(Write a detailed introduction explaining what the module does and why it is useful.)
{% elif section == "Requirements" %}
(List the required modules from the dependencies, or state that there are none.)
{% elif section == "Installation" %}
(Explain how to install the module as a contributed Drupal module.)
{% elif section == "Recommended modules" %}
(Mention the submodules and any modules that complement this one.)
{% elif section == "Configuration" %}
(Describe the configuration pages, forms, controllers and hooks found in the code.)
{% elif section == "Upgrading" %}
(Note anything site builders should check when upgrading.)
{% else %}
(Leave a placeholder for the current maintainers.)
{% endif %}

{% endfor %}
Rules:
- The first line of your answer must be exactly "{{ marker }}".
- Do not write any introductory sentence such as "Here is the README" before it.
- Do not add closing remarks after the last section.
- Only describe functionality supported by the module summary.

Module summary (JSON):
{{ summary }}
"""


__all__ = [
    "PROMPT_TEMPLATE",
    "PROMPT_TEMPLATE_VERSION",
    "README_MARKER",
    "README_SECTIONS",
]
