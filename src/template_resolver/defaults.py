"""Built-in template names."""

from template_resolver.parsing.name import mk_template_name

# Used by ``resolve`` when no name is given and none is configured.
DEFAULT_TEMPLATE_NAME = mk_template_name("new-template")
