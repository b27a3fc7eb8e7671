"""template-resolver: resolve project template names to their locations."""

import logging

import structlog

# Until the application configures logging, drop debug events instead of
# printing them. Must run before the submodules below parse their literals.
if not structlog.is_configured():
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.INFO))

from template_resolver.core.models import TemplateName  # noqa: E402
from template_resolver.parsing import parse_pair, parse_template_name  # noqa: E402

__version__ = "0.1.0"

__all__ = ["TemplateName", "__version__", "parse_pair", "parse_template_name"]
