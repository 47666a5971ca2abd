"""Local configuration for md2json."""

from __future__ import annotations

import os


DEFAULT_CODE_CSS_CLASS = "veracity-dev-pres-html-code"
DEFAULT_COPY_LABEL = "Copy"
DEFAULT_JSON_INDENT = 2
DEFAULT_LOG_LEVEL = "WARNING"

# Wrapper class for decorated code blocks; the header strip uses "<class>-header".
MD2JSON_CODE_CSS_CLASS = os.getenv("MD2JSON_CODE_CSS_CLASS", DEFAULT_CODE_CSS_CLASS)
MD2JSON_COPY_LABEL = os.getenv("MD2JSON_COPY_LABEL", DEFAULT_COPY_LABEL)
MD2JSON_JSON_INDENT = int(os.getenv("MD2JSON_JSON_INDENT", str(DEFAULT_JSON_INDENT)))
MD2JSON_LOG_LEVEL = os.getenv("MD2JSON_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
