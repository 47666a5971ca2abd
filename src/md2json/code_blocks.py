"""Decorate fenced code blocks with a language label and a copy button.

The engine's stock ``fence`` rule is kept as a fallback. For a fenced block
with a language moniker the fallback output is wrapped::

    <div class="veracity-dev-pres-html-code" data-lang="JavaScript"
         data-original-lang="js" data-lang-unknown="false">
    <div class="veracity-dev-pres-html-code-header">
    <strong>JavaScript</strong>
    <button>Copy</button>
    </div>
    <pre><code class="language-js">...</code></pre>
    </div>

Every other block is rendered by the fallback alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, MutableMapping, Protocol, Sequence

from markdown_it.common.utils import escapeHtml, unescapeAll

from md2json.config import MD2JSON_CODE_CSS_CLASS, MD2JSON_COPY_LABEL
from md2json.languages import is_known_language, normalize_language

if TYPE_CHECKING:
    from markdown_it import MarkdownIt
    from markdown_it.token import Token
    from markdown_it.utils import OptionsDict

    RenderRule = Callable[
        [Sequence[Token], int, OptionsDict, MutableMapping[str, Any]], str
    ]

DEFAULT_LANG_PREFIX = "language-"


@dataclass(frozen=True)
class DecoratedCodeBlock:
    """Language details of a fenced block that gets decorated."""

    original_moniker: str
    canonical_language: str
    is_language_known: bool


class CodeBlockRenderer(Protocol):
    """Anything that can turn the code-block token at ``idx`` into HTML."""

    def render(
        self,
        tokens: Sequence[Token],
        idx: int,
        options: OptionsDict,
        env: MutableMapping[str, Any],
    ) -> str: ...


class DefaultCodeBlockRenderer:
    """Adapter around the engine's own render rule."""

    def __init__(self, rule: RenderRule) -> None:
        self._rule = rule

    def render(
        self,
        tokens: Sequence[Token],
        idx: int,
        options: OptionsDict,
        env: MutableMapping[str, Any],
    ) -> str:
        return self._rule(tokens, idx, options, env)


class DecoratedCodeBlockRenderer:
    """Wrap fenced blocks that name a language; delegate everything else."""

    def __init__(
        self,
        fallback: CodeBlockRenderer,
        *,
        css_class: str = MD2JSON_CODE_CSS_CLASS,
        copy_label: str = MD2JSON_COPY_LABEL,
    ) -> None:
        self.fallback = fallback
        self.css_class = css_class
        self.copy_label = copy_label

    def render(
        self,
        tokens: Sequence[Token],
        idx: int,
        options: OptionsDict,
        env: MutableMapping[str, Any],
    ) -> str:
        code_html = self.fallback.render(tokens, idx, options, env)
        block = describe_code_block(
            tokens[idx], lang_prefix=options.get("langPrefix", DEFAULT_LANG_PREFIX)
        )
        if block is None:
            return code_html
        return self._wrap(block, code_html)

    def _wrap(self, block: DecoratedCodeBlock, code_html: str) -> str:
        css_class = escapeHtml(self.css_class)
        label = escapeHtml(block.canonical_language)
        unknown = "false" if block.is_language_known else "true"
        if not code_html.endswith("\n"):
            code_html += "\n"
        return (
            f'<div class="{css_class}" data-lang="{label}" '
            f'data-original-lang="{escapeHtml(block.original_moniker)}" '
            f'data-lang-unknown="{unknown}">\n'
            f'<div class="{css_class}-header">\n'
            f"<strong>{label}</strong>\n"
            f"<button>{escapeHtml(self.copy_label)}</button>\n"
            "</div>\n"
            f"{code_html}"
            "</div>\n"
        )


def language_moniker(info: str, lang_prefix: str = DEFAULT_LANG_PREFIX) -> str:
    """Return the first word of a fence info string, or an empty string.

    A leading ``lang_prefix`` (``language-js``) is removed, so it names the
    same language as the bare moniker.
    """
    words = unescapeAll(info).split(maxsplit=1) if info else []
    moniker = words[0] if words else ""
    if lang_prefix and moniker.startswith(lang_prefix):
        moniker = moniker[len(lang_prefix) :]
    return moniker


def describe_code_block(
    token: Token, lang_prefix: str = DEFAULT_LANG_PREFIX
) -> DecoratedCodeBlock | None:
    """Return decoration details for ``token``, or None when it is left as is."""
    if token.type != "fence":
        return None
    moniker = language_moniker(token.info, lang_prefix)
    if not moniker:
        return None
    return DecoratedCodeBlock(
        original_moniker=moniker,
        canonical_language=normalize_language(moniker),
        is_language_known=is_known_language(moniker),
    )


def install_code_block_decorator(
    md: MarkdownIt,
    *,
    css_class: str = MD2JSON_CODE_CSS_CLASS,
    copy_label: str = MD2JSON_COPY_LABEL,
) -> DecoratedCodeBlockRenderer:
    """Replace the ``fence`` render rule of ``md`` with the decorator.

    Installing twice keeps the original fallback, so blocks are never wrapped
    more than once.
    """
    current = md.renderer.rules["fence"]
    installed = getattr(current, "__self__", None)
    if isinstance(installed, DecoratedCodeBlockRenderer):
        fallback = installed.fallback
    else:
        fallback = DefaultCodeBlockRenderer(current)

    decorator = DecoratedCodeBlockRenderer(
        fallback, css_class=css_class, copy_label=copy_label
    )
    md.renderer.rules["fence"] = decorator.render
    return decorator
