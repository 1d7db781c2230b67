"""markdown-it rules: single-tilde strikethrough, GFM task items, and Slack text escaping"""

import re

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.rules_inline import StateInline


# ~text~ with no leading/trailing space and no adjacent second tilde
SINGLE_TILDE_RE = re.compile(r'~(?![~\s])[^~\n]*?(?<![~\s])~(?!~)')
TASK_RE = re.compile(r'^\[([ xX])\](?:\s+|$)')

# Slack only wants &, <, and > escaped
SLACK_ESCAPES = {'&': '&amp;', '<': '&lt;', '>': '&gt;'}
ESCAPE_RE = re.compile(r'[&<>]')
ESCAPED_TYPES = {'text', 'text_special', 'code_inline'}


def escape_mrkdwn(text: str) -> str:
    """Replace &, < and > with the entity forms Slack mrkdwn expects."""
    return ESCAPE_RE.sub(lambda m: SLACK_ESCAPES[m.group(0)], text)


def single_tilde(state: StateInline, silent: bool) -> bool:
    """Tokenize ~text~ as an s_open/s_close pair; ~~text~~ is left to the strikethrough rule."""
    if state.src[state.pos] != '~':
        return False
    match = SINGLE_TILDE_RE.match(state.src, state.pos, state.posMax)
    if not match:
        return False

    if not silent:
        old_max = state.posMax
        token = state.push('s_open', 's', 1)
        token.markup = '~'
        state.pos += 1
        state.posMax = match.end() - 1
        state.md.inline.tokenize(state)
        token = state.push('s_close', 's', -1)
        token.markup = '~'
        state.posMax = old_max

    state.pos = match.end()
    return True


def task_lists(state: StateCore) -> None:
    """Tag list items starting with [ ] or [x] and strip the marker from their text."""
    tokens = state.tokens
    for i, tok in enumerate(tokens):
        if tok.type != 'list_item_open' or i + 2 >= len(tokens):
            continue
        paragraph, inline = tokens[i + 1], tokens[i + 2]
        if paragraph.type != 'paragraph_open' or inline.type != 'inline':
            continue

        match = TASK_RE.match(inline.content)
        first = inline.children[0] if inline.children else None
        if not match or first is None or first.type != 'text' or not first.content.startswith(match.group(0)[:3]):
            continue

        tok.meta['task'] = True
        tok.meta['checked'] = match.group(1) in 'xX'
        inline.content = inline.content[match.end():]
        first.content = first.content[3:].lstrip()
        if not first.content:
            inline.children.pop(0)


def _escape_children(children) -> None:
    for child in children or []:
        if child.type in ESCAPED_TYPES:
            child.meta['raw'] = child.content
            child.content = escape_mrkdwn(child.content)
        _escape_children(child.children)


def slack_escape(state: StateCore) -> None:
    """Escape inline text leaves, keeping the unescaped text in meta['raw']."""
    for tok in state.tokens:
        if tok.type == 'inline':
            _escape_children(tok.children)


def slack_plugin(md: MarkdownIt) -> None:
    """Install the single-tilde, task list and escaping rules on md."""
    md.inline.ruler.before('strikethrough', 'single_tilde', single_tilde)
    md.core.ruler.after('inline', 'task_lists', task_lists)
    md.core.ruler.push('slack_escape', slack_escape)
