# sassimport/dialect.py
"""
Conversion of indented-syntax stylesheets into the bracketed syntax the
compiler backend consumes.

Nesting is expressed with braces, leaf statements are terminated with
semicolons, and the indented shorthands for mixins (`=name`, `+name`) and
old-style properties (`:name value`) are rewritten to their bracketed forms.
"""
import re
from dataclasses import dataclass
from typing import List, Optional
import structlog

from sassimport.exceptions import EvaluationError

log = structlog.get_logger(__name__)

INDENT = "  "

MIXIN_DEFINITION = re.compile(r"^=\s*(?P<rest>.+)$")
MIXIN_INCLUDE = re.compile(r"^\+\s*(?P<rest>.+)$")
OLD_STYLE_PROPERTY = re.compile(r"^:(?P<name>[\w-]+)\s+(?P<value>.+)$")
TRAILING_COMMENT = re.compile(r"\s+//.*$")
# "name: value" or "name:" with a nested value; "a:hover" is a selector.
PROPERTY = re.compile(r"^[\w$#{}-][^:]*:(\s|$)")

@dataclass
class _Line:
    number: int
    indent: int
    text: str
    comment: Optional[List[str]] = None

@dataclass
class _Block:
    indent: int
    child_indent: Optional[int] = None

def _indent_of(raw: str) -> int:
    expanded = raw.expandtabs(4)
    return len(expanded) - len(expanded.lstrip(" "))

def _scan(text: str) -> List[_Line]:
    # groups comment continuation lines with their opening line.
    lines: List[_Line] = []
    raw_lines = text.splitlines()
    i = 0
    while i < len(raw_lines):
        raw = raw_lines[i].rstrip()
        if not raw.strip():
            i += 1
            continue
        indent = _indent_of(raw)
        stripped = raw.strip()
        if stripped.startswith("//") or stripped.startswith("/*"):
            start = i + 1
            body = [stripped]
            i += 1
            while i < len(raw_lines):
                nxt = raw_lines[i].rstrip()
                if nxt.strip() and _indent_of(nxt) <= indent:
                    break
                body.append(nxt.strip())
                i += 1
            while body and not body[-1]:
                body.pop()
            lines.append(_Line(start, indent, stripped, comment=body))
            continue
        lines.append(_Line(i + 1, indent, stripped))
        i += 1
    return lines

def _format_comment(body: List[str], depth: int) -> List[str]:
    pad = INDENT * depth
    if body[0].startswith("//"):
        out = [pad + body[0]]
        out.extend(pad + "// " + line if line else pad + "//" for line in body[1:])
        return out
    out = [pad + body[0]]
    out.extend(pad + " * " + line if line else pad + " *" for line in body[1:])
    if not body[-1].endswith("*/"):
        out.append(pad + " */")
    return out

def _translate(statement: str) -> str:
    match = MIXIN_DEFINITION.match(statement)
    if match:
        return "@mixin " + match.group("rest")
    match = MIXIN_INCLUDE.match(statement)
    if match:
        return "@include " + match.group("rest")
    match = OLD_STYLE_PROPERTY.match(statement)
    if match:
        return f"{match.group('name')}: {match.group('value')}"
    return statement

def _is_statement(statement: str) -> bool:
    # leaf lines that need a terminating semicolon rather than an empty body.
    return statement.startswith(("@", "$", "%")) or PROPERTY.match(statement) is not None

def convert_indented_to_scss(text: str) -> str:
    """
    Converts indented syntax to bracketed syntax.

    Raises EvaluationError when indentation is inconsistent, e.g. a line that
    dedents to a level no enclosing block used.
    """
    lines = _scan(text)
    out: List[str] = []
    stack: List[_Block] = []
    top_indent: Optional[int] = None

    code_lines = [ln for ln in lines if ln.comment is None]
    next_indent = {}
    for current, following in zip(code_lines, code_lines[1:]):
        next_indent[id(current)] = following.indent

    for line in lines:
        if line.comment is not None:
            out.extend(_format_comment(line.comment, len(stack)))
            continue

        while stack and line.indent <= stack[-1].indent:
            stack.pop()
            out.append(INDENT * len(stack) + "}")

        if stack:
            block = stack[-1]
            if block.child_indent is None:
                block.child_indent = line.indent
            elif line.indent != block.child_indent:
                raise EvaluationError(f"inconsistent indentation on line {line.number}: {line.text!r}")
        else:
            if top_indent is None:
                top_indent = line.indent
            elif line.indent != top_indent:
                raise EvaluationError(f"inconsistent indentation on line {line.number}: {line.text!r}")

        pad = INDENT * len(stack)
        statement = line.text
        trailing = ""
        if "url(" not in statement:
            comment_match = TRAILING_COMMENT.search(statement)
            if comment_match:
                trailing = " " + comment_match.group(0).strip()
                statement = statement[:comment_match.start()]
        statement = _translate(statement)

        if statement.endswith(","):
            # selector list continues on the next line.
            out.append(pad + statement + trailing)
            continue

        opens_block = next_indent.get(id(line), -1) > line.indent
        if opens_block:
            out.append(f"{pad}{statement} {{{trailing}")
            stack.append(_Block(line.indent))
        elif _is_statement(statement):
            terminator = "" if statement.endswith(";") else ";"
            out.append(f"{pad}{statement}{terminator}{trailing}")
        else:
            out.append(f"{pad}{statement} {{}}{trailing}")

    while stack:
        stack.pop()
        out.append(INDENT * len(stack) + "}")

    log.debug("indented_syntax_converted", input_lines=len(text.splitlines()), output_lines=len(out))
    return "\n".join(out) + ("\n" if out else "")
