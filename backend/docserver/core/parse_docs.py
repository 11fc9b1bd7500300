"""Documentation Parsing — source text to documentation entries.

Invariants:
    - Pure functions: (source text, file name) in, list of DocEntry out
    - Entries come back in source order (by line)
    - Unparseable Python source yields [] instead of raising
    - /*! license blocks are never documentation

Design Decisions:
    - ast over regex for Python: docstrings are exact, no false positives
    - JS comments parsed line-by-line: only /** ... */ blocks with @tags are needed,
      a full JS parser is out of scope
"""

import ast
import re

from docserver.core.domain_types import DocEntry, DocKind

_TAG_LINE = re.compile(r"^@(\w+)\s*(.*)$")
_JS_BLOCK = re.compile(r"/\*\*(?!/)(.*?)\*/", re.DOTALL)
_JS_NAME_PATTERNS = (
    re.compile(r"^(?:export\s+)?(?:default\s+)?(?:async\s+)?function\s*\*?\s*([\w$]+)"),
    re.compile(r"^(?:export\s+)?(?:default\s+)?class\s+([\w$]+)"),
    re.compile(r"^(?:export\s+)?(?:const|let|var)\s+([\w$]+)\s*="),
    re.compile(r"^(?:module\.)?exports\.([\w$]+)\s*="),
    re.compile(r"^([\w$.]+)\s*=\s*(?:async\s+)?function"),
)


def split_description(text: str) -> tuple[dict[str, str], list[dict[str, str]]]:
    """Split a cleaned comment into description and tags.

    The first paragraph is the summary, the remaining non-tag lines form the
    body. Every line starting with ``@name`` becomes ``{"type", "string"}``.
    """
    prose: list[str] = []
    tags: list[dict[str, str]] = []
    for line in text.splitlines():
        stripped = line.strip()
        match = _TAG_LINE.match(stripped)
        if match:
            tags.append({"type": match.group(1), "string": match.group(2).strip()})
        else:
            prose.append(line.rstrip())

    paragraphs = "\n".join(prose).strip().split("\n\n", 1)
    summary = " ".join(part.strip() for part in paragraphs[0].splitlines()).strip()
    body = paragraphs[1].strip() if len(paragraphs) > 1 else ""
    return {"summary": summary, "body": body}, tags


def _entry(
    file: str, line: int, kind: DocKind, name: str, text: str, private: bool,
) -> DocEntry:
    description, tags = split_description(text)
    is_private = private or any(
        t["type"] == "private" or (t["type"] == "api" and t["string"] == "private")
        for t in tags
    )
    return {
        "file": file,
        "line": line,
        "kind": kind.value,
        "name": name,
        "description": description,
        "tags": tags,
        "private": is_private,
    }


# ─── Python ─────────────────────────────────────────────────────

def parse_python_source(source: str, file: str) -> list[DocEntry]:
    """Collect module, class and function docstrings from Python source."""
    try:
        tree = ast.parse(source, filename=file)
    except (SyntaxError, ValueError):
        return []

    entries: list[DocEntry] = []
    module_doc = ast.get_docstring(tree)
    if module_doc:
        entries.append(_entry(file, 1, DocKind.MODULE, file, module_doc, False))
    _walk_python(tree, file, prefix="", entries=entries)
    return sorted(entries, key=lambda e: e["line"])


def _walk_python(node: ast.AST, file: str, prefix: str, entries: list[DocEntry]) -> None:
    for child in ast.iter_child_nodes(node):
        if isinstance(child, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
            name = f"{prefix}{child.name}"
            kind = DocKind.CLASS if isinstance(child, ast.ClassDef) else DocKind.FUNCTION
            doc = ast.get_docstring(child)
            if doc:
                private = any(part.startswith("_") and not part.startswith("__")
                              for part in name.split("."))
                entries.append(_entry(file, child.lineno, kind, name, doc, private))
            if isinstance(child, ast.ClassDef):
                _walk_python(child, file, f"{name}.", entries)


# ─── JavaScript ─────────────────────────────────────────────────

def _clean_js_comment(raw: str) -> str:
    lines = []
    for line in raw.splitlines():
        stripped = line.strip()
        if stripped.startswith("*"):
            stripped = stripped[1:]
            if stripped.startswith(" "):
                stripped = stripped[1:]
        lines.append(stripped)
    return "\n".join(lines).strip()


def _js_name_after(source: str, end: int) -> str:
    for line in source[end:].splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        for pattern in _JS_NAME_PATTERNS:
            match = pattern.match(stripped)
            if match:
                return match.group(1)
        return ""
    return ""


def parse_js_comments(source: str, file: str) -> list[DocEntry]:
    """Collect ``/** ... */`` comment blocks from JavaScript source."""
    entries: list[DocEntry] = []
    for match in _JS_BLOCK.finditer(source):
        text = _clean_js_comment(match.group(1))
        if not text:
            continue
        line = source.count("\n", 0, match.start()) + 1
        name = _js_name_after(source, match.end())
        entries.append(_entry(file, line, DocKind.COMMENT, name, text, False))
    return entries
