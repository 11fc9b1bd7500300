"""Documentation Registry — module discovery on disk and cached per-module docs.

Invariants:
    - Module type validated before anything else (400 on invalid/missing)
    - Module id validated after type (400 when empty or blank)
    - Unknown modules and ids that are not plain directory names -> 404
    - Each (type, module) pair is parsed at most once per process
    - A cold parse of one module never delays lookups of another
    - Missing source roots mean "no modules", never an error (warned once at startup)

Design Decisions:
    - Parsing runs in a worker thread (asyncio.to_thread): file reads must not
      block the event loop
    - Cache hits never take a lock; one asyncio.Lock per (type, module) makes
      concurrent first requests for that module parse once without blocking
      lookups of any other module
    - Backend modules are Python packages (dir with __init__.py); frontend
      modules are plain directories of .js files
"""

import asyncio
import logging
from pathlib import Path

from docserver.core.domain_types import DocEntry, ModuleType
from docserver.core.errors import (
    DocModuleNotFoundError, InvalidModuleTypeError, MissingModuleIdError,
)
from docserver.core.parse_docs import parse_js_comments, parse_python_source

logger = logging.getLogger(__name__)

_SOURCE_SUFFIX = {
    ModuleType.BACKEND: ".py",
    ModuleType.FRONTEND: ".js",
}


def validate_module_type(module_type: str | None) -> ModuleType:
    """Map the raw path parameter onto ModuleType or raise 400."""
    try:
        return ModuleType(module_type)
    except ValueError:
        raise InvalidModuleTypeError(module_type) from None


def _is_test_path(relative: Path) -> bool:
    name = relative.name
    return name.startswith("test_") or name.endswith("_test.py") or name.endswith(".test.js")


class DocumentationRegistry:
    """Filesystem-backed DocumentationProvider."""

    def __init__(
        self,
        backend_dir: Path,
        frontend_dir: Path,
        backend_prefix: str = "",
        excluded_dirs: list[str] | None = None,
    ):
        self._roots = {
            ModuleType.BACKEND: Path(backend_dir),
            ModuleType.FRONTEND: Path(frontend_dir),
        }
        self._backend_prefix = backend_prefix
        self._excluded = set(excluded_dirs or ["tests", "__pycache__", "node_modules"])
        self._cache: dict[tuple[ModuleType, str], list[DocEntry]] = {}
        self._locks: dict[tuple[ModuleType, str], asyncio.Lock] = {}
        for kind, root in self._roots.items():
            if not root.is_dir():
                logger.warning(
                    f"Documentation root {root} does not exist",
                    extra={"module_type": kind.value},
                )

    # ─── Discovery ──────────────────────────────────────────────

    def _discover(self, module_type: ModuleType) -> list[str]:
        root = self._roots[module_type]
        if not root.is_dir():
            return []
        names = []
        for child in root.iterdir():
            if not child.is_dir() or child.name.startswith("."):
                continue
            if child.name in self._excluded:
                continue
            if module_type is ModuleType.BACKEND:
                if not (child / "__init__.py").is_file():
                    continue
                if not child.name.startswith(self._backend_prefix):
                    continue
            names.append(child.name)
        return sorted(names)

    async def list_modules(self, module_type: str) -> list[str]:
        """List module names for backend or frontend."""
        kind = validate_module_type(module_type)
        return await asyncio.to_thread(self._discover, kind)

    # ─── Documentation ──────────────────────────────────────────

    def _source_files(self, module_dir: Path, suffix: str) -> list[Path]:
        files = []
        for path in module_dir.rglob(f"*{suffix}"):
            relative = path.relative_to(module_dir)
            if any(part in self._excluded for part in relative.parts[:-1]):
                continue
            if _is_test_path(relative) or not path.is_file():
                continue
            files.append(path)
        return sorted(files)

    def _parse_module(self, module_type: ModuleType, module_id: str) -> list[DocEntry] | None:
        if module_id not in self._discover(module_type):
            return None
        module_dir = self._roots[module_type] / module_id
        suffix = _SOURCE_SUFFIX[module_type]
        entries: list[DocEntry] = []
        for path in self._source_files(module_dir, suffix):
            file = path.relative_to(module_dir).as_posix()
            source = path.read_text(encoding="utf-8", errors="replace")
            if module_type is ModuleType.BACKEND:
                entries.extend(parse_python_source(source, file))
            else:
                entries.extend(parse_js_comments(source, file))
        return entries

    async def get_module_documentation(
        self, module_id: str, module_type: str,
    ) -> list[DocEntry]:
        """Parsed documentation entries for one module."""
        kind = validate_module_type(module_type)
        if not module_id or not module_id.strip():
            raise MissingModuleIdError()
        if "/" in module_id or "\\" in module_id or module_id in (".", ".."):
            raise DocModuleNotFoundError(module_id, kind.value)

        key = (kind, module_id)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        async with self._locks.setdefault(key, asyncio.Lock()):
            if key not in self._cache:
                docs = await asyncio.to_thread(self._parse_module, kind, module_id)
                if docs is None:
                    self._locks.pop(key, None)
                    raise DocModuleNotFoundError(module_id, kind.value)
                self._cache[key] = docs
                logger.info(
                    f"Parsed documentation for {kind.value} module {module_id}",
                    extra={"module_type": kind.value, "module_id": module_id},
                )
            return self._cache[key]
