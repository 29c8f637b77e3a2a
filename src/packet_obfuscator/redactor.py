"""Obfuscator: the main API.

Usage:
    from packet_obfuscator import Obfuscator

    obf = Obfuscator()                       # owns one ObfuscationCache

    obf.obfuscate_text("login from 10.0.0.7")
    # "login from XXX.XXX.XXX.5c1"

    obf.obfuscate_data({"SqlSettings": {"DataSource": "postgres://..."}})
    obf.obfuscate_directory("/tmp/support-packet")

Everything done through one Obfuscator shares its cache, so a value masked
in config.json gets the same placeholder in mattermost.log.
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .cache import ObfuscationCache
from .errors import FileAccessError, ParseError
from .patterns import Step, scrub_text
from .rules import DEFAULT_RULES, Rule, apply_rules
from .tree import Node, NodeVisitor, ObjectNode, ArrayNode, StringNode, build_tree
from .types import DirectoryReport, FileResult

logger = logging.getLogger(__name__)


@dataclass
class ObfuscatorConfig:
    """Configuration for the Obfuscator."""
    json_indent: int = 4
    encoding: str = "utf-8"
    rules: tuple[Rule, ...] = DEFAULT_RULES
    # Extra text steps, run after the built-in pipeline
    custom_steps: list[Step] = field(default_factory=list)
    # Allow-list: values that should NEVER be rewritten
    allow_list: set[str] = field(default_factory=set)


class FieldObfuscator(NodeVisitor):
    """Rewrites string members of objects according to their field name.

    Strings directly inside arrays (and a bare string root) have no field
    name and are left alone.  Objects and arrays are always descended into,
    whatever happened to their siblings.
    """

    def __init__(self, cache: ObfuscationCache, config: ObfuscatorConfig) -> None:
        self.cache = cache
        self.config = config
        self._field: str | None = None

    def visit_object(self, node: ObjectNode) -> None:
        for key, child in node.members.items():
            self._field = key
            self.visit(child)
        self._field = None

    def visit_array(self, node: ArrayNode) -> None:
        for item in node.items:
            self._field = None
            self.visit(item)

    def visit_string(self, node: StringNode) -> None:
        if self._field is None or node.value in self.config.allow_list:
            return
        node.value = apply_rules(self._field, node.value, self.cache, self.config.rules)


class Obfuscator:
    """Deterministic obfuscator for support-packet files.

    Structured data: field-name rules over a value tree.
    Text: ordered regex pipeline over the raw content.
    """

    def __init__(
        self,
        config: ObfuscatorConfig | None = None,
        cache: ObfuscationCache | None = None,
    ) -> None:
        self.config = config or ObfuscatorConfig()
        self.cache = cache if cache is not None else ObfuscationCache()

    # ------------------------------------------------------------------
    # In-memory
    # ------------------------------------------------------------------

    def obfuscate_tree(self, tree: Node) -> Node:
        """Rewrite sensitive string fields of *tree* in place and return it."""
        FieldObfuscator(self.cache, self.config).visit(tree)
        return tree

    def obfuscate_data(self, data: Any) -> Any:
        """Obfuscate decoded JSON.  Returns new containers; *data* is untouched."""
        return self.obfuscate_tree(build_tree(data)).to_python()

    def obfuscate_text(self, text: str) -> str:
        return scrub_text(
            text,
            self.cache,
            extra_steps=self.config.custom_steps,
            allow_list=self.config.allow_list,
        )

    # ------------------------------------------------------------------
    # Files (rewritten in place)
    # ------------------------------------------------------------------

    def obfuscate_config_file(self, path: str | Path) -> FileResult:
        """Obfuscate a JSON config file in place.

        Nothing is written unless the whole file parses.
        """
        path = Path(path)
        logger.debug("Obfuscating config file: %s", path)

        raw = _read_bytes(path, "config")
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            raise ParseError(path, f"failed to parse config JSON: {exc}") from exc

        # The tree walk recurses once per nesting level
        try:
            tree = self.obfuscate_tree(build_tree(data))
            out = json.dumps(
                tree.to_python(), indent=self.config.json_indent, ensure_ascii=False,
            ).encode(self.config.encoding)
        except (ValueError, RecursionError) as exc:
            raise ParseError(path, f"failed to serialize obfuscated config: {exc}") from exc

        _write_bytes(path, out, "config")
        logger.info("Config file obfuscated successfully: %s", path.name)
        return FileResult(path.name, "config", len(raw), len(out))

    def obfuscate_log_file(self, path: str | Path) -> FileResult:
        """Obfuscate a log or plain-text file in place.

        Undecodable bytes pass through unchanged.
        """
        path = Path(path)
        logger.debug("Obfuscating log file: %s", path)

        raw = _read_bytes(path, "log")
        text = raw.decode(self.config.encoding, "surrogateescape")
        out = self.obfuscate_text(text).encode(self.config.encoding, "surrogateescape")

        _write_bytes(path, out, "log")
        logger.debug("Log file obfuscated successfully: %s", path.name)
        return FileResult(path.name, "text", len(raw), len(out))

    def obfuscate_directory(self, directory: str | Path, pattern: str = "*") -> DirectoryReport:
        """Obfuscate every recognised file in *directory*.  See dispatcher."""
        from .dispatcher import obfuscate_directory
        return obfuscate_directory(directory, self, pattern)


def _read_bytes(path: Path, what: str) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise FileAccessError(path, f"failed to read {what} file: {exc}") from exc


def _write_bytes(path: Path, data: bytes, what: str) -> None:
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise FileAccessError(path, f"failed to write obfuscated {what}: {exc}") from exc
