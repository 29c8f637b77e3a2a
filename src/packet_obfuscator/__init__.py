"""packet-obfuscator: deterministic masking of sensitive data in support packets."""

from .cache import ObfuscationCache
from .config import create_obfuscator, load_config, load_from_yaml
from .dispatcher import obfuscate_directory
from .dsn import obfuscate_dsn, parse_dsn
from .errors import DirectoryError, FileAccessError, ObfuscationError, ParseError
from .hashing import fingerprint
from .redactor import Obfuscator, ObfuscatorConfig
from .rules import DEFAULT_RULES, Rule, classify
from .tree import NodeVisitor, build_tree
from .types import DirectoryReport, FileResult

__all__ = [
    "Obfuscator", "ObfuscatorConfig",
    "ObfuscationCache",
    "fingerprint",
    "obfuscate_directory",
    "obfuscate_dsn", "parse_dsn",
    "DEFAULT_RULES", "Rule", "classify",
    "NodeVisitor", "build_tree",
    "create_obfuscator", "load_config", "load_from_yaml",
    "DirectoryReport", "FileResult",
    "ObfuscationError", "FileAccessError", "ParseError", "DirectoryError",
]
__version__ = "0.1.0"
