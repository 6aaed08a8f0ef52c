"""npm package name validation.

Follows the rules npm applies when publishing: *errors* make a name
unusable for any package, *warnings* only make it unusable for new ones.
"""

import re
from dataclasses import dataclass, field
from typing import List
from urllib.parse import quote

MAX_NAME_LENGTH = 214

_SCOPED_PACKAGE_PATTERN = re.compile(r"^(?:@([^/]+?)[/])?([^/]+?)$")
_SPECIAL_CHARACTERS = re.compile(r"[~'!()*]")
_URL_SAFE = "-_.!~*'()"

BLACKLIST = ("node_modules", "favicon.ico")

NODE_CORE_MODULES = (
    "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
    "constants", "crypto", "dgram", "diagnostics_channel", "dns", "domain",
    "events", "fs", "http", "http2", "https", "inspector", "module", "net",
    "os", "path", "perf_hooks", "process", "punycode", "querystring",
    "readline", "repl", "stream", "string_decoder", "sys", "timers", "tls",
    "trace_events", "tty", "url", "util", "v8", "vm", "wasi",
    "worker_threads", "zlib",
)


@dataclass
class PackageNameValidation:
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def valid_for_new_packages(self) -> bool:
        return not self.errors and not self.warnings

    @property
    def valid_for_old_packages(self) -> bool:
        return not self.errors


def _encode_uri_component(value):
    return quote(value, safe=_URL_SAFE)


def _is_url_safe(value):
    return _encode_uri_component(value) == value


def _is_valid_scoped_name(name):
    match = _SCOPED_PACKAGE_PATTERN.match(name)
    if not match or match.group(1) is None:
        return False
    scope, package = match.group(1), match.group(2)
    return _is_url_safe(scope) and _is_url_safe(package)


def validate_package_name(name) -> PackageNameValidation:
    """Check *name* against npm's package naming rules."""
    result = PackageNameValidation()
    if name is None:
        result.errors.append("name cannot be null")
        return result
    if not isinstance(name, str):
        result.errors.append("name must be a string")
        return result

    if not name:
        result.errors.append("name length must be greater than zero")
    if name.startswith("."):
        result.errors.append("name cannot start with a period")
    if name.startswith("_"):
        result.errors.append("name cannot start with an underscore")
    if name.strip() != name:
        result.errors.append("name cannot contain leading or trailing spaces")

    lowered = name.lower()
    for blacklisted in BLACKLIST:
        if lowered == blacklisted:
            result.errors.append(f"{blacklisted} is a blacklisted name")
    for core_module in NODE_CORE_MODULES:
        if lowered == core_module:
            result.warnings.append(f"{core_module} is a core module name")

    if len(name) > MAX_NAME_LENGTH:
        result.warnings.append(
            f"name can no longer contain more than {MAX_NAME_LENGTH} characters"
        )
    if lowered != name:
        result.warnings.append("name can no longer contain capital letters")
    if _SPECIAL_CHARACTERS.search(name.split("/")[-1]):
        result.warnings.append(
            "name can no longer contain special characters (\"~'!()*\")"
        )

    if not _is_url_safe(name) and not _is_valid_scoped_name(name):
        result.errors.append("name can only contain URL-friendly characters")

    return result
