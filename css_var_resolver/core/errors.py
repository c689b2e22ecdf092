from __future__ import annotations

from typing import List, Optional, Tuple

__all__ = [
    "CssVarResolverError",
    "CssParseError",
    "ChunkTransformError",
    "CssSourceError",
    "ConfigError",
]


class CssVarResolverError(Exception):
    """Base class for all errors raised by the resolver."""


class CssParseError(CssVarResolverError):
    """Structural CSS syntax error reported by the codec."""

    def __init__(
        self,
        message: str,
        *,
        line: Optional[int] = None,
        column: Optional[int] = None,
        context: str = "",
    ) -> None:
        self.reason = message
        self.line = line
        self.column = column
        self.context = context
        location = f" at {line}:{column}" if line is not None else ""
        text = f"CSS parse error{location}: {message}"
        if context:
            text += f' near "{context}"'
        super().__init__(text)


class ChunkTransformError(CssVarResolverError):
    """Raised when individual source chunks fail to parse."""

    def __init__(self, failures: List[Tuple[int, CssParseError]]) -> None:
        self.failures = failures
        indices = ", ".join(str(index) for index, _ in failures)
        details = "; ".join(f"[{index}] {err}" for index, err in failures)
        super().__init__(f"CSS chunk(s) {indices} failed to parse: {details}")

    @property
    def indices(self) -> List[int]:
        return [index for index, _ in self.failures]


class CssSourceError(CssVarResolverError):
    """Raised when a CSS source path cannot be read."""


class ConfigError(CssVarResolverError):
    """Raised for invalid resolver configuration."""
