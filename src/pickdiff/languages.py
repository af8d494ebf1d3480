"""File extension to language lookup for pickdiff renderers."""

import posixpath
from types import MappingProxyType
from typing import Mapping, Optional

FALLBACK_FENCE_LANGUAGE = "diff"

EXTENSION_LANGUAGES: Mapping[str, str] = MappingProxyType(
    {
        # JavaScript/TypeScript
        "js": "javascript",
        "jsx": "javascript",
        "ts": "typescript",
        "tsx": "typescript",
        # Scripting
        "py": "python",
        "rb": "ruby",
        "php": "php",
        "sh": "bash",
        "bash": "bash",
        "zsh": "bash",
        "r": "r",
        # C family
        "c": "c",
        "h": "c",
        "cpp": "cpp",
        "cc": "cpp",
        "cxx": "cpp",
        "hpp": "cpp",
        "cs": "csharp",
        "m": "objectivec",
        "mm": "objectivec",
        # JVM and native
        "java": "java",
        "kt": "kotlin",
        "scala": "scala",
        "go": "go",
        "rs": "rust",
        "swift": "swift",
        # Markup and styles
        "html": "html",
        "htm": "html",
        "xml": "xml",
        "css": "css",
        "scss": "scss",
        "sass": "sass",
        "less": "less",
        "md": "markdown",
        # Data
        "json": "json",
        "yaml": "yaml",
        "yml": "yaml",
        "sql": "sql",
    }
)


def file_extension(path: str) -> Optional[str]:
    """Lowercase extension of the last path component, without the dot."""
    name = posixpath.basename(path)
    if "." not in name:
        return None
    extension = name.rsplit(".", 1)[1].lower()
    return extension or None


def language_for_path(path: str) -> Optional[str]:
    """Language used for syntax highlighting, or None when unknown."""
    extension = file_extension(path)
    if extension is None:
        return None
    return EXTENSION_LANGUAGES.get(extension)


def fence_language_for_path(path: str) -> str:
    """Code fence tag for ``path``, falling back to the generic diff tag."""
    return language_for_path(path) or FALLBACK_FENCE_LANGUAGE
