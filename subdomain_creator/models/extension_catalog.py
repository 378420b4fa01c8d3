"""
Extension catalog - the fixed allow-list of domain extensions.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple


DEFAULT_EXTENSIONS: Tuple[str, ...] = (
    '.net', '.cloud', '.dev', '.online', '.is.dev',
    '.app', '.tech', '.studio', '.digital', '.world',
    '.space', '.site', '.store', '.shop', '.blog',
    '.io', '.ai', '.co', '.me', '.xyz',
)


@dataclass(frozen=True)
class ExtensionCatalog:
    """
    Immutable, ordered set of allowed domain extensions.

    Attributes:
        extensions: Extensions in display order, each starting with '.'
    """
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS

    def __post_init__(self):
        """Validate invariants"""
        # Accept any sequence but store a tuple
        object.__setattr__(self, 'extensions', tuple(self.extensions))

        seen = set()
        for ext in self.extensions:
            if not ext or not ext.startswith('.') or ext == '.':
                raise ValueError(f"Invalid extension '{ext}': must be non-empty and start with '.'")
            if ext in seen:
                raise ValueError(f"Duplicate extension '{ext}'")
            seen.add(ext)

    @classmethod
    def from_string(cls, extensions_str: Optional[str]) -> 'ExtensionCatalog':
        """
        Create ExtensionCatalog from comma-separated string.

        Args:
            extensions_str: Comma-separated extensions or None

        Returns:
            ExtensionCatalog instance (the default catalog if the string is empty)
        """
        if not extensions_str or not extensions_str.strip():
            return cls()

        extensions = [e.strip() for e in extensions_str.split(',') if e.strip()]
        return cls(extensions=tuple(extensions))

    def contains(self, extension: str) -> bool:
        """Check whether an extension is in the catalog"""
        return extension in self.extensions

    def match_extension(self, domain: str) -> Optional[str]:
        """
        Find the catalog extension a full domain name ends with.

        The longest match wins, so 'abc.is.dev' resolves to '.is.dev'.

        Args:
            domain: Full domain name

        Returns:
            Matching extension or None
        """
        matches = [ext for ext in self.extensions if domain.endswith(ext) and len(domain) > len(ext)]
        if not matches:
            return None
        return max(matches, key=len)

    def to_list(self) -> List[str]:
        """Get extensions as a plain list"""
        return list(self.extensions)

    def __contains__(self, extension: object) -> bool:
        return extension in self.extensions

    def __iter__(self) -> Iterator[str]:
        return iter(self.extensions)

    def __len__(self) -> int:
        return len(self.extensions)
