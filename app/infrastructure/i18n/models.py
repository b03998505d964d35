"""Translation models for the i18n system.

Defines the supported locales, persisted translation records and the
message tree served to the page-rendering layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Union

import structlog

from infrastructure.i18n.errors import UnsupportedLocaleError

logger = structlog.get_logger()


class Locale(str, Enum):
    """Supported locale codes."""

    EN = "en"
    AR = "ar"
    BN = "bn"
    ES = "es"
    FR = "fr"
    DE = "de"
    IT = "it"
    PT = "pt"
    RU = "ru"
    JA = "ja"
    ZH = "zh"
    VI = "vi"
    TH = "th"
    KM = "km"
    ID = "id"
    NE = "ne"
    UZ = "uz"
    FIL = "fil"
    MN = "mn"
    UR = "ur"
    SI = "si"
    TA = "ta"
    MY = "my"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Args:
            locale_str: Locale code (e.g., "fr", " FR ").

        Returns:
            Matching Locale enum value.

        Raises:
            UnsupportedLocaleError: If the code is not supported.
        """
        if isinstance(locale_str, cls):
            return locale_str
        try:
            return cls(str(locale_str).strip().lower())
        except ValueError as e:
            raise UnsupportedLocaleError(f"Unsupported locale: {locale_str}") from e

    @classmethod
    def normalize(
        cls,
        locale: Union["Locale", str, None],
        default: Optional["Locale"] = None,
    ) -> "Locale":
        """Return the matching Locale, or the default for anything unsupported.

        Codes must match exactly ("FR" and " fr" are unsupported); use
        from_string() for lenient parsing of admin input.
        """
        if isinstance(locale, cls):
            return locale
        try:
            return cls(locale)
        except ValueError:
            return default or DEFAULT_LOCALE

    @classmethod
    def codes(cls) -> list[str]:
        """All supported locale codes."""
        return [locale.value for locale in cls]


DEFAULT_LOCALE = Locale.EN


@dataclass(frozen=True)
class TranslationRecord:
    """A persisted translation value.

    Keys are dot-delimited paths (e.g., "nav.aboutUs") and are unique per
    locale. The namespace defaults to the first path segment.

    Attributes:
        key: Dot-delimited message path.
        locale: Locale the value belongs to.
        value: Translated text.
        namespace: Grouping label (e.g., "nav", "common").
        created_at: ISO 8601 creation timestamp, when known.
        updated_at: ISO 8601 last update timestamp, when known.
    """

    key: str
    locale: Locale
    value: str
    namespace: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.locale, Locale):
            object.__setattr__(self, "locale", Locale.from_string(self.locale))
        if not self.namespace:
            object.__setattr__(self, "namespace", self.key.split(".", 1)[0])

    @property
    def path(self) -> list[str]:
        """Key split into path segments."""
        return self.key.split(".")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return {
            "key": self.key,
            "locale": self.locale.value,
            "value": self.value,
            "namespace": self.namespace,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


MessageNode = Union["MessageTree", str]


@dataclass
class MessageTree:
    """Nested message structure for one locale.

    Every child is either another MessageTree (a branch) or a str (a leaf),
    so every operation below handles exactly three shapes: branch/branch,
    branch/leaf and leaf/leaf.

    Trees handed out by the resolver are shared with the cache and must be
    treated as read-only; use copy() before mutating.
    """

    children: Dict[str, MessageNode] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MessageTree":
        """Build a tree from a parsed JSON document.

        Mappings become branches and strings become leaves. Numbers and
        booleans are stringified; null and list values are dropped.
        """
        tree = cls()
        for key, value in data.items():
            key = str(key)
            if isinstance(value, Mapping):
                tree.children[key] = cls.from_dict(value)
            elif isinstance(value, str):
                tree.children[key] = value
            elif isinstance(value, bool):
                tree.children[key] = "true" if value else "false"
            elif isinstance(value, (int, float)):
                tree.children[key] = str(value)
        return tree

    @classmethod
    def from_records(cls, records: Iterable[TranslationRecord]) -> "MessageTree":
        """Reconstruct a tree from flat records by splitting keys on ".".

        The result does not depend on record order. When one key is a prefix
        of another ("nav" and "nav.home") the branch wins over the leaf.
        Records whose key has an empty segment ("nav.", "a..b") are skipped.
        """
        tree = cls()
        for record in records:
            try:
                tree.insert(record.key, record.value)
            except ValueError:
                logger.warning(
                    "skipped_invalid_translation_key",
                    locale=record.locale.value,
                    key=record.key,
                )
        return tree

    def insert(self, path: str, value: str) -> bool:
        """Insert a leaf at a dot-delimited path.

        Leaves on the way down are replaced by branches; a leaf is never
        written over an existing branch.

        Returns:
            True if the value was stored, False if a branch occupies the path.

        Raises:
            ValueError: If the path is empty or has empty segments.
        """
        segments = path.split(".")
        if not all(segments):
            raise ValueError(f"Invalid message path: {path!r}")

        node = self
        for segment in segments[:-1]:
            child = node.children.get(segment)
            if not isinstance(child, MessageTree):
                child = MessageTree()
                node.children[segment] = child
            node = child

        if isinstance(node.children.get(segments[-1]), MessageTree):
            return False
        node.children[segments[-1]] = value
        return True

    def get(self, path: str) -> Optional[MessageNode]:
        """Look up a leaf or branch by dot-delimited path."""
        node: MessageNode = self
        for segment in path.split("."):
            if not isinstance(node, MessageTree) or segment not in node.children:
                return None
            node = node.children[segment]
        return node

    def merge(self, override: "MessageTree") -> "MessageTree":
        """Deep-merge override onto this tree, returning a new tree.

        For every key in either tree: two branches merge recursively,
        otherwise the override's node wins when present, else this tree's
        node is kept. Neither input is modified.
        """
        merged = self.copy()
        for key, node in override.children.items():
            current = merged.children.get(key)
            if isinstance(node, MessageTree) and isinstance(current, MessageTree):
                merged.children[key] = current.merge(node)
            elif isinstance(node, MessageTree):
                merged.children[key] = node.copy()
            else:
                merged.children[key] = node
        return merged

    def copy(self) -> "MessageTree":
        """Deep copy of the tree."""
        return MessageTree(
            {
                key: node.copy() if isinstance(node, MessageTree) else node
                for key, node in self.children.items()
            }
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain nested dicts (JSON-serializable)."""
        return {
            key: node.to_dict() if isinstance(node, MessageTree) else node
            for key, node in self.children.items()
        }

    def flatten(self, prefix: str = "") -> Dict[str, str]:
        """Flatten to {"dot.path": value} for every leaf."""
        flat: Dict[str, str] = {}
        for key, node in self.children.items():
            path = f"{prefix}.{key}" if prefix else key
            if isinstance(node, MessageTree):
                flat.update(node.flatten(path))
            else:
                flat[path] = node
        return flat

    def is_empty(self) -> bool:
        """True if the tree has no children."""
        return not self.children

    def __len__(self) -> int:
        return len(self.children)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.get(path) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)
