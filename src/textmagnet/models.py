"""Core records handed to the index and the clustering engines.

Word: a normalized token plus the containers (documents) it was seen in.
Document: a class or method identity, parsed from a container string.
Project: a named bag of words, clustered by the wordset magnets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Callable, Iterable, Optional

# Separator between a type path and a method name in a container string
METHOD_SEPARATOR = "#"


@dataclass(eq=False)
class Word:
    """A normalized token.

    Identity is the lowercased element: two Word objects with the same
    element in different case are the same word.

    Attributes:
        element: Token text
        value: Occurrence count (starts at 1)
        containers: Container ids the word occurred in, insertion ordered
    """

    element: str
    value: int = 1
    containers: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        # De-duplicate while keeping first-seen order
        self.containers = list(dict.fromkeys(c for c in self.containers if c))

    @classmethod
    def of(cls, element: str, *containers: str, count: int = 1) -> Word:
        """Shortcut to build a word seen in the given containers."""
        return cls(element=element, value=count, containers=list(containers))

    def add(self, container: str) -> None:
        """Track a container of this word (duplicates are ignored)."""
        if container and container not in self.containers:
            self.containers.append(container)

    def count(self, step: int = 1) -> int:
        """Increase the occurrence count by step and return the new count."""
        if step < 0:
            raise ValueError("count step must be non-negative")
        self.value += step
        return self.value

    @property
    def key(self) -> str:
        return self.element.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return self.element

    def __repr__(self) -> str:
        return f"Word({self.element!r}, count={self.value})"


@dataclass(eq=False)
class Document:
    """A class or method identity.

    Attributes:
        id: Dense index, stable only within the Index that created it
        path: Type path (dotted name or file path)
        method: Method name, "" for type-level documents
        namespace: Dotted prefix of the path
        short_name: Simple type name
        transformed_name: short_name after singularization and spelling
            correction (computed by the caller)
    """

    id: int
    path: str
    method: str = ""
    namespace: str = ""
    short_name: str = ""
    transformed_name: str = ""

    def __post_init__(self) -> None:
        if not self.short_name:
            self.namespace, self.short_name = split_path(self.path)
        if not self.transformed_name:
            self.transformed_name = self.short_name

    @classmethod
    def from_container(
        cls,
        id: int,
        container: str,
        transform: Optional[Callable[[str], str]] = None,
    ) -> Document:
        """Parse a ``path#method`` container string.

        Args:
            id: Document id
            container: Container string; the method follows the last '#'
            transform: Optional collaborator producing the transformed name
                from the short name (singularization, spell correction)

        Returns:
            A new Document
        """
        if container and METHOD_SEPARATOR in container:
            idx = container.rindex(METHOD_SEPARATOR)
            path, method = container[:idx], container[idx + 1 :]
        else:
            path, method = container, ""

        namespace, short_name = split_path(path)
        transformed = transform(short_name) if transform is not None else short_name
        return cls(
            id=id,
            path=path,
            method=method,
            namespace=namespace,
            short_name=short_name,
            transformed_name=transformed or short_name,
        )

    @property
    def qualified_name(self) -> str:
        return f"{self.path}{METHOD_SEPARATOR}{self.method}" if self.method else self.path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self.qualified_name.lower() == other.qualified_name.lower()

    def __hash__(self) -> int:
        return hash(self.qualified_name.lower())

    def __str__(self) -> str:
        return self.qualified_name

    def __repr__(self) -> str:
        return f"Document({self.id}, {self.qualified_name!r})"


def split_path(path: str) -> tuple[str, str]:
    """Split a type path into (namespace, short name).

    "com.jme3.light.SpotLight"   -> ("com.jme3.light", "SpotLight")
    "src/geo/BoxShape.java"      -> ("src.geo", "BoxShape")
    """
    if not path:
        return "", ""

    if "/" in path or "\\" in path:
        pure = PurePath(path.replace("\\", "/"))
        parents = [p for p in pure.parent.parts if p not in ("/", ".", "..")]
        return ".".join(parents), pure.stem

    if "." in path:
        namespace, _, short_name = path.rpartition(".")
        return namespace, short_name

    return "", path


@dataclass(eq=False)
class Project:
    """A named bag of words.

    Attributes:
        name: Project name (unique within one clustering call)
        words: Word set, insertion ordered
    """

    name: str
    words: dict[Word, None] = field(default_factory=dict)

    @classmethod
    def create(cls, name: str, words: Iterable[Word] = ()) -> Project:
        project = cls(name=name)
        project.add_all(words)
        return project

    def add(self, word: Word) -> None:
        self.words.setdefault(word, None)

    def add_all(self, words: Iterable[Word]) -> None:
        for word in words or ():
            if word is not None:
                self.add(word)

    @property
    def word_set(self) -> set[Word]:
        return set(self.words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self.name == other.name and self.word_set == other.word_set

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"{self.name} with {len(self.words)} words"


def words_of(projects: Iterable[Project]) -> set[Word]:
    """Union of the words of every project."""
    words: set[Word] = set()
    for project in projects:
        words.update(project.words)
    return words
