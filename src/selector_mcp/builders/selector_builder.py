"""Fluent builder for CSS selector strings.

A compound selector is made of fragments that must appear in a fixed order::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may occur several times

Compounds are joined with the combinators ``' '``, ``'+'``, ``'~'`` and ``'>'``.
Every builder call returns a new :class:`Selector`; existing selectors are
never modified, so partial chains can be shared and extended freely.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Collection, Dict, Iterable, List, Mapping, Optional, Tuple

from ..utils.errors import DuplicateFragmentError, FragmentOrderError, SelectorError
from ..utils.logging_config import LoggerMixin

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class FragmentKind(str, Enum):
    """Kinds of selector fragments."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    COMBINATOR = "combinator"

    @property
    def unique(self) -> bool:
        return self in UNIQUE_KINDS


_RANKS: Dict[FragmentKind, int] = {
    FragmentKind.ELEMENT: 0,
    FragmentKind.ID: 1,
    FragmentKind.CLASS: 2,
    FragmentKind.ATTRIBUTE: 3,
    FragmentKind.PSEUDO_CLASS: 4,
    FragmentKind.PSEUDO_ELEMENT: 5,
}

UNIQUE_KINDS = frozenset({FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT})

_TEMPLATES: Dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
    FragmentKind.COMBINATOR: " {} ",
}

# Names accepted in part mappings, see Selector.from_parts
KIND_ALIASES: Dict[str, FragmentKind] = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "attribute": FragmentKind.ATTRIBUTE,
    "pseudo_class": FragmentKind.PSEUDO_CLASS,
    "pseudoClass": FragmentKind.PSEUDO_CLASS,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo_element": FragmentKind.PSEUDO_ELEMENT,
    "pseudoElement": FragmentKind.PSEUDO_ELEMENT,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
    "combinator": FragmentKind.COMBINATOR,
}


@dataclass(frozen=True)
class Fragment:
    """One atomic piece of a selector, value already carrying its sigil."""

    kind: FragmentKind
    value: str

    @classmethod
    def create(cls, kind: FragmentKind, raw: str) -> "Fragment":
        return cls(kind=kind, value=_TEMPLATES[kind].format(raw))


@dataclass(frozen=True)
class Selector:
    """Immutable sequence of fragments forming a (possibly combined) selector."""

    fragments: Tuple[Fragment, ...] = ()

    def element(self, name: str) -> "Selector":
        return self._append(FragmentKind.ELEMENT, name)

    def id(self, name: str) -> "Selector":
        return self._append(FragmentKind.ID, name)

    def class_(self, name: str) -> "Selector":
        return self._append(FragmentKind.CLASS, name)

    def attr(self, expr: str) -> "Selector":
        return self._append(FragmentKind.ATTRIBUTE, expr)

    def pseudo_class(self, name: str) -> "Selector":
        return self._append(FragmentKind.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> "Selector":
        return self._append(FragmentKind.PSEUDO_ELEMENT, name)

    def combine(self, combinator: str, other: "Selector") -> "Selector":
        """Join ``other`` to this selector with ``combinator``."""
        joint = Fragment.create(FragmentKind.COMBINATOR, combinator)
        return Selector(self.fragments + (joint,) + other.fragments)

    def stringify(self) -> str:
        """Render the selector. Repeatable; the selector is left untouched."""
        return "".join(fragment.value for fragment in self.fragments)

    def __str__(self) -> str:
        return self.stringify()

    def compounds(self) -> List[Tuple[Fragment, ...]]:
        """Split the fragments into the compounds between combinators."""
        runs: List[Tuple[Fragment, ...]] = []
        current: List[Fragment] = []
        for fragment in self.fragments:
            if fragment.kind is FragmentKind.COMBINATOR:
                runs.append(tuple(current))
                current = []
            else:
                current.append(fragment)
        runs.append(tuple(current))
        return runs

    def specificity(self) -> Tuple[int, int, int]:
        """
        Calculate CSS specificity from the fragment kinds.

        Returns tuple of (id_count, class_count, type_count), where attributes
        and pseudo-classes count as classes and pseudo-elements as types.
        """
        ids = classes = types = 0
        for fragment in self.fragments:
            if fragment.kind is FragmentKind.ID:
                ids += 1
            elif fragment.kind in (
                FragmentKind.CLASS,
                FragmentKind.ATTRIBUTE,
                FragmentKind.PSEUDO_CLASS,
            ):
                classes += 1
            elif fragment.kind in (FragmentKind.ELEMENT, FragmentKind.PSEUDO_ELEMENT):
                types += 1
        return (ids, classes, types)

    @classmethod
    def from_parts(
        cls,
        parts: Iterable[Mapping[str, Any]],
        combinators: Optional[Collection[str]] = None,
    ) -> "Selector":
        """
        Build a selector from ``{"kind": ..., "value": ...}`` mappings.

        Combinator parts start a new compound and must sit between two
        non-empty compounds. The same uniqueness and ordering rules apply as
        for the fluent calls.

        Args:
            parts: Selector parts in order
            combinators: Allowed combinator values; any value when ``None``

        Raises:
            SelectorError: If a part has an unknown kind or breaks a rule
        """
        selector = cls()
        previous: Optional[FragmentKind] = None
        for index, part in enumerate(parts):
            kind_name = str(part.get("kind", ""))
            kind = KIND_ALIASES.get(kind_name)
            if kind is None:
                raise SelectorError(
                    f"Unknown selector part kind '{kind_name}' at position {index}",
                    selector=selector.stringify(),
                    kind=kind_name,
                )
            value = str(part.get("value", ""))
            if kind is FragmentKind.COMBINATOR:
                if combinators is not None and value not in combinators:
                    raise SelectorError(
                        f"Unsupported combinator '{value}' at position {index}, "
                        f"expected one of {list(combinators)}",
                        selector=selector.stringify(),
                        kind=kind.value,
                    )
                if previous is None or previous is FragmentKind.COMBINATOR:
                    raise SelectorError(
                        f"Combinator at position {index} has no selector on its left",
                        selector=selector.stringify(),
                        kind=kind.value,
                    )
                selector = Selector(
                    selector.fragments + (Fragment.create(kind, value),)
                )
            else:
                selector = selector._append(kind, value)
            previous = kind

        if previous is FragmentKind.COMBINATOR:
            raise SelectorError(
                "Selector cannot end with a combinator",
                selector=selector.stringify(),
                kind=FragmentKind.COMBINATOR.value,
            )
        return selector

    def _current_compound(self) -> Tuple[Fragment, ...]:
        for position in range(len(self.fragments) - 1, -1, -1):
            if self.fragments[position].kind is FragmentKind.COMBINATOR:
                return self.fragments[position + 1 :]
        return self.fragments

    def _append(self, kind: FragmentKind, raw: str) -> "Selector":
        compound = self._current_compound()
        rank = _RANKS[kind]

        if kind.unique and any(fragment.kind is kind for fragment in compound):
            raise DuplicateFragmentError(
                f"{DUPLICATE_MESSAGE} (duplicate {kind.value})",
                selector=self.stringify(),
                kind=kind.value,
            )

        for fragment in compound:
            if _RANKS[fragment.kind] > rank:
                raise FragmentOrderError(
                    f"{ORDER_MESSAGE} ({kind.value} cannot follow {fragment.kind.value})",
                    selector=self.stringify(),
                    kind=kind.value,
                )

        return Selector(self.fragments + (Fragment.create(kind, raw),))


class SelectorBuilder(LoggerMixin):
    """Entry point for building selectors; each call starts a fresh selector."""

    def element(self, name: str) -> Selector:
        return Selector().element(name)

    def id(self, name: str) -> Selector:
        return Selector().id(name)

    def class_(self, name: str) -> Selector:
        return Selector().class_(name)

    def attr(self, expr: str) -> Selector:
        return Selector().attr(expr)

    def pseudo_class(self, name: str) -> Selector:
        return Selector().pseudo_class(name)

    def pseudo_element(self, name: str) -> Selector:
        return Selector().pseudo_element(name)

    def combine(self, first: Selector, combinator: str, second: Selector) -> Selector:
        """Join two selectors, e.g. ``combine(element("div"), "+", element("span"))``."""
        return first.combine(combinator, second)

    def build(
        self,
        parts: Iterable[Mapping[str, Any]],
        combinators: Optional[Collection[str]] = None,
    ) -> Selector:
        """Build a selector from part mappings, see :meth:`Selector.from_parts`."""
        try:
            return Selector.from_parts(parts, combinators)
        except SelectorError as e:
            self.logger.debug(f"Rejected selector parts: {e.message}")
            raise

    def stringify(self, selector: Selector) -> str:
        return selector.stringify()


def stringify(selector: Selector) -> str:
    """Render ``selector`` to its CSS string."""
    return selector.stringify()


css_selector_builder = SelectorBuilder()
