"""CSS selector building utilities."""

import logging
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)


DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Base error for invalid selector construction."""
    pass


class DuplicateError(SelectorError):
    """Raised when element, id or pseudo-element is set twice."""
    pass


class OrderViolation(SelectorError):
    """Raised when a fragment is added after a later-kind fragment."""
    pass


class FragmentKind(Enum):
    """Kind of compound selector fragment."""
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"


class Combinator(str, Enum):
    """CSS combinator tokens."""
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


class Selector:
    """A compound selector under construction, or a combination of two.

    Fragments must follow the canonical CSS order:

        element#id.class[attr]:pseudo-class::pseudo-element

    Chained calls mutate the instance and return it. Element, id and
    pseudo-element may be set once; classes and pseudo-classes accumulate.
    """

    # Canonical order of fragments within one compound selector
    CANONICAL_ORDER = [
        FragmentKind.ELEMENT,
        FragmentKind.ID,
        FragmentKind.CLASS,
        FragmentKind.ATTRIBUTE,
        FragmentKind.PSEUDO_CLASS,
        FragmentKind.PSEUDO_ELEMENT,
    ]

    # Kinds that may occur at most once
    UNIQUE_KINDS = frozenset({
        FragmentKind.ELEMENT,
        FragmentKind.ID,
        FragmentKind.PSEUDO_ELEMENT,
    })

    def __init__(self):
        self.tag = ""
        self.id_part = ""
        self.class_parts = ""
        self.attr_parts = ""
        self.pseudo_class_parts = ""
        self.pseudo_element_part = ""
        self.combined_expression = ""

    def element(self, name: str) -> "Selector":
        self._check(FragmentKind.ELEMENT)
        self.tag = name
        return self

    def id(self, name: str) -> "Selector":
        self._check(FragmentKind.ID)
        self.id_part = f"#{name}"
        return self

    def class_(self, name: str) -> "Selector":
        self._check(FragmentKind.CLASS)
        self.class_parts += f".{name}"
        return self

    def attr(self, value: str) -> "Selector":
        """Set the attribute fragment.

        The value is the raw attribute expression, e.g. ``href$=".png"``.
        There is a single attribute slot: a second call replaces the first.
        """
        self._check(FragmentKind.ATTRIBUTE)
        self.attr_parts = f"[{value}]"
        return self

    def pseudo_class(self, name: str) -> "Selector":
        self._check(FragmentKind.PSEUDO_CLASS)
        self.pseudo_class_parts += f":{name}"
        return self

    def pseudo_element(self, name: str) -> "Selector":
        self._check(FragmentKind.PSEUDO_ELEMENT)
        self.pseudo_element_part = f"::{name}"
        return self

    def combine(
        self,
        left: "Selector",
        combinator: Union[Combinator, str],
        right: "Selector"
    ) -> "Selector":
        """Store the combination of two selectors joined by a combinator.

        Args:
            left: Selector rendered before the combinator.
            combinator: Combinator token, used verbatim.
            right: Selector rendered after the combinator.

        Returns:
            This selector, now rendering as the combination.
        """
        token = combinator.value if isinstance(combinator, Combinator) else combinator
        self.combined_expression = f"{left.stringify()} {token} {right.stringify()}"
        return self

    def stringify(self) -> str:
        """Render the selector string."""
        if self.combined_expression:
            return self.combined_expression
        return (
            f"{self.tag}{self.id_part}{self.class_parts}"
            f"{self.attr_parts}{self.pseudo_class_parts}{self.pseudo_element_part}"
        )

    render = stringify

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"Selector({self.stringify()!r})"

    def _fragment(self, kind: FragmentKind) -> str:
        """Return the current text of a fragment kind."""
        return {
            FragmentKind.ELEMENT: self.tag,
            FragmentKind.ID: self.id_part,
            FragmentKind.CLASS: self.class_parts,
            FragmentKind.ATTRIBUTE: self.attr_parts,
            FragmentKind.PSEUDO_CLASS: self.pseudo_class_parts,
            FragmentKind.PSEUDO_ELEMENT: self.pseudo_element_part,
        }[kind]

    def _check(self, kind: FragmentKind) -> None:
        """Validate that a fragment of the given kind may be added now.

        Args:
            kind: Kind of the fragment about to be set.

        Raises:
            DuplicateError: If a single-occurrence fragment is already set.
            OrderViolation: If a fragment of a later kind is already set.
        """
        if kind in self.UNIQUE_KINDS and self._fragment(kind):
            logger.debug(f"Rejected duplicate {kind.value} on {self!r}")
            raise DuplicateError(DUPLICATE_MESSAGE)

        position = self.CANONICAL_ORDER.index(kind)
        for later in self.CANONICAL_ORDER[position + 1:]:
            if self._fragment(later):
                logger.debug(f"Rejected {kind.value} after {later.value} on {self!r}")
                raise OrderViolation(ORDER_MESSAGE)


class CssSelectorBuilder:
    """Facade that starts selector chains.

    Usage:
        >>> builder = CssSelectorBuilder()
        >>> builder.id("main").class_("container").stringify()
        '#main.container'
        >>> builder.combine(builder.element("ul"), ">", builder.element("li")).stringify()
        'ul > li'
    """

    def element(self, name: str) -> Selector:
        return Selector().element(name)

    def id(self, name: str) -> Selector:
        return Selector().id(name)

    def class_(self, name: str) -> Selector:
        return Selector().class_(name)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, name: str) -> Selector:
        return Selector().pseudo_class(name)

    def pseudo_element(self, name: str) -> Selector:
        return Selector().pseudo_element(name)

    def combine(
        self,
        left: Selector,
        combinator: Union[Combinator, str],
        right: Selector
    ) -> Selector:
        return Selector().combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
