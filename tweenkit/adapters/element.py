"""
In-memory visual target.

StyleElement satisfies the VisualTarget protocol without any rendering
backend. It is useful headless, in tests, and as a model for binding real
widgets: inline ``style`` overrides a fixed ``computed`` base, and children
form a simple tree so ``remove_on_complete`` can detach them.
"""

from typing import Any, Dict, List, Optional

from .protocol import TransformChannel


class StyleElement:
    """
    Minimal style-bearing element.

    Attributes:
        tag: Free-form element name, used in repr only
        style: Inline style values written by animations
        computed: Base values returned when no inline value is set
        transforms: Transform channel cache owned by the visual adapter
        parent: Containing element, or None when detached
    """

    def __init__(
        self,
        tag: str = "div",
        style: Optional[Dict[str, Any]] = None,
        computed: Optional[Dict[str, Any]] = None,
        parent: Optional["StyleElement"] = None,
    ):
        self.tag = tag
        self.style: Dict[str, Any] = dict(style or {})
        self.computed: Dict[str, Any] = dict(computed or {})
        self.transforms: Dict[str, TransformChannel] = {}
        self.parent: Optional[StyleElement] = None
        self.children: List[StyleElement] = []
        if parent is not None:
            parent.append_child(self)

    def get_computed_style(self, property: str) -> Any:
        """Inline value if set, else the computed base, else ""."""
        if property in self.style:
            return self.style[property]
        return self.computed.get(property, "")

    def append_child(self, child: "StyleElement") -> "StyleElement":
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: "StyleElement") -> None:
        if child in self.children:
            self.children.remove(child)
        child.parent = None

    @property
    def is_connected(self) -> bool:
        return self.parent is not None

    def __repr__(self) -> str:
        return f"<StyleElement {self.tag} at 0x{id(self):x}>"


__all__ = ["StyleElement"]
