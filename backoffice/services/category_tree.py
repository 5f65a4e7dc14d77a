"""
Category hierarchy helpers.

Categories are stored flat with an optional ``parent_id``. The dashboard
navigates them as a tree, so the builder turns the flat rows into a forest of
:class:`CategoryNode` objects. Every node is owned by a single id -> node map;
``children`` lists hold references to those same nodes, so the flat rows and
the tree never diverge.

Records accepted here can be ORM rows or plain mappings with ``id``,
``parent_id`` and ``view_order``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional

from backoffice.errors import NotFoundError, ValidationFailed


def _get(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _view_order(node: "CategoryNode") -> int:
    return node.view_order or 0


@dataclass
class CategoryNode:
    """A category record plus its immediate sub-categories"""

    record: Any
    children: List["CategoryNode"] = field(default_factory=list)

    @property
    def id(self) -> Hashable:
        return _get(self.record, "id")

    @property
    def parent_id(self) -> Optional[Hashable]:
        return _get(self.record, "parent_id")

    @property
    def view_order(self) -> Optional[int]:
        return _get(self.record, "view_order")

    def count(self) -> int:
        """Number of nodes in this subtree, including self"""
        return 1 + sum(child.count() for child in self.children)


@dataclass
class HierarchyReport:
    """Problems found in a flat category list"""

    dangling: List[Hashable] = field(default_factory=list)
    cyclic: List[Hashable] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.dangling and not self.cyclic


def build_category_tree(categories: Iterable[Any]) -> List[CategoryNode]:
    """Build the category forest, roots and children ordered by view_order.

    A record whose parent is missing is left out, as is anything on a parent
    cycle, since neither can be reached from a root. Never raises.
    """
    records = list(categories)

    # Pass 1: one node per id
    nodes: Dict[Hashable, CategoryNode] = {}
    for record in records:
        nodes[_get(record, "id")] = CategoryNode(record=record)

    # Pass 2: link into roots or the parent's children
    roots: List[CategoryNode] = []
    for record in records:
        node = nodes[_get(record, "id")]
        parent_id = _get(record, "parent_id")
        if parent_id is None:
            roots.append(node)
            continue
        parent = nodes.get(parent_id)
        if parent is not None:
            parent.children.append(node)

    # Stable sort keeps input order for equal view_order values
    roots.sort(key=_view_order)
    for node in nodes.values():
        node.children.sort(key=_view_order)

    return roots


def _parent_map(categories: Iterable[Any]) -> Dict[Hashable, Optional[Hashable]]:
    return {_get(record, "id"): _get(record, "parent_id") for record in categories}


def _is_own_ancestor(parents: Dict[Hashable, Optional[Hashable]], category_id: Hashable) -> bool:
    seen = set()
    current = parents.get(category_id)
    while current is not None and current in parents:
        if current == category_id:
            return True
        if current in seen:
            # Cycle above us that does not include category_id
            return False
        seen.add(current)
        current = parents[current]
    return False


def find_hierarchy_problems(categories: Iterable[Any]) -> HierarchyReport:
    """Report dangling parent references and categories that are their own ancestor"""
    parents = _parent_map(categories)
    report = HierarchyReport()

    for category_id, parent_id in parents.items():
        if parent_id is not None and parent_id not in parents:
            report.dangling.append(category_id)
        if _is_own_ancestor(parents, category_id):
            report.cyclic.append(category_id)

    return report


def check_parent_assignment(
    categories: Iterable[Any],
    category_id: Optional[Hashable],
    parent_id: Optional[Hashable],
) -> None:
    """Reject a parent that does not exist or would make a category its own ancestor.

    ``category_id`` is None when the category is being created.
    """
    if parent_id is None:
        return

    parents = _parent_map(categories)
    if parent_id not in parents:
        raise ValidationFailed(f"Parent category {parent_id} does not exist")

    if category_id is None:
        return

    if parent_id == category_id:
        raise ValidationFailed("A category cannot be its own parent")

    seen = set()
    current = parent_id
    while current is not None and current not in seen:
        if current == category_id:
            raise ValidationFailed(
                f"Category {parent_id} is a descendant of category {category_id}"
            )
        seen.add(current)
        current = parents.get(current)


def category_path(categories: Iterable[Any], category_id: Hashable) -> List[Any]:
    """Breadcrumb from the root down to ``category_id`` (inclusive)"""
    by_id = {_get(record, "id"): record for record in categories}
    if category_id not in by_id:
        raise NotFoundError("Category not found")

    path = []
    seen = set()
    current = category_id
    while current is not None and current in by_id and current not in seen:
        seen.add(current)
        record = by_id[current]
        path.append(record)
        current = _get(record, "parent_id")

    path.reverse()
    return path
