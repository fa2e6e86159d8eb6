"""Fragment dependency collection for operation documents.

Given an operation and every fragment defined in the assembled document,
works out which fragment definitions that operation needs to be sent on
its own.
"""

from graphql import (
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    OperationDefinitionNode,
    SelectionSetNode,
)

from .errors import MissingFragmentError

FragmentTable = dict[str, FragmentDefinitionNode]


def collect_all_fragment_definitions(document: DocumentNode) -> FragmentTable:
    """Map each top-level fragment name to its definition."""
    fragments: FragmentTable = {}
    for definition in document.definitions:
        if isinstance(definition, FragmentDefinitionNode):
            fragments[definition.name.value] = definition
    return fragments


def collect_fragment_references(
    node: OperationDefinitionNode | FragmentDefinitionNode,
    fragments: FragmentTable,
) -> list[str]:
    """Collect the names of all fragments node needs, transitively.

    A spread's own dependencies come before the spread's name. Repeated
    spreads are kept, one entry per reference.

    Raises:
        MissingFragmentError: If a spread names an undefined fragment
    """
    references: list[str] = []
    # Fragments currently being expanded, so self-referencing ones terminate
    expanding: set[str] = set()
    if isinstance(node, FragmentDefinitionNode):
        expanding.add(node.name.value)

    def walk(selection_set: SelectionSetNode | None):
        if selection_set is None:
            return
        for selection in selection_set.selections:
            if isinstance(selection, FieldNode):
                walk(selection.selection_set)
            elif isinstance(selection, InlineFragmentNode):
                walk(selection.selection_set)
            elif isinstance(selection, FragmentSpreadNode):
                name = selection.name.value
                fragment = fragments.get(name)
                if fragment is None:
                    raise MissingFragmentError(name)
                if name in expanding:
                    continue
                expanding.add(name)
                walk(fragment.selection_set)
                expanding.discard(name)
                references.append(name)

    walk(node.selection_set)
    return references


def fragments_for_operation(
    operation: OperationDefinitionNode, fragments: FragmentTable
) -> list[FragmentDefinitionNode]:
    """Return the fragment definitions operation needs, dependencies first."""
    return [fragments[name] for name in collect_fragment_references(operation, fragments)]
