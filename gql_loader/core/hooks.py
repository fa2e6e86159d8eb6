"""Generation hooks for customizing generated modules.

Provides protocols for document transforms, which rewrite each document
before it is serialized, and post-generation hooks, which transform the
generated module text.

Example usage:
    from gql_loader.core.hooks import HookRunner, AddHeaderHook, AddTypenameTransform

    runner = HookRunner()
    runner.add_document_transform(AddTypenameTransform())
    runner.add_post_hook(AddHeaderHook("/* eslint-disable */"))

    generator = CodeGenerator(
        map_document_node=runner.run_document_transforms,
        hooks=runner,
    )
"""

from typing import Protocol, runtime_checkable

from graphql import (
    DocumentNode,
    FieldNode,
    NameNode,
    OperationDefinitionNode,
    SelectionSetNode,
    Visitor,
    visit,
)

TYPENAME_FIELD = "__typename"


@runtime_checkable
class DocumentTransform(Protocol):
    """Protocol for document transforms.

    Transforms receive each document (the full document and every
    per-operation document) before serialization and return the document
    to serialize. They must not mutate the document they are given, since
    definitions are shared between documents.

    Example:
        class StripDescriptions(DocumentTransform):
            def transform_document(self, document: DocumentNode) -> DocumentNode:
                return visit(document, MyVisitor())
    """

    def transform_document(self, document: DocumentNode) -> DocumentNode:
        """Called before a document is serialized.

        Args:
            document: The parsed or synthetic document

        Returns:
            The (possibly rewritten) document to serialize
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Post-generation hooks receive the generated module text and can
    transform it before it is handed back to the build tool.
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called after a module is generated.

        Args:
            filename: The entry file the module was generated for
            content: The generated module text

        Returns:
            The (possibly transformed) module text
        """
        ...


class _TypenameVisitor(Visitor):
    """Adds __typename to selection sets below the operation root."""

    def leave_selection_set(self, node: SelectionSetNode, _key, parent, *_args):
        if isinstance(parent, OperationDefinitionNode):
            return None
        for selection in node.selections:
            if isinstance(selection, FieldNode) and selection.name.value == TYPENAME_FIELD:
                return None
        typename = FieldNode(
            name=NameNode(value=TYPENAME_FIELD),
            arguments=(),
            directives=(),
        )
        return SelectionSetNode(selections=(*node.selections, typename), loc=node.loc)


class AddTypenameTransform:
    """Built-in transform that requests __typename on every object selection.

    The root selection set of each operation is left alone, as are
    selection sets that already ask for __typename.

    Example:
        generator = CodeGenerator(map_document_node=AddTypenameTransform())
    """

    def transform_document(self, document: DocumentNode) -> DocumentNode:
        """Return a copy of document with __typename fields added."""
        return visit(document, _TypenameVisitor())

    def __call__(self, document: DocumentNode) -> DocumentNode:
        return self.transform_document(document)


class AddHeaderHook:
    """Built-in hook to add a header to generated modules.

    Example:
        hook = AddHeaderHook("/* Auto-generated - do not edit */")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        """Add a header to the beginning of the module."""
        if not self.header.endswith("\n"):
            header = self.header + "\n\n"
        else:
            header = self.header + "\n"
        return header + content


class HookRunner:
    """Runs a collection of transforms and hooks in order."""

    def __init__(self):
        self.document_transforms: list[DocumentTransform] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_document_transform(self, transform: DocumentTransform):
        """Add a document transform."""
        self.document_transforms.append(transform)

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generation hook."""
        self.post_hooks.append(hook)

    def run_document_transforms(self, document: DocumentNode) -> DocumentNode:
        """Run all document transforms in order."""
        for transform in self.document_transforms:
            document = transform.transform_document(document)
        return document

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
