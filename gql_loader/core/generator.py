"""Module generator for assembled GraphQL documents.

Parses the assembled GraphQL string with graphql-core and renders a Jinja2
template into module source: the full document as the default export plus
one minimal document per named operation.

Supports custom templates via the template_dir parameter:
    generator = CodeGenerator(template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from graphql import DocumentNode, GraphQLSyntaxError, OperationDefinitionNode, parse
from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from .fragments import collect_all_fragment_definitions, fragments_for_operation
from .graph import generate_graphql_string
from .hooks import HookRunner
from .serializer import DocumentMapper, generate_document_node_string

logger = logging.getLogger(__name__)


@dataclass
class GeneratedModule:
    """Module text generated for one entry file."""
    contents: str
    operation_names: list[str] = field(default_factory=list)


class CodeGenerator:
    """Generates module source from an assembled GraphQL string.

    Available templates to override:
        - module.js.j2 — the generated module. Receives ``document_node``
          (serialized full document) and ``exports``, a list of objects
          with ``name`` and ``document_node``.

    Example:
        generator = CodeGenerator(map_document_node=AddTypenameTransform())
        source = generator.generate(graphql_string, filename="user.graphql")
    """

    TEMPLATE_NAME = "module.js.j2"

    def __init__(
        self,
        map_document_node: Optional[DocumentMapper] = None,
        template_dir: Optional[str] = None,
        hooks: Optional[HookRunner] = None,
    ):
        """Initialize the code generator.

        Args:
            map_document_node: Optional transform applied to every document
                               before it is serialized
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
            hooks: Optional hook runner whose post hooks run on the output
        """
        self.map_document_node = map_document_node
        self.template_dir = template_dir
        self.hooks = hooks

        # Build template loader - custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_loader", "templates"))

        # Output is JavaScript, never HTML
        self.env = Environment(loader=ChoiceLoader(loaders), autoescape=False)

    def parse(self, graphql_string: str, filename: str = "") -> DocumentNode:
        """Parse the assembled GraphQL string, logging syntax errors."""
        try:
            return parse(graphql_string)
        except GraphQLSyntaxError as e:
            logger.error("Error parsing GraphQL for %s: %s", filename or "<string>", e.message)
            raise

    def generate(self, graphql_string: str, filename: str = "") -> str:
        """Generate module source text for an assembled GraphQL string."""
        return self.generate_module(graphql_string, filename).contents

    def generate_module(self, graphql_string: str, filename: str = "") -> GeneratedModule:
        """Generate the module for an assembled GraphQL string.

        Args:
            graphql_string: Concatenated GraphQL source of an import graph
            filename: Entry file name, passed to post-generation hooks

        Returns:
            The generated module text and the names of its operation exports

        Raises:
            GraphQLSyntaxError: If graphql_string is not valid GraphQL
            MissingFragmentError: If an operation spreads an undefined fragment
        """
        document = self.parse(graphql_string, filename)
        document_node = generate_document_node_string(document, self.map_document_node)

        fragments = collect_all_fragment_definitions(document)
        exports = []
        for definition in document.definitions:
            if not isinstance(definition, OperationDefinitionNode):
                continue
            if not (definition.name and definition.name.value):
                continue
            operation_document = DocumentNode(
                definitions=(definition, *fragments_for_operation(definition, fragments))
            )
            exports.append({
                "name": definition.name.value,
                "document_node": generate_document_node_string(
                    operation_document, self.map_document_node
                ),
            })
        logger.debug("Generated %d operation export(s) for %s", len(exports), filename or "<string>")

        template = self.env.get_template(self.TEMPLATE_NAME)
        content = template.render(document_node=document_node, exports=exports)

        if self.hooks:
            content = self.hooks.run_post_hooks(filename, content)
        return GeneratedModule(
            contents=content,
            operation_names=[export["name"] for export in exports],
        )


def generate_contents_from_graphql_string(
    graphql_string: str,
    map_document_node: Optional[DocumentMapper] = None,
) -> str:
    """Generate module source for an assembled GraphQL string."""
    return CodeGenerator(map_document_node=map_document_node).generate(graphql_string)


async def build_graphql_module(
    entry_path: str,
    map_document_node: Optional[DocumentMapper] = None,
    template_dir: Optional[str] = None,
    hooks: Optional[HookRunner] = None,
) -> GeneratedModule:
    """Resolve an entry file's imports and generate its module."""
    graphql_string = await generate_graphql_string(entry_path)
    generator = CodeGenerator(
        map_document_node=map_document_node,
        template_dir=template_dir,
        hooks=hooks,
    )
    return generator.generate_module(graphql_string, filename=entry_path)


async def load_graphql_module(
    entry_path: str,
    map_document_node: Optional[DocumentMapper] = None,
    template_dir: Optional[str] = None,
    hooks: Optional[HookRunner] = None,
) -> str:
    """Resolve an entry file's imports and generate its module source."""
    module = await build_graphql_module(
        entry_path,
        map_document_node=map_document_node,
        template_dir=template_dir,
        hooks=hooks,
    )
    return module.contents
