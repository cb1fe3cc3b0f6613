"""Extract context parameters from Java web deployment descriptors."""

from pathlib import Path
from typing import Optional, Union

from lxml import etree

from webxml_params.config.models import ParserConfig
from webxml_params.extraction.reader import (
    Source,
    describe_source,
    parse_content,
    parse_document,
    read_source_async,
)
from webxml_params.models.params import ContextParam, ExtractionResult, MalformedBlock
from webxml_params.utils.logging import get_logger

logger = get_logger("extraction")

CONTEXT_PARAM_TAG = "context-param"
PARAM_NAME_TAG = "param-name"
PARAM_VALUE_TAG = "param-value"

Tree = Union[etree._Element, etree._ElementTree]


def local_name(element: etree._Element) -> str:
    """Tag name without its namespace."""
    return etree.QName(element).localname


def element_children(element: etree._Element) -> list[etree._Element]:
    """Element children in document order, skipping comments and PIs."""
    return [child for child in element if isinstance(child.tag, str)]


def text_content(element: etree._Element) -> str:
    """All descendant text of an element, untrimmed."""
    return str(element.xpath("string()"))


class ContextParamExtractor:
    """Collects context-param name/value pairs from a deployment descriptor.

    The descriptor is not validated against its schema. Every context-param
    element below the root is considered, wherever it sits. Blocks that do
    not hold exactly one param-name and one param-value element are skipped
    and reported on the result.
    """

    def __init__(self, parser_config: Optional[ParserConfig] = None):
        """Initialize the extractor.

        Args:
            parser_config: lxml parser settings (defaults when omitted).
        """
        self._parser_config = parser_config or ParserConfig()

    def extract(self, source: Source) -> ExtractionResult:
        """Read, parse and extract from a source.

        Args:
            source: Path, bytes, or open file object.

        Returns:
            ExtractionResult for the document.

        Raises:
            SourceUnavailableError: If the source cannot be read.
            ParseError: If the source is not well-formed XML.
        """
        root = parse_document(source, self._parser_config)
        return self.extract_from_tree(root, source=describe_source(source))

    def extract_from_string(self, text: str, source: str = "<string>") -> ExtractionResult:
        """Parse XML text and extract from it.

        Raises:
            ParseError: If the text is not well-formed XML.
        """
        root = parse_content(text, source, self._parser_config)
        return self.extract_from_tree(root, source=source)

    async def extract_file_async(self, path: Path) -> ExtractionResult:
        """Read a descriptor file asynchronously and extract from it.

        Raises:
            SourceUnavailableError: If the file cannot be read.
            ParseError: If the file is not well-formed XML.
        """
        content = await read_source_async(path)
        root = parse_content(content, str(path), self._parser_config)
        return self.extract_from_tree(root, source=str(path))

    def extract_from_tree(self, tree: Tree, source: Optional[str] = None) -> ExtractionResult:
        """Extract context parameters from an already parsed document.

        The tree is only read, never modified.

        Args:
            tree: Root element or element tree.
            source: Optional label recorded on the result.

        Returns:
            ExtractionResult with the parameters found.
        """
        root = tree.getroot() if isinstance(tree, etree._ElementTree) else tree
        label = source or "<tree>"

        params: dict[str, str] = {}
        entries: list[ContextParam] = []
        malformed: list[MalformedBlock] = []

        blocks = root.iterdescendants(f"{{*}}{CONTEXT_PARAM_TAG}")
        for position, block in enumerate(blocks, start=1):
            children = element_children(block)
            pair = self._identify_pair(children)

            if isinstance(pair, str):
                skipped = MalformedBlock(
                    position=position,
                    line=block.sourceline,
                    child_tags=[local_name(child) for child in children],
                    reason=pair,
                )
                logger.warning(f"Skipping malformed {skipped.describe()} in {label}")
                malformed.append(skipped)
                continue

            name_element, value_element = pair
            entry = ContextParam(
                name=text_content(name_element),
                value=text_content(value_element),
                line=block.sourceline,
            )
            if entry.name in params:
                logger.debug(f"Context parameter '{entry.name}' redefined at line {entry.line}")
            params[entry.name] = entry.value
            entries.append(entry)

        logger.info(
            f"Found {len(params)} context parameters in {label}"
            + (f" ({len(malformed)} malformed blocks skipped)" if malformed else "")
        )

        return ExtractionResult(
            source=source,
            params=params,
            entries=entries,
            malformed=malformed,
        )

    def _identify_pair(
        self,
        children: list[etree._Element],
    ) -> tuple[etree._Element, etree._Element] | str:
        """Match the two children of a block to param-name and param-value.

        Args:
            children: Element children of a context-param block.

        Returns:
            (name_element, value_element), or the reason the block is malformed.
        """
        if len(children) != 2:
            return f"expected 2 child elements, found {len(children)}"

        first, second = children
        tags = (local_name(first), local_name(second))

        if tags == (PARAM_NAME_TAG, PARAM_VALUE_TAG):
            return first, second
        if tags == (PARAM_VALUE_TAG, PARAM_NAME_TAG):
            return second, first

        if PARAM_NAME_TAG not in tags:
            return f"no {PARAM_NAME_TAG} element (found {', '.join(tags)})"
        return f"no {PARAM_VALUE_TAG} element (found {', '.join(tags)})"


def extract_context_params(
    source: Source,
    parser_config: Optional[ParserConfig] = None,
) -> ExtractionResult:
    """Extract context parameters from a deployment descriptor source.

    Args:
        source: Path, bytes, or open file object.
        parser_config: lxml parser settings.

    Returns:
        ExtractionResult mapping names to values, with the malformed flag.
    """
    return ContextParamExtractor(parser_config).extract(source)
