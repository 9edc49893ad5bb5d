"""Pull-style event cursor over XML documents."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from xml.etree import ElementTree

from ..errors import UnmarshallingError


class XmlEventKind(str, Enum):
    START_DOCUMENT = "start_document"
    START_ELEMENT = "start_element"
    CHARACTERS = "characters"
    END_ELEMENT = "end_element"
    END_DOCUMENT = "end_document"


@dataclass(frozen=True)
class XmlEvent:
    """One event of an XML document."""

    kind: XmlEventKind
    name: str | None = None
    text: str | None = None


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on tags."""
    return tag.rsplit("}", 1)[-1]


def xml_events(document: str | bytes | bytearray) -> Iterator[XmlEvent]:
    parser = ElementTree.XMLPullParser(events=("start", "end"))
    try:
        parser.feed(document)
        parser.close()
        # feed() queues syntax errors; they surface while reading events.
        parsed = list(parser.read_events())
    except ElementTree.ParseError as exc:
        raise UnmarshallingError(f"Unable to parse XML document: {exc}") from exc

    def _generate() -> Iterator[XmlEvent]:
        yield XmlEvent(XmlEventKind.START_DOCUMENT)
        for event, element in parsed:
            name = local_name(element.tag)
            if event == "start":
                yield XmlEvent(XmlEventKind.START_ELEMENT, name)
                continue
            # Character data is only meaningful on leaf elements.
            if len(element) == 0 and element.text:
                yield XmlEvent(XmlEventKind.CHARACTERS, text=element.text)
            yield XmlEvent(XmlEventKind.END_ELEMENT, name)
        yield XmlEvent(XmlEventKind.END_DOCUMENT)

    return _generate()


class StaxCursor:
    """Cursor over the events of one XML document.

    ``depth`` counts the elements that are open after the current event, so
    the children of the document element sit at depth 2.
    """

    def __init__(self, source: str | bytes | bytearray | Iterable[XmlEvent]) -> None:
        if isinstance(source, (str, bytes, bytearray)):
            self._events: Iterator[XmlEvent] = xml_events(source)
        else:
            self._events = iter(source)
        self._current: XmlEvent | None = None
        self._depth = 0

    @property
    def current_event(self) -> XmlEvent | None:
        return self._current

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def is_start_of_document(self) -> bool:
        return self._current is None or self._current.kind is XmlEventKind.START_DOCUMENT

    def next_event(self) -> XmlEvent:
        """Advance to the next event.

        Raises:
            UnmarshallingError: If the stream ends before END_DOCUMENT
        """
        event = next(self._events, None)
        if event is None:
            raise UnmarshallingError("Unexpected end of XML stream")
        if event.kind is XmlEventKind.START_ELEMENT:
            self._depth += 1
        elif event.kind is XmlEventKind.END_ELEMENT:
            self._depth -= 1
        self._current = event
        return event

    def test_expression(self, name: str, depth: int) -> bool:
        """Whether the current event starts element ``name`` at ``depth``."""
        event = self._current
        return (
            event is not None
            and event.kind is XmlEventKind.START_ELEMENT
            and event.name == name
            and self._depth == depth
        )

    def read_text(self) -> str:
        """Read the character data of the current element up to its end tag."""
        event = self._current
        if event is None or event.kind is not XmlEventKind.START_ELEMENT:
            raise UnmarshallingError("read_text() requires the cursor on a start element")
        chunks: list[str] = []
        while True:
            event = self.next_event()
            if event.kind is XmlEventKind.CHARACTERS:
                chunks.append(event.text or "")
            elif event.kind is XmlEventKind.END_ELEMENT:
                return "".join(chunks)
            else:
                raise UnmarshallingError(
                    f"Expected text content but found {event.kind.value} {event.name or ''}".rstrip()
                )
