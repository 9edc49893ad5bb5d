import pytest

from awswire.errors import UnmarshallingError
from awswire.protocol.tokens import JsonTokenCursor, Token, TokenKind


def _walk(cursor: JsonTokenCursor) -> list[tuple[TokenKind, str | None, int]]:
    seen = []
    while (token := cursor.next_token()) is not None:
        seen.append((token.kind, token.text, cursor.depth))
    return seen


def test_depth_counts_open_containers() -> None:
    cursor = JsonTokenCursor('{"a":{"b":1},"c":[true,null]}')
    assert _walk(cursor) == [
        (TokenKind.START_OBJECT, None, 1),
        (TokenKind.FIELD_NAME, "a", 1),
        (TokenKind.START_OBJECT, None, 2),
        (TokenKind.FIELD_NAME, "b", 2),
        (TokenKind.VALUE_NUMBER, "1", 2),
        (TokenKind.END_OBJECT, None, 1),
        (TokenKind.FIELD_NAME, "c", 1),
        (TokenKind.START_ARRAY, None, 2),
        (TokenKind.VALUE_TRUE, "true", 2),
        (TokenKind.VALUE_NULL, None, 2),
        (TokenKind.END_ARRAY, None, 1),
        (TokenKind.END_OBJECT, None, 0),
    ]
    assert cursor.current_token is None


def test_test_expression_matches_name_and_depth() -> None:
    cursor = JsonTokenCursor('{"log":{"log":"inner"}}')
    cursor.next_token()
    cursor.next_token()
    assert cursor.test_expression("log", 1)
    assert cursor.current_field == "log"

    cursor.next_token()
    cursor.next_token()
    assert not cursor.test_expression("log", 1)
    assert cursor.test_expression("log", 2)


def test_numbers_keep_their_source_text() -> None:
    cursor = JsonTokenCursor("[1.50, 12345678901234567890, -0]")
    texts = [text for kind, text, _ in _walk(cursor) if kind is TokenKind.VALUE_NUMBER]
    assert texts == ["1.50", "12345678901234567890", "-0"]


@pytest.mark.parametrize("document", ["{", '{"a":NaN}', b"\xff\xfe{"])
def test_malformed_documents_are_rejected(document: str | bytes) -> None:
    with pytest.raises(UnmarshallingError, match="Unable to parse JSON document"):
        JsonTokenCursor(document)


def test_unbalanced_token_stream_is_rejected() -> None:
    cursor = JsonTokenCursor([Token(TokenKind.END_OBJECT)])
    with pytest.raises(UnmarshallingError, match="Unbalanced"):
        cursor.next_token()
