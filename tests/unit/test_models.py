from logtail_sdk.models import LogContent, LogRecord


def test_from_pairs_preserves_order_and_duplicates():
    record = LogRecord.from_pairs([("b", "1"), ("a", "2"), ("b", "3")], time=42)

    assert record.pairs() == [("b", "1"), ("a", "2"), ("b", "3")]
    assert record.time == 42


def test_get_returns_first_match():
    record = LogRecord.from_pairs([("b", "1"), ("b", "3")])

    assert record.get("b") == "1"
    assert record.get("missing") is None
    assert record.get("missing", "fallback") == "fallback"


def test_append():
    record = LogRecord()
    record.append("k", "v")

    assert record.contents == [LogContent(key="k", value="v")]
    assert record.time is None
