from typing import Any, Dict, List, Tuple

from hypothesis import strategies as st

# Characters that never collide with the default delimiter, separator or quote
safe_text_strategy = st.text(
    alphabet=st.characters(
        categories=("Lu", "Ll", "Nd"),
        exclude_characters=["\t", ":", '"'],
    ),
    max_size=20,
)

# Keys are never empty so no key synthesis happens
key_strategy = safe_text_strategy.filter(lambda s: len(s) > 0)

pairs_strategy = st.lists(
    st.tuples(key_strategy, safe_text_strategy), min_size=1, max_size=10
)

# Values are never empty either, so a token never sits next to another token
non_empty_pairs_strategy = st.lists(
    st.tuples(key_strategy, key_strategy), min_size=1, max_size=10
)

# Multi-character tokens drawn from punctuation that safe text never contains
token_strategy = st.text(alphabet="|;=#&", min_size=1, max_size=3)


@st.composite
def delimited_content(
    draw, delimiter: str = "\t", separator: str = ":", allow_empty_values: bool = True
) -> Tuple[str, List[Tuple[str, str]]]:
    """Generate a ``key<separator>value<delimiter>...`` string and its pairs."""
    pairs = draw(pairs_strategy if allow_empty_values else non_empty_pairs_strategy)
    content = delimiter.join(f"{key}{separator}{value}" for key, value in pairs)
    return content, pairs


@st.composite
def distinct_tokens(draw) -> Tuple[str, str]:
    """Generate a delimiter/separator pair where neither contains the other."""
    delimiter = draw(token_strategy)
    separator = draw(
        token_strategy.filter(lambda s: s not in delimiter and delimiter not in s)
    )
    return delimiter, separator


@st.composite
def splitter_detail(draw) -> Dict[str, Any]:
    """Generate a pipeline ``detail`` section for the key/value splitter."""
    return {
        "SourceKey": draw(st.sampled_from(["", "content", "msg"])),
        "KeepSource": draw(st.booleans()),
        "DiscardWhenSeparatorNotFound": draw(st.booleans()),
        "ErrIfSourceKeyNotFound": draw(st.booleans()),
        "ErrIfSeparatorNotFound": draw(st.booleans()),
        "ErrIfKeyIsEmpty": draw(st.booleans()),
    }
