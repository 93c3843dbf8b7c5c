from gateway.core.shaping import extract_reasoning


def test_splits_think_and_answer():
    result = extract_reasoning("<think> step one </think>  final answer ")
    assert result.reasoning == "step one"
    assert result.answer == "final answer"


def test_reasoning_may_span_lines():
    raw = "<think>\nfirst\nsecond\n</think>\n\nthe answer\nwith two lines\n"
    result = extract_reasoning(raw)
    assert result.reasoning == "first\nsecond"
    assert result.answer == "the answer\nwith two lines"


def test_reasoning_match_is_non_greedy():
    result = extract_reasoning("<think>a</think>b</think>c")
    assert result.reasoning == "a"
    assert result.answer == "b</think>c"


def test_empty_answer_still_matches():
    result = extract_reasoning("<think>only thinking</think>")
    assert result.reasoning == "only thinking"
    assert result.answer == ""


def test_missing_tags_is_not_matched():
    assert extract_reasoning("just an answer") is None


def test_unclosed_tag_is_not_matched():
    assert extract_reasoning("<think>never closed") is None


def test_empty_text_is_not_matched():
    assert extract_reasoning("") is None
