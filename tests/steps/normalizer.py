"""pytest-bdd steps exercising the separator normalizer."""

from __future__ import annotations

import dataclasses as dc

from pytest_bdd import given, parsers, then, when

from slash_formatter.buffer import PathBuffer
from slash_formatter.normalizer import SeparatorNormalizer
from slash_formatter.platform import BACKSLASH, SLASH

_SEPARATORS: dict[str, str] = {"slash": SLASH, "backslash": BACKSLASH}


@dc.dataclass(slots=True)
class Outcome:
    """Text handed to an operation and the text it returned."""

    argument: str
    result: str


def _localise(text: str, normalizer: SeparatorNormalizer) -> str:
    """Rewrite ``/`` in feature text to the normalizer's separator."""
    return text.replace("/", normalizer.separator)


@given(
    parsers.cfparse("a normalizer using the {name} separator"),
    target_fixture="normalizer",
)
def create_normalizer(name: str) -> SeparatorNormalizer:
    """Create a normalizer for the named separator."""
    return SeparatorNormalizer(_SEPARATORS[name])


@given(parsers.cfparse('a path buffer holding "{text}"'), target_fixture="buffer")
def create_buffer(normalizer: SeparatorNormalizer, text: str) -> PathBuffer:
    """Create a mutable path buffer."""
    return PathBuffer(_localise(text, normalizer))


@when(
    parsers.cfparse('I concat "{left}" and "{right}"'), target_fixture="outcome"
)
def concat_fragments(
    normalizer: SeparatorNormalizer, left: str, right: str
) -> Outcome:
    """Join two fragments."""
    left = _localise(left, normalizer)
    return Outcome(left, normalizer.concat(left, _localise(right, normalizer)))


@when(
    parsers.cfparse('I join "{first}", "{second}" and "{third}"'),
    target_fixture="outcome",
)
def join_fragments(
    normalizer: SeparatorNormalizer, first: str, second: str, third: str
) -> Outcome:
    """Join three fragments."""
    first, second, third = (
        _localise(text, normalizer) for text in (first, second, third)
    )
    return Outcome(first, normalizer.join(first, second, third))


@when(
    parsers.cfparse('I delete the end separator from "{text}"'),
    target_fixture="outcome",
)
def delete_end(normalizer: SeparatorNormalizer, text: str) -> Outcome:
    """Trim a trailing separator."""
    text = _localise(text, normalizer)
    return Outcome(text, normalizer.delete_end(text))


@when(
    parsers.cfparse('I delete the start separator from "{text}"'),
    target_fixture="outcome",
)
def delete_start(normalizer: SeparatorNormalizer, text: str) -> Outcome:
    """Trim a leading separator."""
    text = _localise(text, normalizer)
    return Outcome(text, normalizer.delete_start(text))


@when(
    parsers.cfparse('I add an end separator to "{text}"'), target_fixture="outcome"
)
def add_end(normalizer: SeparatorNormalizer, text: str) -> Outcome:
    """Ensure a trailing separator."""
    text = _localise(text, normalizer)
    return Outcome(text, normalizer.add_end(text))


@when(parsers.cfparse('I append "{text}" in place'))
def append_in_place(
    normalizer: SeparatorNormalizer, buffer: PathBuffer, text: str
) -> None:
    """Concatenate onto the buffer."""
    normalizer.concat_in_place(buffer, _localise(text, normalizer))


@when("I add a start separator in place")
def add_start_in_place(normalizer: SeparatorNormalizer, buffer: PathBuffer) -> None:
    """Ensure the buffer starts with a separator."""
    normalizer.add_start_in_place(buffer)


@when(
    parsers.cfparse(
        'I concat the literals "{first}", {number:d}, "{char}" and true '
        'with prefix "{prefix}"'
    ),
    target_fixture="outcome",
)
def concat_literals(
    normalizer: SeparatorNormalizer, first: str, number: int, char: str, prefix: str
) -> Outcome:
    """Join literal values."""
    result = normalizer.concat_literals(first, number, char, True, prefix=prefix)
    return Outcome(first, result)


@then(parsers.cfparse('the result is "{expected}"'))
def check_result(
    normalizer: SeparatorNormalizer, outcome: Outcome, expected: str
) -> None:
    """Compare the last result with the expected text."""
    assert outcome.result == _localise(expected, normalizer)


@then("the result is the original text")
def check_identity(outcome: Outcome) -> None:
    """The operation handed back the object it was given."""
    assert outcome.result is outcome.argument


@then(parsers.cfparse('the buffer holds "{expected}"'))
def check_buffer(
    normalizer: SeparatorNormalizer, buffer: PathBuffer, expected: str
) -> None:
    """Compare the buffer contents with the expected text."""
    assert buffer == _localise(expected, normalizer)
