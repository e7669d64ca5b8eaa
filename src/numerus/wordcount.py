# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import re
import typing
from collections import deque
from itertools import count as counter

import markdown_it

from .counttypes import CountType
from .rules import DEFAULT_RULES, RuleSet, resolve_rules

if typing.TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

# Avoid constructing a deque each time
consumeall = deque(maxlen=0).extend

markdown_renderer = markdown_it.MarkdownIt("commonmark")


# Markup becomes a line break rather than disappearing, so the text on either side stays separate.
def strip_tags(text: str, rules: RuleSet = DEFAULT_RULES) -> str:
    return rules.html.sub("\n", text)


def strip_html_comments(text: str, rules: RuleSet = DEFAULT_RULES) -> str:
    return rules.html_comment.sub("", text)


def strip_shortcodes(text: str, rules: RuleSet = DEFAULT_RULES) -> str:
    if rules.shortcodes_pattern is None:
        return text
    return rules.shortcodes_pattern.sub("\n", text)


def strip_spaces(text: str, rules: RuleSet = DEFAULT_RULES) -> str:
    return rules.space.sub(" ", text)


def strip_html_entities(text: str, rules: RuleSet = DEFAULT_RULES) -> str:
    return rules.html_entity.sub("", text)


def strip_connectors(text: str, rules: RuleSet = DEFAULT_RULES) -> str:
    return rules.connector.sub(" ", text)


def strip_removables(text: str, rules: RuleSet = DEFAULT_RULES) -> str:
    return rules.remove.sub("", text)


# Each entity, and each character outside the BMP, counts as exactly one character.
def transpose_html_entities(text: str, rules: RuleSet = DEFAULT_RULES) -> str:
    return rules.html_entity.sub("a", text)


def transpose_astrals(text: str, rules: RuleSet = DEFAULT_RULES) -> str:
    return rules.astral.sub("a", text)


def normalize(text: str, rules: RuleSet = DEFAULT_RULES, count_type: CountType = CountType.WORDS) -> str:
    # The words pattern counts a non-space followed by whitespace, so the final word needs something after it.
    text += "\n"
    text = strip_tags(text, rules)
    text = strip_html_comments(text, rules)
    text = strip_shortcodes(text, rules)
    text = strip_spaces(text, rules)
    if CountType.coerce(count_type).is_characters:
        text = transpose_html_entities(text, rules)
        text = transpose_astrals(text, rules)
    else:
        text = strip_html_entities(text, rules)
        text = strip_connectors(text, rules)
        text = strip_removables(text, rules)
    return text


# based on a solution from https://stackoverflow.com/a/34404546
def count_matches(pattern: re.Pattern, text: str) -> int:
    cnt = counter()
    consumeall(zip(pattern.finditer(text), cnt, strict=False))
    return next(cnt)


def count(
    text: typing.Optional[str],
    count_type: typing.Union[CountType, str] = CountType.WORDS,
    overrides: typing.Union[RuleSet, Mapping[str, typing.Any], None] = None,
    **kwargs,
) -> int:
    """Count the words or characters in a piece of rich text.

    The text may contain HTML, HTML comments, entities, and (when shortcode names are given) shortcodes; these are
    normalized away before counting. Any count_type other than the two character counts counts words.
    Rule overrides are merged over the defaults; see resolve_rules.
    """
    if not text:
        return 0
    count_type = CountType.coerce(count_type)
    rules = resolve_rules(overrides, **kwargs)
    normalized = normalize(text, rules, count_type)
    return count_matches(rules.pattern_for(count_type), normalized)


def count_markdown(
    markdown: typing.Optional[str],
    count_type: typing.Union[CountType, str] = CountType.WORDS,
    overrides: typing.Union[RuleSet, Mapping[str, typing.Any], None] = None,
    **kwargs,
) -> int:
    if not markdown:
        return 0
    return count(markdown_renderer.render(markdown), count_type, overrides, **kwargs)


def format_count(value: int, count_type: typing.Union[CountType, str] = CountType.WORDS):
    unit = "character" if CountType.coerce(count_type).is_characters else "word"
    return f"1 {unit}" if value == 1 else "{:,} {}s".format(value, unit)
