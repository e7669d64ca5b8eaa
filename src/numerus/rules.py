# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""The table of regular expressions used to normalize and count text.

Every rule can be overridden independently; rules the caller does not mention keep their defaults.
"""
from __future__ import annotations

import collections.abc
import logging
import operator
import re
import typing

import msgspec

from .counttypes import CountType

logger = logging.getLogger(__name__)

Rule = typing.Union[str, re.Pattern]


class RuleSet(msgspec.Struct, frozen=True, kw_only=True):
    html: re.Pattern
    html_comment: re.Pattern
    space: re.Pattern
    html_entity: re.Pattern
    connector: re.Pattern
    remove: re.Pattern
    astral: re.Pattern
    words: re.Pattern
    chars_excluding_spaces: re.Pattern
    chars_including_spaces: re.Pattern
    shortcodes: tuple[str, ...] = ()
    # only ever derived from shortcodes
    shortcodes_pattern: typing.Optional[re.Pattern] = None

    def pattern_for(self, count_type: CountType) -> re.Pattern:
        return _PATTERN_FOR_TYPE[CountType.coerce(count_type)](self)

    def with_shortcodes(self, names: collections.abc.Iterable[str]) -> RuleSet:
        if isinstance(names, str):
            names = (names,)
        names = tuple(names)
        return msgspec.structs.replace(self, shortcodes=names, shortcodes_pattern=make_shortcodes_pattern(names))


_PATTERN_FOR_TYPE = {
    CountType.WORDS: operator.attrgetter("words"),
    CountType.CHARS_EXCLUDING_SPACES: operator.attrgetter("chars_excluding_spaces"),
    CountType.CHARS_INCLUDING_SPACES: operator.attrgetter("chars_including_spaces"),
}


DEFAULT_RULES = RuleSet(
    html=re.compile(r"</?[a-z][^>]*?>", re.IGNORECASE),
    html_comment=re.compile(r"<!--[\s\S]*?-->"),
    space=re.compile(r"&nbsp;|&#0*160;|&#x0*a0;", re.IGNORECASE),
    html_entity=re.compile(r"&\S+?;"),
    connector=re.compile(r"--|\u2014"),
    # ASCII punctuation and digits, Latin-1 symbols, general punctuation through misc symbols and arrows,
    # and supplemental punctuation
    remove=re.compile(r"[\u0021-\u0040\u005b-\u0060\u007b-\u007e\u0080-\u00bf\u00d7\u00f7\u2000-\u2bff\u2e00-\u2e7f]"),
    # str is already a sequence of code points; the surrogate pair branch covers text decoded with surrogatepass
    astral=re.compile(r"[\ud800-\udbff][\udc00-\udfff]|[\U00010000-\U0010ffff]"),
    words=re.compile(r"\S\s+"),
    chars_excluding_spaces=re.compile(r"\S"),
    chars_including_spaces=re.compile(r"[^\f\n\r\t\v\u00ad\u2028\u2029]"),
)

_FIELDS = (
    ("html", "html", "html_regexp"),
    ("html_comment", "htmlComment", "html_comment_regexp"),
    ("space", "space", "space_regexp"),
    ("html_entity", "htmlEntity", "html_entity_regexp"),
    ("connector", "connector", "connector_regexp"),
    ("remove", "remove", "remove_regexp"),
    ("astral", "astral", "astral_regexp"),
    ("words", "wordsPattern", "words_regexp"),
    ("chars_excluding_spaces", "charsExcludingSpacesPattern", "characters_excluding_spaces_regexp"),
    ("chars_including_spaces", "charsIncludingSpacesPattern", "characters_including_spaces_regexp"),
)

# field name, camelCase rule name, and WordPress settings name all address the same rule
RULE_NAMES: dict[str, str] = {alias: names[0] for names in _FIELDS for alias in names}
RULE_NAMES["words_pattern"] = "words"
RULE_NAMES["chars_excluding_spaces_pattern"] = "chars_excluding_spaces"
RULE_NAMES["chars_including_spaces_pattern"] = "chars_including_spaces"


def compile_rule(rule: Rule) -> re.Pattern:
    if isinstance(rule, re.Pattern):
        return rule
    return re.compile(rule)


def make_shortcodes_pattern(names: collections.abc.Sequence[str]) -> typing.Optional[re.Pattern]:
    """Build the pattern matching [name ...] and [/name] for any of the given shortcode names.

    Returns None when there are no names, so that no shortcode stripping takes place.
    """
    if not names:
        return None
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"Shortcode names must be strings, not {name!r}")
    alternation = "|".join(re.escape(name) for name in names)
    logger.debug("Stripping shortcodes: %s", alternation)
    return re.compile(r"\[/?(?:" + alternation + r")[^\]]*?\]")


def resolve_rules(overrides: typing.Union[RuleSet, collections.abc.Mapping[str, typing.Any], None] = None, **kwargs) -> RuleSet:
    """Merge rule overrides over the defaults.

    Overrides may be given as a mapping, as keyword arguments, or both (keywords win). Keys are rule names in any
    of the accepted spellings (see RULE_NAMES) plus "shortcodes"; values are pattern sources or compiled patterns.
    A RuleSet may also be given, in which case any further keyword overrides are merged over it instead.

    Unknown keys are ignored. Invalid pattern sources raise re.error.
    """
    if isinstance(overrides, RuleSet):
        base = overrides
        merged = dict(kwargs)
    else:
        base = DEFAULT_RULES
        merged = dict(overrides) if overrides is not None else {}
        merged.update(kwargs)
    if not merged:
        return base

    shortcodes = merged.pop("shortcodes", None)
    changes = {}
    for key, value in merged.items():
        field = RULE_NAMES.get(key)
        if field is None:
            logger.debug("Ignoring unknown rule %r", key)
            continue
        if value is None:
            continue
        changes[field] = compile_rule(value)

    rules = msgspec.structs.replace(base, **changes) if changes else base
    if shortcodes is not None:
        rules = rules.with_shortcodes(shortcodes)
    return rules
