"""Matching of free-text descriptions against booking template matchers."""

import logging
import re
from typing import Iterable

from bookit.domain.amount import is_blank
from bookit.domain.entities import BookingTemplate, MatchResult
from bookit.domain.errors import InvalidMatcherError, invalid_matcher

logger = logging.getLogger(__name__)


def compile_matcher(template: BookingTemplate) -> re.Pattern:
    """Compile a template's matcher pattern.

    Raises:
        InvalidMatcherError: If the matcher is missing or not a valid regex
    """
    if is_blank(template.matcher):
        raise InvalidMatcherError(invalid_matcher(template.code, "no matcher set"), template)
    try:
        return re.compile(template.matcher)
    except re.error as e:
        raise InvalidMatcherError(invalid_matcher(template.code, str(e)), template)


def match_templates(text: str, templates: Iterable[BookingTemplate]) -> MatchResult:
    """Return the templates whose matcher is found in ``text``.

    A template with an unusable matcher is recorded in ``errors`` and does
    not stop the remaining templates from being matched.
    """
    result = MatchResult(text=text)
    for template in templates:
        logger.debug("matcher: %s", template.matcher)
        logger.debug("text: %s", text)
        try:
            pattern = compile_matcher(template)
        except InvalidMatcherError as e:
            logger.debug("Skipping template %s: %s", template.code, e)
            result.errors.append(e)
            continue
        if pattern.search(text) is not None:
            result.matched.append(template)

    logger.debug("Matched %d template(s) for %r", len(result.matched), text)
    return result
