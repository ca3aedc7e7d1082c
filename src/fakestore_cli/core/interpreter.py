"""Positional argument interpreter.

Turns ``<verb> <resourcePath> [args...]`` into a :class:`Command`.  Verb
legality and path shape are left to the dispatcher.
"""

from __future__ import annotations

from collections.abc import Sequence

from fakestore_cli.core.models import Command, MissingArguments, Verb


def parse_arguments(raw_args: Sequence[str]) -> Command | MissingArguments:
    """Split *raw_args* into verb, resource path and trailing arguments.

    Returns :class:`MissingArguments` (rather than raising) when the verb
    or the path is missing or empty, so the caller can show usage help.
    """
    tokens = tuple(raw_args)
    if len(tokens) < 2 or not tokens[0] or not tokens[1]:
        return MissingArguments(provided=tokens)

    verb_token = tokens[0].upper()
    return Command(
        verb=Verb.parse(verb_token),
        verb_token=verb_token,
        resource_path=tokens[1],
        arguments=tokens[2:],
    )
