"""Container selection by substring filter or interactive fuzzy picker."""

import logging
from typing import Callable, List, Optional, Sequence

import click
import questionary

from ..models.container import ContainerInfo
from ..services.exceptions import (
    AmbiguousMatchError,
    NoMatchError,
    SelectionCancelledError,
)
from .constants import PICKER_PROMPT

logger = logging.getLogger(__name__)

Picker = Callable[[Sequence[ContainerInfo], Callable[[ContainerInfo], str], str], Optional[int]]


def fuzzy_pick(items: Sequence[ContainerInfo], label: Callable[[ContainerInfo], str],
               prompt: str = PICKER_PROMPT) -> Optional[int]:
    """Let the operator search and pick one item.

    Typing narrows the list to labels containing the typed text, ignoring
    case. Matching is by substring, not by subsequence.

    Returns:
        Index of the chosen item, or None when the prompt was cancelled
    """
    choices = [questionary.Choice(title=label(item), value=index) for index, item in enumerate(items)]
    return questionary.select(
        prompt,
        choices=choices,
        use_search_filter=True,
        use_jk_keys=False,
    ).ask()


def filter_containers(containers: Sequence[ContainerInfo], container_filter: str) -> ContainerInfo:
    """Auto-select the single container whose name or image contains the filter.

    Raises:
        NoMatchError: If nothing matches
        AmbiguousMatchError: If more than one container matches; the
            candidates are listed on stderr first
    """
    matches: List[ContainerInfo] = [c for c in containers if c.matches(container_filter)]

    if not matches:
        raise NoMatchError(container_filter)

    if len(matches) > 1:
        click.echo(f"Multiple containers match filter '{container_filter}':", err=True)
        for container in matches:
            click.echo(f"  - {container.label}", err=True)
        raise AmbiguousMatchError(container_filter, matches)

    selected = matches[0]
    click.echo(f"Auto-selected container: {selected.name}")
    return selected


def pick_container(containers: Sequence[ContainerInfo], picker: Optional[Picker] = None) -> ContainerInfo:
    """Ask the operator to pick a container by name.

    Raises:
        SelectionCancelledError: If the picker is cancelled or fails for any reason
    """
    picker = picker or fuzzy_pick
    try:
        index = picker(containers, lambda c: c.name, PICKER_PROMPT)
    except (Exception, KeyboardInterrupt) as e:
        logger.debug("Picker failed: %r", e)
        raise SelectionCancelledError() from e

    if index is None:
        raise SelectionCancelledError()
    return containers[index]


def select_container(containers: Sequence[ContainerInfo], container_filter: Optional[str] = None,
                     picker: Optional[Picker] = None) -> ContainerInfo:
    """Select one container, by filter when one is given, otherwise interactively."""
    if container_filter:
        selected = filter_containers(containers, container_filter)
    else:
        selected = pick_container(containers, picker)

    logger.debug("Selected container %s (%s)", selected.name, selected.id)
    return selected
