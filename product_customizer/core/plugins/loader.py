"""
Contributor discovery and loading utilities.
"""
from __future__ import annotations

from importlib.metadata import entry_points
from typing import Callable, Iterable
import logging

from product_customizer.core.hooks import HookManager

logger = logging.getLogger(__name__)


def load_contributors(
    hooks: HookManager,
    contributors: Iterable[Callable[[HookManager], None]],
) -> list[str]:
    """
    Let each contributor register its filters on the hook manager.

    A contributor is any callable taking the hook manager. A failing
    contributor is logged and skipped.

    Returns:
        Names of contributors that registered successfully
    """
    loaded = []

    for contributor in contributors:
        name = getattr(contributor, "__qualname__", repr(contributor))
        try:
            contributor(hooks)
            loaded.append(name)
            logger.debug(f"Loaded contributor: {name}")
        except Exception as e:
            logger.error(f"Error loading contributor {name}: {e}")

    return loaded


def load_from_entrypoints(
    hooks: HookManager,
    group: str,
) -> list[str]:
    """
    Load contributors from package entry points.

    This allows declarations to ship as separate packages.

    Example pyproject.toml in a contributor package:
    ```toml
    [project.entry-points."product_customizer.contributors"]
    bundles = "my_bundles.customizer:register"
    ```

    Args:
        hooks: Hook manager contributors register on
        group: Entry point group name
    """
    loaded = []

    for ep in entry_points(group=group):
        try:
            contributor = ep.load()
        except Exception as e:
            logger.error(f"Error loading contributor {ep.name}: {e}")
            continue

        if load_contributors(hooks, [contributor]):
            loaded.append(ep.name)
            logger.info(f"Loaded contributor from entrypoint: {ep.name}")

    return loaded
