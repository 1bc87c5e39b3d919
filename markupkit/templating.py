"""Jinja2 environment with the node constructors available as globals."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from jinja2 import BaseLoader, Environment, FileSystemLoader, StrictUndefined, select_autoescape

from . import attrs, tags
from .nodes import fragment, raw, tag, text, void_tag


def template_globals() -> Dict[str, Any]:
    """Constructors exposed to templates, keyed by their public names."""
    names: Dict[str, Any] = {
        "tag": tag,
        "void_tag": void_tag,
        "fragment": fragment,
        "text": text,
        "raw": raw,
    }
    for module in (attrs, tags):
        for public in module.__all__:
            names.setdefault(public, getattr(module, public))
    return names


def jinja_env(
    template_dirs: Optional[Iterable[Path]] = None, loader: Optional[BaseLoader] = None
) -> Environment:
    """Create an autoescaping environment.

    Nodes returned by the globals implement ``__html__`` and are inserted
    without a second round of escaping; plain strings are escaped as usual.
    """
    if loader is None and template_dirs is not None:
        loader = FileSystemLoader([str(path) for path in template_dirs])
    env = Environment(
        loader=loader,
        autoescape=select_autoescape(["html", "jinja"], default_for_string=True),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.globals.update(template_globals())
    return env


__all__ = ["jinja_env", "template_globals"]
