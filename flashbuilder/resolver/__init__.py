"""Dependency and source resolution for descriptor generation.

Usage::

    from flashbuilder.resolver import DependencyResolver, ModuleMatcher

    matcher = ModuleMatcher(session.session_modules)
    paths = DependencyResolver(matcher, config).resolve(session.artifacts)
"""

from flashbuilder.resolver.dependencies import DependencyResolver
from flashbuilder.resolver.matcher import ModuleMatcher
from flashbuilder.resolver.sources import collect_sources, detect_main_application

__all__ = [
    "DependencyResolver",
    "ModuleMatcher",
    "collect_sources",
    "detect_main_application",
]
