"""Descriptor scaffolding -- data model assembly and template rendering.

Quick usage::

    from flashbuilder.scaffolder import DescriptorGenerator

    written = DescriptorGenerator(config).generate(session)
"""

from flashbuilder.scaffolder.generator import DESCRIPTOR_FILES, DescriptorGenerator
from flashbuilder.scaffolder.model_builder import DataModelBuilder
from flashbuilder.scaffolder.templates import Renderer, TemplateRenderer

__all__ = [
    "DESCRIPTOR_FILES",
    "DataModelBuilder",
    "DescriptorGenerator",
    "Renderer",
    "TemplateRenderer",
]
