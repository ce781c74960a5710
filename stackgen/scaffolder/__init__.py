"""stack-generator scaffolder -- writes the frontend, backend and docs of a stack.

Each generator owns one side of the project and receives a narrow options
record.  File content comes from Jinja2 templates under
``stackgen/scaffolder/templates/`` and from structured manifest builders;
package managers and scaffolding CLIs are reached through a ``CommandRunner``.

Quick usage::

    from stackgen.models import BackendOptions
    from stackgen.runner import CommandRunner
    from stackgen.scaffolder import BackendGenerator, TemplateRenderer

    generator = BackendGenerator(TemplateRenderer(), CommandRunner())
    await generator.generate("/tmp/app/backend", BackendOptions(typescript=True))
"""

from stackgen.scaffolder.backend_gen import BackendGenerator
from stackgen.scaffolder.docs_gen import DocumentationGenerator
from stackgen.scaffolder.frontend_gen import FrontendGenerator
from stackgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "BackendGenerator",
    "DocumentationGenerator",
    "FrontendGenerator",
    "TemplateRenderer",
]
