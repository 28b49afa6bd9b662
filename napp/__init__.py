"""napp -- bootstraps Go, HTMX and SQLite web applications.

Quick usage::

    napp init my-app

or programmatically::

    from napp.project import ProjectRequest
    from napp.scaffolder import ProjectGenerator

    root = ProjectGenerator(ProjectRequest(name="my-app")).generate(".")
"""

__version__ = "1.4.0"
