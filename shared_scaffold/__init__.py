"""shared-scaffold -- generates react-shared component folders.

Each component gets an index wrapper, a web and a React Native render file,
snapshot tests, and optionally a redux container and Storybook files.

Quick usage::

    from pathlib import Path

    from shared_scaffold.config import Config
    from shared_scaffold.models import GenerationRequest
    from shared_scaffold.scaffolder import ComponentGenerator

    config = Config(root_dir=Path("/path/to/app"))
    request = GenerationRequest(
        component_names=["src/components/button"],
        base_path=config.root_dir,
    )
    result = await ComponentGenerator(config).run(request)
"""

__version__ = "0.1.0"
